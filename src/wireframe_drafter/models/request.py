from __future__ import annotations

from typing import Any, Literal, Sequence

from pydantic import BaseModel, Field

from .wireframe import Complexity, PageLayoutCategory, WireframeComponent

Device = Literal["desktop", "tablet", "mobile"]


class DeviceDimensions(BaseModel):
    width: int
    height: int

    class Config:
        frozen = True


class WireframeRequest(BaseModel):
    description: str
    page_type: Literal["landing", "dashboard", "ecommerce", "blog", "form", "app", "other"] = Field(
        default="other", alias="pageType"
    )
    device: Device = "desktop"
    complexity: Complexity = Complexity.medium

    class Config:
        populate_by_name = True
        json_schema_extra = {
            "example": {
                "description": "Admin dashboard with sidebar navigation, charts, and a data table",
                "pageType": "dashboard",
                "device": "desktop",
                "complexity": "medium",
            }
        }


class WireframeRecord(BaseModel):
    id: str
    title: str
    description: str
    components: Sequence[WireframeComponent]
    layout: PageLayoutCategory
    complexity: Complexity
    device: Device
    dimensions: DeviceDimensions
    source: str
    processing_time_ms: int = 0

    def to_payload(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "components": [component.to_payload() for component in self.components],
            "layout": self.layout.value,
            "complexity": self.complexity.value,
            "device": self.device,
            "dimensions": self.dimensions.model_dump(),
            "source": self.source,
            "processingTime": self.processing_time_ms,
        }


__all__ = ["Device", "DeviceDimensions", "WireframeRecord", "WireframeRequest"]
