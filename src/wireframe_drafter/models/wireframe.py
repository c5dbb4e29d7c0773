from __future__ import annotations

from enum import Enum
from typing import Any, Mapping, Sequence

from pydantic import BaseModel, Field

from .mention import ComponentType


class PageLayoutCategory(str, Enum):
    standard = "standard"
    dashboard = "dashboard"
    ecommerce = "ecommerce"
    blog = "blog"
    form = "form"


class Complexity(str, Enum):
    simple = "simple"
    medium = "medium"
    complex = "complex"


class Box(BaseModel):
    """Bounding box in percent of the canvas. Values are not clamped to 0-100."""

    x: float
    y: float
    width: float
    height: float

    class Config:
        frozen = True


class ComponentStyle(BaseModel):
    """Typed style record serialized with CSS-in-JS property names.

    Properties outside the declared fields are kept as extras so styles coming
    from an upstream model survive a round trip.
    """

    background_color: str | None = Field(default=None, alias="backgroundColor")
    color: str | None = None
    border: str | None = None
    border_bottom: str | None = Field(default=None, alias="borderBottom")
    border_right: str | None = Field(default=None, alias="borderRight")
    border_radius: str | None = Field(default=None, alias="borderRadius")
    padding: str | None = None
    font_size: str | None = Field(default=None, alias="fontSize")
    font_weight: str | None = Field(default=None, alias="fontWeight")
    text_align: str | None = Field(default=None, alias="textAlign")
    display: str | None = None
    align_items: str | None = Field(default=None, alias="alignItems")
    justify_content: str | None = Field(default=None, alias="justifyContent")
    box_shadow: str | None = Field(default=None, alias="boxShadow")
    cursor: str | None = None

    class Config:
        frozen = True
        populate_by_name = True
        extra = "allow"

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)


class WireframeComponent(BaseModel):
    id: str
    type: ComponentType
    box: Box
    content: str
    style: ComponentStyle = Field(default_factory=ComponentStyle)

    class Config:
        frozen = True

    def to_payload(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "type": self.type.value,
            **self.box.model_dump(),
            "content": self.content,
            "style": self.style.to_payload(),
        }

    @classmethod
    def from_payload(cls, data: Mapping[str, Any]) -> "WireframeComponent":
        """Build a component from the flat ``{id, type, x, y, ...}`` shape."""
        return cls.model_validate(
            {
                "id": data.get("id"),
                "type": data.get("type"),
                "box": {key: data.get(key) for key in ("x", "y", "width", "height")},
                "content": data.get("content") or f"{data.get('type')} content",
                "style": data.get("style") or {},
            }
        )


class ParsedWireframe(BaseModel):
    title: str
    description: str
    components: Sequence[WireframeComponent]
    layout: PageLayoutCategory
    complexity: Complexity

    class Config:
        frozen = True

    def to_payload(self) -> dict[str, Any]:
        return {
            "title": self.title,
            "description": self.description,
            "components": [component.to_payload() for component in self.components],
            "layout": self.layout.value,
            "complexity": self.complexity.value,
        }


__all__ = [
    "Box",
    "Complexity",
    "ComponentStyle",
    "PageLayoutCategory",
    "ParsedWireframe",
    "WireframeComponent",
]
