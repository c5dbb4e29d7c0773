from __future__ import annotations

from enum import Enum
from typing import Literal

from pydantic import BaseModel, Field


class ComponentType(str, Enum):
    header = "header"
    navbar = "navbar"
    navigation = "navigation"
    sidebar = "sidebar"
    footer = "footer"
    breadcrumb = "breadcrumb"
    tabs = "tabs"
    hero = "hero"
    heading = "heading"
    text = "text"
    image = "image"
    video = "video"
    carousel = "carousel"
    button = "button"
    form = "form"
    search = "search"
    input = "input"
    textarea = "textarea"
    table = "table"
    chart = "chart"
    card = "card"
    stats = "stats"
    product_card = "product-card"
    shopping_cart = "shopping-cart"
    checkout = "checkout"
    filter = "filter"
    price = "price"
    calendar = "calendar"
    container = "container"
    section = "section"


AnchorPosition = Literal["top", "bottom", "left", "right", "center", "main"]


class ComponentMention(BaseModel):
    component_type: ComponentType
    content: str
    anchor_position: AnchorPosition
    importance: int
    context_words: tuple[str, ...] = Field(default_factory=tuple)

    class Config:
        frozen = True


__all__ = ["AnchorPosition", "ComponentMention", "ComponentType"]
