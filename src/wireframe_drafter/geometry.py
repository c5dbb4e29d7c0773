from __future__ import annotations

import time
import uuid
from typing import Callable, Iterable, Mapping

from .dictionaries import (
    BASE_GEOMETRY,
    CURSOR_GAP,
    DASHBOARD_MAX_WIDTH,
    DASHBOARD_RAIL_X,
    DEFAULT_DISPLAY_PRIORITY,
    DEFAULT_DISPLAY_PRIORITY_TABLE,
    DEFAULT_GEOMETRY,
    DEFAULT_STYLES,
    FALLBACK_GEOMETRY,
    FALLBACK_STYLE,
    HERO_TOP_Y,
    PRODUCT_CARD_SIDEBAR_X,
    GeometryRule,
    StyleRule,
)
from .models.mention import ComponentMention, ComponentType
from .models.wireframe import Box, ComponentStyle, PageLayoutCategory, WireframeComponent

_BOX_FIELDS = ("x", "y", "width", "height")


def sort_by_display_priority(
    mentions: Iterable[ComponentMention],
    priorities: Mapping[ComponentType, int] = DEFAULT_DISPLAY_PRIORITY_TABLE,
) -> list[ComponentMention]:
    return sorted(
        mentions,
        key=lambda mention: priorities.get(mention.component_type, DEFAULT_DISPLAY_PRIORITY),
    )


def default_box_from_cursor(
    component_type: ComponentType,
    cursor_y: float,
    geometry: Mapping[ComponentType, GeometryRule] = DEFAULT_GEOMETRY,
) -> Box:
    start = BASE_GEOMETRY if component_type in geometry else FALLBACK_GEOMETRY
    return Box(x=start.x, y=cursor_y, width=start.width, height=start.height)


def override_box_for_type(
    mention: ComponentMention,
    category: PageLayoutCategory,
    box: Box,
    geometry: Mapping[ComponentType, GeometryRule] = DEFAULT_GEOMETRY,
) -> Box:
    """Apply the fixed geometry of ``mention``'s type on top of the cursor box."""
    rule = geometry.get(mention.component_type)
    if rule is None:
        return box
    rule = rule.for_layout(category)
    updates = {name: float(value) for name in _BOX_FIELDS if (value := getattr(rule, name)) is not None}

    if mention.component_type == ComponentType.hero and mention.anchor_position == "top":
        updates["y"] = float(HERO_TOP_Y)
    if (
        mention.component_type == ComponentType.product_card
        and category == PageLayoutCategory.ecommerce
        and any("sidebar" in word for word in mention.context_words)
    ):
        updates["x"] = float(PRODUCT_CARD_SIDEBAR_X)

    return box.model_copy(update=updates)


def reserve_dashboard_rail(component_type: ComponentType, category: PageLayoutCategory, box: Box) -> Box:
    if category != PageLayoutCategory.dashboard:
        return box
    if component_type in (ComponentType.sidebar, ComponentType.header):
        return box
    return box.model_copy(
        update={
            "x": float(max(box.x, DASHBOARD_RAIL_X)),
            "width": float(min(box.width, DASHBOARD_MAX_WIDTH)),
        }
    )


def style_for_type(
    component_type: ComponentType,
    category: PageLayoutCategory,
    styles: Mapping[ComponentType, StyleRule] = DEFAULT_STYLES,
) -> ComponentStyle:
    rule = styles.get(component_type, FALLBACK_STYLE)
    return ComponentStyle(**rule.resolve(category))


def generate_component_id(component_type: ComponentType) -> str:
    millis = int(time.time() * 1000)
    suffix = uuid.uuid4().hex[:9]
    return f"{component_type.value}_{millis}_{suffix}"


class GeometryAssigner:
    """Turns classified mentions into positioned, styled wireframe components.

    Components are laid out top to bottom with a running cursor. The cursor
    advances by every component's final height plus a fixed gap, including
    components whose type pins them elsewhere (header, sidebar, footer).
    """

    def __init__(
        self,
        *,
        priorities: Mapping[ComponentType, int] = DEFAULT_DISPLAY_PRIORITY_TABLE,
        geometry: Mapping[ComponentType, GeometryRule] = DEFAULT_GEOMETRY,
        styles: Mapping[ComponentType, StyleRule] = DEFAULT_STYLES,
        id_factory: Callable[[ComponentType], str] = generate_component_id,
    ) -> None:
        self._priorities = priorities
        self._geometry = geometry
        self._styles = styles
        self._id_factory = id_factory

    def build(
        self, mentions: Iterable[ComponentMention], category: PageLayoutCategory
    ) -> list[WireframeComponent]:
        components: list[WireframeComponent] = []
        cursor_y: float = 0
        for mention in sort_by_display_priority(mentions, self._priorities):
            box = default_box_from_cursor(mention.component_type, cursor_y, self._geometry)
            box = override_box_for_type(mention, category, box, self._geometry)
            box = reserve_dashboard_rail(mention.component_type, category, box)
            components.append(
                WireframeComponent(
                    id=self._id_factory(mention.component_type),
                    type=mention.component_type,
                    box=box,
                    content=mention.content or f"{mention.component_type.value} content",
                    style=style_for_type(mention.component_type, category, self._styles),
                )
            )
            cursor_y += box.height + CURSOR_GAP
        return components


def build_components(
    mentions: Iterable[ComponentMention], category: PageLayoutCategory
) -> list[WireframeComponent]:
    return GeometryAssigner().build(mentions, category)


__all__ = [
    "GeometryAssigner",
    "build_components",
    "default_box_from_cursor",
    "generate_component_id",
    "override_box_for_type",
    "reserve_dashboard_rail",
    "sort_by_display_priority",
    "style_for_type",
]
