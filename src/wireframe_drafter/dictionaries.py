from __future__ import annotations

from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Mapping, Sequence

from .models.mention import AnchorPosition, ComponentType
from .models.request import DeviceDimensions
from .models.wireframe import PageLayoutCategory

CONTEXT_WINDOW = 30
CURSOR_GAP = 2
DEFAULT_DISPLAY_PRIORITY = 50
DASHBOARD_RAIL_X = 25
DASHBOARD_MAX_WIDTH = 70


@dataclass(frozen=True)
class PatternGroup:
    keywords: Sequence[str]
    component_type: ComponentType
    anchor_position: AnchorPosition
    importance: int


@dataclass(frozen=True)
class ContentRule:
    triggers: Sequence[str]
    label: str

    def matches(self, context_text: str) -> bool:
        return any(trigger in context_text for trigger in self.triggers)


def _frozen(mapping: Mapping) -> Mapping:
    return MappingProxyType(dict(mapping))


@dataclass(frozen=True)
class GeometryRule:
    """Fixed box fields for a component type; ``None`` keeps the cursor default."""

    x: float | None = None
    y: float | None = None
    width: float | None = None
    height: float | None = None
    layouts: Mapping[PageLayoutCategory, "GeometryRule"] = field(
        default_factory=lambda: MappingProxyType({})
    )

    def for_layout(self, category: PageLayoutCategory) -> "GeometryRule":
        override = self.layouts.get(category)
        if override is None:
            return self
        return replace(
            self,
            x=override.x if override.x is not None else self.x,
            y=override.y if override.y is not None else self.y,
            width=override.width if override.width is not None else self.width,
            height=override.height if override.height is not None else self.height,
        )


@dataclass(frozen=True)
class StyleRule:
    properties: Mapping[str, str]
    extends_base: bool = True
    layouts: Mapping[PageLayoutCategory, Mapping[str, str]] = field(
        default_factory=lambda: MappingProxyType({})
    )

    def resolve(self, category: PageLayoutCategory) -> dict[str, str]:
        resolved = dict(BASE_STYLE) if self.extends_base else {}
        resolved.update(self.properties)
        resolved.update(self.layouts.get(category, {}))
        return resolved


_T = ComponentType

DEFAULT_PATTERNS: Sequence[PatternGroup] = (
    # Navigation
    PatternGroup(("header", "navigation", "nav", "menu bar", "top bar", "navbar"), _T.header, "top", 9),
    PatternGroup(("sidebar", "side menu", "side nav", "side panel", "menu"), _T.sidebar, "left", 7),
    PatternGroup(("footer", "bottom"), _T.footer, "bottom", 6),
    PatternGroup(("breadcrumb", "breadcrumbs"), _T.breadcrumb, "top", 4),
    PatternGroup(("tabs", "tab menu", "tabbed"), _T.tabs, "top", 5),
    # Content areas
    PatternGroup(("hero", "hero section", "main banner", "landing banner"), _T.hero, "center", 8),
    PatternGroup(
        ("content", "main content", "article", "post", "text", "feed", "timeline"), _T.text, "main", 7
    ),
    PatternGroup(
        ("image", "photo", "picture", "gallery", "avatar", "profile picture"), _T.image, "center", 5
    ),
    PatternGroup(("video", "media", "player"), _T.video, "center", 6),
    PatternGroup(("carousel", "slider", "slideshow"), _T.carousel, "center", 6),
    # Interactive elements
    PatternGroup(("button", "call to action", "cta", "action button"), _T.button, "center", 7),
    PatternGroup(
        ("form", "contact form", "signup", "register", "login", "booking form"), _T.form, "center", 8
    ),
    PatternGroup(("search", "search bar", "search box"), _T.search, "top", 6),
    PatternGroup(("input", "text field", "input field"), _T.input, "center", 5),
    # Data display
    PatternGroup(("table", "data table", "list", "grid", "product grid"), _T.table, "main", 7),
    PatternGroup(
        ("chart", "graph", "analytics", "visualization", "metrics", "dashboard"), _T.chart, "main", 7
    ),
    PatternGroup(("card", "cards", "card layout"), _T.card, "center", 6),
    PatternGroup(("stats", "statistics", "metrics", "numbers", "real-time"), _T.stats, "top", 6),
    # E-commerce
    PatternGroup(("product", "products", "items", "catalog"), _T.product_card, "main", 8),
    PatternGroup(("cart", "shopping cart", "basket"), _T.shopping_cart, "top", 7),
    PatternGroup(("filter", "filters", "search filters"), _T.filter, "left", 6),
    PatternGroup(("price", "pricing", "cost"), _T.price, "center", 6),
    # Social
    PatternGroup(("messaging", "chat", "messages", "inbox"), _T.text, "main", 8),
    PatternGroup(("profile", "user profile", "account"), _T.card, "center", 7),
    PatternGroup(("notification", "notifications", "alerts"), _T.card, "top", 6),
    # Calendar / booking
    PatternGroup(("calendar", "schedule", "booking", "appointment"), _T.chart, "main", 8),
    PatternGroup(("date picker", "time slot", "availability"), _T.input, "center", 7),
    # App shells
    PatternGroup(("app", "mobile app", "application"), _T.container, "main", 5),
    PatternGroup(("platform", "system", "tool"), _T.container, "main", 4),
    # Layout sections
    PatternGroup(("section", "area", "region", "block"), _T.section, "main", 4),
    PatternGroup(("container", "wrapper", "layout"), _T.container, "main", 3),
)


DEFAULT_CONTENT_RULES: Mapping[ComponentType, tuple[Sequence[ContentRule], str]] = _frozen(
    {
        _T.header: (
            (
                ContentRule(("company", "brand"), "Company Header"),
                ContentRule(("admin", "dashboard"), "Admin Header"),
            ),
            "Main Header",
        ),
        _T.hero: (
            (
                ContentRule(("ai", "artificial"), "AI-Powered Solution"),
                ContentRule(("saas", "software"), "SaaS Platform"),
                ContentRule(("ecommerce", "shop"), "Online Store"),
            ),
            "Welcome Message",
        ),
        _T.button: (
            (
                ContentRule(("signup", "register"), "Sign Up"),
                ContentRule(("buy", "purchase"), "Buy Now"),
                ContentRule(("contact",), "Contact Us"),
                ContentRule(("learn",), "Learn More"),
            ),
            "Get Started",
        ),
        _T.form: (
            (
                ContentRule(("contact",), "Contact Form"),
                ContentRule(("signup", "register"), "Registration Form"),
                ContentRule(("login",), "Login Form"),
            ),
            "Form",
        ),
        _T.search: (
            (
                ContentRule(("product",), "Search products..."),
                ContentRule(("article", "content"), "Search articles..."),
            ),
            "Search...",
        ),
    }
)


DEFAULT_DISPLAY_PRIORITY_TABLE: Mapping[ComponentType, int] = _frozen(
    {
        _T.header: 0,
        _T.breadcrumb: 1,
        _T.search: 2,
        _T.hero: 3,
        _T.tabs: 4,
        _T.sidebar: 5,
        _T.stats: 6,
        _T.chart: 7,
        _T.table: 8,
        _T.card: 9,
        _T.product_card: 10,
        _T.form: 11,
        _T.text: 12,
        _T.image: 13,
        _T.video: 14,
        _T.button: 15,
        _T.footer: 99,
    }
)


# Starting box for types listed in DEFAULT_GEOMETRY; everything else uses FALLBACK_GEOMETRY.
BASE_GEOMETRY = GeometryRule(x=0, width=100, height=8)
FALLBACK_GEOMETRY = GeometryRule(x=10, width=80, height=15)

_dashboard = PageLayoutCategory.dashboard
_ecommerce = PageLayoutCategory.ecommerce

DEFAULT_GEOMETRY: Mapping[ComponentType, GeometryRule] = _frozen(
    {
        _T.header: GeometryRule(y=0, height=10),
        _T.sidebar: GeometryRule(
            x=0,
            y=12,
            width=25,
            height=60,
            layouts=_frozen({_dashboard: GeometryRule(y=0, width=20, height=100)}),
        ),
        _T.hero: GeometryRule(height=35),
        _T.search: GeometryRule(x=20, width=60, height=6),
        _T.stats: GeometryRule(x=10, width=15, height=12, layouts=_frozen({_dashboard: GeometryRule(x=25)})),
        _T.chart: GeometryRule(
            x=10, width=80, height=25, layouts=_frozen({_dashboard: GeometryRule(x=25, width=50)})
        ),
        _T.table: GeometryRule(
            x=10, width=80, height=30, layouts=_frozen({_dashboard: GeometryRule(x=25, width=70)})
        ),
        _T.form: GeometryRule(x=25, width=50, height=40),
        _T.button: GeometryRule(x=40, width=20, height=6),
        _T.product_card: GeometryRule(
            x=10, width=80, height=50, layouts=_frozen({_ecommerce: GeometryRule(width=70)})
        ),
        _T.filter: GeometryRule(x=0, width=20, height=60),
        _T.footer: GeometryRule(y=90, height=10),
    }
)

# Hero anchored to the top sits directly under the header.
HERO_TOP_Y = 12
# Product cards make room for a sidebar mentioned next to them on shop pages.
PRODUCT_CARD_SIDEBAR_X = 25


BASE_STYLE: Mapping[str, str] = _frozen(
    {
        "background_color": "#ffffff",
        "border": "1px solid #e5e7eb",
        "border_radius": "6px",
        "padding": "1rem",
    }
)

DEFAULT_STYLES: Mapping[ComponentType, StyleRule] = _frozen(
    {
        _T.header: StyleRule(
            {
                "background_color": "#ffffff",
                "border_bottom": "2px solid #e5e7eb",
                "border_radius": "0",
                "display": "flex",
                "align_items": "center",
                "justify_content": "space-between",
                "font_weight": "600",
            }
        ),
        _T.sidebar: StyleRule(
            {
                "background_color": "#f9fafb",
                "color": "#374151",
                "border_radius": "0",
                "border_right": "1px solid #e5e7eb",
            },
            layouts=_frozen({_dashboard: _frozen({"background_color": "#1f2937", "color": "white"})}),
        ),
        _T.hero: StyleRule(
            {
                "background_color": "#f8fafc",
                "text_align": "center",
                "font_size": "24px",
                "font_weight": "700",
                "padding": "3rem",
            }
        ),
        _T.button: StyleRule(
            {
                "background_color": "#3b82f6",
                "color": "white",
                "border": "none",
                "border_radius": "8px",
                "font_weight": "600",
                "cursor": "pointer",
                "text_align": "center",
                "display": "flex",
                "align_items": "center",
                "justify_content": "center",
            },
            extends_base=False,
        ),
        _T.stats: StyleRule(
            {
                "text_align": "center",
                "background_color": "#ffffff",
                "box_shadow": "0 1px 3px rgba(0,0,0,0.1)",
            }
        ),
        _T.chart: StyleRule(
            {
                "background_color": "#ffffff",
                "display": "flex",
                "align_items": "center",
                "justify_content": "center",
            }
        ),
        _T.footer: StyleRule(
            {
                "background_color": "#1f2937",
                "color": "white",
                "border_radius": "0",
                "text_align": "center",
            }
        ),
    }
)
FALLBACK_STYLE = StyleRule({})


DEVICE_DIMENSIONS: Mapping[str, DeviceDimensions] = _frozen(
    {
        "desktop": DeviceDimensions(width=1200, height=800),
        "tablet": DeviceDimensions(width=768, height=1024),
        "mobile": DeviceDimensions(width=375, height=667),
    }
)


def device_dimensions(device: str) -> DeviceDimensions:
    return DEVICE_DIMENSIONS.get(device, DEVICE_DIMENSIONS["desktop"])


__all__ = [
    "BASE_GEOMETRY",
    "BASE_STYLE",
    "CONTEXT_WINDOW",
    "CURSOR_GAP",
    "DASHBOARD_MAX_WIDTH",
    "DASHBOARD_RAIL_X",
    "DEFAULT_CONTENT_RULES",
    "DEFAULT_DISPLAY_PRIORITY",
    "DEFAULT_DISPLAY_PRIORITY_TABLE",
    "DEFAULT_GEOMETRY",
    "DEFAULT_PATTERNS",
    "DEFAULT_STYLES",
    "DEVICE_DIMENSIONS",
    "FALLBACK_GEOMETRY",
    "FALLBACK_STYLE",
    "HERO_TOP_Y",
    "PRODUCT_CARD_SIDEBAR_X",
    "ContentRule",
    "GeometryRule",
    "PatternGroup",
    "StyleRule",
    "device_dimensions",
]
