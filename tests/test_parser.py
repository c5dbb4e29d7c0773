import pytest

from wireframe_drafter.models.mention import ComponentType
from wireframe_drafter.models.wireframe import Complexity, PageLayoutCategory
from wireframe_drafter.parser import WireframeParser, complexity_for, parse_wireframe

_T = ComponentType


def layout_of(wireframe):
    return [
        (component.type, component.box.x, component.box.y, component.box.width, component.box.height)
        for component in wireframe.components
    ]


def without_ids(wireframe):
    payload = wireframe.to_payload()
    for component in payload["components"]:
        component.pop("id")
    return payload


def test_landing_page_falls_back_to_header_and_content():
    wireframe = parse_wireframe("A simple landing page for a tech startup")

    assert wireframe.layout == PageLayoutCategory.standard
    assert wireframe.complexity == Complexity.simple
    assert wireframe.title == "Custom Standard Wireframe"
    assert wireframe.description == 'Dynamically generated wireframe based on: "A simple landing page for a tech startup"'
    assert layout_of(wireframe) == [
        (_T.header, 0, 0, 100, 10),
        (_T.text, 10, 12, 80, 15),
    ]
    assert wireframe.components[0].content == "Header"


def test_dashboard_scenario():
    wireframe = parse_wireframe("Admin dashboard with sidebar navigation, charts, and a data table")

    assert wireframe.layout == PageLayoutCategory.dashboard
    assert wireframe.complexity == Complexity.medium
    assert layout_of(wireframe) == [
        (_T.header, 0, 0, 100, 10),
        (_T.sidebar, 0, 0, 20, 100),
        (_T.chart, 25, 114, 50, 25),
        (_T.table, 25, 141, 70, 30),
    ]
    for component in wireframe.components:
        if component.type in (_T.chart, _T.table):
            assert component.box.x >= 25
            assert component.box.width <= 70
    sidebar = wireframe.components[1]
    assert sidebar.style.background_color == "#1f2937"


def test_ecommerce_scenario():
    wireframe = parse_wireframe("Online shop with product grid and shopping cart and filters")

    assert wireframe.layout == PageLayoutCategory.ecommerce
    assert wireframe.complexity == Complexity.medium
    assert layout_of(wireframe) == [
        (_T.header, 0, 0, 100, 10),
        (_T.search, 20, 12, 60, 6),
        (_T.table, 10, 20, 80, 30),
        (_T.product_card, 10, 52, 70, 50),
        (_T.shopping_cart, 10, 104, 80, 15),
        (_T.filter, 0, 121, 20, 60),
    ]


def test_contact_form_scenario():
    wireframe = parse_wireframe("Contact form with name, email, and message fields, plus a submit button")

    assert wireframe.layout == PageLayoutCategory.form
    assert wireframe.complexity == Complexity.simple
    assert layout_of(wireframe) == [
        (_T.header, 0, 0, 100, 10),
        (_T.form, 25, 12, 50, 40),
        (_T.button, 40, 54, 20, 6),
    ]
    assert [component.content for component in wireframe.components] == [
        "Header",
        "Contact Form",
        "Get Started",
    ]


def test_unrecognized_input_yields_minimal_wireframe():
    wireframe = parse_wireframe("xyz")

    assert [component.type for component in wireframe.components] == [_T.header, _T.text]
    assert [component.content for component in wireframe.components] == ["Header", "Main Content"]
    assert wireframe.layout == PageLayoutCategory.standard
    assert wireframe.complexity == Complexity.simple


def test_blog_layout():
    wireframe = parse_wireframe("A blog with article posts and a sidebar")

    assert wireframe.layout == PageLayoutCategory.blog
    assert wireframe.title == "Custom Blog Wireframe"


def test_repeated_keyword_produces_one_component():
    wireframe = parse_wireframe("header header header")

    assert [component.type for component in wireframe.components].count(_T.header) == 1


@pytest.mark.parametrize(
    "description",
    [
        "",
        "   ",
        "!!!",
        "İstanbul café ünïcode",
        "a" * 5000,
        "header footer sidebar hero content image video carousel button form search input "
        "table chart card stats product cart filter price section container app platform",
    ],
)
def test_parse_never_fails(description):
    wireframe = parse_wireframe(description)

    assert wireframe.components
    assert wireframe.components[0].type == _T.header


def test_complex_description():
    wireframe = parse_wireframe(
        "Social app with a header, hero, image gallery, video player, card layout, pricing and a footer"
    )

    assert wireframe.complexity == Complexity.complex
    assert wireframe.components[-1].type == _T.footer
    assert wireframe.components[-1].box.y == 90


def test_parse_is_deterministic_apart_from_ids():
    description = "Online shop with product grid and shopping cart and filters"
    parser = WireframeParser()

    first = parser.parse(description)
    second = parser.parse(description)

    assert without_ids(first) == without_ids(second)
    assert {c.id for c in first.components}.isdisjoint({c.id for c in second.components})


@pytest.mark.parametrize(
    ("count", "expected"),
    [(0, Complexity.simple), (3, Complexity.simple), (4, Complexity.medium), (6, Complexity.medium), (7, Complexity.complex)],
)
def test_complexity_thresholds(count, expected):
    assert complexity_for(count) == expected
