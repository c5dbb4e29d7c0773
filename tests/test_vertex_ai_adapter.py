import pytest

from wireframe_drafter.models.request import WireframeRequest
from wireframe_drafter.models.wireframe import PageLayoutCategory
from wireframe_drafter.sources import WireframeSourceError
from wireframe_drafter.vertex_ai_adapter import (
    VertexAIWireframeSource,
    build_wireframe_prompt,
    parse_json_response,
)


class FakeAdapter:
    def __init__(self, result):
        self.result = result
        self.prompts = []

    def generate_json(self, prompt, *, temperature=0.7):
        self.prompts.append(prompt)
        return self.result


def request(**overrides):
    return WireframeRequest(description="Pricing page for a SaaS product", **overrides)


def test_parse_json_response_strips_code_fence():
    assert parse_json_response('```json\n{"components": []}\n```') == {"components": []}
    assert parse_json_response('  {"a": 1}  ') == {"a": 1}


def test_parse_json_response_rejects_garbage():
    with pytest.raises(ValueError):
        parse_json_response("not json at all")


def test_prompt_mentions_request_fields():
    prompt = build_wireframe_prompt(request(device="tablet", pageType="landing"))

    assert "Pricing page for a SaaS product" in prompt
    assert "Device: tablet" in prompt
    assert "landing page" in prompt
    assert "product-card" in prompt


def test_source_builds_wireframe_from_model_output():
    adapter = FakeAdapter(
        {
            "title": "SaaS Pricing",
            "layout": "standard",
            "components": [
                {"type": "header", "x": 0, "y": 0, "width": 100, "height": 8, "content": "Nav"},
                {
                    "id": "price_1",
                    "type": "price",
                    "x": 10,
                    "y": 20,
                    "width": 80,
                    "height": 30,
                    "style": {"backgroundColor": "#fff", "gap": "1rem"},
                },
            ],
        }
    )
    wireframe = VertexAIWireframeSource(adapter).generate(request())

    assert wireframe.title == "SaaS Pricing"
    assert wireframe.layout == PageLayoutCategory.standard
    header, price = wireframe.components
    assert header.id.startswith("header_")
    assert price.id == "price_1"
    assert price.content == "price content"
    assert price.style.to_payload() == {"backgroundColor": "#fff", "gap": "1rem"}
    assert len(adapter.prompts) == 1


def test_layout_falls_back_to_page_type():
    adapter = FakeAdapter(
        {"layout": "grid", "components": [{"type": "chart", "x": 0, "y": 0, "width": 50, "height": 50}]}
    )

    wireframe = VertexAIWireframeSource(adapter).generate(request(pageType="dashboard"))

    assert wireframe.layout == PageLayoutCategory.dashboard


@pytest.mark.parametrize(
    "result",
    [
        [],
        {"components": []},
        {"components": [{"type": "hologram", "x": 0, "y": 0, "width": 1, "height": 1}]},
        {"components": [{"type": "header", "x": "left"}]},
        {"components": ["header"]},
    ],
)
def test_invalid_model_output_raises_source_error(result):
    with pytest.raises(WireframeSourceError):
        VertexAIWireframeSource(FakeAdapter(result)).generate(request())
