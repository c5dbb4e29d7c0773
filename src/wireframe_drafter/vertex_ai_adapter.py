from __future__ import annotations

import json
import logging
from typing import Any

import vertexai
from pydantic import ValidationError
from vertexai.generative_models import GenerationConfig, GenerativeModel

from .geometry import generate_component_id
from .models.mention import ComponentType
from .models.request import WireframeRequest
from .models.wireframe import PageLayoutCategory, ParsedWireframe, WireframeComponent
from .sources import WireframeSourceError

logger = logging.getLogger(__name__)


class VertexAIAdapter:
    """Adapter for Vertex AI Gemini models."""

    def __init__(
        self,
        *,
        project_id: str,
        location: str = "asia-northeast1",
        model_name: str = "gemini-1.5-pro",
    ) -> None:
        """Initialize Vertex AI adapter.

        Args:
            project_id: GCP project ID
            location: Vertex AI location
            model_name: Model name (e.g., "gemini-1.5-pro")
        """
        self.project_id = project_id
        self.location = location
        self.model_name = model_name

        vertexai.init(project=project_id, location=location)
        self.model = GenerativeModel(model_name)

    def generate_content(
        self,
        prompt: str,
        *,
        temperature: float = 0.7,
        max_output_tokens: int = 8192,
        response_format: str | None = None,
    ) -> str:
        """Generate content using Vertex AI.

        Args:
            prompt: Input prompt
            temperature: Sampling temperature (0.0 - 1.0)
            max_output_tokens: Maximum output tokens
            response_format: Optional response format ("json" for JSON mode)

        Returns:
            Generated text
        """
        generation_config = GenerationConfig(
            temperature=temperature,
            max_output_tokens=max_output_tokens,
        )

        if response_format == "json":
            prompt = f"{prompt}\n\nPlease respond with valid JSON only."

        response = self.model.generate_content(
            prompt,
            generation_config=generation_config,
        )
        generated_text = response.text

        logger.info(
            "Generated content with Vertex AI",
            extra={
                "model": self.model_name,
                "temperature": temperature,
                "input_length": len(prompt),
                "output_length": len(generated_text),
            },
        )
        return generated_text

    def generate_json(
        self,
        prompt: str,
        *,
        temperature: float = 0.7,
        max_output_tokens: int = 8192,
    ) -> Any:
        """Generate structured JSON response.

        Raises:
            ValueError: The model did not answer with parseable JSON.
        """
        response = self.generate_content(
            prompt,
            temperature=temperature,
            max_output_tokens=max_output_tokens,
            response_format="json",
        )
        return parse_json_response(response)


def parse_json_response(response: str) -> Any:
    """Parse a model answer, tolerating a surrounding markdown code fence."""
    text = response.strip()
    if text.startswith("```json"):
        text = text[7:]
    if text.startswith("```"):
        text = text[3:]
    if text.endswith("```"):
        text = text[:-3]

    try:
        return json.loads(text.strip())
    except json.JSONDecodeError as exc:
        logger.error(
            "Failed to parse JSON response",
            exc_info=True,
            extra={"response": response},
        )
        raise ValueError(f"Invalid JSON response: {exc}") from exc


_COMPONENT_TYPES = ", ".join(component_type.value for component_type in ComponentType)


def build_wireframe_prompt(request: WireframeRequest) -> str:
    return f"""Create a wireframe layout for a {request.page_type} page with the following requirements:

Description: {request.description}
Device: {request.device}
Complexity: {request.complexity.value}

Generate a structured wireframe with headers, navigation, content sections,
buttons, forms and footers as appropriate.

Respond with a JSON object of the form:
{{"title": "...", "layout": "standard|dashboard|ecommerce|blog|form", "components": [...]}}

Each component has:
- type: one of {_COMPONENT_TYPES}
- x, y, width, height: percentages of the canvas (0-100)
- content: short display text
- style: optional CSS properties in camelCase
"""


class VertexAIWireframeSource:
    """Wireframe source backed by a Gemini model on Vertex AI."""

    name = "vertex-ai"

    def __init__(self, adapter: VertexAIAdapter, *, temperature: float = 0.7) -> None:
        self._adapter = adapter
        self._temperature = temperature

    def is_available(self) -> bool:
        return True

    def generate(self, request: WireframeRequest) -> ParsedWireframe:
        result = self._adapter.generate_json(build_wireframe_prompt(request), temperature=self._temperature)
        if not isinstance(result, dict) or not result.get("components"):
            raise WireframeSourceError("Vertex AI response has no components")

        try:
            components = [
                WireframeComponent.from_payload(
                    {**item, "id": item.get("id") or generate_component_id(ComponentType(item.get("type")))}
                )
                for item in result["components"]
            ]
        except (ValidationError, ValueError, TypeError, AttributeError) as exc:
            raise WireframeSourceError(f"Invalid wireframe components: {exc}") from exc

        return ParsedWireframe(
            title=result.get("title") or f"{request.page_type.capitalize()} Wireframe",
            description=request.description,
            components=components,
            layout=_layout_for(result.get("layout"), request.page_type),
            complexity=request.complexity,
        )


def _layout_for(*candidates: Any) -> PageLayoutCategory:
    for candidate in candidates:
        try:
            return PageLayoutCategory(candidate)
        except ValueError:
            continue
    return PageLayoutCategory.standard


__all__ = [
    "VertexAIAdapter",
    "VertexAIWireframeSource",
    "build_wireframe_prompt",
    "parse_json_response",
]
