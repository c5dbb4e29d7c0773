from __future__ import annotations

import logging
from typing import Callable, Sequence

from .augmenter import augment_mentions
from .classifier import classify_layout
from .extractor import ComponentExtractor
from .geometry import GeometryAssigner
from .models.mention import ComponentMention
from .models.wireframe import Complexity, PageLayoutCategory, ParsedWireframe

logger = logging.getLogger(__name__)


def complexity_for(mention_count: int) -> Complexity:
    if mention_count <= 3:
        return Complexity.simple
    if mention_count <= 6:
        return Complexity.medium
    return Complexity.complex


class WireframeParser:
    """Offline description-to-wireframe parser.

    Runs extraction, fallback augmentation, layout classification and geometry
    assignment in that order. Every call is independent and never raises, so a
    single instance can be shared between threads.
    """

    def __init__(
        self,
        *,
        extractor: ComponentExtractor | None = None,
        augmenter: Callable[[Sequence[ComponentMention], str], list[ComponentMention]] = augment_mentions,
        classifier: Callable[[Sequence[ComponentMention]], PageLayoutCategory] = classify_layout,
        assigner: GeometryAssigner | None = None,
    ) -> None:
        self._extractor = extractor or ComponentExtractor()
        self._augmenter = augmenter
        self._classifier = classifier
        self._assigner = assigner or GeometryAssigner()

    def parse(self, description: str) -> ParsedWireframe:
        mentions = self._extractor.extract(description)
        logger.debug(
            "Extracted component mentions",
            extra={"mentions": _describe(mentions)},
        )

        augmented = self._augmenter(mentions, description)
        logger.debug(
            "Augmented component mentions",
            extra={"mentions": _describe(augmented), "added": len(augmented) - len(mentions)},
        )

        layout = self._classifier(augmented)
        components = self._assigner.build(augmented, layout)
        complexity = complexity_for(len(mentions))

        logger.info(
            "Parsed wireframe description",
            extra={
                "layout": layout.value,
                "complexity": complexity.value,
                "components_count": len(components),
            },
        )

        return ParsedWireframe(
            title=f"Custom {layout.value.capitalize()} Wireframe",
            description=f'Dynamically generated wireframe based on: "{description}"',
            components=components,
            layout=layout,
            complexity=complexity,
        )


def _describe(mentions: Sequence[ComponentMention]) -> list[dict[str, object]]:
    return [
        {
            "type": mention.component_type.value,
            "content": mention.content,
            "importance": mention.importance,
        }
        for mention in mentions
    ]


def parse_wireframe(description: str) -> ParsedWireframe:
    return _DEFAULT_PARSER.parse(description)


_DEFAULT_PARSER = WireframeParser()


__all__ = ["WireframeParser", "complexity_for", "parse_wireframe"]
