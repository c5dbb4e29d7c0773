from __future__ import annotations

import re
from typing import Mapping, Sequence

from .dictionaries import (
    CONTEXT_WINDOW,
    DEFAULT_CONTENT_RULES,
    DEFAULT_PATTERNS,
    ContentRule,
    PatternGroup,
)
from .models.mention import ComponentMention, ComponentType


class ComponentExtractor:
    """Finds component mentions in a free-text page description.

    Keywords are matched as whole words, case-insensitively. Each match keeps a
    window of the surrounding original-case text, which drives the derived
    content label and later the layout heuristics.
    """

    def __init__(
        self,
        *,
        patterns: Sequence[PatternGroup] = DEFAULT_PATTERNS,
        content_rules: Mapping[ComponentType, tuple[Sequence[ContentRule], str]] = DEFAULT_CONTENT_RULES,
        context_window: int = CONTEXT_WINDOW,
    ) -> None:
        self._patterns = tuple(patterns)
        self._content_rules = content_rules
        self._context_window = context_window
        self._compiled = tuple(
            (
                group,
                tuple(
                    re.compile(rf"\b{re.escape(keyword)}\b", re.IGNORECASE)
                    for keyword in group.keywords
                ),
            )
            for group in self._patterns
        )

    def extract(self, description: str) -> list[ComponentMention]:
        mentions: list[ComponentMention] = []
        for group, patterns in self._compiled:
            for pattern in patterns:
                match = pattern.search(description)
                if match is None:
                    continue
                context = self._context_words(description, match.start(), match.end())
                mentions.append(
                    ComponentMention(
                        component_type=group.component_type,
                        content=self.content_for(group.component_type, context),
                        anchor_position=group.anchor_position,
                        importance=group.importance,
                        context_words=context,
                    )
                )

        # Dedup before sorting: the first mention scanned for a type wins.
        unique: list[ComponentMention] = []
        seen: set[ComponentType] = set()
        for mention in mentions:
            if mention.component_type in seen:
                continue
            seen.add(mention.component_type)
            unique.append(mention)

        return sorted(unique, key=lambda mention: mention.importance, reverse=True)

    def content_for(self, component_type: ComponentType, context: Sequence[str]) -> str:
        context_text = " ".join(context).lower()
        rules = self._content_rules.get(component_type)
        if rules is None:
            return component_type.value[:1].upper() + component_type.value[1:]
        candidates, default_label = rules
        for rule in candidates:
            if rule.matches(context_text):
                return rule.label
        return default_label

    def _context_words(self, description: str, match_start: int, match_end: int) -> tuple[str, ...]:
        start = max(0, match_start - self._context_window)
        end = min(len(description), match_end + self._context_window)
        return tuple(description[start:end].split(" "))


def extract_mentions(description: str) -> list[ComponentMention]:
    return _DEFAULT_EXTRACTOR.extract(description)


_DEFAULT_EXTRACTOR = ComponentExtractor()


__all__ = ["ComponentExtractor", "extract_mentions"]
