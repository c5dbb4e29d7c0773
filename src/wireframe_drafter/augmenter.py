from __future__ import annotations

from typing import Sequence

from .models.mention import AnchorPosition, ComponentMention, ComponentType

_FALLBACK_CONTEXT = ("fallback",)


def _fallback(
    component_type: ComponentType, content: str, anchor_position: AnchorPosition, importance: int
) -> ComponentMention:
    return ComponentMention(
        component_type=component_type,
        content=content,
        anchor_position=anchor_position,
        importance=importance,
        context_words=_FALLBACK_CONTEXT,
    )


FALLBACK_HEADER = _fallback(ComponentType.header, "Header", "top", 9)
FALLBACK_CONTENT = _fallback(ComponentType.text, "Main Content", "main", 7)
FALLBACK_NAVIGATION = _fallback(ComponentType.sidebar, "Navigation", "left", 7)
FALLBACK_SEARCH = _fallback(ComponentType.search, "Search", "top", 6)


def augment_mentions(mentions: Sequence[ComponentMention], description: str) -> list[ComponentMention]:
    """Append the fallback components a usable wireframe needs.

    Existing mentions are never removed or reordered. The keyword checks run
    against the raw description as plain substrings.
    """
    augmented = list(mentions)

    def has(component_type: ComponentType) -> bool:
        return any(mention.component_type == component_type for mention in augmented)

    if not has(ComponentType.header):
        augmented.append(FALLBACK_HEADER)

    if len(augmented) < 2:
        augmented.append(FALLBACK_CONTENT)

    if ("app" in description or "platform" in description) and not has(ComponentType.sidebar):
        augmented.append(FALLBACK_NAVIGATION)

    if any(word in description for word in ("shop", "social", "search")) and not has(ComponentType.search):
        augmented.append(FALLBACK_SEARCH)

    return augmented


__all__ = [
    "FALLBACK_CONTENT",
    "FALLBACK_HEADER",
    "FALLBACK_NAVIGATION",
    "FALLBACK_SEARCH",
    "augment_mentions",
]
