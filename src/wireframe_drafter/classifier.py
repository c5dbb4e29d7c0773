from __future__ import annotations

from typing import Iterable

from .models.mention import ComponentMention, ComponentType
from .models.wireframe import PageLayoutCategory

_T = ComponentType

_DASHBOARD_DATA = frozenset({_T.chart, _T.stats, _T.table})
_ECOMMERCE_MARKERS = frozenset({_T.product_card, _T.shopping_cart, _T.filter})
_FORM_CONTROLS = frozenset({_T.form, _T.input, _T.button})
_BLOG_WORDS = ("article", "blog")


def classify_layout(mentions: Iterable[ComponentMention]) -> PageLayoutCategory:
    """Pick the page archetype from the set of mentioned component types.

    Rules are checked in a fixed order and the first match wins, so the result
    does not depend on the order of ``mentions``.
    """
    mentions = tuple(mentions)
    types = {mention.component_type for mention in mentions}

    if _T.sidebar in types and types & _DASHBOARD_DATA:
        return PageLayoutCategory.dashboard

    if types & _ECOMMERCE_MARKERS:
        return PageLayoutCategory.ecommerce

    if _T.text in types and (_T.sidebar in types or _mentions_blog(mentions)):
        return PageLayoutCategory.blog

    if len(types & _FORM_CONTROLS) >= 2:
        return PageLayoutCategory.form

    return PageLayoutCategory.standard


def _mentions_blog(mentions: Iterable[ComponentMention]) -> bool:
    return any(
        marker in word
        for mention in mentions
        for word in mention.context_words
        for marker in _BLOG_WORDS
    )


__all__ = ["classify_layout"]
