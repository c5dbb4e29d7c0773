from __future__ import annotations

from typing import Protocol

from .models.request import WireframeRequest
from .models.wireframe import ParsedWireframe


class WireframeSourceError(RuntimeError):
    """Raised by an upstream source that could not produce a wireframe."""


class WireframeSource(Protocol):
    name: str

    def is_available(self) -> bool:
        ...

    def generate(self, request: WireframeRequest) -> ParsedWireframe:
        ...


__all__ = ["WireframeSource", "WireframeSourceError"]
