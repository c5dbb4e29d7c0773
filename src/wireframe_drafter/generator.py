from __future__ import annotations

import logging
import time
from typing import Sequence

from .dictionaries import device_dimensions
from .models.request import WireframeRecord, WireframeRequest
from .models.wireframe import ParsedWireframe
from .parser import WireframeParser
from .sources import WireframeSource

logger = logging.getLogger(__name__)

HEURISTIC_SOURCE = "heuristic"


class WireframeGenerator:
    """Generates wireframes from upstream sources, falling back to the parser.

    Sources are tried in order. Unavailable sources are skipped and a source
    that raises is logged and skipped, so ``generate`` always returns a record.
    """

    def __init__(
        self,
        *,
        sources: Sequence[WireframeSource] = (),
        parser: WireframeParser | None = None,
    ) -> None:
        self._sources = tuple(sources)
        self._parser = parser or WireframeParser()

    def generate(self, request: WireframeRequest) -> WireframeRecord:
        started = time.monotonic()
        wireframe, source_name = self._generate_with_sources(request)
        if wireframe is None:
            wireframe = self._parser.parse(request.description)
            source_name = HEURISTIC_SOURCE

        elapsed_ms = int((time.monotonic() - started) * 1000)
        logger.info(
            "Generated wireframe",
            extra={
                "source": source_name,
                "device": request.device,
                "layout": wireframe.layout.value,
                "processing_time_ms": elapsed_ms,
            },
        )
        return WireframeRecord(
            id=f"wireframe_{int(time.time() * 1000)}",
            title=wireframe.title,
            description=wireframe.description,
            components=wireframe.components,
            layout=wireframe.layout,
            complexity=wireframe.complexity,
            device=request.device,
            dimensions=device_dimensions(request.device),
            source=source_name,
            processing_time_ms=elapsed_ms,
        )

    def provider_status(self) -> list[dict[str, object]]:
        statuses: list[dict[str, object]] = [
            {"name": source.name, "available": source.is_available()} for source in self._sources
        ]
        statuses.append({"name": HEURISTIC_SOURCE, "available": True})
        return statuses

    def _generate_with_sources(self, request: WireframeRequest) -> tuple[ParsedWireframe | None, str]:
        for source in self._sources:
            if not source.is_available():
                logger.debug("Skipping unavailable source", extra={"source": source.name})
                continue
            try:
                return source.generate(request), source.name
            except Exception as exc:
                logger.warning(
                    "Wireframe source failed, trying next",
                    exc_info=True,
                    extra={"source": source.name, "error": str(exc)},
                )
        return None, HEURISTIC_SOURCE


__all__ = ["HEURISTIC_SOURCE", "WireframeGenerator"]
