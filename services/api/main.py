from __future__ import annotations

import asyncio
import logging
import os
import uuid

from fastapi import FastAPI, HTTPException
from fastapi.responses import JSONResponse

from wireframe_drafter.generator import WireframeGenerator
from wireframe_drafter.logging_config import set_trace_id, setup_logging
from wireframe_drafter.models.request import WireframeRequest
from wireframe_drafter.sources import WireframeSource
from wireframe_drafter.vertex_ai_adapter import VertexAIAdapter, VertexAIWireframeSource

MIN_DESCRIPTION_LENGTH = 10
SMOKE_TEST_DESCRIPTION = "A simple landing page for a tech startup"

# Environment configuration
ENVIRONMENT = os.getenv("ENVIRONMENT", "dev")
PROJECT_ID = os.getenv("PROJECT_ID")
VERTEX_LOCATION = os.getenv("VERTEX_LOCATION", "asia-northeast1")
VERTEX_MODEL = os.getenv("VERTEX_MODEL", "gemini-1.5-pro")

# Setup logging
setup_logging(environment=ENVIRONMENT, project_id=PROJECT_ID)
logger = logging.getLogger(__name__)

app = FastAPI(title="Wireframe Drafter API", version="0.1.0")


def _build_sources() -> list[WireframeSource]:
    if not PROJECT_ID:
        return []
    try:
        adapter = VertexAIAdapter(project_id=PROJECT_ID, location=VERTEX_LOCATION, model_name=VERTEX_MODEL)
    except Exception as exc:
        logger.warning(
            "Vertex AI unavailable, using heuristic parser only",
            exc_info=True,
            extra={"error": str(exc)},
        )
        return []
    return [VertexAIWireframeSource(adapter)]


wireframe_generator = WireframeGenerator(sources=_build_sources())


@app.post("/api/generate/wireframe")
async def generate_wireframe(request: WireframeRequest) -> JSONResponse:
    set_trace_id(str(uuid.uuid4()))
    if len(request.description) < MIN_DESCRIPTION_LENGTH:
        raise HTTPException(
            status_code=400,
            detail=f"Description must be at least {MIN_DESCRIPTION_LENGTH} characters long",
        )

    try:
        record = await asyncio.to_thread(wireframe_generator.generate, request)
    except Exception as exc:
        logger.error(
            "Wireframe generation failed",
            exc_info=True,
            extra={"error": str(exc)},
        )
        return JSONResponse({"success": False, "error": "Failed to generate wireframe"}, status_code=500)

    return JSONResponse(
        {
            "success": True,
            "data": record.to_payload(),
            "message": "Wireframe generated successfully",
        }
    )


@app.get("/api/generate/providers")
async def get_providers() -> JSONResponse:
    return JSONResponse(
        {
            "success": True,
            "data": {"providers": wireframe_generator.provider_status(), "environment": ENVIRONMENT},
            "message": "Wireframe providers status retrieved successfully",
        }
    )


@app.get("/api/generate/test")
async def smoke_test() -> JSONResponse:
    request = WireframeRequest(description=SMOKE_TEST_DESCRIPTION, page_type="landing")
    record = await asyncio.to_thread(wireframe_generator.generate, request)
    return JSONResponse(
        {
            "success": True,
            "data": record.to_payload(),
            "message": "Test wireframe generated successfully",
        }
    )


@app.get("/health")
async def healthcheck() -> JSONResponse:
    return JSONResponse({"status": "ok"})
