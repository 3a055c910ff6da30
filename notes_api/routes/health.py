"""
Notes API — Health Check Routes
================================

What:  Liveness endpoints for container orchestration and monitoring.

    GET /        → {"message": "Healthy"}
    GET /health  → status, version, note count, uptime

There are no external dependencies to probe: if the process answers, the
in-memory store is available.
"""

import time

from fastapi import APIRouter, Depends, Request

from notes_api import __version__
from notes_api.dependencies import get_note_store
from notes_api.schemas.note import HealthResponse, MessageResponse
from notes_api.storage.note_store import NoteStore

router = APIRouter(tags=["Health"])


@router.get(
    "/",
    response_model=MessageResponse,
    summary="Health check",
    description="Simple health check endpoint for container orchestration.",
    operation_id="health_check",
)
def health_check() -> MessageResponse:
    return MessageResponse(message="Healthy")


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health details",
    description="Reports version, number of stored notes and uptime.",
    operation_id="health_details",
)
def health_details(
    request: Request,
    store: NoteStore = Depends(get_note_store),
) -> HealthResponse:
    started_at = request.app.state.started_at
    return HealthResponse(
        status="healthy",
        version=__version__,
        notes=store.count(),
        uptime_seconds=round(time.time() - started_at, 2),
    )
