"""
MemoNotes Backend — Health Check Route
=========================================

What:  Health check endpoint for monitoring and container probes.
How:   The store is in memory, so the service is healthy whenever it can
       answer; the response also reports the current note count and uptime.
"""

import time

from fastapi import APIRouter, Depends

from memonotes import __version__
from memonotes.dependencies import get_note_store
from memonotes.schemas.note import HealthResponse
from memonotes.services.note_store import NoteStore

router = APIRouter(tags=["Health"])

_start_time = time.time()


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
)
def health_check(store: NoteStore = Depends(get_note_store)) -> HealthResponse:
    return HealthResponse(
        status="healthy",
        version=__version__,
        notes=len(store),
        uptime_seconds=round(time.time() - _start_time, 2),
    )
