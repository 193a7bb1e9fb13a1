"""
NoteKeeper Backend: Health Check Route
========================================

What:  Health check endpoint for monitoring and container liveness checks.
How:   The service has no external dependencies, so it is healthy whenever
       it can answer. The response also reports how many notes are held.
"""

import logging
import time

from fastapi import APIRouter, Depends

from notekeeper import __version__
from notekeeper.schemas.note import HealthResponse
from notekeeper.services.note_store import NoteStore, get_note_store

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])

# Uptime is measured from module import
_start_time = time.time()


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
)
async def health_check(
    store: NoteStore = Depends(get_note_store),
) -> HealthResponse:
    return HealthResponse(
        status="healthy",
        version=__version__,
        notes=store.count(),
        uptime_seconds=round(time.time() - _start_time, 2),
    )
