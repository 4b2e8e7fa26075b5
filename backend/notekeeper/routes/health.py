"""
NoteKeeper Backend - Health Check Route
=========================================

What:  Liveness endpoint for container health checks and load balancers.
How:   Reports the version, the number of notes in memory and uptime.
       There are no external dependencies to probe, so a response at all
       means the service is healthy.
"""

import time

from fastapi import APIRouter, Depends, Request

from notekeeper import __version__
from notekeeper.schemas.note import HealthResponse
from notekeeper.store import NoteStore, get_note_store

router = APIRouter(tags=["Health"])


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
)
async def health_check(
    request: Request,
    store: NoteStore = Depends(get_note_store),
) -> HealthResponse:
    started_at = getattr(request.app.state, "started_at", time.time())
    return HealthResponse(
        status="healthy",
        version=__version__,
        note_count=len(store),
        uptime_seconds=round(time.time() - started_at, 2),
    )
