"""
NoteKeeper Backend - Pydantic Response Schemas
================================================

What:  Pydantic models describing the API's response envelopes.
How:   FastAPI serializes route return values through these models and
       generates the OpenAPI document from them.

Notes themselves are open key-value records: only `id` is assigned by the
server, everything else is whatever the client sent. They are therefore
typed as plain dicts inside the `{"data": ...}` envelope rather than as a
fixed model, so no client field is dropped on the way out.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field


# ══════════════════════════════════════════════════════════════════════════
# Response Models - What the API returns to clients
# ══════════════════════════════════════════════════════════════════════════


class NoteResponse(BaseModel):
    """Single note, returned by POST /note and GET/PATCH /note/{id}."""
    data: Dict[str, Any] = Field(description="The note record, including its id")


class NoteListResponse(BaseModel):
    """Every stored note in insertion order, returned by GET /note."""
    data: List[Dict[str, Any]] = Field(description="All notes, unpaginated")


class NoteDeletedResponse(BaseModel):
    """Returned by DELETE /note/{id}: the id exactly as it appeared in the path."""
    data: str = Field(description="Deleted note id, as sent")


# ══════════════════════════════════════════════════════════════════════════
# Error / Health Models
# ══════════════════════════════════════════════════════════════════════════


class ErrorResponse(BaseModel):
    """
    Body of 500 responses.

    404s carry no body at all; this model is only used for unexpected errors.
    """
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    """Returned by GET /health for liveness probes."""
    status: str = Field(description="Overall service status")
    version: str = Field(description="Application version")
    note_count: int = Field(description="Notes currently held in memory")
    uptime_seconds: float = Field(description="Seconds since the application was created")
