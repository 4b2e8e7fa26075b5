"""
NoteKeeper Backend - Notes Route Handlers
===========================================

What:  CRUD over notes on two path shapes: /note and /note/{note_id}.
How:   Each handler delegates to NoteService and wraps the result in a
       {"data": ...} envelope. A missing note surfaces as NotFoundError,
       which the handler registered in main.py turns into an empty 404.
Who:   Called by the frontend note pages and any JSON client.

Route Table:
    GET    /note              → 200 {"data": [note, ...]}
    POST   /note              → 200 {"data": note}        (id assigned server-side)
    GET    /note/{note_id}    → 200 {"data": note}        | 404
    PATCH  /note/{note_id}    → 200 {"data": note}        | 404
    DELETE /note/{note_id}    → 200 {"data": "<note_id>"} | 404

The path id is taken as a string and parsed by the service, so a
non-numeric id is a 404 rather than a framework validation error.
"""

from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends

from notekeeper.schemas.note import (
    ErrorResponse,
    NoteDeletedResponse,
    NoteListResponse,
    NoteResponse,
)
from notekeeper.services import get_note_service
from notekeeper.services.note_service import NoteService


router = APIRouter(tags=["Notes"])

_NOT_FOUND = {404: {"description": "No note with this id (empty body)"}}


@router.get(
    "/note",
    response_model=NoteListResponse,
    responses={500: {"description": "Server error", "model": ErrorResponse}},
    summary="List all notes",
)
async def list_notes(
    service: NoteService = Depends(get_note_service),
) -> NoteListResponse:
    return NoteListResponse(data=service.list_notes())


@router.post(
    "/note",
    response_model=NoteResponse,
    summary="Create a note",
    description=(
        "Stores the JSON body as a new note. The server assigns `id` from the "
        "current time in milliseconds, overwriting any `id` in the body."
    ),
)
async def create_note(
    payload: Optional[Dict[str, Any]] = Body(default=None),
    service: NoteService = Depends(get_note_service),
) -> NoteResponse:
    return NoteResponse(data=service.create_note(payload))


@router.get(
    "/note/{note_id}",
    response_model=NoteResponse,
    responses=_NOT_FOUND,
    summary="Get a single note by id",
)
async def get_note(
    note_id: str,
    service: NoteService = Depends(get_note_service),
) -> NoteResponse:
    return NoteResponse(data=service.get_note(note_id))


@router.patch(
    "/note/{note_id}",
    response_model=NoteResponse,
    responses=_NOT_FOUND,
    summary="Update fields of a note",
    description=(
        "Merges the JSON body over the stored note. Fields not present in the "
        "body keep their current values."
    ),
)
async def update_note(
    note_id: str,
    payload: Optional[Dict[str, Any]] = Body(default=None),
    service: NoteService = Depends(get_note_service),
) -> NoteResponse:
    return NoteResponse(data=service.update_note(note_id, payload))


@router.delete(
    "/note/{note_id}",
    response_model=NoteDeletedResponse,
    responses=_NOT_FOUND,
    summary="Delete a note",
)
async def delete_note(
    note_id: str,
    service: NoteService = Depends(get_note_service),
) -> NoteDeletedResponse:
    """
    Remove a note and echo back its id.

    Deleting the same id twice returns 200 and then 404.
    """
    return NoteDeletedResponse(data=service.delete_note(note_id))
