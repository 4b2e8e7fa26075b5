# Services package init
"""
NoteKeeper Backend - Services Layer
=====================================

What:  Business logic layer sitting between routes (HTTP) and the note store.
How:   Services receive the store they operate on and are injected into
       routes via FastAPI's dependency injection (see get_note_service).

Service Inventory:
    - NoteService: list / create / get / patch / delete over a NoteStore
"""

from fastapi import Depends

from notekeeper.services.note_service import NoteService
from notekeeper.store import NoteStore, get_note_store


def get_note_service(store: NoteStore = Depends(get_note_store)) -> NoteService:
    """Dependency building a NoteService bound to the application's store."""
    return NoteService(store)
