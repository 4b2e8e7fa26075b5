"""
NoteKeeper Backend - Note Service (Business Logic)
====================================================

What:  CRUD operations over the NoteStore: list, create, get, patch, delete.
How:   Parses the raw path id, looks the note up, raises NotFoundError when
       absent, and only then performs the indexed mutation.
Who:   Called by the route handlers in routes/notes.py.

Id assignment:
    New notes get `id = clock()`, the wall clock in milliseconds. Two
    creations inside the same millisecond produce two notes with the same
    id; this is not detected. Lookups return the first match in that case.

Merge semantics:
    create:  {**payload, "id": new_id}     → a client-supplied id is overwritten
    update:  {**existing, **payload}       → payload keys win, including "id"
"""

import logging
import re
import time
from typing import Any, Callable, Dict, List, Optional, Tuple

from notekeeper.exceptions import NotFoundError
from notekeeper.store import Note, NoteStore

logger = logging.getLogger(__name__)

# Leading integer after optional whitespace and sign; trailing junk is ignored.
_INT_PREFIX = re.compile(r"\s*([+-]?[0-9]+)")


def current_time_millis() -> int:
    """Milliseconds since the Unix epoch."""
    return time.time_ns() // 1_000_000


def parse_note_id(raw: str) -> Optional[int]:
    """
    Parse a path id the way the API has always read it.

    "12" → 12, " 7" → 7, "3abc" → 3, "-4" → -4.
    Returns None ("not a number") when there are no leading digits;
    a None id matches no note.
    """
    match = _INT_PREFIX.match(raw)
    if match is None:
        return None
    return int(match.group(1))


class NoteService:
    """
    Business logic for note operations, bound to one store.

    Args:
        store: The NoteStore to read and mutate.
        clock: Zero-argument callable returning the id for a new note.
               Defaults to current_time_millis; tests pass a fixed clock.
    """

    def __init__(
        self,
        store: NoteStore,
        clock: Callable[[], int] = current_time_millis,
    ):
        self.store = store
        self.clock = clock

    def list_notes(self) -> List[Note]:
        """Every note in insertion order. No filtering or pagination."""
        return self.store.all()

    def create_note(self, payload: Optional[Dict[str, Any]] = None) -> Note:
        """Assign a fresh id, merge it over the payload and append the note."""
        note_id = self.clock()
        note = {**(payload or {}), "id": note_id}
        self.store.append(note)
        logger.info("Note %s created", note_id)
        return note

    def get_note(self, raw_id: str) -> Note:
        """
        Fetch one note by its path id.

        Raises:
            NotFoundError: no stored note has that id (→ 404)
        """
        _, note = self._lookup(raw_id)
        return note

    def update_note(self, raw_id: str, payload: Optional[Dict[str, Any]] = None) -> Note:
        """
        Merge `payload` over the stored note and replace it in place.

        Fields absent from the payload are left untouched.

        Raises:
            NotFoundError: no stored note has that id (→ 404)
        """
        index, note = self._lookup(raw_id)
        updated = {**note, **(payload or {})}
        self.store.replace_at(index, updated)
        logger.info("Note %s updated (%d fields)", raw_id, len(payload or {}))
        return updated

    def delete_note(self, raw_id: str) -> str:
        """
        Remove the note and return the id exactly as it was sent.

        Not idempotent: a second delete of the same id raises NotFoundError.
        """
        index, _ = self._lookup(raw_id)
        self.store.remove_at(index)
        logger.info("Note %s deleted", raw_id)
        return raw_id

    def _lookup(self, raw_id: str) -> Tuple[int, Note]:
        note_id = parse_note_id(raw_id)
        note = None if note_id is None else self.store.find_by_id(note_id)
        if note is None:
            raise NotFoundError(resource="note", resource_id=raw_id)
        return self.store.index_of_id(note_id), note
