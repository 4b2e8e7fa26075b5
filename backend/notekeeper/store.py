"""
NoteKeeper Backend - In-Memory Note Store
===========================================

What:  The authoritative ordered list of notes for one application instance,
       plus the FastAPI dependency that hands it to request handlers.
How:   A plain Python list of dicts. Lookups are linear scans; mutations
       are index-based and must be preceded by a lookup.
Who:   Built and seeded by create_app(); read and mutated by NoteService.
When:  Lives for the lifetime of the application object. Nothing is persisted:
       restarting the process restores the seeded notes.

Concurrency:
    All operations are synchronous. Handlers run on a single event loop and
    never await between a lookup and the mutation that follows it, so two
    requests cannot interleave mid-mutation. Each worker process holds its
    own independent store.
"""

import logging
from typing import Any, Dict, List, Optional

from starlette.requests import Request

logger = logging.getLogger(__name__)

Note = Dict[str, Any]


class NoteStore:
    """
    Ordered, mutable sequence of note records.

    Insertion order is preserved. Removing a note shifts the ones after it
    without reordering them.
    """

    def __init__(self, notes: Optional[List[Note]] = None):
        self._notes: List[Note] = list(notes) if notes else []

    def __len__(self) -> int:
        return len(self._notes)

    def seed(self, count: int, title_for=lambda i: f"Note {i}") -> None:
        """
        Populate the store with `count` placeholder notes.

        Ids are 0..count-1 and titles come from `title_for(id)`.
        Runs once, when the application is created.
        """
        for i in range(count):
            self._notes.append({"id": i, "title": title_for(i)})
        logger.debug("Seeded note store with %d notes", count)

    def all(self) -> List[Note]:
        """All notes in insertion order (a shallow copy of the sequence)."""
        return list(self._notes)

    def find_by_id(self, note_id: int) -> Optional[Note]:
        """First note whose id equals `note_id`, or None."""
        index = self.index_of_id(note_id)
        if index is None:
            return None
        return self._notes[index]

    def index_of_id(self, note_id: int) -> Optional[int]:
        """Position of the first note whose id equals `note_id`, or None."""
        for index, note in enumerate(self._notes):
            if _id_matches(note.get("id"), note_id):
                return index
        return None

    def append(self, note: Note) -> None:
        self._notes.append(note)

    def replace_at(self, index: int, note: Note) -> None:
        self._notes[index] = note

    def remove_at(self, index: int) -> Note:
        return self._notes.pop(index)


def _id_matches(stored: Any, note_id: int) -> bool:
    # bool is an int subclass; a stored True must not match id 1
    if isinstance(stored, bool) or not isinstance(stored, (int, float)):
        return False
    return stored == note_id


# ── FastAPI Dependency ────────────────────────────────────────────────────

def get_note_store(request: Request) -> NoteStore:
    """
    Dependency returning the store attached to the running application.

    Usage in routes:
        @router.get("/note")
        async def list_notes(store: NoteStore = Depends(get_note_store)):
            ...
    """
    return request.app.state.note_store
