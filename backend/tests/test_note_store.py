"""
NoteKeeper Backend - Note Store Unit Tests
============================================

What:  Tests for NoteStore seeding, lookups and indexed mutation.
How:   Operates on a seeded in-memory store; no HTTP involved.
"""

from notekeeper.store import NoteStore


class TestSeed:
    """Tests for initial population of the store."""

    def test_seed_creates_count_notes_in_order(self, note_store):
        """Seeding 15 yields ids 0..14 in insertion order."""
        notes = note_store.all()
        assert len(notes) == 15
        assert [n["id"] for n in notes] == list(range(15))

    def test_seed_placeholder_titles(self, note_store):
        assert note_store.all()[0] == {"id": 0, "title": "Note 0"}
        assert note_store.all()[14]["title"] == "Note 14"

    def test_seed_custom_titles(self):
        store = NoteStore()
        store.seed(3, lambda i: f"Draft #{i}")
        assert [n["title"] for n in store.all()] == ["Draft #0", "Draft #1", "Draft #2"]

    def test_seed_zero_leaves_store_empty(self):
        store = NoteStore()
        store.seed(0)
        assert len(store) == 0
        assert store.all() == []


class TestLookup:
    """Tests for find_by_id and index_of_id."""

    def test_find_by_id_existing(self, note_store):
        assert note_store.find_by_id(7) == {"id": 7, "title": "Note 7"}

    def test_find_by_id_missing(self, note_store):
        assert note_store.find_by_id(99) is None

    def test_index_of_id(self, note_store):
        assert note_store.index_of_id(0) == 0
        assert note_store.index_of_id(14) == 14
        assert note_store.index_of_id(-1) is None

    def test_duplicate_ids_return_first_match(self):
        """Two notes sharing an id: lookups see the earlier one."""
        store = NoteStore([{"id": 5, "title": "first"}, {"id": 5, "title": "second"}])
        assert store.find_by_id(5)["title"] == "first"
        assert store.index_of_id(5) == 0

    def test_boolean_id_does_not_match_integer(self):
        store = NoteStore([{"id": True, "title": "flag"}])
        assert store.find_by_id(1) is None

    def test_note_without_id_is_skipped(self):
        store = NoteStore([{"title": "anonymous"}, {"id": 3}])
        assert store.index_of_id(3) == 1


class TestMutation:
    """Tests for append, replace_at and remove_at."""

    def test_append_adds_to_end(self, note_store):
        note_store.append({"id": 100, "title": "new"})
        assert len(note_store) == 16
        assert note_store.all()[-1] == {"id": 100, "title": "new"}

    def test_replace_at_overwrites_in_place(self, note_store):
        note_store.replace_at(3, {"id": 3, "title": "changed"})
        assert note_store.all()[3] == {"id": 3, "title": "changed"}
        assert len(note_store) == 15

    def test_remove_at_preserves_order_of_rest(self, note_store):
        removed = note_store.remove_at(4)
        assert removed["id"] == 4
        ids = [n["id"] for n in note_store.all()]
        assert ids == [0, 1, 2, 3, 5, 6, 7, 8, 9, 10, 11, 12, 13, 14]

    def test_all_returns_copy_of_sequence(self, note_store):
        """Mutating the returned list does not change the store."""
        snapshot = note_store.all()
        snapshot.clear()
        assert len(note_store) == 15
