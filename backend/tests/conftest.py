"""
NoteKeeper Backend - Test Configuration (conftest.py)
======================================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy (all function-scoped, fresh state per test):
    ├── note_store:    NoteStore seeded with the default 15 notes
    ├── fixed_clock:   Deterministic millisecond clock for id assignment
    ├── note_service:  NoteService over note_store using fixed_clock
    ├── test_app:      A freshly built FastAPI app (own seeded store)
    └── test_client:   HTTPX AsyncClient talking to test_app
"""

import itertools
import os

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

# Override settings for testing BEFORE any app imports
os.environ["LOG_LEVEL"] = "WARNING"
os.environ.pop("API_PREFIX", None)
os.environ.pop("SEED_COUNT", None)

from notekeeper.main import create_app  # noqa: E402
from notekeeper.services.note_service import NoteService  # noqa: E402
from notekeeper.store import NoteStore  # noqa: E402

SEEDED_COUNT = 15
FIXED_EPOCH_MS = 1_700_000_000_000


@pytest.fixture
def note_store():
    """A store holding the 15 placeholder notes, ids 0..14."""
    store = NoteStore()
    store.seed(SEEDED_COUNT)
    return store


@pytest.fixture
def fixed_clock():
    """
    Clock returning FIXED_EPOCH_MS, FIXED_EPOCH_MS + 1, ... on each call.

    Usage:
        service = NoteService(store, clock=fixed_clock)
    """
    counter = itertools.count(FIXED_EPOCH_MS)
    return lambda: next(counter)


@pytest.fixture
def note_service(note_store, fixed_clock):
    return NoteService(note_store, clock=fixed_clock)


@pytest.fixture
def test_app():
    """An isolated application; notes created by one test never leak into another."""
    return create_app()


@pytest_asyncio.fixture
async def test_client(test_app):
    """
    Async HTTP client routed straight into the ASGI app.

    Usage:
        async def test_list(test_client):
            response = await test_client.get("/note")
            assert response.status_code == 200
    """
    transport = ASGITransport(app=test_app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
