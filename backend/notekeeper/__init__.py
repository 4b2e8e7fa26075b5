"""
NoteKeeper Backend - Application Package Initializer
=====================================================

What: Marks the `notekeeper` directory as a Python package.
Who:  Imported by uvicorn (`notekeeper.main:app`), pytest and `python -m notekeeper`.

Architecture Note:
    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │         Services (Business Logic)   │  ← id assignment, merge, not-found
    ├─────────────────────────────────────┤
    │        Store (In-Memory Notes)      │  ← ordered list, seeded at startup
    └─────────────────────────────────────┘

    Routes never touch the store directly; they receive a NoteService
    bound to the application's store through FastAPI dependencies.
"""

__version__ = "1.0.0"
