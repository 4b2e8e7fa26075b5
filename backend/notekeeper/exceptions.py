"""
NoteKeeper Backend - Custom Exception Hierarchy
=================================================

What:  Application-specific exceptions raised by the service layer.
How:   Each exception carries a message and optional context dict.
       Global exception handlers (registered in main.py) translate them
       into HTTP responses.
Who:   Raised by NoteService; caught by the handlers in main.py.

Exception Hierarchy:
    NoteKeeperError (base)
    └── NotFoundError            → 404 Not Found, empty body

The API has exactly one failure mode: the requested note id does not
match any stored note. Everything else (unknown exceptions) falls through
to the generic 500 handler.
"""

from typing import Any, Dict, Optional


class NoteKeeperError(Exception):
    """
    Base exception for all NoteKeeper application errors.

    Attributes:
        message:  Human-readable error description
        context:  Additional debug info (logged, never returned to the client)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class NotFoundError(NoteKeeperError):
    """
    Raised when a requested note does not exist.

    When:    GET/PATCH/DELETE /note/{id} where no stored note has that id,
             including ids that do not parse as an integer.
    HTTP:    404 Not Found with an empty body. The note id is kept in
             `context` for the log line only.
    """

    def __init__(
        self,
        resource: str = "resource",
        resource_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"The requested {resource} was not found"
        if resource_id is not None:
            message = f"{resource} with ID '{resource_id}' was not found"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id is not None:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)
        self.resource = resource
        self.resource_id = resource_id
