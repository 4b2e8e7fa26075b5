"""
NoteKeeper Backend - Request ID Middleware
============================================

What:  Assigns a correlation id to each request and returns it in the
       X-Request-ID response header.
How:   Reuses the client's X-Request-ID header when present, otherwise
       generates a short UUID. The id is stored in a ContextVar so the
       access log and error handlers can include it.

Responses built by the 500 handler in main.py bypass this middleware;
that handler copies the id into the header itself.
"""

import uuid
from contextvars import ContextVar

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

# Coroutine-local: concurrent requests on one event loop each see their own id.
request_id_var: ContextVar[str] = ContextVar("request_id", default="")

REQUEST_ID_HEADER = "X-Request-ID"


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Middleware that tags every request and response with a request id."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        # 8 hex chars is enough to correlate log lines
        rid = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex[:8]

        request_id_var.set(rid)

        response = await call_next(request)
        response.headers[REQUEST_ID_HEADER] = rid
        return response
