"""
NoteKeeper Backend - Request Logging Middleware
=================================================

What:  One access log line per HTTP request, including requests whose
       handler raised.
How:   Times the downstream call and logs method, path, status, duration,
       request id and client IP on the `notekeeper.access` logger.
       An exception escaping the app is logged as a 500 and re-raised
       so the server's error handler still builds the response.
When:  Runs inside RequestIDMiddleware, so the request id is already set.

Log level follows the response status:
    5xx → ERROR, 4xx → WARNING, everything else → INFO

Request bodies are never logged; notes may contain anything.
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from notekeeper.middleware.request_id import request_id_var

logger = logging.getLogger("notekeeper.access")

# Probed every few seconds by orchestrators; not worth a log line each.
SKIPPED_PATHS = {"/health"}


def level_for_status(status: int) -> int:
    if status >= 500:
        return logging.ERROR
    if status >= 400:
        return logging.WARNING
    return logging.INFO


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Writes an access line for every request outside SKIPPED_PATHS."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        if request.url.path in SKIPPED_PATHS:
            return await call_next(request)

        started = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception:
            self._write(request, 500, started)
            raise
        self._write(request, response.status_code, started)
        return response

    @staticmethod
    def _write(request: Request, status: int, started: float) -> None:
        elapsed_ms = round((time.perf_counter() - started) * 1000, 2)
        entry = {
            "request_id": request_id_var.get(""),
            "method": request.method,
            "path": request.url.path,
            "status": status,
            "duration_ms": elapsed_ms,
            "client_ip": request.client.host if request.client else "unknown",
        }
        logger.log(
            level_for_status(status),
            "%(method)s %(path)s %(status)d %(duration_ms).1fms [%(request_id)s] from %(client_ip)s",
            entry,
            extra=entry,
        )
