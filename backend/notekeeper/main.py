"""
NoteKeeper Backend - FastAPI Application Factory
==================================================

What:  Creates and configures the FastAPI application instance.
How:   Factory pattern: create_app() returns a configured FastAPI instance
       holding its own freshly seeded NoteStore.
Who:   Called by uvicorn (`uvicorn notekeeper.main:app`), by
       `python -m notekeeper`, and by tests that need an isolated app.

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware Chain:                                  │
    │  ┌──────────┐ ┌─────────┐ ┌──────┐ ┌──────┐         │
    │  │  Req ID  │→│ Logging │→│ GZip │→│ CORS │         │
    │  └──────────┘ └─────────┘ └──────┘ └──────┘         │
    │                                                     │
    │  Routes:                                            │
    │  ┌──────────────────┐ ┌───────────────┐ ┌────────┐  │
    │  │ GET/POST /note   │ │ /note/{id}    │ │/health │  │
    │  └──────────────────┘ └───────────────┘ └────────┘  │
    │                                                     │
    │  Exception Handlers:                                │
    │  ┌──────────────────────────────────────────────┐   │
    │  │ NotFoundError → 404 (empty) │ Exception → 500│   │
    │  └──────────────────────────────────────────────┘   │
    │                                                     │
    │  State: app.state.note_store (seeded NoteStore)     │
    └─────────────────────────────────────────────────────┘
"""

import logging
import sys
import time
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse, Response

from notekeeper import __version__
from notekeeper.config import Settings, settings as default_settings
from notekeeper.exceptions import NotFoundError
from notekeeper.middleware.logging import RequestLoggingMiddleware
from notekeeper.middleware.request_id import REQUEST_ID_HEADER, RequestIDMiddleware, request_id_var
from notekeeper.routes import health, notes
from notekeeper.store import NoteStore

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging(level: str = "INFO") -> None:
    """
    Configure the root logger for the whole application.

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s
    Output: stdout, so container runtimes capture it.
    """
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    # notekeeper.access already logs every request
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def register_exception_handlers(app: FastAPI) -> None:
    """
    Map application exceptions to HTTP responses.

    Handler hierarchy:
        NotFoundError        → 404 Not Found, empty body
        Exception (fallback) → 500 Internal Server Error, JSON body

    Malformed request bodies never reach these handlers; FastAPI rejects
    them with its own 422 response.
    """

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError):
        """No note echoed back, no error document: status only."""
        rid = request_id_var.get("")
        logger.info("[%s] %s", rid, exc.message)
        return Response(status_code=404)

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        """
        Stack trace goes to the log, never to the client.

        Runs outside the middleware stack, so the request id header is set
        here; RequestIDMiddleware never sees this response.
        """
        rid = request_id_var.get("")
        logger.error("[%s] Unexpected error: %s", rid, str(exc), exc_info=True)
        return JSONResponse(
            status_code=500,
            content={
                "error": "internal_server_error",
                "message": "An unexpected error occurred.",
                "request_id": rid,
            },
            headers={REQUEST_ID_HEADER: rid} if rid else None,
        )


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app(config: Optional[Settings] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        config: Settings to build the app with. Defaults to the module-level
                `settings` singleton read from the environment.

    Returns:
        A FastAPI instance with its own seeded NoteStore on
        `app.state.note_store`. Separate calls never share notes.
    """
    config = config or default_settings

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        setup_logging(config.log_level)
        logger.info("NoteKeeper %s starting up with %d notes", __version__, len(app.state.note_store))
        logger.info("Serving notes at %s/note", config.api_prefix)
        yield
        logger.info("NoteKeeper shutting down; %d notes discarded", len(app.state.note_store))

    app = FastAPI(
        title="NoteKeeper API",
        description="In-memory note CRUD: list, create, fetch, patch and delete notes.",
        version=__version__,
        lifespan=lifespan,
    )

    # ── Note Store ────────────────────────────────────────────────────────
    # Seeded here (not in lifespan) so test clients that skip lifespan
    # events still see the placeholder notes.
    store = NoteStore()
    store.seed(config.seed_count, config.seed_title)
    app.state.note_store = store
    app.state.started_at = time.time()

    # ── Register Middleware ───────────────────────────────────────────────
    # Last added runs first: RequestID → Logging → GZip → CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )
    app.add_middleware(GZipMiddleware, minimum_size=500)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # ── Register Exception Handlers ───────────────────────────────────────
    register_exception_handlers(app)

    # ── Register Routes ───────────────────────────────────────────────────
    app.include_router(notes.router, prefix=config.api_prefix)
    app.include_router(health.router)

    return app


# uvicorn imports `notekeeper.main:app`
app = create_app()
