# Middleware package init
"""
NoteKeeper Backend - Middleware Package
========================================

Middleware Chain (order matters):
    Request → [Request ID] → [Logging] → [GZip] → [CORS] → Route Handler

    1. Request ID: set the correlation id before anything logs
    2. Logging: one access line per request, tagged with the id
    3. GZip / CORS: Starlette's stock middleware

Responses travel back through the chain in reverse, so the X-Request-ID
header is added last and the access line sees the final status code.
"""
