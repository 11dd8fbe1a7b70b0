"""
RESTful Notes — Middleware Package
==================================

What:  Cross-cutting concerns applied to every request.

Middleware Chain (order matters!):
    Request → [Request ID] → [Logging] → [GZip] → [CORS] → Route Handler

    1. Request ID: assign a correlation ID before anything logs
    2. Logging: one access line per request, tagged with that ID
    3. GZip / CORS: provided by Starlette

    Responses travel back through the same chain in reverse, so the
    request ID header is on every response, error bodies included.
"""
