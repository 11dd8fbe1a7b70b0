"""
RESTful Notes — API Routes Package
==================================

What:  HTTP route handlers that accept requests and return responses.

Route Inventory:
    - index.py:   GET  /                      (entry point links)
    - notes.py:   GET/POST        /notes
                  GET/PATCH/DELETE /notes/{id}
                  GET             /notes/{id}/tags
    - tags.py:    GET/POST        /tags
                  GET/PATCH/DELETE /tags/{id}
                  GET             /tags/{id}/notes
    - errors.py:  GET  /error                 (uniform error body)
    - health.py:  GET  /health                (service health check)

Design Principle:
    Routes stay thin: read the request, call a service, hand the entity to
    an assembler, pick the status code and headers.
"""

from fastapi.responses import JSONResponse


class HALJSONResponse(JSONResponse):
    """JSON response advertised as application/hal+json."""

    media_type = "application/hal+json"
