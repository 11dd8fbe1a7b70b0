"""
RESTful Notes — Custom Exception Hierarchy
==========================================

What:  Application-specific exceptions for the different error scenarios.
How:   Each exception carries a message and an optional context dict.
       Global exception handlers (registered in main.py) catch these and
       return the uniform JSON error body with the matching status code.
Who:   Raised by services and repositories; caught by global handlers.

Exception Hierarchy:
    RestNotesError (base)
    ├── ValidationError              → 400 Bad Request
    ├── NotFoundError                → 404 Not Found
    │   └── UnresolvedReferenceError → 400 Bad Request
    └── DatabaseError                → 500 Internal Server Error
"""

from typing import Any, Dict, List, Optional


class RestNotesError(Exception):
    """
    Base exception for all application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged, returned only where noted)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(RestNotesError):
    """
    Raised when client input violates one or more field constraints.

    HTTP:    400 Bad Request

    The violations are the structured list produced by restnotes.validation;
    each one names the field, the constraint, and a message.

    Example response:
        {
            "error": "Bad Request",
            "message": "title: must not be blank",
            "details": {"violations": [
                {"field": "title", "constraint": "NotBlank", "message": "must not be blank"}
            ]},
            ...
        }
    """

    def __init__(
        self,
        violations: Optional[List[Any]] = None,
        message: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        self.violations = list(violations or [])
        if message is None:
            message = "; ".join(
                f"{v.field}: {v.message}" for v in self.violations
            ) or "Validation failed"
        ctx = context or {}
        if self.violations:
            ctx["violations"] = [v.model_dump() for v in self.violations]
        super().__init__(message=message, context=ctx)


class NotFoundError(RestNotesError):
    """
    Raised when a requested resource does not exist.

    When:    GET/PATCH/DELETE on /notes/{id} or /tags/{id} with an unknown id.
    HTTP:    404 Not Found

    The response message names the request path, not the id, so the handler
    rewrites it as "The resource '<path>' does not exist".
    """

    def __init__(
        self,
        resource: str = "resource",
        resource_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"The requested {resource} was not found"
        if resource_id:
            message = f"{resource} with ID '{resource_id}' was not found"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)
        self.resource = resource
        self.resource_id = resource_id


class UnresolvedReferenceError(NotFoundError):
    """
    Raised when a request body references a related resource that does not exist.

    When:    A note is created or patched with a tag URI that does not
             resolve to a stored tag (unknown id, wrong collection, garbage).
    HTTP:    400 Bad Request. The referenced resource is missing, but the
             request URI itself is fine, so the client has to fix its payload.
    """

    def __init__(
        self,
        uri: str,
        resource: str = "tag",
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["uri"] = uri
        super().__init__(resource=resource, context=ctx)
        self.uri = uri
        self.message = f"The {resource} '{uri}' does not exist"
        self.args = (self.message,)


class DatabaseError(RestNotesError):
    """
    Raised when database operations fail unexpectedly.

    HTTP:    500 Internal Server Error

    The message returned to the client is always generic; the original
    exception type is kept in context and logged server-side only.
    """

    def __init__(
        self,
        message: str = "A database error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
