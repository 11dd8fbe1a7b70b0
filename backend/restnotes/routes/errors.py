"""
RESTful Notes — Error Body and Error Route
==========================================

What:  Builds the uniform error body used by every exception handler, and
       exposes GET /error so clients can see (and tests can check) its shape.

Body fields:
    error      HTTP reason phrase for the status ("Bad Request")
    message    human-readable cause
    path       request path that failed
    status     HTTP status code
    timestamp  epoch milliseconds
    details    optional structured context (e.g. violations)
    request_id correlation ID from RequestIDMiddleware
"""

import time
from http import HTTPStatus
from typing import Any, Dict, Optional

from fastapi import APIRouter, Query
from fastapi.responses import JSONResponse

from restnotes.middleware.request_id import request_id_var
from restnotes.schemas.hal import ErrorResponse

router = APIRouter(tags=["Errors"])


def reason_phrase(status_code: int) -> str:
    try:
        return HTTPStatus(status_code).phrase
    except ValueError:
        return "Error"


def error_content(
    status_code: int,
    message: str,
    path: str,
    details: Optional[Dict[str, Any]] = None,
) -> Dict[str, Any]:
    body = ErrorResponse(
        error=reason_phrase(status_code),
        message=message,
        path=path,
        status=status_code,
        timestamp=int(time.time() * 1000),
        details=details,
        request_id=request_id_var.get(""),
    )
    return body.model_dump(exclude_none=True)


def error_response(
    status_code: int,
    message: str,
    path: str,
    details: Optional[Dict[str, Any]] = None,
) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=error_content(status_code, message, path, details),
    )


@router.get(
    "/error",
    response_class=JSONResponse,
    responses={
        400: {"description": "Error body for a 4xx status", "model": ErrorResponse},
        500: {"description": "Error body for a 5xx status", "model": ErrorResponse},
    },
    summary="Describe the error body",
    description=(
        "Answers with the given status and an error body built from the query "
        "parameters. Every failed request answers with a body of this shape."
    ),
)
async def describe_error(
    status: int = Query(default=400, ge=400, le=599, description="HTTP status code"),
    path: str = Query(default="/", description="Path the failed request was made to"),
    message: str = Query(default="Bad Request", description="Description of the cause"),
) -> JSONResponse:
    return error_response(status, message, path)
