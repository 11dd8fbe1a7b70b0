"""
RESTful Notes — FastAPI Application Factory
===========================================

What:  Creates and configures the FastAPI application instance.
How:   Factory pattern: create_app() returns a configured FastAPI instance.
Who:   Called by uvicorn to start the server (uvicorn restnotes.main:app).

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware Chain:                                  │
    │  ┌──────────┐ ┌─────────┐ ┌──────┐ ┌────────┐       │
    │  │ Req ID   │→│ Logging │→│ GZip │→│  CORS  │       │
    │  └──────────┘ └─────────┘ └──────┘ └────────┘       │
    │                                                     │
    │  Routes:                                            │
    │  GET /   /notes…   /tags…   /error   /health        │
    │                                                     │
    │  Exception Handlers:                                │
    │  Validation→400 │ Unresolved tag→400 │ NotFound→404 │
    │  Database→500   │ anything else→500                 │
    └─────────────────────────────────────────────────────┘

Lifecycle:
    Startup:  configure logging, create tables when CREATE_SCHEMA is on
    Shutdown: dispose the database engine
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from restnotes import __version__
from restnotes.config import settings
from restnotes.database import create_schema, dispose_engine
from restnotes.exceptions import (
    DatabaseError,
    NotFoundError,
    RestNotesError,
    UnresolvedReferenceError,
    ValidationError,
)
from restnotes.middleware.logging import RequestLoggingMiddleware
from restnotes.middleware.request_id import REQUEST_ID_HEADER, RequestIDMiddleware, request_id_var
from restnotes.routes import errors, health, index, notes, tags
from restnotes.routes.errors import error_response

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging() -> None:
    """
    Configure logging for the entire application.

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s

    Called once during startup, before anything else logs.
    """
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    setup_logging()
    logger.info("=" * 60)
    logger.info("RESTful Notes %s starting up...", __version__)

    if settings.create_schema:
        await create_schema()
        logger.info("Database schema ready")

    logger.info("Server ready at http://%s:%d", settings.backend_host, settings.backend_port)
    logger.info("API docs: http://%s:%d/docs", settings.backend_host, settings.backend_port)
    logger.info("=" * 60)

    yield

    logger.info("RESTful Notes shutting down...")
    await dispose_engine()
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def _validation_message(errors_: list) -> str:
    parts = []
    for err in errors_:
        location = ".".join(str(p) for p in err.get("loc", ()) if p != "body")
        parts.append(f"{location}: {err.get('msg')}" if location else str(err.get("msg")))
    return "; ".join(parts) or "Invalid request"


def register_exception_handlers(app: FastAPI) -> None:
    """
    Register global exception handlers for consistent error responses.

    Handler hierarchy:
        ValidationError          → 400 (blank field; violations in details)
        UnresolvedReferenceError → 400 (tag URI in the body names nothing)
        NotFoundError            → 404 (unknown id in the request URI)
        RequestValidationError   → 400 (malformed JSON, wrong types, bad UUID)
        HTTPException            → its own status (unknown route, bad method)
        DatabaseError            → 500 (generic message, details logged)
        RestNotesError / other   → 500

    Every body has the shape built by restnotes.routes.errors.error_content.
    Internals (stack traces, SQL) are logged, never returned.
    """

    @app.exception_handler(ValidationError)
    async def handle_validation_error(request: Request, exc: ValidationError):
        """Client sent a blank field; name every offending field."""
        logger.warning("[%s] Validation error: %s", request_id_var.get(""), exc.message)
        return error_response(400, exc.message, request.url.path, details=exc.context)

    # Handlers are looked up by MRO, so this one wins over NotFoundError
    @app.exception_handler(UnresolvedReferenceError)
    async def handle_unresolved_reference(request: Request, exc: UnresolvedReferenceError):
        logger.warning("[%s] Unresolved reference: %s", request_id_var.get(""), exc.uri)
        return error_response(400, exc.message, request.url.path)

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError):
        path = request.url.path
        return error_response(404, f"The resource '{path}' does not exist", path)

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(request: Request, exc: RequestValidationError):
        errors_ = exc.errors()
        logger.warning("[%s] Request validation failed: %s", request_id_var.get(""), errors_)
        return error_response(
            400,
            _validation_message(errors_),
            request.url.path,
            details={"errors": jsonable_encoder(errors_)},
        )

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(request: Request, exc: StarletteHTTPException):
        path = request.url.path
        message = exc.detail if isinstance(exc.detail, str) else str(exc.detail)
        if exc.status_code == 404:
            message = f"The resource '{path}' does not exist"
        response = error_response(exc.status_code, message, path)
        if exc.headers:
            response.headers.update(exc.headers)
        return response

    @app.exception_handler(DatabaseError)
    async def handle_database_error(request: Request, exc: DatabaseError):
        """Generic message to the user, details logged server-side."""
        logger.error(
            "[%s] Database error: %s | Context: %s", request_id_var.get(""), exc.message, exc.context
        )
        return error_response(
            500, "An internal error occurred. Please try again later.", request.url.path
        )

    @app.exception_handler(RestNotesError)
    async def handle_restnotes_error(request: Request, exc: RestNotesError):
        logger.error("[%s] Unhandled application error: %s", request_id_var.get(""), exc.message)
        return error_response(500, exc.message, request.url.path)

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        """Catch-all: full stack trace in the log, a generic message in the body."""
        logger.error(
            "[%s] Unexpected error: %s", request_id_var.get(""), str(exc), exc_info=True
        )
        return error_response(
            500,
            "An unexpected error occurred. Please try again or contact support.",
            request.url.path,
        )


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns: Fully configured FastAPI instance ready to receive requests.

    Tests build their own instance and override get_db_session, so nothing
    here opens a connection at import time.
    """
    app = FastAPI(
        title="RESTful Notes API",
        description=(
            "A hypermedia API for notes and tags. Start at `/` and follow the "
            "links; every representation is HAL (`application/hal+json`)."
        ),
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    # ── Register Middleware ───────────────────────────────────────────────
    # Last added runs first: RequestID → Logging → GZip → CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=[REQUEST_ID_HEADER, "Location"],
    )
    app.add_middleware(GZipMiddleware, minimum_size=500)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # ── Register Exception Handlers ───────────────────────────────────────
    register_exception_handlers(app)

    # ── Register Routes ───────────────────────────────────────────────────
    app.include_router(index.router)
    app.include_router(notes.router)
    app.include_router(tags.router)
    app.include_router(errors.router)
    app.include_router(health.router)

    return app


app = create_app()
