"""
Notes App Backend — FastAPI Application Factory
=================================================

What:  Creates and configures the FastAPI application instance.
Why:   Centralizes configuration, wiring of the note store, middleware,
       exception handlers and routes in one place.
How:   Factory pattern: create_app() returns a configured FastAPI instance.
Who:   uvicorn (`uvicorn notes_app.main:app`) or the `notes-app` console script.

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware:  Request ID → Logging → CORS           │
    │                                                     │
    │  Routes:      GET /   ·   /api/notes CRUD           │
    │                                                     │
    │  Exception Handlers:                                │
    │  Validation→400 │ NotFound→404 │ Conflict→409 │ 500 │
    │                                                     │
    │  app.state.note_service → NoteService → Repository  │
    └─────────────────────────────────────────────────────┘

Lifecycle:
    Startup:
    1. Initialize logging
    2. Seed example notes (development environment only)
    Shutdown:
    1. Log shutdown (nothing to release: the store is in memory)
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Dict, List, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from notes_app import __version__
from notes_app.config import Settings, settings
from notes_app.exceptions import ConflictError, NotesAppError, NotFoundError, ValidationError
from notes_app.middleware.logging import RequestLoggingMiddleware
from notes_app.middleware.request_id import RequestIDMiddleware, request_id_var
from notes_app.repositories import InMemoryNoteRepository, NoteRepository
from notes_app.routes import health, notes
from notes_app.services.note_service import NoteService

logger = logging.getLogger(__name__)

VALIDATION_MESSAGE = "One or more validation errors occurred."


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging(app_settings: Settings = settings) -> None:
    """
    Configure logging for the entire application.

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s to stdout.
    Called once during app startup.
    """
    logging.basicConfig(
        level=getattr(logging, app_settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[
            logging.StreamHandler(sys.stdout),
        ],
        force=True,
    )

    # RequestLoggingMiddleware already writes one line per request
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Startup: logging and development seed data. Shutdown: log only."""
    app_settings: Settings = app.state.settings

    setup_logging(app_settings)
    logger.info("=" * 60)
    logger.info("%s starting up (environment=%s)...", app_settings.app_name, app_settings.environment)

    if app_settings.is_development:
        seeded = await app.state.note_service.seed_example_notes()
        if seeded:
            logger.info("Development seed: %d example notes added", seeded)

    logger.info("Server ready at http://%s:%d", app_settings.backend_host, app_settings.backend_port)
    logger.info("API docs: http://%s:%d/docs", app_settings.backend_host, app_settings.backend_port)
    logger.info("=" * 60)

    yield

    logger.info("%s shutting down...", app_settings.app_name)


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def _request_validation_errors(exc: RequestValidationError) -> Dict[str, List[str]]:
    """
    Group FastAPI/Pydantic errors by request field.

    loc looks like ("body", "title"); the first element is the request part.
    Problems with the body as a whole (missing, not JSON) are keyed "body".
    """
    errors: Dict[str, List[str]] = {}
    for err in exc.errors():
        loc = [str(part) for part in err.get("loc", ())[1:]]
        field = "body" if err.get("type") == "json_invalid" or not loc else ".".join(loc)
        message = str(err.get("msg", "Invalid value")).removeprefix("Value error, ")
        errors.setdefault(field, []).append(message)
    return errors


def _validation_response(errors: Dict[str, List[str]]) -> JSONResponse:
    return JSONResponse(
        status_code=400,
        content={
            "error": "validation_error",
            "message": VALIDATION_MESSAGE,
            "errors": errors,
            "request_id": request_id_var.get(""),
        },
    )


def register_exception_handlers(app: FastAPI) -> None:
    """
    Register global exception handlers for consistent error responses.

    Handler hierarchy:
        RequestValidationError  → 400 Bad Request (FastAPI body validation)
        ValidationError         → 400 Bad Request
        NotFoundError           → 404 Not Found
        ConflictError           → 409 Conflict
        NotesAppError (base)    → 500 Internal Server Error
        Exception (fallback)    → 500 Internal Server Error

    Responses never include stack traces or exception context; those are
    logged server-side.
    """

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation_error(request: Request, exc: RequestValidationError):
        errors = _request_validation_errors(exc)
        logger.warning("[%s] Request validation failed: %s", request_id_var.get(""), errors)
        return _validation_response(errors)

    @app.exception_handler(ValidationError)
    async def handle_validation_error(request: Request, exc: ValidationError):
        logger.warning("[%s] Validation error: %s", request_id_var.get(""), exc.message)
        return _validation_response(exc.errors)

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError):
        return JSONResponse(
            status_code=404,
            content={
                "error": "not_found",
                "message": exc.message,
                "request_id": request_id_var.get(""),
            },
        )

    @app.exception_handler(ConflictError)
    async def handle_conflict(request: Request, exc: ConflictError):
        rid = request_id_var.get("")
        logger.error("[%s] Conflict: %s | Context: %s", rid, exc.message, exc.context)
        return JSONResponse(
            status_code=409,
            content={
                "error": "conflict",
                "message": exc.message,
                "request_id": rid,
            },
        )

    @app.exception_handler(NotesAppError)
    async def handle_app_error(request: Request, exc: NotesAppError):
        rid = request_id_var.get("")
        logger.error("[%s] Application error: %s | Context: %s", rid, exc.message, exc.context)
        return JSONResponse(
            status_code=500,
            content={
                "error": "server_error",
                "message": "An internal error occurred. Please try again later.",
                "request_id": rid,
            },
        )

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        """Catch-all: generic 500 for the client, full stack trace in the log."""
        rid = request_id_var.get("")
        logger.error("[%s] Unexpected error: %s", rid, str(exc), exc_info=True)
        return JSONResponse(
            status_code=500,
            content={
                "error": "internal_server_error",
                "message": "An unexpected error occurred. Please try again or contact support.",
                "request_id": rid,
            },
        )


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app(
    app_settings: Optional[Settings] = None,
    repository: Optional[NoteRepository] = None,
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        app_settings: Settings to use (defaults to the module-level singleton)
        repository:   Note store to serve from (defaults to a fresh
                      InMemoryNoteRepository). Any NoteRepository works.

    The store and the NoteService wrapping it are built here, once, and
    attached to app.state; nothing else holds a reference to them.
    """
    app_settings = app_settings or settings

    app = FastAPI(
        title=app_settings.app_name,
        description="REST API for managing personal notes.",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    app.state.settings = app_settings
    app.state.note_service = NoteService(repository or InMemoryNoteRepository())

    # ── Register Middleware ───────────────────────────────────────────────
    # Executes in REVERSE order of addition: RequestID → Logging → CORS

    # "*" echoes the caller's origin instead of sending a literal "*",
    # which browsers reject on credentialed requests
    cors_kwargs = (
        {"allow_origin_regex": ".*"}
        if app_settings.cors_allow_any_origin
        else {"allow_origins": app_settings.cors_origins_list}
    )
    app.add_middleware(
        CORSMiddleware,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID", "Location"],
        **cors_kwargs,
    )

    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # ── Register Exception Handlers ───────────────────────────────────────
    register_exception_handlers(app)

    # ── Register Routes ───────────────────────────────────────────────────
    app.include_router(health.router)
    app.include_router(notes.router)

    return app


# uvicorn expects `notes_app.main:app` to be importable
app = create_app()


def run() -> None:
    """Console-script entrypoint: serve `app` with uvicorn on the configured host/port."""
    import uvicorn

    uvicorn.run(
        "notes_app.main:app",
        host=settings.backend_host,
        port=settings.backend_port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
