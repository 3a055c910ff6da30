"""
Notes API — FastAPI Application Factory
========================================

What:  Creates and configures the FastAPI application instance.
How:   create_app() wires settings, the note store, the note service,
       middleware, exception handlers and routers into one FastAPI app.
Who:   uvicorn imports `notes_api.main:app`; tests call create_app() to get
       a fresh app with its own empty store.

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware Chain:                                  │
    │  ┌──────────┐ ┌─────────────────┐ ┌──────────────┐  │
    │  │  Req ID  │→│  Logging        │→│  CORS        │  │
    │  └──────────┘ └─────────────────┘ └──────────────┘  │
    │                                                     │
    │  Routes:                                            │
    │  ┌──────────────┐ ┌───────────────┐ ┌────────────┐  │
    │  │ /notes/ CRUD │ │ GET /         │ │ GET /health│  │
    │  └──────────────┘ └───────────────┘ └────────────┘  │
    │                                                     │
    │  app.state: settings, note_store, note_service      │
    │                                                     │
    │  Exception Handlers:                                │
    │  ┌──────────────────────────────────────────────┐   │
    │  │ Validation→400 │ Malformed→400 │ NotFound→404│   │
    │  └──────────────────────────────────────────────┘   │
    └─────────────────────────────────────────────────────┘

Lifecycle:
    Startup:  configure logging, log the listen address and docs URL
    Shutdown: drop every note held in memory, log shutdown
"""

import logging
import sys
import time
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from notes_api import __version__
from notes_api.config import Settings, settings as default_settings
from notes_api.exceptions import (
    MalformedRequestError,
    NotesAPIError,
    NotFoundError,
    ValidationError,
)
from notes_api.middleware.logging import RequestLoggingMiddleware
from notes_api.middleware.request_id import (
    REQUEST_ID_HEADER,
    RequestIDMiddleware,
    internal_error_response,
    request_id_var,
)
from notes_api.routes import health, notes
from notes_api.services.note_service import Clock, NoteService
from notes_api.storage.note_store import InMemoryNoteStore, NoteStore

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging(level: str = "INFO") -> None:
    """
    Configure the root logger for the whole process.

    Format: 2026-01-15T12:00:00 [INFO] notes_api.services.note_service: Note created: ...
    """
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )
    # The access middleware already logs every request.
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    cfg: Settings = app.state.settings

    setup_logging(cfg.log_level)
    logger.info("=" * 60)
    logger.info("%s %s starting up...", cfg.app_name, __version__)
    logger.info("Server ready at http://%s:%d", cfg.backend_host, cfg.backend_port)
    logger.info("API docs: http://%s:%d%s", cfg.backend_host, cfg.backend_port, cfg.docs_url)
    logger.info("=" * 60)

    yield

    logger.info("%s shutting down...", cfg.app_name)
    # In-memory only: notes do not outlive the process.
    dropped = app.state.note_store.count()
    app.state.note_store.clear()
    logger.info("Shutdown complete. Discarded %d notes.", dropped)


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def register_exception_handlers(app: FastAPI) -> None:
    """
    Map exception types to HTTP status codes and response bodies.

    Handler hierarchy:
        ValidationError          → 400 {error, message, errors, request_id}
        MalformedRequestError    → 400 {error, message, details, request_id}
        RequestValidationError   → 400, same body as MalformedRequestError
        NotFoundError            → 404 {error: "Note not found", request_id}
        NotesAPIError (base)     → 500
        Exception (fallback)     → 500, traceback logged server-side only;
                                   RequestIDMiddleware answers first for
                                   anything raised beneath it
    """

    @app.exception_handler(ValidationError)
    async def handle_validation_error(request: Request, exc: ValidationError):
        rid = request_id_var.get("")
        logger.warning("[%s] Validation error on fields: %s", rid, ", ".join(sorted(exc.errors)))
        return JSONResponse(
            status_code=400,
            content={
                "error": "validation_error",
                "message": exc.message,
                "errors": exc.errors,
                "request_id": rid,
            },
        )

    @app.exception_handler(MalformedRequestError)
    async def handle_malformed_request(request: Request, exc: MalformedRequestError):
        rid = request_id_var.get("")
        logger.warning("[%s] Malformed request: %s", rid, exc.message)
        return JSONResponse(
            status_code=400,
            content={
                "error": "malformed_request",
                "message": exc.message,
                "details": exc.details,
                "request_id": rid,
            },
        )

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation_error(request: Request, exc: RequestValidationError):
        """Unparseable JSON, wrongly typed fields or a non-UUID path id."""
        details = [
            {
                "loc": [str(part) for part in error.get("loc", ())],
                "msg": error.get("msg", ""),
                "type": error.get("type", ""),
            }
            for error in exc.errors()
        ]
        return await handle_malformed_request(
            request,
            MalformedRequestError(message="The request could not be parsed.", details=details),
        )

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError):
        rid = request_id_var.get("")
        return JSONResponse(
            status_code=404,
            content={
                "error": exc.message,
                "request_id": rid,
            },
        )

    @app.exception_handler(NotesAPIError)
    async def handle_app_error(request: Request, exc: NotesAPIError):
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
        rid = request_id_var.get("")
        logger.error("[%s] Unexpected error: %s", rid, str(exc), exc_info=True)
        return internal_error_response(rid)


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app(
    settings: Optional[Settings] = None,
    store: Optional[NoteStore] = None,
    clock: Optional[Clock] = None,
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        settings: Configuration; defaults to the environment-loaded singleton.
        store:    Note backend; defaults to a new InMemoryNoteStore.
        clock:    UTC time source for NoteService; defaults to the wall clock.

    Returns:
        FastAPI app whose note service is reachable via app.state.note_service.
    """
    cfg = settings or default_settings
    note_store = store if store is not None else InMemoryNoteStore(lock_stripes=cfg.notes_lock_stripes)

    app = FastAPI(
        title=cfg.app_name,
        description="A simple API to manage personal notes (create, list, get, update, delete).",
        version=__version__,
        docs_url=cfg.docs_url,
        openapi_tags=[
            {"name": "Notes", "description": "CRUD operations for notes"},
            {"name": "Health", "description": "Service health checks"},
        ],
        lifespan=lifespan,
    )

    app.state.settings = cfg
    app.state.note_store = note_store
    app.state.note_service = NoteService(note_store, clock=clock)
    app.state.started_at = time.time()

    # ── Register Middleware ───────────────────────────────────────────────
    # Last added runs first: RequestID → Logging → CORS.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=cfg.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=[REQUEST_ID_HEADER, "Location"],
    )
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    register_exception_handlers(app)

    app.include_router(health.router)
    app.include_router(notes.router)

    return app


app = create_app()
