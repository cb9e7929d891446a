"""
MemoNotes Backend — FastAPI Application Factory
==================================================

What:  Creates and configures the FastAPI application instance.
How:   Factory pattern: create_app() returns a configured FastAPI instance
       owning a fresh NoteStore.
Who:   memonotes.cli (console script), uvicorn
       (`uvicorn memonotes.main:create_app --factory`),
       and the test suite.

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
    │  ┌──────────────┐ ┌──────────────┐ ┌─────────────┐  │
    │  │ /notes /write│ │ / /Upload... │ │ GET /health │  │
    │  └──────────────┘ └──────────────┘ └─────────────┘  │
    │                                                     │
    │  app.state.note_store ← one NoteStore per app       │
    └─────────────────────────────────────────────────────┘

Lifecycle:
    Startup:  configure logging, log bind address and cache directory
    Shutdown: log the number of notes being discarded
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from memonotes import __version__
from memonotes.config import Settings
from memonotes.exceptions import (
    AlreadyExistsError,
    MemoNotesError,
    NotFoundError,
    ValidationError,
)
from memonotes.middleware.logging import RequestLoggingMiddleware
from memonotes.middleware.request_id import RequestIDMiddleware, request_id_var
from memonotes.routes import health, notes, pages
from memonotes.services.note_store import NoteStore

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging(level: str = "INFO") -> None:
    """
    Configure logging for the entire application.

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s
    Output goes to stdout. Calling it again replaces the previous config.
    """
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    # The access middleware already logs every request
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Log startup configuration and shutdown state.

    The cache directory is reported but never created, read, or written:
    notes are kept in memory only.
    """
    cfg: Settings = app.state.settings

    setup_logging(cfg.log_level)
    logger.info("Server started at http://%s:%d", cfg.host, cfg.port)
    logger.info("Cache directory: %s", cfg.cache)
    logger.info("API docs: http://%s:%d/docs", cfg.host, cfg.port)

    yield

    logger.info(
        "Shutting down; discarding %d in-memory note(s)",
        len(app.state.note_store),
    )


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def _error_response(status_code: int, error: str, exc: MemoNotesError) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={
            "error": error,
            "message": exc.message,
            "details": exc.context,
            "request_id": request_id_var.get(""),
        },
    )


def register_exception_handlers(app: FastAPI) -> None:
    """
    Register global exception handlers for consistent error responses.

    Handler hierarchy:
        ValidationError         → 400 Bad Request
        AlreadyExistsError      → 400 Bad Request
        NotFoundError           → 404 Not Found
        MemoNotesError (base)   → 500 Internal Server Error
        Exception (fallback)    → 500 Internal Server Error

    5xx bodies never carry internal details; those are logged server-side.
    """

    @app.exception_handler(ValidationError)
    async def handle_validation_error(request: Request, exc: ValidationError):
        logger.warning("[%s] Validation error: %s", request_id_var.get(""), exc.message)
        return _error_response(400, "validation_error", exc)

    @app.exception_handler(AlreadyExistsError)
    async def handle_already_exists(request: Request, exc: AlreadyExistsError):
        logger.warning("[%s] Duplicate note: %s", request_id_var.get(""), exc.message)
        return _error_response(400, "already_exists", exc)

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError):
        return _error_response(404, "not_found", exc)

    @app.exception_handler(MemoNotesError)
    async def handle_app_error(request: Request, exc: MemoNotesError):
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
        return JSONResponse(
            status_code=500,
            content={
                "error": "internal_server_error",
                "message": "An unexpected error occurred.",
                "request_id": rid,
            },
        )


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app(
    settings: Optional[Settings] = None,
    store: Optional[NoteStore] = None,
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        settings: Configuration to use (defaults to environment-derived settings)
        store:    NoteStore to serve (defaults to a new, empty store)

    Returns:
        Configured FastAPI instance. Each call yields an independent store,
        so tests can build isolated apps.
    """
    cfg = settings if settings is not None else Settings()

    app = FastAPI(
        title="MemoNotes API",
        description=(
            "Create, read, update, delete and list short named text notes. "
            "Notes are held in memory and lost when the server restarts."
        ),
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    app.state.settings = cfg
    app.state.note_store = store if store is not None else NoteStore()

    # ── Register Middleware ───────────────────────────────────────────────
    # Executed in reverse order of addition: RequestID → Logging → CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=cfg.cors_origins_list,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # ── Register Exception Handlers ───────────────────────────────────────
    register_exception_handlers(app)

    # ── Register Routes ───────────────────────────────────────────────────
    app.include_router(notes.router)
    app.include_router(pages.router)
    app.include_router(health.router)

    return app
