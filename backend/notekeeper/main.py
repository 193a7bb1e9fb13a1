"""
NoteKeeper Backend: FastAPI Application Factory
=================================================

What:  Creates and configures the FastAPI application instance.
Why:   Centralizes middleware registration, route mounting, error mapping
       and lifecycle management in one place.
How:   Factory pattern: create_app() returns a configured FastAPI instance
       owning its own NoteStore.
Who:   Called by the CLI, by uvicorn (uvicorn notekeeper.main:app) and by tests.

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware Chain:                                  │
    │  ┌──────────────────────────────┐ ┌──────────────┐  │
    │  │ Request context (ID + log)   │→│  CORS        │  │
    │  └──────────────────────────────┘ └──────────────┘  │
    │                                                     │
    │  Routes:                                            │
    │  ┌──────────────┐ ┌──────────────┐ ┌─────────────┐  │
    │  │ POST /write  │ │ /notes[/name]│ │ GET /health │  │
    │  └──────────────┘ └──────────────┘ └─────────────┘  │
    │                                                     │
    │  Exception Handlers:                                │
    │  ┌──────────────────────────────────────────────┐   │
    │  │ Validation→400 │ Conflict→400 │ NotFound→404 │   │
    │  └──────────────────────────────────────────────┘   │
    └─────────────────────────────────────────────────────┘

Lifecycle:
    Startup:  configure logging, create the cache directory, log addresses
    Shutdown: log how many notes are discarded (nothing is persisted)
"""

import logging
import sys
from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncGenerator, Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from notekeeper import __version__
from notekeeper.config import Settings, settings as default_settings
from notekeeper.exceptions import ConflictError, NotFoundError, ValidationError
from notekeeper.middleware.logging import RequestContextMiddleware
from notekeeper.middleware.request_id import RequestIDLogFilter, request_id_var
from notekeeper.routes import health, notes, pages, write
from notekeeper.services.note_store import NoteStore

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s [%(request_id)s]: %(message)s"


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging(level: str = "INFO") -> None:
    """
    Configure logging for the entire application.

    Format: %(asctime)s [%(levelname)s] %(name)s [%(request_id)s]: %(message)s
    When:   Once during app startup, before anything else logs.

    The handler carries RequestIDLogFilter, so every record (NoteStore's
    create/update/delete lines included) names the request behind it.
    """
    handler = logging.StreamHandler(sys.stdout)
    handler.addFilter(RequestIDLogFilter())

    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format=LOG_FORMAT,
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[handler],
        force=True,
    )

    # notekeeper.access already logs every request
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Startup and shutdown procedures; code after yield runs on shutdown."""
    cfg: Settings = app.state.settings

    # ── Startup ───────────────────────────────────────────────────────────
    setup_logging(cfg.log_level)
    logger.info("=" * 60)
    logger.info("NoteKeeper %s starting up...", __version__)

    cache = Path(cfg.cache_dir)
    cache.mkdir(parents=True, exist_ok=True)
    logger.info("Cache directory: %s", cache.resolve())

    logger.info("Server is running on http://%s:%d", cfg.host, cfg.port)
    logger.info("API docs: http://%s:%d/docs", cfg.host, cfg.port)
    logger.info("=" * 60)

    yield

    # ── Shutdown ──────────────────────────────────────────────────────────
    store: NoteStore = app.state.note_store
    logger.info("NoteKeeper shutting down, discarding %d notes", store.count())


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def _error_response(status_code: int, error: str, message: str, details=None) -> JSONResponse:
    content = {
        "error": error,
        "message": message,
        "request_id": request_id_var.get(""),
    }
    if details:
        content["details"] = details
    return JSONResponse(status_code=status_code, content=content)


def register_exception_handlers(app: FastAPI) -> None:
    """
    Register global exception handlers for consistent error responses.

    Handler mapping:
        ValidationError  → 400 Bad Request (missing name/text)
        ConflictError    → 400 Bad Request (name already taken)
        NotFoundError    → 404 Not Found
        Exception        → 500 Internal Server Error (unexpected errors)
    """

    @app.exception_handler(ValidationError)
    async def handle_validation_error(request: Request, exc: ValidationError):
        logger.warning("Validation error: %s", exc.message)
        return _error_response(400, "validation_error", exc.message, exc.context)

    @app.exception_handler(ConflictError)
    async def handle_conflict(request: Request, exc: ConflictError):
        logger.warning("Conflict: %s", exc.message)
        return _error_response(400, "conflict", exc.message, exc.context)

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError):
        return _error_response(404, "not_found", exc.message)

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        """Stack trace goes to the server log only, never to the client."""
        logger.error(
            "Unexpected error: %s",
            str(exc),
            exc_info=True,
        )
        return _error_response(
            500,
            "internal_server_error",
            "An unexpected error occurred. Please try again.",
        )


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        settings: Configuration for this app; the module-level defaults
                  (environment variables) when omitted.

    Returns:
        Fully configured FastAPI instance with an empty NoteStore.
    """
    cfg = settings or default_settings

    app = FastAPI(
        title="NoteKeeper API",
        description="Create, read, update, delete and list named text notes held in memory.",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )
    app.state.settings = cfg
    app.state.note_store = NoteStore()

    # ── Register Middleware ───────────────────────────────────────────────
    # Last added runs first: request context → CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=cfg.cors_origins_list,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )
    app.add_middleware(RequestContextMiddleware)

    # ── Register Exception Handlers ───────────────────────────────────────
    register_exception_handlers(app)

    # ── Register Routes ───────────────────────────────────────────────────
    app.include_router(write.router)
    app.include_router(notes.router)
    app.include_router(pages.router)
    app.include_router(health.router)

    return app


app = create_app()
