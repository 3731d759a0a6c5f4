"""
Local Library Catalog — FastAPI Application Factory
======================================================

What:  Creates and configures the FastAPI application instance.
Why:   Centralizes app configuration, middleware registration, route mounting,
       and lifecycle management in one place.
How:   Factory pattern: create_app() returns a configured FastAPI instance.
Who:   Called by uvicorn to start the server (uvicorn app.main:app).

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware Chain:                                  │
    │  ┌──────────┐ ┌─────────────────┐ ┌──────────────┐  │
    │  │  Req ID  │→│  Access Logging │→│    GZip      │  │
    │  └──────────┘ └─────────────────┘ └──────────────┘  │
    │                                                     │
    │  Routes:                                            │
    │  ┌──────────────┐ ┌───────────────┐ ┌────────────┐  │
    │  │ GET /        │ │ /catalog/...  │ │ GET /health│  │
    │  └──────────────┘ └───────────────┘ └────────────┘  │
    │                                                     │
    │  Exception Handlers (render error.html):            │
    │  ┌──────────────────────────────────────────────┐   │
    │  │ Validation→400 │ NotFound→404 │ DB/other→500 │   │
    │  └──────────────────────────────────────────────┘   │
    └─────────────────────────────────────────────────────┘
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import HTMLResponse, RedirectResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app import __version__
from app.config import settings
from app.database import dispose_engine
from app.exceptions import (
    CatalogError,
    DatabaseError,
    NotFoundError,
    ValidationError,
)
from app.middleware.logging import RequestLoggingMiddleware
from app.middleware.request_id import RequestIDMiddleware, request_id_var
from app.routes import catalog, health
from app.templating import templates

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging() -> None:
    """
    Configure logging for the entire application.

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s
    Called once during app startup, before anything else logs.
    """
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[
            logging.StreamHandler(sys.stdout),  # Docker captures stdout
        ],
        force=True,
    )

    # These log every statement / access at INFO
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Startup: configure logging and announce the server.
    Shutdown: dispose the database engine (close all pooled connections).
    """
    setup_logging()
    logger.info("=" * 60)
    logger.info("Local Library Catalog %s starting up...", __version__)
    logger.info("Server ready at http://%s:%d/catalog/", settings.backend_host, settings.backend_port)
    logger.info("=" * 60)

    yield

    logger.info("Local Library Catalog shutting down...")
    await dispose_engine()
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def render_error(request: Request, status_code: int, message: str) -> HTMLResponse:
    """The single error page: message, status and the request id for support."""
    return templates.TemplateResponse(
        request,
        "error.html",
        {
            "title": "Error",
            "message": message,
            "status": status_code,
            "request_id": request_id_var.get(""),
        },
        status_code=status_code,
    )


def register_exception_handlers(app: FastAPI) -> None:
    """
    Map exception types to status codes and the rendered error page.

    Handler hierarchy:
        ValidationError         → 400 Bad Request
        NotFoundError           → 404 Not Found
        HTTPException           → its own status (unknown paths, 405, ...)
        DatabaseError           → 500 Internal Server Error (generic text)
        CatalogError (base)     → 500 Internal Server Error
        Exception (fallback)    → 500 Internal Server Error

    The page never shows stack traces or SQL; details are logged server-side.
    """

    @app.exception_handler(ValidationError)
    async def handle_validation_error(request: Request, exc: ValidationError):
        rid = request_id_var.get("")
        logger.warning("[%s] Validation error: %s", rid, exc.message)
        return render_error(request, 400, exc.message)

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError):
        rid = request_id_var.get("")
        logger.info("[%s] Not found: %s %s", rid, exc.resource, exc.resource_id)
        return render_error(request, 404, exc.message)

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(request: Request, exc: StarletteHTTPException):
        message = "Not Found" if exc.status_code == 404 else str(exc.detail)
        return render_error(request, exc.status_code, message)

    @app.exception_handler(DatabaseError)
    async def handle_database_error(request: Request, exc: DatabaseError):
        rid = request_id_var.get("")
        logger.error("[%s] Database error: %s | Context: %s", rid, exc.message, exc.context)
        return render_error(request, 500, "An internal error occurred. Please try again later.")

    @app.exception_handler(CatalogError)
    async def handle_catalog_error(request: Request, exc: CatalogError):
        rid = request_id_var.get("")
        logger.error("[%s] Application error: %s | Context: %s", rid, exc.message, exc.context)
        return render_error(request, 500, exc.message)

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        rid = request_id_var.get("")
        logger.error("[%s] Unexpected error: %s", rid, str(exc), exc_info=True)
        return render_error(request, 500, "An unexpected error occurred.")


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns a fresh instance each call, so tests can build an app with their
    own dependency overrides.
    """
    app = FastAPI(
        title="Local Library Catalog",
        description="Server-rendered catalog of authors, books, genres and book copies.",
        version=__version__,
        docs_url=None,
        redoc_url=None,
        lifespan=lifespan,
    )

    # ── Register Middleware ───────────────────────────────────────────────
    # Executes in REVERSE order of addition: RequestID → Logging → GZip
    app.add_middleware(GZipMiddleware, minimum_size=500)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # ── Register Exception Handlers ───────────────────────────────────────
    register_exception_handlers(app)

    # ── Register Routes ───────────────────────────────────────────────────
    @app.get("/", include_in_schema=False)
    async def root() -> RedirectResponse:
        return RedirectResponse("/catalog/", status_code=302)

    app.include_router(catalog.router)
    app.include_router(health.router)

    return app


# uvicorn expects `app.main:app` to be importable
app = create_app()
