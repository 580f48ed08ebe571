"""
LinkVault Backend — FastAPI Application Factory
=================================================

What:  Creates and configures the FastAPI application instance.
How:   Factory pattern: create_app() returns a configured FastAPI instance;
       run() starts uvicorn on the configured host and port.
Who:   `uvicorn linkvault.main:app` or the `linkvault` console script.

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware Chain:                                  │
    │  ┌──────────┐ ┌─────────────────┐ ┌──────────────┐  │
    │  │  Req ID  │→│  Logging        │→│  GZip        │  │
    │  └──────────┘ └─────────────────┘ └──────────────┘  │
    │                                                     │
    │  Routes (matched in this order):                    │
    │  /api/categories  /api/bookmarks  /api/auth/check   │
    │  /  (index)       anything else → static files      │
    │                                                     │
    │  Exception Handlers:                                │
    │  Validation→400 │ Auth→401 │ 404/405 text │ DB→500  │
    └─────────────────────────────────────────────────────┘

Lifecycle:
    Startup:  logging → config validation → create tables → log paths
    Shutdown: dispose database engine
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from linkvault import __version__
from linkvault.config import CONFIG_PATH, settings
from linkvault.database import dispose_engine, init_db
from linkvault.exceptions import (
    AuthorizationError,
    DatabaseError,
    NotFoundError,
    ValidationError,
)
from linkvault.middleware.logging import RequestLoggingMiddleware
from linkvault.middleware.request_id import RequestIDMiddleware, request_id_var
from linkvault.routes import auth, bookmarks, categories, pages

logger = logging.getLogger(__name__)

NOT_FOUND_TEXT = "404 page not found"
METHOD_NOT_ALLOWED_TEXT = "Method not allowed"


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging() -> None:
    """
    Configure logging for the entire application.

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s
    Called once during startup, before any other initialization.
    """
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    # Reduce noise from third-party libraries
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Run startup before serving requests and cleanup after the last one."""
    # ── Startup ───────────────────────────────────────────────────────────
    setup_logging()
    logger.info("LinkVault %s starting up...", __version__)

    try:
        settings.validate_for_startup()
    except ValueError as e:
        # Keep serving: reads still work, writes are refused by the auth gate
        logger.error("%s", str(e))

    await init_db()

    logger.info("Config file: %s", CONFIG_PATH.resolve())
    logger.info("Database file: %s", settings.database_path)
    logger.info("Server ready at http://%s:%d", settings.server.host, settings.server.port)

    yield

    # ── Shutdown ──────────────────────────────────────────────────────────
    logger.info("LinkVault shutting down...")
    await dispose_engine()
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def register_exception_handlers(app: FastAPI) -> None:
    """
    Map exception types to status codes and response bodies.

    Handler hierarchy:
        ValidationError          → 400 {"error": message}
        RequestValidationError   → 400 {"error": "Invalid request body"}
        AuthorizationError       → 401 {"error": "Unauthorized"}
        NotFoundError            → 404 text
        HTTPException (routing)  → 404 / 405 text
        DatabaseError            → 500 {"error": message}
        Exception (fallback)     → 500 {"error": "Internal server error"}

    Response bodies never carry internal details; those are logged.
    """

    @app.exception_handler(ValidationError)
    async def handle_validation_error(request: Request, exc: ValidationError):
        rid = request_id_var.get("")
        logger.warning("[%s] Validation error: %s", rid, exc.message)
        return JSONResponse(status_code=400, content={"error": exc.message})

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation_error(request: Request, exc: RequestValidationError):
        rid = request_id_var.get("")
        logger.warning("[%s] Request validation error: %d issue(s)", rid, len(exc.errors()))
        return JSONResponse(status_code=400, content={"error": "Invalid request body"})

    @app.exception_handler(AuthorizationError)
    async def handle_authorization_error(request: Request, exc: AuthorizationError):
        return JSONResponse(status_code=401, content={"error": exc.message})

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError):
        return PlainTextResponse(NOT_FOUND_TEXT, status_code=404)

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(request: Request, exc: StarletteHTTPException):
        """Routing failures raised by Starlette itself (no route, wrong method)."""
        if exc.status_code == 405:
            return PlainTextResponse(METHOD_NOT_ALLOWED_TEXT, status_code=405)
        if exc.status_code == 404:
            return PlainTextResponse(NOT_FOUND_TEXT, status_code=404)
        return PlainTextResponse(str(exc.detail), status_code=exc.status_code)

    @app.exception_handler(DatabaseError)
    async def handle_database_error(request: Request, exc: DatabaseError):
        rid = request_id_var.get("")
        logger.error("[%s] Database error: %s | Context: %s", rid, exc.message, exc.context)
        return JSONResponse(status_code=500, content={"error": exc.message})

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        rid = request_id_var.get("")
        logger.error("[%s] Unexpected error: %s", rid, str(exc), exc_info=True)
        return JSONResponse(status_code=500, content={"error": "Internal server error"})


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns: Fully configured FastAPI instance ready to receive requests.
    """
    app = FastAPI(
        title="LinkVault API",
        description=(
            "Personal bookmark manager: ordered categories of bookmarks, "
            "with writes protected by a shared password."
        ),
        version=__version__,
        docs_url="/docs",
        redoc_url=None,
        openapi_url="/openapi.json",
        lifespan=lifespan,
        # /api/categories/ must 404, not redirect to /api/categories
        redirect_slashes=False,
    )

    # ── Register Middleware ───────────────────────────────────────────────
    # Last added runs first: RequestID → Logging → GZip
    app.add_middleware(GZipMiddleware, minimum_size=500)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # ── Register Exception Handlers ───────────────────────────────────────
    register_exception_handlers(app)

    # ── Register Routes ───────────────────────────────────────────────────
    app.include_router(categories.router)
    app.include_router(bookmarks.router)
    app.include_router(auth.router)
    app.include_router(pages.router)

    # Paths no route matches fall through to the static directory
    app.router.default = pages.static_files

    return app


app = create_app()


def run() -> None:
    """Console entry point: serve the app on the configured address."""
    uvicorn.run(
        "linkvault.main:app",
        host=settings.server.host,
        port=settings.server.port,
    )


if __name__ == "__main__":
    run()
