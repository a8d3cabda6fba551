"""
Starred Restaurants API — FastAPI Application Factory
======================================================

What:  Creates and configures the FastAPI application instance.
How:   create_app() builds the restaurant catalog and the starred restaurant
       service, stores them on `app.state`, registers middleware, exception
       handlers and routers, and returns the app.
Who:   Called by uvicorn (uvicorn starred_api.main:app) and by the test
       suite, which builds a fresh app per test.

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware Chain:                                  │
    │  ┌──────────┐ ┌─────────────┐ ┌──────────┐          │
    │  │  Req ID  │→│   Logging   │→│   CORS   │          │
    │  └──────────┘ └─────────────┘ └──────────┘          │
    │                                                     │
    │  Routes:                                            │
    │  ┌─────────────────────┐ ┌────────────┐ ┌────────┐  │
    │  │ /starred-restaurants│ │/restaurants│ │/health │  │
    │  └─────────────────────┘ └────────────┘ └────────┘  │
    │                                                     │
    │  Exception Handlers:                                │
    │  ┌──────────────────────────────────────────────┐   │
    │  │ Validation→400 │ NotFound→404 │ Conflict→409 │   │
    │  └──────────────────────────────────────────────┘   │
    │                                                     │
    │  app.state: catalog, starred_service                │
    └─────────────────────────────────────────────────────┘
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from starred_api import __version__
from starred_api.config import settings
from starred_api.exceptions import (
    ConflictError,
    NotFoundError,
    StarredRestaurantsError,
    ValidationError,
)
from starred_api.middleware.logging import RequestLoggingMiddleware
from starred_api.middleware.request_id import REQUEST_ID_HEADER, RequestIDMiddleware, request_id_var
from starred_api.routes import health, restaurants, starred_restaurants
from starred_api.services.catalog import RestaurantCatalog
from starred_api.services.starred_service import StarredRestaurantService

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging() -> None:
    """
    Configure the root logger once for the whole process.

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s
    Output goes to stdout so container runtimes capture it.
    """
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    # uvicorn's own access log duplicates RequestLoggingMiddleware
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Startup: configure logging and report what was loaded.
    Shutdown: log only; the in-memory state is discarded with the process.
    """
    setup_logging()
    logger.info("=" * 60)
    logger.info("%s %s starting up...", settings.app_name, __version__)
    logger.info(
        "Loaded %d restaurants, %d starred",
        len(app.state.catalog),
        len(app.state.starred_service),
    )
    logger.info("Server ready at http://%s:%d", settings.backend_host, settings.backend_port)
    logger.info("=" * 60)

    yield

    logger.info("%s shutting down, %d starred restaurants discarded",
                settings.app_name, len(app.state.starred_service))


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def register_exception_handlers(app: FastAPI) -> None:
    """
    Map application exceptions to HTTP responses.

    Handler hierarchy:
        ValidationError              → 400 Bad Request
        NotFoundError                → 404 Not Found
        ConflictError                → 409 Conflict
        StarredRestaurantsError      → 500 (custom error with no specific mapping)
        Exception (fallback)         → 500, stack trace logged server-side only
    """

    @app.exception_handler(ValidationError)
    async def handle_validation_error(request: Request, exc: ValidationError):
        rid = request_id_var.get("")
        logger.warning("[%s] Validation error: %s", rid, exc.message)
        return JSONResponse(
            status_code=400,
            content={
                "error": "validation_error",
                "message": exc.message,
                "details": exc.context,
                "request_id": rid,
            },
        )

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError):
        rid = request_id_var.get("")
        return JSONResponse(
            status_code=404,
            content={
                "error": "not_found",
                "message": exc.message,
                "request_id": rid,
            },
        )

    @app.exception_handler(ConflictError)
    async def handle_conflict(request: Request, exc: ConflictError):
        rid = request_id_var.get("")
        return JSONResponse(
            status_code=409,
            content={
                "error": "conflict",
                "message": exc.message,
                "details": exc.context,
                "request_id": rid,
            },
        )

    @app.exception_handler(StarredRestaurantsError)
    async def handle_app_error(request: Request, exc: StarredRestaurantsError):
        rid = request_id_var.get("")
        logger.error("[%s] Application error: %s | Context: %s", rid, exc.message, exc.context)
        return JSONResponse(
            status_code=500,
            content={
                "error": "server_error",
                "message": exc.message,
                "request_id": rid,
            },
        )

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        rid = request.headers.get(REQUEST_ID_HEADER) or request_id_var.get("")
        logger.error("[%s] Unexpected error: %s", rid, str(exc), exc_info=True)
        return JSONResponse(
            status_code=500,
            content={
                "error": "internal_server_error",
                "message": "An unexpected error occurred. Please try again later.",
                "request_id": rid,
            },
        )


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app(
    catalog: RestaurantCatalog | None = None,
    starred_service: StarredRestaurantService | None = None,
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        catalog: Restaurant catalog; the seed catalog when omitted.
        starred_service: Starred list owner; seeded from `catalog` when omitted.

    Each call produces independent state, so two apps never share a
    starred list.
    """
    app = FastAPI(
        title=settings.app_name,
        description=(
            "Star restaurants from the catalog, comment on them, and list "
            "your starred restaurants with their current names."
        ),
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    # Both define __len__; an empty instance is falsy
    if catalog is None:
        catalog = RestaurantCatalog.from_seed()
    if starred_service is None:
        starred_service = StarredRestaurantService.from_seed(catalog)
    app.state.catalog = catalog
    app.state.starred_service = starred_service

    # ── Register Middleware ───────────────────────────────────────────────
    # Last added = first to execute: RequestID → Logging → CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=[REQUEST_ID_HEADER],
    )
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    register_exception_handlers(app)

    app.include_router(starred_restaurants.router)
    app.include_router(restaurants.router)
    app.include_router(health.router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "starred_api.main:app",
        host=settings.backend_host,
        port=settings.backend_port,
        log_level=settings.log_level.lower(),
    )
