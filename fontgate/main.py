"""FontGate API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery); fonts router LAST
      because it owns the catch-all path
    - Global error handlers map FontGateError → structured JSON responses
    - CORS middleware covers the admin API paths only, and only when origins
      are configured; font responses carry their own per-origin CORS headers
    - Database initialized on startup via lifespan context manager

Run: uvicorn fontgate.main:app
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

import fontgate.infrastructure.database as db_module
from fontgate.api.error_handlers import register_error_handlers
from fontgate.api.middleware import AdminCORSMiddleware
from fontgate.api.routes import health, whitelist, fonts
from fontgate.config import Settings, get_settings
from fontgate.core.domain_types import StoreBackend
from fontgate.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    if settings.store_backend == StoreBackend.DATABASE:
        manager = db_module.init_db(
            settings.database_url,
            pool_size=settings.database_pool_size,
            max_overflow=settings.database_max_overflow,
        )
        if settings.database_create_tables:
            await manager.create_tables()
    logger.info(f"FontGate started (store={settings.store_backend.value})")
    yield
    logger.info("FontGate shutting down")
    if db_module.db_manager:
        await db_module.db_manager.dispose()
        db_module.db_manager = None


def build_app(settings: Settings | None = None) -> FastAPI:
    """Build the FastAPI application (settings override used by tests)."""
    if settings is None:
        settings = get_settings()

    app = FastAPI(
        title="FontGate", version=health.SERVICE_VERSION, lifespan=lifespan,
    )

    if settings.cors_origins:
        app.add_middleware(
            AdminCORSMiddleware,
            allow_origins=settings.cors_origins,
            allow_methods=["GET", "POST"],
            allow_headers=["Content-Type"],
        )

    register_error_handlers(app)

    app.include_router(health.router)
    app.include_router(whitelist.router)
    app.include_router(fonts.router)
    return app


app = build_app()
