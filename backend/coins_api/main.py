"""Coins API: FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Catch-all error handler turns unexpected exceptions into a 500 envelope
    - CORS configured from settings (permissive by default, read-only API)
    - AppState built once per app and stored on app.state.coins

Design Decisions:
    - create_app() factory: tests build apps with their own Settings
      (seeded random source) without touching the module-level app
    - Lifespan over @app.on_event: logging configured at startup, endpoint
      list announced once
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from coins_api import __version__
from coins_api.api.app_state import build_app_state
from coins_api.api.error_handlers import register_error_handlers
from coins_api.api.routes import combinations, health, service_info
from coins_api.config import Settings, get_settings
from coins_api.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Startup/shutdown lifecycle."""
        setup_logging(settings.log_level, settings.log_format)
        logger.info(
            "Starting Coin Combinations API server",
            extra={"host": settings.host, "port": settings.port},
        )
        for path, description in service_info.ENDPOINTS.items():
            logger.info(f"  GET {path:<14} - {description}")
        yield
        logger.info("Coin Combinations API shutting down")

    app = FastAPI(
        title=service_info.SERVICE_TITLE, version=__version__, lifespan=lifespan,
    )
    app.state.coins = build_app_state(settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    # Routes: explicit registration
    app.include_router(service_info.router)
    app.include_router(health.router)
    app.include_router(combinations.router)

    register_error_handlers(app)
    return app


app = create_app()
