"""Location API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map LocationApiError → {"message"} JSON responses
    - CORS configured from settings (not hardcoded)
    - AppServices built once in the lifespan, stored on app.state, closed on shutdown

Design Decisions:
    - create_app() factory: tests build an app without running the lifespan
      and inject services through dependency_overrides
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from location_api.api.error_handlers import register_error_handlers
from location_api.api.routes import health, locations
from location_api.config import Settings, get_settings
from location_api.infrastructure.observability import setup_logging
from location_api.services.app_services import build_services

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings: Settings = app.state.settings
    setup_logging(settings.log_level, settings.log_format)
    app.state.services = await build_services(settings)
    logger.info("Location API started")
    yield
    logger.info("Location API shutting down")
    await app.state.services.aclose()


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    app = FastAPI(title="Location API", version="1.0.0", lifespan=lifespan)
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health.router)
    app.include_router(locations.router)

    register_error_handlers(app)
    return app


app = create_app()
