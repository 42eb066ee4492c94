"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from checkin_tracker.api.admin import router as admin_router
from checkin_tracker.api.checkins import router as checkins_router
from checkin_tracker.api.errors import register_error_handlers
from checkin_tracker.api.users import router as users_router
from checkin_tracker.api.venues import router as venues_router
from checkin_tracker.app_logging import configure_logging
from checkin_tracker.config import parse_allowed_origins
from checkin_tracker.containers import AppContainer


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    settings = container.settings
    configure_logging(settings.log_level)
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        state_container: AppContainer = app.state.container
        if settings.sweep_enabled:
            state_container.sweeper.start()
            logger.info(
                "Expired checkin sweeper started",
                extra={"interval_seconds": settings.sweep_interval_seconds},
            )
        yield
        await state_container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    origins = parse_allowed_origins(settings.cors_allowed_origins)
    if origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=origins,
            allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
            allow_headers=["*"],
        )

    register_error_handlers(app)
    app.include_router(checkins_router)
    app.include_router(venues_router)
    app.include_router(users_router)
    app.include_router(admin_router)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app
