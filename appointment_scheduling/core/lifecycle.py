"""
Application lifecycle management using the FastAPI lifespan pattern.

Startup builds the scheduling container and attaches it to ``app.state``;
shutdown closes the Redis connection pool.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from appointment_scheduling.config.settings import Settings, get_settings
from appointment_scheduling.core.container import SchedulingContainer

logger = logging.getLogger(__name__)


class LifecycleManager:
    """
    Manages application lifecycle events.

    Handles startup initialization and graceful shutdown.
    """

    def __init__(self, settings: Settings | None = None) -> None:
        self._settings = settings or get_settings()
        self._container: SchedulingContainer | None = None

    async def startup(self, app: FastAPI) -> None:
        """Build the container and verify the appointment store is reachable."""
        if self._container is not None:
            logger.warning("Lifecycle already initialized, skipping startup")
            return

        logger.info("Starting application lifecycle...")

        existing = getattr(app.state, "scheduling", None)
        self._container = existing or SchedulingContainer.from_settings(self._settings)
        app.state.scheduling = self._container

        await self._verify_appointment_store()

        logger.info("Application lifecycle startup completed")

    async def shutdown(self, app: FastAPI) -> None:
        if self._container is None:
            logger.warning("Lifecycle not initialized, skipping shutdown")
            return

        logger.info("Stopping application lifecycle...")
        await self._container.close()
        app.state.scheduling = None
        self._container = None
        logger.info("Application lifecycle shutdown completed")

    async def _verify_appointment_store(self) -> None:
        # An unreachable store is reported per request as 503; startup carries on.
        ping = getattr(self._container.repository, "ping", None) if self._container else None
        if ping is None:
            return
        if await ping():
            logger.info("Redis connectivity verified")
        else:
            logger.warning(f"Redis not reachable at {self._settings.redis_url}")


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    FastAPI lifespan context manager.

    Usage:
        app = FastAPI(lifespan=lifespan)
    """
    lifecycle = LifecycleManager()

    await lifecycle.startup(app)
    try:
        yield
    finally:
        await lifecycle.shutdown(app)
