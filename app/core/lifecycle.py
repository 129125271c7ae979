"""
Startup and shutdown hooks, wired into FastAPI through ``lifespan``.

Startup only probes the database; the service keeps running when the probe
fails so /health stays reachable. Shutdown releases the connection pool.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from app.config.settings import Settings, get_settings
from app.database.async_db import check_database_connection, dispose_async_engine

logger = logging.getLogger(__name__)


class LifecycleManager:
    """Runs startup tasks once and undoes them on shutdown."""

    def __init__(self, settings: Settings | None = None) -> None:
        self._settings = settings
        self._started = False

    @property
    def started(self) -> bool:
        return self._started

    async def startup(self) -> None:
        if self._started:
            logger.warning("Startup requested twice; ignoring")
            return

        settings = self._settings or get_settings()
        if settings.DB_CHECK_ON_STARTUP:
            await self._probe_database()
        else:
            logger.info("Skipping database probe (DB_CHECK_ON_STARTUP disabled)")

        self._started = True
        logger.info(f"{settings.PROJECT_NAME} started ({settings.ENVIRONMENT})")

    async def shutdown(self) -> None:
        if not self._started:
            return

        await dispose_async_engine()
        self._started = False
        logger.info("Shutdown complete, connection pool released")

    async def _probe_database(self) -> None:
        if await check_database_connection():
            logger.info("Database reachable")
        else:
            logger.warning("Database unreachable; rule endpoints will fail until it recovers")


_lifecycle_manager: LifecycleManager | None = None


def get_lifecycle_manager() -> LifecycleManager:
    """Process-wide lifecycle manager."""
    global _lifecycle_manager
    if _lifecycle_manager is None:
        _lifecycle_manager = LifecycleManager()
    return _lifecycle_manager


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    manager = get_lifecycle_manager()
    await manager.startup()
    try:
        yield
    finally:
        await manager.shutdown()
