"""
FastAPI application factory.

Builds the app from Settings: middleware stack, error envelope handlers,
versioned API routes and an unversioned /health probe.
"""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.exception_handlers import register_exception_handlers
from app.api.middleware.logging_middleware import RequestLoggingMiddleware
from app.api.router import api_router
from app.config.settings import Settings, get_settings
from app.core.lifecycle import lifespan

logger = logging.getLogger(__name__)


class AppFactory:
    """Assembles a FastAPI application for the given settings."""

    def __init__(self, settings: Settings | None = None) -> None:
        self._settings = settings or get_settings()

    def create_app(self) -> FastAPI:
        settings = self._settings
        docs_prefix = settings.API_V1_STR if settings.DEBUG else None

        app = FastAPI(
            title=settings.PROJECT_NAME,
            description=settings.PROJECT_DESCRIPTION,
            version=settings.VERSION,
            docs_url=f"{docs_prefix}/docs" if docs_prefix else None,
            redoc_url=f"{docs_prefix}/redoc" if docs_prefix else None,
            lifespan=lifespan,
        )

        # Starlette wraps in reverse order: the last added runs first
        app.add_middleware(RequestLoggingMiddleware, tenant_header=settings.TENANT_HEADER)
        app.add_middleware(
            CORSMiddleware,
            allow_origins=self.cors_origins(),
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

        register_exception_handlers(app)
        app.include_router(api_router, prefix=settings.API_V1_STR)
        app.add_api_route("/health", self._health, methods=["GET"], tags=["health"])

        logger.info(f"Application created: {settings.PROJECT_NAME} v{settings.VERSION}")
        return app

    def cors_origins(self) -> list[str]:
        """Any origin in debug mode, the configured allow-list otherwise."""
        if self._settings.DEBUG:
            return ["*"]
        return list(self._settings.CORS_ORIGINS)

    async def _health(self) -> dict[str, str]:
        return {"status": "ok", "environment": self._settings.ENVIRONMENT}


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create the application with the given or default settings."""
    return AppFactory(settings).create_app()
