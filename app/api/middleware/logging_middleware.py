"""
Access logging and correlation IDs.

Each request gets a correlation ID (from X-Correlation-ID, or a fresh one),
exposed on request.state for the tenant dependency and echoed on the response.
"""

import logging
import time
import uuid
from collections.abc import Awaitable, Callable

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response
from starlette.types import ASGIApp

from app.config.settings import get_settings

logger = logging.getLogger(__name__)

CORRELATION_HEADER = "X-Correlation-ID"
RESPONSE_TIME_HEADER = "X-Response-Time-Ms"


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Logs one line per request and one per response, tagged with tenant and correlation ID."""

    # Probes and browser noise: correlation header only, no log lines
    EXCLUDE_PATHS: tuple[str, ...] = ("/health", "/favicon.ico")

    def __init__(self, app: ASGIApp, tenant_header: str | None = None) -> None:
        super().__init__(app)
        self._tenant_header = tenant_header or get_settings().TENANT_HEADER

    def is_quiet(self, path: str) -> bool:
        return path.startswith(self.EXCLUDE_PATHS)

    async def dispatch(self, request: Request, call_next: Callable[[Request], Awaitable[Response]]) -> Response:
        correlation_id = request.headers.get(CORRELATION_HEADER) or uuid.uuid4().hex[:8]
        request.state.correlation_id = correlation_id

        if self.is_quiet(request.url.path):
            response = await call_next(request)
            response.headers[CORRELATION_HEADER] = correlation_id
            return response

        route = f"{request.method} {request.url.path}"
        tenant = request.headers.get(self._tenant_header) or "-"
        logger.info(f"[{correlation_id}] --> {route} tenant={tenant}")

        started = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception as exc:
            elapsed = (time.perf_counter() - started) * 1000
            logger.error(f"[{correlation_id}] <-- {route} failed after {elapsed:.2f}ms: {exc}")
            raise
        elapsed = (time.perf_counter() - started) * 1000

        level = logging.WARNING if response.status_code >= 400 else logging.INFO
        logger.log(level, f"[{correlation_id}] <-- {route} {response.status_code} in {elapsed:.2f}ms")

        response.headers[CORRELATION_HEADER] = correlation_id
        response.headers[RESPONSE_TIME_HEADER] = f"{elapsed:.2f}"
        return response
