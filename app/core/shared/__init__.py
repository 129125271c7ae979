"""
Shared utilities module

Domain-agnostic utilities used across the entire application.
"""

from .logger import (
    ColoredFormatter,
    ContextLogger,
    JSONFormatter,
    RequestContextFilter,
    configure_logging,
    get_logger,
    get_service_logger,
)

__all__ = [
    "ColoredFormatter",
    "ContextLogger",
    "JSONFormatter",
    "RequestContextFilter",
    "configure_logging",
    "get_logger",
    "get_service_logger",
]
