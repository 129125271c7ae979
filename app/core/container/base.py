# ============================================================================
# SCOPE: GLOBAL
# Description: Base container with shared, tenant-independent resources.
# Tenant-Aware: No - instances are shared by every tenant.
# ============================================================================
"""
Base Container - Shared Singletons.

Single Responsibility: Hold settings and process-wide resources.
"""

import logging
from collections.abc import Callable
from datetime import datetime

from app.config.settings import get_settings
from app.domains.promotions.application.use_cases.evaluate_discount_rules import utc_now

logger = logging.getLogger(__name__)


class BaseContainer:
    """
    Base container for shared singletons.
    """

    def __init__(self, config: dict | None = None, clock: Callable[[], datetime] | None = None):
        """
        Initialize base container.

        Args:
            config: Optional configuration dict (overrides settings)
            clock: Optional time source (defaults to UTC wall clock)
        """
        self.settings = get_settings()
        self.config = config or {}
        self._clock = clock or utc_now

        logger.debug("BaseContainer initialized")

    def get_clock(self) -> Callable[[], datetime]:
        """Time source used for rule validity windows."""
        return self._clock

    def get_config(self) -> dict:
        """Get current configuration."""
        return {
            **self.config,
            "environment": self.settings.ENVIRONMENT,
            "tenant_header": self.settings.TENANT_HEADER,
        }
