# ============================================================================
# SCOPE: GLOBAL
# Description: Main dependency injection container (facade).
#              Composes the domain sub-containers.
# Tenant-Aware: No - tenant scope is passed explicitly to use cases.
# ============================================================================
"""
Dependency Injection Container.

Centralized container for creating application dependencies.
Wires concrete implementations to the ports the use cases depend on.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime

from sqlalchemy.ext.asyncio import AsyncSession

from .base import BaseContainer
from .promotions import PromotionsContainer

logger = logging.getLogger(__name__)


class DependencyContainer:
    """
    Dependency Injection Container (Facade).

    Single Responsibility: Compose and delegate to domain-specific containers.
    """

    def __init__(self, config: dict | None = None, clock: Callable[[], datetime] | None = None):
        """
        Initialize container with all domain sub-containers.

        Args:
            config: Optional configuration dict (overrides settings)
            clock: Optional time source for rule evaluation
        """
        self._base = BaseContainer(config, clock)
        self._promotions = PromotionsContainer(self._base)

    @property
    def settings(self):
        return self._base.settings

    def get_config(self) -> dict:
        """Get current configuration."""
        return self._base.get_config()

    # ============================================================
    # PROMOTIONS (delegated to PromotionsContainer)
    # ============================================================

    def create_discount_rule_repository(self, db: AsyncSession):
        return self._promotions.create_discount_rule_repository(db)

    def create_evaluate_discount_rules_use_case(self, db: AsyncSession):
        return self._promotions.create_evaluate_discount_rules_use_case(db)

    def create_list_discount_rules_use_case(self, db: AsyncSession):
        return self._promotions.create_list_discount_rules_use_case(db)

    def create_get_discount_rule_use_case(self, db: AsyncSession):
        return self._promotions.create_get_discount_rule_use_case(db)

    def create_create_discount_rule_use_case(self, db: AsyncSession):
        return self._promotions.create_create_discount_rule_use_case(db)

    def create_update_discount_rule_use_case(self, db: AsyncSession):
        return self._promotions.create_update_discount_rule_use_case(db)

    def create_delete_discount_rule_use_case(self, db: AsyncSession):
        return self._promotions.create_delete_discount_rule_use_case(db)


_container: DependencyContainer | None = None


def get_container() -> DependencyContainer:
    """Return the process-wide container."""
    global _container
    if _container is None:
        _container = DependencyContainer()
    return _container


__all__ = [
    "BaseContainer",
    "DependencyContainer",
    "PromotionsContainer",
    "get_container",
]
