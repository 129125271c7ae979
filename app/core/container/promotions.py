"""
Promotions Domain Container.

Single Responsibility: Wire all promotions domain dependencies.
"""

import logging
from typing import TYPE_CHECKING

from sqlalchemy.ext.asyncio import AsyncSession

from app.domains.promotions.application.use_cases import (
    CreateDiscountRuleUseCase,
    DeleteDiscountRuleUseCase,
    EvaluateDiscountRulesUseCase,
    GetDiscountRuleUseCase,
    ListDiscountRulesUseCase,
    UpdateDiscountRuleUseCase,
)
from app.domains.promotions.infrastructure.repositories import SQLAlchemyDiscountRuleRepository

if TYPE_CHECKING:
    from app.core.container.base import BaseContainer

logger = logging.getLogger(__name__)


class PromotionsContainer:
    """
    Promotions domain container.

    Single Responsibility: Create promotions repositories and use cases.
    """

    def __init__(self, base: "BaseContainer"):
        """
        Initialize promotions container.

        Args:
            base: BaseContainer with shared singletons
        """
        self._base = base

    # ==================== REPOSITORIES ====================

    def create_discount_rule_repository(self, db: AsyncSession) -> SQLAlchemyDiscountRuleRepository:
        """Create Discount Rule Repository."""
        return SQLAlchemyDiscountRuleRepository(session=db)

    # ==================== USE CASES ====================

    def create_evaluate_discount_rules_use_case(self, db: AsyncSession) -> EvaluateDiscountRulesUseCase:
        """Create EvaluateDiscountRulesUseCase with dependencies."""
        return EvaluateDiscountRulesUseCase(
            rule_repository=self.create_discount_rule_repository(db),
            clock=self._base.get_clock(),
        )

    def create_list_discount_rules_use_case(self, db: AsyncSession) -> ListDiscountRulesUseCase:
        return ListDiscountRulesUseCase(rule_repository=self.create_discount_rule_repository(db))

    def create_get_discount_rule_use_case(self, db: AsyncSession) -> GetDiscountRuleUseCase:
        return GetDiscountRuleUseCase(rule_repository=self.create_discount_rule_repository(db))

    def create_create_discount_rule_use_case(self, db: AsyncSession) -> CreateDiscountRuleUseCase:
        return CreateDiscountRuleUseCase(rule_repository=self.create_discount_rule_repository(db))

    def create_update_discount_rule_use_case(self, db: AsyncSession) -> UpdateDiscountRuleUseCase:
        return UpdateDiscountRuleUseCase(rule_repository=self.create_discount_rule_repository(db))

    def create_delete_discount_rule_use_case(self, db: AsyncSession) -> DeleteDiscountRuleUseCase:
        return DeleteDiscountRuleUseCase(rule_repository=self.create_discount_rule_repository(db))
