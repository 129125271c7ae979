"""
Promotions API Dependencies

FastAPI dependencies for the promotions domain.
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.container import DependencyContainer, get_container
from app.database.async_db import get_async_db
from app.domains.promotions.application.use_cases import (
    CreateDiscountRuleUseCase,
    DeleteDiscountRuleUseCase,
    EvaluateDiscountRulesUseCase,
    GetDiscountRuleUseCase,
    ListDiscountRulesUseCase,
    UpdateDiscountRuleUseCase,
)


def get_evaluate_discount_rules_use_case(
    db: AsyncSession = Depends(get_async_db),
    container: DependencyContainer = Depends(get_container),
) -> EvaluateDiscountRulesUseCase:
    """Get EvaluateDiscountRulesUseCase instance."""
    return container.create_evaluate_discount_rules_use_case(db)


def get_list_discount_rules_use_case(
    db: AsyncSession = Depends(get_async_db),
    container: DependencyContainer = Depends(get_container),
) -> ListDiscountRulesUseCase:
    """Get ListDiscountRulesUseCase instance."""
    return container.create_list_discount_rules_use_case(db)


def get_get_discount_rule_use_case(
    db: AsyncSession = Depends(get_async_db),
    container: DependencyContainer = Depends(get_container),
) -> GetDiscountRuleUseCase:
    """Get GetDiscountRuleUseCase instance."""
    return container.create_get_discount_rule_use_case(db)


def get_create_discount_rule_use_case(
    db: AsyncSession = Depends(get_async_db),
    container: DependencyContainer = Depends(get_container),
) -> CreateDiscountRuleUseCase:
    """Get CreateDiscountRuleUseCase instance."""
    return container.create_create_discount_rule_use_case(db)


def get_update_discount_rule_use_case(
    db: AsyncSession = Depends(get_async_db),
    container: DependencyContainer = Depends(get_container),
) -> UpdateDiscountRuleUseCase:
    """Get UpdateDiscountRuleUseCase instance."""
    return container.create_update_discount_rule_use_case(db)


def get_delete_discount_rule_use_case(
    db: AsyncSession = Depends(get_async_db),
    container: DependencyContainer = Depends(get_container),
) -> DeleteDiscountRuleUseCase:
    """Get DeleteDiscountRuleUseCase instance."""
    return container.create_delete_discount_rule_use_case(db)


__all__ = [
    "get_evaluate_discount_rules_use_case",
    "get_list_discount_rules_use_case",
    "get_get_discount_rule_use_case",
    "get_create_discount_rule_use_case",
    "get_update_discount_rule_use_case",
    "get_delete_discount_rule_use_case",
]
