"""
Promotions Repositories

Data access implementations for the promotions domain.
"""

from app.domains.promotions.infrastructure.repositories.discount_rule_repository import (
    SQLAlchemyDiscountRuleRepository,
)

__all__ = [
    "SQLAlchemyDiscountRuleRepository",
]
