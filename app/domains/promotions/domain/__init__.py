"""
Promotions Domain Layer

This module contains:
- Entities: DiscountRule and the closed DiscountType enum
- Value Objects: CartSnapshot, CartItem, AppliedRule, DiscountEvaluation
- Domain Services: eligibility checks, per-type discount calculators, rule validation
"""

from app.domains.promotions.domain.entities import DiscountRule, DiscountType
from app.domains.promotions.domain.value_objects import (
    AppliedRule,
    CartItem,
    CartSnapshot,
    DiscountEvaluation,
)

__all__ = [
    "DiscountRule",
    "DiscountType",
    "CartItem",
    "CartSnapshot",
    "AppliedRule",
    "DiscountEvaluation",
]
