"""
Promotions Value Objects

Immutable cart snapshot and evaluation result types.
"""

from app.domains.promotions.domain.value_objects.cart import (
    AppliedRule,
    CartItem,
    CartSnapshot,
    DiscountEvaluation,
)

__all__ = [
    "CartItem",
    "CartSnapshot",
    "AppliedRule",
    "DiscountEvaluation",
]
