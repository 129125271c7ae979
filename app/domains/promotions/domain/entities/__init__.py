"""
Promotions Domain Entities
"""

from app.domains.promotions.domain.entities.discount_rule import DiscountRule, DiscountType

__all__ = [
    "DiscountRule",
    "DiscountType",
]
