"""
Database models
"""

from .base import Base, TimestampMixin
from .discount_rules import DiscountRuleModel
from .schemas import DEFAULT_SEARCH_PATH, ECOMMERCE_SCHEMA, MANAGED_SCHEMAS

__all__ = [
    "Base",
    "TimestampMixin",
    "DiscountRuleModel",
    "ECOMMERCE_SCHEMA",
    "DEFAULT_SEARCH_PATH",
    "MANAGED_SCHEMAS",
]
