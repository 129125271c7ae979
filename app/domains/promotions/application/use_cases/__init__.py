"""
Promotions Use Cases

Each use case represents a single business operation.
"""

from .create_discount_rule import CreateDiscountRuleUseCase
from .delete_discount_rule import DeleteDiscountRuleResponse, DeleteDiscountRuleUseCase
from .evaluate_discount_rules import EvaluateDiscountRulesUseCase
from .get_discount_rule import GetDiscountRuleUseCase
from .list_discount_rules import (
    ListDiscountRulesRequest,
    ListDiscountRulesResponse,
    ListDiscountRulesUseCase,
)
from .update_discount_rule import UpdateDiscountRuleUseCase

__all__ = [
    # Evaluation
    "EvaluateDiscountRulesUseCase",
    # Lifecycle
    "ListDiscountRulesUseCase",
    "ListDiscountRulesRequest",
    "ListDiscountRulesResponse",
    "GetDiscountRuleUseCase",
    "CreateDiscountRuleUseCase",
    "UpdateDiscountRuleUseCase",
    "DeleteDiscountRuleUseCase",
    "DeleteDiscountRuleResponse",
]
