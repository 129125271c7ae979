"""
Discount Rule Eligibility

Decides whether a rule may contribute a discount to a cart, independently
of how much. All checks are pure; a failing rule is skipped, never an error.
"""

from collections.abc import Callable
from datetime import datetime

from ..entities.discount_rule import DiscountRule
from ..value_objects.cart import CartSnapshot

EligibilityCheck = Callable[[DiscountRule, CartSnapshot, datetime], bool]


def is_automatic_candidate(rule: DiscountRule, cart: CartSnapshot, now: datetime) -> bool:
    return rule.is_candidate


def is_within_validity_window(rule: DiscountRule, cart: CartSnapshot, now: datetime) -> bool:
    return rule.is_within_window(now)


def has_usage_remaining(rule: DiscountRule, cart: CartSnapshot, now: datetime) -> bool:
    return rule.has_usage_remaining()


def meets_minimum_order(rule: DiscountRule, cart: CartSnapshot, now: datetime) -> bool:
    return rule.min_order_amount is None or cart.subtotal >= rule.min_order_amount


def meets_minimum_quantity(rule: DiscountRule, cart: CartSnapshot, now: datetime) -> bool:
    return rule.min_item_quantity is None or cart.quantity >= rule.min_item_quantity


def applies_to_cart(rule: DiscountRule, cart: CartSnapshot, now: datetime) -> bool:
    if rule.applies_to_all:
        return True
    return cart.contains_any(rule.applicable_products, rule.applicable_categories)


# Evaluated in order; the first failure short-circuits
ELIGIBILITY_CHECKS: tuple[tuple[str, EligibilityCheck], ...] = (
    ("automatic_candidate", is_automatic_candidate),
    ("validity_window", is_within_validity_window),
    ("usage_limit", has_usage_remaining),
    ("min_order_amount", meets_minimum_order),
    ("min_item_quantity", meets_minimum_quantity),
    ("applicability", applies_to_cart),
)


def first_failed_check(rule: DiscountRule, cart: CartSnapshot, now: datetime) -> str | None:
    """Return the name of the first failing check, or None when the rule is eligible."""
    for name, check in ELIGIBILITY_CHECKS:
        if not check(rule, cart, now):
            return name
    return None


def is_eligible(rule: DiscountRule, cart: CartSnapshot, now: datetime) -> bool:
    return first_failed_check(rule, cart, now) is None
