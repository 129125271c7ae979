"""
Discount Calculator for Promotions Domain

Pure mapping (rule, cart) -> monetary discount with one algorithm per
DiscountType. Amounts are returned unrounded; rounding to currency minor
units happens when a rule is added to an evaluation result.
"""

from collections.abc import Callable
from decimal import Decimal

from ..entities.discount_rule import DiscountRule, DiscountType
from ..value_objects.cart import CartSnapshot

ZERO = Decimal("0")
HUNDRED = Decimal("100")

Calculator = Callable[[DiscountRule, CartSnapshot], Decimal]


def calculate_percentage_off(rule: DiscountRule, cart: CartSnapshot) -> Decimal:
    """subtotal * discount_value%, capped by max_discount when set."""
    amount = cart.subtotal * rule.discount_value / HUNDRED
    if rule.max_discount is not None:
        amount = min(amount, rule.max_discount)
    return amount


def calculate_fixed_amount_off(rule: DiscountRule, cart: CartSnapshot) -> Decimal:
    """Flat discount that can never make the cart negative."""
    return min(rule.discount_value, cart.subtotal)


def calculate_buy_x_get_y(rule: DiscountRule, cart: CartSnapshot) -> Decimal:
    """
    Discount the cheapest units of every complete buy+get set.

    qualifying_sets = cart.quantity // (buy + get); the cheapest
    qualifying_sets * get units across the whole cart are discounted by
    get_discount percent (100 when unset).
    """
    if not rule.buy_quantity or not rule.get_quantity:
        return ZERO

    qualifying_sets = cart.quantity // (rule.buy_quantity + rule.get_quantity)
    if qualifying_sets <= 0:
        return ZERO

    free_units = qualifying_sets * rule.get_quantity
    get_discount_percent = rule.get_discount if rule.get_discount is not None else HUNDRED
    discounted_prices = cart.cheapest_unit_prices(free_units)
    return sum(discounted_prices, ZERO) * get_discount_percent / HUNDRED


def calculate_free_shipping(rule: DiscountRule, cart: CartSnapshot) -> Decimal:
    """Shipping is waived by the caller; no monetary discount here."""
    return ZERO


def calculate_spend_threshold(rule: DiscountRule, cart: CartSnapshot) -> Decimal:
    """Flat discount once the subtotal reaches spend_threshold, zero otherwise."""
    if rule.spend_threshold is None or cart.subtotal < rule.spend_threshold:
        return ZERO
    return min(rule.discount_value, cart.subtotal)


CALCULATORS: dict[DiscountType, Calculator] = {
    DiscountType.PERCENTAGE_OFF: calculate_percentage_off,
    DiscountType.FIXED_AMOUNT_OFF: calculate_fixed_amount_off,
    DiscountType.BUY_X_GET_Y: calculate_buy_x_get_y,
    DiscountType.FREE_SHIPPING: calculate_free_shipping,
    DiscountType.SPEND_X_GET_Y_OFF: calculate_spend_threshold,
}

_uncovered = set(DiscountType) - set(CALCULATORS)
if _uncovered:
    raise RuntimeError(f"No discount calculator registered for: {sorted(t.value for t in _uncovered)}")


def calculate_discount(rule: DiscountRule, cart: CartSnapshot) -> Decimal:
    """Compute the unrounded monetary discount of an eligible rule."""
    return CALCULATORS[rule.type](rule, cart)


def is_applicable(rule: DiscountRule, amount: Decimal) -> bool:
    """
    Inclusion rule for evaluation results.

    Positive discounts are included; FREE_SHIPPING is included at zero
    because its applicability is itself the signal.
    """
    return amount > ZERO or rule.type == DiscountType.FREE_SHIPPING
