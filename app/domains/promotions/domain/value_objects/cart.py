"""
Cart Value Objects for Promotions Domain

Ephemeral, caller-supplied cart snapshot and the evaluation output.
Cart contents are trusted: the engine does not re-validate prices,
quantities or totals.
"""

from dataclasses import dataclass, field
from decimal import Decimal

from app.core.domain import ValueObject, to_decimal

from ..entities.discount_rule import DiscountType


@dataclass(frozen=True)
class CartItem(ValueObject):
    """A cart line: quantity units of one product at a per-unit price."""

    product_id: str
    quantity: int
    price: Decimal
    category_id: str | None = None

    def _validate(self) -> None:
        object.__setattr__(self, "price", to_decimal(self.price))


@dataclass(frozen=True)
class CartSnapshot(ValueObject):
    """
    Pre-discount, pre-tax, pre-shipping view of a cart.

    `quantity` is the caller's total unit count and is used as-is, even if
    it disagrees with the sum of item quantities.
    """

    subtotal: Decimal
    quantity: int
    items: tuple[CartItem, ...] = ()

    def _validate(self) -> None:
        object.__setattr__(self, "subtotal", to_decimal(self.subtotal))
        object.__setattr__(self, "items", tuple(self.items))

    def contains_any(self, product_ids: frozenset[str], category_ids: frozenset[str]) -> bool:
        """Whether at least one item matches a product or a category."""
        return any(
            item.product_id in product_ids or (item.category_id is not None and item.category_id in category_ids)
            for item in self.items
        )

    def cheapest_unit_prices(self, count: int) -> list[Decimal]:
        """
        Return the `count` cheapest per-unit prices across all items.

        Equivalent to expanding every line into individual units, sorting
        ascending and taking the first `count`, without materializing units.
        """
        prices: list[Decimal] = []
        remaining = count
        for item in sorted(self.items, key=lambda i: i.price):
            if remaining <= 0:
                break
            taken = min(max(item.quantity, 0), remaining)
            prices.extend([item.price] * taken)
            remaining -= taken
        return prices


@dataclass(frozen=True)
class AppliedRule(ValueObject):
    """A rule that passed eligibility and contributes to the cart."""

    rule_id: str
    name: str
    type: DiscountType
    discount_value: Decimal
    calculated_discount: Decimal


@dataclass(frozen=True)
class DiscountEvaluation(ValueObject):
    """Result of evaluating every automatic rule of a tenant against a cart."""

    applied_rules: tuple[AppliedRule, ...] = field(default_factory=tuple)
    total_discount: Decimal = Decimal("0.00")

    @property
    def waives_shipping(self) -> bool:
        return any(rule.type == DiscountType.FREE_SHIPPING for rule in self.applied_rules)
