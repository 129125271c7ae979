"""
Discount Rule Entity for Promotions Domain

A tenant-configured promotion rule. The evaluation engine treats rules as
read-only input; only the lifecycle use cases create or change them.
"""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal

from app.core.domain import StatusEnum


class DiscountType(StatusEnum):
    """
    Pricing semantics of a discount rule.

    - PERCENTAGE_OFF: discount_value percent of the subtotal, optionally capped by max_discount
    - FIXED_AMOUNT_OFF: flat discount_value, never more than the subtotal
    - BUY_X_GET_Y: for every buy_quantity + get_quantity units, the cheapest get_quantity
      units are discounted by get_discount percent
    - FREE_SHIPPING: no monetary discount, signals that shipping is waived
    - SPEND_X_GET_Y_OFF: flat discount_value once the subtotal reaches spend_threshold
    """

    PERCENTAGE_OFF = "PERCENTAGE_OFF"
    FIXED_AMOUNT_OFF = "FIXED_AMOUNT_OFF"
    BUY_X_GET_Y = "BUY_X_GET_Y"
    FREE_SHIPPING = "FREE_SHIPPING"
    SPEND_X_GET_Y_OFF = "SPEND_X_GET_Y_OFF"


@dataclass(frozen=True)
class DiscountRule:
    """
    Discount rule entity.

    Attributes:
        id: Rule identifier
        tenant_id: Owning tenant; a rule is only visible within its tenant
        name: Unique per tenant
        type: Pricing semantics (see DiscountType)
        discount_value: Percentage points, fixed amount or flat amount depending on type
        max_discount: Optional cap, only meaningful for PERCENTAGE_OFF
        min_order_amount: Optional subtotal floor
        min_item_quantity: Optional unit-count floor
        buy_quantity / get_quantity / get_discount: BUY_X_GET_Y parameters
        spend_threshold: Subtotal required by SPEND_X_GET_Y_OFF
        applies_to_all: When False, the cart needs an applicable product or category
        usage_limit / times_used: Lifetime redemption cap and counter
        starts_at / expires_at: Half-open validity window [starts_at, expires_at)
        priority: Higher evaluates first
    """

    id: str
    tenant_id: str
    name: str
    type: DiscountType
    discount_value: Decimal = Decimal("0")
    is_active: bool = True
    is_automatic: bool = True
    max_discount: Decimal | None = None
    min_order_amount: Decimal | None = None
    min_item_quantity: int | None = None
    buy_quantity: int | None = None
    get_quantity: int | None = None
    get_discount: Decimal | None = None
    spend_threshold: Decimal | None = None
    applies_to_all: bool = True
    applicable_products: frozenset[str] = field(default_factory=frozenset)
    applicable_categories: frozenset[str] = field(default_factory=frozenset)
    usage_limit: int | None = None
    times_used: int = 0
    starts_at: datetime | None = None
    expires_at: datetime | None = None
    priority: int = 0
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @property
    def is_candidate(self) -> bool:
        """Whether the rule takes part in automatic cart evaluation."""
        return self.is_active and self.is_automatic

    @property
    def has_been_used(self) -> bool:
        return self.times_used > 0

    def is_within_window(self, now: datetime) -> bool:
        """Check the half-open validity window; expires exactly at expires_at."""
        if self.starts_at is not None and self.starts_at > now:
            return False
        if self.expires_at is not None and self.expires_at <= now:
            return False
        return True

    def has_usage_remaining(self) -> bool:
        """Check the lifetime usage limit."""
        return self.usage_limit is None or self.times_used < self.usage_limit

    def to_dict(self) -> dict:
        """Convert to a plain dictionary (API responses)."""
        return {
            "id": self.id,
            "name": self.name,
            "type": self.type.value,
            "is_active": self.is_active,
            "is_automatic": self.is_automatic,
            "discount_value": self.discount_value,
            "max_discount": self.max_discount,
            "min_order_amount": self.min_order_amount,
            "min_item_quantity": self.min_item_quantity,
            "buy_quantity": self.buy_quantity,
            "get_quantity": self.get_quantity,
            "get_discount": self.get_discount,
            "spend_threshold": self.spend_threshold,
            "applies_to_all": self.applies_to_all,
            "applicable_products": sorted(self.applicable_products),
            "applicable_categories": sorted(self.applicable_categories),
            "usage_limit": self.usage_limit,
            "times_used": self.times_used,
            "starts_at": self.starts_at,
            "expires_at": self.expires_at,
            "priority": self.priority,
            "created_at": self.created_at,
            "updated_at": self.updated_at,
        }
