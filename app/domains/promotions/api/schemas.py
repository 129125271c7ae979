"""
Promotions API Schemas

Pydantic schemas for discount rule administration and cart evaluation.
"""

from datetime import UTC, datetime
from decimal import Decimal

from pydantic import BaseModel, Field, field_validator, model_validator

from app.domains.promotions.domain.entities.discount_rule import DiscountRule, DiscountType
from app.domains.promotions.domain.value_objects.cart import (
    AppliedRule,
    CartItem,
    CartSnapshot,
    DiscountEvaluation,
)


def _as_float(value: Decimal | None) -> float | None:
    return float(value) if value is not None else None


class DiscountRuleFields(BaseModel):
    """Optional rule fields shared by create and update."""

    is_active: bool | None = None
    is_automatic: bool | None = None
    max_discount: Decimal | None = Field(None, ge=0, description="Cap for PERCENTAGE_OFF")
    min_order_amount: Decimal | None = Field(None, ge=0)
    min_item_quantity: int | None = Field(None, ge=0)
    buy_quantity: int | None = Field(None, ge=0)
    get_quantity: int | None = Field(None, ge=0)
    get_discount: Decimal | None = Field(None, ge=0, description="Percent off each 'get' unit (default 100)")
    spend_threshold: Decimal | None = Field(None, ge=0)
    applies_to_all: bool | None = None
    applicable_products: list[str] | None = None
    applicable_categories: list[str] | None = None
    usage_limit: int | None = Field(None, ge=0)
    starts_at: datetime | None = None
    expires_at: datetime | None = None
    priority: int | None = None

    @field_validator("starts_at", "expires_at")
    @classmethod
    def assume_utc(cls, v: datetime | None) -> datetime | None:
        """Dates without an offset are taken as UTC."""
        if v is not None and v.tzinfo is None:
            return v.replace(tzinfo=UTC)
        return v

    @model_validator(mode="after")
    def validate_window(self):
        if self.starts_at and self.expires_at and self.expires_at <= self.starts_at:
            raise ValueError("expires_at must be later than starts_at")
        return self


class DiscountRuleCreate(DiscountRuleFields):
    """Schema for creating a discount rule."""

    name: str = Field(..., min_length=1, max_length=200)
    type: DiscountType
    discount_value: Decimal = Field(..., ge=0)


class DiscountRuleUpdate(DiscountRuleFields):
    """Schema for partially updating a discount rule. Unset fields are left untouched."""

    name: str | None = Field(None, min_length=1, max_length=200)
    type: DiscountType | None = None
    discount_value: Decimal | None = Field(None, ge=0)


class DiscountRuleResponse(BaseModel):
    """Discount rule response schema."""

    id: str
    name: str
    type: DiscountType
    is_active: bool
    is_automatic: bool
    discount_value: float
    max_discount: float | None = None
    min_order_amount: float | None = None
    min_item_quantity: int | None = None
    buy_quantity: int | None = None
    get_quantity: int | None = None
    get_discount: float | None = None
    spend_threshold: float | None = None
    applies_to_all: bool
    applicable_products: list[str]
    applicable_categories: list[str]
    usage_limit: int | None = None
    times_used: int
    starts_at: datetime | None = None
    expires_at: datetime | None = None
    priority: int
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @classmethod
    def from_entity(cls, rule: DiscountRule) -> "DiscountRuleResponse":
        data = rule.to_dict()
        for key in ("discount_value", "max_discount", "min_order_amount", "get_discount", "spend_threshold"):
            data[key] = _as_float(data[key])
        return cls(**data)


class PaginationMeta(BaseModel):
    """Pagination block of list responses."""

    total: int
    limit: int
    offset: int
    has_more: bool


class DiscountRuleListResponse(BaseModel):
    """Paginated discount rule list."""

    data: list[DiscountRuleResponse]
    pagination: PaginationMeta


class DeleteDiscountRuleResponse(BaseModel):
    """Delete acknowledgement."""

    success: bool
    id: str


class CartItemRequest(BaseModel):
    """One cart line. Values are trusted as validated by the caller."""

    product_id: str
    category_id: str | None = None
    quantity: int
    price: Decimal

    def to_domain(self) -> CartItem:
        return CartItem(
            product_id=self.product_id,
            category_id=self.category_id,
            quantity=self.quantity,
            price=self.price,
        )


class CartEvaluationRequest(BaseModel):
    """Cart snapshot to evaluate automatic discounts against."""

    subtotal: Decimal
    quantity: int
    items: list[CartItemRequest] = Field(default_factory=list)

    def to_domain(self) -> CartSnapshot:
        return CartSnapshot(
            subtotal=self.subtotal,
            quantity=self.quantity,
            items=tuple(item.to_domain() for item in self.items),
        )


class AppliedRuleResponse(BaseModel):
    """A rule contributing to the cart discount."""

    id: str
    name: str
    type: DiscountType
    discount_value: float
    calculated_discount: float

    @classmethod
    def from_domain(cls, applied: AppliedRule) -> "AppliedRuleResponse":
        return cls(
            id=applied.rule_id,
            name=applied.name,
            type=applied.type,
            discount_value=float(applied.discount_value),
            calculated_discount=float(applied.calculated_discount),
        )


class DiscountEvaluationResponse(BaseModel):
    """Evaluation result: applicable rules and total cart discount."""

    applicable_rules: list[AppliedRuleResponse]
    total_discount: float
    free_shipping: bool = False

    @classmethod
    def from_domain(cls, evaluation: DiscountEvaluation) -> "DiscountEvaluationResponse":
        return cls(
            applicable_rules=[AppliedRuleResponse.from_domain(r) for r in evaluation.applied_rules],
            total_discount=float(evaluation.total_discount),
            free_shipping=evaluation.waives_shipping,
        )


__all__ = [
    "DiscountRuleCreate",
    "DiscountRuleUpdate",
    "DiscountRuleResponse",
    "DiscountRuleListResponse",
    "PaginationMeta",
    "DeleteDiscountRuleResponse",
    "CartItemRequest",
    "CartEvaluationRequest",
    "AppliedRuleResponse",
    "DiscountEvaluationResponse",
]
