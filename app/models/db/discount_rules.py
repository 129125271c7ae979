# ============================================================================
# SCOPE: MULTI-TENANT
# Description: Per-tenant automatic discount and promotion rules.
# Tenant-Aware: Yes - every row is scoped by tenant_id.
# ============================================================================
"""
DiscountRuleModel - Persistent storage for tenant discount rules.
"""

import uuid

from sqlalchemy import Boolean, Column, DateTime, Enum, Index, Integer, Numeric, String, UniqueConstraint, text
from sqlalchemy.dialects.postgresql import JSONB, UUID

from app.domains.promotions.domain.entities.discount_rule import DiscountType

from .base import Base, TimestampMixin
from .schemas import ECOMMERCE_SCHEMA


class DiscountRuleModel(Base, TimestampMixin):
    """
    Discount rule for a tenant.

    Monetary fields use NUMERIC(12, 2). `times_used` is only written by the
    checkout redemption path; evaluation never touches it.
    """

    __tablename__ = "discount_rules"

    id = Column(
        UUID(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
        comment="Unique discount rule identifier",
    )
    tenant_id = Column(String(64), nullable=False, index=True, comment="Owning tenant")

    name = Column(String(200), nullable=False, comment="Unique per tenant")
    type = Column(
        Enum(DiscountType, name="discount_type", schema=ECOMMERCE_SCHEMA),
        nullable=False,
        comment="Pricing semantics",
    )
    is_active = Column(Boolean, nullable=False, default=True, server_default=text("true"))
    is_automatic = Column(Boolean, nullable=False, default=True, server_default=text("true"))

    # Amounts
    discount_value = Column(Numeric(12, 2), nullable=False, default=0, server_default=text("0"))
    max_discount = Column(Numeric(12, 2), comment="Cap for PERCENTAGE_OFF")

    # Eligibility floors
    min_order_amount = Column(Numeric(12, 2))
    min_item_quantity = Column(Integer)

    # Buy X get Y
    buy_quantity = Column(Integer)
    get_quantity = Column(Integer)
    get_discount = Column(Numeric(12, 2), comment="Percent off each 'get' unit (100 when null)")

    # Spend threshold
    spend_threshold = Column(Numeric(12, 2))

    # Applicability
    applies_to_all = Column(Boolean, nullable=False, default=True, server_default=text("true"))
    applicable_products = Column(JSONB, nullable=False, default=list, server_default=text("'[]'::jsonb"))
    applicable_categories = Column(JSONB, nullable=False, default=list, server_default=text("'[]'::jsonb"))

    # Usage
    usage_limit = Column(Integer)
    times_used = Column(Integer, nullable=False, default=0, server_default=text("0"))

    # Validity window [starts_at, expires_at)
    starts_at = Column(DateTime(timezone=True))
    expires_at = Column(DateTime(timezone=True))

    priority = Column(Integer, nullable=False, default=0, server_default=text("0"))

    __table_args__ = (
        UniqueConstraint("tenant_id", "name", name="uq_discount_rules_tenant_name"),
        Index("idx_discount_rules_tenant_candidates", "tenant_id", "is_active", "is_automatic"),
        Index("idx_discount_rules_tenant_priority", "tenant_id", "priority", "created_at"),
        {"schema": ECOMMERCE_SCHEMA},
    )

    def __repr__(self) -> str:
        return f"<DiscountRuleModel(id={self.id}, tenant='{self.tenant_id}', name='{self.name}', type={self.type})>"
