"""Create discount rules table.

Revision ID: 001_discount_rules
Revises: None
Create Date: 2026-10-18

Creates the ecommerce schema with:
- discount_type: enum of supported pricing semantics
- discount_rules: per-tenant automatic discount and promotion rules
"""

from typing import Sequence, Union

import sqlalchemy as sa
from sqlalchemy.dialects.postgresql import ENUM, JSONB, UUID

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "001_discount_rules"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

SCHEMA = "ecommerce"

DISCOUNT_TYPES = (
    "PERCENTAGE_OFF",
    "FIXED_AMOUNT_OFF",
    "BUY_X_GET_Y",
    "FREE_SHIPPING",
    "SPEND_X_GET_Y_OFF",
)


def upgrade() -> None:
    """Create ecommerce schema, discount_type enum and discount_rules table."""
    op.execute(f"CREATE SCHEMA IF NOT EXISTS {SCHEMA}")

    discount_type = ENUM(*DISCOUNT_TYPES, name="discount_type", schema=SCHEMA, create_type=False)
    discount_type.create(op.get_bind(), checkfirst=True)

    op.create_table(
        "discount_rules",
        sa.Column(
            "id",
            UUID(as_uuid=True),
            primary_key=True,
            server_default=sa.text("gen_random_uuid()"),
            comment="Unique discount rule identifier",
        ),
        sa.Column("tenant_id", sa.String(64), nullable=False, comment="Owning tenant"),
        sa.Column("name", sa.String(200), nullable=False, comment="Unique per tenant"),
        sa.Column("type", discount_type, nullable=False, comment="Pricing semantics"),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.text("true")),
        sa.Column("is_automatic", sa.Boolean(), nullable=False, server_default=sa.text("true")),
        sa.Column("discount_value", sa.Numeric(12, 2), nullable=False, server_default=sa.text("0")),
        sa.Column("max_discount", sa.Numeric(12, 2), nullable=True, comment="Cap for PERCENTAGE_OFF"),
        sa.Column("min_order_amount", sa.Numeric(12, 2), nullable=True),
        sa.Column("min_item_quantity", sa.Integer(), nullable=True),
        sa.Column("buy_quantity", sa.Integer(), nullable=True),
        sa.Column("get_quantity", sa.Integer(), nullable=True),
        sa.Column(
            "get_discount",
            sa.Numeric(12, 2),
            nullable=True,
            comment="Percent off each 'get' unit (100 when null)",
        ),
        sa.Column("spend_threshold", sa.Numeric(12, 2), nullable=True),
        sa.Column("applies_to_all", sa.Boolean(), nullable=False, server_default=sa.text("true")),
        sa.Column("applicable_products", JSONB(), nullable=False, server_default=sa.text("'[]'::jsonb")),
        sa.Column("applicable_categories", JSONB(), nullable=False, server_default=sa.text("'[]'::jsonb")),
        sa.Column("usage_limit", sa.Integer(), nullable=True),
        sa.Column("times_used", sa.Integer(), nullable=False, server_default=sa.text("0")),
        sa.Column("starts_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("expires_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("priority", sa.Integer(), nullable=False, server_default=sa.text("0")),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.text("now()")),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.text("now()")),
        sa.UniqueConstraint("tenant_id", "name", name="uq_discount_rules_tenant_name"),
        schema=SCHEMA,
    )

    op.create_index(
        "ix_ecommerce_discount_rules_tenant_id",
        "discount_rules",
        ["tenant_id"],
        schema=SCHEMA,
    )
    op.create_index(
        "idx_discount_rules_tenant_candidates",
        "discount_rules",
        ["tenant_id", "is_active", "is_automatic"],
        schema=SCHEMA,
    )
    op.create_index(
        "idx_discount_rules_tenant_priority",
        "discount_rules",
        ["tenant_id", "priority", "created_at"],
        schema=SCHEMA,
    )


def downgrade() -> None:
    """Drop discount_rules table and discount_type enum."""
    op.drop_index("idx_discount_rules_tenant_priority", table_name="discount_rules", schema=SCHEMA)
    op.drop_index("idx_discount_rules_tenant_candidates", table_name="discount_rules", schema=SCHEMA)
    op.drop_index("ix_ecommerce_discount_rules_tenant_id", table_name="discount_rules", schema=SCHEMA)
    op.drop_table("discount_rules", schema=SCHEMA)
    ENUM(name="discount_type", schema=SCHEMA).drop(op.get_bind(), checkfirst=True)
