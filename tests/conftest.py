"""
Shared pytest fixtures for all tests.

This module provides common fixtures for mock repositories and sessions,
test data builders, and the FastAPI test client.
"""

import os
from datetime import UTC, datetime
from decimal import Decimal
from typing import Any
from unittest.mock import AsyncMock

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

# Ensure test environment
os.environ["ENVIRONMENT"] = "test"
os.environ["DB_CHECK_ON_STARTUP"] = "false"

from app.domains.promotions.application.ports import IDiscountRuleRepository  # noqa: E402
from app.domains.promotions.domain.entities.discount_rule import DiscountRule, DiscountType  # noqa: E402
from app.domains.promotions.domain.value_objects.cart import CartItem, CartSnapshot  # noqa: E402

TENANT_ID = "store-42"
OTHER_TENANT_ID = "store-99"
RULE_ID = "5f0c6b7e-2d0a-4c55-9a57-6c1f4f0d7a11"

# Fixed evaluation instant for deterministic validity-window checks
NOW = datetime(2026, 6, 15, 12, 0, tzinfo=UTC)


# ============================================================================
# TEST DATA BUILDERS
# ============================================================================


def make_rule(**overrides: Any) -> DiscountRule:
    """Build a DiscountRule with sensible defaults."""
    data: dict[str, Any] = {
        "id": RULE_ID,
        "tenant_id": TENANT_ID,
        "name": "Summer Sale",
        "type": DiscountType.PERCENTAGE_OFF,
        "discount_value": Decimal("10"),
    }
    data.update(overrides)
    for key in ("discount_value", "max_discount", "min_order_amount", "get_discount", "spend_threshold"):
        if data.get(key) is not None:
            data[key] = Decimal(str(data[key]))
    for key in ("applicable_products", "applicable_categories"):
        if key in data:
            data[key] = frozenset(data[key])
    return DiscountRule(**data)


def make_cart(subtotal: Any, quantity: int, items: list[tuple] | None = None) -> CartSnapshot:
    """
    Build a CartSnapshot.

    Items are (product_id, quantity, price) or (product_id, quantity, price, category_id).
    """
    cart_items = tuple(
        CartItem(
            product_id=item[0],
            quantity=item[1],
            price=Decimal(str(item[2])),
            category_id=item[3] if len(item) > 3 else None,
        )
        for item in (items or [])
    )
    return CartSnapshot(subtotal=Decimal(str(subtotal)), quantity=quantity, items=cart_items)


# ============================================================================
# MOCK FIXTURES
# ============================================================================


@pytest.fixture
def rule_factory():
    """Factory fixture building discount rules."""
    return make_rule


@pytest.fixture
def cart_factory():
    """Factory fixture building cart snapshots."""
    return make_cart


@pytest.fixture
def mock_rule_repository() -> AsyncMock:
    """Mock discount rule repository honoring the repository port."""
    repo = AsyncMock(spec=IDiscountRuleRepository)
    repo.list_active_automatic.return_value = []
    repo.list_rules.return_value = []
    repo.count.return_value = 0
    repo.get_by_id.return_value = None
    repo.get_by_name.return_value = None
    repo.delete.return_value = True
    return repo


@pytest.fixture
def mock_async_session() -> AsyncMock:
    """Mock SQLAlchemy async session."""
    session = AsyncMock(spec=AsyncSession)
    return session


@pytest.fixture
def fixed_clock():
    """Clock returning a fixed instant."""
    return lambda: NOW


@pytest.fixture
def now() -> datetime:
    """The fixed evaluation instant used by fixed_clock."""
    return NOW


@pytest.fixture
def tenant_id() -> str:
    return TENANT_ID
