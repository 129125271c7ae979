"""
Unit tests for the discount rule repository.

Tests the data access layer against a mocked async session.
"""

from datetime import UTC, datetime
from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock
from uuid import UUID, uuid4

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from app.domains.promotions.application.ports import IDiscountRuleRepository
from app.domains.promotions.domain.entities.discount_rule import DiscountRule, DiscountType
from app.domains.promotions.infrastructure.repositories import SQLAlchemyDiscountRuleRepository
from app.models.db.discount_rules import DiscountRuleModel

TENANT_ID = "store-42"


# ============================================================================
# FIXTURES
# ============================================================================


@pytest.fixture
def mock_async_session():
    """Create a mock async database session."""
    session = AsyncMock(spec=AsyncSession)
    session.execute = AsyncMock()
    session.flush = AsyncMock()
    session.refresh = AsyncMock()
    session.add = MagicMock()
    return session


@pytest.fixture
def sample_rule_model():
    """Sample SQLAlchemy discount rule model."""
    model = MagicMock()
    model.id = uuid4()
    model.tenant_id = TENANT_ID
    model.name = "Summer Sale"
    model.type = DiscountType.PERCENTAGE_OFF
    model.is_active = True
    model.is_automatic = True
    model.discount_value = Decimal("10.00")
    model.max_discount = Decimal("15.00")
    model.min_order_amount = Decimal("50.00")
    model.min_item_quantity = None
    model.buy_quantity = None
    model.get_quantity = None
    model.get_discount = None
    model.spend_threshold = None
    model.applies_to_all = False
    model.applicable_products = ["p-1", "p-2"]
    model.applicable_categories = []
    model.usage_limit = 100
    model.times_used = 7
    model.starts_at = datetime(2026, 1, 1, tzinfo=UTC)
    model.expires_at = None
    model.priority = 10
    model.created_at = datetime(2025, 12, 1, tzinfo=UTC)
    model.updated_at = datetime(2025, 12, 2, tzinfo=UTC)
    return model


@pytest.fixture
def repository(mock_async_session):
    return SQLAlchemyDiscountRuleRepository(session=mock_async_session)


def _scalars_result(models):
    result = MagicMock()
    result.scalars.return_value.all.return_value = models
    result.scalars.return_value.first.return_value = models[0] if models else None
    return result


# ============================================================================
# Read Tests
# ============================================================================


@pytest.mark.unit
@pytest.mark.repository
def test_repository_implements_port(repository):
    assert isinstance(repository, IDiscountRuleRepository)


@pytest.mark.unit
@pytest.mark.repository
@pytest.mark.asyncio
async def test_list_active_automatic_maps_entities(repository, mock_async_session, sample_rule_model):
    mock_async_session.execute.return_value = _scalars_result([sample_rule_model])

    rules = await repository.list_active_automatic(TENANT_ID, datetime(2026, 6, 1, tzinfo=UTC))

    assert len(rules) == 1
    rule = rules[0]
    assert isinstance(rule, DiscountRule)
    assert rule.id == str(sample_rule_model.id)
    assert rule.type == DiscountType.PERCENTAGE_OFF
    assert rule.max_discount == Decimal("15.00")
    assert rule.applicable_products == frozenset({"p-1", "p-2"})
    assert rule.times_used == 7
    mock_async_session.execute.assert_awaited_once()


@pytest.mark.unit
@pytest.mark.repository
@pytest.mark.asyncio
async def test_list_active_automatic_query_is_tenant_scoped_and_ordered(repository, mock_async_session):
    mock_async_session.execute.return_value = _scalars_result([])

    await repository.list_active_automatic(TENANT_ID, datetime(2026, 6, 1, tzinfo=UTC))

    query = mock_async_session.execute.await_args.args[0]
    sql = str(query)
    assert "discount_rules.tenant_id" in sql
    assert "discount_rules.is_active" in sql
    assert "discount_rules.expires_at" in sql
    assert "ORDER BY" in sql
    assert sql.index("discount_rules.priority DESC") < sql.index("discount_rules.created_at DESC")


@pytest.mark.unit
@pytest.mark.repository
@pytest.mark.asyncio
async def test_count_returns_scalar(repository, mock_async_session):
    result = MagicMock()
    result.scalar_one.return_value = 4
    mock_async_session.execute.return_value = result

    total = await repository.count(TENANT_ID, is_active=True, rule_type=DiscountType.FREE_SHIPPING)

    assert total == 4


@pytest.mark.unit
@pytest.mark.repository
@pytest.mark.asyncio
async def test_get_by_id_found(repository, mock_async_session, sample_rule_model):
    result = MagicMock()
    result.scalar_one_or_none.return_value = sample_rule_model
    mock_async_session.execute.return_value = result

    rule = await repository.get_by_id(TENANT_ID, str(sample_rule_model.id))

    assert rule is not None
    assert rule.name == "Summer Sale"


@pytest.mark.unit
@pytest.mark.repository
@pytest.mark.asyncio
async def test_get_by_id_invalid_uuid(repository, mock_async_session):
    rule = await repository.get_by_id(TENANT_ID, "not-a-uuid")

    assert rule is None
    mock_async_session.execute.assert_not_awaited()


@pytest.mark.unit
@pytest.mark.repository
@pytest.mark.asyncio
async def test_get_by_name_not_found(repository, mock_async_session):
    mock_async_session.execute.return_value = _scalars_result([])

    rule = await repository.get_by_name(TENANT_ID, "Unknown", exclude_id=str(uuid4()))

    assert rule is None


# ============================================================================
# Write Tests
# ============================================================================


@pytest.mark.unit
@pytest.mark.repository
@pytest.mark.asyncio
async def test_create_adds_and_flushes(repository, mock_async_session):
    rule = await repository.create(
        TENANT_ID,
        {
            "name": "B2G1",
            "type": DiscountType.BUY_X_GET_Y,
            "discount_value": Decimal("0"),
            "buy_quantity": 2,
            "get_quantity": 1,
            "applicable_products": ["p-1"],
            "times_used": 99,
        },
    )

    model = mock_async_session.add.call_args.args[0]
    assert isinstance(model, DiscountRuleModel)
    assert isinstance(model.id, UUID)
    assert model.tenant_id == TENANT_ID
    # times_used is not writable through create
    assert model.times_used == 0
    mock_async_session.flush.assert_awaited_once()
    mock_async_session.refresh.assert_awaited_once_with(model)

    assert rule.type == DiscountType.BUY_X_GET_Y
    assert rule.buy_quantity == 2
    assert rule.times_used == 0


@pytest.mark.unit
@pytest.mark.repository
@pytest.mark.asyncio
async def test_update_sets_fields(repository, mock_async_session, sample_rule_model):
    result = MagicMock()
    result.scalar_one_or_none.return_value = sample_rule_model
    mock_async_session.execute.return_value = result

    rule = await repository.update(
        TENANT_ID,
        str(sample_rule_model.id),
        {"priority": 3, "max_discount": None, "tenant_id": "hijack"},
    )

    assert sample_rule_model.priority == 3
    assert sample_rule_model.max_discount is None
    assert sample_rule_model.tenant_id == TENANT_ID
    assert rule is not None
    assert rule.priority == 3
    mock_async_session.flush.assert_awaited_once()


@pytest.mark.unit
@pytest.mark.repository
@pytest.mark.asyncio
async def test_update_missing_rule(repository, mock_async_session):
    result = MagicMock()
    result.scalar_one_or_none.return_value = None
    mock_async_session.execute.return_value = result

    assert await repository.update(TENANT_ID, str(uuid4()), {"priority": 1}) is None
    mock_async_session.flush.assert_not_awaited()


@pytest.mark.unit
@pytest.mark.repository
@pytest.mark.asyncio
async def test_delete(repository, mock_async_session):
    result = MagicMock()
    result.rowcount = 1
    mock_async_session.execute.return_value = result

    assert await repository.delete(TENANT_ID, str(uuid4())) is True


@pytest.mark.unit
@pytest.mark.repository
@pytest.mark.asyncio
async def test_delete_invalid_uuid(repository, mock_async_session):
    assert await repository.delete(TENANT_ID, "bad-id") is False
    mock_async_session.execute.assert_not_awaited()
