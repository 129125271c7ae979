"""
Unit Tests for EvaluateDiscountRulesUseCase

Covers additive stacking, two-stage rounding and the storefront
scenarios a checkout flow relies on.
"""

from datetime import timedelta
from decimal import Decimal

import pytest

from app.core.domain import MissingTenantException
from app.domains.promotions.application.use_cases import EvaluateDiscountRulesUseCase
from app.domains.promotions.domain.entities.discount_rule import DiscountType


@pytest.fixture
def use_case(mock_rule_repository, fixed_clock):
    return EvaluateDiscountRulesUseCase(rule_repository=mock_rule_repository, clock=fixed_clock)


@pytest.fixture
def six_unit_cart(cart_factory):
    return cart_factory("120", 6, [("p1", 3, "20"), ("p2", 3, "20")])


@pytest.mark.unit
class TestEvaluateDiscountRulesUseCase:
    """Test cases for EvaluateDiscountRulesUseCase"""

    @pytest.mark.asyncio
    async def test_percentage_and_bogo_stack(
        self, use_case, mock_rule_repository, rule_factory, six_unit_cart, tenant_id, now
    ):
        """Both eligible rules contribute; priority only orders them."""
        # Arrange
        rule_a = rule_factory(
            id="rule-a",
            name="Ten percent",
            type=DiscountType.PERCENTAGE_OFF,
            discount_value="10",
            max_discount="15",
            min_order_amount="50",
            priority=10,
        )
        rule_b = rule_factory(
            id="rule-b",
            name="Buy two get one",
            type=DiscountType.BUY_X_GET_Y,
            discount_value="0",
            buy_quantity=2,
            get_quantity=1,
            get_discount="100",
            priority=5,
        )
        mock_rule_repository.list_active_automatic.return_value = [rule_a, rule_b]

        # Act
        result = await use_case.execute(tenant_id, six_unit_cart)

        # Assert
        assert [r.rule_id for r in result.applied_rules] == ["rule-a", "rule-b"]
        assert result.applied_rules[0].calculated_discount == Decimal("12.00")
        assert result.applied_rules[1].calculated_discount == Decimal("40.00")
        assert result.total_discount == Decimal("52.00")
        mock_rule_repository.list_active_automatic.assert_awaited_once_with(tenant_id, now)

    @pytest.mark.asyncio
    async def test_spend_threshold_not_reached_is_excluded(
        self, use_case, mock_rule_repository, rule_factory, six_unit_cart, tenant_id
    ):
        rule_c = rule_factory(
            id="rule-c",
            type=DiscountType.SPEND_X_GET_Y_OFF,
            discount_value="30",
            spend_threshold="200",
        )
        mock_rule_repository.list_active_automatic.return_value = [rule_c]

        result = await use_case.execute(tenant_id, six_unit_cart)

        assert result.applied_rules == ()
        assert result.total_discount == Decimal("0.00")

    @pytest.mark.asyncio
    async def test_fixed_amount_limited_to_subtotal(
        self, use_case, mock_rule_repository, rule_factory, cart_factory, tenant_id
    ):
        rule = rule_factory(type=DiscountType.FIXED_AMOUNT_OFF, discount_value="50")
        mock_rule_repository.list_active_automatic.return_value = [rule]

        result = await use_case.execute(tenant_id, cart_factory("40", 1, [("p1", 1, "40")]))

        assert result.applied_rules[0].calculated_discount == Decimal("40.00")
        assert result.total_discount == Decimal("40.00")

    @pytest.mark.asyncio
    async def test_exhausted_usage_limit_is_excluded(
        self, use_case, mock_rule_repository, rule_factory, six_unit_cart, tenant_id
    ):
        rule = rule_factory(type=DiscountType.FIXED_AMOUNT_OFF, discount_value="5", usage_limit=5, times_used=5)
        mock_rule_repository.list_active_automatic.return_value = [rule]

        result = await use_case.execute(tenant_id, six_unit_cart)

        assert result.applied_rules == ()

    @pytest.mark.asyncio
    async def test_free_shipping_included_at_zero(
        self, use_case, mock_rule_repository, rule_factory, cart_factory, tenant_id
    ):
        rule = rule_factory(
            id="ship",
            name="Free shipping",
            type=DiscountType.FREE_SHIPPING,
            discount_value="0",
            max_discount="10",
        )
        mock_rule_repository.list_active_automatic.return_value = [rule]

        result = await use_case.execute(tenant_id, cart_factory("15", 1, [("p1", 1, "15")]))

        assert len(result.applied_rules) == 1
        assert result.applied_rules[0].type == DiscountType.FREE_SHIPPING
        assert result.applied_rules[0].calculated_discount == Decimal("0.00")
        assert result.total_discount == Decimal("0.00")
        assert result.waives_shipping is True

    @pytest.mark.asyncio
    async def test_two_stage_rounding(self, use_case, mock_rule_repository, rule_factory, cart_factory, tenant_id):
        """Per-rule amounts round independently; the total rounds the unrounded sum."""
        # 15% of 10.10 = 1.515 per rule
        rules = [
            rule_factory(id="r1", name="First", discount_value="15", priority=2),
            rule_factory(id="r2", name="Second", discount_value="15", priority=1),
        ]
        mock_rule_repository.list_active_automatic.return_value = rules

        result = await use_case.execute(tenant_id, cart_factory("10.10", 1))

        assert [r.calculated_discount for r in result.applied_rules] == [Decimal("1.52"), Decimal("1.52")]
        assert result.total_discount == Decimal("3.03")

    @pytest.mark.asyncio
    async def test_equal_priority_keeps_store_order(
        self, use_case, mock_rule_repository, rule_factory, cart_factory, tenant_id, now
    ):
        """Ties on priority are reported newest first, as the store returns them."""
        newer = rule_factory(id="newer", name="Newer", priority=5, created_at=now - timedelta(days=1))
        older = rule_factory(id="older", name="Older", priority=5, created_at=now - timedelta(days=30))
        mock_rule_repository.list_active_automatic.return_value = [newer, older]

        result = await use_case.execute(tenant_id, cart_factory("100", 2))

        assert [r.rule_id for r in result.applied_rules] == ["newer", "older"]
        assert result.total_discount == Decimal("20.00")

    @pytest.mark.asyncio
    async def test_zero_amount_rules_are_omitted(
        self, use_case, mock_rule_repository, rule_factory, cart_factory, tenant_id
    ):
        rule = rule_factory(type=DiscountType.BUY_X_GET_Y, discount_value="0", buy_quantity=2, get_quantity=1)
        mock_rule_repository.list_active_automatic.return_value = [rule]

        result = await use_case.execute(tenant_id, cart_factory("0", 0))

        assert result.applied_rules == ()

    @pytest.mark.asyncio
    async def test_ineligible_rules_are_skipped_not_raised(
        self, use_case, mock_rule_repository, rule_factory, cart_factory, tenant_id
    ):
        eligible = rule_factory(id="ok", name="Five off", type=DiscountType.FIXED_AMOUNT_OFF, discount_value="5")
        too_small = rule_factory(id="min", name="Big spender", min_order_amount="500")
        wrong_product = rule_factory(id="prod", name="Shoes only", applies_to_all=False, applicable_products=["x"])
        mock_rule_repository.list_active_automatic.return_value = [too_small, eligible, wrong_product]

        result = await use_case.execute(tenant_id, cart_factory("50", 1, [("p1", 1, "50")]))

        assert [r.rule_id for r in result.applied_rules] == ["ok"]
        assert result.total_discount == Decimal("5.00")

    @pytest.mark.asyncio
    async def test_no_rules(self, use_case, cart_factory, tenant_id):
        result = await use_case.execute(tenant_id, cart_factory("99", 3))

        assert result.applied_rules == ()
        assert result.total_discount == Decimal("0.00")
        assert result.waives_shipping is False

    @pytest.mark.asyncio
    @pytest.mark.parametrize("missing", [None, "", "   "])
    async def test_missing_tenant_rejected(self, use_case, mock_rule_repository, cart_factory, missing):
        with pytest.raises(MissingTenantException):
            await use_case.execute(missing, cart_factory("10", 1))

        mock_rule_repository.list_active_automatic.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_evaluation_is_read_only(
        self, use_case, mock_rule_repository, rule_factory, six_unit_cart, tenant_id
    ):
        mock_rule_repository.list_active_automatic.return_value = [rule_factory(usage_limit=10, times_used=3)]

        await use_case.execute(tenant_id, six_unit_cart)

        mock_rule_repository.update.assert_not_awaited()
        mock_rule_repository.create.assert_not_awaited()
        mock_rule_repository.delete.assert_not_awaited()
