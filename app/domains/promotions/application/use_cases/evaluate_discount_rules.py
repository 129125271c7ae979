"""
Evaluate Discount Rules Use Case

Applies every eligible automatic discount rule of a tenant to a cart.
"""

from collections.abc import Callable
from datetime import UTC, datetime
from decimal import Decimal

from app.core.domain import round_currency
from app.core.shared.logger import get_service_logger
from app.core.tenancy.context import require_tenant_id
from app.domains.promotions.application.ports import IDiscountRuleRepository
from app.domains.promotions.domain.services import (
    calculate_discount,
    first_failed_check,
    is_applicable,
)
from app.domains.promotions.domain.value_objects import (
    AppliedRule,
    CartSnapshot,
    DiscountEvaluation,
)

logger = get_service_logger("discount_evaluation")


def utc_now() -> datetime:
    return datetime.now(UTC)


class EvaluateDiscountRulesUseCase:
    """
    Use Case: Evaluate Discount Rules

    Stacks discounts additively: every eligible rule contributes, and
    priority only decides the order in which rules are evaluated and
    reported.

    Rounding is two-stage. Each applied rule reports its own amount
    rounded to cents, while the total accumulates unrounded amounts and
    is rounded once at the end, so the reported amounts may not add up
    exactly to the total.

    Evaluation only reads `times_used`; it is safe to call speculatively
    (e.g. cart previews). A rule offered here may still be rejected by
    redemption if its usage limit is reached concurrently.
    """

    def __init__(
        self,
        rule_repository: IDiscountRuleRepository,
        clock: Callable[[], datetime] = utc_now,
    ):
        """
        Initialize use case with dependencies.

        Args:
            rule_repository: Read access to the tenant's discount rules
            clock: Source of the evaluation time
        """
        self.rule_repository = rule_repository
        self.clock = clock

    async def execute(self, tenant_id: str | None, cart: CartSnapshot) -> DiscountEvaluation:
        """
        Evaluate the tenant's automatic rules against a cart.

        Args:
            tenant_id: Tenant scope (required)
            cart: Cart snapshot supplied by the caller

        Returns:
            DiscountEvaluation with the applied rules and the total discount

        Raises:
            MissingTenantException: If tenant_id is absent
        """
        tenant_id = require_tenant_id(tenant_id)
        now = self.clock()
        log = logger.with_context(tenant_id=tenant_id)

        rules = await self.rule_repository.list_active_automatic(tenant_id, now)

        applied: list[AppliedRule] = []
        total = Decimal("0")

        for rule in rules:
            failed = first_failed_check(rule, cart, now)
            if failed is not None:
                log.debug(f"Discount rule skipped: {rule.name}", rule_id=rule.id, failed_check=failed)
                continue

            amount = calculate_discount(rule, cart)
            if not is_applicable(rule, amount):
                log.debug(f"Discount rule produced no discount: {rule.name}", rule_id=rule.id)
                continue

            applied.append(
                AppliedRule(
                    rule_id=rule.id,
                    name=rule.name,
                    type=rule.type,
                    discount_value=rule.discount_value,
                    calculated_discount=round_currency(amount),
                )
            )
            total += amount

        evaluation = DiscountEvaluation(
            applied_rules=tuple(applied),
            total_discount=round_currency(total),
        )

        log.info(
            "Discount rules evaluated",
            candidates=len(rules),
            applied=len(applied),
            total_discount=str(evaluation.total_discount),
        )
        return evaluation


__all__ = ["EvaluateDiscountRulesUseCase", "utc_now"]
