"""
Delete Discount Rule Use Case
"""

import logging
from dataclasses import dataclass

from app.core.domain import BusinessRuleViolationException, EntityNotFoundException
from app.core.tenancy.context import require_tenant_id
from app.domains.promotions.application.ports import IDiscountRuleRepository

logger = logging.getLogger(__name__)


@dataclass
class DeleteDiscountRuleResponse:
    """Response from rule deletion."""

    id: str
    success: bool = True


class DeleteDiscountRuleUseCase:
    """
    Use Case: Delete Discount Rule

    A rule that has been redeemed at least once cannot be deleted; it has
    to be deactivated instead so order history keeps its reference.
    """

    def __init__(self, rule_repository: IDiscountRuleRepository):
        self.rule_repository = rule_repository

    async def execute(self, tenant_id: str | None, rule_id: str) -> DeleteDiscountRuleResponse:
        """
        Raises:
            MissingTenantException: If tenant_id is absent
            EntityNotFoundException: If the rule does not exist for the tenant
            BusinessRuleViolationException: If the rule has already been used
        """
        tenant_id = require_tenant_id(tenant_id)

        rule = await self.rule_repository.get_by_id(tenant_id, rule_id)
        if rule is None:
            raise EntityNotFoundException("DiscountRule", rule_id, "Discount rule not found")

        if rule.has_been_used:
            raise BusinessRuleViolationException(
                "discount_rule_in_use",
                "Cannot delete a discount rule that has been used. Deactivate it instead.",
                {"times_used": rule.times_used},
            )

        await self.rule_repository.delete(tenant_id, rule.id)
        logger.info(f"Discount rule deleted: {rule.id} for tenant {tenant_id}")
        return DeleteDiscountRuleResponse(id=rule.id)


__all__ = ["DeleteDiscountRuleUseCase", "DeleteDiscountRuleResponse"]
