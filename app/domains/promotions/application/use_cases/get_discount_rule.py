"""
Get Discount Rule Use Case
"""

from app.core.domain import EntityNotFoundException
from app.core.tenancy.context import require_tenant_id
from app.domains.promotions.application.ports import IDiscountRuleRepository
from app.domains.promotions.domain.entities.discount_rule import DiscountRule


class GetDiscountRuleUseCase:
    """Use Case: fetch a single discount rule of a tenant."""

    def __init__(self, rule_repository: IDiscountRuleRepository):
        self.rule_repository = rule_repository

    async def execute(self, tenant_id: str | None, rule_id: str) -> DiscountRule:
        """
        Raises:
            MissingTenantException: If tenant_id is absent
            EntityNotFoundException: If the rule does not exist for the tenant
        """
        tenant_id = require_tenant_id(tenant_id)

        rule = await self.rule_repository.get_by_id(tenant_id, rule_id)
        if rule is None:
            raise EntityNotFoundException("DiscountRule", rule_id, "Discount rule not found")
        return rule


__all__ = ["GetDiscountRuleUseCase"]
