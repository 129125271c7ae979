"""
Create Discount Rule Use Case

Business logic for creating discount rules.
"""

import logging
from typing import Any

from app.core.domain import DuplicateEntityException
from app.core.tenancy.context import require_tenant_id
from app.domains.promotions.application.ports import IDiscountRuleRepository
from app.domains.promotions.domain.entities.discount_rule import DiscountRule, DiscountType
from app.domains.promotions.domain.services import validate_rule_fields

logger = logging.getLogger(__name__)

RULE_DEFAULTS: dict[str, Any] = {
    "is_active": True,
    "is_automatic": True,
    "applies_to_all": True,
    "applicable_products": [],
    "applicable_categories": [],
    "priority": 0,
}


class CreateDiscountRuleUseCase:
    """
    Use Case: Create Discount Rule

    Responsibilities:
    - Validate type-specific required fields
    - Enforce name uniqueness per tenant
    - Persist via repository with defaults applied
    """

    def __init__(self, rule_repository: IDiscountRuleRepository):
        self.rule_repository = rule_repository

    async def execute(self, tenant_id: str | None, data: dict[str, Any]) -> DiscountRule:
        """
        Create a discount rule.

        Args:
            tenant_id: Owning tenant
            data: Rule fields; `name` and `type` are required

        Raises:
            MissingTenantException: If tenant_id is absent
            ValidationException: If a type-specific field is missing
            DuplicateEntityException: If the tenant already has a rule with this name
        """
        tenant_id = require_tenant_id(tenant_id)

        fields = {**RULE_DEFAULTS, **{k: v for k, v in data.items() if v is not None}}
        fields["type"] = DiscountType(fields["type"])

        validate_rule_fields(fields["type"], fields)

        existing = await self.rule_repository.get_by_name(tenant_id, fields["name"])
        if existing is not None:
            raise DuplicateEntityException(
                "DiscountRule",
                "name",
                fields["name"],
                message="Discount rule with this name already exists",
            )

        rule = await self.rule_repository.create(tenant_id, fields)
        logger.info(f"Discount rule created: {rule.name} ({rule.type.value}) for tenant {tenant_id}")
        return rule


__all__ = ["CreateDiscountRuleUseCase", "RULE_DEFAULTS"]
