"""
Update Discount Rule Use Case

Partial updates: only fields present in `changes` are written, and an
explicit None clears a nullable field.
"""

import logging
from typing import Any

from app.core.domain import DuplicateEntityException, EntityNotFoundException, ValidationException
from app.core.tenancy.context import require_tenant_id
from app.domains.promotions.application.ports import IDiscountRuleRepository
from app.domains.promotions.domain.entities.discount_rule import DiscountRule, DiscountType
from app.domains.promotions.domain.services import REQUIRED_FIELDS, validate_rule_fields

logger = logging.getLogger(__name__)

# Columns that cannot be cleared
NON_NULLABLE_FIELDS = frozenset(
    {
        "name",
        "type",
        "is_active",
        "is_automatic",
        "discount_value",
        "applies_to_all",
        "applicable_products",
        "applicable_categories",
        "priority",
    }
)


class UpdateDiscountRuleUseCase:
    """Use Case: Update Discount Rule"""

    def __init__(self, rule_repository: IDiscountRuleRepository):
        self.rule_repository = rule_repository

    async def execute(self, tenant_id: str | None, rule_id: str, changes: dict[str, Any]) -> DiscountRule:
        """
        Update a discount rule.

        Raises:
            MissingTenantException: If tenant_id is absent
            EntityNotFoundException: If the rule does not exist for the tenant
            DuplicateEntityException: If renaming to a name already used by the tenant
            ValidationException: If the resulting rule lacks a type-specific field
                or its validity window would end before it starts
        """
        tenant_id = require_tenant_id(tenant_id)

        existing = await self.rule_repository.get_by_id(tenant_id, rule_id)
        if existing is None:
            raise EntityNotFoundException("DiscountRule", rule_id, "Discount rule not found")

        changes = {k: v for k, v in changes.items() if not (v is None and k in NON_NULLABLE_FIELDS)}
        if "type" in changes:
            changes["type"] = DiscountType(changes["type"])

        new_name = changes.get("name")
        if new_name and new_name != existing.name:
            duplicate = await self.rule_repository.get_by_name(tenant_id, new_name, exclude_id=existing.id)
            if duplicate is not None:
                raise DuplicateEntityException(
                    "DiscountRule",
                    "name",
                    new_name,
                    message="Discount rule with this name already exists",
                )

        merged = {**existing.to_dict(), **changes}
        merged_type = DiscountType(merged["type"])
        if "type" in changes or any(name in changes for name in REQUIRED_FIELDS[merged_type]):
            validate_rule_fields(merged_type, merged)

        starts_at, expires_at = merged.get("starts_at"), merged.get("expires_at")
        if ("starts_at" in changes or "expires_at" in changes) and starts_at and expires_at:
            if expires_at <= starts_at:
                raise ValidationException("expires_at must be later than starts_at", field="expires_at")

        if not changes:
            return existing

        rule = await self.rule_repository.update(tenant_id, existing.id, changes)
        if rule is None:
            raise EntityNotFoundException("DiscountRule", rule_id, "Discount rule not found")

        logger.info(f"Discount rule updated: {rule.id} fields={sorted(changes)}")
        return rule


__all__ = ["UpdateDiscountRuleUseCase"]
