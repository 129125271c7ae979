"""
List Discount Rules Use Case

Paginated listing of a tenant's discount rules.
"""

from dataclasses import dataclass, field

from app.core.tenancy.context import require_tenant_id
from app.domains.promotions.application.ports import IDiscountRuleRepository
from app.domains.promotions.domain.entities.discount_rule import DiscountRule, DiscountType


@dataclass
class ListDiscountRulesRequest:
    """Request for listing discount rules."""

    limit: int = 20
    offset: int = 0
    is_active: bool | None = None
    rule_type: DiscountType | None = None


@dataclass
class ListDiscountRulesResponse:
    """One page of discount rules."""

    rules: list[DiscountRule] = field(default_factory=list)
    total: int = 0
    limit: int = 20
    offset: int = 0

    @property
    def has_more(self) -> bool:
        return self.offset + len(self.rules) < self.total


class ListDiscountRulesUseCase:
    """
    Use Case: List Discount Rules

    Rules are ordered by priority (highest first), then newest first.
    """

    def __init__(self, rule_repository: IDiscountRuleRepository):
        self.rule_repository = rule_repository

    async def execute(self, tenant_id: str | None, request: ListDiscountRulesRequest) -> ListDiscountRulesResponse:
        tenant_id = require_tenant_id(tenant_id)

        rules = await self.rule_repository.list_rules(
            tenant_id,
            limit=request.limit,
            offset=request.offset,
            is_active=request.is_active,
            rule_type=request.rule_type,
        )
        total = await self.rule_repository.count(
            tenant_id,
            is_active=request.is_active,
            rule_type=request.rule_type,
        )

        return ListDiscountRulesResponse(
            rules=rules,
            total=total,
            limit=request.limit,
            offset=request.offset,
        )


__all__ = ["ListDiscountRulesUseCase", "ListDiscountRulesRequest", "ListDiscountRulesResponse"]
