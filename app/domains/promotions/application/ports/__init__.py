"""
Promotions Application Ports

Interface definitions (ports) for the Promotions domain.
Uses Protocol for structural typing.
"""

from datetime import datetime
from typing import Any, Protocol, runtime_checkable

from app.domains.promotions.domain.entities.discount_rule import DiscountRule, DiscountType


@runtime_checkable
class IDiscountRuleRepository(Protocol):
    """
    Interface for the discount rule store.

    Every operation is scoped to a tenant. Listings are ordered by
    priority descending, then creation time descending.
    """

    async def list_active_automatic(self, tenant_id: str, now: datetime) -> list[DiscountRule]:
        """Active, automatic rules whose validity window may include `now`"""
        ...

    async def list_rules(
        self,
        tenant_id: str,
        limit: int = 20,
        offset: int = 0,
        is_active: bool | None = None,
        rule_type: DiscountType | None = None,
    ) -> list[DiscountRule]:
        """Page through a tenant's rules"""
        ...

    async def count(
        self,
        tenant_id: str,
        is_active: bool | None = None,
        rule_type: DiscountType | None = None,
    ) -> int:
        """Count a tenant's rules matching the filters"""
        ...

    async def get_by_id(self, tenant_id: str, rule_id: str) -> DiscountRule | None:
        """Get rule by ID"""
        ...

    async def get_by_name(self, tenant_id: str, name: str, exclude_id: str | None = None) -> DiscountRule | None:
        """Get rule by name, optionally ignoring one rule"""
        ...

    async def create(self, tenant_id: str, data: dict[str, Any]) -> DiscountRule:
        """Persist a new rule"""
        ...

    async def update(self, tenant_id: str, rule_id: str, changes: dict[str, Any]) -> DiscountRule | None:
        """Apply a partial update"""
        ...

    async def delete(self, tenant_id: str, rule_id: str) -> bool:
        """Delete a rule"""
        ...


__all__ = [
    "IDiscountRuleRepository",
]
