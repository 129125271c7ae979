"""
Discount Rule Repository Implementation

SQLAlchemy implementation of IDiscountRuleRepository.
"""

import logging
import uuid
from datetime import datetime
from decimal import Decimal
from typing import Any, cast

from sqlalchemy import Select, delete, func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.domains.promotions.application.ports import IDiscountRuleRepository
from app.domains.promotions.domain.entities.discount_rule import DiscountRule, DiscountType
from app.models.db.discount_rules import DiscountRuleModel

logger = logging.getLogger(__name__)

# Columns writable through create/update
WRITABLE_FIELDS = frozenset(
    {
        "name",
        "type",
        "is_active",
        "is_automatic",
        "discount_value",
        "max_discount",
        "min_order_amount",
        "min_item_quantity",
        "buy_quantity",
        "get_quantity",
        "get_discount",
        "spend_threshold",
        "applies_to_all",
        "applicable_products",
        "applicable_categories",
        "usage_limit",
        "starts_at",
        "expires_at",
        "priority",
    }
)


class SQLAlchemyDiscountRuleRepository(IDiscountRuleRepository):
    """
    SQLAlchemy implementation of the discount rule store.

    Writes are flushed, not committed; the session owner commits.
    """

    def __init__(self, session: AsyncSession):
        """
        Initialize repository.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def list_active_automatic(self, tenant_id: str, now: datetime) -> list[DiscountRule]:
        """Active automatic rules whose validity window includes `now`."""
        query = self._ordered(
            select(DiscountRuleModel).where(
                DiscountRuleModel.tenant_id == tenant_id,
                DiscountRuleModel.is_active.is_(True),
                DiscountRuleModel.is_automatic.is_(True),
                or_(DiscountRuleModel.starts_at.is_(None), DiscountRuleModel.starts_at <= now),
                or_(DiscountRuleModel.expires_at.is_(None), DiscountRuleModel.expires_at > now),
            )
        )
        result = await self.session.execute(query)
        return [self._to_entity(m) for m in result.scalars().all()]

    async def list_rules(
        self,
        tenant_id: str,
        limit: int = 20,
        offset: int = 0,
        is_active: bool | None = None,
        rule_type: DiscountType | None = None,
    ) -> list[DiscountRule]:
        query = self._filtered(select(DiscountRuleModel), tenant_id, is_active, rule_type)
        result = await self.session.execute(self._ordered(query).limit(limit).offset(offset))
        return [self._to_entity(m) for m in result.scalars().all()]

    async def count(
        self,
        tenant_id: str,
        is_active: bool | None = None,
        rule_type: DiscountType | None = None,
    ) -> int:
        query = self._filtered(select(func.count(DiscountRuleModel.id)), tenant_id, is_active, rule_type)
        result = await self.session.execute(query)
        return result.scalar_one()

    async def get_by_id(self, tenant_id: str, rule_id: str) -> DiscountRule | None:
        model = await self._get_model(tenant_id, rule_id)
        return self._to_entity(model) if model else None

    async def get_by_name(self, tenant_id: str, name: str, exclude_id: str | None = None) -> DiscountRule | None:
        query = select(DiscountRuleModel).where(
            DiscountRuleModel.tenant_id == tenant_id,
            DiscountRuleModel.name == name,
        )
        exclude_uuid = self._parse_id(exclude_id) if exclude_id else None
        if exclude_uuid is not None:
            query = query.where(DiscountRuleModel.id != exclude_uuid)

        result = await self.session.execute(query.limit(1))
        model = result.scalars().first()
        return self._to_entity(model) if model else None

    async def create(self, tenant_id: str, data: dict[str, Any]) -> DiscountRule:
        model = DiscountRuleModel(
            id=uuid.uuid4(),
            tenant_id=tenant_id,
            times_used=0,
            **self._writable(data),
        )
        self.session.add(model)
        await self.session.flush()
        await self.session.refresh(model)
        return self._to_entity(model)

    async def update(self, tenant_id: str, rule_id: str, changes: dict[str, Any]) -> DiscountRule | None:
        model = await self._get_model(tenant_id, rule_id)
        if model is None:
            return None

        for key, value in self._writable(changes).items():
            setattr(model, key, value)

        await self.session.flush()
        await self.session.refresh(model)
        return self._to_entity(model)

    async def delete(self, tenant_id: str, rule_id: str) -> bool:
        rule_uuid = self._parse_id(rule_id)
        if rule_uuid is None:
            return False

        result = await self.session.execute(
            delete(DiscountRuleModel).where(
                DiscountRuleModel.tenant_id == tenant_id,
                DiscountRuleModel.id == rule_uuid,
            )
        )
        return bool(result.rowcount)

    # Helper methods

    async def _get_model(self, tenant_id: str, rule_id: str) -> DiscountRuleModel | None:
        rule_uuid = self._parse_id(rule_id)
        if rule_uuid is None:
            return None

        result = await self.session.execute(
            select(DiscountRuleModel).where(
                DiscountRuleModel.tenant_id == tenant_id,
                DiscountRuleModel.id == rule_uuid,
            )
        )
        return result.scalar_one_or_none()

    @staticmethod
    def _parse_id(rule_id: str) -> uuid.UUID | None:
        try:
            return uuid.UUID(str(rule_id))
        except ValueError:
            logger.warning(f"Invalid discount rule id format: {rule_id}")
            return None

    @staticmethod
    def _filtered(
        query: Select,
        tenant_id: str,
        is_active: bool | None,
        rule_type: DiscountType | None,
    ) -> Select:
        query = query.where(DiscountRuleModel.tenant_id == tenant_id)
        if is_active is not None:
            query = query.where(DiscountRuleModel.is_active.is_(is_active))
        if rule_type is not None:
            query = query.where(DiscountRuleModel.type == rule_type)
        return query

    @staticmethod
    def _ordered(query: Select) -> Select:
        return query.order_by(DiscountRuleModel.priority.desc(), DiscountRuleModel.created_at.desc())

    @staticmethod
    def _writable(data: dict[str, Any]) -> dict[str, Any]:
        values = {key: value for key, value in data.items() if key in WRITABLE_FIELDS}
        for key in ("applicable_products", "applicable_categories"):
            if key in values and values[key] is not None:
                values[key] = [str(v) for v in values[key]]
        return values

    @staticmethod
    def _decimal(value: Any) -> Decimal | None:
        if value is None:
            return None
        return value if isinstance(value, Decimal) else Decimal(str(value))

    def _to_entity(self, model: DiscountRuleModel) -> DiscountRule:
        """Convert a discount rule model to the domain entity."""
        return DiscountRule(
            id=str(model.id),
            tenant_id=cast(str, model.tenant_id),
            name=cast(str, model.name),
            type=DiscountType(model.type),
            discount_value=self._decimal(model.discount_value) or Decimal("0"),
            is_active=bool(model.is_active),
            is_automatic=bool(model.is_automatic),
            max_discount=self._decimal(model.max_discount),
            min_order_amount=self._decimal(model.min_order_amount),
            min_item_quantity=cast(int | None, model.min_item_quantity),
            buy_quantity=cast(int | None, model.buy_quantity),
            get_quantity=cast(int | None, model.get_quantity),
            get_discount=self._decimal(model.get_discount),
            spend_threshold=self._decimal(model.spend_threshold),
            applies_to_all=bool(model.applies_to_all),
            applicable_products=frozenset(model.applicable_products or []),
            applicable_categories=frozenset(model.applicable_categories or []),
            usage_limit=cast(int | None, model.usage_limit),
            times_used=cast(int | None, model.times_used) or 0,
            starts_at=cast(datetime | None, model.starts_at),
            expires_at=cast(datetime | None, model.expires_at),
            priority=cast(int | None, model.priority) or 0,
            created_at=cast(datetime | None, model.created_at),
            updated_at=cast(datetime | None, model.updated_at),
        )
