"""
Discount Rule Validation

Type-specific required-field checks applied when rules are created or
updated. Fields irrelevant to a rule's type are stored but ignored.
"""

from collections.abc import Mapping
from typing import Any

from app.core.domain import ValidationException

from ..entities.discount_rule import DiscountType

# Fields that must be present and non-zero for each type
REQUIRED_FIELDS: dict[DiscountType, tuple[str, ...]] = {
    DiscountType.PERCENTAGE_OFF: (),
    DiscountType.FIXED_AMOUNT_OFF: (),
    DiscountType.BUY_X_GET_Y: ("buy_quantity", "get_quantity"),
    DiscountType.FREE_SHIPPING: (),
    DiscountType.SPEND_X_GET_Y_OFF: ("spend_threshold",),
}


def missing_required_fields(rule_type: DiscountType, data: Mapping[str, Any]) -> list[str]:
    return [name for name in REQUIRED_FIELDS[rule_type] if not data.get(name)]


def validate_rule_fields(rule_type: DiscountType, data: Mapping[str, Any]) -> None:
    """
    Validate the fields required by a rule type.

    Raises:
        ValidationException: If a required field is missing or zero
    """
    missing = missing_required_fields(rule_type, data)
    if missing:
        raise ValidationException(
            f"{rule_type.value} requires {' and '.join(missing)}",
            field=missing[0],
            details={"type": rule_type.value, "missing_fields": missing},
        )
