"""
Shared value primitives.

Money is always Decimal. Amounts arrive as int, float, str or Decimal and are
converted through ``str`` so 0.1 becomes Decimal("0.1") rather than its
binary float expansion.
"""

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from enum import Enum

CENT = Decimal("0.01")


def to_decimal(value: int | float | str | Decimal) -> Decimal:
    """Convert a numeric value to Decimal without binary float artifacts."""
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def round_currency(amount: Decimal) -> Decimal:
    """Quantize to cents, ties away from zero (1.005 -> 1.01)."""
    return amount.quantize(CENT, ROUND_HALF_UP)


@dataclass(frozen=True)
class ValueObject:
    """
    Immutable, identity-less value compared field by field.

    Subclasses normalize or check their fields in ``_validate``; since the
    dataclass is frozen, normalization goes through ``object.__setattr__``.
    """

    def __post_init__(self):
        self._validate()

    def _validate(self) -> None:
        pass


class StatusEnum(str, Enum):
    """String enum serialized by value in JSON and in the database."""

    def __str__(self) -> str:
        return self.value
