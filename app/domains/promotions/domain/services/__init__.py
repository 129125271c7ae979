"""
Promotions Domain Services

Pure eligibility, calculation and validation logic for discount rules.
"""

from app.domains.promotions.domain.services.discount_calculator import (
    CALCULATORS,
    calculate_discount,
    is_applicable,
)
from app.domains.promotions.domain.services.eligibility import (
    ELIGIBILITY_CHECKS,
    first_failed_check,
    is_eligible,
)
from app.domains.promotions.domain.services.rule_validation import (
    REQUIRED_FIELDS,
    validate_rule_fields,
)

__all__ = [
    # Calculator
    "CALCULATORS",
    "calculate_discount",
    "is_applicable",
    # Eligibility
    "ELIGIBILITY_CHECKS",
    "first_failed_check",
    "is_eligible",
    # Validation
    "REQUIRED_FIELDS",
    "validate_rule_fields",
]
