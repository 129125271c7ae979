"""
Domain Layer - Core DDD building blocks

This module provides base classes for Domain-Driven Design:
- Value Objects: Immutable objects compared by value
- Exceptions: Domain-specific error handling
"""

from app.core.domain.exceptions import (
    BusinessRuleViolationException,
    ConflictException,
    DomainException,
    DuplicateEntityException,
    EntityNotFoundException,
    MissingTenantException,
    ValidationException,
)
from app.core.domain.value_objects import (
    CENT,
    StatusEnum,
    ValueObject,
    round_currency,
    to_decimal,
)

__all__ = [
    # Value Objects
    "ValueObject",
    "StatusEnum",
    "CENT",
    "round_currency",
    "to_decimal",
    # Exceptions
    "DomainException",
    "ValidationException",
    "MissingTenantException",
    "EntityNotFoundException",
    "ConflictException",
    "BusinessRuleViolationException",
    "DuplicateEntityException",
]
