"""
Domain Exceptions

Errors raised by use cases and domain services. They carry a machine-readable
``code`` and a ``details`` dict; the API layer maps each family to an HTTP
status (see app.api.exception_handlers) and never inspects messages.

Families:
- ValidationException: the request is malformed for the domain (400)
- EntityNotFoundException: the tenant has no such entity (404)
- ConflictException: the request clashes with stored state (409)
"""

from typing import Any


class DomainException(Exception):
    """Base exception for all domain errors."""

    default_code = "DOMAIN_ERROR"

    def __init__(self, message: str, code: str | None = None, details: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Serializable form used in error responses."""
        return {
            "code": self.code,
            "message": self.message,
            "details": self.details,
        }


class ValidationException(DomainException):
    """
    Domain validation failed.

    Raised for missing type-specific rule fields and other input the
    domain rejects after schema validation has passed.
    """

    default_code = "VALIDATION_ERROR"

    def __init__(
        self,
        message: str,
        field: str | None = None,
        details: dict[str, Any] | None = None,
        code: str | None = None,
    ):
        details = dict(details or {})
        if field:
            details["field"] = field
        super().__init__(message, code, details)
        self.field = field


class MissingTenantException(ValidationException):
    """An operation was invoked without a tenant scope."""

    def __init__(self, message: str = "Tenant ID required"):
        super().__init__(message, field="tenant_id", code="TENANT_REQUIRED")


class EntityNotFoundException(DomainException):
    """The entity does not exist, or is not visible to the tenant."""

    default_code = "ENTITY_NOT_FOUND"

    def __init__(self, entity_type: str, entity_id: Any, message: str | None = None):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(
            message or f"{entity_type} {entity_id} not found",
            details={"entity_type": entity_type, "entity_id": str(entity_id)},
        )


class ConflictException(DomainException):
    """The request conflicts with the current state of stored data."""

    default_code = "CONFLICT"


class DuplicateEntityException(ConflictException):
    """A uniqueness constraint (e.g. rule name per tenant) would be violated."""

    default_code = "DUPLICATE_ENTITY"

    def __init__(self, entity_type: str, field: str, value: Any, message: str | None = None):
        self.entity_type = entity_type
        self.field = field
        self.value = value
        super().__init__(
            message or f"{entity_type} with {field} '{value}' already exists",
            details={"entity_type": entity_type, "field": field, "value": str(value)},
        )


class BusinessRuleViolationException(ConflictException):
    """
    A state-dependent business rule forbids the operation.

    Example: deleting a discount rule that has already been redeemed.
    """

    default_code = "BUSINESS_RULE_VIOLATION"

    def __init__(self, rule: str, message: str | None = None, details: dict[str, Any] | None = None):
        self.rule = rule
        details = {**(details or {}), "rule": rule}
        super().__init__(message or f"Business rule violated: {rule}", details=details)
