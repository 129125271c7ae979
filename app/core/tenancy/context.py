# ============================================================================
# SCOPE: MULTI-TENANT
# Description: Request-scoped tenant context using Python contextvars.
#              Propagates the tenant across async calls within a request.
# Tenant-Aware: Yes - this is the central tenant-awareness mechanism.
# ============================================================================
"""
TenantContext - Request-scoped tenant context using Python's contextvars.

Usage:
    # Set context (usually from the tenant header dependency)
    set_tenant_context(TenantContext(tenant_id="store-42"))

    # Get context anywhere in the request
    tenant_id = get_current_tenant()

    # Validate an explicitly passed tenant id
    tenant_id = require_tenant_id(raw_value)
"""

from __future__ import annotations

from contextvars import ContextVar
from dataclasses import dataclass

from app.core.domain import MissingTenantException

# Context variable for tenant context - thread-safe and async-safe
_tenant_context: ContextVar[TenantContext | None] = ContextVar("tenant_context", default=None)


@dataclass(frozen=True)
class TenantContext:
    """
    Request-scoped tenant context.

    Attributes:
        tenant_id: The tenant (store) identifier
        correlation_id: Request correlation ID, when available
    """

    tenant_id: str
    correlation_id: str | None = None


def require_tenant_id(tenant_id: str | None) -> str:
    """
    Normalize and validate a tenant identifier.

    Raises:
        MissingTenantException: If the tenant id is absent or blank
    """
    if tenant_id is None or not str(tenant_id).strip():
        raise MissingTenantException()
    return str(tenant_id).strip()


def get_tenant_context() -> TenantContext | None:
    """Get the current tenant context, or None if not set."""
    return _tenant_context.get()


def get_current_tenant() -> str | None:
    """Convenience accessor for the current tenant id."""
    ctx = _tenant_context.get()
    return ctx.tenant_id if ctx else None


def set_tenant_context(context: TenantContext | None) -> None:
    """
    Set the tenant context for the current request.

    Args:
        context: TenantContext to set, or None to clear.
    """
    _tenant_context.set(context)
