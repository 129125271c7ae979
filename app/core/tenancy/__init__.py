# ============================================================================
# SCOPE: MULTI-TENANT
# Description: Multi-tenancy module. Everything here isolates data per tenant.
# Tenant-Aware: Yes - this module IS the tenant-awareness implementation.
# ============================================================================
"""
Tenancy module for multi-tenant support.

- TenantContext: Request-scoped tenant context using contextvars
- require_tenant_id: Validation of explicitly passed tenant ids
- get_tenant_dependency: FastAPI dependency resolving the tenant header
"""

from .context import (
    TenantContext,
    get_current_tenant,
    get_tenant_context,
    require_tenant_id,
    set_tenant_context,
)
from .middleware import (
    get_optional_tenant_dependency,
    get_tenant_dependency,
    resolve_tenant_id,
)

__all__ = [
    # Context
    "TenantContext",
    "get_current_tenant",
    "get_tenant_context",
    "require_tenant_id",
    "set_tenant_context",
    # Dependencies
    "get_tenant_dependency",
    "get_optional_tenant_dependency",
    "resolve_tenant_id",
]
