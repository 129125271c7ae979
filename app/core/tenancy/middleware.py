# ============================================================================
# SCOPE: MULTI-TENANT
# Description: FastAPI dependencies resolving the tenant of a request from
#              the tenant header.
# Tenant-Aware: Yes - establishes the TenantContext for each request.
# ============================================================================
"""
Tenant resolution for FastAPI routes.

The tenant is taken from the configured header (``TENANT_HEADER``,
``X-Tenant-ID`` by default). Every admin and evaluation route depends on
``get_tenant_dependency``; a request without the header is rejected with
``MissingTenantException`` before any repository is touched.
"""

from __future__ import annotations

import logging

from fastapi import Request

from app.config.settings import get_settings

from .context import TenantContext, get_tenant_context, require_tenant_id, set_tenant_context

logger = logging.getLogger(__name__)


def resolve_tenant_id(request: Request) -> str | None:
    """Read the raw tenant id from the request headers."""
    header = get_settings().TENANT_HEADER
    return request.headers.get(header)


async def get_tenant_dependency(request: Request) -> TenantContext:
    """
    FastAPI dependency to get the current tenant context.

        @router.get("/items")
        async def get_items(tenant: TenantContext = Depends(get_tenant_dependency)):
            return await repo.list(tenant.tenant_id)

    Raises:
        MissingTenantException: If the tenant header is absent or blank.
    """
    tenant_id = require_tenant_id(resolve_tenant_id(request))
    correlation_id = getattr(request.state, "correlation_id", None)

    ctx = TenantContext(tenant_id=tenant_id, correlation_id=correlation_id)
    set_tenant_context(ctx)
    request.state.tenant_id = tenant_id
    logger.debug(f"Tenant resolved from header: {tenant_id}")
    return ctx


def get_optional_tenant_dependency() -> TenantContext | None:
    """Return the tenant context if one was already resolved for this request."""
    return get_tenant_context()
