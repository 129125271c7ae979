"""
Promotions API Routes

FastAPI router for discount rule administration and cart evaluation.
All routes are scoped to the tenant given in the tenant header.
"""

from fastapi import APIRouter, Depends, Query, status

from app.config.settings import get_settings
from app.core.tenancy import TenantContext, get_tenant_dependency
from app.domains.promotions.api.dependencies import (
    get_create_discount_rule_use_case,
    get_delete_discount_rule_use_case,
    get_evaluate_discount_rules_use_case,
    get_get_discount_rule_use_case,
    get_list_discount_rules_use_case,
    get_update_discount_rule_use_case,
)
from app.domains.promotions.api.schemas import (
    CartEvaluationRequest,
    DeleteDiscountRuleResponse,
    DiscountEvaluationResponse,
    DiscountRuleCreate,
    DiscountRuleListResponse,
    DiscountRuleResponse,
    DiscountRuleUpdate,
    PaginationMeta,
)
from app.domains.promotions.application.use_cases import (
    CreateDiscountRuleUseCase,
    DeleteDiscountRuleUseCase,
    EvaluateDiscountRulesUseCase,
    GetDiscountRuleUseCase,
    ListDiscountRulesRequest,
    ListDiscountRulesUseCase,
    UpdateDiscountRuleUseCase,
)
from app.domains.promotions.domain.entities.discount_rule import DiscountType

settings = get_settings()

router = APIRouter(prefix="/store/admin/discount-rules", tags=["Discount Rules"])


@router.get("", response_model=DiscountRuleListResponse)
async def list_discount_rules(
    limit: int = Query(settings.DISCOUNT_RULES_PAGE_LIMIT, ge=1, le=settings.DISCOUNT_RULES_MAX_PAGE_LIMIT),
    offset: int = Query(0, ge=0),
    is_active: bool | None = Query(None),
    type: DiscountType | None = Query(None, description="Filter by discount type"),
    tenant: TenantContext = Depends(get_tenant_dependency),
    use_case: ListDiscountRulesUseCase = Depends(get_list_discount_rules_use_case),
):
    """List discount rules, highest priority first."""
    result = await use_case.execute(
        tenant.tenant_id,
        ListDiscountRulesRequest(limit=limit, offset=offset, is_active=is_active, rule_type=type),
    )
    return DiscountRuleListResponse(
        data=[DiscountRuleResponse.from_entity(rule) for rule in result.rules],
        pagination=PaginationMeta(
            total=result.total,
            limit=result.limit,
            offset=result.offset,
            has_more=result.has_more,
        ),
    )


@router.post("/evaluate", response_model=DiscountEvaluationResponse)
async def evaluate_discount_rules(
    request: CartEvaluationRequest,
    tenant: TenantContext = Depends(get_tenant_dependency),
    use_case: EvaluateDiscountRulesUseCase = Depends(get_evaluate_discount_rules_use_case),
):
    """Evaluate the tenant's automatic discount rules against a cart."""
    evaluation = await use_case.execute(tenant.tenant_id, request.to_domain())
    return DiscountEvaluationResponse.from_domain(evaluation)


@router.get("/{rule_id}", response_model=DiscountRuleResponse)
async def get_discount_rule(
    rule_id: str,
    tenant: TenantContext = Depends(get_tenant_dependency),
    use_case: GetDiscountRuleUseCase = Depends(get_get_discount_rule_use_case),
):
    """Get a discount rule by ID."""
    rule = await use_case.execute(tenant.tenant_id, rule_id)
    return DiscountRuleResponse.from_entity(rule)


@router.post("", response_model=DiscountRuleResponse, status_code=status.HTTP_201_CREATED)
async def create_discount_rule(
    data: DiscountRuleCreate,
    tenant: TenantContext = Depends(get_tenant_dependency),
    use_case: CreateDiscountRuleUseCase = Depends(get_create_discount_rule_use_case),
):
    """Create a discount rule."""
    rule = await use_case.execute(tenant.tenant_id, data.model_dump())
    return DiscountRuleResponse.from_entity(rule)


@router.put("/{rule_id}", response_model=DiscountRuleResponse)
async def update_discount_rule(
    rule_id: str,
    data: DiscountRuleUpdate,
    tenant: TenantContext = Depends(get_tenant_dependency),
    use_case: UpdateDiscountRuleUseCase = Depends(get_update_discount_rule_use_case),
):
    """Partially update a discount rule. Explicit nulls clear optional fields."""
    rule = await use_case.execute(tenant.tenant_id, rule_id, data.model_dump(exclude_unset=True))
    return DiscountRuleResponse.from_entity(rule)


@router.delete("/{rule_id}", response_model=DeleteDiscountRuleResponse)
async def delete_discount_rule(
    rule_id: str,
    tenant: TenantContext = Depends(get_tenant_dependency),
    use_case: DeleteDiscountRuleUseCase = Depends(get_delete_discount_rule_use_case),
):
    """Delete a discount rule that has never been used."""
    result = await use_case.execute(tenant.tenant_id, rule_id)
    return DeleteDiscountRuleResponse(success=result.success, id=result.id)


__all__ = ["router"]
