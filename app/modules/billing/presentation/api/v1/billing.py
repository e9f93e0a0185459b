# 📄 File: app/modules/billing/presentation/api/v1/billing.py
# 🧭 Purpose (Layman Explanation):
# Billing endpoints: the public list of plans, the owner's billing page, and the admin screens
# for managing plans and reviewing payments.
#
# 🧪 Purpose (Technical Summary):
# FastAPI endpoints for active plans, the owner billing overview (echoing the ``upgrade`` hint
# from onboarding), admin plan CRUD with subscription counts, and payment listing/statistics.
# Checkout is not exposed here.
#
# 🔗 Dependencies:
# - FastAPI router, BillingService, auth and admin guard dependencies
#
# 🔄 Connected Modules / Calls From:
# - app.api.v1.router (mounted under /billing and /admin)

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Response, status

from app.modules.billing.domain.models.payment import PaymentStatus
from app.modules.billing.domain.services.billing_service import BillingService
from app.modules.billing.presentation.api.schemas.billing_schemas import (
    BillingOverviewResponse,
    PaymentResponse,
    PaymentStatsResponse,
    PlanCreateRequest,
    PlanResponse,
    PlanUpdateRequest,
    PlanWithStatsResponse,
)
from app.modules.billing.presentation.dependencies import get_billing_service
from app.modules.user_management.presentation.dependencies import get_current_admin_user
from app.shared.core.dependencies import CurrentUser, get_current_user
from app.shared.core.exceptions import ValidationError

logger = logging.getLogger(__name__)

billing_router = APIRouter()
admin_billing_router = APIRouter()


@billing_router.get(
    "/plans",
    response_model=List[PlanResponse],
    summary="List plans",
    description="Active plans ordered by monthly price",
)
async def list_plans(
    service: BillingService = Depends(get_billing_service),
) -> List[PlanResponse]:
    return [PlanResponse.from_domain(plan) for plan in await service.list_active_plans()]


@billing_router.get(
    "/overview",
    response_model=BillingOverviewResponse,
    summary="Get billing overview",
    description="The caller's approved lounges with their plans, plus plans on offer",
)
async def get_billing_overview(
    upgrade: Optional[str] = Query(None, max_length=50, description="Plan chosen during onboarding"),
    current_user: CurrentUser = Depends(get_current_user),
    service: BillingService = Depends(get_billing_service),
) -> BillingOverviewResponse:
    overview = await service.get_overview(current_user.user_id, upgrade=upgrade)
    return BillingOverviewResponse.from_domain(overview)


# =========================================================================
# ADMIN
# =========================================================================

@admin_billing_router.get(
    "/plans",
    response_model=List[PlanWithStatsResponse],
    summary="List plans with subscription counts",
)
async def admin_list_plans(
    admin: CurrentUser = Depends(get_current_admin_user),
    service: BillingService = Depends(get_billing_service),
) -> List[PlanWithStatsResponse]:
    return [
        PlanWithStatsResponse(
            **PlanResponse.from_domain(item.plan).model_dump(),
            active_subscriptions=item.active_subscriptions,
        )
        for item in await service.list_plan_stats()
    ]


@admin_billing_router.post(
    "/plans",
    response_model=PlanResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create plan",
    responses={409: {"description": "Slug already in use"}},
)
async def admin_create_plan(
    payload: PlanCreateRequest,
    admin: CurrentUser = Depends(get_current_admin_user),
    service: BillingService = Depends(get_billing_service),
) -> PlanResponse:
    return PlanResponse.from_domain(await service.create_plan(admin.user_id, payload.model_dump()))


@admin_billing_router.patch("/plans/{plan_id}", response_model=PlanResponse, summary="Update plan")
async def admin_update_plan(
    plan_id: str,
    payload: PlanUpdateRequest,
    admin: CurrentUser = Depends(get_current_admin_user),
    service: BillingService = Depends(get_billing_service),
) -> PlanResponse:
    changes = payload.model_dump(exclude_unset=True)
    if not changes:
        raise ValidationError("Nothing to update")
    return PlanResponse.from_domain(await service.update_plan(admin.user_id, plan_id, changes))


@admin_billing_router.delete(
    "/plans/{plan_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete plan",
)
async def admin_delete_plan(
    plan_id: str,
    admin: CurrentUser = Depends(get_current_admin_user),
    service: BillingService = Depends(get_billing_service),
) -> Response:
    await service.delete_plan(admin.user_id, plan_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@admin_billing_router.get("/payments", response_model=List[PaymentResponse], summary="List payments")
async def admin_list_payments(
    payment_status: Optional[PaymentStatus] = Query(None, alias="status"),
    admin: CurrentUser = Depends(get_current_admin_user),
    service: BillingService = Depends(get_billing_service),
) -> List[PaymentResponse]:
    return [PaymentResponse.from_domain(payment) for payment in await service.list_payments(payment_status)]


@admin_billing_router.get("/payments/stats", response_model=PaymentStatsResponse, summary="Payment statistics")
async def admin_payment_stats(
    admin: CurrentUser = Depends(get_current_admin_user),
    service: BillingService = Depends(get_billing_service),
) -> PaymentStatsResponse:
    return PaymentStatsResponse.from_domain(await service.get_payment_stats())
