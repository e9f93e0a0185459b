# 📄 File: app/modules/admin/presentation/api/v1/admin.py
# 🧭 Purpose (Layman Explanation):
# The admin home screen endpoints: headline numbers and the latest things that happened.
#
# 🧪 Purpose (Technical Summary):
# FastAPI admin endpoints for dashboard statistics and the recent activity feed.
#
# 🔗 Dependencies:
# - FastAPI router, AdminStatsService, admin guard dependency
#
# 🔄 Connected Modules / Calls From:
# - app.api.v1.router (mounted under /admin)

from typing import List

from fastapi import APIRouter, Depends, Query

from app.modules.admin.domain.services.admin_stats_service import (
    DEFAULT_ACTIVITY_LIMIT,
    MAX_ACTIVITY_LIMIT,
    AdminStatsService,
)
from app.modules.admin.presentation.api.schemas.admin_schemas import (
    ActivityLogResponse,
    AdminStatsResponse,
)
from app.modules.admin.presentation.dependencies import get_admin_stats_service
from app.modules.user_management.presentation.dependencies import get_current_admin_user
from app.shared.core.dependencies import CurrentUser

admin_router = APIRouter()


@admin_router.get(
    "/stats",
    response_model=AdminStatsResponse,
    summary="Dashboard statistics",
    description="Lounge, user, subscription and revenue totals",
    responses={403: {"description": "Admin privileges required"}},
)
async def get_stats(
    admin: CurrentUser = Depends(get_current_admin_user),
    service: AdminStatsService = Depends(get_admin_stats_service),
) -> AdminStatsResponse:
    return AdminStatsResponse.from_domain(await service.get_stats())


@admin_router.get(
    "/activity",
    response_model=List[ActivityLogResponse],
    summary="Recent activity",
    description="Latest audit trail entries, newest first",
)
async def get_recent_activity(
    limit: int = Query(DEFAULT_ACTIVITY_LIMIT, ge=1, le=MAX_ACTIVITY_LIMIT),
    admin: CurrentUser = Depends(get_current_admin_user),
    service: AdminStatsService = Depends(get_admin_stats_service),
) -> List[ActivityLogResponse]:
    return [ActivityLogResponse.model_validate(entry) for entry in await service.recent_activity(limit)]
