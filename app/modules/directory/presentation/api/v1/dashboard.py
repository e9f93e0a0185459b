# 📄 File: app/modules/directory/presentation/api/v1/dashboard.py
# 🧭 Purpose (Layman Explanation):
# The owner's "My Lounges" screen: see the lounges you own and edit their basic details.
# You can never see or change someone else's lounge from here.
#
# 🧪 Purpose (Technical Summary):
# Authenticated owner endpoints plus per-owner lounge counters. Updates are restricted to
# the owner-editable field set and scoped by owner_id at the repository, so foreign
# lounges surface as 404.
#
# 🔗 Dependencies:
# - FastAPI router, DirectoryService, authenticated caller dependency
#
# 🔄 Connected Modules / Calls From:
# - app.api.v1.router (mounted under /dashboard)

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from app.modules.directory.domain.services.directory_service import DirectoryService
from app.modules.directory.presentation.api.schemas.directory_schemas import (
    LoungeResponse,
    OwnerLoungeStatsResponse,
    OwnerLoungeUpdateRequest,
)
from app.modules.directory.presentation.dependencies import get_directory_service
from app.shared.core.dependencies import CurrentUser, get_current_user
from app.shared.core.exceptions import ValidationError

logger = logging.getLogger(__name__)

dashboard_router = APIRouter()


@dashboard_router.get(
    "/lounges",
    response_model=List[LoungeResponse],
    summary="List my lounges",
    description="Lounges owned by the caller, newest first",
)
async def list_my_lounges(
    search: Optional[str] = Query(None, max_length=100),
    current_user: CurrentUser = Depends(get_current_user),
    service: DirectoryService = Depends(get_directory_service),
) -> List[LoungeResponse]:
    lounges = await service.list_owner_lounges(current_user.user_id, search=search)
    return [LoungeResponse.model_validate(lounge) for lounge in lounges]


@dashboard_router.get(
    "/stats",
    response_model=OwnerLoungeStatsResponse,
    summary="My lounge counters",
    description="Total, approved, pending and actively subscribed lounges owned by the caller",
)
async def my_lounge_stats(
    current_user: CurrentUser = Depends(get_current_user),
    service: DirectoryService = Depends(get_directory_service),
) -> OwnerLoungeStatsResponse:
    stats = await service.owner_lounge_stats(current_user.user_id)
    return OwnerLoungeStatsResponse(**stats)


@dashboard_router.patch(
    "/lounges/{lounge_id}",
    response_model=LoungeResponse,
    summary="Update my lounge",
    responses={404: {"description": "Lounge not found or not owned by caller"}},
)
async def update_my_lounge(
    lounge_id: str,
    payload: OwnerLoungeUpdateRequest,
    current_user: CurrentUser = Depends(get_current_user),
    service: DirectoryService = Depends(get_directory_service),
) -> LoungeResponse:
    changes = payload.model_dump(exclude_unset=True)
    if not changes:
        raise ValidationError("Nothing to update")

    lounge = await service.update_owner_lounge(current_user.user_id, lounge_id, changes)
    return LoungeResponse.model_validate(lounge)
