# 📄 File: app/modules/user_management/presentation/api/v1/users.py
# 🧭 Purpose (Layman Explanation):
# Admin screens for people using CigarMap: see everyone with how many lounges they own, and
# change someone's name or make them an admin.
#
# 🧪 Purpose (Technical Summary):
# FastAPI admin user endpoints: list profiles with lounge counts (search + role filter) and
# update full name / role. Every change is written to the activity log.
#
# 🔗 Dependencies:
# - FastAPI router, ProfileService, admin guard dependency
#
# 🔄 Connected Modules / Calls From:
# - app.api.v1.router (mounted under /admin)

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from app.modules.user_management.domain.models.profile import ProfileRole
from app.modules.user_management.domain.services.profile_service import ProfileService
from app.modules.user_management.presentation.api.schemas.profile_schemas import (
    ProfileResponse,
    UserListItemResponse,
    UserUpdateRequest,
)
from app.modules.user_management.presentation.dependencies import (
    get_current_admin_user,
    get_profile_service,
)
from app.shared.core.dependencies import CurrentUser

logger = logging.getLogger(__name__)

admin_users_router = APIRouter()


@admin_users_router.get(
    "/users",
    response_model=List[UserListItemResponse],
    summary="List users",
    description="Profiles newest first with the number of lounges each owns",
    responses={403: {"description": "Admin privileges required"}},
)
async def list_users(
    search: Optional[str] = Query(None, max_length=100, description="Match name or email"),
    role: Optional[ProfileRole] = Query(None),
    admin: CurrentUser = Depends(get_current_admin_user),
    service: ProfileService = Depends(get_profile_service),
) -> List[UserListItemResponse]:
    users = await service.list_users(search=search, role=role)
    return [UserListItemResponse.from_domain(item) for item in users]


@admin_users_router.patch(
    "/users/{profile_id}",
    response_model=ProfileResponse,
    summary="Update user",
    responses={404: {"description": "Profile not found"}},
)
async def update_user(
    profile_id: str,
    payload: UserUpdateRequest,
    admin: CurrentUser = Depends(get_current_admin_user),
    service: ProfileService = Depends(get_profile_service),
) -> ProfileResponse:
    profile = await service.update_user(
        admin.user_id, profile_id, full_name=payload.full_name, role=payload.role
    )
    return ProfileResponse.model_validate(profile)
