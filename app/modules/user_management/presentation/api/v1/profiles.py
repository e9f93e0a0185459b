# 📄 File: app/modules/user_management/presentation/api/v1/profiles.py
# 🧭 Purpose (Layman Explanation):
# Lets a signed-in person look at their own profile.
#
# 🧪 Purpose (Technical Summary):
# FastAPI self-service profile endpoint. Profiles are created by the identity provider's sign-up
# trigger and edited through onboarding, so there is no create or update here.
#
# 🔗 Dependencies:
# - FastAPI router, ProfileService, authentication dependency
#
# 🔄 Connected Modules / Calls From:
# - app.api.v1.router (mounted under /profiles)

import logging

from fastapi import APIRouter, Depends

from app.modules.user_management.domain.services.profile_service import ProfileService
from app.modules.user_management.presentation.api.schemas.profile_schemas import ProfileResponse
from app.modules.user_management.presentation.dependencies import get_profile_service
from app.shared.core.dependencies import CurrentUser, get_current_user

logger = logging.getLogger(__name__)

profiles_router = APIRouter()


@profiles_router.get(
    "/me",
    response_model=ProfileResponse,
    summary="Get current user's profile",
    description="Get the current authenticated user's profile information",
    responses={
        200: {"description": "Current user's profile information"},
        401: {"description": "Authentication required"},
        404: {"description": "Profile not found"},
    }
)
async def get_current_user_profile(
    current_user: CurrentUser = Depends(get_current_user),
    service: ProfileService = Depends(get_profile_service),
) -> ProfileResponse:
    profile = await service.get_profile(current_user.user_id)
    return ProfileResponse.model_validate(profile)
