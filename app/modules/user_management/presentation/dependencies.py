# 📄 File: app/modules/user_management/presentation/dependencies.py
# 🧭 Purpose (Layman Explanation):
# This file hands the profile endpoints the tools they need (database helpers, the activity diary)
# and checks who is calling: any signed-in owner, or specifically an admin.
# 🧪 Purpose (Technical Summary):
# Module-specific FastAPI dependencies: repository/service providers bound to the request's
# database session, caller enrichment with the profile role, and the admin guard.
# 🔗 Dependencies:
# FastAPI, app.shared.core.dependencies, user_management repositories and services
# 🔄 Connected Modules / Calls From:
# Profiles and admin user endpoints, directory/billing/onboarding dependency providers

import logging

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.modules.user_management.domain.models.profile import ProfileRole
from app.modules.user_management.domain.repositories.activity_log_repository import (
    ActivityLogRepository,
)
from app.modules.user_management.domain.repositories.profile_repository import ProfileRepository
from app.modules.user_management.domain.services.activity_recorder import ActivityRecorder
from app.modules.user_management.domain.services.profile_service import ProfileService
from app.modules.user_management.infrastructure.database.activity_log_repository_impl import (
    ActivityLogRepositoryImpl,
)
from app.modules.user_management.infrastructure.database.profile_repository_impl import (
    ProfileRepositoryImpl,
)
from app.shared.core.dependencies import CurrentUser, get_current_user, get_db
from app.shared.core.exceptions import AuthorizationError

logger = logging.getLogger(__name__)


# =========================================================================
# REPOSITORY AND SERVICE PROVIDERS
# =========================================================================

async def get_profile_repository(db: AsyncSession = Depends(get_db)) -> ProfileRepository:
    return ProfileRepositoryImpl(db)


async def get_activity_log_repository(db: AsyncSession = Depends(get_db)) -> ActivityLogRepository:
    return ActivityLogRepositoryImpl(db)


async def get_activity_recorder(
    repository: ActivityLogRepository = Depends(get_activity_log_repository)
) -> ActivityRecorder:
    return ActivityRecorder(repository)


async def get_profile_service(
    profiles: ProfileRepository = Depends(get_profile_repository),
    activity: ActivityRecorder = Depends(get_activity_recorder)
) -> ProfileService:
    return ProfileService(profiles, activity)


# =========================================================================
# CALLER DEPENDENCIES
# =========================================================================

async def get_current_user_detailed(
    current_user: CurrentUser = Depends(get_current_user),
    profiles: ProfileRepository = Depends(get_profile_repository)
) -> CurrentUser:
    """
    The authenticated caller with roles taken from their profile row.

    A caller without a profile row keeps the default owner role; the row is
    created by the database trigger on sign-up.
    """
    profile = await profiles.get_by_id(current_user.user_id)
    if profile is not None:
        current_user.roles = [profile.role.value]
        current_user.email = current_user.email or profile.email
    return current_user


async def get_current_admin_user(
    current_user: CurrentUser = Depends(get_current_user_detailed)
) -> CurrentUser:
    """
    Raises:
        AuthorizationError: If the caller is not an admin
    """
    if not current_user.is_admin():
        logger.warning(f"Non-admin user attempted admin access: {current_user.user_id}")
        raise AuthorizationError(
            "Admin privileges required",
            required_role=ProfileRole.ADMIN.value,
            user_id=current_user.user_id
        )
    return current_user
