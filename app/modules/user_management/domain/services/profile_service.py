# 📄 File: app/modules/user_management/domain/services/profile_service.py
# 🧭 Purpose (Layman Explanation):
# Manages the owner profile: showing it, telling the app whether the user still needs to finish
# onboarding, and letting admins browse users and change their name or role.
# 🧪 Purpose (Technical Summary):
# Domain service over ProfileRepository: onboarding status routing, admin listing with lounge
# counts and audited admin edits.
# 🔗 Dependencies:
# Profile domain model, ProfileRepository, ActivityRecorder
# 🔄 Connected Modules / Calls From:
# Profiles API, admin users API, onboarding status endpoint

import logging
from dataclasses import dataclass
from typing import List, Optional

from ..models.activity_log import ActivityAction
from ..models.profile import Profile, ProfileRole, ProfileWithLoungeCount
from ..repositories.profile_repository import ProfileRepository
from .activity_recorder import ActivityRecorder
from app.shared.core.exceptions import NotFoundError, ValidationError

logger = logging.getLogger(__name__)

DASHBOARD_ROUTE = "/dashboard"
ONBOARDING_ROUTE = "/onboarding"


@dataclass
class OnboardingStatus:
    onboarding_completed: bool
    route: str


class ProfileService:
    """
    Domain service for profile reads and admin profile management.
    """

    def __init__(
        self,
        profile_repository: ProfileRepository,
        activity: Optional[ActivityRecorder] = None
    ):
        self.profile_repository = profile_repository
        self.activity = activity or ActivityRecorder(None)

    async def get_profile(self, user_id: str) -> Profile:
        """
        Raises:
            NotFoundError: If the identity has no profile row yet
        """
        profile = await self.profile_repository.get_by_id(user_id)
        if profile is None:
            raise NotFoundError("Profile not found", resource_type="profile", resource_id=user_id)
        return profile

    async def get_onboarding_status(self, user_id: str) -> OnboardingStatus:
        """
        Where a signed-in user should land: the dashboard once onboarding is done,
        otherwise the onboarding wizard. A missing profile counts as not onboarded.
        """
        profile = await self.profile_repository.get_by_id(user_id)
        completed = bool(profile and profile.onboarding_completed)
        return OnboardingStatus(
            onboarding_completed=completed,
            route=DASHBOARD_ROUTE if completed else ONBOARDING_ROUTE,
        )

    async def list_users(
        self,
        search: Optional[str] = None,
        role: Optional[ProfileRole] = None
    ) -> List[ProfileWithLoungeCount]:
        search = search.strip() if search and search.strip() else None
        return await self.profile_repository.list_with_lounge_counts(search=search, role=role)

    async def update_user(
        self,
        actor_id: str,
        profile_id: str,
        full_name: Optional[str] = None,
        role: Optional[ProfileRole] = None
    ) -> Profile:
        """
        Admin edit of a user's name and role.

        Raises:
            ValidationError: If nothing to change was supplied
            NotFoundError: If the profile does not exist
        """
        if full_name is None and role is None:
            raise ValidationError("Nothing to update", field="full_name,role")

        profile = await self.profile_repository.update_admin_fields(
            profile_id, full_name=full_name, role=role
        )

        changed = [name for name, value in (("full_name", full_name), ("role", role)) if value is not None]
        await self.activity.record(
            ActivityAction.PROFILE_UPDATED, actor_id,
            entity_type="profile", entity_id=profile_id, metadata={"fields": changed}
        )
        if role is not None:
            logger.info(f"Admin {actor_id} set role of {profile_id} to {ProfileRole(role).value}")
        return profile
