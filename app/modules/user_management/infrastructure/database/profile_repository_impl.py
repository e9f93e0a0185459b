# 📄 File: app/modules/user_management/infrastructure/database/profile_repository_impl.py
# 🧭 Purpose (Layman Explanation):
# This file handles all database work for profiles: loading a person's profile, saving what they
# entered during onboarding, and letting admins change names and roles.
#
# 🧪 Purpose (Technical Summary):
# Concrete implementation of ProfileRepository using SQLAlchemy async ORM, with domain/model
# mapping, owner lounge counts via an aggregated subquery, and repository-level error wrapping.
#
# 🔗 Dependencies:
# - app.modules.user_management.domain.repositories.profile_repository (interface)
# - app.modules.user_management.infrastructure.database.models (SQLAlchemy models)
# - app.modules.directory.infrastructure.database.models (lounge counts)
# - SQLAlchemy async session and query operations
#
# 🔄 Connected Modules / Calls From:
# - app.modules.user_management.presentation.dependencies (repository provider)
# - Onboarding submission service, admin user views

"""
Profile Repository Implementation

Handles the mapping between domain Profile entities and ProfileModel records.
Write failures roll the session back and surface as RepositoryError.
"""

import logging
from datetime import datetime
from typing import List, Optional

from sqlalchemy import func, or_, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.modules.directory.infrastructure.database.models import LoungeModel
from app.modules.user_management.domain.models.profile import (
    Profile,
    ProfileRole,
    ProfileWithLoungeCount,
)
from app.modules.user_management.domain.repositories.profile_repository import ProfileRepository
from app.modules.user_management.infrastructure.database.models import ProfileModel
from app.shared.core.exceptions import NotFoundError, RepositoryError

logger = logging.getLogger(__name__)


class ProfileRepositoryImpl(ProfileRepository):
    """
    SQLAlchemy implementation of the ProfileRepository interface.
    """

    def __init__(self, session: AsyncSession):
        """
        Initialize the profile repository.

        Args:
            session: SQLAlchemy async session for database operations
        """
        self._session = session

    async def get_by_id(self, profile_id: str) -> Optional[Profile]:
        try:
            profile_model = await self._get_model(profile_id)
            if profile_model:
                logger.debug(f"Retrieved profile: {profile_id}")
                return self._model_to_domain(profile_model)

            logger.debug(f"Profile not found: {profile_id}")
            return None

        except SQLAlchemyError as e:
            logger.error(f"Database error retrieving profile {profile_id}: {str(e)}")
            raise RepositoryError(
                f"Failed to retrieve profile: {str(e)}",
                operation="get_by_id",
                entity="profile"
            ) from e

    async def complete_onboarding(
        self,
        profile_id: str,
        full_name: str,
        phone: Optional[str],
        avatar_url: Optional[str],
        completed_at: datetime
    ) -> Profile:
        try:
            profile_model = await self._require_model(profile_id)

            profile_model.full_name = full_name
            profile_model.phone = phone
            profile_model.avatar_url = avatar_url
            profile_model.onboarding_completed = True
            profile_model.updated_at = completed_at

            await self._session.flush()

            logger.info(f"Completed onboarding for profile: {profile_id}")
            return self._model_to_domain(profile_model)

        except SQLAlchemyError as e:
            await self._session.rollback()
            logger.error(f"Database error completing onboarding for {profile_id}: {str(e)}")
            raise RepositoryError(
                f"Failed to update profile: {str(e)}",
                operation="complete_onboarding",
                entity="profile"
            ) from e

    async def restore_onboarding_state(self, snapshot: Profile) -> Profile:
        try:
            profile_model = await self._require_model(snapshot.id)

            profile_model.full_name = snapshot.full_name
            profile_model.phone = snapshot.phone
            profile_model.avatar_url = snapshot.avatar_url
            profile_model.onboarding_completed = snapshot.onboarding_completed
            profile_model.updated_at = snapshot.updated_at

            await self._session.flush()

            logger.info(f"Restored onboarding state for profile: {snapshot.id}")
            return self._model_to_domain(profile_model)

        except SQLAlchemyError as e:
            await self._session.rollback()
            logger.error(f"Database error restoring profile {snapshot.id}: {str(e)}")
            raise RepositoryError(
                f"Failed to restore profile: {str(e)}",
                operation="restore_onboarding_state",
                entity="profile"
            ) from e

    async def update_admin_fields(
        self,
        profile_id: str,
        full_name: Optional[str] = None,
        role: Optional[ProfileRole] = None
    ) -> Profile:
        try:
            profile_model = await self._require_model(profile_id)

            if full_name is not None:
                profile_model.full_name = full_name.strip() or None
            if role is not None:
                profile_model.role = ProfileRole(role).value

            await self._session.flush()
            await self._session.refresh(profile_model)

            logger.info(f"Admin updated profile: {profile_id}")
            return self._model_to_domain(profile_model)

        except SQLAlchemyError as e:
            await self._session.rollback()
            logger.error(f"Database error updating profile {profile_id}: {str(e)}")
            raise RepositoryError(
                f"Failed to update profile: {str(e)}",
                operation="update_admin_fields",
                entity="profile"
            ) from e

    async def list_with_lounge_counts(
        self,
        search: Optional[str] = None,
        role: Optional[ProfileRole] = None
    ) -> List[ProfileWithLoungeCount]:
        try:
            lounge_counts = (
                select(
                    LoungeModel.owner_id.label("owner_id"),
                    func.count(LoungeModel.id).label("lounge_count")
                )
                .group_by(LoungeModel.owner_id)
                .subquery()
            )

            stmt = (
                select(ProfileModel, func.coalesce(lounge_counts.c.lounge_count, 0))
                .outerjoin(lounge_counts, lounge_counts.c.owner_id == ProfileModel.id)
                .order_by(ProfileModel.created_at.desc())
            )

            if search:
                pattern = f"%{search.strip().lower()}%"
                stmt = stmt.where(
                    or_(
                        func.lower(ProfileModel.full_name).like(pattern),
                        func.lower(ProfileModel.email).like(pattern),
                    )
                )
            if role is not None:
                stmt = stmt.where(ProfileModel.role == ProfileRole(role).value)

            result = await self._session.execute(stmt)
            return [
                ProfileWithLoungeCount(
                    profile=self._model_to_domain(profile_model),
                    lounge_count=int(count or 0)
                )
                for profile_model, count in result.all()
            ]

        except SQLAlchemyError as e:
            logger.error(f"Database error listing profiles: {str(e)}")
            raise RepositoryError(
                f"Failed to list profiles: {str(e)}",
                operation="list_with_lounge_counts",
                entity="profile"
            ) from e

    async def count(self) -> int:
        try:
            result = await self._session.execute(select(func.count(ProfileModel.id)))
            return int(result.scalar() or 0)
        except SQLAlchemyError as e:
            logger.error(f"Database error counting profiles: {str(e)}")
            raise RepositoryError(
                f"Failed to count profiles: {str(e)}",
                operation="count",
                entity="profile"
            ) from e

    # =========================================================================
    # PRIVATE HELPERS
    # =========================================================================

    async def _get_model(self, profile_id: str) -> Optional[ProfileModel]:
        stmt = select(ProfileModel).where(ProfileModel.id == str(profile_id))
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    async def _require_model(self, profile_id: str) -> ProfileModel:
        profile_model = await self._get_model(profile_id)
        if profile_model is None:
            raise NotFoundError(
                "Profile not found",
                resource_type="profile",
                resource_id=str(profile_id)
            )
        return profile_model

    def _model_to_domain(self, model: ProfileModel) -> Profile:
        """Convert SQLAlchemy model to domain entity."""
        return Profile(
            id=str(model.id),
            email=model.email,
            full_name=model.full_name,
            phone=model.phone,
            avatar_url=model.avatar_url,
            role=ProfileRole(model.role or ProfileRole.OWNER.value),
            onboarding_completed=bool(model.onboarding_completed),
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
