# 📄 File: app/modules/onboarding/presentation/dependencies.py
# 🧭 Purpose (Layman Explanation):
# Hands the onboarding endpoints everything they need: the session store, the sign-in doorway,
# cloud storage and the database helpers used when the owner presses "finish".
# 🧪 Purpose (Technical Summary):
# FastAPI dependency providers for the onboarding session registry and the submission service.
# 🔗 Dependencies:
# FastAPI, SQLAlchemy AsyncSession, identity gateway, object store, profile/lounge/city repositories
# 🔄 Connected Modules / Calls From:
# Onboarding router

from fastapi import Depends
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.modules.directory.domain.repositories.city_repository import CityRepository
from app.modules.directory.domain.repositories.lounge_repository import LoungeRepository
from app.modules.directory.presentation.dependencies import get_city_repository, get_lounge_repository
from app.modules.onboarding.application.session_registry import (
    OnboardingSessionRegistry,
    get_session_registry,
)
from app.modules.onboarding.domain.services.submission_service import OnboardingSubmissionService
from app.modules.user_management.domain.repositories.profile_repository import ProfileRepository
from app.modules.user_management.domain.services.activity_recorder import ActivityRecorder
from app.modules.user_management.domain.services.identity_gateway import IdentityGateway
from app.modules.user_management.presentation.dependencies import (
    get_activity_recorder,
    get_profile_repository,
)
from app.shared.core.dependencies import get_db, get_identity_gateway
from app.shared.core.exceptions import DatabaseError
from app.shared.infrastructure.storage.supabase_storage import ObjectStore, get_object_store


async def get_registry() -> OnboardingSessionRegistry:
    return get_session_registry()


async def get_submission_service(
    identity: IdentityGateway = Depends(get_identity_gateway),
    object_store: ObjectStore = Depends(get_object_store),
    profiles: ProfileRepository = Depends(get_profile_repository),
    lounges: LoungeRepository = Depends(get_lounge_repository),
    cities: CityRepository = Depends(get_city_repository),
    activity: ActivityRecorder = Depends(get_activity_recorder),
    db: AsyncSession = Depends(get_db)
) -> OnboardingSubmissionService:
    async def commit() -> None:
        try:
            await db.commit()
        except SQLAlchemyError as e:
            await db.rollback()
            raise DatabaseError(f"Onboarding commit failed: {e}", operation="commit") from e

    return OnboardingSubmissionService(
        identity=identity,
        object_store=object_store,
        profiles=profiles,
        lounges=lounges,
        cities=cities,
        activity=activity,
        commit=commit,
    )
