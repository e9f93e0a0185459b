# 📄 File: app/modules/directory/presentation/dependencies.py
# 🧭 Purpose (Layman Explanation):
# Hands the city and lounge endpoints their database helpers and the directory logic,
# all tied to the current request's database connection.
# 🧪 Purpose (Technical Summary):
# FastAPI dependency providers for the directory repositories and DirectoryService.
# 🔗 Dependencies:
# FastAPI, SQLAlchemy AsyncSession, directory repositories, ActivityRecorder provider
# 🔄 Connected Modules / Calls From:
# Directory, dashboard and admin routers; onboarding and billing providers

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.modules.directory.domain.repositories.city_repository import CityRepository
from app.modules.directory.domain.repositories.lounge_repository import LoungeRepository
from app.modules.directory.domain.services.directory_service import DirectoryService
from app.modules.directory.infrastructure.database.city_repository_impl import CityRepositoryImpl
from app.modules.directory.infrastructure.database.lounge_repository_impl import LoungeRepositoryImpl
from app.modules.user_management.domain.services.activity_recorder import ActivityRecorder
from app.modules.user_management.presentation.dependencies import get_activity_recorder
from app.shared.core.dependencies import get_db


async def get_city_repository(db: AsyncSession = Depends(get_db)) -> CityRepository:
    return CityRepositoryImpl(db)


async def get_lounge_repository(db: AsyncSession = Depends(get_db)) -> LoungeRepository:
    return LoungeRepositoryImpl(db)


async def get_directory_service(
    cities: CityRepository = Depends(get_city_repository),
    lounges: LoungeRepository = Depends(get_lounge_repository),
    activity: ActivityRecorder = Depends(get_activity_recorder)
) -> DirectoryService:
    return DirectoryService(cities, lounges, activity)
