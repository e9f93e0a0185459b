# 📄 File: app/modules/directory/infrastructure/database/city_repository_impl.py
# 🧭 Purpose (Layman Explanation):
# Handles database work for city pages: listing them, finding one by its web address,
# and letting admins add, edit or remove cities without two cities sharing an address.
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy implementation of CityRepository with slug uniqueness surfaced as
# DuplicateResourceError and other failures wrapped in RepositoryError.
#
# 🔗 Dependencies:
# - SQLAlchemy async session, CityModel, City domain model
#
# 🔄 Connected Modules / Calls From:
# - Directory service, onboarding lounge persistence, dependency providers

import logging
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.modules.directory.domain.models.city import City
from app.modules.directory.domain.repositories.city_repository import CityRepository
from app.modules.directory.infrastructure.database.models import CityModel
from app.shared.core.exceptions import DuplicateResourceError, NotFoundError, RepositoryError

logger = logging.getLogger(__name__)

_MUTABLE_FIELDS = ("name", "slug", "description", "hero_image", "is_featured")


class CityRepositoryImpl(CityRepository):
    """SQLAlchemy implementation of the CityRepository interface."""

    def __init__(self, session: AsyncSession):
        self._session = session

    async def list_all(self, featured_only: bool = False) -> List[City]:
        try:
            stmt = select(CityModel).order_by(CityModel.name.asc())
            if featured_only:
                stmt = stmt.where(CityModel.is_featured.is_(True))
            result = await self._session.execute(stmt)
            return [self._model_to_domain(model) for model in result.scalars().all()]

        except SQLAlchemyError as e:
            logger.error(f"Database error listing cities: {str(e)}")
            raise RepositoryError(f"Failed to list cities: {str(e)}", operation="list_all", entity="city") from e

    async def get_by_id(self, city_id: str) -> Optional[City]:
        return await self._get_one(CityModel.id == str(city_id), "get_by_id")

    async def get_by_slug(self, slug: str) -> Optional[City]:
        return await self._get_one(CityModel.slug == slug, "get_by_slug")

    async def find_by_name(self, name: str) -> Optional[City]:
        if not name or not name.strip():
            return None
        return await self._get_one(
            func.lower(CityModel.name) == name.strip().lower(),
            "find_by_name"
        )

    async def create(self, city: City) -> City:
        try:
            model = CityModel(
                id=city.id,
                name=city.name,
                slug=city.slug,
                description=city.description,
                hero_image=city.hero_image,
                is_featured=city.is_featured,
                created_at=city.created_at,
                updated_at=city.updated_at,
            )
            self._session.add(model)
            await self._session.flush()

            logger.info(f"Created city: {city.slug}")
            return self._model_to_domain(model)

        except IntegrityError as e:
            await self._session.rollback()
            logger.warning(f"City creation failed - slug already exists: {city.slug}")
            raise DuplicateResourceError(
                "A city with this slug already exists",
                resource_type="city",
                field="slug",
                value=city.slug
            ) from e

        except SQLAlchemyError as e:
            await self._session.rollback()
            logger.error(f"Database error creating city: {str(e)}")
            raise RepositoryError(f"Failed to create city: {str(e)}", operation="create", entity="city") from e

    async def update(self, city_id: str, changes: Dict[str, Any]) -> City:
        try:
            model = await self._get_model(city_id)
            if model is None:
                raise NotFoundError("City not found", resource_type="city", resource_id=str(city_id))

            for field, value in changes.items():
                if field in _MUTABLE_FIELDS:
                    setattr(model, field, value)
            model.updated_at = datetime.now(timezone.utc)

            await self._session.flush()

            logger.info(f"Updated city: {city_id}")
            return self._model_to_domain(model)

        except IntegrityError as e:
            await self._session.rollback()
            raise DuplicateResourceError(
                "A city with this slug already exists",
                resource_type="city",
                field="slug",
                value=changes.get("slug")
            ) from e

        except SQLAlchemyError as e:
            await self._session.rollback()
            logger.error(f"Database error updating city {city_id}: {str(e)}")
            raise RepositoryError(f"Failed to update city: {str(e)}", operation="update", entity="city") from e

    async def delete(self, city_id: str) -> bool:
        try:
            model = await self._get_model(city_id)
            if model is None:
                return False

            await self._session.delete(model)
            await self._session.flush()

            logger.info(f"Deleted city: {city_id}")
            return True

        except SQLAlchemyError as e:
            await self._session.rollback()
            logger.error(f"Database error deleting city {city_id}: {str(e)}")
            raise RepositoryError(f"Failed to delete city: {str(e)}", operation="delete", entity="city") from e

    # =========================================================================
    # PRIVATE HELPERS
    # =========================================================================

    async def _get_model(self, city_id: str) -> Optional[CityModel]:
        result = await self._session.execute(select(CityModel).where(CityModel.id == str(city_id)))
        return result.scalar_one_or_none()

    async def _get_one(self, condition, operation: str) -> Optional[City]:
        try:
            result = await self._session.execute(select(CityModel).where(condition).limit(1))
            model = result.scalar_one_or_none()
            return self._model_to_domain(model) if model else None

        except SQLAlchemyError as e:
            logger.error(f"Database error in city {operation}: {str(e)}")
            raise RepositoryError(f"Failed to load city: {str(e)}", operation=operation, entity="city") from e

    def _model_to_domain(self, model: CityModel) -> City:
        return City(
            id=str(model.id),
            name=model.name,
            slug=model.slug,
            description=model.description,
            hero_image=model.hero_image,
            is_featured=bool(model.is_featured),
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
