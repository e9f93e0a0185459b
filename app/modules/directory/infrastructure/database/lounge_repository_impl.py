# 📄 File: app/modules/directory/infrastructure/database/lounge_repository_impl.py
# 🧭 Purpose (Layman Explanation):
# Handles database work for lounge listings: saving new ones from onboarding, showing approved
# lounges per city, letting owners edit only their own lounges, and counting lounges for admins.
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy implementation of LoungeRepository with domain/model mapping, owner-scoped
# updates (owner_id is part of the WHERE clause), and grouped counts for admin statistics.
#
# 🔗 Dependencies:
# - SQLAlchemy async session, LoungeModel, Lounge domain model
#
# 🔄 Connected Modules / Calls From:
# - Onboarding business persistence, directory service, admin statistics, billing overview

import logging
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.modules.directory.domain.models.lounge import (
    Amenity,
    Lounge,
    LoungeStatus,
    LoungeType,
    SubscriptionStatus,
)
from app.modules.directory.domain.repositories.lounge_repository import LoungeRepository
from app.modules.directory.infrastructure.database.models import LoungeModel
from app.shared.core.exceptions import RepositoryError

logger = logging.getLogger(__name__)

_MUTABLE_FIELDS = (
    "name", "city_id", "address", "phone", "website", "description",
    "lounge_type", "amenities", "images", "cover_image",
    "instagram", "facebook", "twitter", "tiktok", "wants_website",
    "is_featured", "is_claimed", "is_verified", "status",
    "subscription_plan_id", "subscription_status", "subscription_ends_at",
)


def _enum_value(value: Any) -> Any:
    return value.value if hasattr(value, "value") else value


class LoungeRepositoryImpl(LoungeRepository):
    """SQLAlchemy implementation of the LoungeRepository interface."""

    def __init__(self, session: AsyncSession):
        self._session = session

    async def create(self, lounge: Lounge) -> Lounge:
        try:
            model = self._domain_to_model(lounge)
            self._session.add(model)
            await self._session.flush()

            logger.info(f"Created lounge {model.id} for owner {lounge.owner_id}")
            return self._model_to_domain(model)

        except SQLAlchemyError as e:
            await self._session.rollback()
            logger.error(f"Database error creating lounge: {str(e)}")
            raise RepositoryError(f"Failed to create lounge: {str(e)}", operation="create", entity="lounge") from e

    async def get_by_id(self, lounge_id: str) -> Optional[Lounge]:
        try:
            model = await self._get_model(lounge_id)
            return self._model_to_domain(model) if model else None

        except SQLAlchemyError as e:
            logger.error(f"Database error retrieving lounge {lounge_id}: {str(e)}")
            raise RepositoryError(f"Failed to retrieve lounge: {str(e)}", operation="get_by_id", entity="lounge") from e

    async def list_by_city(
        self,
        city_id: str,
        status: Optional[LoungeStatus] = LoungeStatus.APPROVED
    ) -> List[Lounge]:
        stmt = (
            select(LoungeModel)
            .where(LoungeModel.city_id == str(city_id))
            .order_by(LoungeModel.is_featured.desc(), LoungeModel.name.asc())
        )
        if status is not None:
            stmt = stmt.where(LoungeModel.status == _enum_value(status))
        return await self._list(stmt, "list_by_city")

    async def list_by_owner(self, owner_id: str) -> List[Lounge]:
        stmt = (
            select(LoungeModel)
            .where(LoungeModel.owner_id == str(owner_id))
            .order_by(LoungeModel.created_at.desc())
        )
        return await self._list(stmt, "list_by_owner")

    async def list_all(self, status: Optional[LoungeStatus] = None) -> List[Lounge]:
        stmt = select(LoungeModel).order_by(LoungeModel.created_at.desc())
        if status is not None:
            stmt = stmt.where(LoungeModel.status == _enum_value(status))
        return await self._list(stmt, "list_all")

    async def update(
        self,
        lounge_id: str,
        changes: Dict[str, Any],
        owner_id: Optional[str] = None
    ) -> Optional[Lounge]:
        try:
            stmt = select(LoungeModel).where(LoungeModel.id == str(lounge_id))
            if owner_id is not None:
                stmt = stmt.where(LoungeModel.owner_id == str(owner_id))

            result = await self._session.execute(stmt)
            model = result.scalar_one_or_none()
            if model is None:
                logger.debug(f"No lounge {lounge_id} matched update (owner scope: {owner_id})")
                return None

            for field, value in changes.items():
                if field not in _MUTABLE_FIELDS:
                    continue
                if field == "amenities" and value is not None:
                    value = [_enum_value(item) for item in value]
                setattr(model, field, _enum_value(value))
            model.updated_at = datetime.now(timezone.utc)

            await self._session.flush()

            logger.info(f"Updated lounge {lounge_id}: {sorted(changes)}")
            return self._model_to_domain(model)

        except SQLAlchemyError as e:
            await self._session.rollback()
            logger.error(f"Database error updating lounge {lounge_id}: {str(e)}")
            raise RepositoryError(f"Failed to update lounge: {str(e)}", operation="update", entity="lounge") from e

    async def delete(self, lounge_id: str) -> bool:
        try:
            model = await self._get_model(lounge_id)
            if model is None:
                return False

            await self._session.delete(model)
            await self._session.flush()

            logger.info(f"Deleted lounge: {lounge_id}")
            return True

        except SQLAlchemyError as e:
            await self._session.rollback()
            logger.error(f"Database error deleting lounge {lounge_id}: {str(e)}")
            raise RepositoryError(f"Failed to delete lounge: {str(e)}", operation="delete", entity="lounge") from e

    async def count(
        self,
        status: Optional[LoungeStatus] = None,
        subscription_status: Optional[SubscriptionStatus] = None
    ) -> int:
        try:
            stmt = select(func.count(LoungeModel.id))
            if status is not None:
                stmt = stmt.where(LoungeModel.status == _enum_value(status))
            if subscription_status is not None:
                stmt = stmt.where(LoungeModel.subscription_status == _enum_value(subscription_status))
            result = await self._session.execute(stmt)
            return int(result.scalar() or 0)

        except SQLAlchemyError as e:
            logger.error(f"Database error counting lounges: {str(e)}")
            raise RepositoryError(f"Failed to count lounges: {str(e)}", operation="count", entity="lounge") from e

    async def count_by_type(self) -> Dict[str, int]:
        return await self._grouped_count(LoungeModel.lounge_type, "count_by_type")

    async def count_by_city(self) -> Dict[str, int]:
        counts = await self._grouped_count(LoungeModel.city_id, "count_by_city")
        return {key: value for key, value in counts.items() if key}

    # =========================================================================
    # PRIVATE HELPERS
    # =========================================================================

    async def _get_model(self, lounge_id: str) -> Optional[LoungeModel]:
        result = await self._session.execute(select(LoungeModel).where(LoungeModel.id == str(lounge_id)))
        return result.scalar_one_or_none()

    async def _list(self, stmt, operation: str) -> List[Lounge]:
        try:
            result = await self._session.execute(stmt)
            return [self._model_to_domain(model) for model in result.scalars().all()]

        except SQLAlchemyError as e:
            logger.error(f"Database error in lounge {operation}: {str(e)}")
            raise RepositoryError(f"Failed to list lounges: {str(e)}", operation=operation, entity="lounge") from e

    async def _grouped_count(self, column, operation: str) -> Dict[str, int]:
        try:
            stmt = select(column, func.count(LoungeModel.id)).group_by(column)
            result = await self._session.execute(stmt)
            return {
                (str(key) if key is not None else ""): int(count)
                for key, count in result.all()
            }

        except SQLAlchemyError as e:
            logger.error(f"Database error in lounge {operation}: {str(e)}")
            raise RepositoryError(f"Failed to count lounges: {str(e)}", operation=operation, entity="lounge") from e

    def _domain_to_model(self, lounge: Lounge) -> LoungeModel:
        """Convert domain entity to SQLAlchemy model."""
        return LoungeModel(
            id=lounge.id,
            name=lounge.name,
            city_id=lounge.city_id,
            owner_id=lounge.owner_id,
            address=lounge.address,
            phone=lounge.phone,
            website=lounge.website,
            description=lounge.description,
            lounge_type=lounge.lounge_type.value,
            amenities=[amenity.value for amenity in lounge.amenities],
            images=list(lounge.images),
            cover_image=lounge.cover_image,
            instagram=lounge.instagram,
            facebook=lounge.facebook,
            twitter=lounge.twitter,
            tiktok=lounge.tiktok,
            wants_website=lounge.wants_website,
            is_featured=lounge.is_featured,
            is_claimed=lounge.is_claimed,
            is_verified=lounge.is_verified,
            status=lounge.status.value,
            subscription_plan_id=lounge.subscription_plan_id,
            subscription_status=lounge.subscription_status.value,
            subscription_ends_at=lounge.subscription_ends_at,
            created_at=lounge.created_at,
            updated_at=lounge.updated_at,
        )

    def _model_to_domain(self, model: LoungeModel) -> Lounge:
        """Convert SQLAlchemy model to domain entity."""
        return Lounge(
            id=str(model.id),
            name=model.name,
            city_id=str(model.city_id) if model.city_id else None,
            owner_id=str(model.owner_id) if model.owner_id else None,
            address=model.address,
            phone=model.phone,
            website=model.website,
            description=model.description,
            lounge_type=LoungeType(model.lounge_type),
            amenities=[Amenity(item) for item in (model.amenities or [])],
            images=list(model.images or []),
            cover_image=model.cover_image,
            instagram=model.instagram,
            facebook=model.facebook,
            twitter=model.twitter,
            tiktok=model.tiktok,
            wants_website=bool(model.wants_website),
            is_featured=bool(model.is_featured),
            is_claimed=bool(model.is_claimed),
            is_verified=bool(model.is_verified),
            status=LoungeStatus(model.status),
            subscription_plan_id=str(model.subscription_plan_id) if model.subscription_plan_id else None,
            subscription_status=SubscriptionStatus(model.subscription_status or "none"),
            subscription_ends_at=model.subscription_ends_at,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
