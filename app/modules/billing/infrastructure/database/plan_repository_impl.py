# 📄 File: app/modules/billing/infrastructure/database/plan_repository_impl.py
# 🧭 Purpose (Layman Explanation):
# Handles database work for subscription plans: the pricing list and admin edits.
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy implementation of PlanRepository; slug uniqueness surfaces as
# DuplicateResourceError, other failures as RepositoryError.
#
# 🔗 Dependencies:
# - SQLAlchemy async session, SubscriptionPlanModel, SubscriptionPlan domain model
#
# 🔄 Connected Modules / Calls From:
# - Billing service, dependency providers

import logging
from typing import Any, Dict, List, Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.modules.billing.domain.models.plan import SubscriptionPlan
from app.modules.billing.domain.repositories.plan_repository import PlanRepository
from app.modules.billing.infrastructure.database.models import SubscriptionPlanModel
from app.shared.core.exceptions import DuplicateResourceError, NotFoundError, RepositoryError

logger = logging.getLogger(__name__)

_MUTABLE_FIELDS = (
    "name", "slug", "price_monthly", "price_yearly", "features", "is_active",
    "stripe_price_id_monthly", "stripe_price_id_yearly",
)


class PlanRepositoryImpl(PlanRepository):
    """SQLAlchemy implementation of the PlanRepository interface."""

    def __init__(self, session: AsyncSession):
        self._session = session

    async def list_active(self) -> List[SubscriptionPlan]:
        stmt = (
            select(SubscriptionPlanModel)
            .where(SubscriptionPlanModel.is_active.is_(True))
            .order_by(SubscriptionPlanModel.price_monthly.asc())
        )
        return await self._list(stmt, "list_active")

    async def list_all(self) -> List[SubscriptionPlan]:
        stmt = select(SubscriptionPlanModel).order_by(SubscriptionPlanModel.price_monthly.asc())
        return await self._list(stmt, "list_all")

    async def get_by_id(self, plan_id: str) -> Optional[SubscriptionPlan]:
        return await self._get_one(SubscriptionPlanModel.id == str(plan_id), "get_by_id")

    async def get_by_slug(self, slug: str) -> Optional[SubscriptionPlan]:
        return await self._get_one(SubscriptionPlanModel.slug == slug, "get_by_slug")

    async def create(self, plan: SubscriptionPlan) -> SubscriptionPlan:
        try:
            model = SubscriptionPlanModel(
                id=plan.id,
                name=plan.name,
                slug=plan.slug,
                price_monthly=plan.price_monthly,
                price_yearly=plan.price_yearly,
                features=list(plan.features),
                is_active=plan.is_active,
                stripe_price_id_monthly=plan.stripe_price_id_monthly,
                stripe_price_id_yearly=plan.stripe_price_id_yearly,
                created_at=plan.created_at,
            )
            self._session.add(model)
            await self._session.flush()

            logger.info(f"Created subscription plan: {plan.slug}")
            return self._model_to_domain(model)

        except IntegrityError as e:
            await self._session.rollback()
            raise DuplicateResourceError(
                "A plan with this slug already exists",
                resource_type="subscription_plan",
                field="slug",
                value=plan.slug
            ) from e

        except SQLAlchemyError as e:
            await self._session.rollback()
            logger.error(f"Database error creating plan: {str(e)}")
            raise RepositoryError(f"Failed to create plan: {str(e)}", operation="create", entity="subscription_plan") from e

    async def update(self, plan_id: str, changes: Dict[str, Any]) -> SubscriptionPlan:
        try:
            model = await self._get_model(plan_id)
            if model is None:
                raise NotFoundError("Plan not found", resource_type="subscription_plan", resource_id=str(plan_id))

            for field, value in changes.items():
                if field in _MUTABLE_FIELDS:
                    setattr(model, field, list(value) if field == "features" else value)

            await self._session.flush()

            logger.info(f"Updated subscription plan: {plan_id}")
            return self._model_to_domain(model)

        except IntegrityError as e:
            await self._session.rollback()
            raise DuplicateResourceError(
                "A plan with this slug already exists",
                resource_type="subscription_plan",
                field="slug",
                value=changes.get("slug")
            ) from e

        except SQLAlchemyError as e:
            await self._session.rollback()
            logger.error(f"Database error updating plan {plan_id}: {str(e)}")
            raise RepositoryError(f"Failed to update plan: {str(e)}", operation="update", entity="subscription_plan") from e

    async def delete(self, plan_id: str) -> bool:
        try:
            model = await self._get_model(plan_id)
            if model is None:
                return False

            await self._session.delete(model)
            await self._session.flush()

            logger.info(f"Deleted subscription plan: {plan_id}")
            return True

        except SQLAlchemyError as e:
            await self._session.rollback()
            logger.error(f"Database error deleting plan {plan_id}: {str(e)}")
            raise RepositoryError(f"Failed to delete plan: {str(e)}", operation="delete", entity="subscription_plan") from e

    # =========================================================================
    # PRIVATE HELPERS
    # =========================================================================

    async def _get_model(self, plan_id: str) -> Optional[SubscriptionPlanModel]:
        result = await self._session.execute(
            select(SubscriptionPlanModel).where(SubscriptionPlanModel.id == str(plan_id))
        )
        return result.scalar_one_or_none()

    async def _get_one(self, condition, operation: str) -> Optional[SubscriptionPlan]:
        try:
            result = await self._session.execute(select(SubscriptionPlanModel).where(condition).limit(1))
            model = result.scalar_one_or_none()
            return self._model_to_domain(model) if model else None

        except SQLAlchemyError as e:
            logger.error(f"Database error in plan {operation}: {str(e)}")
            raise RepositoryError(f"Failed to load plan: {str(e)}", operation=operation, entity="subscription_plan") from e

    async def _list(self, stmt, operation: str) -> List[SubscriptionPlan]:
        try:
            result = await self._session.execute(stmt)
            return [self._model_to_domain(model) for model in result.scalars().all()]

        except SQLAlchemyError as e:
            logger.error(f"Database error in plan {operation}: {str(e)}")
            raise RepositoryError(f"Failed to list plans: {str(e)}", operation=operation, entity="subscription_plan") from e

    def _model_to_domain(self, model: SubscriptionPlanModel) -> SubscriptionPlan:
        return SubscriptionPlan(
            id=str(model.id),
            name=model.name,
            slug=model.slug,
            price_monthly=model.price_monthly or 0,
            price_yearly=model.price_yearly or 0,
            features=list(model.features or []),
            is_active=bool(model.is_active),
            stripe_price_id_monthly=model.stripe_price_id_monthly,
            stripe_price_id_yearly=model.stripe_price_id_yearly,
            created_at=model.created_at,
        )
