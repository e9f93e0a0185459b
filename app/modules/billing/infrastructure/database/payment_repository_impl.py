# 📄 File: app/modules/billing/infrastructure/database/payment_repository_impl.py
# 🧭 Purpose (Layman Explanation):
# Reads subscriptions and payments from the database for the admin revenue screens.
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy implementations of SubscriptionRepository and PaymentRepository (read side only).
#
# 🔗 Dependencies:
# - SQLAlchemy async session, SubscriptionModel, PaymentModel
#
# 🔄 Connected Modules / Calls From:
# - Billing service, admin statistics, dependency providers

import logging
from datetime import datetime
from typing import Dict, List, Optional

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.modules.billing.domain.models.payment import Payment, PaymentStatus, Subscription
from app.modules.billing.domain.repositories.payment_repository import (
    PaymentRepository,
    SubscriptionRepository,
)
from app.modules.billing.infrastructure.database.models import PaymentModel, SubscriptionModel
from app.shared.core.exceptions import RepositoryError

logger = logging.getLogger(__name__)


class SubscriptionRepositoryImpl(SubscriptionRepository):
    """SQLAlchemy implementation of the SubscriptionRepository interface."""

    def __init__(self, session: AsyncSession):
        self._session = session

    async def list_by_lounge(self, lounge_id: str) -> List[Subscription]:
        try:
            stmt = (
                select(SubscriptionModel)
                .where(SubscriptionModel.lounge_id == str(lounge_id))
                .order_by(SubscriptionModel.created_at.desc())
            )
            result = await self._session.execute(stmt)
            return [self._model_to_domain(model) for model in result.scalars().all()]

        except SQLAlchemyError as e:
            logger.error(f"Database error listing subscriptions for lounge {lounge_id}: {str(e)}")
            raise RepositoryError(f"Failed to list subscriptions: {str(e)}", operation="list_by_lounge", entity="subscription") from e

    async def count_active_by_plan(self) -> Dict[str, int]:
        try:
            stmt = (
                select(SubscriptionModel.plan_id, func.count(SubscriptionModel.id))
                .where(SubscriptionModel.status == "active")
                .group_by(SubscriptionModel.plan_id)
            )
            result = await self._session.execute(stmt)
            return {str(plan_id): int(count) for plan_id, count in result.all() if plan_id}

        except SQLAlchemyError as e:
            logger.error(f"Database error counting subscriptions: {str(e)}")
            raise RepositoryError(f"Failed to count subscriptions: {str(e)}", operation="count_active_by_plan", entity="subscription") from e

    def _model_to_domain(self, model: SubscriptionModel) -> Subscription:
        return Subscription(
            id=str(model.id),
            lounge_id=str(model.lounge_id) if model.lounge_id else None,
            plan_id=str(model.plan_id) if model.plan_id else None,
            stripe_subscription_id=model.stripe_subscription_id,
            stripe_customer_id=model.stripe_customer_id,
            status=model.status,
            current_period_start=model.current_period_start,
            current_period_end=model.current_period_end,
            created_at=model.created_at,
        )


class PaymentRepositoryImpl(PaymentRepository):
    """SQLAlchemy implementation of the PaymentRepository interface."""

    def __init__(self, session: AsyncSession):
        self._session = session

    async def list_all(self, status: Optional[PaymentStatus] = None) -> List[Payment]:
        try:
            stmt = select(PaymentModel).order_by(PaymentModel.created_at.desc())
            if status is not None:
                stmt = stmt.where(PaymentModel.status == PaymentStatus(status).value)
            result = await self._session.execute(stmt)
            return [self._model_to_domain(model) for model in result.scalars().all()]

        except SQLAlchemyError as e:
            logger.error(f"Database error listing payments: {str(e)}")
            raise RepositoryError(f"Failed to list payments: {str(e)}", operation="list_all", entity="payment") from e

    async def sum_succeeded_since(self, since: Optional[datetime] = None) -> int:
        try:
            stmt = (
                select(func.coalesce(func.sum(PaymentModel.amount), 0))
                .where(PaymentModel.status == PaymentStatus.SUCCEEDED.value)
            )
            if since is not None:
                stmt = stmt.where(PaymentModel.created_at >= since)
            result = await self._session.execute(stmt)
            return int(result.scalar() or 0)

        except SQLAlchemyError as e:
            logger.error(f"Database error summing payments: {str(e)}")
            raise RepositoryError(f"Failed to sum payments: {str(e)}", operation="sum_succeeded_since", entity="payment") from e

    async def count_by_status(self) -> Dict[str, int]:
        try:
            stmt = select(PaymentModel.status, func.count(PaymentModel.id)).group_by(PaymentModel.status)
            result = await self._session.execute(stmt)
            return {str(status): int(count) for status, count in result.all()}

        except SQLAlchemyError as e:
            logger.error(f"Database error counting payments: {str(e)}")
            raise RepositoryError(f"Failed to count payments: {str(e)}", operation="count_by_status", entity="payment") from e

    def _model_to_domain(self, model: PaymentModel) -> Payment:
        return Payment(
            id=str(model.id),
            lounge_id=str(model.lounge_id) if model.lounge_id else None,
            subscription_id=str(model.subscription_id) if model.subscription_id else None,
            stripe_payment_intent_id=model.stripe_payment_intent_id,
            amount=model.amount or 0,
            status=PaymentStatus(model.status),
            created_at=model.created_at,
        )
