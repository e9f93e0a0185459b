# 📄 File: app/modules/billing/presentation/dependencies.py
# 🧭 Purpose (Layman Explanation):
# Hands the billing endpoints their database helpers and the billing logic.
# 🧪 Purpose (Technical Summary):
# FastAPI dependency providers for plan/subscription/payment repositories and BillingService.
# 🔗 Dependencies:
# FastAPI, SQLAlchemy AsyncSession, billing repositories, directory lounge provider
# 🔄 Connected Modules / Calls From:
# Billing and admin routers

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.modules.billing.domain.repositories.payment_repository import (
    PaymentRepository,
    SubscriptionRepository,
)
from app.modules.billing.domain.repositories.plan_repository import PlanRepository
from app.modules.billing.domain.services.billing_service import BillingService
from app.modules.billing.infrastructure.database.payment_repository_impl import (
    PaymentRepositoryImpl,
    SubscriptionRepositoryImpl,
)
from app.modules.billing.infrastructure.database.plan_repository_impl import PlanRepositoryImpl
from app.modules.directory.domain.repositories.lounge_repository import LoungeRepository
from app.modules.directory.presentation.dependencies import get_lounge_repository
from app.modules.user_management.domain.services.activity_recorder import ActivityRecorder
from app.modules.user_management.presentation.dependencies import get_activity_recorder
from app.shared.core.dependencies import get_db


async def get_plan_repository(db: AsyncSession = Depends(get_db)) -> PlanRepository:
    return PlanRepositoryImpl(db)


async def get_subscription_repository(db: AsyncSession = Depends(get_db)) -> SubscriptionRepository:
    return SubscriptionRepositoryImpl(db)


async def get_payment_repository(db: AsyncSession = Depends(get_db)) -> PaymentRepository:
    return PaymentRepositoryImpl(db)


async def get_billing_service(
    plans: PlanRepository = Depends(get_plan_repository),
    lounges: LoungeRepository = Depends(get_lounge_repository),
    subscriptions: SubscriptionRepository = Depends(get_subscription_repository),
    payments: PaymentRepository = Depends(get_payment_repository),
    activity: ActivityRecorder = Depends(get_activity_recorder)
) -> BillingService:
    return BillingService(plans, lounges, subscriptions, payments, activity)
