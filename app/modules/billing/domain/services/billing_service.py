# 📄 File: app/modules/billing/domain/services/billing_service.py
# 🧭 Purpose (Layman Explanation):
# Everything about money on the site: which plans are for sale, which plan each of an owner's
# lounges is on, and (for admins) how much revenue came in and how plans are selling.
#
# 🧪 Purpose (Technical Summary):
# Billing domain service. Public plan listing (active, by monthly price), owner billing overview
# of approved lounges with their plan names, admin plan CRUD with per-plan active subscription
# counts, payment listing and revenue statistics. Checkout itself is not handled here.
#
# 🔗 Dependencies:
# - Plan/Subscription/Payment repositories, LoungeRepository, ActivityRecorder
#
# 🔄 Connected Modules / Calls From:
# - Billing presentation APIs, admin statistics

from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, List, Optional

from app.modules.billing.domain.models.payment import Payment, PaymentStatus
from app.modules.billing.domain.models.plan import SubscriptionPlan
from app.modules.billing.domain.repositories.payment_repository import (
    PaymentRepository,
    SubscriptionRepository,
)
from app.modules.billing.domain.repositories.plan_repository import PlanRepository
from app.modules.directory.domain.models.lounge import Lounge, LoungeStatus
from app.modules.directory.domain.repositories.lounge_repository import LoungeRepository
from app.modules.user_management.domain.models.activity_log import ActivityAction
from app.modules.user_management.domain.services.activity_recorder import ActivityRecorder
from app.shared.core.exceptions import NotFoundError
from app.shared.utils.logging import get_logger

logger = get_logger(__name__)

REVENUE_WINDOW_DAYS = 30


@dataclass
class LoungeBilling:
    lounge: Lounge
    plan_name: Optional[str] = None


@dataclass
class BillingOverview:
    """What the owner's billing page shows."""
    lounges: List[LoungeBilling] = field(default_factory=list)
    plans: List[SubscriptionPlan] = field(default_factory=list)
    upgrade: Optional[str] = None


@dataclass
class PlanStats:
    plan: SubscriptionPlan
    active_subscriptions: int = 0


@dataclass
class PaymentStats:
    total_revenue: int = 0
    revenue_last_30_days: int = 0
    counts_by_status: Dict[str, int] = field(default_factory=dict)


class BillingService:
    """Plans, lounge subscriptions and payment reporting."""

    def __init__(
        self,
        plans: PlanRepository,
        lounges: LoungeRepository,
        subscriptions: Optional[SubscriptionRepository] = None,
        payments: Optional[PaymentRepository] = None,
        activity: Optional[ActivityRecorder] = None
    ):
        self.plans = plans
        self.lounges = lounges
        self.subscriptions = subscriptions
        self.payments = payments
        self.activity = activity or ActivityRecorder(None)

    # =========================================================================
    # OWNER / PUBLIC
    # =========================================================================

    async def list_active_plans(self) -> List[SubscriptionPlan]:
        return await self.plans.list_active()

    async def get_overview(self, owner_id: str, upgrade: Optional[str] = None) -> BillingOverview:
        """
        Billing page data for an owner.

        Only approved lounges can carry a subscription, so pending or rejected
        listings are left out. ``upgrade`` is the plan chosen during onboarding
        and is echoed back so the page can highlight it.
        """
        plans = await self.plans.list_all()
        names = {plan.id: plan.name for plan in plans}

        lounges = [
            LoungeBilling(lounge=lounge, plan_name=names.get(lounge.subscription_plan_id))
            for lounge in await self.lounges.list_by_owner(owner_id)
            if lounge.status == LoungeStatus.APPROVED
        ]

        return BillingOverview(
            lounges=lounges,
            plans=[plan for plan in plans if plan.is_active],
            upgrade=upgrade.strip().lower() if upgrade and upgrade.strip() else None,
        )

    # =========================================================================
    # ADMIN - PLANS
    # =========================================================================

    async def list_plan_stats(self) -> List[PlanStats]:
        plans = await self.plans.list_all()
        counts = await self.subscriptions.count_active_by_plan() if self.subscriptions else {}
        return [PlanStats(plan=plan, active_subscriptions=counts.get(plan.id, 0)) for plan in plans]

    async def create_plan(self, actor_id: str, data: Dict[str, Any]) -> SubscriptionPlan:
        plan = await self.plans.create(SubscriptionPlan(**data))
        await self.activity.record(
            ActivityAction.PLAN_CREATED, actor_id,
            entity_type="subscription_plan", entity_id=plan.id, metadata={"slug": plan.slug}
        )
        return plan

    async def update_plan(self, actor_id: str, plan_id: str, changes: Dict[str, Any]) -> SubscriptionPlan:
        current = await self.plans.get_by_id(plan_id)
        if current is None:
            raise NotFoundError("Plan not found", resource_type="subscription_plan", resource_id=plan_id)

        # Run the merged values through the model validators before writing
        merged = current.model_copy(update=changes)
        SubscriptionPlan.model_validate(merged.model_dump())

        plan = await self.plans.update(plan_id, changes)
        await self.activity.record(
            ActivityAction.PLAN_UPDATED, actor_id,
            entity_type="subscription_plan", entity_id=plan_id, metadata={"fields": sorted(changes)}
        )
        return plan

    async def delete_plan(self, actor_id: str, plan_id: str) -> None:
        if not await self.plans.delete(plan_id):
            raise NotFoundError("Plan not found", resource_type="subscription_plan", resource_id=plan_id)
        await self.activity.record(
            ActivityAction.PLAN_DELETED, actor_id,
            entity_type="subscription_plan", entity_id=plan_id
        )

    # =========================================================================
    # ADMIN - PAYMENTS
    # =========================================================================

    async def list_payments(self, status: Optional[PaymentStatus] = None) -> List[Payment]:
        if self.payments is None:
            return []
        return await self.payments.list_all(status=status)

    async def revenue_since(self, days: int = REVENUE_WINDOW_DAYS) -> int:
        if self.payments is None:
            return 0
        since = datetime.now(timezone.utc) - timedelta(days=days)
        return await self.payments.sum_succeeded_since(since)

    async def get_payment_stats(self) -> PaymentStats:
        if self.payments is None:
            return PaymentStats()

        stats = PaymentStats(
            total_revenue=await self.payments.sum_succeeded_since(None),
            revenue_last_30_days=await self.revenue_since(REVENUE_WINDOW_DAYS),
            counts_by_status=await self.payments.count_by_status(),
        )
        logger.debug(f"Payment stats computed: {stats.counts_by_status}")
        return stats
