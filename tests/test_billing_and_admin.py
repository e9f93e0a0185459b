from datetime import datetime, timedelta, timezone

import pytest

from app.modules.admin.domain.services.admin_stats_service import AdminStatsService
from app.modules.billing.domain.models.payment import PaymentStatus
from app.modules.billing.domain.models.plan import SubscriptionPlan
from app.modules.billing.domain.services.billing_service import BillingService
from app.modules.billing.infrastructure.database.models import PaymentModel, SubscriptionModel
from app.modules.billing.infrastructure.database.payment_repository_impl import (
    PaymentRepositoryImpl,
    SubscriptionRepositoryImpl,
)
from app.modules.billing.infrastructure.database.plan_repository_impl import PlanRepositoryImpl
from app.modules.directory.domain.models.lounge import LoungeStatus, LoungeType, SubscriptionStatus
from app.modules.directory.infrastructure.database.city_repository_impl import CityRepositoryImpl
from app.modules.directory.infrastructure.database.lounge_repository_impl import LoungeRepositoryImpl
from app.modules.user_management.domain.services.activity_recorder import ActivityRecorder
from app.modules.user_management.infrastructure.database.activity_log_repository_impl import (
    ActivityLogRepositoryImpl,
)
from app.modules.user_management.infrastructure.database.profile_repository_impl import (
    ProfileRepositoryImpl,
)
from app.shared.core.exceptions import NotFoundError

from conftest import new_id

ADMIN_ID = "00000000-0000-4000-8000-0000000000aa"


@pytest.fixture
def billing(db_session):
    return BillingService(
        plans=PlanRepositoryImpl(db_session),
        lounges=LoungeRepositoryImpl(db_session),
        subscriptions=SubscriptionRepositoryImpl(db_session),
        payments=PaymentRepositoryImpl(db_session),
        activity=ActivityRecorder(ActivityLogRepositoryImpl(db_session)),
    )


@pytest.fixture
def seed_plan(db_session):
    async def _seed(name: str, price_monthly: int, is_active: bool = True) -> SubscriptionPlan:
        plan = await PlanRepositoryImpl(db_session).create(SubscriptionPlan(
            name=name,
            slug=name.lower(),
            price_monthly=price_monthly,
            price_yearly=price_monthly * 10,
            features=[f"{name} feature"],
            is_active=is_active,
        ))
        await db_session.commit()
        return plan

    return _seed


@pytest.fixture
def seed_payment(db_session):
    async def _seed(amount: int, status: str = "succeeded", days_ago: int = 1) -> None:
        db_session.add(PaymentModel(
            id=new_id(),
            amount=amount,
            status=status,
            created_at=datetime.now(timezone.utc) - timedelta(days=days_ago),
        ))
        await db_session.commit()

    return _seed


class TestPlans:
    """Plan catalogue"""

    async def test_active_plans_ordered_by_price(self, billing, seed_plan):
        """Inactive plans are hidden and the cheapest comes first"""
        await seed_plan("Premium", 9900)
        await seed_plan("Basic", 1900)
        await seed_plan("Legacy", 500, is_active=False)
        await seed_plan("Pro", 4900)

        plans = await billing.list_active_plans()

        assert [plan.slug for plan in plans] == ["basic", "pro", "premium"]

    async def test_create_plan(self, billing):
        plan = await billing.create_plan(
            ADMIN_ID, {"name": "Pro", "slug": "pro", "price_monthly": 4900, "price_yearly": 49000}
        )
        assert plan.price_monthly == 4900

    async def test_update_plan(self, billing, seed_plan):
        plan = await seed_plan("Basic", 1900)

        updated = await billing.update_plan(ADMIN_ID, plan.id, {"price_monthly": 2900, "is_active": False})

        assert updated.price_monthly == 2900
        assert updated.is_active is False
        assert await billing.list_active_plans() == []

    async def test_update_rejects_negative_price(self, billing, seed_plan):
        plan = await seed_plan("Basic", 1900)
        with pytest.raises(ValueError):
            await billing.update_plan(ADMIN_ID, plan.id, {"price_monthly": -1})

    async def test_update_missing_plan(self, billing):
        with pytest.raises(NotFoundError):
            await billing.update_plan(ADMIN_ID, new_id(), {"name": "Ghost"})

    async def test_delete_plan(self, billing, seed_plan):
        plan = await seed_plan("Basic", 1900)
        await billing.delete_plan(ADMIN_ID, plan.id)
        with pytest.raises(NotFoundError):
            await billing.delete_plan(ADMIN_ID, plan.id)

    async def test_plan_stats_count_active_subscriptions(self, billing, seed_plan, seed_lounge, db_session):
        plan = await seed_plan("Pro", 4900)
        lounge = await seed_lounge()
        for status in ("active", "active", "canceled"):
            db_session.add(SubscriptionModel(
                id=new_id(),
                lounge_id=lounge.id,
                plan_id=plan.id,
                status=status,
                created_at=datetime.now(timezone.utc),
            ))
        await db_session.commit()

        stats = await billing.list_plan_stats()

        assert [(s.plan.slug, s.active_subscriptions) for s in stats] == [("pro", 2)]


class TestBillingOverview:
    """Owner billing page"""

    async def test_only_approved_lounges_are_listed(self, billing, seed_profile, seed_lounge, seed_plan):
        owner_id = await seed_profile()
        plan = await seed_plan("Pro", 4900)
        await seed_lounge("Live", owner_id=owner_id, status=LoungeStatus.APPROVED, subscription_plan_id=plan.id)
        await seed_lounge("Waiting", owner_id=owner_id)

        overview = await billing.get_overview(owner_id, upgrade=" PRO ")

        assert [(item.lounge.name, item.plan_name) for item in overview.lounges] == [("Live", "Pro")]
        assert overview.upgrade == "pro"
        assert [p.slug for p in overview.plans] == ["pro"]

    async def test_blank_upgrade_is_ignored(self, billing, seed_profile):
        overview = await billing.get_overview(await seed_profile(), upgrade="  ")
        assert overview.upgrade is None
        assert overview.lounges == []


class TestPayments:
    """Payment reporting"""

    async def test_payment_stats(self, billing, seed_payment):
        await seed_payment(4900, days_ago=2)
        await seed_payment(9900, days_ago=45)
        await seed_payment(1900, status="failed", days_ago=1)

        stats = await billing.get_payment_stats()

        assert stats.total_revenue == 14800
        assert stats.revenue_last_30_days == 4900
        assert stats.counts_by_status == {"succeeded": 2, "failed": 1}

    async def test_list_payments_by_status(self, billing, seed_payment):
        await seed_payment(4900)
        await seed_payment(1900, status="failed")

        failed = await billing.list_payments(PaymentStatus.FAILED)

        assert [p.amount for p in failed] == [1900]


class TestAdminStats:
    """Admin dashboard numbers"""

    @pytest.fixture
    def stats_service(self, db_session, billing):
        return AdminStatsService(
            lounges=LoungeRepositoryImpl(db_session),
            cities=CityRepositoryImpl(db_session),
            profiles=ProfileRepositoryImpl(db_session),
            activity_log=ActivityLogRepositoryImpl(db_session),
            billing=billing,
        )

    async def test_stats_aggregate_directory_and_billing(
        self, stats_service, seed_profile, seed_city, seed_lounge, seed_payment
    ):
        await seed_profile()
        await seed_profile(role="admin")
        miami = await seed_city("Miami")
        await seed_lounge("A", city_id=miami.id, status=LoungeStatus.APPROVED,
                          subscription_status=SubscriptionStatus.ACTIVE)
        await seed_lounge("B", city_id=miami.id, lounge_type=LoungeType.BAR)
        await seed_lounge("C")
        await seed_payment(4900)

        stats = await stats_service.get_stats()

        assert stats.total_lounges == 3
        assert stats.pending_lounges == 2
        assert stats.approved_lounges == 1
        assert stats.total_users == 2
        assert stats.active_subscriptions == 1
        assert stats.revenue_last_30_days == 4900
        assert stats.lounges_by_type == {"Lounge": 2, "Bar": 1}
        assert stats.lounges_by_city == {"Miami": 2}

    async def test_recent_activity_limit_is_clamped(self, stats_service, billing):
        for index in range(3):
            await billing.create_plan(ADMIN_ID, {"name": f"Plan {index}", "slug": f"plan-{index}"})

        assert len(await stats_service.recent_activity(limit=0)) == 1
        assert len(await stats_service.recent_activity(limit=500)) == 3
