# 📄 File: app/modules/admin/domain/services/admin_stats_service.py
# 🧭 Purpose (Layman Explanation):
# Adds up the numbers on the admin home screen: how many lounges and users there are, how many
# lounges are waiting for review, who is paying, how much money came in this month, and what
# happened most recently.
#
# 🧪 Purpose (Technical Summary):
# Read-only aggregation service over directory, billing and user_management repositories for
# the admin dashboard statistics and recent activity feed.
#
# 🔗 Dependencies:
# - Lounge/City/Profile/ActivityLog repositories, BillingService
#
# 🔄 Connected Modules / Calls From:
# - app.modules.admin.presentation.api.v1.admin

from dataclasses import dataclass, field
from typing import Dict, List

from app.modules.billing.domain.services.billing_service import REVENUE_WINDOW_DAYS, BillingService
from app.modules.directory.domain.models.lounge import LoungeStatus, SubscriptionStatus
from app.modules.directory.domain.repositories.city_repository import CityRepository
from app.modules.directory.domain.repositories.lounge_repository import LoungeRepository
from app.modules.user_management.domain.models.activity_log import ActivityLog
from app.modules.user_management.domain.repositories.activity_log_repository import (
    ActivityLogRepository,
)
from app.modules.user_management.domain.repositories.profile_repository import ProfileRepository
from app.shared.utils.logging import get_logger

logger = get_logger(__name__)

DEFAULT_ACTIVITY_LIMIT = 10
MAX_ACTIVITY_LIMIT = 100


@dataclass
class AdminStats:
    total_lounges: int = 0
    pending_lounges: int = 0
    approved_lounges: int = 0
    total_users: int = 0
    active_subscriptions: int = 0
    revenue_last_30_days: int = 0
    lounges_by_type: Dict[str, int] = field(default_factory=dict)
    lounges_by_city: Dict[str, int] = field(default_factory=dict)


class AdminStatsService:
    """Numbers and recent activity for the admin dashboard."""

    def __init__(
        self,
        lounges: LoungeRepository,
        cities: CityRepository,
        profiles: ProfileRepository,
        activity_log: ActivityLogRepository,
        billing: BillingService
    ):
        self.lounges = lounges
        self.cities = cities
        self.profiles = profiles
        self.activity_log = activity_log
        self.billing = billing

    async def get_stats(self) -> AdminStats:
        """
        Lounges by city are keyed by city name; counts for cities that no
        longer exist are dropped.
        """
        by_city_id = await self.lounges.count_by_city()
        city_names = {city.id: city.name for city in await self.cities.list_all()}

        stats = AdminStats(
            total_lounges=await self.lounges.count(),
            pending_lounges=await self.lounges.count(status=LoungeStatus.PENDING),
            approved_lounges=await self.lounges.count(status=LoungeStatus.APPROVED),
            total_users=await self.profiles.count(),
            active_subscriptions=await self.lounges.count(subscription_status=SubscriptionStatus.ACTIVE),
            revenue_last_30_days=await self.billing.revenue_since(REVENUE_WINDOW_DAYS),
            lounges_by_type=await self.lounges.count_by_type(),
            lounges_by_city={
                city_names[city_id]: count
                for city_id, count in by_city_id.items()
                if city_id in city_names
            },
        )
        logger.debug(f"Admin stats: {stats.total_lounges} lounges, {stats.pending_lounges} pending")
        return stats

    async def recent_activity(self, limit: int = DEFAULT_ACTIVITY_LIMIT) -> List[ActivityLog]:
        limit = max(1, min(limit, MAX_ACTIVITY_LIMIT))
        return await self.activity_log.list_recent(limit=limit)
