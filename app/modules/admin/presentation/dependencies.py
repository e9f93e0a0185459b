# 📄 File: app/modules/admin/presentation/dependencies.py
# 🧭 Purpose (Layman Explanation):
# Hands the admin dashboard endpoints the counters they read from.
# 🧪 Purpose (Technical Summary):
# FastAPI provider for AdminStatsService bound to the request's repositories.
# 🔗 Dependencies:
# FastAPI, directory/billing/user_management dependency providers
# 🔄 Connected Modules / Calls From:
# app.modules.admin.presentation.api.v1.admin

from fastapi import Depends

from app.modules.admin.domain.services.admin_stats_service import AdminStatsService
from app.modules.billing.domain.services.billing_service import BillingService
from app.modules.billing.presentation.dependencies import get_billing_service
from app.modules.directory.domain.repositories.city_repository import CityRepository
from app.modules.directory.domain.repositories.lounge_repository import LoungeRepository
from app.modules.directory.presentation.dependencies import (
    get_city_repository,
    get_lounge_repository,
)
from app.modules.user_management.domain.repositories.activity_log_repository import (
    ActivityLogRepository,
)
from app.modules.user_management.domain.repositories.profile_repository import ProfileRepository
from app.modules.user_management.presentation.dependencies import (
    get_activity_log_repository,
    get_profile_repository,
)


async def get_admin_stats_service(
    lounges: LoungeRepository = Depends(get_lounge_repository),
    cities: CityRepository = Depends(get_city_repository),
    profiles: ProfileRepository = Depends(get_profile_repository),
    activity_log: ActivityLogRepository = Depends(get_activity_log_repository),
    billing: BillingService = Depends(get_billing_service),
) -> AdminStatsService:
    return AdminStatsService(lounges, cities, profiles, activity_log, billing)
