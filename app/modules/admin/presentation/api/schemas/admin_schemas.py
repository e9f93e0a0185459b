# 📄 File: app/modules/admin/presentation/api/schemas/admin_schemas.py
# 🧭 Purpose (Layman Explanation):
# The shape of the admin dashboard numbers and activity entries sent to the browser.
#
# 🧪 Purpose (Technical Summary):
# Pydantic response schemas for admin statistics and the activity feed.
#
# 🔗 Dependencies:
# - pydantic, app.shared.utils.formatters
#
# 🔄 Connected Modules / Calls From:
# - app.modules.admin.presentation.api.v1.admin

from dataclasses import asdict
from datetime import datetime
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field

from app.modules.admin.domain.services.admin_stats_service import AdminStats
from app.shared.utils.formatters import format_price


class AdminStatsResponse(BaseModel):
    total_lounges: int
    pending_lounges: int
    approved_lounges: int
    total_users: int
    active_subscriptions: int
    revenue_last_30_days: int
    revenue_last_30_days_display: str
    lounges_by_type: Dict[str, int]
    lounges_by_city: Dict[str, int]

    @classmethod
    def from_domain(cls, stats: AdminStats) -> "AdminStatsResponse":
        return cls(
            **asdict(stats),
            revenue_last_30_days_display=format_price(stats.revenue_last_30_days),
        )


class ActivityLogResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    user_id: Optional[str] = None
    action: str
    entity_type: Optional[str] = None
    entity_id: Optional[str] = None
    metadata: Dict[str, Any] = Field(default_factory=dict)
    created_at: datetime
