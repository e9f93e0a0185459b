# 📄 File: app/modules/user_management/domain/models/activity_log.py
# 🧭 Purpose (Layman Explanation):
# A diary entry that records who did what (approved a lounge, finished onboarding, edited a city).
# 🧪 Purpose (Technical Summary):
# Append-only audit record domain model backing the admin activity feed.
# 🔗 Dependencies:
# pydantic, datetime, typing, uuid
# 🔄 Connected Modules / Calls From:
# activity_log_repository.py, onboarding submission service, directory/billing admin services

import uuid
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field


class ActivityAction:
    """Action names written to the audit trail"""
    ONBOARDING_COMPLETED = "onboarding.completed"
    LOUNGE_CREATED = "lounge.created"
    LOUNGE_UPDATED = "lounge.updated"
    LOUNGE_DELETED = "lounge.deleted"
    LOUNGE_APPROVED = "lounge.approved"
    LOUNGE_REJECTED = "lounge.rejected"
    CITY_CREATED = "city.created"
    CITY_UPDATED = "city.updated"
    CITY_DELETED = "city.deleted"
    PLAN_CREATED = "plan.created"
    PLAN_UPDATED = "plan.updated"
    PLAN_DELETED = "plan.deleted"
    PROFILE_UPDATED = "profile.updated"


class ActivityLog(BaseModel):
    """Single audit trail entry."""

    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    user_id: Optional[str] = None
    action: str
    entity_type: Optional[str] = None
    entity_id: Optional[str] = None
    metadata: Dict[str, Any] = Field(default_factory=dict)
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
