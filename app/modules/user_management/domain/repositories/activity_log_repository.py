# 📄 File: app/modules/user_management/domain/repositories/activity_log_repository.py
# 🧭 Purpose (Layman Explanation):
# Defines how diary entries about user and admin actions are written and read back.
# 🧪 Purpose (Technical Summary):
# Append-only repository interface for ActivityLog entries.
# 🔗 Dependencies:
# Domain models (ActivityLog), typing, abc
# 🔄 Connected Modules / Calls From:
# Onboarding submission service, directory and billing admin services, admin dashboard

from abc import ABC, abstractmethod
from typing import List

from ..models.activity_log import ActivityLog


class ActivityLogRepository(ABC):
    """Repository interface for the audit trail."""

    @abstractmethod
    async def append(self, entry: ActivityLog) -> ActivityLog:
        pass

    @abstractmethod
    async def list_recent(self, limit: int = 10) -> List[ActivityLog]:
        """Most recent entries first."""
        pass
