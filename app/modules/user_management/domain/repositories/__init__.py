# 📄 File: app/modules/user_management/domain/repositories/__init__.py
# 🧭 Purpose (Layman Explanation):
# Lists the contracts for reading and writing profiles and activity entries.
# 🧪 Purpose (Technical Summary):
# Exports the abstract repository interfaces of the user management domain.
# 🔗 Dependencies:
# profile_repository.py, activity_log_repository.py
# 🔄 Connected Modules / Calls From:
# Infrastructure implementations, domain services, FastAPI dependency providers

from .activity_log_repository import ActivityLogRepository
from .profile_repository import ProfileRepository

__all__ = ["ActivityLogRepository", "ProfileRepository"]
