# 📄 File: app/modules/user_management/domain/models/__init__.py
# 🧭 Purpose (Layman Explanation):
# Organizes the core people-related data models: profiles and the activity diary.
# 🧪 Purpose (Technical Summary):
# Package initialization for Profile and ActivityLog domain entities and their enums.
# 🔗 Dependencies:
# Domain model classes, enums, pydantic base models
# 🔄 Connected Modules / Calls From:
# Domain services, repositories, presentation layer, onboarding module

from .activity_log import ActivityAction, ActivityLog
from .profile import Profile, ProfileRole, ProfileWithLoungeCount

__all__ = [
    "ActivityAction",
    "ActivityLog",
    "Profile",
    "ProfileRole",
    "ProfileWithLoungeCount",
]
