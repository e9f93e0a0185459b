# 📄 File: app/modules/user_management/domain/__init__.py
# 🧭 Purpose (Layman Explanation): 
# The core rules about profiles and the activity diary
# 🧪 Purpose (Technical Summary): 
# Domain layer package: Profile/ActivityLog models, repository interfaces, services and the identity gateway port
# 🔗 Dependencies: 
# pydantic, domain repositories
# 🔄 Connected Modules / Calls From: 
# Infrastructure and presentation layers, other modules' services

from .models import ActivityAction, ActivityLog, Profile, ProfileRole, ProfileWithLoungeCount
from .repositories import ActivityLogRepository, ProfileRepository

__all__ = [
    "ActivityAction",
    "ActivityLog",
    "Profile",
    "ProfileRole",
    "ProfileWithLoungeCount",
    "ActivityLogRepository",
    "ProfileRepository",
]
