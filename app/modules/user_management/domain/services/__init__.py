# 📄 File: app/modules/user_management/domain/services/__init__.py
# 🧭 Purpose (Layman Explanation): 
# The logic for reading profiles, letting admins edit users, writing the activity diary and asking who is signed in
# 🧪 Purpose (Technical Summary): 
# Package initialization for domain services and the identity gateway port
# 🔗 Dependencies: 
# Domain models, repositories
# 🔄 Connected Modules / Calls From: 
# Presentation dependencies, onboarding/directory/billing services

from .activity_recorder import ActivityRecorder
from .identity_gateway import AuthUser, IdentityGateway
from .profile_service import OnboardingStatus, ProfileService

__all__ = [
    "ActivityRecorder",
    "AuthUser",
    "IdentityGateway",
    "OnboardingStatus",
    "ProfileService",
]
