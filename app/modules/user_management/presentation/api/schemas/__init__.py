# 📄 File: app/modules/user_management/presentation/api/schemas/__init__.py
# 🧭 Purpose (Layman Explanation):
# Gathers the profile data formats used by the user management API.
#
# 🧪 Purpose (Technical Summary):
# API schemas package initialization re-exporting profile request/response models.
#
# 🔗 Dependencies:
# - profile_schemas
#
# 🔄 Connected Modules / Calls From:
# - app.modules.user_management.presentation.api.v1

from app.modules.user_management.presentation.api.schemas.profile_schemas import (
    ProfileResponse,
    UserListItemResponse,
    UserUpdateRequest,
)

__all__ = [
    "ProfileResponse",
    "UserListItemResponse",
    "UserUpdateRequest",
]
