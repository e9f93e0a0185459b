# 📄 File: app/modules/user_management/presentation/api/schemas/profile_schemas.py
# 🧭 Purpose (Layman Explanation):
# This file defines the shape of profile data in the API: what a signed-in person sees about
# themselves and what admins see and change about other users.
#
# 🧪 Purpose (Technical Summary):
# Pydantic profile schemas for the self-service profile endpoint and the admin user list/update
# endpoints.
#
# 🔗 Dependencies:
# - pydantic for schema validation and serialization
# - user_management domain models
#
# 🔄 Connected Modules / Calls From:
# - app.modules.user_management.presentation.api.v1.profiles
# - app.modules.user_management.presentation.api.v1.users

"""
Profile API Schemas

Request Schemas:
- UserUpdateRequest: Admin change of name and role

Response Schemas:
- ProfileResponse: Profile information
- UserListItemResponse: Profile with owned lounge count
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from app.modules.user_management.domain.models.profile import ProfileRole, ProfileWithLoungeCount


class ProfileResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    email: Optional[str] = None
    full_name: Optional[str] = None
    phone: Optional[str] = None
    avatar_url: Optional[str] = None
    role: ProfileRole
    onboarding_completed: bool
    created_at: datetime
    updated_at: datetime


class UserListItemResponse(ProfileResponse):
    lounge_count: int = 0

    @classmethod
    def from_domain(cls, item: ProfileWithLoungeCount) -> "UserListItemResponse":
        return cls(**item.profile.model_dump(), lounge_count=item.lounge_count)


class UserUpdateRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    full_name: Optional[str] = Field(None, min_length=1, max_length=200)
    role: Optional[ProfileRole] = None
