# 📄 File: app/modules/user_management/domain/models/profile.py
# 🧭 Purpose (Layman Explanation):
# Defines what we know about each person using CigarMap: their name, phone, picture,
# whether they are an admin or a lounge owner, and whether they finished onboarding.
# 🧪 Purpose (Technical Summary):
# Domain model for the Profile entity keyed by the Supabase Auth user id, with role
# enumeration and the onboarding completion flag mutated by the onboarding flow.
# 🔗 Dependencies:
# pydantic, datetime, typing, enum
# 🔄 Connected Modules / Calls From:
# profile_repository.py, onboarding submission service, admin user views, auth dependencies

from datetime import datetime, timezone
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ProfileRole(str, Enum):
    """Roles a profile can hold"""
    ADMIN = "admin"
    OWNER = "owner"


class Profile(BaseModel):
    """
    Profile domain model.

    ``id`` and ``email`` are owned by the identity provider; everything else is
    edited through onboarding (name, phone, avatar, completion flag) or by admins
    (name, role). Profiles are never deleted by this service.
    """

    model_config = ConfigDict(validate_assignment=True)

    id: str
    email: Optional[str] = None
    full_name: Optional[str] = None
    phone: Optional[str] = None
    avatar_url: Optional[str] = None
    role: ProfileRole = ProfileRole.OWNER
    onboarding_completed: bool = False

    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    @field_validator('full_name', 'phone')
    @classmethod
    def blank_to_none(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return v
        v = v.strip()
        return v or None

    def is_admin(self) -> bool:
        return self.role == ProfileRole.ADMIN

    def complete_onboarding(
        self,
        full_name: str,
        phone: Optional[str],
        avatar_url: Optional[str],
        completed_at: Optional[datetime] = None
    ) -> None:
        """Apply the fields written when onboarding is submitted."""
        self.full_name = full_name
        self.phone = phone
        self.avatar_url = avatar_url
        self.onboarding_completed = True
        self.updated_at = completed_at or datetime.now(timezone.utc)


class ProfileWithLoungeCount(BaseModel):
    """Admin listing row: a profile and how many lounges it owns."""
    profile: Profile
    lounge_count: int = 0
