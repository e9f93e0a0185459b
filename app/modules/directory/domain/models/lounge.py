# 📄 File: app/modules/directory/domain/models/lounge.py
# 🧭 Purpose (Layman Explanation):
# Describes a cigar lounge listing: where it is, who owns it, what it offers, its photos,
# whether admins approved it and which subscription plan it is on.
# 🧪 Purpose (Technical Summary):
# Lounge domain entity and its enumerations (type, amenity, moderation status,
# subscription status) plus the field set owners are allowed to edit.
# 🔗 Dependencies:
# pydantic, datetime, typing, uuid, enum
# 🔄 Connected Modules / Calls From:
# lounge_repository.py, listing filters, onboarding business persistence, admin and owner APIs

import uuid
from datetime import datetime, timezone
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class LoungeType(str, Enum):
    LOUNGE = "Lounge"
    BAR = "Bar"
    RETAIL = "Retail"
    PRIVATE_CLUB = "Private Club"


class Amenity(str, Enum):
    BYOB = "BYOB"
    FULL_BAR = "Full Bar"
    OUTDOOR_PATIO = "Outdoor Patio"
    LIVE_MUSIC = "Live Music"
    TVS = "TVs"


class LoungeStatus(str, Enum):
    """Moderation state; listings start pending and only admins move them."""
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class SubscriptionStatus(str, Enum):
    NONE = "none"
    ACTIVE = "active"
    CANCELED = "canceled"
    PAST_DUE = "past_due"


# Fields a lounge owner may change from the dashboard
OWNER_EDITABLE_FIELDS = (
    "name",
    "address",
    "phone",
    "website",
    "description",
    "lounge_type",
    "amenities",
)


class Lounge(BaseModel):
    """Lounge listing entity."""

    model_config = ConfigDict(validate_assignment=True)

    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    name: str = Field(..., min_length=1, max_length=200)
    city_id: Optional[str] = None
    owner_id: Optional[str] = None

    address: Optional[str] = None
    phone: Optional[str] = None
    website: Optional[str] = None
    description: Optional[str] = None

    lounge_type: LoungeType = LoungeType.LOUNGE
    amenities: List[Amenity] = Field(default_factory=list)
    images: List[str] = Field(default_factory=list)
    cover_image: Optional[str] = None

    instagram: Optional[str] = None
    facebook: Optional[str] = None
    twitter: Optional[str] = None
    tiktok: Optional[str] = None
    wants_website: bool = False

    is_featured: bool = False
    is_claimed: bool = False
    is_verified: bool = False
    status: LoungeStatus = LoungeStatus.PENDING

    subscription_plan_id: Optional[str] = None
    subscription_status: SubscriptionStatus = SubscriptionStatus.NONE
    subscription_ends_at: Optional[datetime] = None

    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    def is_owned_by(self, user_id: str) -> bool:
        return self.owner_id is not None and str(self.owner_id) == str(user_id)

    def is_public(self) -> bool:
        return self.status == LoungeStatus.APPROVED
