# 📄 File: app/modules/directory/presentation/api/schemas/directory_schemas.py
# 🧭 Purpose (Layman Explanation):
# This file defines the shape of city and lounge data going in and out of the API: what admins
# send to create a city, what owners may change on their lounge, and what visitors see.
#
# 🧪 Purpose (Technical Summary):
# Pydantic request/response schemas for public directory, owner dashboard and admin endpoints.
# Responses are built from domain entities with ``from_attributes``.
#
# 🔗 Dependencies:
# - pydantic, directory domain enumerations
#
# 🔄 Connected Modules / Calls From:
# - app.modules.directory.presentation.api.v1.*

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.modules.directory.domain.models.lounge import (
    Amenity,
    LoungeStatus,
    LoungeType,
    SubscriptionStatus,
)
from app.shared.utils.validators import SLUG_PATTERN, validate_website


# =============================================================================
# CITIES
# =============================================================================

class CityResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    slug: str
    description: Optional[str] = None
    hero_image: Optional[str] = None
    is_featured: bool
    created_at: datetime
    updated_at: datetime


class CityCreateRequest(BaseModel):
    """Slug is derived from the name when omitted."""
    name: str = Field(..., min_length=1, max_length=120)
    slug: Optional[str] = Field(None, max_length=80, pattern=SLUG_PATTERN.pattern)
    description: Optional[str] = None
    hero_image: Optional[str] = Field(None, max_length=1000)
    is_featured: bool = False


class CityUpdateRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    name: Optional[str] = Field(None, min_length=1, max_length=120)
    slug: Optional[str] = Field(None, max_length=80, pattern=SLUG_PATTERN.pattern)
    description: Optional[str] = None
    hero_image: Optional[str] = Field(None, max_length=1000)
    is_featured: Optional[bool] = None


# =============================================================================
# LOUNGES
# =============================================================================

def _check_website(value: Optional[str]) -> Optional[str]:
    result = validate_website(value)
    if not result.is_valid:
        raise ValueError("; ".join(result.errors))
    return value


class LoungeResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    city_id: Optional[str] = None
    owner_id: Optional[str] = None
    address: Optional[str] = None
    phone: Optional[str] = None
    website: Optional[str] = None
    description: Optional[str] = None
    lounge_type: LoungeType
    amenities: List[Amenity]
    images: List[str]
    cover_image: Optional[str] = None
    instagram: Optional[str] = None
    facebook: Optional[str] = None
    twitter: Optional[str] = None
    tiktok: Optional[str] = None
    wants_website: bool
    is_featured: bool
    is_claimed: bool
    is_verified: bool
    status: LoungeStatus
    subscription_plan_id: Optional[str] = None
    subscription_status: SubscriptionStatus
    subscription_ends_at: Optional[datetime] = None
    created_at: datetime
    updated_at: datetime


class CityPageResponse(BaseModel):
    city: CityResponse
    lounges: List[LoungeResponse]
    total: int


class OwnerLoungeStatsResponse(BaseModel):
    total: int
    approved: int
    pending: int
    active_subscriptions: int


class OwnerLoungeUpdateRequest(BaseModel):
    """Fields an owner may change on their own lounge."""

    model_config = ConfigDict(extra="forbid")

    name: Optional[str] = Field(None, min_length=1, max_length=200)
    address: Optional[str] = Field(None, max_length=300)
    phone: Optional[str] = Field(None, max_length=50)
    website: Optional[str] = Field(None, max_length=500)
    description: Optional[str] = None
    lounge_type: Optional[LoungeType] = None
    amenities: Optional[List[Amenity]] = None

    @field_validator("website")
    @classmethod
    def check_website(cls, value: Optional[str]) -> Optional[str]:
        return _check_website(value)


class AdminLoungeCreateRequest(BaseModel):
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
    is_featured: bool = False
    is_claimed: bool = False
    is_verified: bool = False
    status: LoungeStatus = LoungeStatus.PENDING

    @field_validator("website")
    @classmethod
    def check_website(cls, value: Optional[str]) -> Optional[str]:
        return _check_website(value)


class AdminLoungeUpdateRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    name: Optional[str] = Field(None, min_length=1, max_length=200)
    city_id: Optional[str] = None
    address: Optional[str] = None
    phone: Optional[str] = None
    website: Optional[str] = None
    description: Optional[str] = None
    lounge_type: Optional[LoungeType] = None
    amenities: Optional[List[Amenity]] = None
    images: Optional[List[str]] = None
    cover_image: Optional[str] = None
    is_featured: Optional[bool] = None
    is_claimed: Optional[bool] = None
    is_verified: Optional[bool] = None

    @field_validator("website")
    @classmethod
    def check_website(cls, value: Optional[str]) -> Optional[str]:
        return _check_website(value)


class LoungeStatusRequest(BaseModel):
    status: LoungeStatus
