# 📄 File: app/modules/onboarding/domain/services/business_persistence.py
# 🧭 Purpose (Layman Explanation):
# Decides what gets saved for the owner's business at the end of onboarding. Lounges (fixed or
# mobile) become a lounge listing waiting for admin approval; other kinds of business are
# accepted but there is nowhere to store them yet.
#
# 🧪 Purpose (Technical Summary):
# Per-variant persistence strategies keyed by BusinessType. LoungePersistence inserts a pending
# Lounge row (resolving city_id by case-insensitive city name); NoBusinessPersistence records
# nothing. Strategies raise the repository's errors unchanged; the submission service maps them.
#
# 🔗 Dependencies:
# Lounge/City repositories, onboarding state model
#
# 🔄 Connected Modules / Calls From:
# Submission service

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import List, Optional

from app.modules.directory.domain.models.lounge import Lounge, LoungeStatus, LoungeType
from app.modules.directory.domain.repositories.city_repository import CityRepository
from app.modules.directory.domain.repositories.lounge_repository import LoungeRepository
from app.modules.onboarding.domain.models.onboarding_state import BusinessType, OnboardingData
from app.shared.utils.logging import get_logger

logger = get_logger(__name__)


@dataclass
class ResolvedMedia:
    """Public URLs after uploads ran, with prior values filled in for failed slots."""
    avatar_url: Optional[str] = None
    cover_image_url: Optional[str] = None
    images: List[str] = field(default_factory=list)


def _blank_to_none(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.strip()
    return value or None


class BusinessPersistence(ABC):
    """Persistence path for one business type."""

    creates_lounge: bool = False

    @abstractmethod
    async def persist(
        self,
        owner_id: str,
        data: OnboardingData,
        media: ResolvedMedia
    ) -> Optional[Lounge]:
        pass


class LoungePersistence(BusinessPersistence):
    """Inserts a pending lounge listing owned by the onboarding user."""

    creates_lounge = True

    def __init__(self, lounges: LoungeRepository, cities: Optional[CityRepository] = None):
        self.lounges = lounges
        self.cities = cities

    async def persist(
        self,
        owner_id: str,
        data: OnboardingData,
        media: ResolvedMedia
    ) -> Optional[Lounge]:
        lounge = Lounge(
            owner_id=owner_id,
            name=data.business_name.strip(),
            city_id=await self._resolve_city_id(data.city),
            address=_blank_to_none(data.address),
            phone=_blank_to_none(data.phone),
            website=_blank_to_none(data.website),
            description=_blank_to_none(data.description),
            lounge_type=LoungeType.LOUNGE,
            images=list(media.images),
            cover_image=media.cover_image_url,
            instagram=_blank_to_none(data.instagram),
            facebook=_blank_to_none(data.facebook),
            twitter=_blank_to_none(data.twitter),
            tiktok=_blank_to_none(data.tiktok),
            wants_website=data.wants_website,
            status=LoungeStatus.PENDING,
        )
        return await self.lounges.create(lounge)

    async def _resolve_city_id(self, city_name: str) -> Optional[str]:
        if self.cities is None or not city_name.strip():
            return None
        city = await self.cities.find_by_name(city_name)
        if city is None:
            logger.debug(f"No city matches '{city_name}'; lounge saved without city")
            return None
        return city.id


class NoBusinessPersistence(BusinessPersistence):
    """Business types with no table of their own; nothing is written."""

    def __init__(self, business_type: BusinessType):
        self.business_type = business_type

    async def persist(
        self,
        owner_id: str,
        data: OnboardingData,
        media: ResolvedMedia
    ) -> Optional[Lounge]:
        logger.info(
            f"No persistence path for business type {self.business_type.value}; "
            f"only the profile of {owner_id} was updated"
        )
        return None


def persistence_for(
    business_type: BusinessType,
    lounges: LoungeRepository,
    cities: Optional[CityRepository] = None
) -> BusinessPersistence:
    if business_type in (BusinessType.LOUNGE, BusinessType.MOBILE_LOUNGE):
        return LoungePersistence(lounges, cities)
    return NoBusinessPersistence(business_type)
