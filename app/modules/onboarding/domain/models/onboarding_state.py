# 📄 File: app/modules/onboarding/domain/models/onboarding_state.py
# 🧭 Purpose (Layman Explanation):
# The five-page sign-up wizard for lounge owners: who you are, your business, your social links,
# your photos and whether you want a website. It remembers everything typed on every page and
# only lets you move forward once the required boxes on the current page are filled in.
#
# 🧪 Purpose (Technical Summary):
# Onboarding state aggregate (all fields of all steps plus current_step), the per-step gate
# function, and the wizard transitions: next (gated), back (floored at 1) and the unconditional
# jump to the website-plan step. Business types and website plans are closed enumerations.
#
# 🔗 Dependencies:
# pydantic, enum, typing
#
# 🔄 Connected Modules / Calls From:
# Session registry, submission service, onboarding API endpoints

from enum import Enum, IntEnum
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field

from app.modules.user_management.domain.models.profile import Profile


class OnboardingStep(IntEnum):
    PROFILE = 1
    BUSINESS_INFO = 2
    SOCIAL_LINKS = 3
    IMAGES = 4
    WEBSITE_PLAN = 5

    @property
    def title(self) -> str:
        return _STEP_TITLES[self]


_STEP_TITLES = {
    OnboardingStep.PROFILE: "Your Profile",
    OnboardingStep.BUSINESS_INFO: "Business Info",
    OnboardingStep.SOCIAL_LINKS: "Social Media",
    OnboardingStep.IMAGES: "Images",
    OnboardingStep.WEBSITE_PLAN: "Website Builder",
}

FIRST_STEP = OnboardingStep.PROFILE
LAST_STEP = OnboardingStep.WEBSITE_PLAN
TOTAL_STEPS = len(OnboardingStep)


class BusinessType(str, Enum):
    LOUNGE = "lounge"
    MOBILE_LOUNGE = "mobile_lounge"
    MANUFACTURER = "manufacturer"
    ACCESSORY_COMPANY = "accessory_company"
    ORGANIZATION = "organization"

    @property
    def label(self) -> str:
        return _BUSINESS_TYPE_LABELS[self]

    @classmethod
    def parse(cls, value: Optional[str]) -> Optional["BusinessType"]:
        """The matching variant, or None for empty or unknown input."""
        if not value:
            return None
        try:
            return cls(value.strip())
        except ValueError:
            return None


_BUSINESS_TYPE_LABELS = {
    BusinessType.LOUNGE: "Cigar Lounge",
    BusinessType.MOBILE_LOUNGE: "Mobile Lounge",
    BusinessType.MANUFACTURER: "Cigar Manufacturer",
    BusinessType.ACCESSORY_COMPANY: "Accessory Company",
    BusinessType.ORGANIZATION: "Cigar Organization",
}


class WebsitePlan(str, Enum):
    BASIC = "basic"
    PRO = "pro"
    PREMIUM = "premium"


class OnboardingData(BaseModel):
    """
    Every field collected by the wizard, across all steps.

    ``avatar_url`` and ``cover_image_url`` hold the previously persisted values;
    newly picked files live in the upload staging area until submission.
    ``business_type`` keeps the raw value so the step 2 gate can reject anything
    outside the five known variants.
    """

    model_config = ConfigDict(validate_assignment=True)

    # Step 1: profile
    full_name: str = ""
    phone: str = ""
    avatar_url: Optional[str] = None

    # Step 2: business
    business_type: str = ""
    business_name: str = ""
    address: str = ""
    city: str = ""
    state: str = ""
    zip_code: str = ""
    description: str = ""

    # Step 3: social and website
    website: str = ""
    instagram: str = ""
    facebook: str = ""
    twitter: str = ""
    tiktok: str = ""

    # Step 4: images
    cover_image_url: Optional[str] = None

    # Step 5: website builder
    wants_website: bool = False
    selected_plan: Optional[WebsitePlan] = None

    @property
    def parsed_business_type(self) -> Optional[BusinessType]:
        return BusinessType.parse(self.business_type)


def can_advance(step: int, data: OnboardingData) -> bool:
    """
    Whether the wizard may move forward from ``step``.

    Only steps 1 and 2 have required fields; steps 3 to 5 never block.
    """
    if step == OnboardingStep.PROFILE:
        return bool(data.full_name.strip())
    if step == OnboardingStep.BUSINESS_INFO:
        return data.parsed_business_type is not None and bool(data.business_name.strip())
    return step in (OnboardingStep.SOCIAL_LINKS, OnboardingStep.IMAGES, OnboardingStep.WEBSITE_PLAN)


class OnboardingWizard(BaseModel):
    """Wizard position plus the collected data."""

    model_config = ConfigDict(validate_assignment=True)

    data: OnboardingData = Field(default_factory=OnboardingData)
    current_step: int = Field(default=FIRST_STEP, ge=FIRST_STEP, le=LAST_STEP)

    @classmethod
    def from_profile(cls, profile: Optional[Profile]) -> "OnboardingWizard":
        """Fresh wizard at step 1, pre-filled with the caller's name and avatar when known."""
        data = OnboardingData()
        if profile is not None:
            data.full_name = profile.full_name or ""
            data.avatar_url = profile.avatar_url
        return cls(data=data)

    @property
    def step(self) -> OnboardingStep:
        return OnboardingStep(self.current_step)

    @property
    def can_proceed(self) -> bool:
        return can_advance(self.current_step, self.data)

    @property
    def is_final_step(self) -> bool:
        return self.current_step == LAST_STEP

    @property
    def progress(self) -> float:
        """Percentage shown by the progress bar."""
        return self.current_step / TOTAL_STEPS * 100

    def next(self) -> bool:
        """
        Advance one step if the current step's gate holds.

        Returns:
            True if the step changed
        """
        if not self.can_proceed or self.is_final_step:
            return False
        self.current_step += 1
        return True

    def back(self) -> bool:
        if self.current_step <= FIRST_STEP:
            return False
        self.current_step -= 1
        return True

    def skip_to_website_builder(self) -> None:
        """Jump straight to the last step; steps 2 to 4 are not gated on this path."""
        self.current_step = LAST_STEP

    def update(self, changes: Dict[str, Any]) -> None:
        """Apply a partial update; unknown keys are rejected by the caller's schema."""
        for field, value in changes.items():
            setattr(self.data, field, value)
