# 📄 File: app/modules/onboarding/domain/models/__init__.py
# 🧭 Purpose (Layman Explanation):
# Makes the onboarding wizard's building blocks available to the rest of the app.
# 🧪 Purpose (Technical Summary):
# Onboarding domain model exports.
# 🔗 Dependencies:
# onboarding_state.py, staged_upload.py
# 🔄 Connected Modules / Calls From:
# Onboarding services, session registry, API layer

from .onboarding_state import (
    LAST_STEP,
    TOTAL_STEPS,
    BusinessType,
    OnboardingData,
    OnboardingStep,
    OnboardingWizard,
    WebsitePlan,
    can_advance,
)
from .onboarding_session import OnboardingSession
from .staged_upload import StagedFile, UploadSlot, UploadStaging

__all__ = [
    "LAST_STEP",
    "TOTAL_STEPS",
    "BusinessType",
    "OnboardingData",
    "OnboardingSession",
    "OnboardingStep",
    "OnboardingWizard",
    "StagedFile",
    "UploadSlot",
    "UploadStaging",
    "WebsitePlan",
    "can_advance",
]
