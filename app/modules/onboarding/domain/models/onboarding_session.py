# 📄 File: app/modules/onboarding/domain/models/onboarding_session.py
# 🧭 Purpose (Layman Explanation):
# One owner's in-progress onboarding: where they are in the wizard, what they typed, which
# pictures they picked, and whether they already pressed "finish" and are waiting.
# 🧪 Purpose (Technical Summary):
# Server-held onboarding session aggregate: owner binding, wizard, upload staging,
# in-flight submission flag and activity timestamps used for TTL expiry.
# 🔗 Dependencies:
# dataclasses, datetime, uuid, onboarding domain models
# 🔄 Connected Modules / Calls From:
# Session registry, submission service, onboarding API endpoints

from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Optional
from uuid import uuid4

from .onboarding_state import OnboardingWizard
from .staged_upload import UploadStaging


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(eq=False)
class OnboardingSession:
    owner_id: str
    wizard: OnboardingWizard = field(default_factory=OnboardingWizard)
    staging: UploadStaging = field(default_factory=UploadStaging)
    id: str = field(default_factory=lambda: str(uuid4()))
    is_submitting: bool = False
    completed: bool = False
    created_at: datetime = field(default_factory=_utcnow)
    last_seen_at: datetime = field(default_factory=_utcnow)

    def touch(self, now: Optional[datetime] = None) -> None:
        self.last_seen_at = now or _utcnow()

    def is_expired(self, ttl: timedelta, now: Optional[datetime] = None) -> bool:
        # A running submission keeps the session alive
        if self.is_submitting:
            return False
        return (now or _utcnow()) - self.last_seen_at > ttl

    def discard(self) -> None:
        self.staging.release_all()
