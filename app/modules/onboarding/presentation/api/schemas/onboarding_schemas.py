# 📄 File: app/modules/onboarding/presentation/api/schemas/onboarding_schemas.py
# 🧭 Purpose (Layman Explanation):
# This file defines what the onboarding screens send to the server (typed-in fields) and what
# they get back (the current page, progress, previews of picked photos, where to go next).
#
# 🧪 Purpose (Technical Summary):
# Pydantic request/response schemas for the onboarding session endpoints, with builders that
# turn domain sessions and submission results into responses.
#
# 🔗 Dependencies:
# - pydantic for schema validation and serialization
# - Onboarding domain models and submission result types
#
# 🔄 Connected Modules / Calls From:
# - app.modules.onboarding.presentation.api.v1.onboarding

"""
Onboarding API Schemas

Request Schemas:
- OnboardingDataUpdate: Partial update of any wizard field

Response Schemas:
- OnboardingSessionResponse: Wizard position, data and staged previews
- SubmissionResponse: Outcome of the final submission
- OnboardingStatusResponse: Whether the caller still has to onboard
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from app.modules.onboarding.domain.models.onboarding_session import OnboardingSession
from app.modules.onboarding.domain.models.onboarding_state import (
    TOTAL_STEPS,
    BusinessType,
    OnboardingStep,
    WebsitePlan,
)
from app.modules.onboarding.domain.models.staged_upload import PREVIEW_SCHEME, StagedFile
from app.modules.onboarding.domain.services.submission_service import SubmissionResult


class OnboardingDataUpdate(BaseModel):
    """Fields the wizard may change; omitted fields keep their value."""

    model_config = ConfigDict(extra="forbid")

    full_name: Optional[str] = Field(None, max_length=200)
    phone: Optional[str] = Field(None, max_length=50)

    business_type: Optional[str] = Field(None, max_length=50)
    business_name: Optional[str] = Field(None, max_length=200)
    address: Optional[str] = Field(None, max_length=300)
    city: Optional[str] = Field(None, max_length=120)
    state: Optional[str] = Field(None, max_length=120)
    zip_code: Optional[str] = Field(None, max_length=20)
    description: Optional[str] = Field(None, max_length=5000)

    website: Optional[str] = Field(None, max_length=500)
    instagram: Optional[str] = Field(None, max_length=200)
    facebook: Optional[str] = Field(None, max_length=200)
    twitter: Optional[str] = Field(None, max_length=200)
    tiktok: Optional[str] = Field(None, max_length=200)

    wants_website: Optional[bool] = None
    selected_plan: Optional[WebsitePlan] = None

    def changes(self) -> dict:
        """Only the fields the client actually sent; an explicit null plan clears it."""
        changes = self.model_dump(exclude_unset=True)
        return {
            key: value for key, value in changes.items()
            if value is not None or key == "selected_plan"
        }


class OnboardingDataResponse(BaseModel):
    full_name: str
    phone: str
    avatar_url: Optional[str] = None
    business_type: str
    business_name: str
    address: str
    city: str
    state: str
    zip_code: str
    description: str
    website: str
    instagram: str
    facebook: str
    twitter: str
    tiktok: str
    cover_image_url: Optional[str] = None
    wants_website: bool
    selected_plan: Optional[WebsitePlan] = None


class StagedFileResponse(BaseModel):
    preview_ref: str
    preview_url: str
    filename: str
    content_type: str
    size: int


class StagedUploadsResponse(BaseModel):
    avatar: Optional[StagedFileResponse] = None
    cover: Optional[StagedFileResponse] = None
    gallery: List[StagedFileResponse] = Field(default_factory=list)


class StepInfo(BaseModel):
    number: int
    title: str


class BusinessTypeOption(BaseModel):
    id: str
    label: str


class OnboardingSessionResponse(BaseModel):
    id: str
    current_step: int
    step_title: str
    total_steps: int = TOTAL_STEPS
    progress: float
    can_proceed: bool
    is_submitting: bool
    data: OnboardingDataResponse
    uploads: StagedUploadsResponse
    steps: List[StepInfo]
    business_types: List[BusinessTypeOption]
    created_at: datetime
    last_seen_at: datetime


class UploadFailureResponse(BaseModel):
    slot: str
    filename: str
    reason: str
    kind: str


class SubmissionResponse(BaseModel):
    outcome: str
    kind: Optional[str] = None
    redirect_to: Optional[str] = None
    lounge_id: Optional[str] = None
    upload_failures: List[UploadFailureResponse] = Field(default_factory=list)


class OnboardingStatusResponse(BaseModel):
    onboarding_completed: bool
    route: str
    session_id: Optional[str] = None


# =============================================================================
# BUILDERS
# =============================================================================

def preview_url(session_id: str, staged: StagedFile) -> str:
    token = staged.preview_ref[len(PREVIEW_SCHEME):]
    return f"/api/v1/onboarding/sessions/{session_id}/files/{token}"


def _staged_response(session_id: str, staged: Optional[StagedFile]) -> Optional[StagedFileResponse]:
    if staged is None:
        return None
    return StagedFileResponse(
        preview_ref=staged.preview_ref,
        preview_url=preview_url(session_id, staged),
        filename=staged.filename,
        content_type=staged.content_type,
        size=staged.size,
    )


def session_response(session: OnboardingSession) -> OnboardingSessionResponse:
    wizard = session.wizard
    staging = session.staging
    return OnboardingSessionResponse(
        id=session.id,
        current_step=wizard.current_step,
        step_title=wizard.step.title,
        progress=wizard.progress,
        can_proceed=wizard.can_proceed,
        is_submitting=session.is_submitting,
        data=OnboardingDataResponse(**wizard.data.model_dump()),
        uploads=StagedUploadsResponse(
            avatar=_staged_response(session.id, staging.avatar),
            cover=_staged_response(session.id, staging.cover),
            gallery=[_staged_response(session.id, staged) for staged in staging.gallery],
        ),
        steps=[StepInfo(number=int(step), title=step.title) for step in OnboardingStep],
        business_types=[BusinessTypeOption(id=bt.value, label=bt.label) for bt in BusinessType],
        created_at=session.created_at,
        last_seen_at=session.last_seen_at,
    )


def submission_response(result: SubmissionResult) -> SubmissionResponse:
    return SubmissionResponse(
        outcome=result.outcome.value,
        kind=result.kind.value if result.kind else None,
        redirect_to=result.redirect_to,
        lounge_id=result.lounge.id if result.lounge else None,
        upload_failures=[
            UploadFailureResponse(
                slot=failure.slot,
                filename=failure.filename,
                reason=failure.reason,
                kind=failure.kind,
            )
            for failure in result.upload_failures
        ],
    )
