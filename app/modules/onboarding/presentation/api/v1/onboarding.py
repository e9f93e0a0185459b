# 📄 File: app/modules/onboarding/presentation/api/v1/onboarding.py
# 🧭 Purpose (Layman Explanation):
# The web endpoints behind the five-page onboarding wizard: start or resume it, fill in fields,
# move between pages, pick and remove photos, preview them, and finally press "finish".
#
# 🧪 Purpose (Technical Summary):
# FastAPI onboarding endpoints over the session registry (owner-scoped), upload staging with
# validation at selection time, and the submission sequencer. Also exposes the onboarding
# status route used after sign-in.
#
# 🔗 Dependencies:
# - FastAPI router, UploadFile (python-multipart)
# - Session registry, submission service, profile service, storage validation
#
# 🔄 Connected Modules / Calls From:
# - app.api.v1.router (mounted under /onboarding)

"""
Onboarding API Endpoints

Endpoints:
- GET /status: Where the caller should go (dashboard or onboarding)
- POST /sessions: Start or resume the caller's onboarding session
- GET /sessions/{session_id}: Current wizard state
- PATCH /sessions/{session_id}: Partial field update
- POST /sessions/{session_id}/next | /back | /skip-to-website-builder: Navigation
- PUT /sessions/{session_id}/avatar | /cover: Stage a single image
- POST /sessions/{session_id}/gallery: Stage gallery images
- DELETE /sessions/{session_id}/gallery/{index}: Remove a gallery image
- GET /sessions/{session_id}/files/{token}: Preview a staged file
- POST /sessions/{session_id}/submit: Final submission
- DELETE /sessions/{session_id}: Discard the session
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, File, Response, UploadFile, status

from app.modules.onboarding.application.session_registry import OnboardingSessionRegistry
from app.modules.onboarding.domain.models.onboarding_session import OnboardingSession
from app.modules.onboarding.domain.models.staged_upload import PREVIEW_SCHEME, StagedFile
from app.modules.onboarding.domain.services.submission_service import (
    OnboardingSubmissionService,
    SubmissionOutcome,
)
from app.modules.onboarding.presentation.api.schemas.onboarding_schemas import (
    OnboardingDataUpdate,
    OnboardingSessionResponse,
    OnboardingStatusResponse,
    SubmissionResponse,
    session_response,
    submission_response,
)
from app.modules.onboarding.presentation.dependencies import get_registry, get_submission_service
from app.modules.user_management.domain.repositories.profile_repository import ProfileRepository
from app.modules.user_management.domain.services.profile_service import ProfileService
from app.modules.user_management.presentation.dependencies import (
    get_profile_repository,
    get_profile_service,
)
from app.shared.config.settings import get_settings
from app.shared.core.dependencies import CurrentUser, get_current_user
from app.shared.core.exceptions import (
    BusinessRuleViolationError,
    NotFoundError,
    ValidationError,
)
from app.shared.infrastructure.storage.supabase_storage import validate_image_file

logger = logging.getLogger(__name__)

# Create router
onboarding_router = APIRouter()


async def _stage(upload: UploadFile) -> StagedFile:
    """Read and validate an uploaded file; nothing is sent to storage yet."""
    data = await upload.read()
    filename = upload.filename or "upload"
    content_type = upload.content_type or "application/octet-stream"
    validate_image_file(data, content_type, filename)
    return StagedFile(filename=filename, content_type=content_type, data=data)


def _owned_session(
    session_id: str,
    current_user: CurrentUser,
    registry: OnboardingSessionRegistry
) -> OnboardingSession:
    return registry.get(session_id, current_user.user_id)


def _mutable_session(
    session_id: str,
    current_user: CurrentUser,
    registry: OnboardingSessionRegistry
) -> OnboardingSession:
    """Owned session that is not being submitted; the submission reads its data and files."""
    session = _owned_session(session_id, current_user, registry)
    if session.is_submitting:
        raise BusinessRuleViolationError(
            "Onboarding is being submitted; wait for it to finish",
            rule="submission_in_progress"
        )
    return session


# =========================================================================
# STATUS AND SESSION LIFECYCLE
# =========================================================================

@onboarding_router.get(
    "/status",
    response_model=OnboardingStatusResponse,
    summary="Get onboarding status",
    description="Whether the caller finished onboarding and which route to open next",
)
async def get_onboarding_status(
    current_user: CurrentUser = Depends(get_current_user),
    profile_service: ProfileService = Depends(get_profile_service),
    registry: OnboardingSessionRegistry = Depends(get_registry),
) -> OnboardingStatusResponse:
    onboarding = await profile_service.get_onboarding_status(current_user.user_id)
    session = registry.find_for_owner(current_user.user_id)
    return OnboardingStatusResponse(
        onboarding_completed=onboarding.onboarding_completed,
        route=onboarding.route,
        session_id=session.id if session else None,
    )


@onboarding_router.post(
    "/sessions",
    response_model=OnboardingSessionResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Start or resume onboarding",
    description="Returns the caller's live onboarding session, creating one pre-filled from their profile",
)
async def start_session(
    current_user: CurrentUser = Depends(get_current_user),
    profiles: ProfileRepository = Depends(get_profile_repository),
    registry: OnboardingSessionRegistry = Depends(get_registry),
) -> OnboardingSessionResponse:
    profile = await profiles.get_by_id(current_user.user_id)
    session = registry.start(current_user.user_id, profile)
    return session_response(session)


@onboarding_router.get(
    "/sessions/{session_id}",
    response_model=OnboardingSessionResponse,
    summary="Get onboarding session",
)
async def get_session(
    session_id: str,
    current_user: CurrentUser = Depends(get_current_user),
    registry: OnboardingSessionRegistry = Depends(get_registry),
) -> OnboardingSessionResponse:
    return session_response(_owned_session(session_id, current_user, registry))


@onboarding_router.delete(
    "/sessions/{session_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Discard onboarding session",
)
async def discard_session(
    session_id: str,
    current_user: CurrentUser = Depends(get_current_user),
    registry: OnboardingSessionRegistry = Depends(get_registry),
) -> Response:
    session = _mutable_session(session_id, current_user, registry)
    registry.discard(session.id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# =========================================================================
# FIELDS AND NAVIGATION
# =========================================================================

@onboarding_router.patch(
    "/sessions/{session_id}",
    response_model=OnboardingSessionResponse,
    summary="Update onboarding fields",
    description="Partial update; only supplied fields change",
)
async def update_session(
    session_id: str,
    payload: OnboardingDataUpdate,
    current_user: CurrentUser = Depends(get_current_user),
    registry: OnboardingSessionRegistry = Depends(get_registry),
) -> OnboardingSessionResponse:
    session = _mutable_session(session_id, current_user, registry)
    session.wizard.update(payload.changes())
    return session_response(session)


@onboarding_router.post(
    "/sessions/{session_id}/next",
    response_model=OnboardingSessionResponse,
    summary="Go to the next step",
    description="No-op when the current step's required fields are missing",
)
async def next_step(
    session_id: str,
    current_user: CurrentUser = Depends(get_current_user),
    registry: OnboardingSessionRegistry = Depends(get_registry),
) -> OnboardingSessionResponse:
    session = _mutable_session(session_id, current_user, registry)
    if not session.wizard.next():
        logger.debug(f"Step {session.wizard.current_step} gate held session {session.id} in place")
    return session_response(session)


@onboarding_router.post(
    "/sessions/{session_id}/back",
    response_model=OnboardingSessionResponse,
    summary="Go to the previous step",
)
async def previous_step(
    session_id: str,
    current_user: CurrentUser = Depends(get_current_user),
    registry: OnboardingSessionRegistry = Depends(get_registry),
) -> OnboardingSessionResponse:
    session = _mutable_session(session_id, current_user, registry)
    session.wizard.back()
    return session_response(session)


@onboarding_router.post(
    "/sessions/{session_id}/skip-to-website-builder",
    response_model=OnboardingSessionResponse,
    summary="Jump to the website builder step",
)
async def skip_to_website_builder(
    session_id: str,
    current_user: CurrentUser = Depends(get_current_user),
    registry: OnboardingSessionRegistry = Depends(get_registry),
) -> OnboardingSessionResponse:
    session = _mutable_session(session_id, current_user, registry)
    session.wizard.skip_to_website_builder()
    return session_response(session)


# =========================================================================
# UPLOAD STAGING
# =========================================================================

@onboarding_router.put(
    "/sessions/{session_id}/avatar",
    response_model=OnboardingSessionResponse,
    summary="Stage avatar image",
    description="Replaces any previously staged avatar",
)
async def stage_avatar(
    session_id: str,
    file: UploadFile = File(...),
    current_user: CurrentUser = Depends(get_current_user),
    registry: OnboardingSessionRegistry = Depends(get_registry),
) -> OnboardingSessionResponse:
    session = _mutable_session(session_id, current_user, registry)
    session.staging.stage_avatar(await _stage(file))
    return session_response(session)


@onboarding_router.put(
    "/sessions/{session_id}/cover",
    response_model=OnboardingSessionResponse,
    summary="Stage cover image",
    description="Replaces any previously staged cover image",
)
async def stage_cover(
    session_id: str,
    file: UploadFile = File(...),
    current_user: CurrentUser = Depends(get_current_user),
    registry: OnboardingSessionRegistry = Depends(get_registry),
) -> OnboardingSessionResponse:
    session = _mutable_session(session_id, current_user, registry)
    session.staging.stage_cover(await _stage(file))
    return session_response(session)


@onboarding_router.post(
    "/sessions/{session_id}/gallery",
    response_model=OnboardingSessionResponse,
    summary="Stage gallery images",
    description="Appends images to the end of the gallery",
)
async def stage_gallery(
    session_id: str,
    files: List[UploadFile] = File(...),
    current_user: CurrentUser = Depends(get_current_user),
    registry: OnboardingSessionRegistry = Depends(get_registry),
) -> OnboardingSessionResponse:
    session = _mutable_session(session_id, current_user, registry)

    limit = get_settings().MAX_GALLERY_IMAGES
    if len(session.staging.gallery) + len(files) > limit:
        raise BusinessRuleViolationError(
            f"A gallery can hold at most {limit} images",
            rule="max_gallery_images"
        )

    staged = [await _stage(upload) for upload in files]
    session.staging.add_gallery_images(staged)
    return session_response(session)


@onboarding_router.delete(
    "/sessions/{session_id}/gallery/{index}",
    response_model=OnboardingSessionResponse,
    summary="Remove a gallery image",
    description="Removes the image at the given position; the others keep their order",
)
async def remove_gallery_image(
    session_id: str,
    index: int,
    current_user: CurrentUser = Depends(get_current_user),
    registry: OnboardingSessionRegistry = Depends(get_registry),
) -> OnboardingSessionResponse:
    session = _mutable_session(session_id, current_user, registry)
    try:
        session.staging.remove_gallery_image(index)
    except IndexError:
        raise ValidationError(f"No gallery image at index {index}", field="index", value=index)
    return session_response(session)


@onboarding_router.get(
    "/sessions/{session_id}/files/{token}",
    summary="Preview a staged file",
    response_class=Response,
)
async def preview_file(
    session_id: str,
    token: str,
    current_user: CurrentUser = Depends(get_current_user),
    registry: OnboardingSessionRegistry = Depends(get_registry),
) -> Response:
    session = _owned_session(session_id, current_user, registry)
    staged = session.staging.get_by_ref(f"{PREVIEW_SCHEME}{token}")
    if staged is None or staged.released:
        raise NotFoundError("Staged file not found", resource_type="staged_file", resource_id=token)
    return Response(content=staged.data, media_type=staged.content_type)


# =========================================================================
# SUBMISSION
# =========================================================================

@onboarding_router.post(
    "/sessions/{session_id}/submit",
    response_model=SubmissionResponse,
    summary="Submit onboarding",
    description=(
        "Uploads staged images, completes the profile and creates the lounge listing. "
        "Returns the route to open next."
    ),
    responses={
        200: {"description": "Submission completed or ignored as a duplicate"},
        401: {"description": "Authentication required"},
        422: {"description": "Wizard not ready for submission"},
        500: {"description": "Profile or business could not be saved; retry is possible"},
    }
)
async def submit_onboarding(
    session_id: str,
    current_user: CurrentUser = Depends(get_current_user),
    registry: OnboardingSessionRegistry = Depends(get_registry),
    service: OnboardingSubmissionService = Depends(get_submission_service),
) -> SubmissionResponse:
    session = _owned_session(session_id, current_user, registry)
    result = await service.submit(session)

    if result.outcome == SubmissionOutcome.COMPLETED:
        registry.discard(session.id)

    return submission_response(result)
