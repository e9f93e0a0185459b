# 📄 File: app/modules/onboarding/domain/services/submission_service.py
# 🧭 Purpose (Layman Explanation):
# What happens when an owner presses "finish" on the onboarding wizard: the picked photos are
# uploaded, the owner's profile is saved and marked as onboarded, the lounge listing is created
# for admin review, and the owner is sent to the dashboard (or the billing page if they chose a
# website plan). If saving the listing fails, the profile is put back the way it was.
#
# 🧪 Purpose (Technical Summary):
# Onboarding submission sequencer. Guards against re-entrant submits with the session's
# in-flight flag, resolves the caller through the IdentityGateway, uploads staged files
# concurrently (failures are non-fatal and fall back to prior values), updates the profile,
# persists the business through its per-variant strategy, compensates the profile write when
# the business write fails, records audit entries and computes the next route.
#
# 🔗 Dependencies:
# - IdentityGateway, ObjectStore, Profile/Lounge/City repositories, ActivityRecorder
# - asyncio (concurrent uploads), app.shared.config.settings (onboarding toggles)
#
# 🔄 Connected Modules / Calls From:
# - Onboarding submit endpoint

import asyncio
from dataclasses import asdict, dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Awaitable, Callable, List, Optional, Tuple

from pydantic import ValidationError as PydanticValidationError

from app.modules.directory.domain.models.lounge import Lounge
from app.modules.directory.domain.repositories.city_repository import CityRepository
from app.modules.directory.domain.repositories.lounge_repository import LoungeRepository
from app.modules.onboarding.domain.models.onboarding_session import OnboardingSession
from app.modules.onboarding.domain.models.onboarding_state import (
    OnboardingData,
    OnboardingStep,
    can_advance,
)
from app.modules.onboarding.domain.models.staged_upload import StagedFile, UploadSlot
from app.modules.onboarding.domain.services.business_persistence import (
    ResolvedMedia,
    persistence_for,
)
from app.modules.user_management.domain.models.activity_log import ActivityAction
from app.modules.user_management.domain.models.profile import Profile
from app.modules.user_management.domain.repositories.profile_repository import ProfileRepository
from app.modules.user_management.domain.services.activity_recorder import ActivityRecorder
from app.modules.user_management.domain.services.identity_gateway import IdentityGateway
from app.shared.config.settings import get_settings
from app.shared.core.exceptions import (
    AuthenticationError,
    AuthorizationError,
    CigarMapException,
    OnboardingErrorKind,
    OnboardingPersistenceError,
    ValidationError,
)
from app.shared.infrastructure.storage.supabase_storage import (
    ObjectStore,
    bucket_for_category,
    build_storage_path,
)
from app.shared.utils.logging import get_logger

logger = get_logger(__name__)

DASHBOARD_ROUTE = "/dashboard"
BILLING_UPGRADE_ROUTE = "/dashboard/billing?upgrade={plan}"

_SLOT_CATEGORIES = {
    UploadSlot.AVATAR: "avatars",
    UploadSlot.COVER: "covers",
    UploadSlot.GALLERY: "images",
}

# Profile fields written by a completed onboarding
_ONBOARDING_PROFILE_FIELDS = ("full_name", "phone", "avatar_url", "onboarding_completed")


class SubmissionOutcome(str, Enum):
    COMPLETED = "completed"
    IGNORED = "ignored"


@dataclass
class UploadFailure:
    slot: str
    filename: str
    reason: str
    kind: str = OnboardingErrorKind.UPLOAD_FAILED.value


@dataclass
class SubmissionResult:
    outcome: SubmissionOutcome
    redirect_to: Optional[str] = None
    profile: Optional[Profile] = None
    lounge: Optional[Lounge] = None
    upload_failures: List[UploadFailure] = field(default_factory=list)
    kind: Optional[OnboardingErrorKind] = None


def next_route(data: OnboardingData) -> str:
    """Billing page with the chosen plan when a website was requested, else the dashboard."""
    if data.wants_website and data.selected_plan is not None:
        return BILLING_UPGRADE_ROUTE.format(plan=data.selected_plan.value)
    return DASHBOARD_ROUTE


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class OnboardingSubmissionService:
    """
    Runs the final onboarding submission for one session.

    Order: uploads (all awaited), profile update, business persistence, commit.
    Upload failures degrade to prior values; a failed profile, business or commit
    write aborts with OnboardingPersistenceError and leaves the session on its last
    step with its staged files intact, so a retry re-runs every upload. Staged files
    are released only once ``commit`` (the request transaction) has succeeded.
    """

    def __init__(
        self,
        identity: IdentityGateway,
        object_store: ObjectStore,
        profiles: ProfileRepository,
        lounges: LoungeRepository,
        cities: Optional[CityRepository] = None,
        activity: Optional[ActivityRecorder] = None,
        parallel_uploads: Optional[bool] = None,
        compensate_on_failure: Optional[bool] = None,
        commit: Optional[Callable[[], Awaitable[None]]] = None,
        clock: Callable[[], datetime] = _utcnow
    ):
        settings = get_settings()
        self.identity = identity
        self.object_store = object_store
        self.profiles = profiles
        self.lounges = lounges
        self.cities = cities
        self.activity = activity or ActivityRecorder(None)
        self.parallel_uploads = (
            settings.ONBOARDING_PARALLEL_UPLOADS if parallel_uploads is None else parallel_uploads
        )
        self.compensate_on_failure = (
            settings.ONBOARDING_COMPENSATE_ON_FAILURE if compensate_on_failure is None
            else compensate_on_failure
        )
        self.commit = commit
        self.clock = clock
        self._last_timestamp_ms = 0

    async def submit(self, session: OnboardingSession) -> SubmissionResult:
        """
        Submit the session's wizard data.

        Returns:
            SubmissionResult with outcome ``completed``, or ``ignored`` when a
            submission for this session is already running

        Raises:
            AuthenticationError: If the caller is not signed in
            AuthorizationError: If the caller does not own the session
            ValidationError: If the wizard is not on its last step or a required gate fails
            OnboardingPersistenceError: If the profile or business write fails
        """
        if session.is_submitting:
            logger.info(f"Ignoring duplicate submit for onboarding session {session.id}")
            return SubmissionResult(
                outcome=SubmissionOutcome.IGNORED,
                kind=OnboardingErrorKind.DOUBLE_SUBMIT,
            )

        # Set before the first await so an interleaved submit sees it
        session.is_submitting = True
        try:
            return await self._run(session)
        finally:
            session.is_submitting = False

    # =========================================================================
    # SEQUENCE
    # =========================================================================

    async def _run(self, session: OnboardingSession) -> SubmissionResult:
        user = await self.identity.current_user()
        if user is None:
            raise AuthenticationError("Sign in to finish onboarding")
        if user.id != session.owner_id:
            raise AuthorizationError(
                "This onboarding session belongs to another user",
                resource_type="onboarding_session",
                resource_id=session.id,
                user_id=user.id
            )

        self._check_ready(session)
        wizard = session.wizard
        data = wizard.data

        media, failures = await self._upload_staged(user.id, session)
        failure_details = [asdict(failure) for failure in failures]

        snapshot = await self._load_snapshot(user.id, failure_details)
        profile = await self._update_profile(user.id, data, media, failure_details)

        business_type = data.parsed_business_type
        strategy = persistence_for(business_type, self.lounges, self.cities)
        try:
            lounge = await strategy.persist(user.id, data, media)
        except (CigarMapException, PydanticValidationError) as e:
            logger.error(f"Business persistence failed during onboarding of {user.id}: {e}")
            compensated = await self._compensate(snapshot)
            raise OnboardingPersistenceError(
                stage="business",
                upload_failures=failure_details,
                compensated=compensated,
                profile_restored=compensated or await self._profile_unchanged(snapshot)
            ) from e

        await self._record_activity(user.id, data, lounge)
        await self._commit(user.id, failure_details)

        session.staging.release_all()
        session.completed = True

        redirect_to = next_route(data)
        logger.log_business_event(
            event_type="onboarding_completed",
            description=f"Onboarding completed for {user.id}",
            entity_id=user.id,
            entity_type="profile",
            extra={
                "business_type": business_type.value,
                "lounge_id": lounge.id if lounge else None,
                "upload_failures": len(failures),
            },
        )
        return SubmissionResult(
            outcome=SubmissionOutcome.COMPLETED,
            redirect_to=redirect_to,
            profile=profile,
            lounge=lounge,
            upload_failures=failures,
        )

    def _check_ready(self, session: OnboardingSession) -> None:
        wizard = session.wizard
        if not wizard.is_final_step:
            raise ValidationError(
                "Finish the remaining steps before submitting",
                field="current_step",
                value=wizard.current_step,
                constraint="final_step",
                details={"kind": OnboardingErrorKind.VALIDATION_BLOCKED.value}
            )

        for step in (OnboardingStep.PROFILE, OnboardingStep.BUSINESS_INFO):
            if not can_advance(step, wizard.data):
                raise ValidationError(
                    f"Complete the '{step.title}' step before submitting",
                    field="step",
                    value=int(step),
                    constraint="step_gate",
                    details={"kind": OnboardingErrorKind.VALIDATION_BLOCKED.value}
                )

    async def _load_snapshot(self, user_id: str, failure_details) -> Profile:
        try:
            snapshot = await self.profiles.get_by_id(user_id)
        except CigarMapException as e:
            raise OnboardingPersistenceError(stage="profile", upload_failures=failure_details) from e

        if snapshot is None:
            logger.error(f"No profile row for user {user_id}; cannot complete onboarding")
            raise OnboardingPersistenceError(stage="profile", upload_failures=failure_details)
        return snapshot

    async def _update_profile(
        self,
        user_id: str,
        data: OnboardingData,
        media: ResolvedMedia,
        failure_details
    ) -> Profile:
        try:
            return await self.profiles.complete_onboarding(
                user_id,
                full_name=data.full_name.strip(),
                phone=data.phone.strip() or None,
                avatar_url=media.avatar_url,
                completed_at=self.clock(),
            )
        except CigarMapException as e:
            logger.error(f"Profile update failed during onboarding of {user_id}: {e.message}")
            raise OnboardingPersistenceError(stage="profile", upload_failures=failure_details) from e

    async def _compensate(self, snapshot: Profile) -> bool:
        """Put the profile's onboarding fields back to their pre-submission values."""
        if not self.compensate_on_failure:
            return False
        try:
            await self.profiles.restore_onboarding_state(snapshot)
        except CigarMapException as e:
            logger.error(f"Could not restore profile {snapshot.id} after failed onboarding: {e.message}")
            return False

        logger.warning(f"Restored profile {snapshot.id} after failed business persistence")
        return True

    async def _profile_unchanged(self, snapshot: Profile) -> Optional[bool]:
        """
        Whether the stored profile still matches the pre-submission snapshot.

        A repository that rolls back the transaction on failure has already undone
        the profile update, even when compensation is off. None when unknown.
        """
        try:
            current = await self.profiles.get_by_id(snapshot.id)
        except CigarMapException as e:
            logger.error(f"Could not re-read profile {snapshot.id} after failed onboarding: {e.message}")
            return None

        if current is None:
            return None
        return all(
            getattr(current, name) == getattr(snapshot, name)
            for name in _ONBOARDING_PROFILE_FIELDS
        )

    async def _commit(self, user_id: str, failure_details) -> None:
        if self.commit is None:
            return
        try:
            await self.commit()
        except CigarMapException as e:
            # The transaction is gone, profile update included
            logger.error(f"Commit failed during onboarding of {user_id}: {e.message}")
            raise OnboardingPersistenceError(
                stage="commit",
                upload_failures=failure_details,
                profile_restored=True
            ) from e

    async def _record_activity(self, user_id: str, data: OnboardingData, lounge: Optional[Lounge]) -> None:
        await self.activity.record(
            ActivityAction.ONBOARDING_COMPLETED,
            user_id,
            entity_type="profile",
            entity_id=user_id,
            metadata={"business_type": data.business_type, "business_name": data.business_name.strip()},
        )
        if lounge is not None:
            await self.activity.record(
                ActivityAction.LOUNGE_CREATED,
                user_id,
                entity_type="lounge",
                entity_id=lounge.id,
                metadata={"name": lounge.name, "source": "onboarding"},
            )

    # =========================================================================
    # UPLOADS
    # =========================================================================

    async def _upload_staged(
        self,
        user_id: str,
        session: OnboardingSession
    ) -> Tuple[ResolvedMedia, List[UploadFailure]]:
        staging = session.staging
        data = session.wizard.data

        jobs: List[Tuple[UploadSlot, StagedFile]] = []
        if staging.avatar is not None:
            jobs.append((UploadSlot.AVATAR, staging.avatar))
        if staging.cover is not None:
            jobs.append((UploadSlot.COVER, staging.cover))
        jobs.extend((UploadSlot.GALLERY, staged) for staged in staging.gallery)

        if self.parallel_uploads:
            results = await asyncio.gather(*(self._upload_one(user_id, slot, staged) for slot, staged in jobs))
        else:
            results = [await self._upload_one(user_id, slot, staged) for slot, staged in jobs]

        media = ResolvedMedia(avatar_url=data.avatar_url, cover_image_url=data.cover_image_url)
        failures: List[UploadFailure] = []
        for (slot, staged), (url, failure) in zip(jobs, results):
            if failure is not None:
                failures.append(failure)
                continue
            if slot == UploadSlot.AVATAR:
                media.avatar_url = url
            elif slot == UploadSlot.COVER:
                media.cover_image_url = url
            else:
                media.images.append(url)

        return media, failures

    async def _upload_one(
        self,
        user_id: str,
        slot: UploadSlot,
        staged: StagedFile
    ) -> Tuple[Optional[str], Optional[UploadFailure]]:
        category = _SLOT_CATEGORIES[slot]
        path = build_storage_path(category, user_id, staged.filename, self._next_timestamp_ms())
        try:
            url = await self.object_store.upload(
                bucket_for_category(category), path, staged.data, staged.content_type
            )
            return url, None
        except Exception as e:
            # Any storage failure degrades to the slot's fallback value
            reason = e.message if isinstance(e, CigarMapException) else str(e)
            logger.warning(
                f"Upload failed for {slot.value} '{staged.filename}': {reason}",
                extra={'slot': slot.value, 'storage_path': path}
            )
            return None, UploadFailure(slot=slot.value, filename=staged.filename, reason=reason)

    def _next_timestamp_ms(self) -> int:
        """Epoch milliseconds, strictly increasing so concurrent uploads never share a path."""
        now_ms = int(self.clock().timestamp() * 1000)
        self._last_timestamp_ms = max(now_ms, self._last_timestamp_ms + 1)
        return self._last_timestamp_ms
