import asyncio
from datetime import datetime, timezone

import pytest

from app.modules.directory.domain.models.lounge import LoungeStatus
from app.modules.directory.infrastructure.database.city_repository_impl import CityRepositoryImpl
from app.modules.directory.infrastructure.database.lounge_repository_impl import LoungeRepositoryImpl
from app.modules.onboarding.domain.models.onboarding_session import OnboardingSession
from app.modules.onboarding.domain.models.onboarding_state import OnboardingStep, OnboardingWizard
from app.modules.onboarding.domain.models.staged_upload import StagedFile
from app.modules.onboarding.domain.services.submission_service import (
    OnboardingSubmissionService,
    SubmissionOutcome,
    next_route,
)
from app.modules.user_management.domain.models.activity_log import ActivityAction
from app.modules.user_management.domain.services.activity_recorder import ActivityRecorder
from app.modules.user_management.infrastructure.database.activity_log_repository_impl import (
    ActivityLogRepositoryImpl,
)
from app.modules.user_management.infrastructure.database.profile_repository_impl import (
    ProfileRepositoryImpl,
)
from app.shared.core.exceptions import (
    AuthenticationError,
    AuthorizationError,
    DatabaseError,
    OnboardingErrorKind,
    OnboardingPersistenceError,
    RepositoryError,
    ValidationError,
)

FIXED_NOW = datetime(2026, 3, 14, 12, 0, tzinfo=timezone.utc)


class FailingLoungeRepository(LoungeRepositoryImpl):
    async def create(self, lounge):
        raise RepositoryError("insert rejected", operation="create", entity="lounge")


class RollingBackLoungeRepository(LoungeRepositoryImpl):
    """Fails the insert the way a database error does, taking the transaction with it."""

    async def create(self, lounge):
        await self._session.rollback()
        raise RepositoryError("insert rejected", operation="create", entity="lounge")


class CountingProfileRepository(ProfileRepositoryImpl):
    def __init__(self, session):
        super().__init__(session)
        self.completions = []

    async def complete_onboarding(self, profile_id, **changes):
        self.completions.append({"profile_id": profile_id, **changes})
        return await super().complete_onboarding(profile_id, **changes)


class SlowObjectStore:
    """Wraps a store so uploads yield to the event loop before finishing."""

    def __init__(self, inner):
        self.inner = inner

    async def upload(self, bucket, path, data, content_type):
        await asyncio.sleep(0.01)
        return await self.inner.upload(bucket, path, data, content_type)


def ready_session(owner_id: str, business_type: str = "lounge", **changes) -> OnboardingSession:
    wizard = OnboardingWizard()
    wizard.update({
        "full_name": "Ana Torres",
        "phone": "555-0100",
        "business_type": business_type,
        "business_name": "Smoke House",
        "address": "1 Ocean Dr",
        "city": "Miami",
        **changes,
    })
    wizard.current_step = OnboardingStep.WEBSITE_PLAN
    return OnboardingSession(owner_id=owner_id, wizard=wizard)


def staged(name: str, payload: bytes = b"img") -> StagedFile:
    return StagedFile(filename=name, content_type="image/png", data=payload)


@pytest.fixture
def build_service(db_session, identity, object_store):
    def _build(lounges=None, store=None, profiles=None, **kwargs) -> OnboardingSubmissionService:
        return OnboardingSubmissionService(
            identity=identity,
            object_store=store or object_store,
            profiles=profiles or ProfileRepositoryImpl(db_session),
            lounges=lounges or LoungeRepositoryImpl(db_session),
            cities=CityRepositoryImpl(db_session),
            activity=ActivityRecorder(ActivityLogRepositoryImpl(db_session)),
            clock=lambda: FIXED_NOW,
            **kwargs
        )

    return _build


class TestNextRoute:
    """Route chosen after a completed submission"""

    def test_dashboard_without_website(self):
        """Owners who skip the website builder land on the dashboard"""
        session = ready_session("owner", wants_website=False, selected_plan="pro")
        assert next_route(session.wizard.data) == "/dashboard"

    def test_dashboard_when_plan_missing(self):
        """Wanting a website without picking a plan still goes to the dashboard"""
        session = ready_session("owner", wants_website=True)
        assert next_route(session.wizard.data) == "/dashboard"

    def test_billing_with_selected_plan(self):
        """A chosen plan sends the owner to billing with the plan preselected"""
        session = ready_session("owner", wants_website=True, selected_plan="premium")
        assert next_route(session.wizard.data) == "/dashboard/billing?upgrade=premium"


class TestSuccessfulSubmission:
    """Happy-path submissions"""

    async def test_lounge_submission_creates_pending_listing(
        self, build_service, identity, seed_profile, seed_city, db_session
    ):
        """A lounge owner gets a pending listing linked to the matching city"""
        owner_id = await seed_profile()
        city = await seed_city("Miami")
        identity.sign_in(owner_id)
        session = ready_session(owner_id, website="https://smoke.example", instagram="@smoke")

        result = await build_service().submit(session)

        assert result.outcome == SubmissionOutcome.COMPLETED
        assert result.redirect_to == "/dashboard"
        assert result.lounge is not None
        assert result.lounge.owner_id == owner_id
        assert result.lounge.status == LoungeStatus.PENDING
        assert result.lounge.city_id == city.id
        assert result.lounge.instagram == "@smoke"
        assert session.completed is True
        assert session.is_submitting is False

        profile = await ProfileRepositoryImpl(db_session).get_by_id(owner_id)
        assert profile.onboarding_completed is True
        assert profile.full_name == "Ana Torres"
        assert profile.phone == "555-0100"

    async def test_plan_selection_redirects_to_billing(self, build_service, identity, seed_profile):
        """wants_website with a plan routes to the billing upgrade page"""
        owner_id = await seed_profile()
        identity.sign_in(owner_id)
        session = ready_session(owner_id, wants_website=True, selected_plan="pro")

        result = await build_service().submit(session)

        assert result.redirect_to == "/dashboard/billing?upgrade=pro"
        assert result.lounge.wants_website is True

    async def test_non_lounge_business_writes_profile_only(
        self, build_service, identity, seed_profile, db_session
    ):
        """Manufacturers complete onboarding without a lounge row"""
        owner_id = await seed_profile()
        identity.sign_in(owner_id)
        session = ready_session(owner_id, business_type="manufacturer")

        result = await build_service().submit(session)

        assert result.outcome == SubmissionOutcome.COMPLETED
        assert result.lounge is None
        assert await LoungeRepositoryImpl(db_session).list_by_owner(owner_id) == []
        profile = await ProfileRepositoryImpl(db_session).get_by_id(owner_id)
        assert profile.onboarding_completed is True

    async def test_mobile_lounge_creates_listing(self, build_service, identity, seed_profile):
        """Mobile lounges are stored as lounge listings too"""
        owner_id = await seed_profile()
        identity.sign_in(owner_id)

        result = await build_service().submit(ready_session(owner_id, business_type="mobile_lounge"))

        assert result.lounge is not None

    async def test_unknown_city_leaves_city_unset(self, build_service, identity, seed_profile):
        """A free-text city with no directory match is not an error"""
        owner_id = await seed_profile()
        identity.sign_in(owner_id)

        result = await build_service().submit(ready_session(owner_id, city="Atlantis"))

        assert result.lounge.city_id is None

    async def test_uploads_resolve_media_and_release_staging(
        self, build_service, identity, object_store, seed_profile
    ):
        """Staged files are uploaded to their buckets and released afterwards"""
        owner_id = await seed_profile()
        identity.sign_in(owner_id)
        session = ready_session(owner_id)
        session.staging.stage_avatar(staged("me.png"))
        session.staging.stage_cover(staged("front.png"))
        session.staging.add_gallery_images([staged("a.png"), staged("b.png")])

        result = await build_service().submit(session)

        buckets = {upload["path"].split("/")[0]: upload["bucket"] for upload in object_store.uploads}
        assert buckets == {"avatars": "profiles", "covers": "businesses", "images": "businesses"}
        assert result.profile.avatar_url.endswith("-me.png")
        assert result.lounge.cover_image.endswith("-front.png")
        assert [url.rsplit("-", 1)[1] for url in result.lounge.images] == ["a.png", "b.png"]
        assert all(f.released for f in session.staging.all_files())

    async def test_storage_paths_are_unique_under_a_frozen_clock(
        self, build_service, identity, object_store, seed_profile
    ):
        """Uploads in one submission never share a timestamp"""
        owner_id = await seed_profile()
        identity.sign_in(owner_id)
        session = ready_session(owner_id)
        session.staging.add_gallery_images([staged("same.png") for _ in range(5)])

        await build_service().submit(session)

        assert len(set(object_store.paths)) == 5
        stamps = sorted(int(path.split("/")[-1].split("-")[0]) for path in object_store.paths)
        assert stamps == list(range(stamps[0], stamps[0] + 5))

    async def test_sequential_uploads_preserve_gallery_order(
        self, build_service, identity, seed_profile
    ):
        """Sequential mode keeps the same gallery ordering"""
        owner_id = await seed_profile()
        identity.sign_in(owner_id)
        session = ready_session(owner_id)
        session.staging.add_gallery_images([staged("1.png"), staged("2.png"), staged("3.png")])

        result = await build_service(parallel_uploads=False).submit(session)

        assert [url.rsplit("-", 1)[1] for url in result.lounge.images] == ["1.png", "2.png", "3.png"]

    async def test_activity_is_recorded(self, build_service, identity, seed_profile, db_session):
        """Onboarding and lounge creation both land in the audit trail"""
        owner_id = await seed_profile()
        identity.sign_in(owner_id)

        await build_service().submit(ready_session(owner_id))

        entries = await ActivityLogRepositoryImpl(db_session).list_recent(10)
        actions = {entry.action for entry in entries}
        assert ActivityAction.ONBOARDING_COMPLETED in actions
        assert ActivityAction.LOUNGE_CREATED in actions


class TestUploadFailures:
    """Storage failures degrade instead of aborting"""

    async def test_failed_avatar_keeps_previous_value(
        self, build_service, identity, object_store, seed_profile
    ):
        """The prior avatar URL survives a failed avatar upload"""
        owner_id = await seed_profile(avatar_url="https://old.example/me.png")
        identity.sign_in(owner_id)
        session = ready_session(owner_id, avatar_url="https://old.example/me.png")
        session.staging.stage_avatar(staged("broken.png"))
        object_store.fail_for.add("broken.png")

        result = await build_service().submit(session)

        assert result.outcome == SubmissionOutcome.COMPLETED
        assert result.profile.avatar_url == "https://old.example/me.png"
        assert len(result.upload_failures) == 1
        failure = result.upload_failures[0]
        assert failure.slot == "avatar"
        assert failure.filename == "broken.png"
        assert failure.kind == OnboardingErrorKind.UPLOAD_FAILED.value

    async def test_failed_cover_still_creates_lounge(
        self, build_service, identity, object_store, seed_profile
    ):
        """Profile and listing are written; the cover is left empty"""
        owner_id = await seed_profile()
        identity.sign_in(owner_id)
        session = ready_session(owner_id)
        session.staging.stage_cover(staged("front.png"))
        object_store.fail_for.add("front.png")

        result = await build_service().submit(session)

        assert result.outcome == SubmissionOutcome.COMPLETED
        assert result.profile.onboarding_completed is True
        assert result.lounge is not None
        assert result.lounge.cover_image is None
        assert [f.slot for f in result.upload_failures] == ["cover"]

    async def test_failed_gallery_image_is_skipped(
        self, build_service, identity, object_store, seed_profile
    ):
        """Only the gallery images that uploaded end up on the listing"""
        owner_id = await seed_profile()
        identity.sign_in(owner_id)
        session = ready_session(owner_id)
        session.staging.add_gallery_images([staged("ok.png"), staged("bad.png")])
        object_store.fail_for.add("bad.png")

        result = await build_service().submit(session)

        assert len(result.lounge.images) == 1
        assert result.lounge.images[0].endswith("-ok.png")


class TestSubmissionGuards:
    """Authentication, ownership and readiness checks"""

    async def test_unauthenticated_caller_is_rejected(self, build_service, object_store):
        """No signed-in user means nothing is uploaded"""
        session = ready_session("00000000-0000-4000-8000-000000000001")
        session.staging.stage_avatar(staged("me.png"))

        with pytest.raises(AuthenticationError):
            await build_service().submit(session)

        assert object_store.uploads == []
        assert session.is_submitting is False

    async def test_other_owner_is_rejected(self, build_service, identity, seed_profile):
        """A session can only be submitted by its owner"""
        owner_id = await seed_profile()
        intruder_id = await seed_profile()
        identity.sign_in(intruder_id)

        with pytest.raises(AuthorizationError):
            await build_service().submit(ready_session(owner_id))

    async def test_not_on_final_step_is_blocked(self, build_service, identity, seed_profile):
        """Submission is only offered on the website builder step"""
        owner_id = await seed_profile()
        identity.sign_in(owner_id)
        session = ready_session(owner_id)
        session.wizard.current_step = OnboardingStep.IMAGES

        with pytest.raises(ValidationError) as exc_info:
            await build_service().submit(session)

        assert exc_info.value.details["kind"] == "validation_blocked"

    async def test_skipped_business_step_is_blocked(self, build_service, identity, seed_profile):
        """Jumping to the last step does not bypass the business gate"""
        owner_id = await seed_profile()
        identity.sign_in(owner_id)
        wizard = OnboardingWizard()
        wizard.update({"full_name": "Ana"})
        wizard.skip_to_website_builder()

        with pytest.raises(ValidationError) as exc_info:
            await build_service().submit(OnboardingSession(owner_id=owner_id, wizard=wizard))

        assert exc_info.value.details["kind"] == "validation_blocked"

    async def test_missing_profile_row_aborts(self, build_service, identity):
        """A user without a profile row cannot finish onboarding"""
        user_id = "00000000-0000-4000-8000-000000000002"
        identity.sign_in(user_id)

        with pytest.raises(OnboardingPersistenceError) as exc_info:
            await build_service().submit(ready_session(user_id))

        assert exc_info.value.stage == "profile"


class TestDoubleSubmit:
    """Re-entrant submissions"""

    async def test_in_flight_submission_ignores_second_call(self, build_service, identity, seed_profile):
        """A session already submitting returns an ignored outcome"""
        owner_id = await seed_profile()
        identity.sign_in(owner_id)
        session = ready_session(owner_id)
        session.is_submitting = True

        result = await build_service().submit(session)

        assert result.outcome == SubmissionOutcome.IGNORED
        assert result.kind == OnboardingErrorKind.DOUBLE_SUBMIT
        assert session.is_submitting is True

    async def test_concurrent_submits_run_once(
        self, build_service, identity, object_store, seed_profile, db_session
    ):
        """Two interleaved submits produce exactly one listing"""
        owner_id = await seed_profile()
        identity.sign_in(owner_id)
        session = ready_session(owner_id)
        session.staging.stage_cover(staged("front.png"))
        profiles = CountingProfileRepository(db_session)
        service = build_service(store=SlowObjectStore(object_store), profiles=profiles)

        first, second = await asyncio.gather(service.submit(session), service.submit(session))

        outcomes = sorted([first.outcome, second.outcome])
        assert outcomes == [SubmissionOutcome.COMPLETED, SubmissionOutcome.IGNORED]
        assert len(await LoungeRepositoryImpl(db_session).list_by_owner(owner_id)) == 1
        assert len(object_store.uploads) == 1
        assert len(profiles.completions) == 1


class TestPersistenceFailure:
    """Business write failures and compensation"""

    async def test_profile_is_restored_when_lounge_insert_fails(
        self, build_service, identity, seed_profile, db_session
    ):
        """The profile goes back to its pre-submission state"""
        owner_id = await seed_profile(full_name="Old Name")
        identity.sign_in(owner_id)
        session = ready_session(owner_id)
        session.staging.stage_cover(staged("front.png"))
        service = build_service(lounges=FailingLoungeRepository(db_session))

        with pytest.raises(OnboardingPersistenceError) as exc_info:
            await service.submit(session)

        error = exc_info.value
        assert error.stage == "business"
        assert error.details["compensated"] is True
        assert error.details["kind"] == "persistence_failed"
        assert error.details["profile_restored"] is True

        profile = await ProfileRepositoryImpl(db_session).get_by_id(owner_id)
        assert profile.onboarding_completed is False
        assert profile.full_name == "Old Name"

    async def test_failed_submission_keeps_session_retryable(
        self, build_service, identity, seed_profile, db_session
    ):
        """Staged files and the final step survive for a retry"""
        owner_id = await seed_profile()
        identity.sign_in(owner_id)
        session = ready_session(owner_id)
        cover = session.staging.stage_cover(staged("front.png"))

        with pytest.raises(OnboardingPersistenceError):
            await build_service(lounges=FailingLoungeRepository(db_session)).submit(session)

        assert cover.released is False
        assert session.wizard.is_final_step
        assert session.completed is False
        assert session.is_submitting is False

        result = await build_service().submit(session)
        assert result.outcome == SubmissionOutcome.COMPLETED

    async def test_compensation_can_be_disabled(
        self, build_service, identity, seed_profile, db_session
    ):
        """Without compensation the error reports the profile as left in place"""
        owner_id = await seed_profile()
        identity.sign_in(owner_id)
        service = build_service(
            lounges=FailingLoungeRepository(db_session),
            compensate_on_failure=False,
        )

        with pytest.raises(OnboardingPersistenceError) as exc_info:
            await service.submit(ready_session(owner_id))

        assert exc_info.value.details["compensated"] is False
        assert exc_info.value.details["profile_restored"] is False

    async def test_rolled_back_transaction_reports_profile_restored(
        self, build_service, identity, seed_profile, db_session
    ):
        """A database failure that discards the profile update is reported as restored"""
        owner_id = await seed_profile(full_name="Old Name")
        identity.sign_in(owner_id)
        service = build_service(
            lounges=RollingBackLoungeRepository(db_session),
            compensate_on_failure=False,
        )

        with pytest.raises(OnboardingPersistenceError) as exc_info:
            await service.submit(ready_session(owner_id))

        assert exc_info.value.details["compensated"] is False
        assert exc_info.value.details["profile_restored"] is True
        profile = await ProfileRepositoryImpl(db_session).get_by_id(owner_id)
        assert profile.full_name == "Old Name"
        assert profile.onboarding_completed is False

    async def test_retry_repeats_profile_update_and_uploads(
        self, build_service, identity, object_store, seed_profile, db_session
    ):
        """A retry after a failed insert writes the same profile and uploads the files again"""
        owner_id = await seed_profile()
        identity.sign_in(owner_id)
        session = ready_session(owner_id)
        session.staging.stage_cover(staged("front.png"))
        profiles = CountingProfileRepository(db_session)

        with pytest.raises(OnboardingPersistenceError):
            await build_service(lounges=FailingLoungeRepository(db_session), profiles=profiles).submit(session)
        result = await build_service(profiles=profiles).submit(session)

        assert result.outcome == SubmissionOutcome.COMPLETED
        assert len(profiles.completions) == 2
        assert profiles.completions[0] == profiles.completions[1]
        assert len(object_store.uploads) == 2
        assert result.lounge.cover_image.endswith("-front.png")


class TestCommit:
    """Staged files are only let go once the transaction is committed"""

    async def test_files_released_after_commit(self, build_service, identity, seed_profile):
        owner_id = await seed_profile()
        identity.sign_in(owner_id)
        session = ready_session(owner_id)
        cover = session.staging.stage_cover(staged("front.png"))
        released_at_commit = []

        async def commit():
            released_at_commit.append(cover.released)

        result = await build_service(commit=commit).submit(session)

        assert result.outcome == SubmissionOutcome.COMPLETED
        assert released_at_commit == [False]
        assert cover.released is True

    async def test_failed_commit_keeps_session_retryable(
        self, build_service, identity, seed_profile
    ):
        """A commit failure keeps the staged files and reports the profile as untouched"""
        owner_id = await seed_profile()
        identity.sign_in(owner_id)
        session = ready_session(owner_id)
        cover = session.staging.stage_cover(staged("front.png"))

        async def commit():
            raise DatabaseError("connection lost", operation="commit")

        with pytest.raises(OnboardingPersistenceError) as exc_info:
            await build_service(commit=commit).submit(session)

        assert exc_info.value.stage == "commit"
        assert exc_info.value.details["profile_restored"] is True
        assert cover.released is False
        assert session.completed is False
        assert session.is_submitting is False
