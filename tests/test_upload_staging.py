from datetime import datetime, timedelta, timezone

import pytest

from app.modules.onboarding.application.session_registry import OnboardingSessionRegistry
from app.modules.onboarding.domain.models.onboarding_session import OnboardingSession
from app.modules.onboarding.domain.models.staged_upload import PREVIEW_SCHEME, StagedFile, UploadStaging
from app.modules.user_management.domain.models.profile import Profile
from app.shared.core.exceptions import AuthorizationError, NotFoundError


def staged(name: str) -> StagedFile:
    return StagedFile(filename=name, content_type="image/png", data=b"\x89PNG" + name.encode())


class FakeClock:
    def __init__(self):
        self.now = datetime(2026, 5, 1, 9, 0, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now += timedelta(**kwargs)


class TestUploadStaging:
    """Staging area for picked images"""

    def test_preview_refs_are_unique(self):
        first, second = staged("a.png"), staged("a.png")
        assert first.preview_ref.startswith(PREVIEW_SCHEME)
        assert first.preview_ref != second.preview_ref

    def test_restaging_avatar_releases_previous(self):
        """Only the latest avatar stays previewable"""
        staging = UploadStaging()
        old = staging.stage_avatar(staged("old.png"))
        new = staging.stage_avatar(staged("new.png"))

        assert old.released and old.data == b""
        assert staging.avatar is new
        assert staging.get_by_ref(old.preview_ref) is None

    def test_restaging_cover_releases_previous(self):
        staging = UploadStaging()
        old = staging.stage_cover(staged("old.png"))
        staging.stage_cover(staged("new.png"))
        assert old.released

    def test_gallery_appends_in_order(self):
        staging = UploadStaging()
        staging.add_gallery_images([staged("1.png"), staged("2.png")])
        staging.add_gallery_images([staged("3.png")])
        assert [f.filename for f in staging.gallery] == ["1.png", "2.png", "3.png"]

    def test_remove_gallery_image_keeps_order(self):
        """Removing the middle image shifts the rest without reordering"""
        staging = UploadStaging()
        staging.add_gallery_images([staged("1.png"), staged("2.png"), staged("3.png")])

        removed = staging.remove_gallery_image(1)

        assert removed.filename == "2.png"
        assert removed.released
        assert [f.filename for f in staging.gallery] == ["1.png", "3.png"]

    @pytest.mark.parametrize("index", [-1, 3])
    def test_remove_out_of_range(self, index):
        staging = UploadStaging()
        staging.add_gallery_images([staged("1.png"), staged("2.png"), staged("3.png")])
        with pytest.raises(IndexError):
            staging.remove_gallery_image(index)
        assert len(staging.gallery) == 3

    def test_release_all_empties_every_slot(self):
        staging = UploadStaging()
        files = [
            staging.stage_avatar(staged("a.png")),
            staging.stage_cover(staged("c.png")),
            *staging.add_gallery_images([staged("g.png")]),
        ]

        staging.release_all()

        assert staging.is_empty
        assert all(f.released for f in files)

    def test_get_by_ref_finds_any_slot(self):
        staging = UploadStaging()
        cover = staging.stage_cover(staged("c.png"))
        gallery = staging.add_gallery_images([staged("g.png")])[0]

        assert staging.get_by_ref(cover.preview_ref) is cover
        assert staging.get_by_ref(gallery.preview_ref) is gallery
        assert staging.get_by_ref("staged://missing") is None


class TestOnboardingSession:
    """Session lifetime"""

    def test_expires_after_ttl(self):
        start = datetime(2026, 5, 1, tzinfo=timezone.utc)
        session = OnboardingSession(owner_id="u1", created_at=start, last_seen_at=start)
        ttl = timedelta(minutes=30)

        assert session.is_expired(ttl, start + timedelta(minutes=29)) is False
        assert session.is_expired(ttl, start + timedelta(minutes=31)) is True

    def test_submitting_session_never_expires(self):
        start = datetime(2026, 5, 1, tzinfo=timezone.utc)
        session = OnboardingSession(owner_id="u1", last_seen_at=start, is_submitting=True)
        assert session.is_expired(timedelta(minutes=1), start + timedelta(days=1)) is False

    def test_discard_releases_staged_files(self):
        session = OnboardingSession(owner_id="u1")
        avatar = session.staging.stage_avatar(staged("a.png"))
        session.discard()
        assert avatar.released


class TestSessionRegistry:
    """Owner-scoped session registry"""

    @pytest.fixture
    def clock(self):
        return FakeClock()

    @pytest.fixture
    def registry(self, clock):
        return OnboardingSessionRegistry(ttl=timedelta(minutes=30), clock=clock)

    def test_start_resumes_existing_session(self, registry):
        """A second start returns the same in-progress session"""
        first = registry.start("owner-1")
        first.wizard.update({"full_name": "Ana"})

        second = registry.start("owner-1")

        assert second is first
        assert second.wizard.data.full_name == "Ana"
        assert len(registry) == 1

    def test_start_prefills_from_profile(self, registry):
        session = registry.start("owner-1", Profile(id="owner-1", full_name="Ana Torres"))
        assert session.wizard.data.full_name == "Ana Torres"

    def test_sessions_are_per_owner(self, registry):
        assert registry.start("owner-1") is not registry.start("owner-2")
        assert len(registry) == 2

    def test_get_by_other_owner_is_denied(self, registry):
        session = registry.start("owner-1")
        with pytest.raises(AuthorizationError):
            registry.get(session.id, "owner-2")

    def test_get_unknown_session(self, registry):
        with pytest.raises(NotFoundError):
            registry.get("missing", "owner-1")

    def test_expired_session_is_dropped(self, registry, clock):
        """Idle sessions expire and their staged files are released"""
        session = registry.start("owner-1")
        avatar = session.staging.stage_avatar(staged("a.png"))

        clock.advance(minutes=31)

        with pytest.raises(NotFoundError):
            registry.get(session.id, "owner-1")
        assert avatar.released
        assert registry.find_for_owner("owner-1") is None

    def test_access_keeps_session_alive(self, registry, clock):
        session = registry.start("owner-1")
        clock.advance(minutes=20)
        registry.get(session.id, "owner-1")
        clock.advance(minutes=20)

        assert registry.get(session.id, "owner-1") is session

    def test_purge_skips_submitting_sessions(self, registry, clock):
        idle = registry.start("owner-1")
        busy = registry.start("owner-2")
        busy.is_submitting = True

        clock.advance(hours=2)

        assert registry.purge_expired() == [idle.id]
        assert len(registry) == 1

    def test_discard_then_start_creates_fresh_session(self, registry):
        first = registry.start("owner-1")
        registry.discard(first.id)

        second = registry.start("owner-1")

        assert second.id != first.id

    def test_clear_releases_everything(self, registry):
        session = registry.start("owner-1")
        cover = session.staging.stage_cover(staged("c.png"))

        registry.clear()

        assert len(registry) == 0
        assert cover.released
