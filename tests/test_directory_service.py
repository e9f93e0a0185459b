import pytest

from app.modules.directory.domain.models.lounge import (
    Amenity,
    Lounge,
    LoungeStatus,
    LoungeType,
    SubscriptionStatus,
)
from app.modules.directory.domain.services.directory_service import DirectoryService
from app.modules.directory.domain.services.lounge_filters import LoungeFilter
from app.modules.directory.infrastructure.database.city_repository_impl import CityRepositoryImpl
from app.modules.directory.infrastructure.database.lounge_repository_impl import LoungeRepositoryImpl
from app.modules.user_management.domain.services.activity_recorder import ActivityRecorder
from app.modules.user_management.infrastructure.database.activity_log_repository_impl import (
    ActivityLogRepositoryImpl,
)
from app.shared.core.exceptions import DuplicateResourceError, NotFoundError, ValidationError

ADMIN_ID = "00000000-0000-4000-8000-0000000000aa"


@pytest.fixture
def service(db_session):
    return DirectoryService(
        cities=CityRepositoryImpl(db_session),
        lounges=LoungeRepositoryImpl(db_session),
        activity=ActivityRecorder(ActivityLogRepositoryImpl(db_session)),
    )


class TestLoungeFilter:
    """In-memory listing filters"""

    @pytest.fixture
    def lounges(self):
        return [
            Lounge(name="Havana Room", address="1 Ocean Dr", amenities=[Amenity.BYOB, Amenity.FULL_BAR]),
            Lounge(name="Smoke Shop", lounge_type=LoungeType.RETAIL, is_featured=True),
            Lounge(name="Leaf Club", lounge_type=LoungeType.BAR, amenities=[Amenity.OUTDOOR_PATIO]),
        ]

    def test_empty_filter_keeps_everything(self, lounges):
        lounge_filter = LoungeFilter()
        assert lounge_filter.is_empty
        assert lounge_filter.apply(lounges) == lounges

    def test_type_filter(self, lounges):
        result = LoungeFilter(lounge_types={LoungeType.RETAIL, LoungeType.BAR}).apply(lounges)
        assert [l.name for l in result] == ["Smoke Shop", "Leaf Club"]

    def test_amenity_filter_matches_any(self, lounges):
        """A lounge needs only one of the requested amenities"""
        result = LoungeFilter(amenities={Amenity.FULL_BAR, Amenity.OUTDOOR_PATIO}).apply(lounges)
        assert [l.name for l in result] == ["Havana Room", "Leaf Club"]

    def test_featured_only(self, lounges):
        assert [l.name for l in LoungeFilter(featured_only=True).apply(lounges)] == ["Smoke Shop"]

    def test_search_matches_name_or_address(self, lounges):
        assert [l.name for l in LoungeFilter(search="ocean").apply(lounges)] == ["Havana Room"]
        assert [l.name for l in LoungeFilter(search="CLUB").apply(lounges)] == ["Leaf Club"]

    def test_from_query_parses_values(self):
        lounge_filter = LoungeFilter.from_query(
            lounge_types=["Retail"], amenities=["BYOB"], status="approved", search="  "
        )
        assert lounge_filter.lounge_types == {LoungeType.RETAIL}
        assert lounge_filter.amenities == {Amenity.BYOB}
        assert lounge_filter.status == LoungeStatus.APPROVED
        assert lounge_filter.search is None

    def test_from_query_rejects_unknown_type(self):
        with pytest.raises(ValueError):
            LoungeFilter.from_query(lounge_types=["Casino"])


class TestPublicDirectory:
    """Visitor-facing city pages"""

    async def test_city_page_shows_only_approved_lounges(self, service, seed_city, seed_lounge):
        city = await seed_city("Miami")
        await seed_lounge("Approved One", city_id=city.id, status=LoungeStatus.APPROVED)
        await seed_lounge("Waiting", city_id=city.id, status=LoungeStatus.PENDING)
        await seed_lounge("Turned Down", city_id=city.id, status=LoungeStatus.REJECTED)

        found_city, lounges = await service.get_city_page("miami")

        assert found_city.id == city.id
        assert [l.name for l in lounges] == ["Approved One"]

    async def test_city_page_puts_featured_first(self, service, seed_city, seed_lounge):
        city = await seed_city("Tampa")
        await seed_lounge("Alpha", city_id=city.id, status=LoungeStatus.APPROVED)
        await seed_lounge("Zulu", city_id=city.id, status=LoungeStatus.APPROVED, is_featured=True)

        _, lounges = await service.get_city_page("tampa")

        assert [l.name for l in lounges] == ["Zulu", "Alpha"]

    async def test_city_page_applies_filter(self, service, seed_city, seed_lounge):
        city = await seed_city("Austin")
        await seed_lounge("Cellar", city_id=city.id, status=LoungeStatus.APPROVED, lounge_type=LoungeType.BAR)
        await seed_lounge("Corner", city_id=city.id, status=LoungeStatus.APPROVED)

        _, lounges = await service.get_city_page("austin", LoungeFilter(lounge_types={LoungeType.BAR}))

        assert [l.name for l in lounges] == ["Cellar"]

    async def test_unknown_city(self, service):
        with pytest.raises(NotFoundError):
            await service.get_city_page("atlantis")

    async def test_pending_lounge_is_hidden(self, service, seed_lounge):
        lounge = await seed_lounge(status=LoungeStatus.PENDING)
        with pytest.raises(NotFoundError):
            await service.get_public_lounge(lounge.id)

    async def test_featured_cities(self, service, seed_city):
        await seed_city("Miami", is_featured=True)
        await seed_city("Boise")

        assert [c.name for c in await service.list_cities(featured_only=True)] == ["Miami"]


class TestOwnerLounges:
    """Owner dashboard scope"""

    async def test_owner_sees_only_own_lounges(self, service, seed_profile, seed_lounge):
        owner_id = await seed_profile()
        other_id = await seed_profile()
        await seed_lounge("Mine", owner_id=owner_id)
        await seed_lounge("Theirs", owner_id=other_id)

        assert [l.name for l in await service.list_owner_lounges(owner_id)] == ["Mine"]

    async def test_owner_search(self, service, seed_profile, seed_lounge):
        owner_id = await seed_profile()
        await seed_lounge("Havana Room", owner_id=owner_id)
        await seed_lounge("Leaf Club", owner_id=owner_id)

        result = await service.list_owner_lounges(owner_id, search="havana")

        assert [l.name for l in result] == ["Havana Room"]

    async def test_owner_stats_count_status_and_subscription(self, service, seed_profile, seed_lounge):
        owner_id = await seed_profile()
        other_id = await seed_profile()
        await seed_lounge("Paid", owner_id=owner_id, status=LoungeStatus.APPROVED,
                          subscription_status=SubscriptionStatus.ACTIVE)
        await seed_lounge("Listed", owner_id=owner_id, status=LoungeStatus.APPROVED)
        await seed_lounge("Waiting", owner_id=owner_id)
        await seed_lounge("Turned Down", owner_id=owner_id, status=LoungeStatus.REJECTED,
                          subscription_status=SubscriptionStatus.PAST_DUE)
        await seed_lounge("Foreign", owner_id=other_id, status=LoungeStatus.APPROVED)

        stats = await service.owner_lounge_stats(owner_id)

        assert stats == {"total": 4, "approved": 2, "pending": 1, "active_subscriptions": 1}

    async def test_owner_without_lounges_has_zero_stats(self, service, seed_profile):
        stats = await service.owner_lounge_stats(await seed_profile())

        assert stats == {"total": 0, "approved": 0, "pending": 0, "active_subscriptions": 0}

    async def test_owner_updates_editable_fields(self, service, seed_profile, seed_lounge):
        owner_id = await seed_profile()
        lounge = await seed_lounge(owner_id=owner_id)

        updated = await service.update_owner_lounge(
            owner_id, lounge.id, {"name": "New Name", "amenities": [Amenity.BYOB]}
        )

        assert updated.name == "New Name"
        assert updated.amenities == [Amenity.BYOB]

    async def test_owner_cannot_approve_own_lounge(self, service, seed_profile, seed_lounge):
        """Moderation and billing fields are outside the owner's reach"""
        owner_id = await seed_profile()
        lounge = await seed_lounge(owner_id=owner_id)

        with pytest.raises(ValidationError):
            await service.update_owner_lounge(owner_id, lounge.id, {"status": "approved"})

    async def test_owner_cannot_edit_someone_elses_lounge(self, service, seed_profile, seed_lounge):
        owner_id = await seed_profile()
        other_id = await seed_profile()
        lounge = await seed_lounge(owner_id=other_id)

        with pytest.raises(NotFoundError):
            await service.update_owner_lounge(owner_id, lounge.id, {"name": "Hijacked"})


class TestAdminDirectory:
    """Admin city and lounge management"""

    async def test_create_city_derives_slug(self, service):
        city = await service.create_city(ADMIN_ID, {"name": "St. Petersburg"})
        assert city.slug == "st-petersburg"

    async def test_duplicate_city_slug(self, service, seed_city):
        await seed_city("Miami")
        with pytest.raises(DuplicateResourceError):
            await service.create_city(ADMIN_ID, {"name": "Miami"})

    async def test_invalid_slug_is_rejected(self, service):
        with pytest.raises(ValidationError):
            await service.create_city(ADMIN_ID, {"name": "Miami", "slug": "Not A Slug"})

    async def test_create_lounge_with_unknown_city(self, service):
        with pytest.raises(ValidationError):
            await service.create_lounge(
                ADMIN_ID, {"name": "Nowhere", "city_id": "00000000-0000-4000-8000-000000000999"}
            )

    async def test_approve_lounge(self, service, seed_lounge):
        lounge = await seed_lounge()

        approved = await service.set_lounge_status(ADMIN_ID, lounge.id, LoungeStatus.APPROVED)

        assert approved.status == LoungeStatus.APPROVED
        assert (await service.get_public_lounge(lounge.id)).id == lounge.id

    async def test_list_lounges_by_status(self, service, seed_lounge):
        await seed_lounge("Waiting")
        await seed_lounge("Live", status=LoungeStatus.APPROVED)

        pending = await service.list_lounges(LoungeFilter(status=LoungeStatus.PENDING))

        assert [l.name for l in pending] == ["Waiting"]

    async def test_delete_missing_lounge(self, service):
        with pytest.raises(NotFoundError):
            await service.delete_lounge(ADMIN_ID, "00000000-0000-4000-8000-000000000998")
