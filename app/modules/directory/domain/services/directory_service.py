# 📄 File: app/modules/directory/domain/services/directory_service.py
# 🧭 Purpose (Layman Explanation):
# The brains behind city pages, the owner's "my lounges" screen and the admin tools for cities
# and lounges. It decides what visitors may see and what owners and admins may change.
#
# 🧪 Purpose (Technical Summary):
# Domain service over City/Lounge repositories: public reads restricted to approved lounges,
# owner-scoped edits limited to the owner-editable field set, admin CRUD and moderation,
# slug derivation/validation, and audit entries for every mutation.
#
# 🔗 Dependencies:
# - City/Lounge repositories, LoungeFilter, ActivityRecorder
# - app.shared.utils (slug generation and validation, logging)
#
# 🔄 Connected Modules / Calls From:
# - Directory presentation APIs (public, dashboard, admin)

from typing import Any, Dict, List, Optional, Tuple

from app.modules.directory.domain.models.city import City
from app.modules.directory.domain.models.lounge import (
    OWNER_EDITABLE_FIELDS,
    Lounge,
    LoungeStatus,
    SubscriptionStatus,
)
from app.modules.directory.domain.repositories.city_repository import CityRepository
from app.modules.directory.domain.repositories.lounge_repository import LoungeRepository
from app.modules.directory.domain.services.lounge_filters import LoungeFilter
from app.modules.user_management.domain.models.activity_log import ActivityAction
from app.modules.user_management.domain.services.activity_recorder import ActivityRecorder
from app.shared.core.exceptions import NotFoundError, ValidationError
from app.shared.utils.formatters import generate_slug
from app.shared.utils.logging import get_logger
from app.shared.utils.validators import validate_slug

logger = get_logger(__name__)


class DirectoryService:
    """
    Directory operations for visitors, lounge owners and admins.
    """

    def __init__(
        self,
        cities: CityRepository,
        lounges: LoungeRepository,
        activity: Optional[ActivityRecorder] = None
    ):
        self.cities = cities
        self.lounges = lounges
        self.activity = activity or ActivityRecorder(None)

    # =========================================================================
    # PUBLIC VIEWS
    # =========================================================================

    async def list_cities(self, featured_only: bool = False) -> List[City]:
        return await self.cities.list_all(featured_only=featured_only)

    async def get_city_page(
        self,
        slug: str,
        lounge_filter: Optional[LoungeFilter] = None
    ) -> Tuple[City, List[Lounge]]:
        """
        Load a city and its approved lounges, narrowed by ``lounge_filter``.

        Raises:
            NotFoundError: If no city has this slug
        """
        city = await self.cities.get_by_slug(slug)
        if city is None:
            raise NotFoundError("City not found", resource_type="city", resource_id=slug)

        lounges = await self.lounges.list_by_city(city.id, status=LoungeStatus.APPROVED)
        if lounge_filter is not None and not lounge_filter.is_empty:
            lounges = lounge_filter.apply(lounges)

        return city, lounges

    async def get_public_lounge(self, lounge_id: str) -> Lounge:
        """Approved lounges only; anything else looks missing to the public."""
        lounge = await self.lounges.get_by_id(lounge_id)
        if lounge is None or not lounge.is_public():
            raise NotFoundError("Lounge not found", resource_type="lounge", resource_id=lounge_id)
        return lounge

    # =========================================================================
    # OWNER DASHBOARD
    # =========================================================================

    async def list_owner_lounges(self, owner_id: str, search: Optional[str] = None) -> List[Lounge]:
        lounges = await self.lounges.list_by_owner(owner_id)
        if search:
            lounges = LoungeFilter(search=search.strip()).apply(lounges)
        return lounges

    async def owner_lounge_stats(self, owner_id: str) -> Dict[str, int]:
        """Dashboard counters over every lounge the owner has."""
        lounges = await self.lounges.list_by_owner(owner_id)
        return {
            "total": len(lounges),
            "approved": sum(1 for lounge in lounges if lounge.status == LoungeStatus.APPROVED),
            "pending": sum(1 for lounge in lounges if lounge.status == LoungeStatus.PENDING),
            "active_subscriptions": sum(
                1 for lounge in lounges
                if lounge.subscription_status == SubscriptionStatus.ACTIVE
            ),
        }

    async def update_owner_lounge(
        self,
        owner_id: str,
        lounge_id: str,
        changes: Dict[str, Any]
    ) -> Lounge:
        """
        Apply an owner's edits to one of their lounges.

        Raises:
            ValidationError: If a field outside the owner-editable set is supplied
            NotFoundError: If the lounge does not exist or belongs to someone else
        """
        forbidden = sorted(set(changes) - set(OWNER_EDITABLE_FIELDS))
        if forbidden:
            raise ValidationError(
                "Owners cannot change these fields",
                field=", ".join(forbidden),
                constraint="owner_editable_fields"
            )

        updated = await self.lounges.update(lounge_id, changes, owner_id=owner_id)
        if updated is None:
            raise NotFoundError("Lounge not found", resource_type="lounge", resource_id=lounge_id)

        await self.activity.record(
            ActivityAction.LOUNGE_UPDATED,
            owner_id,
            entity_type="lounge",
            entity_id=lounge_id,
            metadata={"fields": sorted(changes)},
        )
        return updated

    # =========================================================================
    # ADMIN - CITIES
    # =========================================================================

    async def create_city(self, actor_id: str, data: Dict[str, Any]) -> City:
        values = dict(data)
        values["slug"] = self._resolve_slug(values.get("slug"), values.get("name"))

        city = await self.cities.create(City(**values))

        await self.activity.record(
            ActivityAction.CITY_CREATED, actor_id,
            entity_type="city", entity_id=city.id, metadata={"slug": city.slug}
        )
        return city

    async def update_city(self, actor_id: str, city_id: str, changes: Dict[str, Any]) -> City:
        values = dict(changes)
        if "slug" in values:
            values["slug"] = self._resolve_slug(values["slug"], values.get("name"))

        city = await self.cities.update(city_id, values)

        await self.activity.record(
            ActivityAction.CITY_UPDATED, actor_id,
            entity_type="city", entity_id=city_id, metadata={"fields": sorted(values)}
        )
        return city

    async def delete_city(self, actor_id: str, city_id: str) -> None:
        if not await self.cities.delete(city_id):
            raise NotFoundError("City not found", resource_type="city", resource_id=city_id)

        await self.activity.record(
            ActivityAction.CITY_DELETED, actor_id, entity_type="city", entity_id=city_id
        )

    # =========================================================================
    # ADMIN - LOUNGES
    # =========================================================================

    async def list_lounges(self, lounge_filter: Optional[LoungeFilter] = None) -> List[Lounge]:
        status = lounge_filter.status if lounge_filter else None
        lounges = await self.lounges.list_all(status=status)
        if lounge_filter is not None and not lounge_filter.is_empty:
            lounges = lounge_filter.apply(lounges)
        return lounges

    async def get_lounge(self, lounge_id: str) -> Lounge:
        lounge = await self.lounges.get_by_id(lounge_id)
        if lounge is None:
            raise NotFoundError("Lounge not found", resource_type="lounge", resource_id=lounge_id)
        return lounge

    async def create_lounge(self, actor_id: str, data: Dict[str, Any]) -> Lounge:
        await self._ensure_city_exists(data.get("city_id"))

        lounge = await self.lounges.create(Lounge(**data))

        await self.activity.record(
            ActivityAction.LOUNGE_CREATED, actor_id,
            entity_type="lounge", entity_id=lounge.id, metadata={"name": lounge.name}
        )
        return lounge

    async def update_lounge(self, actor_id: str, lounge_id: str, changes: Dict[str, Any]) -> Lounge:
        if "city_id" in changes:
            await self._ensure_city_exists(changes["city_id"])

        updated = await self.lounges.update(lounge_id, changes)
        if updated is None:
            raise NotFoundError("Lounge not found", resource_type="lounge", resource_id=lounge_id)

        await self.activity.record(
            ActivityAction.LOUNGE_UPDATED, actor_id,
            entity_type="lounge", entity_id=lounge_id, metadata={"fields": sorted(changes)}
        )
        return updated

    async def delete_lounge(self, actor_id: str, lounge_id: str) -> None:
        if not await self.lounges.delete(lounge_id):
            raise NotFoundError("Lounge not found", resource_type="lounge", resource_id=lounge_id)

        await self.activity.record(
            ActivityAction.LOUNGE_DELETED, actor_id, entity_type="lounge", entity_id=lounge_id
        )

    async def set_lounge_status(self, actor_id: str, lounge_id: str, status: LoungeStatus) -> Lounge:
        """Admin moderation: approve, reject, or send back to pending."""
        status = LoungeStatus(status)
        updated = await self.lounges.update(lounge_id, {"status": status})
        if updated is None:
            raise NotFoundError("Lounge not found", resource_type="lounge", resource_id=lounge_id)

        action = {
            LoungeStatus.APPROVED: ActivityAction.LOUNGE_APPROVED,
            LoungeStatus.REJECTED: ActivityAction.LOUNGE_REJECTED,
        }.get(status, ActivityAction.LOUNGE_UPDATED)

        await self.activity.record(
            action, actor_id,
            entity_type="lounge", entity_id=lounge_id, metadata={"status": status.value}
        )
        logger.log_business_event(
            event_type="lounge_moderated",
            description=f"Lounge {lounge_id} set to {status.value}",
            entity_id=lounge_id,
            entity_type="lounge",
        )
        return updated

    # =========================================================================
    # PRIVATE HELPERS
    # =========================================================================

    def _resolve_slug(self, slug: Optional[str], name: Optional[str]) -> str:
        candidate = (slug or "").strip() or generate_slug(name or "")
        result = validate_slug(candidate)
        if not result.is_valid:
            raise ValidationError(
                "; ".join(result.errors),
                field="slug",
                value=candidate,
                constraint="url_safe_slug"
            )
        return candidate

    async def _ensure_city_exists(self, city_id: Optional[str]) -> None:
        if city_id and await self.cities.get_by_id(city_id) is None:
            raise ValidationError("Unknown city", field="city_id", value=city_id)
