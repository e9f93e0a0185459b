# 📄 File: app/modules/directory/domain/repositories/lounge_repository.py
# 🧭 Purpose (Layman Explanation):
# Defines how lounge listings are saved, found, edited by their owners, and moderated by admins.
# 🧪 Purpose (Technical Summary):
# Repository interface for Lounge entities, including owner-scoped updates where the
# owner_id equality predicate is part of the write, and aggregate counts for admin statistics.
# 🔗 Dependencies:
# Domain models (Lounge, LoungeStatus, SubscriptionStatus), typing, abc
# 🔄 Connected Modules / Calls From:
# Onboarding business persistence, directory service, admin statistics, billing overview

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from ..models.lounge import Lounge, LoungeStatus, SubscriptionStatus


class LoungeRepository(ABC):
    """Repository interface for Lounge entity data access operations."""

    @abstractmethod
    async def create(self, lounge: Lounge) -> Lounge:
        """
        Insert a new lounge.

        Raises:
            RepositoryError: If database operation fails
        """
        pass

    @abstractmethod
    async def get_by_id(self, lounge_id: str) -> Optional[Lounge]:
        pass

    @abstractmethod
    async def list_by_city(
        self,
        city_id: str,
        status: Optional[LoungeStatus] = LoungeStatus.APPROVED
    ) -> List[Lounge]:
        """Lounges in a city, featured first then by name."""
        pass

    @abstractmethod
    async def list_by_owner(self, owner_id: str) -> List[Lounge]:
        """Lounges owned by ``owner_id``, newest first."""
        pass

    @abstractmethod
    async def list_all(self, status: Optional[LoungeStatus] = None) -> List[Lounge]:
        """All lounges newest first, optionally restricted to one status."""
        pass

    @abstractmethod
    async def update(
        self,
        lounge_id: str,
        changes: Dict[str, Any],
        owner_id: Optional[str] = None
    ) -> Optional[Lounge]:
        """
        Apply ``changes`` to a lounge.

        When ``owner_id`` is given the row must also match it; a lounge owned by
        someone else is treated the same as a missing one.

        Returns:
            Updated Lounge, or None when no row matched
        """
        pass

    @abstractmethod
    async def delete(self, lounge_id: str) -> bool:
        pass

    @abstractmethod
    async def count(
        self,
        status: Optional[LoungeStatus] = None,
        subscription_status: Optional[SubscriptionStatus] = None
    ) -> int:
        pass

    @abstractmethod
    async def count_by_type(self) -> Dict[str, int]:
        """Lounge counts keyed by lounge type value."""
        pass

    @abstractmethod
    async def count_by_city(self) -> Dict[str, int]:
        """Lounge counts keyed by city id; lounges without a city are omitted."""
        pass
