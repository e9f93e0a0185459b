# 📄 File: app/modules/directory/domain/services/lounge_filters.py
# 🧭 Purpose (Layman Explanation):
# The filter panel on a city page: show only certain kinds of lounges, lounges with at least
# one of the chosen amenities, only featured ones, or ones whose name matches a search.
# 🧪 Purpose (Technical Summary):
# Composable in-memory predicate over Lounge entities. Lounge types and amenities are
# any-of matches; all active criteria must hold together. Empty criteria match everything.
# 🔗 Dependencies:
# dataclasses, typing, directory domain models
# 🔄 Connected Modules / Calls From:
# Public city page API, owner dashboard and admin lounge listings

from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Set

from app.modules.directory.domain.models.lounge import (
    Amenity,
    Lounge,
    LoungeStatus,
    LoungeType,
)


@dataclass
class LoungeFilter:
    """
    Criteria applied to a lounge listing.

    Attributes:
        lounge_types: Keep lounges whose type is any of these
        amenities: Keep lounges offering any of these amenities
        featured_only: Keep only featured lounges
        status: Keep only lounges in this moderation state
        search: Case-insensitive substring of the name or address
    """
    lounge_types: Set[LoungeType] = field(default_factory=set)
    amenities: Set[Amenity] = field(default_factory=set)
    featured_only: bool = False
    status: Optional[LoungeStatus] = None
    search: Optional[str] = None

    @classmethod
    def from_query(
        cls,
        lounge_types: Optional[Iterable[str]] = None,
        amenities: Optional[Iterable[str]] = None,
        featured_only: bool = False,
        status: Optional[str] = None,
        search: Optional[str] = None
    ) -> "LoungeFilter":
        """Build a filter from raw query-string values; raises ValueError on unknown values."""
        return cls(
            lounge_types={LoungeType(value) for value in (lounge_types or [])},
            amenities={Amenity(value) for value in (amenities or [])},
            featured_only=featured_only,
            status=LoungeStatus(status) if status else None,
            search=search.strip() if search and search.strip() else None,
        )

    @property
    def is_empty(self) -> bool:
        return not (
            self.lounge_types or self.amenities or self.featured_only
            or self.status or self.search
        )

    def matches(self, lounge: Lounge) -> bool:
        if self.lounge_types and lounge.lounge_type not in self.lounge_types:
            return False

        if self.amenities and not self.amenities.intersection(lounge.amenities):
            return False

        if self.featured_only and not lounge.is_featured:
            return False

        if self.status is not None and lounge.status != self.status:
            return False

        if self.search:
            needle = self.search.lower()
            haystack = f"{lounge.name} {lounge.address or ''}".lower()
            if needle not in haystack:
                return False

        return True

    def apply(self, lounges: Iterable[Lounge]) -> List[Lounge]:
        """Return the matching lounges, preserving input order."""
        return [lounge for lounge in lounges if self.matches(lounge)]
