# 📄 File: app/modules/directory/domain/repositories/city_repository.py
# 🧭 Purpose (Layman Explanation):
# Defines how city pages are stored, looked up by their web address, and managed by admins.
# 🧪 Purpose (Technical Summary):
# Repository interface for City entities.
# 🔗 Dependencies:
# Domain models (City), typing, abc
# 🔄 Connected Modules / Calls From:
# Directory service, onboarding lounge persistence (city resolution), infrastructure implementation

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from ..models.city import City


class CityRepository(ABC):
    """Repository interface for City entity data access operations."""

    @abstractmethod
    async def list_all(self, featured_only: bool = False) -> List[City]:
        """Cities ordered by name."""
        pass

    @abstractmethod
    async def get_by_id(self, city_id: str) -> Optional[City]:
        pass

    @abstractmethod
    async def get_by_slug(self, slug: str) -> Optional[City]:
        pass

    @abstractmethod
    async def find_by_name(self, name: str) -> Optional[City]:
        """Case-insensitive exact name match."""
        pass

    @abstractmethod
    async def create(self, city: City) -> City:
        """
        Raises:
            DuplicateResourceError: If the slug is already taken
        """
        pass

    @abstractmethod
    async def update(self, city_id: str, changes: Dict[str, Any]) -> City:
        """
        Raises:
            NotFoundError: If the city does not exist
            DuplicateResourceError: If the new slug is already taken
        """
        pass

    @abstractmethod
    async def delete(self, city_id: str) -> bool:
        """Delete a city; returns False when it did not exist."""
        pass
