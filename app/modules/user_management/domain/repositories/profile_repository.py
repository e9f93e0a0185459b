# 📄 File: app/modules/user_management/domain/repositories/profile_repository.py
# 🧭 Purpose (Layman Explanation):
# Defines the contract for how to find and update people's profiles in the database,
# including marking onboarding as done and undoing that mark if the lounge could not be saved.
# 🧪 Purpose (Technical Summary):
# Repository interface defining data access operations for Profile entities following the
# Repository pattern, including the onboarding write and its compensating restore.
# 🔗 Dependencies:
# Domain models (Profile, ProfileRole), typing, abc, datetime
# 🔄 Connected Modules / Calls From:
# Onboarding submission service, auth dependencies, admin user views, infrastructure implementation

from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional

from ..models.profile import Profile, ProfileRole, ProfileWithLoungeCount


class ProfileRepository(ABC):
    """
    Repository interface for Profile entity data access operations.

    Implementation Notes:
    - Concrete implementations are in infrastructure layer
    - Methods return domain entities (Profile), not database models
    - All operations are async for non-blocking I/O
    - Profiles are created by the identity provider's signup trigger, never here
    """

    @abstractmethod
    async def get_by_id(self, profile_id: str) -> Optional[Profile]:
        """
        Get profile by id (the identity provider's user id).

        Args:
            profile_id: Profile ID to find

        Returns:
            Profile entity if found, None otherwise
        """
        pass

    @abstractmethod
    async def complete_onboarding(
        self,
        profile_id: str,
        full_name: str,
        phone: Optional[str],
        avatar_url: Optional[str],
        completed_at: datetime
    ) -> Profile:
        """
        Write the onboarding fields and set ``onboarding_completed``.

        Raises:
            NotFoundError: If the profile does not exist
            RepositoryError: If database operation fails
        """
        pass

    @abstractmethod
    async def restore_onboarding_state(self, snapshot: Profile) -> Profile:
        """
        Put the onboarding fields back to the values held in ``snapshot``.

        Used to undo :meth:`complete_onboarding` when a later write fails.
        """
        pass

    @abstractmethod
    async def update_admin_fields(
        self,
        profile_id: str,
        full_name: Optional[str] = None,
        role: Optional[ProfileRole] = None
    ) -> Profile:
        """Update the fields admins may edit; ``None`` leaves a field unchanged."""
        pass

    @abstractmethod
    async def list_with_lounge_counts(
        self,
        search: Optional[str] = None,
        role: Optional[ProfileRole] = None
    ) -> List[ProfileWithLoungeCount]:
        """
        List profiles newest first, each with the number of lounges it owns.

        Args:
            search: Case-insensitive match against full name or email
            role: Only profiles holding this role
        """
        pass

    @abstractmethod
    async def count(self) -> int:
        """Total number of profiles."""
        pass
