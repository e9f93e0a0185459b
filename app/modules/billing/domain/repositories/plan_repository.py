# 📄 File: app/modules/billing/domain/repositories/plan_repository.py
# 🧭 Purpose (Layman Explanation):
# Defines how subscription plans are listed for the pricing page and managed by admins.
# 🧪 Purpose (Technical Summary):
# Repository interface for SubscriptionPlan entities.
# 🔗 Dependencies:
# Domain models (SubscriptionPlan), typing, abc
# 🔄 Connected Modules / Calls From:
# Billing service, admin plan APIs, infrastructure implementation

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from ..models.plan import SubscriptionPlan


class PlanRepository(ABC):
    """Repository interface for SubscriptionPlan data access."""

    @abstractmethod
    async def list_active(self) -> List[SubscriptionPlan]:
        """Active plans ordered by monthly price ascending."""
        pass

    @abstractmethod
    async def list_all(self) -> List[SubscriptionPlan]:
        """Every plan ordered by monthly price ascending."""
        pass

    @abstractmethod
    async def get_by_id(self, plan_id: str) -> Optional[SubscriptionPlan]:
        pass

    @abstractmethod
    async def get_by_slug(self, slug: str) -> Optional[SubscriptionPlan]:
        pass

    @abstractmethod
    async def create(self, plan: SubscriptionPlan) -> SubscriptionPlan:
        """
        Raises:
            DuplicateResourceError: If the slug is taken
        """
        pass

    @abstractmethod
    async def update(self, plan_id: str, changes: Dict[str, Any]) -> SubscriptionPlan:
        """
        Raises:
            NotFoundError: If the plan does not exist
        """
        pass

    @abstractmethod
    async def delete(self, plan_id: str) -> bool:
        pass
