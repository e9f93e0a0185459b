# 📄 File: app/modules/billing/domain/repositories/payment_repository.py
# 🧭 Purpose (Layman Explanation):
# Defines how the admin screens read subscriptions and payments: lists, counts and revenue totals.
# 🧪 Purpose (Technical Summary):
# Read-side repository interfaces for Subscription and Payment entities. Both tables are
# written only by the payment webhook, outside this service.
# 🔗 Dependencies:
# Domain models (Subscription, Payment), typing, abc
# 🔄 Connected Modules / Calls From:
# Billing service, admin statistics, infrastructure implementation

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Dict, List, Optional

from ..models.payment import Payment, PaymentStatus, Subscription


class SubscriptionRepository(ABC):
    """Read access to lounge subscriptions."""

    @abstractmethod
    async def list_by_lounge(self, lounge_id: str) -> List[Subscription]:
        pass

    @abstractmethod
    async def count_active_by_plan(self) -> Dict[str, int]:
        """Map of plan id to number of active subscriptions."""
        pass


class PaymentRepository(ABC):
    """Read access to payments."""

    @abstractmethod
    async def list_all(self, status: Optional[PaymentStatus] = None) -> List[Payment]:
        """Payments newest first, optionally filtered by status."""
        pass

    @abstractmethod
    async def sum_succeeded_since(self, since: Optional[datetime] = None) -> int:
        """Total cents of succeeded payments created at or after ``since``."""
        pass

    @abstractmethod
    async def count_by_status(self) -> Dict[str, int]:
        pass
