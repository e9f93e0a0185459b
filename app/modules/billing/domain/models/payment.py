# 📄 File: app/modules/billing/domain/models/payment.py
# 🧭 Purpose (Layman Explanation):
# Records of lounge subscriptions and the payments made for them. These are written by the
# payment provider's webhook; this service only reads them for the admin screens.
# 🧪 Purpose (Technical Summary):
# Subscription and Payment domain entities plus their status enumerations.
# 🔗 Dependencies:
# pydantic, datetime, typing, uuid, enum
# 🔄 Connected Modules / Calls From:
# subscription/payment repositories, billing service, admin payment APIs

import uuid
from datetime import datetime, timezone
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class PaymentStatus(str, Enum):
    SUCCEEDED = "succeeded"
    PENDING = "pending"
    FAILED = "failed"
    REFUNDED = "refunded"


class Subscription(BaseModel):
    """A lounge's subscription to a plan, mirrored from the payment provider."""

    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    lounge_id: Optional[str] = None
    plan_id: Optional[str] = None
    stripe_subscription_id: Optional[str] = None
    stripe_customer_id: Optional[str] = None
    status: str = "active"
    current_period_start: Optional[datetime] = None
    current_period_end: Optional[datetime] = None
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    def is_active(self) -> bool:
        return self.status == "active"


class Payment(BaseModel):
    """A single charge; ``amount`` is in cents."""

    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    lounge_id: Optional[str] = None
    subscription_id: Optional[str] = None
    stripe_payment_intent_id: Optional[str] = None
    amount: int = Field(0, ge=0)
    status: PaymentStatus = PaymentStatus.PENDING
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
