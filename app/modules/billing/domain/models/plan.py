# 📄 File: app/modules/billing/domain/models/plan.py
# 🧭 Purpose (Layman Explanation):
# Describes the paid plans a lounge can sign up for (Basic, Pro, Premium): their prices,
# the perks they include, and whether they are currently on sale.
# 🧪 Purpose (Technical Summary):
# SubscriptionPlan domain entity. Prices are integer cents; display formatting lives in
# app.shared.utils.formatters.
# 🔗 Dependencies:
# pydantic, datetime, typing, uuid
# 🔄 Connected Modules / Calls From:
# plan_repository.py, billing service, admin plan APIs, lounge subscription display

import uuid
from datetime import datetime, timezone
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.shared.utils.formatters import format_price
from app.shared.utils.validators import validate_slug


class SubscriptionPlan(BaseModel):
    """Admin-managed subscription plan."""

    model_config = ConfigDict(validate_assignment=True)

    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    name: str = Field(..., min_length=1, max_length=100)
    slug: str
    price_monthly: int = Field(0, ge=0, description="Monthly price in cents")
    price_yearly: int = Field(0, ge=0, description="Yearly price in cents")
    features: List[str] = Field(default_factory=list)
    is_active: bool = True
    stripe_price_id_monthly: Optional[str] = None
    stripe_price_id_yearly: Optional[str] = None

    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    @field_validator('slug')
    @classmethod
    def slug_is_url_safe(cls, v: str) -> str:
        result = validate_slug(v)
        if not result.is_valid:
            raise ValueError("; ".join(result.errors))
        return v

    @field_validator('features')
    @classmethod
    def drop_blank_features(cls, v: List[str]) -> List[str]:
        return [feature.strip() for feature in v if feature and feature.strip()]

    @property
    def monthly_display(self) -> str:
        return format_price(self.price_monthly)

    @property
    def yearly_display(self) -> str:
        return format_price(self.price_yearly)
