# 📄 File: app/modules/billing/presentation/api/schemas/billing_schemas.py
# 🧭 Purpose (Layman Explanation):
# This file defines the shape of plan, billing and payment data in the API, including prices
# already formatted for display (like "$29.99").
#
# 🧪 Purpose (Technical Summary):
# Pydantic schemas for billing endpoints and admin plan/payment endpoints. Prices travel as
# integer cents with a formatted companion field.
#
# 🔗 Dependencies:
# - pydantic, billing domain models, app.shared.utils.formatters
#
# 🔄 Connected Modules / Calls From:
# - app.modules.billing.presentation.api.v1.*

from datetime import datetime
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from app.modules.billing.domain.models.payment import Payment, PaymentStatus
from app.modules.billing.domain.models.plan import SubscriptionPlan
from app.modules.billing.domain.services.billing_service import BillingOverview, PaymentStats
from app.shared.utils.formatters import format_price
from app.shared.utils.validators import SLUG_PATTERN


class PlanResponse(BaseModel):
    id: str
    name: str
    slug: str
    price_monthly: int
    price_yearly: int
    price_monthly_display: str
    price_yearly_display: str
    features: List[str]
    is_active: bool
    stripe_price_id_monthly: Optional[str] = None
    stripe_price_id_yearly: Optional[str] = None
    created_at: datetime

    @classmethod
    def from_domain(cls, plan: SubscriptionPlan) -> "PlanResponse":
        return cls(
            **plan.model_dump(),
            price_monthly_display=plan.monthly_display,
            price_yearly_display=plan.yearly_display,
        )


class PlanWithStatsResponse(PlanResponse):
    active_subscriptions: int = 0


class PlanCreateRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    slug: str = Field(..., max_length=80, pattern=SLUG_PATTERN.pattern)
    price_monthly: int = Field(0, ge=0, description="Cents")
    price_yearly: int = Field(0, ge=0, description="Cents")
    features: List[str] = Field(default_factory=list)
    is_active: bool = True
    stripe_price_id_monthly: Optional[str] = None
    stripe_price_id_yearly: Optional[str] = None


class PlanUpdateRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    name: Optional[str] = Field(None, min_length=1, max_length=100)
    slug: Optional[str] = Field(None, max_length=80, pattern=SLUG_PATTERN.pattern)
    price_monthly: Optional[int] = Field(None, ge=0)
    price_yearly: Optional[int] = Field(None, ge=0)
    features: Optional[List[str]] = None
    is_active: Optional[bool] = None
    stripe_price_id_monthly: Optional[str] = None
    stripe_price_id_yearly: Optional[str] = None


class LoungeBillingResponse(BaseModel):
    lounge_id: str
    name: str
    plan_name: Optional[str] = None
    subscription_status: str
    subscription_ends_at: Optional[datetime] = None


class BillingOverviewResponse(BaseModel):
    lounges: List[LoungeBillingResponse]
    plans: List[PlanResponse]
    upgrade: Optional[str] = None

    @classmethod
    def from_domain(cls, overview: BillingOverview) -> "BillingOverviewResponse":
        return cls(
            lounges=[
                LoungeBillingResponse(
                    lounge_id=item.lounge.id,
                    name=item.lounge.name,
                    plan_name=item.plan_name,
                    subscription_status=item.lounge.subscription_status.value,
                    subscription_ends_at=item.lounge.subscription_ends_at,
                )
                for item in overview.lounges
            ],
            plans=[PlanResponse.from_domain(plan) for plan in overview.plans],
            upgrade=overview.upgrade,
        )


class PaymentResponse(BaseModel):
    id: str
    lounge_id: Optional[str] = None
    subscription_id: Optional[str] = None
    stripe_payment_intent_id: Optional[str] = None
    amount: int
    amount_display: str
    status: PaymentStatus
    created_at: datetime

    @classmethod
    def from_domain(cls, payment: Payment) -> "PaymentResponse":
        return cls(**payment.model_dump(), amount_display=format_price(payment.amount))


class PaymentStatsResponse(BaseModel):
    total_revenue: int
    total_revenue_display: str
    revenue_last_30_days: int
    revenue_last_30_days_display: str
    counts_by_status: Dict[str, int]

    @classmethod
    def from_domain(cls, stats: PaymentStats) -> "PaymentStatsResponse":
        return cls(
            total_revenue=stats.total_revenue,
            total_revenue_display=format_price(stats.total_revenue),
            revenue_last_30_days=stats.revenue_last_30_days,
            revenue_last_30_days_display=format_price(stats.revenue_last_30_days),
            counts_by_status=stats.counts_by_status,
        )
