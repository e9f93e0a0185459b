# 📄 File: app/modules/billing/infrastructure/database/models.py
# 🧭 Purpose (Layman Explanation):
# This file defines how plans, subscriptions and payments are stored in the database tables.
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy ORM models for ``subscription_plans``, ``subscriptions`` and ``payments``.
# Money columns are integer cents.
#
# 🔗 Dependencies:
# - SQLAlchemy ORM
# - app.shared.infrastructure.database.connection (shared Base)
#
# 🔄 Connected Modules / Calls From:
# - plan_repository_impl.py, payment_repository_impl.py
# - Lounge model (subscription_plan_id foreign key)
# - Alembic migrations

from uuid import uuid4

from sqlalchemy import (
    JSON,
    Boolean,
    Column,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    String,
    Uuid,
    func,
)

from app.shared.infrastructure.database.connection import Base


# =============================================================================
# SUBSCRIPTION PLAN MODEL
# =============================================================================

class SubscriptionPlanModel(Base):
    """SQLAlchemy model for subscription plans."""
    __tablename__ = "subscription_plans"

    id = Column(Uuid(as_uuid=False), primary_key=True, default=lambda: str(uuid4()))
    name = Column(String(100), nullable=False)
    slug = Column(String(80), nullable=False, unique=True)
    price_monthly = Column(Integer, nullable=False, default=0, comment="Cents")
    price_yearly = Column(Integer, nullable=False, default=0, comment="Cents")
    features = Column(JSON, nullable=False, default=list)
    is_active = Column(Boolean, nullable=False, default=True)
    stripe_price_id_monthly = Column(String(100), nullable=True)
    stripe_price_id_yearly = Column(String(100), nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=func.now())

    def __repr__(self) -> str:
        return f"<SubscriptionPlanModel(slug='{self.slug}', monthly={self.price_monthly})>"


# =============================================================================
# SUBSCRIPTION MODEL
# =============================================================================

class SubscriptionModel(Base):
    """SQLAlchemy model for lounge subscriptions."""
    __tablename__ = "subscriptions"

    id = Column(Uuid(as_uuid=False), primary_key=True, default=lambda: str(uuid4()))
    lounge_id = Column(
        Uuid(as_uuid=False),
        ForeignKey("lounges.id", ondelete="CASCADE"),
        nullable=True
    )
    plan_id = Column(
        Uuid(as_uuid=False),
        ForeignKey("subscription_plans.id", ondelete="SET NULL"),
        nullable=True
    )
    stripe_subscription_id = Column(String(100), nullable=True)
    stripe_customer_id = Column(String(100), nullable=True)
    status = Column(String(30), nullable=False, default="active")
    current_period_start = Column(DateTime(timezone=True), nullable=True)
    current_period_end = Column(DateTime(timezone=True), nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=func.now())

    __table_args__ = (
        Index("ix_subscriptions_plan_status", "plan_id", "status"),
    )


# =============================================================================
# PAYMENT MODEL
# =============================================================================

class PaymentModel(Base):
    """SQLAlchemy model for payments."""
    __tablename__ = "payments"

    id = Column(Uuid(as_uuid=False), primary_key=True, default=lambda: str(uuid4()))
    lounge_id = Column(
        Uuid(as_uuid=False),
        ForeignKey("lounges.id", ondelete="SET NULL"),
        nullable=True
    )
    subscription_id = Column(
        Uuid(as_uuid=False),
        ForeignKey("subscriptions.id", ondelete="SET NULL"),
        nullable=True
    )
    stripe_payment_intent_id = Column(String(100), nullable=True)
    amount = Column(Integer, nullable=False, default=0, comment="Cents")
    status = Column(String(30), nullable=False, default="pending")
    created_at = Column(DateTime(timezone=True), nullable=False, default=func.now())

    __table_args__ = (
        Index("ix_payments_status_created_at", "status", "created_at"),
    )
