# 📄 File: app/modules/directory/infrastructure/database/models.py
# 🧭 Purpose (Layman Explanation):
# This file defines how cities and lounge listings are stored in the database tables.
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy ORM models for the ``cities`` and ``lounges`` tables with check constraints
# mirroring the domain enumerations and indexes for the public and owner queries.
#
# 🔗 Dependencies:
# - SQLAlchemy ORM
# - app.shared.infrastructure.database.connection (shared Base)
#
# 🔄 Connected Modules / Calls From:
# - city_repository_impl.py, lounge_repository_impl.py
# - Profile repository (owner lounge counts)
# - Alembic migrations

from uuid import uuid4

from sqlalchemy import (
    JSON,
    Boolean,
    CheckConstraint,
    Column,
    DateTime,
    ForeignKey,
    Index,
    String,
    Text,
    Uuid,
    func,
)

from app.shared.infrastructure.database.connection import Base


# =============================================================================
# CITY MODEL
# =============================================================================

class CityModel(Base):
    """SQLAlchemy model for city pages."""
    __tablename__ = "cities"

    id = Column(Uuid(as_uuid=False), primary_key=True, default=lambda: str(uuid4()))
    name = Column(String(120), nullable=False)
    slug = Column(String(80), nullable=False, unique=True, comment="URL-safe unique slug")
    description = Column(Text, nullable=True)
    hero_image = Column(String(1000), nullable=True)
    is_featured = Column(Boolean, nullable=False, default=False)

    created_at = Column(DateTime(timezone=True), nullable=False, default=func.now())
    updated_at = Column(
        DateTime(timezone=True),
        nullable=False,
        default=func.now(),
        onupdate=func.now()
    )

    def __repr__(self) -> str:
        return f"<CityModel(slug={self.slug})>"


# =============================================================================
# LOUNGE MODEL
# =============================================================================

class LoungeModel(Base):
    """SQLAlchemy model for lounge listings."""
    __tablename__ = "lounges"

    id = Column(Uuid(as_uuid=False), primary_key=True, default=lambda: str(uuid4()))
    name = Column(String(200), nullable=False)
    city_id = Column(
        Uuid(as_uuid=False),
        ForeignKey("cities.id", ondelete="SET NULL"),
        nullable=True
    )
    owner_id = Column(
        Uuid(as_uuid=False),
        ForeignKey("profiles.id", ondelete="SET NULL"),
        nullable=True
    )

    address = Column(String(500), nullable=True)
    phone = Column(String(50), nullable=True)
    website = Column(String(500), nullable=True)
    description = Column(Text, nullable=True)

    lounge_type = Column(String(30), nullable=False, default="Lounge")
    amenities = Column(JSON, nullable=False, default=list)
    images = Column(JSON, nullable=False, default=list, comment="Ordered gallery URLs")
    cover_image = Column(String(1000), nullable=True)

    instagram = Column(String(100), nullable=True)
    facebook = Column(String(100), nullable=True)
    twitter = Column(String(100), nullable=True)
    tiktok = Column(String(100), nullable=True)
    wants_website = Column(Boolean, nullable=False, default=False)

    is_featured = Column(Boolean, nullable=False, default=False)
    is_claimed = Column(Boolean, nullable=False, default=False)
    is_verified = Column(Boolean, nullable=False, default=False)
    status = Column(String(20), nullable=False, default="pending")

    subscription_plan_id = Column(
        Uuid(as_uuid=False),
        ForeignKey("subscription_plans.id", ondelete="SET NULL"),
        nullable=True
    )
    subscription_status = Column(String(20), nullable=False, default="none")
    subscription_ends_at = Column(DateTime(timezone=True), nullable=True)

    created_at = Column(DateTime(timezone=True), nullable=False, default=func.now())
    updated_at = Column(
        DateTime(timezone=True),
        nullable=False,
        default=func.now(),
        onupdate=func.now()
    )

    __table_args__ = (
        CheckConstraint(
            "lounge_type IN ('Lounge', 'Bar', 'Retail', 'Private Club')",
            name="ck_lounges_lounge_type"
        ),
        CheckConstraint(
            "status IN ('pending', 'approved', 'rejected')",
            name="ck_lounges_status"
        ),
        CheckConstraint(
            "subscription_status IN ('none', 'active', 'canceled', 'past_due')",
            name="ck_lounges_subscription_status"
        ),
        Index("ix_lounges_city_status", "city_id", "status"),
        Index("ix_lounges_owner_id", "owner_id"),
    )

    def __repr__(self) -> str:
        return f"<LoungeModel(id={self.id}, name={self.name}, status={self.status})>"
