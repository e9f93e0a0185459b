# 📄 File: app/modules/user_management/infrastructure/database/models.py
# 🧭 Purpose (Layman Explanation):
# This file defines how profiles and the activity diary are stored in the database tables.
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy ORM models for the ``profiles`` and ``activity_logs`` tables, mapping domain
# models to PostgreSQL with check constraints on enumerated columns.
#
# 🔗 Dependencies:
# - SQLAlchemy ORM
# - app.shared.infrastructure.database.connection (shared Base)
#
# 🔄 Connected Modules / Calls From:
# - profile_repository_impl.py and activity_log_repository_impl.py (CRUD operations)
# - Directory lounge model (owner foreign key)
# - Alembic migrations (schema generation)

"""
SQLAlchemy Models for User Management

Models:
- ProfileModel: One row per identity-provider user; id equals the auth user id
- ActivityLogModel: Append-only audit trail
"""

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
# PROFILE MODEL
# =============================================================================

class ProfileModel(Base):
    """
    SQLAlchemy model for user profiles.

    Rows are inserted by the Supabase signup trigger; this service only updates them.
    """
    __tablename__ = "profiles"

    id = Column(
        Uuid(as_uuid=False),
        primary_key=True,
        comment="Auth user id"
    )
    email = Column(String(255), nullable=True, comment="Email copied from auth")
    full_name = Column(String(200), nullable=True)
    phone = Column(String(50), nullable=True)
    avatar_url = Column(String(1000), nullable=True, comment="Avatar URL in Supabase Storage")
    role = Column(
        String(20),
        nullable=False,
        default="owner",
        comment="admin | owner"
    )
    onboarding_completed = Column(Boolean, nullable=False, default=False)

    created_at = Column(DateTime(timezone=True), nullable=False, default=func.now())
    updated_at = Column(
        DateTime(timezone=True),
        nullable=False,
        default=func.now(),
        onupdate=func.now()
    )

    __table_args__ = (
        CheckConstraint("role IN ('admin', 'owner')", name="ck_profiles_role"),
    )

    def __repr__(self) -> str:
        return f"<ProfileModel(id={self.id}, role={self.role})>"


# =============================================================================
# ACTIVITY LOG MODEL
# =============================================================================

class ActivityLogModel(Base):
    """SQLAlchemy model for the audit trail."""
    __tablename__ = "activity_logs"

    id = Column(Uuid(as_uuid=False), primary_key=True, default=lambda: str(uuid4()))
    user_id = Column(
        Uuid(as_uuid=False),
        ForeignKey("profiles.id", ondelete="SET NULL"),
        nullable=True
    )
    action = Column(String(100), nullable=False)
    entity_type = Column(String(50), nullable=True)
    entity_id = Column(String(64), nullable=True)
    # "metadata" is reserved on declarative classes
    metadata_ = Column("metadata", JSON, nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=func.now())

    __table_args__ = (
        Index("ix_activity_logs_created_at", "created_at"),
    )

    def __repr__(self) -> str:
        return f"<ActivityLogModel(action={self.action}, entity_id={self.entity_id})>"
