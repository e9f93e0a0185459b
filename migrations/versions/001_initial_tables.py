"""Create CigarMap tables

Revision ID: 001
Revises: 
Create Date: 2026-10-18 10:00:00.000000

"""
from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision: str = '001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create CigarMap tables"""

    # 1. Profiles (rows inserted by the Supabase sign-up trigger)
    op.create_table('profiles',
        sa.Column('id', postgresql.UUID(as_uuid=False), nullable=False),
        sa.Column('email', sa.String(255), nullable=True),
        sa.Column('full_name', sa.String(200), nullable=True),
        sa.Column('phone', sa.String(50), nullable=True),
        sa.Column('avatar_url', sa.String(1000), nullable=True),
        sa.Column('role', sa.String(20), nullable=False, server_default='owner'),
        sa.Column('onboarding_completed', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),

        sa.PrimaryKeyConstraint('id'),
        sa.CheckConstraint("role IN ('admin', 'owner')", name='ck_profiles_role'),
    )

    # 2. Cities
    op.create_table('cities',
        sa.Column('id', postgresql.UUID(as_uuid=False), nullable=False),
        sa.Column('name', sa.String(120), nullable=False),
        sa.Column('slug', sa.String(80), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('hero_image', sa.String(1000), nullable=True),
        sa.Column('is_featured', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),

        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('slug'),
    )

    # 3. Subscription plans
    op.create_table('subscription_plans',
        sa.Column('id', postgresql.UUID(as_uuid=False), nullable=False),
        sa.Column('name', sa.String(100), nullable=False),
        sa.Column('slug', sa.String(80), nullable=False),
        sa.Column('price_monthly', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('price_yearly', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('features', postgresql.JSON(), nullable=False, server_default='[]'),
        sa.Column('is_active', sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column('stripe_price_id_monthly', sa.String(100), nullable=True),
        sa.Column('stripe_price_id_yearly', sa.String(100), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),

        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('slug'),
        sa.CheckConstraint('price_monthly >= 0', name='ck_subscription_plans_price_monthly'),
        sa.CheckConstraint('price_yearly >= 0', name='ck_subscription_plans_price_yearly'),
    )

    # 4. Lounges
    op.create_table('lounges',
        sa.Column('id', postgresql.UUID(as_uuid=False), nullable=False),
        sa.Column('name', sa.String(200), nullable=False),
        sa.Column('city_id', postgresql.UUID(as_uuid=False), nullable=True),
        sa.Column('owner_id', postgresql.UUID(as_uuid=False), nullable=True),
        sa.Column('address', sa.String(500), nullable=True),
        sa.Column('phone', sa.String(50), nullable=True),
        sa.Column('website', sa.String(500), nullable=True),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('lounge_type', sa.String(30), nullable=False, server_default='Lounge'),
        sa.Column('amenities', postgresql.JSON(), nullable=False, server_default='[]'),
        sa.Column('images', postgresql.JSON(), nullable=False, server_default='[]'),
        sa.Column('cover_image', sa.String(1000), nullable=True),
        sa.Column('instagram', sa.String(100), nullable=True),
        sa.Column('facebook', sa.String(100), nullable=True),
        sa.Column('twitter', sa.String(100), nullable=True),
        sa.Column('tiktok', sa.String(100), nullable=True),
        sa.Column('wants_website', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('is_featured', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('is_claimed', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('is_verified', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('status', sa.String(20), nullable=False, server_default='pending'),
        sa.Column('subscription_plan_id', postgresql.UUID(as_uuid=False), nullable=True),
        sa.Column('subscription_status', sa.String(20), nullable=False, server_default='none'),
        sa.Column('subscription_ends_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),

        sa.PrimaryKeyConstraint('id'),
        sa.ForeignKeyConstraint(['city_id'], ['cities.id'], ondelete='SET NULL'),
        sa.ForeignKeyConstraint(['owner_id'], ['profiles.id'], ondelete='SET NULL'),
        sa.ForeignKeyConstraint(['subscription_plan_id'], ['subscription_plans.id'], ondelete='SET NULL'),
        sa.CheckConstraint("lounge_type IN ('Lounge', 'Bar', 'Retail', 'Private Club')", name='ck_lounges_lounge_type'),
        sa.CheckConstraint("status IN ('pending', 'approved', 'rejected')", name='ck_lounges_status'),
        sa.CheckConstraint(
            "subscription_status IN ('none', 'active', 'canceled', 'past_due')",
            name='ck_lounges_subscription_status'
        ),
    )

    op.create_index('ix_lounges_city_status', 'lounges', ['city_id', 'status'])
    op.create_index('ix_lounges_owner_id', 'lounges', ['owner_id'])

    # 5. Subscriptions
    op.create_table('subscriptions',
        sa.Column('id', postgresql.UUID(as_uuid=False), nullable=False),
        sa.Column('lounge_id', postgresql.UUID(as_uuid=False), nullable=True),
        sa.Column('plan_id', postgresql.UUID(as_uuid=False), nullable=True),
        sa.Column('stripe_subscription_id', sa.String(100), nullable=True),
        sa.Column('stripe_customer_id', sa.String(100), nullable=True),
        sa.Column('status', sa.String(30), nullable=False, server_default='active'),
        sa.Column('current_period_start', sa.DateTime(timezone=True), nullable=True),
        sa.Column('current_period_end', sa.DateTime(timezone=True), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),

        sa.PrimaryKeyConstraint('id'),
        sa.ForeignKeyConstraint(['lounge_id'], ['lounges.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['plan_id'], ['subscription_plans.id'], ondelete='SET NULL'),
    )

    op.create_index('ix_subscriptions_plan_status', 'subscriptions', ['plan_id', 'status'])

    # 6. Payments
    op.create_table('payments',
        sa.Column('id', postgresql.UUID(as_uuid=False), nullable=False),
        sa.Column('lounge_id', postgresql.UUID(as_uuid=False), nullable=True),
        sa.Column('subscription_id', postgresql.UUID(as_uuid=False), nullable=True),
        sa.Column('stripe_payment_intent_id', sa.String(100), nullable=True),
        sa.Column('amount', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('status', sa.String(30), nullable=False, server_default='pending'),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),

        sa.PrimaryKeyConstraint('id'),
        sa.ForeignKeyConstraint(['lounge_id'], ['lounges.id'], ondelete='SET NULL'),
        sa.ForeignKeyConstraint(['subscription_id'], ['subscriptions.id'], ondelete='SET NULL'),
    )

    op.create_index('ix_payments_status_created_at', 'payments', ['status', 'created_at'])

    # 7. Activity logs
    op.create_table('activity_logs',
        sa.Column('id', postgresql.UUID(as_uuid=False), nullable=False),
        sa.Column('user_id', postgresql.UUID(as_uuid=False), nullable=True),
        sa.Column('action', sa.String(100), nullable=False),
        sa.Column('entity_type', sa.String(50), nullable=True),
        sa.Column('entity_id', sa.String(64), nullable=True),
        sa.Column('metadata', postgresql.JSON(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),

        sa.PrimaryKeyConstraint('id'),
        sa.ForeignKeyConstraint(['user_id'], ['profiles.id'], ondelete='SET NULL'),
    )

    op.create_index('ix_activity_logs_created_at', 'activity_logs', ['created_at'])


def downgrade() -> None:
    """Drop CigarMap tables"""
    op.drop_table('activity_logs')
    op.drop_table('payments')
    op.drop_table('subscriptions')
    op.drop_table('lounges')
    op.drop_table('subscription_plans')
    op.drop_table('cities')
    op.drop_table('profiles')
