"""initial_schema

Create the registration schema:
- Events (one per year)
- Delegates (registration data, lifecycle audit fields, credentials)

Revision ID: 3c1f0e7a9b2d
Revises:
Create Date: 2026-10-18 09:12:44.518203

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3c1f0e7a9b2d"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column(
            "updated_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
    ]


def upgrade() -> None:
    """Upgrade schema."""
    # gen_random_uuid()
    op.execute('CREATE EXTENSION IF NOT EXISTS "pgcrypto"')

    # ========================================================================
    # EVENTS table
    # ========================================================================
    op.create_table(
        "events",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("gen_random_uuid()"),
            nullable=False,
        ),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("event_year", sa.Integer(), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("event_year", name="uq_events_event_year"),
    )

    # ========================================================================
    # DELEGATES table
    # ========================================================================
    op.create_table(
        "delegates",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("gen_random_uuid()"),
            nullable=False,
        ),
        sa.Column("title", sa.String(10), nullable=False),
        sa.Column("first_name", sa.String(255), nullable=False),
        sa.Column("last_name", sa.String(255), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("phone_number", sa.String(50), nullable=False),
        sa.Column("nationality", sa.String(100), nullable=False),
        sa.Column("organization", sa.String(255), nullable=True),
        sa.Column("position", sa.String(255), nullable=True),
        sa.Column("bio", sa.Text(), nullable=True),
        sa.Column("profile_picture", sa.Text(), nullable=True),
        sa.Column("event_id", sa.UUID(), nullable=False),
        sa.Column("event_year", sa.Integer(), nullable=False),
        sa.Column("delegate_type", sa.String(50), nullable=False),
        sa.Column("attendance_mode", sa.String(20), nullable=False),
        sa.Column("identification", postgresql.JSONB(), nullable=False),
        sa.Column("languages_spoken", postgresql.ARRAY(sa.String(100)), nullable=False),
        sa.Column("preferred_language", sa.String(100), nullable=True),
        sa.Column("status", sa.String(20), nullable=False, server_default="pending"),
        sa.Column(
            "registration_date",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column("approved_by", sa.String(255), nullable=True),
        sa.Column("approval_date", sa.TIMESTAMP(timezone=True), nullable=True),
        sa.Column("rejected_by", sa.String(255), nullable=True),
        sa.Column("rejection_date", sa.TIMESTAMP(timezone=True), nullable=True),
        sa.Column("rejection_reason", sa.Text(), nullable=True),
        sa.Column(
            "has_checked_in", sa.Boolean(), nullable=False, server_default="false"
        ),
        sa.Column("checked_in_by", sa.String(255), nullable=True),
        sa.Column("check_in_date", sa.TIMESTAMP(timezone=True), nullable=True),
        sa.Column("check_in_location", sa.String(255), nullable=True),
        sa.Column("check_in_notes", sa.Text(), nullable=True),
        sa.Column("address", postgresql.JSONB(), nullable=True),
        sa.Column("emergency_contact", postgresql.JSONB(), nullable=True),
        sa.Column(
            "has_accommodation", sa.Boolean(), nullable=False, server_default="false"
        ),
        sa.Column("accommodation_details", postgresql.JSONB(), nullable=True),
        sa.Column(
            "requires_visa", sa.Boolean(), nullable=False, server_default="false"
        ),
        sa.Column("visa_status", sa.String(100), nullable=True),
        sa.Column("arrival_date", sa.Date(), nullable=True),
        sa.Column("departure_date", sa.Date(), nullable=True),
        sa.Column("flight_details", postgresql.JSONB(), nullable=True),
        sa.Column("social_media", postgresql.JSONB(), nullable=True),
        sa.Column(
            "consent_to_photography",
            sa.Boolean(),
            nullable=False,
            server_default="true",
        ),
        sa.Column(
            "consent_to_data_processing",
            sa.Boolean(),
            nullable=False,
            server_default="true",
        ),
        sa.Column("password_hash", sa.String(255), nullable=True),
        sa.Column("reset_password_pin", sa.String(6), nullable=True),
        sa.Column(
            "reset_password_expires", sa.TIMESTAMP(timezone=True), nullable=True
        ),
        sa.Column(
            "push_tokens",
            postgresql.ARRAY(sa.String(255)),
            nullable=False,
            server_default="{}",
        ),
        *_timestamps(),
        sa.ForeignKeyConstraint(["event_id"], ["events.id"], ondelete="RESTRICT"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint(
            "email", "event_year", name="uq_delegates_email_event_year"
        ),
        sa.CheckConstraint(
            "status IN ('pending', 'approved', 'rejected', 'suspended', 'checked_in')",
            name="ck_delegates_status",
        ),
    )
    op.create_index("idx_delegates_event_status", "delegates", ["event_id", "status"])
    op.create_index("idx_delegates_nationality", "delegates", ["nationality"])
    op.create_index("idx_delegates_delegate_type", "delegates", ["delegate_type"])
    op.create_index("idx_delegates_event_year", "delegates", ["event_year"])
    op.create_index(
        "idx_delegates_created_at",
        "delegates",
        [sa.text("created_at DESC")],
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index("idx_delegates_created_at", table_name="delegates")
    op.drop_index("idx_delegates_event_year", table_name="delegates")
    op.drop_index("idx_delegates_delegate_type", table_name="delegates")
    op.drop_index("idx_delegates_nationality", table_name="delegates")
    op.drop_index("idx_delegates_event_status", table_name="delegates")
    op.drop_table("delegates")
    op.drop_table("events")
