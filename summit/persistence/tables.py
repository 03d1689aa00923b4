"""SQLAlchemy table definitions for summit.

These table definitions are used with SQLAlchemy Core queries.
They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    Boolean,
    Column,
    Date,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import ARRAY, JSONB, TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# EVENTS TABLE
# ============================================================================
events_table = Table(
    "events",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column("name", String(255), nullable=False),
    Column("event_year", Integer, nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("event_year", name="uq_events_event_year"),
)

# ============================================================================
# DELEGATES TABLE
# ============================================================================
delegates_table = Table(
    "delegates",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    # Identity
    Column("title", String(10), nullable=False),
    Column("first_name", String(255), nullable=False),
    Column("last_name", String(255), nullable=False),
    Column("email", String(255), nullable=False),  # Always lower-cased
    Column("phone_number", String(50), nullable=False),
    Column("nationality", String(100), nullable=False),
    Column("organization", String(255), nullable=True),
    Column("position", String(255), nullable=True),
    Column("bio", Text, nullable=True),
    Column("profile_picture", Text, nullable=True),
    # Event association
    Column(
        "event_id", UUID, ForeignKey("events.id", ondelete="RESTRICT"), nullable=False
    ),
    Column("event_year", Integer, nullable=False),
    # Classification
    Column("delegate_type", String(50), nullable=False),
    Column("attendance_mode", String(20), nullable=False),
    Column("identification", JSONB, nullable=False),
    Column("languages_spoken", ARRAY(String(100)), nullable=False),
    Column("preferred_language", String(100), nullable=True),
    # Lifecycle
    Column("status", String(20), nullable=False, server_default="pending"),
    Column(
        "registration_date",
        TIMESTAMP(timezone=True),
        nullable=False,
        server_default="NOW()",
    ),
    Column("approved_by", String(255), nullable=True),
    Column("approval_date", TIMESTAMP(timezone=True), nullable=True),
    Column("rejected_by", String(255), nullable=True),
    Column("rejection_date", TIMESTAMP(timezone=True), nullable=True),
    Column("rejection_reason", Text, nullable=True),
    Column("has_checked_in", Boolean, nullable=False, server_default="false"),
    Column("checked_in_by", String(255), nullable=True),
    Column("check_in_date", TIMESTAMP(timezone=True), nullable=True),
    Column("check_in_location", String(255), nullable=True),
    Column("check_in_notes", Text, nullable=True),
    # Logistics (nested objects stored as JSONB)
    Column("address", JSONB, nullable=True),
    Column("emergency_contact", JSONB, nullable=True),
    Column("has_accommodation", Boolean, nullable=False, server_default="false"),
    Column("accommodation_details", JSONB, nullable=True),
    Column("requires_visa", Boolean, nullable=False, server_default="false"),
    Column("visa_status", String(100), nullable=True),
    Column("arrival_date", Date, nullable=True),
    Column("departure_date", Date, nullable=True),
    Column("flight_details", JSONB, nullable=True),
    Column("social_media", JSONB, nullable=True),
    Column("consent_to_photography", Boolean, nullable=False, server_default="true"),
    Column(
        "consent_to_data_processing", Boolean, nullable=False, server_default="true"
    ),
    # Credentials
    Column("password_hash", String(255), nullable=True),
    Column("reset_password_pin", String(6), nullable=True),
    Column("reset_password_expires", TIMESTAMP(timezone=True), nullable=True),
    Column("push_tokens", ARRAY(String(255)), nullable=False, server_default="{}"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("email", "event_year", name="uq_delegates_email_event_year"),
)

Index(
    "idx_delegates_event_status", delegates_table.c.event_id, delegates_table.c.status
)
Index("idx_delegates_nationality", delegates_table.c.nationality)
Index("idx_delegates_delegate_type", delegates_table.c.delegate_type)
Index("idx_delegates_event_year", delegates_table.c.event_year)
Index("idx_delegates_created_at", delegates_table.c.created_at.desc())
