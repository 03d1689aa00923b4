"""Mappers for converting between database rows and domain models.

Domain models are immutable pydantic models, so rows are mapped by hand.
Nested value objects live in JSONB columns; enums are stored as their values.
Credential fields are excluded from ``model_dump`` and are written explicitly.
"""

from enum import Enum
from typing import Any, Dict
from uuid import UUID

from pydantic import BaseModel

from summit.domain.model import Delegate, Event
from summit.domain.value import (
    AccommodationDetails,
    ActorId,
    Address,
    AttendanceMode,
    DelegateId,
    DelegateStatus,
    DelegateType,
    EmergencyContact,
    EventId,
    FlightDetails,
    Identification,
    SocialMedia,
    Title,
)

CREDENTIAL_FIELDS = (
    "password_hash",
    "reset_password_pin",
    "reset_password_expires",
    "push_tokens",
)


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def _nested(model: type[BaseModel], value: Any) -> Any:
    return model.model_validate(value) if value is not None else None


def column_value(value: Any) -> Any:
    """Convert a domain value to what the column expects."""
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json")
    return value


def changes_to_columns(changes: Dict[str, Any]) -> Dict[str, Any]:
    """Convert a dict of domain field changes to column values."""
    return {key: column_value(value) for key, value in changes.items()}


def row_to_delegate(row: Dict[str, Any]) -> Delegate:
    """Convert database row to Delegate domain model.

    Args:
        row: Database row as dict

    Returns:
        Delegate domain model
    """
    return Delegate(
        id=DelegateId(_uuid(row["id"])),
        title=Title(row["title"]),
        first_name=row["first_name"],
        last_name=row["last_name"],
        email=row["email"],
        phone_number=row["phone_number"],
        nationality=row["nationality"],
        organization=row.get("organization"),
        position=row.get("position"),
        bio=row.get("bio"),
        profile_picture=row.get("profile_picture"),
        event_id=EventId(_uuid(row["event_id"])),
        event_year=row["event_year"],
        delegate_type=DelegateType(row["delegate_type"]),
        attendance_mode=AttendanceMode(row["attendance_mode"]),
        identification=Identification.model_validate(row["identification"]),
        languages_spoken=list(row.get("languages_spoken") or []),
        preferred_language=row.get("preferred_language"),
        status=DelegateStatus(row["status"]),
        registration_date=row["registration_date"],
        approved_by=ActorId(row["approved_by"]) if row.get("approved_by") else None,
        approval_date=row.get("approval_date"),
        rejected_by=ActorId(row["rejected_by"]) if row.get("rejected_by") else None,
        rejection_date=row.get("rejection_date"),
        rejection_reason=row.get("rejection_reason"),
        has_checked_in=row.get("has_checked_in", False),
        checked_in_by=(
            ActorId(row["checked_in_by"]) if row.get("checked_in_by") else None
        ),
        check_in_date=row.get("check_in_date"),
        check_in_location=row.get("check_in_location"),
        check_in_notes=row.get("check_in_notes"),
        address=_nested(Address, row.get("address")),
        emergency_contact=_nested(EmergencyContact, row.get("emergency_contact")),
        has_accommodation=row.get("has_accommodation", False),
        accommodation_details=_nested(
            AccommodationDetails, row.get("accommodation_details")
        ),
        requires_visa=row.get("requires_visa", False),
        visa_status=row.get("visa_status"),
        arrival_date=row.get("arrival_date"),
        departure_date=row.get("departure_date"),
        flight_details=_nested(FlightDetails, row.get("flight_details")),
        social_media=_nested(SocialMedia, row.get("social_media")),
        consent_to_photography=row.get("consent_to_photography", True),
        consent_to_data_processing=row.get("consent_to_data_processing", True),
        password_hash=row.get("password_hash"),
        reset_password_pin=row.get("reset_password_pin"),
        reset_password_expires=row.get("reset_password_expires"),
        push_tokens=list(row.get("push_tokens") or []),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def delegate_to_dict(delegate: Delegate) -> Dict[str, Any]:
    """Convert Delegate domain model to database dict.

    Args:
        delegate: Delegate domain model

    Returns:
        Dict suitable for database insertion/update
    """
    data = {
        name: getattr(delegate, name)
        for name in Delegate.model_fields
        if name not in CREDENTIAL_FIELDS
    }
    data = changes_to_columns(data)
    for name in CREDENTIAL_FIELDS:
        data[name] = getattr(delegate, name)
    return data


def row_to_event(row: Dict[str, Any]) -> Event:
    """Convert database row to Event domain model."""
    return Event(
        id=EventId(_uuid(row["id"])),
        name=row["name"],
        event_year=row["event_year"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def event_to_dict(event: Event) -> Dict[str, Any]:
    """Convert Event domain model to database dict."""
    return event.model_dump()
