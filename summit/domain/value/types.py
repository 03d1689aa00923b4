"""Domain value objects for summit.

Value objects are immutable and defined by their values, not identity.
Enumerations carry the wire values used in requests, responses and storage.
"""

from datetime import date
from enum import Enum

from pydantic import BaseModel, ConfigDict, field_validator


class ValueObject(BaseModel):
    """Immutable value object compared by value, not identity."""

    model_config = ConfigDict(frozen=True)


class DelegateStatus(str, Enum):
    """Lifecycle status of a delegate registration."""

    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"
    SUSPENDED = "suspended"
    CHECKED_IN = "checked_in"


class AttendanceMode(str, Enum):
    """How the delegate attends the event."""

    PHYSICAL = "physical"
    VIRTUAL = "virtual"
    HYBRID = "hybrid"


class IdentificationType(str, Enum):
    """Kind of identity document presented at registration."""

    PASSPORT = "passport"
    NATIONAL_ID = "national_id"
    DRIVERS_LICENSE = "drivers_license"
    DIPLOMATIC_ID = "diplomatic_id"


class DelegateType(str, Enum):
    """Delegate classification."""

    BOARD_MEMBER = "board_member"
    OBSERVER = "observer"
    GUEST = "guest"
    SHAF_STAFF = "shaf_staff"
    MINISTRY_STAFF = "ministry_staff"
    PRESS = "press"
    OTHER = "other"


class Title(str, Enum):
    """Honorific used in correspondence."""

    MR = "Mr."
    MRS = "Mrs."
    MS = "Ms."
    DR = "Dr."
    PROF = "Prof."
    REV = "Rev."
    HON = "Hon."
    ENG = "Eng."


class Identification(ValueObject):
    """Identity document details."""

    type: IdentificationType
    number: str
    expiry_date: date | None = None
    issuing_country: str | None = None
    document_url: str | None = None

    @field_validator("number")
    @classmethod
    def validate_number(cls, v: str) -> str:
        """Document number must not be blank."""
        if not v.strip():
            raise ValueError("Identification number must not be empty")
        return v.strip()


class Address(ValueObject):
    """Postal address."""

    street: str | None = None
    city: str | None = None
    state: str | None = None
    country: str | None = None
    postal_code: str | None = None


class EmergencyContact(ValueObject):
    """Person to contact in an emergency."""

    name: str | None = None
    relationship: str | None = None
    phone_number: str | None = None
    email: str | None = None


class AccommodationDetails(ValueObject):
    """Hotel booking details."""

    hotel_name: str | None = None
    check_in: date | None = None
    check_out: date | None = None
    room_preference: str | None = None


class FlightDetails(ValueObject):
    """Arrival and departure flight numbers."""

    arrival_flight: str | None = None
    departure_flight: str | None = None


class SocialMedia(ValueObject):
    """Social media handles."""

    linkedin: str | None = None
    twitter: str | None = None


class SendResult(ValueObject):
    """Outcome of a best-effort delivery attempt.

    Callers may inspect it but delivery failures never propagate as errors.
    """

    success: bool
    error: str | None = None
    delivered: int = 0

    @classmethod
    def ok(cls, delivered: int = 1) -> "SendResult":
        return cls(success=True, delivered=delivered)

    @classmethod
    def fail(cls, error: str) -> "SendResult":
        return cls(success=False, error=error)
