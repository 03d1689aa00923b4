"""Delegate request and response models shared by delegate use cases."""

from datetime import date, datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator

from summit.domain.model import Delegate
from summit.domain.value import (
    AccommodationDetails,
    Address,
    AttendanceMode,
    DelegateStatus,
    DelegateType,
    EmergencyContact,
    FlightDetails,
    Identification,
    SocialMedia,
    Title,
)


def _strip_languages(value: list[str]) -> list[str]:
    languages = [lang.strip() for lang in value if lang and lang.strip()]
    if not languages:
        raise ValueError("At least one spoken language is required")
    return languages


class DelegateFields(BaseModel):
    """Fields a delegate supplies at registration."""

    title: Title
    first_name: str = Field(min_length=1, max_length=255)
    last_name: str = Field(min_length=1, max_length=255)
    email: EmailStr
    phone_number: str = Field(min_length=3, max_length=50)
    nationality: str = Field(min_length=1, max_length=100)
    organization: str | None = None
    position: str | None = None
    bio: str | None = None
    event_year: int = Field(ge=2000, le=2100)
    delegate_type: DelegateType
    attendance_mode: AttendanceMode
    identification: Identification
    languages_spoken: list[str] = Field(min_length=1)
    preferred_language: str | None = None
    address: Address | None = None
    emergency_contact: EmergencyContact | None = None
    has_accommodation: bool = False
    accommodation_details: AccommodationDetails | None = None
    requires_visa: bool = False
    visa_status: str | None = None
    arrival_date: date | None = None
    departure_date: date | None = None
    flight_details: FlightDetails | None = None
    social_media: SocialMedia | None = None
    consent_to_photography: bool = True
    consent_to_data_processing: bool = True

    @field_validator("languages_spoken")
    @classmethod
    def validate_languages(cls, v: list[str]) -> list[str]:
        return _strip_languages(v)


class DelegateUpdate(BaseModel):
    """Partial update of a delegate's own data.

    Lifecycle, audit and credential fields are not part of this model and
    are rejected if sent.
    """

    model_config = ConfigDict(extra="forbid")

    title: Title | None = None
    first_name: str | None = Field(default=None, min_length=1, max_length=255)
    last_name: str | None = Field(default=None, min_length=1, max_length=255)
    email: EmailStr | None = None
    phone_number: str | None = Field(default=None, min_length=3, max_length=50)
    nationality: str | None = Field(default=None, min_length=1, max_length=100)
    organization: str | None = None
    position: str | None = None
    bio: str | None = None
    profile_picture: str | None = None
    event_id: str | None = None
    event_year: int | None = Field(default=None, ge=2000, le=2100)
    delegate_type: DelegateType | None = None
    attendance_mode: AttendanceMode | None = None
    identification: Identification | None = None
    languages_spoken: list[str] | None = None
    preferred_language: str | None = None
    address: Address | None = None
    emergency_contact: EmergencyContact | None = None
    has_accommodation: bool | None = None
    accommodation_details: AccommodationDetails | None = None
    requires_visa: bool | None = None
    visa_status: str | None = None
    arrival_date: date | None = None
    departure_date: date | None = None
    flight_details: FlightDetails | None = None
    social_media: SocialMedia | None = None
    consent_to_photography: bool | None = None
    consent_to_data_processing: bool | None = None
    check_in_notes: str | None = None

    @field_validator("languages_spoken")
    @classmethod
    def validate_languages(cls, v: list[str] | None) -> list[str] | None:
        return _strip_languages(v) if v is not None else None


class DelegateResponse(BaseModel):
    """Public representation of a delegate. Never carries credentials."""

    id: UUID
    title: Title
    first_name: str
    last_name: str
    email: str
    phone_number: str
    nationality: str
    organization: str | None = None
    position: str | None = None
    bio: str | None = None
    profile_picture: str | None = None
    event_id: UUID
    event_year: int
    delegate_type: DelegateType
    attendance_mode: AttendanceMode
    identification: Identification
    languages_spoken: list[str]
    preferred_language: str | None = None
    status: DelegateStatus
    registration_date: datetime
    approved_by: str | None = None
    approval_date: datetime | None = None
    rejected_by: str | None = None
    rejection_date: datetime | None = None
    rejection_reason: str | None = None
    has_checked_in: bool
    checked_in_by: str | None = None
    check_in_date: datetime | None = None
    check_in_location: str | None = None
    check_in_notes: str | None = None
    address: Address | None = None
    emergency_contact: EmergencyContact | None = None
    has_accommodation: bool
    accommodation_details: AccommodationDetails | None = None
    requires_visa: bool
    visa_status: str | None = None
    arrival_date: date | None = None
    departure_date: date | None = None
    flight_details: FlightDetails | None = None
    social_media: SocialMedia | None = None
    consent_to_photography: bool
    consent_to_data_processing: bool
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_domain(cls, delegate: Delegate) -> "DelegateResponse":
        """Build the response from the domain model's public fields."""
        return cls.model_validate(delegate.model_dump())
