"""Delegate entity.

A delegate is a person registered to attend a specific event year. The record
carries identity, classification and logistics data, the lifecycle status and
its audit trail, and credential material that must never leave the service.
"""

from datetime import date, datetime

from pydantic import Field

from summit.domain.model.common import DomainModel, utcnow
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


class Delegate(DomainModel):
    """Delegate aggregate root.

    Business rules:
    - (email, event_year) is unique
    - Status moves pending -> approved/rejected -> checked_in; checked_in is final
    - Credential fields are excluded from every serialised form
    """

    id: DelegateId

    # Identity
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

    # Event association (event_year is denormalised for the uniqueness rule)
    event_id: EventId
    event_year: int

    # Classification
    delegate_type: DelegateType
    attendance_mode: AttendanceMode
    identification: Identification
    languages_spoken: list[str]
    preferred_language: str | None = None

    # Lifecycle
    status: DelegateStatus = DelegateStatus.PENDING
    registration_date: datetime = Field(default_factory=utcnow)
    approved_by: ActorId | None = None
    approval_date: datetime | None = None
    rejected_by: ActorId | None = None
    rejection_date: datetime | None = None
    rejection_reason: str | None = None
    has_checked_in: bool = False
    checked_in_by: ActorId | None = None
    check_in_date: datetime | None = None
    check_in_location: str | None = None
    check_in_notes: str | None = None

    # Logistics
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

    # Credentials (never serialised)
    password_hash: str | None = Field(default=None, exclude=True, repr=False)
    reset_password_pin: str | None = Field(default=None, exclude=True, repr=False)
    reset_password_expires: datetime | None = Field(
        default=None, exclude=True, repr=False
    )
    push_tokens: list[str] = Field(default_factory=list, exclude=True, repr=False)

    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)

    @property
    def full_name(self) -> str:
        """First and last name."""
        return f"{self.first_name} {self.last_name}"

    @property
    def salutation(self) -> str:
        """Title followed by the full name, as used in correspondence."""
        return f"{self.title.value} {self.full_name}"
