"""Domain value objects for summit."""

from summit.domain.value.identifiers import ActorId, DelegateId, EventId
from summit.domain.value.types import (
    AccommodationDetails,
    Address,
    AttendanceMode,
    DelegateStatus,
    DelegateType,
    EmergencyContact,
    FlightDetails,
    Identification,
    IdentificationType,
    SendResult,
    SocialMedia,
    Title,
)

__all__ = [
    # Identifiers
    "ActorId",
    "DelegateId",
    "EventId",
    # Enumerations
    "AttendanceMode",
    "DelegateStatus",
    "DelegateType",
    "IdentificationType",
    "Title",
    # Value objects
    "AccommodationDetails",
    "Address",
    "EmergencyContact",
    "FlightDetails",
    "Identification",
    "SendResult",
    "SocialMedia",
]
