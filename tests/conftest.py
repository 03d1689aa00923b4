"""Test configuration and shared builders."""

from datetime import date
from io import BytesIO
from uuid import uuid4

from PIL import Image

from summit.config import AuthSettings
from summit.domain.model import Delegate, Event
from summit.domain.value import (
    AttendanceMode,
    DelegateId,
    DelegateType,
    EventId,
    Identification,
    IdentificationType,
    Title,
)
from summit.util.jwt import create_token


def make_event(event_year: int = 2026, name: str = "Annual Summit") -> Event:
    """Build an event for the given year."""
    return Event(id=EventId(uuid4()), name=name, event_year=event_year)


def make_delegate(event: Event | None = None, **overrides) -> Delegate:
    """Build a pending delegate with realistic defaults.

    Any field can be overridden, e.g. ``make_delegate(status=DelegateStatus.APPROVED)``.
    """
    event = event or make_event()
    fields = {
        "id": DelegateId(uuid4()),
        "title": Title.DR,
        "first_name": "Amina",
        "last_name": "Yusuf",
        "email": f"amina.{uuid4().hex[:8]}@conference.org",
        "phone_number": "+254700000001",
        "nationality": "Kenyan",
        "organization": "Ministry of Health",
        "event_id": event.id,
        "event_year": event.event_year,
        "delegate_type": DelegateType.BOARD_MEMBER,
        "attendance_mode": AttendanceMode.PHYSICAL,
        "identification": Identification(
            type=IdentificationType.PASSPORT,
            number="A1234567",
            expiry_date=date(2030, 1, 1),
        ),
        "languages_spoken": ["English", "Swahili"],
    }
    fields.update(overrides)
    return Delegate(**fields)


def admin_token(
    settings: AuthSettings | None = None, subject: str = "admin-1", role: str = "admin"
) -> str:
    """Bearer token carrying an admin role."""
    return create_token(
        subject, "admin@conference.org", [role], settings or AuthSettings()
    )


def delegate_token(delegate: Delegate, settings: AuthSettings | None = None) -> str:
    """Bearer token for a delegate (no roles)."""
    return create_token(str(delegate.id), delegate.email, [], settings or AuthSettings())


def image_bytes(image_format: str = "PNG", size: tuple[int, int] = (8, 8)) -> bytes:
    """A tiny solid-colour image encoded in the given format."""
    buffer = BytesIO()
    Image.new("RGB", size, "#004a99").save(buffer, format=image_format)
    return buffer.getvalue()


def registration_payload(event_year: int = 2026, **overrides) -> dict:
    """Registration fields as a client would submit them."""
    payload = {
        "title": "Dr.",
        "first_name": "Kwame",
        "last_name": "Mensah",
        "email": "Kwame.Mensah@Conference.org",
        "phone_number": "+233200000001",
        "nationality": "Ghanaian",
        "organization": "University of Ghana",
        "event_year": event_year,
        "delegate_type": "observer",
        "attendance_mode": "physical",
        "identification": {
            "type": "passport",
            "number": "G0000001",
            "expiry_date": "2031-05-01",
        },
        "languages_spoken": ["English", "Twi"],
        "password": "secret-pass",
    }
    payload.update(overrides)
    return payload
