"""Event entity.

Only the fields delegate registration depends on are modelled here.
"""

from datetime import datetime

from pydantic import Field

from summit.domain.model.common import DomainModel, utcnow
from summit.domain.value import EventId


class Event(DomainModel):
    """A yearly event delegates register for. One event per year."""

    id: EventId
    name: str
    event_year: int
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)
