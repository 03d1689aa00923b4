"""In-memory event repository for testing."""

from typing import Optional

from summit.domain.model import Event
from summit.domain.repository import EventRepository
from summit.domain.value import EventId


class InMemoryEventRepository(EventRepository):
    """In-memory implementation of EventRepository for testing."""

    def __init__(self) -> None:
        self._events: list[Event] = []

    async def find_by_id(self, event_id: EventId) -> Optional[Event]:
        """Find an event by ID."""
        for event in self._events:
            if event.id == event_id:
                return event
        return None

    async def find_by_year(self, event_year: int) -> Optional[Event]:
        """Find the event held in a given year."""
        for event in self._events:
            if event.event_year == event_year:
                return event
        return None

    async def save(self, event: Event) -> Event:
        """Save an event (create or update)."""
        for i, existing in enumerate(self._events):
            if existing.id == event.id:
                self._events[i] = event
                return event
        self._events.append(event)
        return event
