"""Event repository interface."""

from abc import ABC, abstractmethod

from summit.domain.model.event import Event
from summit.domain.value import EventId


class EventRepository(ABC):
    """Repository for Event entity."""

    @abstractmethod
    async def find_by_id(self, event_id: EventId) -> Event | None:
        """Find an event by ID."""
        pass

    @abstractmethod
    async def find_by_year(self, event_year: int) -> Event | None:
        """Find the event held in a given year.

        Args:
            event_year: Four-digit year

        Returns:
            The event if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, event: Event) -> Event:
        """Save an event (create or update)."""
        pass
