"""Event domain service."""

from uuid import uuid4

import logfire

from summit.domain.error import NotFoundError
from summit.domain.model import Event
from summit.domain.repository import EventRepository
from summit.domain.value import EventId


class EventService:
    """Domain service for resolving events."""

    def __init__(self, event_repository: EventRepository) -> None:
        self.event_repository = event_repository

    async def get_by_year(self, event_year: int) -> Event:
        """Get the event for a year.

        Raises:
            NotFoundError: If no event is held that year
        """
        event = await self.event_repository.find_by_year(event_year)
        if not event:
            raise NotFoundError(
                "Event", str(event_year), f"Event for year {event_year} not found"
            )
        return event

    async def create_event(self, name: str, event_year: int) -> Event:
        """Create the event for a year."""
        with logfire.span("event_service.create_event", event_year=event_year):
            event = Event(id=EventId(uuid4()), name=name, event_year=event_year)
            await self.event_repository.save(event)
            logfire.info("Event created", event_id=str(event.id), event_year=event_year)
            return event
