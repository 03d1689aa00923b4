"""Mock persistence providers for testing."""

from dishka import Scope, provide

from summit.domain.repository import DelegateRepository, EventRepository
from summit.persistence.repository.inmemory import (
    InMemoryDelegateRepository,
    InMemoryEventRepository,
)
from summit.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    APP-scoped so that every request served by one test container sees the
    same data; each test builds its own container.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_delegate_repository(self) -> DelegateRepository:
        """Provide in-memory Delegate repository."""
        return InMemoryDelegateRepository()

    @provide(scope=Scope.APP)
    def get_event_repository(self) -> EventRepository:
        """Provide in-memory Event repository."""
        return InMemoryEventRepository()
