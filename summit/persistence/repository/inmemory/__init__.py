"""In-memory repository implementations for testing."""

from .delegate import InMemoryDelegateRepository
from .event import InMemoryEventRepository

__all__ = [
    "InMemoryDelegateRepository",
    "InMemoryEventRepository",
]
