"""Mock providers for testing."""

from .notification import MockEmailProvider, MockPushProvider, MockQueueProvider
from .persistence import MockPersistenceProvider
from .storage import MockStorageProvider
from .container import build_test_container

__all__ = [
    "MockEmailProvider",
    "MockPersistenceProvider",
    "MockPushProvider",
    "MockQueueProvider",
    "MockStorageProvider",
    "build_test_container",
]
