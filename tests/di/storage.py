"""Mock storage providers for testing."""

from dishka import Scope, provide

from summit.adapter.cloudinary import MockFileStorage
from summit.domain.service import FileStorage
from summit.util.di.infrastructure.storage import StorageProvider


class MockStorageProvider(StorageProvider):
    """Keeps uploads in memory and returns fake URLs."""

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_file_storage(self) -> FileStorage:
        return MockFileStorage()
