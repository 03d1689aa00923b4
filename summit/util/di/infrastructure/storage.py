"""File storage infrastructure providers."""

from dishka import Scope, provide

from summit.adapter.cloudinary import CloudinaryFileStorage
from summit.config import StorageSettings
from summit.domain.service import FileStorage
from summit.util.di.base import ProviderBase


class StorageProvider(ProviderBase):
    """Storage component base."""

    __mock_component__ = "storage"


class ProdStorageProvider(StorageProvider):
    """Production storage provider uploading to Cloudinary."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_file_storage(self, settings: StorageSettings) -> FileStorage:
        return CloudinaryFileStorage(settings)
