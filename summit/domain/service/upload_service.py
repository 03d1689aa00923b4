"""File upload domain service."""

import asyncio

import logfire
from pydantic import BaseModel

from summit.domain.error import ValidationError


class UploadedFile(BaseModel):
    """A file received from a client."""

    filename: str
    content: bytes
    content_type: str = "application/octet-stream"


class FileStorage:
    """Interface for remote file storage."""

    async def upload(self, file: UploadedFile, folder: str) -> str:
        """Store a file.

        Args:
            file: File to store
            folder: Destination folder

        Returns:
            Public URL of the stored file
        """
        raise NotImplementedError


class ImageNormalizer:
    """Interface for converting uploaded images to a web-safe format."""

    def normalize(self, file: UploadedFile) -> UploadedFile:
        """Return the file unchanged or converted to JPEG."""
        raise NotImplementedError


class UploadService:
    """Domain service for storing delegate uploads."""

    def __init__(self, storage: FileStorage, normalizer: ImageNormalizer) -> None:
        self.storage = storage
        self.normalizer = normalizer

    async def upload(self, file: UploadedFile, folder: str) -> str:
        """Normalise images and upload the file.

        Raises:
            ValidationError: If the file is empty
        """
        with logfire.span(
            "upload_service.upload", filename=file.filename, folder=folder
        ):
            if not file.content:
                raise ValidationError(f"Uploaded file {file.filename} is empty")

            if file.content_type.startswith("image/"):
                # Pillow decoding is CPU bound
                loop = asyncio.get_running_loop()
                file = await loop.run_in_executor(None, self.normalizer.normalize, file)

            url = await self.storage.upload(file, folder)
            logfire.info("File uploaded", folder=folder, url=url)
            return url
