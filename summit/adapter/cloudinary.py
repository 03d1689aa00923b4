"""Cloudinary file storage.

Uses the signed upload REST endpoint with httpx. The signature is the SHA-1
of the sorted upload parameters followed by the API secret.
"""

import hashlib
import time

import httpx
import logfire

from summit.adapter.error import ProviderError
from summit.config import StorageSettings
from summit.domain.service.upload_service import FileStorage, UploadedFile


def sign_params(params: dict[str, str], api_secret: str) -> str:
    """Cloudinary request signature for the given parameters."""
    to_sign = "&".join(f"{key}={params[key]}" for key in sorted(params))
    return hashlib.sha1(f"{to_sign}{api_secret}".encode("utf-8")).hexdigest()


class CloudinaryFileStorage(FileStorage):
    """File storage backed by Cloudinary."""

    def __init__(self, settings: StorageSettings) -> None:
        """Initialize Cloudinary storage.

        Args:
            settings: Cloud name and API credentials
        """
        self.settings = settings
        self.upload_url = (
            f"https://api.cloudinary.com/v1_1/{settings.cloud_name}/auto/upload"
        )

    async def upload(self, file: UploadedFile, folder: str) -> str:
        """Upload a file and return its secure URL.

        Raises:
            ProviderError: If the upload fails
        """
        params = {"folder": folder, "timestamp": str(int(time.time()))}
        data = {
            **params,
            "api_key": self.settings.api_key,
            "signature": sign_params(params, self.settings.api_secret),
        }
        files = {"file": (file.filename, file.content, file.content_type)}

        try:
            async with httpx.AsyncClient(timeout=30.0) as client:
                response = await client.post(self.upload_url, data=data, files=files)
        except httpx.HTTPError as e:
            logfire.error("Cloudinary upload HTTP error", error=str(e))
            raise ProviderError("cloudinary", f"HTTP error: {e}")

        if response.status_code != 200:
            logfire.error(
                "Cloudinary upload failed",
                status_code=response.status_code,
                error=response.text,
            )
            raise ProviderError("cloudinary", f"Upload failed: {response.status_code}")

        return response.json()["secure_url"]


class MockFileStorage(FileStorage):
    """File storage for tests that keeps uploads in memory."""

    def __init__(self) -> None:
        self.uploads: dict[str, UploadedFile] = {}

    async def upload(self, file: UploadedFile, folder: str) -> str:
        url = f"https://files.summit.test/{folder}/{file.filename}"
        self.uploads[url] = file
        return url
