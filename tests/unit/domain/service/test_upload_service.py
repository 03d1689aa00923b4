"""Unit tests for UploadService."""

import pytest

from summit.domain.error import ValidationError
from summit.domain.service import FileStorage, UploadedFile, UploadService
from tests.conftest import image_bytes
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestUpload:
    """Tests for upload method."""

    @pytest.mark.asyncio
    async def test_document_uploaded_unchanged(self, unit_env):
        # Arrange
        service = await unit_env.get(UploadService)
        storage = await unit_env.get(FileStorage)
        document = UploadedFile(
            filename="passport.pdf", content=b"%PDF-1.7", content_type="application/pdf"
        )

        # Act
        url = await service.upload(document, "delegates/documents")

        # Assert
        assert url == "https://files.summit.test/delegates/documents/passport.pdf"
        assert storage.uploads[url] == document

    @pytest.mark.asyncio
    async def test_tiff_converted_before_upload(self, unit_env):
        service = await unit_env.get(UploadService)
        storage = await unit_env.get(FileStorage)
        photo = UploadedFile(
            filename="photo.tiff", content=image_bytes("TIFF"), content_type="image/tiff"
        )

        url = await service.upload(photo, "delegates/profile-pictures")

        assert url.endswith("/photo.jpg")
        assert storage.uploads[url].content_type == "image/jpeg"

    @pytest.mark.asyncio
    async def test_empty_file_rejected(self, unit_env):
        service = await unit_env.get(UploadService)

        with pytest.raises(ValidationError, match="empty"):
            await service.upload(
                UploadedFile(filename="blank.png", content=b"", content_type="image/png"),
                "delegates/profile-pictures",
            )
