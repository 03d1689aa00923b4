"""Image normalisation with Pillow."""

from io import BytesIO
from pathlib import PurePath

import logfire
from PIL import Image, UnidentifiedImageError

from summit.domain.error import ValidationError
from summit.domain.service.upload_service import ImageNormalizer, UploadedFile

WEB_SAFE_FORMATS = {"JPEG", "PNG"}


class PillowImageNormalizer(ImageNormalizer):
    """Converts images that aren't JPEG or PNG (HEIC, TIFF, BMP, ...) to JPEG."""

    def __init__(self, quality: int = 90) -> None:
        self.quality = quality

    def normalize(self, file: UploadedFile) -> UploadedFile:
        """Return the file unchanged if web-safe, otherwise a JPEG copy.

        Raises:
            ValidationError: If the content isn't a readable image
        """
        try:
            image = Image.open(BytesIO(file.content))
            image_format = image.format
        except UnidentifiedImageError:
            raise ValidationError(f"Unsupported image file: {file.filename}")

        if image_format in WEB_SAFE_FORMATS:
            return file

        output = BytesIO()
        image.convert("RGB").save(output, format="JPEG", quality=self.quality)
        filename = f"{PurePath(file.filename).stem or 'upload'}.jpg"
        logfire.info(
            "Image converted to JPEG", filename=file.filename, source_format=image_format
        )
        return UploadedFile(
            filename=filename, content=output.getvalue(), content_type="image/jpeg"
        )
