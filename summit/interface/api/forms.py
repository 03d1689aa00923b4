"""Parsing of the multipart registration form.

Browsers and the mobile app send nested objects as JSON strings and the list
of spoken languages either as a JSON array or a comma-separated string.
"""

import json
from typing import Any

from starlette.datastructures import FormData, UploadFile

from summit.application.usecase.delegate import RegisterDelegateRequest
from summit.domain.error import ValidationError
from summit.domain.service import UploadedFile

JSON_FIELDS = (
    "identification",
    "address",
    "emergency_contact",
    "accommodation_details",
    "flight_details",
    "social_media",
)
FILE_FIELDS = ("profile_picture", "identification_document")


def parse_languages(values: list[str]) -> list[str]:
    """Accept repeated fields, a JSON array, or a comma-separated string."""
    if len(values) == 1:
        raw = values[0].strip()
        if raw.startswith("["):
            try:
                parsed = json.loads(raw)
            except json.JSONDecodeError:
                raise ValidationError("Invalid JSON in field languages_spoken")
            if not isinstance(parsed, list):
                raise ValidationError("languages_spoken must be a list")
            return [str(v) for v in parsed]
        return [part.strip() for part in raw.split(",") if part.strip()]
    return [v.strip() for v in values if v.strip()]


async def read_upload(upload: UploadFile) -> UploadedFile | None:
    """Read a submitted file, ignoring empty file inputs."""
    if not upload.filename:
        return None
    content = await upload.read()
    return UploadedFile(
        filename=upload.filename,
        content=content,
        content_type=upload.content_type or "application/octet-stream",
    )


async def parse_registration_form(form: FormData) -> RegisterDelegateRequest:
    """Build a registration request from multipart form data.

    Raises:
        ValidationError: If a JSON field is malformed
        pydantic.ValidationError: If the fields don't validate
    """
    data: dict[str, Any] = {}
    for key, value in form.multi_items():
        if isinstance(value, UploadFile) or key == "languages_spoken":
            continue
        if value == "":
            continue
        data[key] = value

    for key in JSON_FIELDS:
        raw = data.get(key)
        if isinstance(raw, str):
            try:
                data[key] = json.loads(raw)
            except json.JSONDecodeError:
                raise ValidationError(f"Invalid JSON in field {key}")

    languages = [v for v in form.getlist("languages_spoken") if isinstance(v, str)]
    if languages:
        data["languages_spoken"] = parse_languages(languages)

    for key in FILE_FIELDS:
        upload = form.get(key)
        if isinstance(upload, UploadFile):
            data[key] = await read_upload(upload)

    return RegisterDelegateRequest.model_validate(data)
