"""Unit tests for multipart registration form parsing."""

import json
from io import BytesIO

import pydantic
import pytest
from starlette.datastructures import FormData, Headers, UploadFile

from summit.domain.error import ValidationError
from summit.interface.api.forms import parse_languages, parse_registration_form
from tests.conftest import image_bytes, registration_payload


def _form(payload: dict, *extra: tuple) -> FormData:
    items = []
    for key, value in payload.items():
        if key == "languages_spoken":
            items.extend(("languages_spoken", lang) for lang in value)
        elif isinstance(value, dict):
            items.append((key, json.dumps(value)))
        else:
            items.append((key, str(value)))
    return FormData([*items, *extra])


def _upload(filename: str, content: bytes, content_type: str) -> UploadFile:
    return UploadFile(
        file=BytesIO(content),
        filename=filename,
        headers=Headers({"content-type": content_type}),
    )


class TestParseLanguages:
    """Tests for the languages_spoken formats."""

    @pytest.mark.parametrize(
        "values, expected",
        [
            (['["English", "French"]'], ["English", "French"]),
            (["English, French ,"], ["English", "French"]),
            (["English", " French "], ["English", "French"]),
            (["Swahili"], ["Swahili"]),
        ],
    )
    def test_formats(self, values, expected):
        assert parse_languages(values) == expected

    def test_malformed_json_array(self):
        with pytest.raises(ValidationError, match="languages_spoken"):
            parse_languages(['["English"'])


class TestParseRegistrationForm:
    """Tests for building the registration request."""

    @pytest.mark.asyncio
    async def test_nested_json_fields_and_repeated_languages(self):
        form = _form(
            registration_payload(address={"city": "Kumasi", "country": "Ghana"})
        )

        request = await parse_registration_form(form)

        assert request.first_name == "Kwame"
        assert request.identification.number == "G0000001"
        assert request.address.city == "Kumasi"
        assert request.languages_spoken == ["English", "Twi"]
        assert request.profile_picture is None

    @pytest.mark.asyncio
    async def test_empty_strings_are_ignored(self):
        form = _form(registration_payload(organization="", bio=""))

        request = await parse_registration_form(form)

        assert request.organization is None
        assert request.bio is None

    @pytest.mark.asyncio
    async def test_files_are_read(self):
        content = image_bytes("PNG")
        form = _form(
            registration_payload(),
            ("profile_picture", _upload("me.png", content, "image/png")),
            ("identification_document", _upload("", b"", "application/octet-stream")),
        )

        request = await parse_registration_form(form)

        assert request.profile_picture.filename == "me.png"
        assert request.profile_picture.content == content
        assert request.profile_picture.content_type == "image/png"
        assert request.identification_document is None

    @pytest.mark.asyncio
    async def test_invalid_json_field(self):
        payload = registration_payload()
        form = _form(payload, ("address", "{not json"))

        with pytest.raises(ValidationError, match="address"):
            await parse_registration_form(form)

    @pytest.mark.asyncio
    async def test_missing_required_field(self):
        payload = registration_payload()
        del payload["first_name"]

        with pytest.raises(pydantic.ValidationError):
            await parse_registration_form(_form(payload))
