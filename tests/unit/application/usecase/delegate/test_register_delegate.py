"""Unit tests for RegisterDelegateUseCase."""

from uuid import uuid4

import pytest

from summit.application.usecase.delegate import (
    RegisterDelegateRequest,
    RegisterDelegateUseCase,
)
from summit.domain.error import DuplicateDelegateError, NotFoundError, ValidationError
from summit.domain.repository import DelegateRepository, EventRepository
from summit.domain.service import EmailSender, FileStorage, JobQueue, UploadedFile
from summit.domain.service.notification_service import SEND_PUSH_NOTIFICATION_JOB
from summit.domain.value import DelegateStatus
from tests.conftest import image_bytes, make_event, registration_payload
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def _seed_event(unit_env, year: int = 2026):
    repo = await unit_env.get(EventRepository)
    return await repo.save(make_event(year))


class TestRegisterDelegate:
    """Tests for delegate self-registration."""

    @pytest.mark.asyncio
    async def test_register_creates_pending_delegate(self, unit_env):
        # Arrange
        event = await _seed_event(unit_env)
        use_case = await unit_env.get(RegisterDelegateUseCase)
        request = RegisterDelegateRequest.model_validate(registration_payload())

        # Act
        result = await use_case.execute(request)

        # Assert
        assert result.status == DelegateStatus.PENDING
        assert result.email == "kwame.mensah@conference.org"
        assert result.event_id == event.id
        assert not hasattr(result, "password_hash")

        repo = await unit_env.get(DelegateRepository)
        stored = await repo.find_by_id(result.id)
        assert stored.password_hash
        assert stored.password_hash != "secret-pass"

    @pytest.mark.asyncio
    async def test_register_sends_confirmation_and_queues_push(self, unit_env):
        await _seed_event(unit_env)
        use_case = await unit_env.get(RegisterDelegateUseCase)
        emails = await unit_env.get(EmailSender)
        queue = await unit_env.get(JobQueue)

        result = await use_case.execute(
            RegisterDelegateRequest.model_validate(registration_payload())
        )

        assert [m.subject for m in emails.sent] == ["Registration Confirmation"]
        assert emails.sent[0].to == "kwame.mensah@conference.org"
        assert len(queue.jobs) == 1
        job = queue.jobs[0]
        assert job["name"] == SEND_PUSH_NOTIFICATION_JOB
        assert job["delay_seconds"] == 300
        assert job["payload"]["delegate_id"] == str(result.id)
        assert job["payload"]["title"] == "Registration Under Review"

    @pytest.mark.asyncio
    async def test_email_failure_does_not_fail_registration(self, unit_env):
        await _seed_event(unit_env)
        use_case = await unit_env.get(RegisterDelegateUseCase)
        emails = await unit_env.get(EmailSender)
        emails.fail_with = ConnectionError("SMTP down")

        result = await use_case.execute(
            RegisterDelegateRequest.model_validate(registration_payload())
        )

        assert result.status == DelegateStatus.PENDING

    @pytest.mark.asyncio
    async def test_duplicate_email_for_year_is_rejected(self, unit_env):
        await _seed_event(unit_env)
        use_case = await unit_env.get(RegisterDelegateUseCase)
        await use_case.execute(
            RegisterDelegateRequest.model_validate(registration_payload())
        )

        with pytest.raises(DuplicateDelegateError):
            await use_case.execute(
                RegisterDelegateRequest.model_validate(
                    registration_payload(email="kwame.mensah@CONFERENCE.org")
                )
            )

    @pytest.mark.asyncio
    async def test_unknown_event_year(self, unit_env):
        use_case = await unit_env.get(RegisterDelegateUseCase)

        with pytest.raises(NotFoundError, match="Event for year 2031 not found"):
            await use_case.execute(
                RegisterDelegateRequest.model_validate(
                    registration_payload(event_year=2031)
                )
            )

    @pytest.mark.asyncio
    async def test_event_id_must_match_year(self, unit_env):
        await _seed_event(unit_env)
        use_case = await unit_env.get(RegisterDelegateUseCase)

        with pytest.raises(ValidationError):
            await use_case.execute(
                RegisterDelegateRequest.model_validate(
                    registration_payload(event_id=str(uuid4()))
                )
            )

    @pytest.mark.asyncio
    async def test_uploads_are_stored(self, unit_env):
        """Profile picture and ID scan go to their folders; BMP becomes JPEG."""
        await _seed_event(unit_env)
        use_case = await unit_env.get(RegisterDelegateUseCase)
        storage = await unit_env.get(FileStorage)
        request = RegisterDelegateRequest.model_validate(
            {
                **registration_payload(),
                "profile_picture": UploadedFile(
                    filename="me.bmp",
                    content=image_bytes("BMP"),
                    content_type="image/bmp",
                ),
                "identification_document": UploadedFile(
                    filename="passport.pdf",
                    content=b"%PDF-1.4 test",
                    content_type="application/pdf",
                ),
            }
        )

        result = await use_case.execute(request)

        assert result.profile_picture == (
            "https://files.summit.test/delegates/profile-pictures/me.jpg"
        )
        assert result.identification.document_url == (
            "https://files.summit.test/delegates/documents/passport.pdf"
        )
        assert storage.uploads[result.profile_picture].content_type == "image/jpeg"

    def test_blank_languages_rejected(self):
        with pytest.raises(ValueError):
            RegisterDelegateRequest.model_validate(
                registration_payload(languages_spoken=[" ", ""])
            )
