"""Unit tests for the password reset use cases."""

import pytest

from summit.application.usecase.auth import (
    ConfirmPasswordResetRequest,
    ConfirmPasswordResetUseCase,
    RequestPasswordResetRequest,
    RequestPasswordResetUseCase,
)
from summit.application.usecase.auth.request_password_reset import (
    RESET_REQUESTED_MESSAGE,
)
from summit.domain.error import PasswordResetError, ValidationError
from summit.domain.repository import DelegateRepository
from summit.domain.service import CredentialService, EmailSender, LifecycleService
from summit.domain.value import ActorId, DelegateStatus
from tests.conftest import make_delegate
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestRequestPasswordReset:
    """Tests for issuing a reset PIN."""

    @pytest.mark.asyncio
    async def test_known_email_receives_pin(self, unit_env):
        # Arrange
        repo = await unit_env.get(DelegateRepository)
        use_case = await unit_env.get(RequestPasswordResetUseCase)
        email = await unit_env.get(EmailSender)
        delegate = await repo.save(make_delegate())

        # Act
        result = await use_case.execute(
            RequestPasswordResetRequest(email=delegate.email.upper())
        )

        # Assert
        assert result.message == RESET_REQUESTED_MESSAGE
        stored = await repo.find_by_id(delegate.id)
        [message] = email.sent
        assert message.subject == "Password Reset PIN"
        assert stored.reset_password_pin in message.html
        assert "10 minutes" in message.html

    @pytest.mark.asyncio
    async def test_unknown_email_gets_same_answer(self, unit_env):
        use_case = await unit_env.get(RequestPasswordResetUseCase)
        email = await unit_env.get(EmailSender)

        result = await use_case.execute(
            RequestPasswordResetRequest(email="ghost@conference.org")
        )

        assert result.message == RESET_REQUESTED_MESSAGE
        assert email.sent == []

    @pytest.mark.asyncio
    async def test_storage_failure(self, unit_env, monkeypatch):
        repo = await unit_env.get(DelegateRepository)
        use_case = await unit_env.get(RequestPasswordResetUseCase)
        delegate = await repo.save(make_delegate())

        async def broken_update(*_):
            raise RuntimeError("database unavailable")

        monkeypatch.setattr(repo, "update_fields", broken_update)

        with pytest.raises(ValidationError, match="Could not process"):
            await use_case.execute(RequestPasswordResetRequest(email=delegate.email))


class TestConfirmPasswordReset:
    """Tests for setting a new password with a PIN."""

    @pytest.mark.asyncio
    async def test_confirm_then_login_with_new_password(self, unit_env):
        # Arrange
        repo = await unit_env.get(DelegateRepository)
        credentials = await unit_env.get(CredentialService)
        use_case = await unit_env.get(ConfirmPasswordResetUseCase)
        delegate = await repo.save(make_delegate(status=DelegateStatus.APPROVED))
        _, pin = await credentials.issue_reset_pin(delegate.email)

        # Act
        result = await use_case.execute(
            ConfirmPasswordResetRequest(
                email=delegate.email, reset_token=f" {pin} ", new_password="brand-new"
            )
        )

        # Assert
        assert result.message == "Your password has been successfully reset."
        stored = await repo.find_by_id(delegate.id)
        assert stored.reset_password_pin is None
        assert (await credentials.authenticate(delegate.email, "brand-new")).id == delegate.id

    @pytest.mark.asyncio
    async def test_wrong_pin(self, unit_env):
        repo = await unit_env.get(DelegateRepository)
        credentials = await unit_env.get(CredentialService)
        use_case = await unit_env.get(ConfirmPasswordResetUseCase)
        delegate = await repo.save(make_delegate())
        _, pin = await credentials.issue_reset_pin(delegate.email)
        wrong = "000000" if pin != "000000" else "111111"

        with pytest.raises(PasswordResetError):
            await use_case.execute(
                ConfirmPasswordResetRequest(
                    email=delegate.email, reset_token=wrong, new_password="brand-new"
                )
            )

    @pytest.mark.asyncio
    async def test_non_ascii_pin_is_rejected(self, unit_env):
        repo = await unit_env.get(DelegateRepository)
        credentials = await unit_env.get(CredentialService)
        use_case = await unit_env.get(ConfirmPasswordResetUseCase)
        delegate = await repo.save(make_delegate())
        await credentials.issue_reset_pin(delegate.email)

        with pytest.raises(PasswordResetError, match="Invalid password reset PIN"):
            await use_case.execute(
                ConfirmPasswordResetRequest(
                    email=delegate.email, reset_token="12345é", new_password="brand-new"
                )
            )

    def test_accepts_camel_case_token(self):
        request = ConfirmPasswordResetRequest.model_validate(
            {"email": "a@b.org", "resetToken": "123456", "new_password": "brand-new"}
        )

        assert request.reset_token == "123456"

    @pytest.mark.asyncio
    async def test_keeps_status_approved_concurrently(self, unit_env, monkeypatch):
        # Arrange
        repo = await unit_env.get(DelegateRepository)
        credentials = await unit_env.get(CredentialService)
        lifecycle = await unit_env.get(LifecycleService)
        use_case = await unit_env.get(ConfirmPasswordResetUseCase)
        delegate = await repo.save(make_delegate())
        _, pin = await credentials.issue_reset_pin(delegate.email)
        update_fields = repo.update_fields

        async def approve_then_update(delegate_id, changes):
            await lifecycle.approve(delegate_id, ActorId("admin-1"))
            return await update_fields(delegate_id, changes)

        monkeypatch.setattr(repo, "update_fields", approve_then_update)

        # Act
        await use_case.execute(
            ConfirmPasswordResetRequest(
                email=delegate.email, reset_token=pin, new_password="brand-new"
            )
        )

        # Assert
        stored = await repo.find_by_id(delegate.id)
        assert stored.status == DelegateStatus.APPROVED
        assert stored.approved_by == "admin-1"
        assert stored.reset_password_pin is None
