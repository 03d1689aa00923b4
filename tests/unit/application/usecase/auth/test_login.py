"""Unit tests for LoginUseCase."""

import pytest

from summit.application.usecase.auth import LoginRequest, LoginUseCase
from summit.domain.error import UnauthorizedError
from summit.domain.repository import DelegateRepository
from summit.domain.service import CredentialService, JWTService
from summit.domain.value import DelegateStatus
from tests.conftest import make_delegate
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestLogin:
    """Tests for delegate login."""

    @pytest.mark.asyncio
    async def test_login_returns_token_and_profile(self, unit_env):
        # Arrange
        credentials = await unit_env.get(CredentialService)
        repo = await unit_env.get(DelegateRepository)
        use_case = await unit_env.get(LoginUseCase)
        jwt_service = await unit_env.get(JWTService)
        delegate = await repo.save(
            make_delegate(
                status=DelegateStatus.APPROVED,
                password_hash=await credentials.hash_password("secret-pass"),
            )
        )

        # Act
        result = await use_case.execute(
            LoginRequest(email=delegate.email, password="secret-pass")
        )

        # Assert
        assert result.user.id == delegate.id
        assert result.expires_in == 365 * 24 * 60 * 60
        payload = jwt_service.verify_token(result.token)
        assert payload.sub == str(delegate.id)
        assert payload.roles == []
        assert "password_hash" not in result.user.model_dump()

    @pytest.mark.asyncio
    async def test_pending_delegate_cannot_login(self, unit_env):
        credentials = await unit_env.get(CredentialService)
        repo = await unit_env.get(DelegateRepository)
        use_case = await unit_env.get(LoginUseCase)
        delegate = await repo.save(
            make_delegate(password_hash=await credentials.hash_password("secret-pass"))
        )

        with pytest.raises(UnauthorizedError, match="has not been approved"):
            await use_case.execute(
                LoginRequest(email=delegate.email, password="secret-pass")
            )

    @pytest.mark.asyncio
    async def test_unknown_email(self, unit_env):
        use_case = await unit_env.get(LoginUseCase)

        with pytest.raises(UnauthorizedError):
            await use_case.execute(
                LoginRequest(email="nobody@conference.org", password="whatever")
            )
