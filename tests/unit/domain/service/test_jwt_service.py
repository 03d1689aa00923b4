"""Unit tests for JWTService."""

import pytest

from summit.config import AuthSettings
from summit.domain.error import ForbiddenError, UnauthorizedError
from summit.domain.service import JWTService
from tests.conftest import admin_token, make_delegate


class TestJWTService:
    """Tests for issuing and checking bearer tokens."""

    def test_delegate_token_round_trip(self):
        service = JWTService(AuthSettings())
        delegate = make_delegate()

        payload = service.verify_token(service.create_delegate_token(delegate))

        assert payload.sub == str(delegate.id)
        assert payload.email == delegate.email
        assert payload.roles == []

    def test_token_signed_with_other_secret(self):
        service = JWTService(AuthSettings(jwt_secret="server-secret"))
        token = admin_token(AuthSettings(jwt_secret="someone-else"))

        with pytest.raises(UnauthorizedError):
            service.verify_token(token)

    def test_require_admin_accepts_staff_role(self):
        service = JWTService(AuthSettings())

        payload = service.require_admin(admin_token(role="staff"))

        assert payload.sub == "admin-1"

    def test_require_admin_rejects_delegate_token(self):
        service = JWTService(AuthSettings())
        token = service.create_delegate_token(make_delegate())

        with pytest.raises(ForbiddenError):
            service.require_admin(token)

    def test_expires_in_matches_expiry_days(self):
        assert JWTService(AuthSettings(jwt_expiry_days=2)).expires_in == 172800
