"""JWT token domain service."""

import logfire

from summit.config import AuthSettings
from summit.domain.error import ForbiddenError, UnauthorizedError
from summit.domain.model import Delegate
from summit.util.jwt import JWTError, TokenPayload, create_token, verify_token


class JWTService:
    """Domain service for issuing and checking bearer tokens."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize JWT service.

        Args:
            auth_settings: Authentication settings
        """
        self.auth_settings = auth_settings

    @property
    def expires_in(self) -> int:
        """Token lifetime in seconds."""
        return self.auth_settings.jwt_expiry_days * 24 * 60 * 60

    def create_delegate_token(self, delegate: Delegate) -> str:
        """Create a token for a delegate (no roles).

        Args:
            delegate: Authenticated delegate

        Returns:
            JWT token string
        """
        with logfire.span(
            "jwt_service.create_delegate_token", delegate_id=str(delegate.id)
        ):
            token = create_token(
                str(delegate.id), delegate.email, [], self.auth_settings
            )
            logfire.info("JWT token created", delegate_id=str(delegate.id))
            return token

    def verify_token(self, token: str) -> TokenPayload:
        """Verify JWT token and extract payload.

        Raises:
            UnauthorizedError: If token is invalid or expired
        """
        with logfire.span("jwt_service.verify_token"):
            try:
                payload = verify_token(token, self.auth_settings)
            except JWTError as e:
                logfire.warn("JWT token verification failed", error=str(e))
                raise UnauthorizedError(str(e))
            return payload

    def require_admin(self, token: str) -> TokenPayload:
        """Verify a token and require one of the configured admin roles.

        Raises:
            UnauthorizedError: If token is invalid or expired
            ForbiddenError: If the token carries no admin role
        """
        payload = self.verify_token(token)
        if not set(payload.roles) & set(self.auth_settings.admin_roles):
            logfire.warn("Admin role required", subject=payload.sub)
            raise ForbiddenError("Insufficient permissions")
        return payload
