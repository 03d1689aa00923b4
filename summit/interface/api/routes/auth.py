"""Bearer token checks shared by the delegate routes."""

from fastapi import Header

from summit.domain.error import UnauthorizedError
from summit.domain.service import JWTService
from summit.util.jwt import TokenPayload


def bearer_token(authorization: str | None = Header(default=None)) -> str | None:
    """Raw token from an ``Authorization: Bearer <token>`` header."""
    if not authorization:
        return None
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None
    return token.strip()


def require_token(jwt_service: JWTService, token: str | None) -> TokenPayload:
    """Verify any bearer token.

    Raises:
        UnauthorizedError: If the token is missing, invalid or expired
    """
    if not token:
        raise UnauthorizedError("Authentication required")
    return jwt_service.verify_token(token)


def require_admin(jwt_service: JWTService, token: str | None) -> TokenPayload:
    """Verify a bearer token carrying an admin role.

    Raises:
        UnauthorizedError: If the token is missing, invalid or expired
        ForbiddenError: If the token carries no admin role
    """
    if not token:
        raise UnauthorizedError("Authentication required")
    return jwt_service.require_admin(token)
