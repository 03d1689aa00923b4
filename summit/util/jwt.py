"""JWT token utilities."""

from datetime import datetime, timedelta, timezone

import jwt
from pydantic import BaseModel

from summit.config import AuthSettings


class TokenPayload(BaseModel):
    """JWT token payload.

    Delegate tokens carry an empty role list; admin tokens are issued
    elsewhere with the same secret and carry roles such as ``admin``.
    """

    sub: str
    email: str | None = None
    roles: list[str] = []
    exp: datetime


class JWTError(Exception):
    """JWT-related error."""

    pass


def create_token(
    subject: str, email: str, roles: list[str], settings: AuthSettings
) -> str:
    """Create a signed JWT.

    Args:
        subject: Token subject (delegate ID)
        email: Email claim
        roles: Role claims
        settings: Authentication settings

    Returns:
        Encoded JWT token
    """
    expiry = datetime.now(timezone.utc) + timedelta(days=settings.jwt_expiry_days)

    payload = {
        "sub": subject,
        "email": email,
        "roles": roles,
        "exp": expiry,
    }

    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Verify and decode a JWT token.

    Args:
        token: JWT token to verify
        settings: Authentication settings

    Returns:
        Token payload if valid

    Raises:
        JWTError: If token is invalid or expired
    """
    try:
        payload = jwt.decode(
            token, settings.jwt_secret, algorithms=[settings.jwt_algorithm]
        )
        return TokenPayload(**payload)
    except jwt.ExpiredSignatureError:
        raise JWTError("Token has expired")
    except jwt.InvalidTokenError:
        raise JWTError("Invalid token")
