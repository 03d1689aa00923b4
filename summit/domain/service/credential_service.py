"""Credential domain service.

Password verification for delegate login and the PIN-based password reset.
Failure causes are logged individually; callers see generic messages except
for the "not yet approved" case.
"""

import secrets
from datetime import timedelta

import logfire

from summit.config import AuthSettings
from summit.domain.error import PasswordResetError, UnauthorizedError
from summit.domain.model import Delegate
from summit.domain.model.common import utcnow
from summit.domain.repository import DelegateRepository
from summit.domain.value import DelegateStatus
from summit.util.password import hash_password, verify_password

INVALID_CREDENTIALS = "Invalid credentials or delegate not found."


def generate_reset_pin() -> str:
    """Six-digit numeric PIN from a CSPRNG."""
    return f"{secrets.randbelow(900000) + 100000}"


class CredentialService:
    """Domain service for delegate passwords and reset PINs."""

    def __init__(
        self, delegate_repository: DelegateRepository, auth_settings: AuthSettings
    ) -> None:
        """Initialize credential service.

        Args:
            delegate_repository: Delegate repository
            auth_settings: Authentication settings (PIN lifetime)
        """
        self.delegate_repository = delegate_repository
        self.auth_settings = auth_settings

    async def hash_password(self, password: str) -> str:
        """Salted bcrypt hash of a plaintext password."""
        return await hash_password(password)

    async def authenticate(self, email: str, password: str) -> Delegate:
        """Verify a delegate's email and password.

        Raises:
            UnauthorizedError: If the delegate is unknown, unapproved, has no
                password set, or the password doesn't match
        """
        normalized = email.strip().lower()
        with logfire.span("credential_service.authenticate", email=normalized):
            delegate = await self.delegate_repository.find_by_email(normalized)

            if not delegate:
                logfire.warn("Login failed, delegate not found", email=normalized)
                raise UnauthorizedError(INVALID_CREDENTIALS)

            if delegate.status != DelegateStatus.APPROVED:
                logfire.warn(
                    "Login failed, delegate not approved",
                    delegate_id=str(delegate.id),
                    status=delegate.status.value,
                )
                raise UnauthorizedError("Delegate account has not been approved!")

            if not delegate.password_hash:
                logfire.error(
                    "Login failed, no password hash stored",
                    delegate_id=str(delegate.id),
                )
                raise UnauthorizedError("Authentication process error.")

            if not await verify_password(password, delegate.password_hash):
                logfire.warn(
                    "Login failed, password mismatch", delegate_id=str(delegate.id)
                )
                raise UnauthorizedError(INVALID_CREDENTIALS)

            logfire.info("Delegate authenticated", delegate_id=str(delegate.id))
            return delegate

    async def issue_reset_pin(self, email: str) -> tuple[Delegate, str] | None:
        """Store a fresh reset PIN for the delegate with this email.

        Returns:
            The delegate and the PIN, or None if the email is unknown
        """
        normalized = email.strip().lower()
        with logfire.span("credential_service.issue_reset_pin", email=normalized):
            delegate = await self.delegate_repository.find_by_email(normalized)
            if not delegate:
                logfire.warn("Password reset for unknown email", email=normalized)
                return None

            pin = generate_reset_pin()
            expires = utcnow() + timedelta(
                minutes=self.auth_settings.reset_pin_ttl_minutes
            )
            updated = await self.delegate_repository.update_fields(
                delegate.id,
                {"reset_password_pin": pin, "reset_password_expires": expires},
            )
            if updated is None:
                logfire.warn(
                    "Delegate deleted during reset", delegate_id=str(delegate.id)
                )
                return None
            await self.delegate_repository.commit()

            logfire.info("Password reset PIN issued", delegate_id=str(delegate.id))
            return updated, pin

    async def confirm_reset(self, email: str, pin: str, new_password: str) -> Delegate:
        """Replace the password if the PIN matches and hasn't expired.

        Raises:
            PasswordResetError: If no PIN is pending, it expired, or it doesn't match
        """
        normalized = email.strip().lower()
        with logfire.span("credential_service.confirm_reset", email=normalized):
            delegate = await self.delegate_repository.find_by_email(normalized)

            if (
                not delegate
                or not delegate.reset_password_pin
                or not delegate.reset_password_expires
            ):
                raise PasswordResetError("Invalid or expired password reset PIN.")

            if delegate.reset_password_expires < utcnow():
                logfire.warn("Expired reset PIN used", delegate_id=str(delegate.id))
                raise PasswordResetError("Password reset PIN has expired.")

            if not secrets.compare_digest(
                delegate.reset_password_pin.encode(), pin.encode()
            ):
                logfire.warn("Wrong reset PIN used", delegate_id=str(delegate.id))
                raise PasswordResetError("Invalid password reset PIN.")

            updated = await self.delegate_repository.update_fields(
                delegate.id,
                {
                    "password_hash": await hash_password(new_password),
                    "reset_password_pin": None,
                    "reset_password_expires": None,
                },
            )
            if updated is None:
                raise PasswordResetError("Invalid or expired password reset PIN.")
            await self.delegate_repository.commit()

            logfire.info("Password reset confirmed", delegate_id=str(delegate.id))
            return updated
