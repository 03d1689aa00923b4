"""Request password reset use case."""

import logfire
from pydantic import BaseModel

from summit.application import messages
from summit.config import Settings
from summit.domain.error import ValidationError
from summit.domain.service import CredentialService, NotificationService

RESET_REQUESTED_MESSAGE = (
    "If your email is registered, you will receive a password reset PIN."
)


class RequestPasswordResetRequest(BaseModel):
    """Password reset request."""

    email: str


class PasswordResetMessage(BaseModel):
    """Outcome message for the password reset endpoints."""

    message: str


class RequestPasswordResetUseCase:
    """Use case for emailing a password reset PIN.

    The response is identical whether or not the email is registered.
    """

    def __init__(
        self,
        credential_service: CredentialService,
        notification_service: NotificationService,
        settings: Settings,
    ) -> None:
        self.credential_service = credential_service
        self.notification_service = notification_service
        self.settings = settings

    async def execute(
        self, request: RequestPasswordResetRequest
    ) -> PasswordResetMessage:
        """Issue and email a reset PIN.

        Raises:
            ValidationError: If the PIN could not be stored
        """
        with logfire.span("request_password_reset.execute"):
            try:
                issued = await self.credential_service.issue_reset_pin(request.email)
            except Exception as e:
                logfire.error("Password reset request failed", error=str(e))
                raise ValidationError(
                    "Could not process password reset request. Please try again later."
                ) from e

            if issued is not None:
                delegate, pin = issued
                await self.notification_service.send_email(
                    messages.password_reset_email(
                        delegate, pin, self.settings.auth.reset_pin_ttl_minutes
                    )
                )

            return PasswordResetMessage(message=RESET_REQUESTED_MESSAGE)
