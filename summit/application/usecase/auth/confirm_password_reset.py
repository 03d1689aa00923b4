"""Confirm password reset use case."""

from pydantic import AliasChoices, BaseModel, Field

from summit.application.usecase.auth.request_password_reset import PasswordResetMessage
from summit.domain.service import CredentialService


class ConfirmPasswordResetRequest(BaseModel):
    """Confirm password reset request."""

    email: str
    reset_token: str = Field(
        min_length=1,
        max_length=12,
        validation_alias=AliasChoices("reset_token", "resetToken"),
    )
    new_password: str = Field(min_length=6, max_length=128)


class ConfirmPasswordResetUseCase:
    """Use case for setting a new password with a reset PIN."""

    def __init__(self, credential_service: CredentialService) -> None:
        self.credential_service = credential_service

    async def execute(
        self, request: ConfirmPasswordResetRequest
    ) -> PasswordResetMessage:
        """Reset the password.

        Raises:
            PasswordResetError: If the PIN is missing, wrong or expired
        """
        await self.credential_service.confirm_reset(
            request.email, request.reset_token.strip(), request.new_password
        )
        return PasswordResetMessage(message="Your password has been successfully reset.")
