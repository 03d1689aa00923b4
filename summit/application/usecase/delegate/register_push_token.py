"""Register push token use case."""

from pydantic import BaseModel

from summit.domain.service import DelegateService, NotificationService


class RegisterPushTokenRequest(BaseModel):
    """Register push token request."""

    delegate_id: str
    token: str


class RegisterPushTokenResponse(BaseModel):
    """Register push token response."""

    message: str = "Push token registered successfully."


class RegisterPushTokenUseCase:
    """Use case for storing a delegate's device token for push notifications."""

    def __init__(
        self,
        delegate_service: DelegateService,
        notification_service: NotificationService,
    ) -> None:
        self.delegate_service = delegate_service
        self.notification_service = notification_service

    async def execute(
        self, request: RegisterPushTokenRequest
    ) -> RegisterPushTokenResponse:
        """Register the token. Registering the same token twice is a no-op.

        Raises:
            InvalidStateError: If the ID is malformed
            ValidationError: If the token is not an Expo push token
            NotFoundError: If the delegate doesn't exist
        """
        delegate_id = self.delegate_service.parse_delegate_id(request.delegate_id)
        await self.notification_service.register_push_token(
            delegate_id, request.token.strip()
        )
        return RegisterPushTokenResponse()
