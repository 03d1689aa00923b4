"""Check-in delegate use case."""

import logfire
from pydantic import BaseModel

from summit.application import messages
from summit.application.usecase.delegate.fields import DelegateResponse
from summit.domain.service import DelegateService, LifecycleService, NotificationService
from summit.domain.value import ActorId


class CheckInDelegateRequest(BaseModel):
    """Check-in request."""

    delegate_id: str
    checked_in_by: str
    check_in_location: str | None = None


class CheckInDelegateUseCase:
    """Use case for checking an approved delegate in at the venue."""

    def __init__(
        self,
        delegate_service: DelegateService,
        lifecycle_service: LifecycleService,
        notification_service: NotificationService,
    ) -> None:
        self.delegate_service = delegate_service
        self.lifecycle_service = lifecycle_service
        self.notification_service = notification_service

    async def execute(self, request: CheckInDelegateRequest) -> DelegateResponse:
        """Check the delegate in and send the welcome email.

        Raises:
            InvalidStateError: If the ID is malformed or the delegate is not approved
            NotFoundError: If the delegate doesn't exist
        """
        delegate_id = self.delegate_service.parse_delegate_id(request.delegate_id)
        with logfire.span("check_in_delegate.execute", delegate_id=str(delegate_id)):
            delegate = await self.lifecycle_service.check_in(
                delegate_id,
                request.check_in_location,
                ActorId(request.checked_in_by),
            )
            await self.notification_service.send_email(
                messages.check_in_email(delegate)
            )
            return DelegateResponse.from_domain(delegate)
