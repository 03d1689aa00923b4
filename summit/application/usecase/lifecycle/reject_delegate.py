"""Reject delegate use case."""

import logfire
from pydantic import BaseModel, Field

from summit.application import messages
from summit.application.usecase.delegate.fields import DelegateResponse
from summit.domain.service import DelegateService, LifecycleService, NotificationService
from summit.domain.value import ActorId


class RejectDelegateRequest(BaseModel):
    """Reject delegate request."""

    delegate_id: str
    rejection_reason: str = Field(min_length=1, max_length=2000)
    rejected_by: str


class RejectDelegateUseCase:
    """Use case for rejecting a registration and telling the delegate why."""

    def __init__(
        self,
        delegate_service: DelegateService,
        lifecycle_service: LifecycleService,
        notification_service: NotificationService,
    ) -> None:
        self.delegate_service = delegate_service
        self.lifecycle_service = lifecycle_service
        self.notification_service = notification_service

    async def execute(self, request: RejectDelegateRequest) -> DelegateResponse:
        """Reject the delegate and notify them.

        Raises:
            InvalidStateError: If the ID is malformed or the delegate checked in
            ValidationError: If the reason is blank
            NotFoundError: If the delegate doesn't exist
            AlreadyInStateError: If the delegate is already rejected
        """
        delegate_id = self.delegate_service.parse_delegate_id(request.delegate_id)
        with logfire.span("reject_delegate.execute", delegate_id=str(delegate_id)):
            delegate = await self.lifecycle_service.reject(
                delegate_id, request.rejection_reason, ActorId(request.rejected_by)
            )

            await self.notification_service.send_email(
                messages.rejection_email(delegate)
            )
            await self.notification_service.send_push_to_delegate(
                delegate.id,
                messages.REJECTION_PUSH_TITLE,
                messages.REJECTION_PUSH_BODY,
                {"status": delegate.status.value},
            )
            return DelegateResponse.from_domain(delegate)
