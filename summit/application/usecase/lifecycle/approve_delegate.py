"""Approve delegate use case."""

import logfire
from pydantic import BaseModel

from summit.application import messages
from summit.application.usecase.delegate.fields import DelegateResponse
from summit.config import Settings
from summit.domain.service import (
    BadgeService,
    DelegateService,
    LifecycleService,
    NotificationService,
)
from summit.domain.value import ActorId


class ApproveDelegateRequest(BaseModel):
    """Approve delegate request."""

    delegate_id: str
    approved_by: str


class ApproveDelegateUseCase:
    """Use case for approving a registration.

    Once the transition is committed the delegate receives an approval email
    carrying their QR code and a badge link, plus a push notification.
    """

    def __init__(
        self,
        delegate_service: DelegateService,
        lifecycle_service: LifecycleService,
        badge_service: BadgeService,
        notification_service: NotificationService,
        settings: Settings,
    ) -> None:
        self.delegate_service = delegate_service
        self.lifecycle_service = lifecycle_service
        self.badge_service = badge_service
        self.notification_service = notification_service
        self.settings = settings

    async def execute(self, request: ApproveDelegateRequest) -> DelegateResponse:
        """Approve the delegate and notify them.

        Raises:
            InvalidStateError: If the ID is malformed or the delegate checked in
            NotFoundError: If the delegate doesn't exist
            AlreadyInStateError: If the delegate is already approved
        """
        delegate_id = self.delegate_service.parse_delegate_id(request.delegate_id)
        with logfire.span("approve_delegate.execute", delegate_id=str(delegate_id)):
            delegate = await self.lifecycle_service.approve(
                delegate_id, ActorId(request.approved_by)
            )

            badge_url = f"{self.settings.api.base_url}/delegates/{delegate.id}/badge"
            qr_png = await self.badge_service.try_qr_code(delegate)

            await self.notification_service.send_email(
                messages.approval_email(delegate, qr_png, badge_url)
            )
            await self.notification_service.send_push_to_delegate(
                delegate.id,
                messages.APPROVAL_PUSH_TITLE,
                messages.approval_push_body(delegate),
                {"status": delegate.status.value},
            )
            return DelegateResponse.from_domain(delegate)
