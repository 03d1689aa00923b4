"""Download badge use case."""

import logfire
from pydantic import BaseModel

from summit.domain.error import InvalidStateError
from summit.domain.service import BadgeService, DelegateService
from summit.domain.value import DelegateStatus

BADGE_READY = frozenset({DelegateStatus.APPROVED, DelegateStatus.CHECKED_IN})


class DownloadBadgeRequest(BaseModel):
    """Download badge request."""

    delegate_id: str


class DownloadBadgeResponse(BaseModel):
    """Rendered badge image."""

    content: bytes
    filename: str
    media_type: str = "image/png"


class DownloadBadgeUseCase:
    """Use case for rendering a delegate's printable badge."""

    def __init__(
        self, delegate_service: DelegateService, badge_service: BadgeService
    ) -> None:
        self.delegate_service = delegate_service
        self.badge_service = badge_service

    async def execute(self, request: DownloadBadgeRequest) -> DownloadBadgeResponse:
        """Render the badge PNG.

        Raises:
            InvalidStateError: If the ID is malformed or the delegate is not approved
            NotFoundError: If the delegate doesn't exist
        """
        delegate_id = self.delegate_service.parse_delegate_id(request.delegate_id)
        with logfire.span("download_badge.execute", delegate_id=str(delegate_id)):
            delegate = await self.delegate_service.get_by_id(delegate_id)
            if delegate.status not in BADGE_READY:
                raise InvalidStateError(
                    f"Badge is only available for approved delegates. Current status: {delegate.status.value}"
                )
            return DownloadBadgeResponse(
                content=await self.badge_service.badge(delegate),
                filename=f"badge-{delegate.id}.png",
            )
