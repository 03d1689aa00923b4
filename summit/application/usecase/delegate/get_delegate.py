"""Get delegate use cases."""

from pydantic import BaseModel

from summit.application.usecase.delegate.fields import DelegateResponse
from summit.domain.service import DelegateService


class GetDelegateRequest(BaseModel):
    """Get delegate by ID request."""

    delegate_id: str


class GetDelegateByEmailRequest(BaseModel):
    """Get delegate by email request."""

    email: str
    event_year: int | None = None


class GetDelegateUseCase:
    """Use case for fetching a delegate by ID."""

    def __init__(self, delegate_service: DelegateService) -> None:
        self.delegate_service = delegate_service

    async def execute(self, request: GetDelegateRequest) -> DelegateResponse:
        """Fetch a delegate.

        Raises:
            InvalidStateError: If the ID is malformed
            NotFoundError: If the delegate doesn't exist
        """
        delegate_id = self.delegate_service.parse_delegate_id(request.delegate_id)
        delegate = await self.delegate_service.get_by_id(delegate_id)
        return DelegateResponse.from_domain(delegate)


class GetDelegateByEmailUseCase:
    """Use case for fetching a delegate by email."""

    def __init__(self, delegate_service: DelegateService) -> None:
        self.delegate_service = delegate_service

    async def execute(self, request: GetDelegateByEmailRequest) -> DelegateResponse:
        """Fetch a delegate by email, optionally for one event year.

        Raises:
            ValidationError: If the email is malformed
            NotFoundError: If no delegate uses the email
        """
        delegate = await self.delegate_service.get_by_email(
            request.email, request.event_year
        )
        return DelegateResponse.from_domain(delegate)
