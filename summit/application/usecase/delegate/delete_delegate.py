"""Delete delegate use case."""

from pydantic import BaseModel

from summit.domain.service import DelegateService


class DeleteDelegateRequest(BaseModel):
    """Delete delegate request."""

    delegate_id: str


class DeleteDelegateUseCase:
    """Use case for removing a delegate record."""

    def __init__(self, delegate_service: DelegateService) -> None:
        self.delegate_service = delegate_service

    async def execute(self, request: DeleteDelegateRequest) -> None:
        """Delete the delegate.

        Raises:
            InvalidStateError: If the ID is malformed
            NotFoundError: If the delegate doesn't exist
        """
        delegate_id = self.delegate_service.parse_delegate_id(request.delegate_id)
        await self.delegate_service.delete(delegate_id)
