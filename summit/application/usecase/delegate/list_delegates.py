"""List delegates use case."""

import math

from pydantic import BaseModel, Field

from summit.application.usecase.delegate.fields import DelegateResponse
from summit.domain.repository import DelegateFilter
from summit.domain.service import DelegateService
from summit.domain.value import AttendanceMode, DelegateType


class ListDelegatesRequest(BaseModel):
    """List delegates request."""

    page: int = Field(default=1, ge=1)
    limit: int = Field(default=10, ge=1, le=100)
    event_id: str | None = None
    delegate_type: DelegateType | None = None
    attendance_mode: AttendanceMode | None = None
    year: int | None = None


class ListDelegatesResponse(BaseModel):
    """One page of delegates."""

    delegates: list[DelegateResponse]
    total: int
    page: int
    limit: int
    total_pages: int


class ListDelegatesUseCase:
    """Use case for paging through delegates, newest first."""

    def __init__(self, delegate_service: DelegateService) -> None:
        self.delegate_service = delegate_service

    async def execute(self, request: ListDelegatesRequest) -> ListDelegatesResponse:
        """List delegates.

        Raises:
            InvalidStateError: If event_id is not a well-formed ID
        """
        filters = DelegateFilter(
            event_id=(
                self.delegate_service.parse_event_id(request.event_id)
                if request.event_id
                else None
            ),
            delegate_type=request.delegate_type,
            attendance_mode=request.attendance_mode,
            event_year=request.year,
        )
        delegates, total = await self.delegate_service.list_delegates(
            filters, request.page, request.limit
        )
        return ListDelegatesResponse(
            delegates=[DelegateResponse.from_domain(d) for d in delegates],
            total=total,
            page=request.page,
            limit=request.limit,
            total_pages=math.ceil(total / request.limit),
        )
