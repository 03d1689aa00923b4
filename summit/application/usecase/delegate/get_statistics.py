"""Delegate statistics use case."""

from pydantic import BaseModel

from summit.domain.repository import DelegateFilter
from summit.domain.service import DelegateService, DelegateStatistics


class GetStatisticsRequest(BaseModel):
    """Statistics request, optionally scoped to one event."""

    event_id: str | None = None


class GetStatisticsUseCase:
    """Use case for aggregate delegate counts."""

    def __init__(self, delegate_service: DelegateService) -> None:
        self.delegate_service = delegate_service

    async def execute(self, request: GetStatisticsRequest) -> DelegateStatistics:
        filters = DelegateFilter(
            event_id=(
                self.delegate_service.parse_event_id(request.event_id)
                if request.event_id
                else None
            )
        )
        return await self.delegate_service.statistics(filters)
