"""Unit tests for ListDelegatesUseCase and GetStatisticsUseCase."""

import pytest

from summit.application.usecase.delegate import (
    GetStatisticsRequest,
    GetStatisticsUseCase,
    ListDelegatesRequest,
    ListDelegatesUseCase,
)
from summit.domain.error import InvalidStateError
from summit.domain.repository import DelegateRepository
from tests.conftest import make_delegate, make_event
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestListDelegates:
    """Tests for paginated listing."""

    @pytest.mark.asyncio
    async def test_total_pages_rounds_up(self, unit_env):
        # Arrange
        repo = await unit_env.get(DelegateRepository)
        use_case = await unit_env.get(ListDelegatesUseCase)
        event = make_event()
        for _ in range(7):
            await repo.save(make_delegate(event))

        # Act
        result = await use_case.execute(ListDelegatesRequest(page=2, limit=3))

        # Assert
        assert result.total == 7
        assert result.total_pages == 3
        assert result.page == 2
        assert result.limit == 3
        assert len(result.delegates) == 3

    @pytest.mark.asyncio
    async def test_empty_listing(self, unit_env):
        use_case = await unit_env.get(ListDelegatesUseCase)

        result = await use_case.execute(ListDelegatesRequest())

        assert result.total == 0
        assert result.total_pages == 0
        assert result.delegates == []

    @pytest.mark.asyncio
    async def test_filter_by_event(self, unit_env):
        repo = await unit_env.get(DelegateRepository)
        use_case = await unit_env.get(ListDelegatesUseCase)
        this_year, last_year = make_event(2026), make_event(2025)
        await repo.save(make_delegate(this_year))
        await repo.save(make_delegate(last_year))

        result = await use_case.execute(ListDelegatesRequest(event_id=str(last_year.id)))

        assert result.total == 1
        assert result.delegates[0].event_year == 2025

    @pytest.mark.asyncio
    async def test_malformed_event_id(self, unit_env):
        use_case = await unit_env.get(ListDelegatesUseCase)

        with pytest.raises(InvalidStateError):
            await use_case.execute(ListDelegatesRequest(event_id="2026"))


class TestGetStatistics:
    """Tests for statistics scoped to an event."""

    @pytest.mark.asyncio
    async def test_statistics_for_one_event(self, unit_env):
        repo = await unit_env.get(DelegateRepository)
        use_case = await unit_env.get(GetStatisticsUseCase)
        this_year, last_year = make_event(2026), make_event(2025)
        await repo.save(make_delegate(this_year))
        await repo.save(make_delegate(this_year))
        await repo.save(make_delegate(last_year))

        stats = await use_case.execute(GetStatisticsRequest(event_id=str(this_year.id)))
        overall = await use_case.execute(GetStatisticsRequest())

        assert stats.total == 2
        assert overall.total == 3
