"""Unit tests for the deferred push notification job."""

import pytest
import pytest_asyncio

from summit.adapter.error import ProviderError
from summit.domain.repository import DelegateRepository
from summit.domain.service import PushSender
from summit.worker import deliver_push
from tests.conftest import make_delegate
from tests.di import build_test_container

TOKEN = "ExponentPushToken[worker-test]"


@pytest_asyncio.fixture
async def container():
    container = build_test_container()
    yield container
    await container.close()


async def _seed(container, **overrides):
    async with container() as request_container:
        repo = await request_container.get(DelegateRepository)
        return await repo.save(make_delegate(**overrides))


class TestDeliverPush:
    """Tests for deliver_push."""

    @pytest.mark.asyncio
    async def test_delivers_to_registered_tokens(self, container):
        # Arrange
        delegate = await _seed(container, push_tokens=[TOKEN])
        push = await container.get(PushSender)

        # Act
        result = await deliver_push(
            container, str(delegate.id), "Registration Under Review", "Hello"
        )

        # Assert
        assert result.success
        assert result.delivered == 1
        [notification] = push.sent
        assert notification["title"] == "Registration Under Review"

    @pytest.mark.asyncio
    async def test_missing_delegate_is_not_retried(self, container):
        result = await deliver_push(
            container, "6f1c2d3e-4a5b-4c6d-8e7f-9a0b1c2d3e4f", "t", "b"
        )

        assert not result.success
        assert result.error == "Delegate not found"

    @pytest.mark.asyncio
    async def test_transport_error_propagates(self, container):
        delegate = await _seed(container, push_tokens=[TOKEN])
        push = await container.get(PushSender)
        push.fail_with = ProviderError("expo", "HTTP error")

        with pytest.raises(ProviderError):
            await deliver_push(container, str(delegate.id), "t", "b")
