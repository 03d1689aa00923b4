"""Unit tests for the Expo push sender."""

import json

import httpx
import pytest

from summit.adapter.error import ProviderError
from summit.adapter.expo import ExpoPushSender, chunked
from summit.config import PushSettings

TOKENS = [f"ExponentPushToken[device-{i}]" for i in range(5)]


def _patch_client(monkeypatch, handler):
    """Route every httpx.AsyncClient through a mock transport."""
    transport = httpx.MockTransport(handler)
    real_client = httpx.AsyncClient
    monkeypatch.setattr(
        httpx, "AsyncClient", lambda **kwargs: real_client(transport=transport, **kwargs)
    )


def test_chunked():
    assert chunked([1, 2, 3, 4, 5], 2) == [[1, 2], [3, 4], [5]]
    assert chunked([], 100) == []


class TestExpoPushSender:
    """Tests for send method."""

    @pytest.mark.asyncio
    async def test_messages_sent_in_chunks(self, monkeypatch):
        # Arrange
        batches = []

        def handler(request: httpx.Request) -> httpx.Response:
            batch = json.loads(request.content)
            batches.append(batch)
            return httpx.Response(200, json={"data": [{"status": "ok"}] * len(batch)})

        _patch_client(monkeypatch, handler)
        sender = ExpoPushSender(PushSettings(chunk_size=2, access_token="expo-secret"))

        # Act
        delivered = await sender.send(
            [*TOKENS, "not-a-token"], "Hello", "World", {"status": "approved"}
        )

        # Assert
        assert delivered == 5
        assert [len(b) for b in batches] == [2, 2, 1]
        assert batches[0][0]["title"] == "Hello"
        assert batches[0][0]["data"] == {"status": "approved"}
        assert batches[0][0]["sound"] == "default"

    @pytest.mark.asyncio
    async def test_access_token_sent_as_bearer(self, monkeypatch):
        headers = []

        def handler(request: httpx.Request) -> httpx.Response:
            headers.append(request.headers.get("Authorization"))
            return httpx.Response(200, json={"data": [{"status": "ok"}]})

        _patch_client(monkeypatch, handler)
        sender = ExpoPushSender(PushSettings(access_token="expo-secret"))

        await sender.send(TOKENS[:1], "t", "b")

        assert headers == ["Bearer expo-secret"]

    @pytest.mark.asyncio
    async def test_ticket_errors_are_not_counted(self, monkeypatch):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(
                200,
                json={
                    "data": [
                        {"status": "ok"},
                        {"status": "error", "message": "DeviceNotRegistered"},
                    ]
                },
            )

        _patch_client(monkeypatch, handler)

        delivered = await ExpoPushSender(PushSettings()).send(TOKENS[:2], "t", "b")

        assert delivered == 1

    @pytest.mark.asyncio
    async def test_non_200_raises(self, monkeypatch):
        _patch_client(monkeypatch, lambda request: httpx.Response(500, text="boom"))

        with pytest.raises(ProviderError, match="expo"):
            await ExpoPushSender(PushSettings()).send(TOKENS[:1], "t", "b")
