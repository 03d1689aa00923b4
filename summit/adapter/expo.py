"""Expo push notification sender.

Talks to the Expo push HTTP API directly with httpx. Messages are sent in
chunks because Expo caps the batch size per request.
"""

from typing import Any

import httpx
import logfire

from summit.adapter.error import ProviderError
from summit.config import PushSettings
from summit.domain.service.notification_service import PushSender, is_expo_push_token


def chunked(items: list[Any], size: int) -> list[list[Any]]:
    """Split a list into consecutive chunks of at most ``size`` items."""
    return [items[i : i + size] for i in range(0, len(items), size)]


class ExpoPushSender(PushSender):
    """Push sender backed by the Expo push service."""

    def __init__(self, settings: PushSettings) -> None:
        """Initialize Expo push sender.

        Args:
            settings: Expo endpoint, access token and chunk size
        """
        self.settings = settings

    def _headers(self) -> dict[str, str]:
        headers = {
            "Accept": "application/json",
            "Accept-Encoding": "gzip, deflate",
            "Content-Type": "application/json",
        }
        if self.settings.access_token:
            headers["Authorization"] = f"Bearer {self.settings.access_token}"
        return headers

    async def send(
        self,
        tokens: list[str],
        title: str,
        body: str,
        data: dict[str, Any] | None = None,
    ) -> int:
        """Send a notification to each valid token.

        Returns:
            Number of tickets Expo reported as ok

        Raises:
            ProviderError: If Expo is unreachable or rejects a request
        """
        valid = [t for t in tokens if is_expo_push_token(t)]
        skipped = len(tokens) - len(valid)
        if skipped:
            logfire.warn("Skipping invalid Expo push tokens", count=skipped)

        messages = [
            {
                "to": token,
                "sound": "default",
                "title": title,
                "body": body,
                "data": data or {},
            }
            for token in valid
        ]

        delivered = 0
        async with httpx.AsyncClient(timeout=10.0) as client:
            for chunk in chunked(messages, self.settings.chunk_size):
                try:
                    response = await client.post(
                        self.settings.expo_url, json=chunk, headers=self._headers()
                    )
                except httpx.HTTPError as e:
                    logfire.error("Expo push HTTP error", error=str(e))
                    raise ProviderError("expo", f"HTTP error: {e}")

                if response.status_code != 200:
                    logfire.error(
                        "Expo push request failed",
                        status_code=response.status_code,
                        error=response.text,
                    )
                    raise ProviderError(
                        "expo", f"Push request failed: {response.status_code}"
                    )

                for ticket in response.json().get("data", []):
                    if ticket.get("status") == "ok":
                        delivered += 1
                    else:
                        logfire.warn(
                            "Expo push ticket error",
                            message=ticket.get("message"),
                            details=ticket.get("details"),
                        )

        return delivered


class MockPushSender(PushSender):
    """Push sender for tests that records notifications."""

    def __init__(self) -> None:
        self.sent: list[dict[str, Any]] = []
        self.fail_with: Exception | None = None

    async def send(
        self,
        tokens: list[str],
        title: str,
        body: str,
        data: dict[str, Any] | None = None,
    ) -> int:
        if self.fail_with:
            raise self.fail_with
        self.sent.append(
            {"tokens": list(tokens), "title": title, "body": body, "data": data}
        )
        return len(tokens)
