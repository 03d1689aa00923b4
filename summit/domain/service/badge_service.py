"""Badge domain service."""

import asyncio
import json

import logfire

from summit.domain.model import Delegate


class BadgeRenderer:
    """Interface for badge and QR image rendering."""

    def render_qr(self, payload: str) -> bytes:
        """Render a QR code for the payload as PNG bytes."""
        raise NotImplementedError

    def render_badge(self, delegate: Delegate, qr_payload: str) -> bytes:
        """Render a printable badge for the delegate as PNG bytes."""
        raise NotImplementedError


def qr_payload(delegate: Delegate) -> str:
    """Check-in QR content: the delegate ID and event year as JSON."""
    return json.dumps(
        {"delegateId": str(delegate.id), "eventYear": delegate.event_year}
    )


class BadgeService:
    """Domain service producing check-in artwork for a delegate.

    Rendering is CPU bound and runs in the default executor.
    """

    def __init__(self, renderer: BadgeRenderer) -> None:
        self.renderer = renderer

    async def qr_code(self, delegate: Delegate) -> bytes:
        """PNG QR code attached to the approval email."""
        with logfire.span("badge_service.qr_code", delegate_id=str(delegate.id)):
            loop = asyncio.get_running_loop()
            return await loop.run_in_executor(
                None, self.renderer.render_qr, qr_payload(delegate)
            )

    async def try_qr_code(self, delegate: Delegate) -> bytes | None:
        """QR code for a notification, or None if rendering fails.

        Used after a transition has committed, where a rendering error must
        not fail the request.
        """
        try:
            return await self.qr_code(delegate)
        except Exception as e:
            logfire.error(
                "Failed to render QR code",
                delegate_id=str(delegate.id),
                error=str(e),
            )
            return None

    async def badge(self, delegate: Delegate) -> bytes:
        """PNG badge for printing."""
        with logfire.span("badge_service.badge", delegate_id=str(delegate.id)):
            loop = asyncio.get_running_loop()
            return await loop.run_in_executor(
                None, self.renderer.render_badge, delegate, qr_payload(delegate)
            )
