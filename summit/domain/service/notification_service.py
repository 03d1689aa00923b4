"""Notification domain service.

Email and push delivery are best-effort: failures are logged and reported as
a ``SendResult`` but never raised to the caller, so a broken mail server can't
undo an approval. The worker is the exception; it asks for delivery errors to
propagate so the job queue can retry.
"""

import re
from typing import Any

import logfire
from pydantic import BaseModel

from summit.domain.error import NotFoundError, ValidationError
from summit.domain.repository import DelegateRepository
from summit.domain.value import DelegateId, SendResult

SEND_PUSH_NOTIFICATION_JOB = "send-push-notification"

_EXPO_TOKEN_RE = re.compile(r"^(ExponentPushToken|ExpoPushToken)\[.+\]$")
_EXPO_UUID_TOKEN_RE = re.compile(
    r"^[a-z\d]{8}-[a-z\d]{4}-[a-z\d]{4}-[a-z\d]{4}-[a-z\d]{12}$", re.IGNORECASE
)


def is_expo_push_token(token: str) -> bool:
    """Whether a string looks like an Expo push token."""
    return bool(_EXPO_TOKEN_RE.match(token) or _EXPO_UUID_TOKEN_RE.match(token))


class EmailAttachment(BaseModel):
    """Binary attachment, optionally referenced inline via ``cid:<content_id>``."""

    filename: str
    content: bytes
    content_type: str = "application/octet-stream"
    content_id: str | None = None


class EmailMessage(BaseModel):
    """Outbound HTML email."""

    to: str
    subject: str
    html: str
    attachments: list[EmailAttachment] = []


class EmailSender:
    """Interface for email transports."""

    async def send(self, message: EmailMessage) -> None:
        """Deliver a message.

        Raises:
            Exception: Transport-specific error if delivery fails
        """
        raise NotImplementedError


class PushSender:
    """Interface for mobile push transports."""

    async def send(
        self,
        tokens: list[str],
        title: str,
        body: str,
        data: dict[str, Any] | None = None,
    ) -> int:
        """Send one notification to each token.

        Returns:
            Number of messages accepted by the provider

        Raises:
            Exception: Transport-specific error if the provider is unreachable
        """
        raise NotImplementedError


class JobQueue:
    """Interface for the deferred job queue."""

    async def enqueue(
        self, name: str, payload: dict[str, Any], delay_seconds: int = 0
    ) -> str:
        """Schedule a job.

        Args:
            name: Job name understood by the worker
            payload: JSON-serialisable job arguments
            delay_seconds: Seconds to wait before the job becomes runnable

        Returns:
            Job identifier
        """
        raise NotImplementedError


class NotificationService:
    """Domain service for delegate notifications."""

    def __init__(
        self,
        delegate_repository: DelegateRepository,
        email_sender: EmailSender,
        push_sender: PushSender,
        job_queue: JobQueue,
    ) -> None:
        self.delegate_repository = delegate_repository
        self.email_sender = email_sender
        self.push_sender = push_sender
        self.job_queue = job_queue

    async def send_email(self, message: EmailMessage) -> SendResult:
        """Send an email, logging instead of raising on failure."""
        with logfire.span(
            "notification_service.send_email", to=message.to, subject=message.subject
        ):
            try:
                await self.email_sender.send(message)
            except Exception as e:
                logfire.error(
                    "Failed to send email",
                    to=message.to,
                    subject=message.subject,
                    error=str(e),
                )
                return SendResult.fail(str(e))

            logfire.info("Email sent", to=message.to, subject=message.subject)
            return SendResult.ok()

    async def send_push_to_delegate(
        self,
        delegate_id: DelegateId,
        title: str,
        body: str,
        data: dict[str, Any] | None = None,
        raise_on_error: bool = False,
    ) -> SendResult:
        """Push a notification to every token the delegate registered.

        Args:
            delegate_id: Recipient
            title: Notification title
            body: Notification body
            data: Extra payload delivered to the app
            raise_on_error: Propagate transport errors (used by the worker)

        Returns:
            Delivery outcome
        """
        with logfire.span(
            "notification_service.send_push_to_delegate",
            delegate_id=str(delegate_id),
            title=title,
        ):
            delegate = await self.delegate_repository.find_by_id(delegate_id)
            if not delegate:
                logfire.warn(
                    "Push skipped, delegate not found", delegate_id=str(delegate_id)
                )
                return SendResult.fail("Delegate not found")

            tokens = [t for t in delegate.push_tokens if is_expo_push_token(t)]
            if not tokens:
                logfire.info(
                    "Delegate has no registered push tokens",
                    delegate_id=str(delegate_id),
                )
                return SendResult.ok(delivered=0)

            try:
                delivered = await self.push_sender.send(
                    tokens, title, body, {"delegateId": str(delegate_id), **(data or {})}
                )
            except Exception as e:
                logfire.error(
                    "Failed to send push notification",
                    delegate_id=str(delegate_id),
                    error=str(e),
                )
                if raise_on_error:
                    raise
                return SendResult.fail(str(e))

            logfire.info(
                "Push notification sent",
                delegate_id=str(delegate_id),
                delivered=delivered,
            )
            return SendResult.ok(delivered=delivered)

    async def schedule_push(
        self, delegate_id: DelegateId, title: str, body: str, delay_seconds: int
    ) -> SendResult:
        """Enqueue a delayed push notification job."""
        with logfire.span(
            "notification_service.schedule_push",
            delegate_id=str(delegate_id),
            delay_seconds=delay_seconds,
        ):
            payload = {"delegate_id": str(delegate_id), "title": title, "body": body}
            try:
                job_id = await self.job_queue.enqueue(
                    SEND_PUSH_NOTIFICATION_JOB, payload, delay_seconds
                )
            except Exception as e:
                logfire.error(
                    "Failed to enqueue push notification",
                    delegate_id=str(delegate_id),
                    error=str(e),
                )
                return SendResult.fail(str(e))

            logfire.info(
                "Push notification scheduled",
                delegate_id=str(delegate_id),
                job_id=job_id,
            )
            return SendResult.ok()

    async def register_push_token(self, delegate_id: DelegateId, token: str) -> None:
        """Store a device token for a delegate.

        Raises:
            ValidationError: If the token is not an Expo push token
            NotFoundError: If the delegate doesn't exist
        """
        with logfire.span(
            "notification_service.register_push_token", delegate_id=str(delegate_id)
        ):
            if not is_expo_push_token(token):
                logfire.warn("Rejected invalid push token", delegate_id=str(delegate_id))
                raise ValidationError("Invalid Expo push token")

            found = await self.delegate_repository.add_push_token(delegate_id, token)
            if not found:
                raise NotFoundError(
                    "Delegate",
                    str(delegate_id),
                    f"Delegate with ID {delegate_id} not found",
                )
            await self.delegate_repository.commit()
            logfire.info("Push token registered", delegate_id=str(delegate_id))
