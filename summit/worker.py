"""Celery worker running deferred notification jobs.

Start with::

    celery -A summit.worker worker --loglevel=info
"""

import asyncio
from uuid import UUID

from celery.signals import worker_process_init
from dishka import AsyncContainer
import logfire

from summit.adapter.celery_queue import create_celery_app
from summit.config import Settings
from summit.domain.service import NotificationService
from summit.domain.service.notification_service import SEND_PUSH_NOTIFICATION_JOB
from summit.domain.value import DelegateId, SendResult
from summit.util.di.container import create_container
from summit.util.logging import setup_logging
from summit.util.observability import configure_logfire, instrument_celery

settings = Settings()
celery_app = create_celery_app(settings.queue)

RETRY_COUNTDOWN_SECONDS = 30


@worker_process_init.connect
def init_worker_process(**_) -> None:
    setup_logging(settings, process="worker")
    configure_logfire(settings, service_name="summit-worker")
    instrument_celery()


async def deliver_push(
    container: AsyncContainer, delegate_id: str, title: str, body: str
) -> SendResult:
    """Send a queued push notification using services from ``container``.

    Transport errors propagate so the task can be retried.
    """
    async with container() as request_container:
        service = await request_container.get(NotificationService)
        return await service.send_push_to_delegate(
            DelegateId(UUID(delegate_id)), title, body, raise_on_error=True
        )


async def _run_push(delegate_id: str, title: str, body: str) -> SendResult:
    # A fresh container per run: each asyncio.run gets its own event loop
    container = create_container()
    try:
        return await deliver_push(container, delegate_id, title, body)
    finally:
        await container.close()


@celery_app.task(
    name=SEND_PUSH_NOTIFICATION_JOB,
    bind=True,
    max_retries=settings.queue.max_retries,
)
def send_push_notification(self, delegate_id: str, title: str, body: str) -> dict:
    """Deliver a push notification queued at registration time."""
    with logfire.span(
        "worker.send_push_notification",
        delegate_id=delegate_id,
        attempt=self.request.retries + 1,
    ):
        try:
            result = asyncio.run(_run_push(delegate_id, title, body))
        except Exception as e:
            if self.request.retries >= self.max_retries:
                logfire.error(
                    "Push notification job failed permanently",
                    delegate_id=delegate_id,
                    error=str(e),
                )
                raise
            logfire.warn(
                "Push notification job failed, retrying",
                delegate_id=delegate_id,
                error=str(e),
            )
            raise self.retry(exc=e, countdown=RETRY_COUNTDOWN_SECONDS)

        logfire.info(
            "Push notification job completed",
            delegate_id=delegate_id,
            delivered=result.delivered,
        )
        return result.model_dump()
