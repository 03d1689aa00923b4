"""Celery-backed job queue.

The API process only publishes jobs by name; task implementations live in
``summit.worker``.
"""

import asyncio
from typing import Any

from celery import Celery
import logfire

from summit.config import QueueSettings
from summit.domain.service.notification_service import JobQueue


def create_celery_app(settings: QueueSettings) -> Celery:
    """Build a Celery application using Redis as broker.

    Results are not stored: deferred notifications are fire-and-forget.
    """
    app = Celery("summit", broker=settings.broker_url)
    app.conf.update(
        task_serializer="json",
        accept_content=["json"],
        task_ignore_result=True,
        task_acks_late=True,
        broker_connection_retry_on_startup=True,
        timezone="UTC",
    )
    return app


class CeleryJobQueue(JobQueue):
    """Job queue publishing Celery tasks."""

    def __init__(self, app: Celery) -> None:
        self.app = app

    async def enqueue(
        self, name: str, payload: dict[str, Any], delay_seconds: int = 0
    ) -> str:
        """Publish a task, delayed by ``delay_seconds``."""
        # send_task does blocking broker I/O
        result = await asyncio.to_thread(
            self.app.send_task, name, kwargs=payload, countdown=delay_seconds
        )
        logfire.debug("Celery task published", name=name, task_id=result.id)
        return result.id


class MockJobQueue(JobQueue):
    """Job queue for tests that records jobs instead of publishing them."""

    def __init__(self) -> None:
        self.jobs: list[dict[str, Any]] = []

    async def enqueue(
        self, name: str, payload: dict[str, Any], delay_seconds: int = 0
    ) -> str:
        job_id = f"job-{len(self.jobs) + 1}"
        self.jobs.append(
            {
                "id": job_id,
                "name": name,
                "payload": payload,
                "delay_seconds": delay_seconds,
            }
        )
        return job_id
