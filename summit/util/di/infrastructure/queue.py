"""Job queue infrastructure providers."""

from celery import Celery
from dishka import Scope, provide

from summit.adapter.celery_queue import CeleryJobQueue, create_celery_app
from summit.config import QueueSettings
from summit.domain.service import JobQueue
from summit.util.di.base import ProviderBase


class QueueProvider(ProviderBase):
    """Queue component base."""

    __mock_component__ = "queue"


class ProdQueueProvider(QueueProvider):
    """Production queue provider publishing Celery tasks to Redis."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_celery_app(self, settings: QueueSettings) -> Celery:
        return create_celery_app(settings)

    @provide(scope=Scope.APP)
    def get_job_queue(self, app: Celery) -> JobQueue:
        return CeleryJobQueue(app)
