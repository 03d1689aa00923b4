"""Domain layer DI providers."""

from dishka import Scope, provide

from summit.config import AuthSettings
from summit.domain.repository import DelegateRepository, EventRepository
from summit.domain.service import (
    BadgeRenderer,
    BadgeService,
    CredentialService,
    DelegateService,
    EmailSender,
    EventService,
    FileStorage,
    ImageNormalizer,
    JobQueue,
    JWTService,
    LifecycleService,
    NotificationService,
    PushSender,
    UploadService,
)
from summit.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to share the request's repositories.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_delegate_service(
        self, delegate_repository: DelegateRepository
    ) -> DelegateService:
        """Provide delegate domain service."""
        return DelegateService(delegate_repository=delegate_repository)

    @provide
    def get_event_service(self, event_repository: EventRepository) -> EventService:
        """Provide event domain service."""
        return EventService(event_repository=event_repository)

    @provide
    def get_lifecycle_service(
        self, delegate_repository: DelegateRepository
    ) -> LifecycleService:
        """Provide lifecycle transition service."""
        return LifecycleService(delegate_repository=delegate_repository)

    @provide
    def get_credential_service(
        self, delegate_repository: DelegateRepository, auth_settings: AuthSettings
    ) -> CredentialService:
        """Provide credential service."""
        return CredentialService(
            delegate_repository=delegate_repository, auth_settings=auth_settings
        )

    @provide
    def get_notification_service(
        self,
        delegate_repository: DelegateRepository,
        email_sender: EmailSender,
        push_sender: PushSender,
        job_queue: JobQueue,
    ) -> NotificationService:
        """Provide notification service."""
        return NotificationService(
            delegate_repository=delegate_repository,
            email_sender=email_sender,
            push_sender=push_sender,
            job_queue=job_queue,
        )

    @provide
    def get_badge_service(self, renderer: BadgeRenderer) -> BadgeService:
        """Provide badge service."""
        return BadgeService(renderer=renderer)

    @provide
    def get_upload_service(
        self, storage: FileStorage, normalizer: ImageNormalizer
    ) -> UploadService:
        """Provide upload service."""
        return UploadService(storage=storage, normalizer=normalizer)
