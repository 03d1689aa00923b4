"""Domain services."""

from .badge_service import BadgeRenderer, BadgeService
from .credential_service import CredentialService
from .delegate_service import DelegateService, DelegateStatistics
from .event_service import EventService
from .jwt_service import JWTService
from .lifecycle_service import LifecycleService
from .notification_service import (
    EmailAttachment,
    EmailMessage,
    EmailSender,
    JobQueue,
    NotificationService,
    PushSender,
)
from .upload_service import FileStorage, ImageNormalizer, UploadedFile, UploadService

__all__ = [
    "BadgeRenderer",
    "BadgeService",
    "CredentialService",
    "DelegateService",
    "DelegateStatistics",
    "EmailAttachment",
    "EmailMessage",
    "EmailSender",
    "EventService",
    "FileStorage",
    "ImageNormalizer",
    "JWTService",
    "JobQueue",
    "LifecycleService",
    "NotificationService",
    "PushSender",
    "UploadService",
    "UploadedFile",
]
