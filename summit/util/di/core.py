"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from summit.config import (
    AuthSettings,
    PushSettings,
    QueueSettings,
    Settings,
    SmtpSettings,
    StorageSettings,
)
from summit.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Settings loaded from the environment and the .env file."""

    scope = Scope.APP

    @provide
    def provide_settings(self) -> Settings:
        return Settings()

    @provide
    def provide_auth_settings(self, settings: Settings) -> AuthSettings:
        return settings.auth

    @provide
    def provide_smtp_settings(self, settings: Settings) -> SmtpSettings:
        return settings.smtp

    @provide
    def provide_push_settings(self, settings: Settings) -> PushSettings:
        return settings.push

    @provide
    def provide_storage_settings(self, settings: Settings) -> StorageSettings:
        return settings.storage

    @provide
    def provide_queue_settings(self, settings: Settings) -> QueueSettings:
        return settings.queue
