"""Email infrastructure providers."""

from dishka import Scope, provide

from summit.adapter.smtp import SmtpEmailSender
from summit.config import SmtpSettings
from summit.domain.service import EmailSender
from summit.util.di.base import ProviderBase


class EmailProvider(ProviderBase):
    """Email component base."""

    __mock_component__ = "email"


class ProdEmailProvider(EmailProvider):
    """Production email provider sending over SMTP."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_email_sender(self, settings: SmtpSettings) -> EmailSender:
        return SmtpEmailSender(settings)
