"""SMTP email sender."""

from email.message import EmailMessage as MimeMessage
from email.utils import formataddr

import aiosmtplib
import logfire

from summit.adapter.error import ProviderError
from summit.config import SmtpSettings
from summit.domain.service.notification_service import EmailMessage, EmailSender

PLAIN_TEXT_FALLBACK = "This message requires an email client that can display HTML."


def build_mime_message(message: EmailMessage, sender: str) -> MimeMessage:
    """Build a multipart MIME message.

    Attachments with a ``content_id`` are added as related parts of the HTML
    body so ``<img src="cid:...">`` resolves; the rest are regular attachments.
    """
    mime = MimeMessage()
    mime["From"] = sender
    mime["To"] = message.to
    mime["Subject"] = message.subject
    mime.set_content(PLAIN_TEXT_FALLBACK)
    mime.add_alternative(message.html, subtype="html")

    html_part = mime.get_payload()[1]
    for attachment in message.attachments:
        maintype, _, subtype = attachment.content_type.partition("/")
        if attachment.content_id:
            html_part.add_related(
                attachment.content,
                maintype=maintype,
                subtype=subtype or "octet-stream",
                cid=f"<{attachment.content_id}>",
                filename=attachment.filename,
            )
        else:
            mime.add_attachment(
                attachment.content,
                maintype=maintype,
                subtype=subtype or "octet-stream",
                filename=attachment.filename,
            )
    return mime


class SmtpEmailSender(EmailSender):
    """Email sender using aiosmtplib."""

    def __init__(self, settings: SmtpSettings) -> None:
        """Initialize SMTP sender.

        Args:
            settings: SMTP connection settings
        """
        self.settings = settings
        self.sender = formataddr((settings.sender_name, settings.sender_address))

    async def send(self, message: EmailMessage) -> None:
        """Send the message over SMTP.

        Raises:
            ProviderError: If the server rejects the message or is unreachable
        """
        mime = build_mime_message(message, self.sender)
        try:
            await aiosmtplib.send(
                mime,
                hostname=self.settings.host,
                port=self.settings.port,
                username=self.settings.username,
                password=self.settings.password,
                use_tls=self.settings.use_tls,
                start_tls=self.settings.start_tls,
                timeout=self.settings.timeout,
            )
        except aiosmtplib.SMTPException as e:
            logfire.error("SMTP send failed", to=message.to, error=str(e))
            raise ProviderError("smtp", str(e))


class MockEmailSender(EmailSender):
    """Email sender for tests that records messages instead of sending them."""

    def __init__(self) -> None:
        self.sent: list[EmailMessage] = []
        self.fail_with: Exception | None = None

    async def send(self, message: EmailMessage) -> None:
        if self.fail_with:
            raise self.fail_with
        self.sent.append(message)
