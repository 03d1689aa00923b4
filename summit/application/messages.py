"""Email and push content sent to delegates."""

from html import escape

from summit.domain.model import Delegate
from summit.domain.service import EmailAttachment, EmailMessage

QR_CONTENT_ID = "qr-code-badge"

REGISTRATION_REVIEW_TITLE = "Registration Under Review"
APPROVAL_PUSH_TITLE = "Registration Approved!"
REJECTION_PUSH_TITLE = "Registration Update"
REJECTION_PUSH_BODY = (
    "There is an update on your registration status. "
    "Please check your email for details."
)

_FOOTER = (
    '<div style="background-color: #f8f9fa; color: #888; padding: 15px; '
    'text-align: center; font-size: 12px; border-top: 1px solid #e0e0e0;">'
    "<p>This is an automated message. Please do not reply directly to this email.</p>"
    "</div>"
)


def _layout(heading: str, gradient: str, body: str) -> str:
    return (
        "<div style=\"font-family: 'Segoe UI', Tahoma, Geneva, Verdana, sans-serif; "
        "line-height: 1.8; color: #333; max-width: 680px; margin: 20px auto; "
        'border: 1px solid #e0e0e0; border-radius: 12px; overflow: hidden;">'
        f'<div style="background: {gradient}; color: white; padding: 30px; '
        'text-align: center;">'
        f'<h1 style="margin: 0; font-size: 28px; font-weight: 600;">{heading}</h1>'
        "</div>"
        f'<div style="padding: 30px;">{body}'
        '<p style="font-size: 16px; margin-top: 30px;">Best regards,<br>'
        "<strong>The Event Team</strong></p></div>"
        f"{_FOOTER}</div>"
    )


def registration_review_push_body(delegate: Delegate) -> str:
    return (
        f"Hi {delegate.salutation}, thank you for registering. We are currently "
        "reviewing your details and will notify you upon approval."
    )


def approval_push_body(delegate: Delegate) -> str:
    return (
        f"Congratulations, {delegate.full_name}! "
        "Your registration for the event has been approved."
    )


def registration_received_email(delegate: Delegate) -> EmailMessage:
    body = (
        f'<p style="font-size: 18px;">Dear {escape(delegate.salutation)},</p>'
        '<p style="font-size: 16px;">Thank you for registering for the upcoming '
        "event. We have successfully received your information, and it is now "
        "under review by our team.</p>"
        '<p style="font-size: 16px;">You will receive another email notification '
        "once your registration has been approved.</p>"
    )
    return EmailMessage(
        to=delegate.email,
        subject="Registration Confirmation",
        html=_layout(
            "Registration Received",
            "linear-gradient(135deg, #007bff 0%, #0056b3 100%)",
            body,
        ),
    )


def approval_email(
    delegate: Delegate, qr_png: bytes | None, badge_url: str
) -> EmailMessage:
    """Approval email with the check-in QR code shown inline.

    Without a QR image the delegate is pointed at the printable badge instead.
    """
    name = escape(delegate.salutation)
    qr = (
        f'<img src="cid:{QR_CONTENT_ID}" alt="QR Code for Check-in" '
        'style="max-width: 220px;">'
        if qr_png
        else "<p>Your QR code is on the printable badge below.</p>"
    )
    body = (
        f'<p style="font-size: 18px;">Dear {name},</p>'
        '<p style="font-size: 16px;">We are delighted to inform you that your '
        "registration for the event has been approved. Please find your digital "
        "check-in badge below.</p>"
        '<div style="border: 2px dashed #004a99; border-radius: 15px; '
        'padding: 25px; margin: 30px 0; text-align: center;">'
        '<h2 style="color: #004a99; margin-top: 0;">EVENT CHECK-IN BADGE</h2>'
        f"{qr}"
        f'<h3 style="font-size: 24px;">{name}</h3>'
        f"<p><strong>Delegate Type:</strong> {delegate.delegate_type.value}</p>"
        f"<p><strong>Event Year:</strong> {delegate.event_year}</p>"
        "</div>"
        '<div style="text-align: center;">'
        f'<a href="{escape(badge_url)}" download style="background-color: #004a99; '
        "color: white; padding: 14px 28px; text-decoration: none; "
        'border-radius: 8px;">Download for Print</a></div>'
        '<p style="font-size: 16px;">Please present this QR code at the '
        "registration desk for a quick check-in. You can print this email or "
        "show it on your mobile device.</p>"
    )
    return EmailMessage(
        to=delegate.email,
        subject="Your Registration has been Approved!",
        html=_layout(
            "Registration Approved!",
            "linear-gradient(135deg, #004a99 0%, #002b5a 100%)",
            body,
        ),
        attachments=(
            [
                EmailAttachment(
                    filename="qr-code-badge.png",
                    content=qr_png,
                    content_type="image/png",
                    content_id=QR_CONTENT_ID,
                )
            ]
            if qr_png
            else []
        ),
    )


def rejection_email(delegate: Delegate) -> EmailMessage:
    body = (
        f'<p style="font-size: 18px;">Dear {escape(delegate.full_name)},</p>'
        '<p style="font-size: 16px;">We regret to inform you that your '
        "registration has been rejected. Reason: "
        f"{escape(delegate.rejection_reason or '')}.</p>"
        '<p style="font-size: 16px;">If you believe this is an error, please '
        "contact our support team.</p>"
    )
    return EmailMessage(
        to=delegate.email,
        subject="Update on Your Registration Status",
        html=_layout(
            "Registration Update",
            "linear-gradient(135deg, #6c757d 0%, #495057 100%)",
            body,
        ),
    )


def check_in_email(delegate: Delegate) -> EmailMessage:
    location = escape(delegate.check_in_location or "the venue")
    body = (
        f'<p style="font-size: 18px;">Dear {escape(delegate.salutation)},</p>'
        '<p style="font-size: 16px;">This email confirms that you have been '
        f"successfully checked in at <strong>{location}</strong>. "
        "We are thrilled to have you with us!</p>"
        '<p style="font-size: 16px;">If you need any assistance, please do not '
        "hesitate to contact our staff.</p>"
    )
    return EmailMessage(
        to=delegate.email,
        subject="Welcome! You are Checked In",
        html=_layout(
            "Welcome to the Event!",
            "linear-gradient(135deg, #28a745 0%, #218838 100%)",
            body,
        ),
    )


def password_reset_email(delegate: Delegate, pin: str, ttl_minutes: int) -> EmailMessage:
    body = (
        f'<p style="font-size: 18px;">Dear {escape(delegate.salutation)},</p>'
        '<p style="font-size: 16px;">Your password reset PIN is:</p>'
        '<p style="font-size: 32px; font-weight: 700; letter-spacing: 6px; '
        f'text-align: center;">{pin}</p>'
        f'<p style="font-size: 16px;">This PIN will expire in {ttl_minutes} '
        "minutes. Please keep it secure and do not share it with anyone.</p>"
    )
    return EmailMessage(
        to=delegate.email,
        subject="Password Reset PIN",
        html=_layout(
            "Password Reset",
            "linear-gradient(135deg, #004a99 0%, #002b5a 100%)",
            body,
        ),
    )
