"""Badge and QR code rendering with Pillow and qrcode."""

from io import BytesIO

import qrcode
from PIL import Image, ImageDraw, ImageFont

from summit.domain.model import Delegate
from summit.domain.service.badge_service import BadgeRenderer

BADGE_SIZE = (400, 250)
BACKGROUND = "#f0f4f8"
HEADER_COLOR = "#004a99"
HEADER_HEIGHT = 60
TEXT_COLOR = "#333333"
QR_SIZE = 120
QR_POSITION = (260, 80)


def _qr_image(payload: str) -> Image.Image:
    qr = qrcode.QRCode(
        version=None,
        error_correction=qrcode.constants.ERROR_CORRECT_M,
        box_size=10,
        border=2,
    )
    qr.add_data(payload)
    qr.make(fit=True)
    return qr.make_image(fill_color="black", back_color="white").convert("RGB")


def _to_png(image: Image.Image) -> bytes:
    buffer = BytesIO()
    image.save(buffer, format="PNG")
    return buffer.getvalue()


def _truncate(draw: ImageDraw.ImageDraw, text: str, font, max_width: int) -> str:
    """Shorten text with an ellipsis until it fits the width."""
    if draw.textlength(text, font=font) <= max_width:
        return text
    while text and draw.textlength(f"{text}...", font=font) > max_width:
        text = text[:-1]
    return f"{text}..."


class PillowBadgeRenderer(BadgeRenderer):
    """Renders a 400x250 PNG badge: header, name, organisation, type, QR, year."""

    def render_qr(self, payload: str) -> bytes:
        return _to_png(_qr_image(payload).resize((300, 300)))

    def render_badge(self, delegate: Delegate, qr_payload: str) -> bytes:
        image = Image.new("RGB", BADGE_SIZE, BACKGROUND)
        draw = ImageDraw.Draw(image)

        title_font = ImageFont.load_default(size=24)
        name_font = ImageFont.load_default(size=20)
        body_font = ImageFont.load_default(size=15)

        # Header band
        draw.rectangle((0, 0, BADGE_SIZE[0], HEADER_HEIGHT), fill=HEADER_COLOR)
        draw.text(
            (BADGE_SIZE[0] // 2, HEADER_HEIGHT // 2),
            "EVENT BADGE",
            fill="white",
            font=title_font,
            anchor="mm",
        )

        text_width = QR_POSITION[0] - 30
        draw.text(
            (20, 90),
            _truncate(draw, delegate.salutation, name_font, text_width),
            fill=TEXT_COLOR,
            font=name_font,
        )
        draw.text(
            (20, 125),
            _truncate(draw, delegate.organization or "N/A", body_font, text_width),
            fill=TEXT_COLOR,
            font=body_font,
        )
        draw.text(
            (20, 150),
            delegate.delegate_type.value.replace("_", " ").title(),
            fill=HEADER_COLOR,
            font=body_font,
        )

        qr = _qr_image(qr_payload).resize((QR_SIZE, QR_SIZE))
        image.paste(qr, QR_POSITION)

        # Footer
        draw.text(
            (BADGE_SIZE[0] // 2, BADGE_SIZE[1] - 20),
            f"Event Year: {delegate.event_year}",
            fill=TEXT_COLOR,
            font=body_font,
            anchor="mm",
        )

        return _to_png(image)
