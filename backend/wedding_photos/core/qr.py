import base64
import io

import qrcode

from wedding_photos.config import Settings


def make_event_url(qr_code: str, settings: Settings) -> str:
    """Guest-facing URL an event's QR code points at"""
    return f"{settings.PUBLIC_BASE_URL.rstrip('/')}/event/{qr_code}"


def render_qr_png(data: str) -> bytes:
    """Render ``data`` into a QR code and return the PNG bytes"""
    qr = qrcode.QRCode(
        version=1,
        error_correction=qrcode.constants.ERROR_CORRECT_L,
        box_size=10,
        border=4,
    )
    qr.add_data(data)
    qr.make(fit=True)

    img = qr.make_image(fill_color="black", back_color="white")
    buffer = io.BytesIO()
    img.save(buffer, format="PNG")
    return buffer.getvalue()


def render_qr_data_url(data: str) -> str:
    encoded = base64.b64encode(render_qr_png(data)).decode("ascii")
    return f"data:image/png;base64,{encoded}"
