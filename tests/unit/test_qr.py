import base64

from wedding_photos.config import Settings
from wedding_photos.core.qr import make_event_url, render_qr_data_url, render_qr_png

PNG_MAGIC = b"\x89PNG\r\n\x1a\n"


def test_make_event_url():
    settings = Settings(PUBLIC_BASE_URL="https://photos.example.com/")
    assert make_event_url("event-1-123", settings) == "https://photos.example.com/event/event-1-123"


def test_render_qr_png():
    assert render_qr_png("https://photos.example.com/event/event-1-123").startswith(PNG_MAGIC)


def test_render_qr_data_url():
    data_url = render_qr_data_url("event-1-123")

    prefix = "data:image/png;base64,"
    assert data_url.startswith(prefix)
    assert base64.b64decode(data_url[len(prefix):]).startswith(PNG_MAGIC)
