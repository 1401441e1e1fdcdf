import io
import os
import tempfile
from datetime import datetime, timedelta, timezone

import pytest
from PIL import Image

# Importing wedding_photos.main builds the module-level app, keep its uploads out of the repo
os.environ.setdefault("UPLOAD_FOLDER", tempfile.mkdtemp(prefix="wedding-photos-"))

from fastapi.testclient import TestClient

from wedding_photos.config import Settings
from wedding_photos.core.uploads import UploadStore
from wedding_photos.db.memory import MemoryStorage
from wedding_photos.main import create_app


class FakeClock:
    """Every reading is one second after the previous one"""

    def __init__(self, start: datetime = datetime(2025, 6, 1, 12, 0, tzinfo=timezone.utc)):
        self.now = start

    def __call__(self) -> datetime:
        self.now += timedelta(seconds=1)
        return self.now


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def storage(clock):
    return MemoryStorage(clock=clock)


@pytest.fixture
def settings(tmp_path):
    return Settings(UPLOAD_FOLDER=str(tmp_path / "uploads"))


@pytest.fixture
def upload_store(settings):
    return UploadStore(settings.UPLOAD_FOLDER)


@pytest.fixture
def app(settings, storage, upload_store):
    return create_app(settings=settings, storage=storage, upload_store=upload_store)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def make_image():
    """Factory for small, valid image files"""

    def _make_image(fmt: str = "PNG", size=(20, 20)) -> bytes:
        buffer = io.BytesIO()
        Image.new("RGB", size, color=(200, 120, 80)).save(buffer, format=fmt)
        return buffer.getvalue()

    return _make_image


@pytest.fixture
def event(client):
    response = client.post(
        "/api/events",
        json={"coupleName": "A & B", "date": "2025-06-01", "venue": "Hall"},
    )
    assert response.status_code == 200
    return response.json()
