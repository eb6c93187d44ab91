"""
Shared fixtures for the stylist service tests.
"""
import os
import io
import base64
import tempfile

# Keep generation logs out of the repository during tests
os.environ.setdefault("STYLIST_LOGS_DIR", tempfile.mkdtemp(prefix="stylist-logs-"))

import pytest
from PIL import Image

ENV_KEYS = (
    "GEMINI_API_KEY",
    "OPENAI_API_KEY",
    "OPENWEATHER_API_KEY",
    "STYLIST_IMAGE_MODEL_PRIMARY",
    "STYLIST_IMAGE_MODEL_SECONDARY",
    "STYLIST_IMAGE_MAX_RETRIES",
    "STYLIST_RETRY_BACKOFF_MS",
    "STYLIST_BATCH_STAGGER_MS",
    "STYLIST_BATCH_DEADLINE_SECONDS",
    "STYLIST_TEXT_ENABLED",
    "STYLIST_TEXT_PRIMARY",
    "STYLIST_TEXT_SECONDARY",
)


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Every test starts from default settings, no API keys and zeroed metrics."""
    from stylist_service.config import reload_settings
    from stylist_service.observability import reset_metrics

    for key in ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    reload_settings()
    reset_metrics()
    yield
    monkeypatch.undo()
    reload_settings()


def _jpeg_bytes(color="blue", size=(64, 64)) -> bytes:
    img = Image.new("RGB", size, color=color)
    buffer = io.BytesIO()
    img.save(buffer, format="JPEG")
    return buffer.getvalue()


@pytest.fixture
def photo_data_uri():
    """A small valid JPEG as a data URI."""
    return "data:image/jpeg;base64," + base64.b64encode(_jpeg_bytes()).decode("utf-8")


@pytest.fixture
def photo_file(tmp_path):
    """A small valid JPEG on disk."""
    path = tmp_path / "subscriber.jpg"
    path.write_bytes(_jpeg_bytes(color="red"))
    return path
