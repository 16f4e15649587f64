import logging
import os

# Set environment variables BEFORE any imports that might use settings
os.environ["API_PREFIX"] = "/v1"
os.environ["LATENCY_MIN_MS"] = "100"
os.environ["LATENCY_MAX_MS"] = "1000"
os.environ.pop("FRONTEND_URL", None)

import pytest
from fastapi.testclient import TestClient

from app.core.logging import StructuredLogger
from app.main import app


class RecordingLogger(StructuredLogger):
    """Structured logger that keeps every entry for assertions."""

    def __init__(self):
        super().__init__(logging.getLogger("tests.recording"))
        self.entries: list[tuple[int, dict]] = []

    def log(self, level, payload):
        self.entries.append((level, dict(payload)))

    def named(self, name: str) -> list[dict]:
        return [payload for _, payload in self.entries if payload.get("name") == name]


@pytest.fixture(scope="function")
def recording_logger():
    """Replace the application's structured logger for the duration of a test."""
    original = app.state.structured_logger
    recorder = RecordingLogger()
    app.state.structured_logger = recorder
    yield recorder
    app.state.structured_logger = original


@pytest.fixture(scope="function")
def client(recording_logger):
    """Create a test client whose structured log entries are recorded."""
    yield TestClient(app)
