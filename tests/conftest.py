import os

# Loggers must stay uncached so structlog.testing.capture_logs sees their events.
os.environ["LOG_CACHE"] = "false"

import pytest  # noqa: E402
import structlog  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from structlog.testing import capture_logs  # noqa: E402

from app.features.notes.repository import NoteRepository  # noqa: E402
from app.main import create_app  # noqa: E402


@pytest.fixture
def repository() -> NoteRepository:
    return NoteRepository()


@pytest.fixture
def client() -> TestClient:
    return TestClient(create_app())


@pytest.fixture
def log_events():
    structlog.configure(cache_logger_on_first_use=False)
    with capture_logs() as events:
        yield events
