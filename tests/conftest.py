"""
Shared pytest fixtures for the mock HTTP server test suite.
"""
import logging

import pytest
import structlog
from fastapi.testclient import TestClient

from mock_http.config.settings import Settings
from mock_http.server import create_app


# ── Recorders ───────────────────────────────────────────────────────────────

class RecordingSink:
    """Request log sink that keeps every call."""

    def __init__(self):
        self.lines = []

    def __call__(self, method, path, delay_ms, status):
        self.lines.append((method, path, delay_ms, status))


class RecordingSleep:
    """Stand-in for the real delay: records milliseconds, returns at once."""

    def __init__(self):
        self.calls = []

    async def __call__(self, delay_ms):
        self.calls.append(delay_ms)


# ── App and client ──────────────────────────────────────────────────────────

@pytest.fixture
def settings():
    """Settings with defaults only (ignores any local .env)."""
    return Settings(_env_file=None)


@pytest.fixture
def sink():
    return RecordingSink()


@pytest.fixture
def sleeper():
    return RecordingSleep()


@pytest.fixture
def app(settings, sink, sleeper):
    return create_app(settings, sink=sink, sleep=sleeper)


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c


# ── Logging isolation ───────────────────────────────────────────────────────

@pytest.fixture(autouse=True)
def restore_logging():
    """Undo setup_logging() side effects on the root logger and structlog."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    structlog.reset_defaults()
