import logging

import pytest
from fastapi.testclient import TestClient

from envbind.main import app
from envbind.utils import JsonFormatter, PlainFormatter

_BOUND_KEYS = (
    "HOST",
    "PORT",
    "NAME",
    "RATIO",
    "RETRIES",
    "SERVICE_NAME",
    "ENVIRONMENT",
    "WORKERS",
    "LOG_LEVEL",
    "LOG_FORMAT",
    "LOG_UTC",
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for key in _BOUND_KEYS:
        monkeypatch.delenv(key, raising=False)


@pytest.fixture(autouse=True)
def _drop_configured_handlers():
    root = logging.getLogger()
    level = root.level
    yield
    for h in list(root.handlers):
        if isinstance(h.formatter, (JsonFormatter, PlainFormatter)):
            root.removeHandler(h)
    root.setLevel(level)


@pytest.fixture(scope="session")
def client():
    return TestClient(app)
