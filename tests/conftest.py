"""Shared fixtures: settings isolated from the host environment and a ready test client."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from greeter.core.config import get_settings
from greeter.main import create_application
from tests.support import make_settings


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in ("SERVICE_MESSAGE", "HOST", "PORT", "LOG_LEVEL"):
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def client() -> TestClient:
    with TestClient(create_application(make_settings(SERVICE_MESSAGE="Hello"))) as test_client:
        yield test_client


@pytest.fixture
def fresh_settings_cache():
    """Let `get_settings()` re-read the environment for one test."""

    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"
