"""
Pytest configuration for the user registry.

Provides fixtures for:
- Settings built from a controlled environment
- A fresh DI container per test
- A FastAPI TestClient bound to that container
"""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from user_registry.core.config import Settings
from user_registry.di.container import DIContainer
from user_registry.main import create_application


@pytest.fixture
def settings(monkeypatch: pytest.MonkeyPatch) -> Settings:
    """Settings with test-friendly defaults, independent of the caller's environment."""
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("STORE_THREAD_SAFE", "true")
    monkeypatch.delenv("APP_TITLE", raising=False)
    monkeypatch.delenv("CORS_ALLOW_ORIGINS", raising=False)
    return Settings()


@pytest.fixture
def container(settings: Settings) -> DIContainer:
    return DIContainer(settings)


@pytest.fixture
def client(settings: Settings, container: DIContainer) -> TestClient:
    app = create_application(settings=settings, container=container)
    return TestClient(app)
