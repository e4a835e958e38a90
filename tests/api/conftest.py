"""
tests.api.conftest

Shared pytest fixtures for API tests.
"""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from backend.api.main import create_app
from backend.api.settings import Settings


@pytest.fixture()
def client_factory(monkeypatch):
    """
    Factory fixture that creates a fresh TestClient.

    IMPORTANT:
        Used when tests need to set ROUTE_REQUEST_* env vars before app creation
        (e.g., time zone or defaults file).
    """

    def _make(**env: str) -> TestClient:
        for key, value in env.items():
            monkeypatch.setenv(f"ROUTE_REQUEST_{key.upper()}", value)
        app = create_app(Settings())
        return TestClient(app, raise_server_exceptions=False)

    return _make


@pytest.fixture()
def client(client_factory) -> TestClient:
    """Alias fixture for tests that run with default settings."""
    return client_factory()
