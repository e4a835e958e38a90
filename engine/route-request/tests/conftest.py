"""
engine.route-request.tests.conftest

Purpose:
    Local pytest fixtures for route-request engine tests.
    Keeps fixtures discoverable when running pytest from the monorepo root.
"""

from __future__ import annotations

from datetime import datetime, timezone
from zoneinfo import ZoneInfo

import pytest

from route_request.config.config import load_route_request_defaults
from route_request.context import ServerRequestContext

FIXED_NOW = datetime(2026, 10, 19, 6, 30, tzinfo=timezone.utc)


@pytest.fixture()
def fixed_now() -> datetime:
    return FIXED_NOW


@pytest.fixture()
def context_factory():
    """
    Factory fixture for ServerRequestContext with a frozen clock.

    IMPORTANT:
        The baseline is built once per context; tests assert it is never mutated.
    """

    def _make(*, time_zone: str = "UTC", overrides=None, accept_language=None, now=FIXED_NOW) -> ServerRequestContext:
        return ServerRequestContext(
            route_request_defaults=load_route_request_defaults(overrides),
            time_zone=ZoneInfo(time_zone),
            default_locale="en",
            clock=lambda: now,
            accept_language=accept_language,
        )

    return _make


@pytest.fixture()
def context(context_factory) -> ServerRequestContext:
    return context_factory()
