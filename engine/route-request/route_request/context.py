"""
route_request/context.py

Purpose:
    Read-only collaborators the mapper needs for one request:
      - the baseline RouteRequest (deep copied per request, never mutated)
      - the transit data time zone
      - locale negotiation (explicit value + ambient Accept-Language)
      - a clock (injectable so translations are reproducible in tests)

Notes:
    - Created once at startup (backend create_app / CLI) and passed explicitly.
    - with_accept_language() returns a per-request copy; the shared instance is untouched.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Callable, Optional
from zoneinfo import ZoneInfo

from route_request.localization import LocaleNegotiator, negotiate_locale
from route_request.model.route_request import RouteRequest


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class ServerRequestContext:
    route_request_defaults: RouteRequest
    time_zone: ZoneInfo = ZoneInfo("UTC")
    default_locale: str = "en"
    locale_negotiator: LocaleNegotiator = negotiate_locale
    clock: Callable[[], datetime] = utc_now
    accept_language: Optional[str] = None

    def default_route_request(self, now: Optional[datetime] = None) -> RouteRequest:
        return self.route_request_defaults.copy_with_date_time_now(self.clock() if now is None else now)

    def resolve_locale(self, raw: Optional[str]) -> str:
        return self.locale_negotiator(raw, accept_language=self.accept_language, default=self.default_locale)

    def with_accept_language(self, value: Optional[str]) -> "ServerRequestContext":
        return dataclasses.replace(self, accept_language=value)
