"""
backend.api.contracts.request_id_policy

Purpose:
    Central policy for request/correlation IDs (header names + response behavior).

Notes:
    - Incoming ids end up in every log line, so only short printable tokens are echoed.
      Anything else is replaced with a fresh uuid4.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

_TOKEN = re.compile(r"^[A-Za-z0-9._:\-]+$")


@dataclass(frozen=True)
class RequestIdPolicy:
    request_id_header: str = "X-Request-Id"
    correlation_id_header: str = "X-Correlation-Id"
    response_header: str = "X-Request-Id"
    max_length: int = 128

    def accepts(self, value: str | None) -> bool:
        return bool(value) and len(value) <= self.max_length and bool(_TOKEN.match(value))
