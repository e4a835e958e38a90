"""Parse the duration part of a cost-function constant.

Accepted:

- plain seconds: `600`, `12.5`
- unit tokens, optionally chained: `10m`, `1h30m`, `2h 15s`
- ISO-8601 time durations: `PT10M`, `PT1H30M`

Anything else, and negative or non-finite values, raise `ValueError`.
"""

from __future__ import annotations

import math
import re

_UNIT_TO_SECONDS = {"d": 86400.0, "h": 3600.0, "m": 60.0, "s": 1.0}

_TOKEN = re.compile(r"(\d+(?:\.\d+)?)\s*([dhms])", re.IGNORECASE)
_CHAIN = re.compile(r"^(?:\d+(?:\.\d+)?\s*[dhms]\s*)+$", re.IGNORECASE)


def parse_duration_seconds(raw: str, *, field_name: str = "duration") -> float:
    value = raw.strip()
    if not value:
        raise ValueError(f"{field_name} must be set")

    if value[:2].upper() == "PT":
        value = value[2:]

    try:
        seconds = float(value)
    except ValueError:
        if not _CHAIN.match(value):
            raise ValueError(f"{field_name} must be seconds or a duration like '10m' / '1h30m'") from None
        seconds = sum(float(n) * _UNIT_TO_SECONDS[u.lower()] for n, u in _TOKEN.findall(value))

    if not math.isfinite(seconds) or seconds < 0:
        raise ValueError(f"{field_name} must be a finite duration >= 0")
    return seconds
