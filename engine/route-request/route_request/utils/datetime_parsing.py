"""
route_request/utils/datetime_parsing.py

Purpose:
    Interpret the `date` / `time` arguments in the transit data time zone.

Notes:
    - Either part may be missing; the missing part is taken from `now` in that zone.
    - Both missing returns None so the caller keeps its "planned for now" timestamp.
    - Unknown formats raise ValueError (surfaced as InvalidArgument by the overlay).
"""

from __future__ import annotations

from datetime import date, datetime, time, tzinfo
from typing import Optional

_DATE_FORMATS = ("%Y-%m-%d", "%Y%m%d", "%m/%d/%Y", "%m-%d-%Y", "%d.%m.%Y")
_TIME_FORMATS = ("%H:%M:%S", "%H:%M", "%I:%M%p", "%I:%M %p", "%I%p")


def parse_date(raw: str) -> date:
    if not isinstance(raw, str):
        raise TypeError(f"date must be a string, got {type(raw).__name__}")
    s = raw.strip()
    for fmt in _DATE_FORMATS:
        try:
            return datetime.strptime(s, fmt).date()
        except ValueError:
            continue
    raise ValueError(f"unrecognized date '{raw}' (use YYYY-MM-DD)")


def parse_time(raw: str) -> time:
    if not isinstance(raw, str):
        raise TypeError(f"time must be a string, got {type(raw).__name__}")
    s = raw.strip().upper()
    for fmt in _TIME_FORMATS:
        try:
            return datetime.strptime(s, fmt).time()
        except ValueError:
            continue
    raise ValueError(f"unrecognized time '{raw}' (use HH:MM or HH:MM:SS)")


def combine_in_zone(
    d: Optional[date],
    t: Optional[time],
    tz: tzinfo,
    *,
    now: datetime,
) -> Optional[datetime]:
    if d is None and t is None:
        return None

    local_now = now.astimezone(tz)
    if d is None:
        d = local_now.date()
    if t is None:
        t = local_now.time().replace(microsecond=0)
    return datetime.combine(d, t, tzinfo=tz)
