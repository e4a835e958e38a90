"""
route_request/model/page_cursor.py

Purpose:
    Paging cursor handed back to clients as an opaque token.

Notes:
    - Token format: URL-safe base64 (padding stripped) of a compact JSON document
      {"type": "NEXT_PAGE", "edt": <iso>, "lat": <iso|null>, "sw": <seconds>}.
    - decode() never raises; an unreadable token is logged and treated as "no cursor",
      the same way a stale token from an older deployment is handled.
"""

from __future__ import annotations

import base64
import binascii
import json
from datetime import datetime, timedelta
from typing import Optional

from pydantic import BaseModel, ConfigDict, ValidationError

from route_request.contracts.enums import PageType
from route_request.utils.logging import get_logger

logger = get_logger(__name__)


class PageCursor(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: PageType
    earliest_departure_time: datetime
    latest_arrival_time: Optional[datetime] = None
    search_window: timedelta

    def encode(self) -> str:
        doc = {
            "type": self.type.value,
            "edt": self.earliest_departure_time.isoformat(),
            "lat": self.latest_arrival_time.isoformat() if self.latest_arrival_time else None,
            "sw": int(self.search_window.total_seconds()),
        }
        raw = json.dumps(doc, separators=(",", ":")).encode("utf-8")
        return base64.urlsafe_b64encode(raw).decode("ascii").rstrip("=")

    @classmethod
    def decode(cls, token: str) -> Optional["PageCursor"]:
        if not isinstance(token, str):
            raise TypeError(f"expected a page cursor string, got {type(token).__name__}")
        if not token.strip():
            return None

        try:
            padded = token.strip() + "=" * (-len(token.strip()) % 4)
            doc = json.loads(base64.urlsafe_b64decode(padded.encode("ascii")))
            return cls(
                type=doc["type"],
                earliest_departure_time=doc["edt"],
                latest_arrival_time=doc.get("lat"),
                search_window=timedelta(seconds=int(doc["sw"])),
            )
        except (binascii.Error, UnicodeError, ValueError, KeyError, TypeError, ValidationError) as e:
            logger.warning("Unable to decode page cursor: %s", e)
            return None
