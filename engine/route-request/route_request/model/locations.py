"""
route_request/model/locations.py

Purpose:
    GenericLocation plus the two accepted input shapes for trip endpoints:
      - structured map: {"lat": 60.1, "lon": 24.9, "address": "Central station"}
      - legacy string:  "60.1,24.9", "60.1 24.9", "Home::60.1,24.9" or "Stop name::HSL:1040601"
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict

from route_request.model.ids import FeedScopedId

LABEL_SEPARATOR = "::"

_NUMBER = r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)"
# "60.17,24.94", "60.17, 24.94", "60.17 24.94", "+60.17 -24.94"
_LAT_LON = re.compile(rf"^\s*({_NUMBER})(?:\s*,\s*|\s+)({_NUMBER})\s*$")


class GenericLocation(BaseModel):
    model_config = ConfigDict(frozen=True)

    label: Optional[str] = None
    stop_id: Optional[FeedScopedId] = None
    lat: Optional[float] = None
    lng: Optional[float] = None

    @property
    def is_specified(self) -> bool:
        return self.stop_id is not None or (self.lat is not None and self.lng is not None)


def from_old_style_string(value: str) -> GenericLocation:
    """
    Parse the legacy `[label::]place` encoding where place is `lat,lon` or a stop id.
    Anything else yields an unspecified location that only carries the label.
    """
    if not isinstance(value, str):
        raise TypeError(f"expected a place string, got {type(value).__name__}")

    label, place = "", value
    if LABEL_SEPARATOR in value:
        label, place = value.split(LABEL_SEPARATOR, 1)

    m = _LAT_LON.match(place)
    if m:
        return GenericLocation(label=label or None, lat=float(m.group(1)), lng=float(m.group(2)))

    if FeedScopedId.is_valid_string(place.strip()):
        return GenericLocation(label=label or None, stop_id=FeedScopedId.parse(place))

    return GenericLocation(label=label or None)


def from_coordinates(value: Mapping[str, Any]) -> GenericLocation:
    if "lat" not in value or "lon" not in value:
        raise ValueError("coordinates need both 'lat' and 'lon'")
    lat, lon = value["lat"], value["lon"]
    for name, v in (("lat", lat), ("lon", lon)):
        if isinstance(v, bool) or not isinstance(v, (int, float)):
            raise TypeError(f"'{name}' must be a number, got {type(v).__name__}")

    address = value.get("address")
    if address is not None and not isinstance(address, str):
        raise TypeError(f"'address' must be a string, got {type(address).__name__}")
    return GenericLocation(label=address, lat=float(lat), lng=float(lon))


def to_generic_location(value: Any) -> GenericLocation:
    """Accept either endpoint shape."""
    if isinstance(value, Mapping):
        return from_coordinates(value)
    if isinstance(value, str):
        return from_old_style_string(value)
    raise TypeError(f"expected coordinates or a place string, got {type(value).__name__}")
