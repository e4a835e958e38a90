# route_request/model/triangle.py
# Purpose: Time/slope/safety weighting used when the bicycle optimize type is TRIANGLE.

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict


class TimeSlopeSafetyTriangle(BaseModel):
    """
    Normalized factors (sum to 1.0). Always build through `normalized()` or the builder;
    direct construction skips normalization.
    """

    model_config = ConfigDict(frozen=True)

    time: float = 0.34
    slope: float = 0.33
    safety: float = 0.33

    @classmethod
    def normalized(cls, time: float, slope: float, safety: float) -> "TimeSlopeSafetyTriangle":
        time, slope, safety = (max(float(v), 0.0) for v in (time, slope, safety))

        if time == 0.0 and slope == 0.0 and safety == 0.0:
            time = slope = safety = 1.0

        total = time + slope + safety
        safety = round(safety / total, 2)
        slope = round(slope / total, 2)
        time = round(1.0 - (safety + slope), 2)
        return cls(time=time, slope=slope, safety=safety)


class TriangleBuilder:
    """Collects factor overrides, then normalizes once in build()."""

    def __init__(self, base: TimeSlopeSafetyTriangle) -> None:
        self.time: Optional[float] = None
        self.slope: Optional[float] = None
        self.safety: Optional[float] = None
        self._base = base

    def with_time(self, v: float) -> None:
        self.time = _number(v, "timeFactor")

    def with_slope(self, v: float) -> None:
        self.slope = _number(v, "slopeFactor")

    def with_safety(self, v: float) -> None:
        self.safety = _number(v, "safetyFactor")

    def build(self) -> TimeSlopeSafetyTriangle:
        if self.time is None and self.slope is None and self.safety is None:
            return self._base
        return TimeSlopeSafetyTriangle.normalized(
            time=self._base.time if self.time is None else self.time,
            slope=self._base.slope if self.slope is None else self.slope,
            safety=self._base.safety if self.safety is None else self.safety,
        )


def _number(v: object, name: str) -> float:
    if isinstance(v, bool) or not isinstance(v, (int, float)):
        raise TypeError(f"{name} must be a number, got {type(v).__name__}")
    return float(v)
