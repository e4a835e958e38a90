"""
backend.shared.models.enums

Purpose:
    Enumerations exposed by the HTTP contract (plan-query request schema, /v1/info).

Design Notes:
    - Keep enum string values stable to preserve backward compatibility for API clients.
    - Values must stay aligned with the route_request engine enums (ApiRequestMode,
      Qualifier, BicycleOptimizeType, TransitMode). tests/shared/test_enum_alignment.py
      guards the drift.
"""

from __future__ import annotations

from enum import Enum


class TransportModeName(str, Enum):
    """
    Modes accepted in `transportModes[].mode`.

    IMPORTANT:
        TRANSIT expands to every transit mode; WALK is always implied by the engine.
    """

    WALK = "WALK"
    BICYCLE = "BICYCLE"
    SCOOTER = "SCOOTER"
    CAR = "CAR"
    TRAM = "TRAM"
    SUBWAY = "SUBWAY"
    RAIL = "RAIL"
    BUS = "BUS"
    COACH = "COACH"
    FERRY = "FERRY"
    CABLE_CAR = "CABLE_CAR"
    GONDOLA = "GONDOLA"
    FUNICULAR = "FUNICULAR"
    AIRPLANE = "AIRPLANE"
    TROLLEYBUS = "TROLLEYBUS"
    MONORAIL = "MONORAIL"
    CARPOOL = "CARPOOL"
    TAXI = "TAXI"
    TRANSIT = "TRANSIT"
    FLEX = "FLEX"


class QualifierName(str, Enum):
    RENT = "RENT"
    HAVE = "HAVE"
    PARK = "PARK"
    KEEP = "KEEP"
    PICKUP = "PICKUP"
    DROPOFF = "DROPOFF"
    ACCESS = "ACCESS"
    EGRESS = "EGRESS"
    DIRECT = "DIRECT"
    HAIL = "HAIL"


class OptimizeTypeName(str, Enum):
    """Bicycle optimization. TRIANGLE enables the `triangle` factors."""

    QUICK = "QUICK"
    SAFE = "SAFE"
    FLAT = "FLAT"
    GREENWAYS = "GREENWAYS"
    TRIANGLE = "TRIANGLE"
