"""
route_request/contracts/enums.py

Purpose:
    Shared enums used across the mapper, mode resolution, filters and the request model
    to avoid circular imports.
"""

from __future__ import annotations

from enum import Enum


class StreetMode(str, Enum):
    """Street mode assigned to one phase (access/egress/direct/transfer) of a journey."""

    NOT_SET = "NOT_SET"
    WALK = "WALK"
    BIKE = "BIKE"
    BIKE_TO_PARK = "BIKE_TO_PARK"
    BIKE_RENTAL = "BIKE_RENTAL"
    SCOOTER_RENTAL = "SCOOTER_RENTAL"
    CAR = "CAR"
    CAR_TO_PARK = "CAR_TO_PARK"
    CAR_PICKUP = "CAR_PICKUP"
    CAR_RENTAL = "CAR_RENTAL"
    FLEXIBLE = "FLEXIBLE"


class TransitMode(str, Enum):
    RAIL = "RAIL"
    COACH = "COACH"
    SUBWAY = "SUBWAY"
    BUS = "BUS"
    TRAM = "TRAM"
    FERRY = "FERRY"
    AIRPLANE = "AIRPLANE"
    CABLE_CAR = "CABLE_CAR"
    GONDOLA = "GONDOLA"
    FUNICULAR = "FUNICULAR"
    TROLLEYBUS = "TROLLEYBUS"
    MONORAIL = "MONORAIL"
    CARPOOL = "CARPOOL"
    TAXI = "TAXI"


class BicycleOptimizeType(str, Enum):
    QUICK = "QUICK"
    SAFE = "SAFE"
    FLAT = "FLAT"
    GREENWAYS = "GREENWAYS"
    TRIANGLE = "TRIANGLE"


class ApiRequestMode(str, Enum):
    """
    Mode names accepted in `transportModes`.

    Street modes decide the access/egress/direct/transfer phases, transit modes feed the
    transit allow-list and FLEX only overrides single phases.
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


class Qualifier(str, Enum):
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


class PageType(str, Enum):
    NEXT_PAGE = "NEXT_PAGE"
    PREVIOUS_PAGE = "PREVIOUS_PAGE"
