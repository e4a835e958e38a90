"""
backend.api.schemas.plan

Purpose:
    Request/response schemas for the /v1/route-request API endpoint.
    The request body is the legacy plan query: camelCase fields, every field optional.

Notes:
    - Validation happens at the API boundary (Pydantic) for shapes and enum tokens.
      Value semantics (ids, cost functions, dates, locale) are checked by the engine
      and come back as 400 INVALID_ARGUMENT.
    - extra="forbid" prevents silent client typos (e.g., "walkSped").
    - Only fields the client actually sent reach the engine (exclude_unset), so an
      omitted field keeps the configured default.
    - `from` / `to` accept either coordinates or the legacy "label::lat,lon" string.
    - `modeWeight` keys are transit mode names; unknown names are rejected by the engine.
"""

from __future__ import annotations

from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from backend.shared.models.enums import OptimizeTypeName, QualifierName, TransportModeName


class _PlanInput(BaseModel):
    model_config = ConfigDict(extra="forbid", alias_generator=to_camel, populate_by_name=True)


class InputCoordinates(_PlanInput):
    lat: float
    lon: float
    address: Optional[str] = None


class InputTriangle(_PlanInput):
    time_factor: Optional[float] = None
    slope_factor: Optional[float] = None
    safety_factor: Optional[float] = None


class InputPreferred(_PlanInput):
    routes: Optional[str] = Field(default=None, examples=["HSL:2550,HSL:1009"])
    agencies: Optional[str] = None
    other_than_preferred_routes_penalty: Optional[int] = None


class InputUnpreferred(_PlanInput):
    routes: Optional[str] = None
    agencies: Optional[str] = None
    use_unpreferred_routes_penalty: Optional[int] = Field(
        default=None,
        description="Deprecated. Superseded by unpreferredCost when both are sent.",
    )
    unpreferred_cost: Optional[str] = Field(default=None, examples=["600 + 2.0 x"])


class InputBanned(_PlanInput):
    routes: Optional[str] = None
    agencies: Optional[str] = None
    trips: Optional[str] = None


class TransportModeInput(_PlanInput):
    mode: TransportModeName
    qualifier: Optional[QualifierName] = None


class ParkingFilterOperation(_PlanInput):
    tags: list[str] = Field(default_factory=list)


class ParkingFilter(_PlanInput):
    select: Optional[list[ParkingFilterOperation]] = None
    not_: Optional[list[ParkingFilterOperation]] = Field(default=None, alias="not")


class InputParking(_PlanInput):
    unpreferred_cost: Optional[int] = None
    filters: Optional[list[ParkingFilter]] = None
    preferred: Optional[list[ParkingFilter]] = None


class PlanQuery(_PlanInput):
    """
    Request payload for /v1/route-request.

    Every field is an override applied onto the configured baseline request.
    """

    # ---- Endpoints / time ----
    from_: Optional[Union[InputCoordinates, str]] = Field(default=None, alias="from")
    to_: Optional[Union[InputCoordinates, str]] = Field(default=None, alias="to")
    from_place: Optional[str] = Field(default=None, description="Deprecated. Use `from`.")
    to_place: Optional[str] = Field(default=None, description="Deprecated. Use `to`.")
    date: Optional[str] = Field(default=None, examples=["2026-10-19"])
    time: Optional[str] = Field(default=None, examples=["08:30"])
    arrive_by: Optional[bool] = None
    wheelchair: Optional[bool] = None
    num_itineraries: Optional[int] = None
    search_window: Optional[int] = Field(default=None, description="Seconds.")
    page_cursor: Optional[str] = None
    locale: Optional[str] = None

    # ---- Bike ----
    bike_reluctance: Optional[float] = None
    bike_walking_reluctance: Optional[float] = None
    bike_walking_speed: Optional[float] = None
    bike_speed: Optional[float] = None
    bike_switch_time: Optional[int] = None
    bike_switch_cost: Optional[int] = None
    bike_board_cost: Optional[int] = None
    optimize: Optional[OptimizeTypeName] = None
    triangle: Optional[InputTriangle] = None

    # ---- Car / walk ----
    car_reluctance: Optional[float] = None
    walk_reluctance: Optional[float] = None
    walk_speed: Optional[float] = None
    walk_board_cost: Optional[int] = None
    walk_safety_factor: Optional[float] = None

    # ---- Rental ----
    keeping_rented_bicycle_at_destination_cost: Optional[int] = None
    allow_keeping_rented_bicycle_at_destination: Optional[bool] = None
    allowed_bike_rental_networks: Optional[list[str]] = Field(
        default=None,
        description="Deprecated. Use allowedVehicleRentalNetworks.",
    )
    allowed_vehicle_rental_networks: Optional[list[str]] = None
    banned_vehicle_rental_networks: Optional[list[str]] = None

    # ---- Transit / transfer ----
    board_slack: Optional[int] = None
    alight_slack: Optional[int] = None
    preferred: Optional[InputPreferred] = None
    unpreferred: Optional[InputUnpreferred] = None
    banned: Optional[InputBanned] = None
    ignore_realtime_updates: Optional[bool] = None
    mode_weight: Optional[dict[str, float]] = Field(default=None, examples=[{"BUS": 1.2, "RAIL": 0.9}])
    transfer_penalty: Optional[int] = None
    min_transfer_time: Optional[int] = None
    wait_reluctance: Optional[float] = None
    max_transfers: Optional[int] = None
    nonpreferred_transfer_penalty: Optional[int] = None
    transport_modes: Optional[list[TransportModeInput]] = None
    allowed_ticket_types: Optional[list[str]] = Field(default=None, description="Accepted and ignored.")

    # ---- Parking / output ----
    parking: Optional[InputParking] = None
    debug_itinerary_filter: Optional[bool] = None


class RouteRequestResponse(BaseModel):
    request: dict[str, Any]
    transit_enabled: bool
