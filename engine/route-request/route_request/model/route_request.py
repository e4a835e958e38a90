"""
route_request/model/route_request.py

Purpose:
    Request-scoped trip search request handed to the routing layer.

Role in system:
    The mapper clones a baseline RouteRequest per incoming request and overlays the
    caller's arguments onto the clone. Nothing here performs a search.

Notes:
    - Every mutable model validates on assignment, so a setter fed a value of the wrong
      runtime type fails loudly (SchemaContractViolation at the overlay layer).
    - Value objects (ids, locations, filters, cost functions) are frozen and hashable.
    - The shared baseline must never be mutated; use copy_with_date_time_now().
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Annotated, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictBool

from route_request.contracts.enums import BicycleOptimizeType, StreetMode, TransitMode
from route_request.filters.parking_filter import EMPTY_PARKING_FILTER, VehicleParkingFilterRequest
from route_request.filters.transit_filter import ALLOW_ALL, TransitFilterRequest
from route_request.model.cost_function import LinearCostFunction, create_linear_function
from route_request.model.ids import FeedScopedId
from route_request.model.locations import GenericLocation
from route_request.model.page_cursor import PageCursor
from route_request.model.triangle import TimeSlopeSafetyTriangle

# A trip counts as "planned for now" when its time is this close to the clock.
NOW_THRESHOLD = timedelta(seconds=15)

# Argument leaves are assigned as-is: "5" or "yes" must fail, not coerce. Strict floats still take ints.
StrictPositiveFloat = Annotated[float, Field(gt=0.0, strict=True)]
StrictNonNegativeFloat = Annotated[float, Field(ge=0.0, strict=True)]
StrictNonNegativeInt = Annotated[int, Field(ge=0, strict=True)]


class _Mutable(BaseModel):
    model_config = ConfigDict(validate_assignment=True, extra="forbid")


# ---------------------------
# Preferences
# ---------------------------
class BikePreferences(_Mutable):
    speed: StrictPositiveFloat = 5.0
    reluctance: StrictNonNegativeFloat = 2.0
    board_cost: StrictNonNegativeInt = 600
    walking_speed: StrictPositiveFloat = 1.33
    walking_reluctance: StrictNonNegativeFloat = 5.0
    switch_time: StrictNonNegativeInt = 0
    switch_cost: StrictNonNegativeInt = 0
    optimize_type: BicycleOptimizeType = BicycleOptimizeType.SAFE
    optimize_triangle: TimeSlopeSafetyTriangle = Field(default_factory=TimeSlopeSafetyTriangle)


class CarPreferences(_Mutable):
    reluctance: StrictNonNegativeFloat = 2.0


class WalkPreferences(_Mutable):
    speed: StrictPositiveFloat = 1.33
    reluctance: StrictNonNegativeFloat = 2.0
    board_cost: StrictNonNegativeInt = 600
    safety_factor: float = Field(default=1.0, ge=0.0, le=1.0, strict=True)


class VehicleRentalPreferences(_Mutable):
    arriving_in_rental_vehicle_at_destination_cost: StrictNonNegativeInt = 0
    use_availability_information: StrictBool = False


class ItineraryFilterPreferences(_Mutable):
    debug: StrictBool = False


class TransitPreferences(_Mutable):
    default_board_slack_sec: StrictNonNegativeInt = 0
    default_alight_slack_sec: StrictNonNegativeInt = 0
    other_than_preferred_routes_penalty: StrictNonNegativeInt = 300
    unpreferred_cost: LinearCostFunction = Field(
        default_factory=lambda: create_linear_function(0.0, 1.0)
    )
    ignore_realtime_updates: StrictBool = False
    reluctance_for_mode: dict[TransitMode, StrictNonNegativeFloat] = Field(default_factory=dict)


class TransferPreferences(_Mutable):
    cost: StrictNonNegativeInt = 0
    slack: StrictNonNegativeInt = 120
    wait_reluctance: StrictNonNegativeFloat = 1.0
    max_transfers: StrictNonNegativeInt = 12
    nonpreferred_cost: StrictNonNegativeInt = 180


class RoutingPreferences(_Mutable):
    bike: BikePreferences = Field(default_factory=BikePreferences)
    car: CarPreferences = Field(default_factory=CarPreferences)
    walk: WalkPreferences = Field(default_factory=WalkPreferences)
    rental: VehicleRentalPreferences = Field(default_factory=VehicleRentalPreferences)
    itinerary_filter: ItineraryFilterPreferences = Field(default_factory=ItineraryFilterPreferences)
    transit: TransitPreferences = Field(default_factory=TransitPreferences)
    transfer: TransferPreferences = Field(default_factory=TransferPreferences)


# ---------------------------
# Journey
# ---------------------------
class StreetRequest(_Mutable):
    mode: StreetMode = StreetMode.WALK


class TransitRequest(_Mutable):
    enabled: StrictBool = True
    filters: tuple[TransitFilterRequest, ...] = (ALLOW_ALL,)
    preferred_routes: tuple[FeedScopedId, ...] = ()
    preferred_agencies: tuple[FeedScopedId, ...] = ()
    unpreferred_routes: tuple[FeedScopedId, ...] = ()
    unpreferred_agencies: tuple[FeedScopedId, ...] = ()

    def disable(self) -> None:
        self.enabled = False

    def set_filters(self, filters: list[TransitFilterRequest]) -> None:
        self.filters = tuple(filters)


class VehicleRentalRequest(_Mutable):
    allowed_networks: frozenset[str] = frozenset()
    banned_networks: frozenset[str] = frozenset()
    allow_arriving_in_rented_vehicle_at_destination: StrictBool = False


class VehicleParkingRequest(_Mutable):
    unpreferred_cost: StrictNonNegativeInt = 0
    filter: VehicleParkingFilterRequest = EMPTY_PARKING_FILTER
    preferred: VehicleParkingFilterRequest = EMPTY_PARKING_FILTER


class JourneyRequest(_Mutable):
    access: StreetRequest = Field(default_factory=StreetRequest)
    egress: StreetRequest = Field(default_factory=StreetRequest)
    direct: StreetRequest = Field(default_factory=StreetRequest)
    transfer: StreetRequest = Field(default_factory=StreetRequest)
    transit: TransitRequest = Field(default_factory=TransitRequest)
    rental: VehicleRentalRequest = Field(default_factory=VehicleRentalRequest)
    parking: VehicleParkingRequest = Field(default_factory=VehicleParkingRequest)


# ---------------------------
# Request
# ---------------------------
class RouteRequest(_Mutable):
    from_place: Optional[GenericLocation] = None
    to_place: Optional[GenericLocation] = None

    date_time: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    arrive_by: StrictBool = False
    wheelchair: StrictBool = False
    num_itineraries: int = Field(default=50, ge=1, strict=True)
    search_window: Optional[timedelta] = None
    page_cursor: Optional[PageCursor] = None
    locale: str = "en"

    preferences: RoutingPreferences = Field(default_factory=RoutingPreferences)
    journey: JourneyRequest = Field(default_factory=JourneyRequest)

    def copy_with_date_time_now(self, now: datetime) -> "RouteRequest":
        """Deep copy for one in-flight request; the receiver is left untouched."""
        clone = self.model_copy(deep=True)
        clone.date_time = now
        return clone

    def is_trip_planned_for_now(self, now: datetime) -> bool:
        return abs(self.date_time - now) < NOW_THRESHOLD
