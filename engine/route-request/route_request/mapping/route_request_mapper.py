"""
route_request/mapping/route_request_mapper.py

Purpose:
    Translate a loosely typed plan-query argument tree into a RouteRequest.

Role in system:
    - Clones the baseline from ServerRequestContext (never mutates it)
    - Overlays every recognized argument that is present (absent keeps the baseline value)
    - Resolves transportModes into per-phase street modes and the transit allow-list
    - Builds the transit and vehicle-parking filters

Notes:
    - Bindings are applied in a fixed order. Later steps read values written by earlier ones
      (optimize before triangle, date/time before rental availability).
    - Any InvalidArgument / SchemaContractViolation aborts the whole translation.
    - `allowedTicketTypes` is accepted by the transport layer and ignored here.
"""

from __future__ import annotations

from collections.abc import Mapping
from datetime import timedelta
from typing import Any, Optional

from route_request.arguments.overlay import Binding, Precedence, apply, apply_all, assign
from route_request.arguments.path_resolver import ArgumentTree
from route_request.context import ServerRequestContext
from route_request.contracts.enums import BicycleOptimizeType, TransitMode
from route_request.filters.parking_filter import parse_parking_filters
from route_request.filters.transit_filter import build_transit_filter
from route_request.model.cost_function import create_linear_function, parse_linear_function
from route_request.model.ids import FeedScopedId
from route_request.model.locations import from_old_style_string, to_generic_location
from route_request.model.page_cursor import PageCursor
from route_request.model.route_request import RouteRequest
from route_request.model.triangle import TriangleBuilder
from route_request.modes.mode_resolver import PhaseModeSet, resolve_modes
from route_request.modes.qualified_mode import TRANSPORT_MODES_ARGUMENT, parse_transport_modes
from route_request.utils.datetime_parsing import combine_in_zone, parse_date, parse_time
from route_request.utils.logging import LogCtx, get_logger, with_ctx

logger = get_logger(__name__)

BANNED_ARGUMENT = "banned"


def to_route_request(
    arguments: ArgumentTree | Mapping[str, Any] | None,
    context: ServerRequestContext,
    *,
    request_id: Optional[str] = None,
) -> RouteRequest:
    tree = ArgumentTree.of(arguments)
    log = with_ctx(logger, LogCtx(step="to_route_request", request_id=request_id))

    now = context.clock()
    request = context.default_route_request(now)

    applied: list[str] = []
    applied += apply_all(tree, _endpoint_bindings(request))
    applied += _apply_date_time(tree, request, context)
    applied += apply_all(tree, _search_bindings(request))

    applied += _apply_bike_preferences(tree, request)
    applied += apply_all(tree, _street_preference_bindings(request))
    request.preferences.rental.use_availability_information = request.is_trip_planned_for_now(now)
    applied += apply_all(tree, _transit_preference_bindings(request))
    applied += apply_all(tree, _journey_bindings(request))
    applied += apply_all(tree, _precedence_bindings(request))

    phase_modes = _apply_transport_modes(tree, request)
    _apply_transit_filter(tree, request, phase_modes)

    applied += apply_all(tree, _parking_bindings(request))
    applied += _apply_locale(tree, request, context)

    log.info(
        "route request translated overrides=%d transit_enabled=%s direct=%s filters=%d",
        len(applied),
        request.journey.transit.enabled,
        request.journey.direct.mode.value,
        len(request.journey.transit.filters),
    )
    return request


# ---------------------------
# Trip endpoints, time and paging
# ---------------------------
def _endpoint_bindings(request: RouteRequest) -> list[Precedence]:
    return [
        Precedence(
            legacy=Binding("fromPlace", assign(request, "from_place", from_old_style_string)),
            current=Binding("from", assign(request, "from_place", to_generic_location)),
        ),
        Precedence(
            legacy=Binding("toPlace", assign(request, "to_place", from_old_style_string)),
            current=Binding("to", assign(request, "to_place", to_generic_location)),
        ),
    ]


def _apply_date_time(tree: ArgumentTree, request: RouteRequest, context: ServerRequestContext) -> list[str]:
    parts: dict[str, Any] = {}
    applied = apply_all(
        tree,
        [
            Binding("date", lambda v: parts.__setitem__("date", parse_date(v))),
            Binding("time", lambda v: parts.__setitem__("time", parse_time(v))),
        ],
    )
    zoned = combine_in_zone(parts.get("date"), parts.get("time"), context.time_zone, now=request.date_time)
    if zoned is not None:
        request.date_time = zoned
    return applied


def _search_bindings(request: RouteRequest) -> list[Binding]:
    return [
        Binding("wheelchair", assign(request, "wheelchair")),
        Binding("numItineraries", assign(request, "num_itineraries")),
        Binding("searchWindow", assign(request, "search_window", _seconds)),
        Binding("pageCursor", assign(request, "page_cursor", PageCursor.decode)),
    ]


# ---------------------------
# Preferences
# ---------------------------
def _apply_bike_preferences(tree: ArgumentTree, request: RouteRequest) -> list[str]:
    bike = request.preferences.bike
    applied = apply_all(
        tree,
        [
            Binding("bikeReluctance", assign(bike, "reluctance")),
            Binding("bikeWalkingReluctance", assign(bike, "walking_reluctance")),
            Binding("bikeWalkingSpeed", assign(bike, "walking_speed")),
            Binding("bikeSpeed", assign(bike, "speed")),
            Binding("bikeSwitchTime", assign(bike, "switch_time")),
            Binding("bikeSwitchCost", assign(bike, "switch_cost")),
            Binding("bikeBoardCost", assign(bike, "board_cost")),
            Binding("optimize", assign(bike, "optimize_type", _optimize_type)),
        ],
    )

    # Triangle factors only mean something once optimize resolved to TRIANGLE.
    if bike.optimize_type == BicycleOptimizeType.TRIANGLE:
        builder = TriangleBuilder(bike.optimize_triangle)
        applied += apply_all(
            tree,
            [
                Binding("triangle.timeFactor", builder.with_time),
                Binding("triangle.slopeFactor", builder.with_slope),
                Binding("triangle.safetyFactor", builder.with_safety),
            ],
        )
        bike.optimize_triangle = builder.build()
    return applied


def _street_preference_bindings(request: RouteRequest) -> list[Binding]:
    prefs = request.preferences
    return [
        Binding("carReluctance", assign(prefs.car, "reluctance")),
        Binding("walkReluctance", assign(prefs.walk, "reluctance")),
        Binding("walkSpeed", assign(prefs.walk, "speed")),
        Binding("walkBoardCost", assign(prefs.walk, "board_cost")),
        Binding("walkSafetyFactor", assign(prefs.walk, "safety_factor")),
        Binding(
            "keepingRentedBicycleAtDestinationCost",
            assign(prefs.rental, "arriving_in_rental_vehicle_at_destination_cost"),
        ),
        Binding("debugItineraryFilter", assign(prefs.itinerary_filter, "debug")),
    ]


def _transit_preference_bindings(request: RouteRequest) -> list[Binding]:
    transit = request.preferences.transit
    transfer = request.preferences.transfer
    return [
        Binding("boardSlack", assign(transit, "default_board_slack_sec")),
        Binding("alightSlack", assign(transit, "default_alight_slack_sec")),
        Binding(
            "preferred.otherThanPreferredRoutesPenalty",
            assign(transit, "other_than_preferred_routes_penalty"),
        ),
        Binding("ignoreRealtimeUpdates", assign(transit, "ignore_realtime_updates")),
        Binding("modeWeight", assign(transit, "reluctance_for_mode", _mode_weights)),
        Binding("transferPenalty", assign(transfer, "cost")),
        Binding("minTransferTime", assign(transfer, "slack")),
        Binding("waitReluctance", assign(transfer, "wait_reluctance")),
        Binding("maxTransfers", assign(transfer, "max_transfers")),
        Binding("nonpreferredTransferPenalty", assign(transfer, "nonpreferred_cost")),
    ]


# ---------------------------
# Journey
# ---------------------------
def _journey_bindings(request: RouteRequest) -> list[Binding]:
    journey = request.journey
    return [
        Binding(
            "allowKeepingRentedBicycleAtDestination",
            assign(journey.rental, "allow_arriving_in_rented_vehicle_at_destination"),
        ),
        Binding("arriveBy", assign(request, "arrive_by")),
        Binding("preferred.routes", assign(journey.transit, "preferred_routes", FeedScopedId.parse_list)),
        Binding("preferred.agencies", assign(journey.transit, "preferred_agencies", FeedScopedId.parse_list)),
        Binding("unpreferred.routes", assign(journey.transit, "unpreferred_routes", FeedScopedId.parse_list)),
        Binding("unpreferred.agencies", assign(journey.transit, "unpreferred_agencies", FeedScopedId.parse_list)),
    ]


def _precedence_bindings(request: RouteRequest) -> list[Binding | Precedence]:
    transit = request.preferences.transit
    rental = request.journey.rental
    return [
        Precedence(
            legacy=Binding(
                "unpreferred.useUnpreferredRoutesPenalty",
                assign(transit, "unpreferred_cost", lambda v: create_linear_function(_integer(v), 0.0)),
            ),
            current=Binding("unpreferred.unpreferredCost", assign(transit, "unpreferred_cost", parse_linear_function)),
        ),
        Precedence(
            legacy=Binding("allowedBikeRentalNetworks", assign(rental, "allowed_networks", _string_set)),
            current=Binding("allowedVehicleRentalNetworks", assign(rental, "allowed_networks", _string_set)),
        ),
        Binding("bannedVehicleRentalNetworks", assign(rental, "banned_networks", _string_set)),
    ]


def _apply_transport_modes(tree: ArgumentTree, request: RouteRequest) -> Optional[PhaseModeSet]:
    resolved = tree.resolve(TRANSPORT_MODES_ARGUMENT)
    if not resolved.present:
        return None

    phase_modes = resolve_modes(parse_transport_modes(resolved.value))
    journey = request.journey
    journey.access.mode = phase_modes.access
    journey.egress.mode = phase_modes.egress
    journey.direct.mode = phase_modes.direct
    journey.transfer.mode = phase_modes.transfer
    return phase_modes


def _apply_transit_filter(
    tree: ArgumentTree,
    request: RouteRequest,
    phase_modes: Optional[PhaseModeSet],
) -> None:
    if phase_modes is None and not tree.has(BANNED_ARGUMENT):
        return

    transit = request.journey.transit
    if phase_modes is not None and phase_modes.transit_disabled:
        transit.disable()
        return

    allowed = phase_modes.transit_modes if phase_modes is not None else None
    transit.set_filters([build_transit_filter(tree, allowed)])


def _parking_bindings(request: RouteRequest) -> list[Binding]:
    parking = request.journey.parking
    return [
        Binding("parking.unpreferredCost", assign(parking, "unpreferred_cost")),
        Binding("parking.filters", assign(parking, "filter", parse_parking_filters)),
        Binding("parking.preferred", assign(parking, "preferred", parse_parking_filters)),
    ]


def _apply_locale(tree: ArgumentTree, request: RouteRequest, context: ServerRequestContext) -> list[str]:
    # Absent locale keeps the baseline; a blank one falls back to Accept-Language.
    if apply(tree, "locale", assign(request, "locale", context.resolve_locale)):
        return ["locale"]
    return []


# ---------------------------
# Converters
# ---------------------------
def _integer(v: Any) -> int:
    if isinstance(v, bool) or not isinstance(v, int):
        raise TypeError(f"expected an integer, got {type(v).__name__}")
    return v


def _seconds(v: Any) -> timedelta:
    seconds = _integer(v)
    if seconds < 0:
        raise ValueError("search window must be >= 0 seconds")
    return timedelta(seconds=seconds)


def _optimize_type(v: Any) -> BicycleOptimizeType:
    if not isinstance(v, str):
        raise TypeError(f"expected an optimize type name, got {type(v).__name__}")
    try:
        return BicycleOptimizeType(v.strip().upper())
    except ValueError:
        raise ValueError(f"unknown optimize type '{v}'") from None


def _mode_weights(v: Any) -> dict[TransitMode, float]:
    if not isinstance(v, Mapping):
        raise TypeError(f"modeWeight must be an object, got {type(v).__name__}")
    out: dict[TransitMode, float] = {}
    for name, weight in v.items():
        try:
            mode = TransitMode(str(name).strip().upper())
        except ValueError:
            raise ValueError(f"unknown transit mode '{name}'") from None
        if isinstance(weight, bool) or not isinstance(weight, (int, float)):
            raise TypeError(f"weight for {mode.value} must be a number, got {type(weight).__name__}")
        out[mode] = float(weight)
    return out


def _string_set(v: Any) -> frozenset[str]:
    if isinstance(v, str) or not isinstance(v, (list, tuple)):
        raise TypeError(f"expected a list of strings, got {type(v).__name__}")
    if not all(isinstance(s, str) for s in v):
        raise TypeError("expected a list of strings")
    return frozenset(v)
