"""
Regression tests for plan-query -> RouteRequest translation.

Covers:
    - absent arguments keep the baseline, the baseline is never mutated
    - idempotence under a fixed clock
    - transportModes tri-state (absent / no transit / transit allow-list)
    - deprecated vs current argument precedence
    - conditional triangle block, parking filters, locale, error mapping
"""

from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone
from zoneinfo import ZoneInfo

import pytest

from route_request.contracts.enums import BicycleOptimizeType, StreetMode, TransitMode
from route_request.contracts.errors import InvalidArgument, SchemaContractViolation
from route_request.filters.parking_filter import TagsFilter
from route_request.filters.transit_filter import ALLOW_ALL
from route_request.mapping.route_request_mapper import to_route_request
from route_request.model.ids import FeedScopedId


def test_empty_arguments_yield_baseline_copy(context, fixed_now) -> None:
    req = to_route_request({}, context)
    base = context.route_request_defaults

    assert req is not base
    assert req.date_time == fixed_now
    assert req.preferences.model_copy(update={"rental": base.preferences.rental}) == base.preferences
    assert req.journey == base.journey
    assert req.journey.transit.filters == (ALLOW_ALL,)


def test_baseline_is_never_mutated(context) -> None:
    before = context.route_request_defaults.model_dump()
    to_route_request(
        {"walkSpeed": 2.0, "transportModes": [{"mode": "CAR"}], "banned": {"routes": "F:1"}},
        context,
    )
    assert context.route_request_defaults.model_dump() == before


def test_translation_is_idempotent(context) -> None:
    args = {
        "from": {"lat": 60.1, "lon": 24.9},
        "toPlace": "Work::60.2,24.8",
        "date": "2026-10-20",
        "time": "08:00",
        "transportModes": [{"mode": "BUS"}, {"mode": "BICYCLE", "qualifier": "RENT"}],
        "banned": {"agencies": "HSL:X"},
        "parking": {"filters": [{"select": [{"tags": ["covered"]}]}]},
    }
    assert to_route_request(args, context) == to_route_request(args, context)


def test_scalar_overrides(context) -> None:
    req = to_route_request(
        {
            "wheelchair": True,
            "numItineraries": 3,
            "searchWindow": 3600,
            "arriveBy": True,
            "walkSpeed": 1.1,
            "walkReluctance": 3.0,
            "walkBoardCost": 120,
            "walkSafetyFactor": 0.4,
            "carReluctance": 4.0,
            "bikeSpeed": 6.5,
            "bikeSwitchTime": 30,
            "bikeBoardCost": 10,
            "boardSlack": 60,
            "alightSlack": 30,
            "ignoreRealtimeUpdates": True,
            "transferPenalty": 15,
            "minTransferTime": 90,
            "waitReluctance": 0.8,
            "maxTransfers": 3,
            "nonpreferredTransferPenalty": 200,
            "debugItineraryFilter": True,
            "keepingRentedBicycleAtDestinationCost": 45,
            "allowKeepingRentedBicycleAtDestination": True,
        },
        context,
    )
    p = req.preferences
    assert req.wheelchair is True and req.arrive_by is True
    assert req.num_itineraries == 3
    assert req.search_window == timedelta(hours=1)
    assert (p.walk.speed, p.walk.reluctance, p.walk.board_cost, p.walk.safety_factor) == (1.1, 3.0, 120, 0.4)
    assert p.car.reluctance == 4.0
    assert (p.bike.speed, p.bike.switch_time, p.bike.board_cost) == (6.5, 30, 10)
    assert (p.transit.default_board_slack_sec, p.transit.default_alight_slack_sec) == (60, 30)
    assert p.transit.ignore_realtime_updates is True
    assert (p.transfer.cost, p.transfer.slack, p.transfer.wait_reluctance) == (15, 90, 0.8)
    assert (p.transfer.max_transfers, p.transfer.nonpreferred_cost) == (3, 200)
    assert p.itinerary_filter.debug is True
    assert p.rental.arriving_in_rental_vehicle_at_destination_cost == 45
    assert req.journey.rental.allow_arriving_in_rented_vehicle_at_destination is True


def test_null_argument_keeps_default(context) -> None:
    req = to_route_request({"walkSpeed": None, "preferred": None}, context)
    assert req.preferences.walk.speed == context.route_request_defaults.preferences.walk.speed


# ---------------------------
# Endpoints and time
# ---------------------------
def test_from_map_and_to_string_are_both_specified(context) -> None:
    req = to_route_request({"from": {"lat": 1.0, "lon": 2.0}, "to": "1.0,2.0"}, context)
    assert req.from_place.is_specified
    assert req.to_place.is_specified
    assert (req.to_place.lat, req.to_place.lng) == (1.0, 2.0)


def test_from_wins_over_from_place(context) -> None:
    req = to_route_request({"fromPlace": "Old::1.0,1.0", "from": {"lat": 5.0, "lon": 6.0, "address": "New"}}, context)
    assert req.from_place.label == "New"
    assert req.from_place.lat == 5.0


def test_legacy_place_strings_still_work(context) -> None:
    req = to_route_request({"fromPlace": "Stop::HSL:1040601", "toPlace": "60.2,24.9"}, context)
    assert req.from_place.stop_id == FeedScopedId(feed_id="HSL", id="1040601")
    assert req.to_place.lat == 60.2


def test_date_and_time_use_context_time_zone(context_factory) -> None:
    ctx = context_factory(time_zone="Europe/Helsinki")
    req = to_route_request({"date": "2026-10-20", "time": "08:00"}, ctx)
    assert req.date_time == datetime(2026, 10, 20, 8, 0, tzinfo=ZoneInfo("Europe/Helsinki"))


def test_bad_date_is_invalid_argument(context) -> None:
    with pytest.raises(InvalidArgument) as ei:
        to_route_request({"date": "someday"}, context)
    assert ei.value.argument == "date"


def test_rental_availability_only_for_trips_planned_now(context) -> None:
    now_req = to_route_request({}, context)
    later_req = to_route_request({"date": "2026-10-21"}, context)
    assert now_req.preferences.rental.use_availability_information is True
    assert later_req.preferences.rental.use_availability_information is False


def test_undecodable_page_cursor_is_ignored(context, caplog) -> None:
    with caplog.at_level(logging.WARNING, logger="route_request"):
        req = to_route_request({"pageCursor": "%%%"}, context)
    assert req.page_cursor is None


# ---------------------------
# Bike optimize / triangle
# ---------------------------
def test_triangle_applied_only_when_optimize_is_triangle(context) -> None:
    args = {"optimize": "TRIANGLE", "triangle": {"timeFactor": 1, "slopeFactor": 1, "safetyFactor": 2}}
    req = to_route_request(args, context)
    bike = req.preferences.bike
    assert bike.optimize_type == BicycleOptimizeType.TRIANGLE
    assert (bike.optimize_triangle.time, bike.optimize_triangle.slope, bike.optimize_triangle.safety) == (0.25, 0.25, 0.5)


def test_triangle_ignored_for_other_optimize_types(context) -> None:
    args = {"optimize": "QUICK", "triangle": {"timeFactor": "not even a number"}}
    req = to_route_request(args, context)
    assert req.preferences.bike.optimize_type == BicycleOptimizeType.QUICK
    assert req.preferences.bike.optimize_triangle == context.route_request_defaults.preferences.bike.optimize_triangle


def test_unknown_optimize_type_is_invalid_argument(context) -> None:
    with pytest.raises(InvalidArgument) as ei:
        to_route_request({"optimize": "SCENIC"}, context)
    assert ei.value.argument == "optimize"


# ---------------------------
# Transport modes and transit filter
# ---------------------------
def test_no_transport_modes_leaves_modes_and_filters(context) -> None:
    req = to_route_request({"walkSpeed": 1.0}, context)
    assert req.journey.direct.mode == StreetMode.WALK
    assert req.journey.transit.enabled is True
    assert req.journey.transit.filters == (ALLOW_ALL,)


def test_walk_only_disables_transit_and_keeps_filters(context) -> None:
    req = to_route_request({"transportModes": [{"mode": "WALK"}]}, context)
    assert req.journey.transit.enabled is False
    assert req.journey.transit.filters == (ALLOW_ALL,)
    assert req.journey.access.mode == StreetMode.WALK


def test_empty_transport_modes_disables_transit(context) -> None:
    req = to_route_request({"transportModes": [], "banned": {"routes": "F:1"}}, context)
    assert req.journey.transit.enabled is False
    assert req.journey.transit.filters == (ALLOW_ALL,)


def test_transport_modes_set_phases_and_select_filter(context) -> None:
    req = to_route_request(
        {"transportModes": [{"mode": "CAR", "qualifier": "PARK"}, {"mode": "RAIL"}, {"mode": "TRAM"}]},
        context,
    )
    j = req.journey
    assert (j.access.mode, j.egress.mode, j.direct.mode, j.transfer.mode) == (
        StreetMode.CAR_TO_PARK,
        StreetMode.WALK,
        StreetMode.CAR_TO_PARK,
        StreetMode.WALK,
    )
    (f,) = j.transit.filters
    assert [m.main_mode for m in f.select[0].transport_modes] == [TransitMode.RAIL, TransitMode.TRAM]
    assert f.not_ == ()


def test_banned_without_modes_builds_not_filter_only(context) -> None:
    req = to_route_request({"banned": {"routes": "HSL:1,HSL:2", "trips": "HSL:T"}}, context)
    (f,) = req.journey.transit.filters
    assert f.select == ()
    assert len(f.not_) == 2
    assert req.journey.transit.enabled is True


def test_several_street_modes_pick_bicycle(context) -> None:
    req = to_route_request(
        {"transportModes": [{"mode": "BICYCLE"}, {"mode": "CAR", "qualifier": "PARK"}, {"mode": "BUS"}]},
        context,
    )
    journey = req.journey
    assert journey.access.mode == StreetMode.BIKE
    assert journey.direct.mode == StreetMode.BIKE
    assert journey.transit.enabled is True


# ---------------------------
# Precedence pairs
# ---------------------------
def test_unpreferred_cost_wins_over_legacy_penalty(context) -> None:
    req = to_route_request(
        {"unpreferred": {"useUnpreferredRoutesPenalty": 5, "unpreferredCost": "3600"}},
        context,
    )
    cost = req.preferences.transit.unpreferred_cost
    assert (cost.constant, cost.coefficient) == (3600.0, 0.0)


def test_legacy_penalty_alone_is_constant_function(context) -> None:
    req = to_route_request({"unpreferred": {"useUnpreferredRoutesPenalty": 5}}, context)
    cost = req.preferences.transit.unpreferred_cost
    assert (cost.constant, cost.coefficient) == (5.0, 0.0)


def test_legacy_penalty_must_be_integer(context) -> None:
    with pytest.raises(SchemaContractViolation) as ei:
        to_route_request({"unpreferred": {"useUnpreferredRoutesPenalty": "5"}}, context)
    assert ei.value.argument == "unpreferred.useUnpreferredRoutesPenalty"


def test_malformed_cost_function_is_invalid_argument(context) -> None:
    with pytest.raises(InvalidArgument):
        to_route_request({"unpreferred": {"unpreferredCost": "cheap"}}, context)


def test_rental_networks_precedence_and_banned(context) -> None:
    req = to_route_request(
        {
            "allowedBikeRentalNetworks": ["old"],
            "allowedVehicleRentalNetworks": ["new", "other"],
            "bannedVehicleRentalNetworks": ["bad"],
        },
        context,
    )
    assert req.journey.rental.allowed_networks == frozenset({"new", "other"})
    assert req.journey.rental.banned_networks == frozenset({"bad"})


def test_legacy_rental_networks_alone(context) -> None:
    req = to_route_request({"allowedBikeRentalNetworks": ["old"]}, context)
    assert req.journey.rental.allowed_networks == frozenset({"old"})


# ---------------------------
# Preferred / unpreferred / mode weights
# ---------------------------
def test_preferred_and_unpreferred_ids(context) -> None:
    req = to_route_request(
        {
            "preferred": {"routes": "HSL:1", "agencies": "HSL:A", "otherThanPreferredRoutesPenalty": 90},
            "unpreferred": {"routes": "HSL:2,HSL:3", "agencies": "HSL:B"},
        },
        context,
    )
    t = req.journey.transit
    assert [str(i) for i in t.preferred_routes] == ["HSL:1"]
    assert [str(i) for i in t.preferred_agencies] == ["HSL:A"]
    assert [str(i) for i in t.unpreferred_routes] == ["HSL:2", "HSL:3"]
    assert [str(i) for i in t.unpreferred_agencies] == ["HSL:B"]
    assert req.preferences.transit.other_than_preferred_routes_penalty == 90


def test_mode_weight(context) -> None:
    req = to_route_request({"modeWeight": {"BUS": 1.5, "rail": 0.5}}, context)
    assert req.preferences.transit.reluctance_for_mode == {TransitMode.BUS: 1.5, TransitMode.RAIL: 0.5}


def test_unknown_mode_weight_is_invalid_argument(context) -> None:
    with pytest.raises(InvalidArgument) as ei:
        to_route_request({"modeWeight": {"ZEPPELIN": 1.0}}, context)
    assert ei.value.argument == "modeWeight"


# ---------------------------
# Parking and locale
# ---------------------------
def test_parking_filters_and_preferred(context) -> None:
    req = to_route_request(
        {
            "parking": {
                "unpreferredCost": 300,
                "filters": [{"select": [{"tags": ["a", "b"]}]}, {"not": [{"tags": ["c"]}]}],
                "preferred": [{"select": [{"tags": ["roof"]}]}],
            }
        },
        context,
    )
    parking = req.journey.parking
    assert parking.unpreferred_cost == 300
    assert parking.filter.select == frozenset({TagsFilter(tags=frozenset({"a", "b"}))})
    assert parking.filter.not_ == frozenset({TagsFilter(tags=frozenset({"c"}))})
    assert parking.preferred.select == frozenset({TagsFilter(tags=frozenset({"roof"}))})
    assert parking.preferred.not_ == frozenset()


def test_malformed_parking_filter_is_schema_contract_violation(context) -> None:
    with pytest.raises(SchemaContractViolation) as ei:
        to_route_request({"parking": {"filters": [["select"]]}}, context)
    assert ei.value.argument == "parking.filters"


def test_explicit_locale_is_normalized(context) -> None:
    assert to_route_request({"locale": "fi_fi"}, context).locale == "fi-FI"


def test_absent_locale_keeps_baseline_despite_accept_language(context_factory) -> None:
    ctx = context_factory(accept_language="fi")
    assert to_route_request({}, ctx).locale == ctx.route_request_defaults.locale == "en"


def test_accept_language_fills_blank_locale(context_factory) -> None:
    ctx = context_factory(accept_language="sv-FI,fi;q=0.8")
    assert to_route_request({"locale": ""}, ctx).locale == "sv-FI"
    assert to_route_request({"locale": "de"}, ctx).locale == "de"


def test_invalid_locale_is_invalid_argument(context) -> None:
    with pytest.raises(InvalidArgument):
        to_route_request({"locale": "not a locale"}, context)


# ---------------------------
# Type contract
# ---------------------------
def test_wrong_leaf_type_is_schema_contract_violation(context) -> None:
    with pytest.raises(SchemaContractViolation) as ei:
        to_route_request({"walkSpeed": "fast"}, context)
    assert ei.value.argument == "walkSpeed"


@pytest.mark.parametrize(
    "arguments, argument",
    [
        ({"wheelchair": "yes"}, "wheelchair"),
        ({"arriveBy": 1}, "arriveBy"),
        ({"numItineraries": "5"}, "numItineraries"),
        ({"walkSpeed": "1.5"}, "walkSpeed"),
        ({"bikeBoardCost": 600.0}, "bikeBoardCost"),
        ({"debugItineraryFilter": "true"}, "debugItineraryFilter"),
    ],
)
def test_leaf_is_not_coerced(context, arguments, argument) -> None:
    with pytest.raises(SchemaContractViolation) as ei:
        to_route_request(arguments, context)
    assert ei.value.argument == argument


def test_integer_leaf_is_accepted_for_float_preference(context) -> None:
    req = to_route_request({"walkSpeed": 2, "waitReluctance": 0}, context)
    assert req.preferences.walk.speed == 2.0
    assert req.preferences.transfer.wait_reluctance == 0.0


def test_out_of_range_value_is_invalid_argument(context) -> None:
    with pytest.raises(InvalidArgument) as ei:
        to_route_request({"walkSafetyFactor": 1.5}, context)
    assert ei.value.argument == "walkSafetyFactor"


def test_allowed_ticket_types_is_ignored(context) -> None:
    assert to_route_request({"allowedTicketTypes": ["HSL:AB"]}, context) == to_route_request({}, context)


def test_summary_logged_at_info(context, caplog) -> None:
    with caplog.at_level(logging.INFO, logger="route_request"):
        to_route_request({"walkSpeed": 1.0}, context, request_id="rid-1")
    lines = [r.getMessage() for r in caplog.records]
    assert any("request_id=rid-1" in line and "overrides=1" in line for line in lines)
