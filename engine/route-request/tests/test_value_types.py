"""
Tests for request value types: feed-scoped ids, locations, cost functions,
the bicycle triangle and page cursors.
"""

from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone

import pytest

from route_request.contracts.enums import PageType
from route_request.model.cost_function import create_linear_function, parse_linear_function
from route_request.model.ids import FeedScopedId
from route_request.model.locations import from_coordinates, from_old_style_string, to_generic_location
from route_request.model.page_cursor import PageCursor
from route_request.model.triangle import TimeSlopeSafetyTriangle, TriangleBuilder


# ---------------------------
# FeedScopedId
# ---------------------------
def test_feed_scoped_id_parse_and_str() -> None:
    fid = FeedScopedId.parse(" HSL:1009 ")
    assert (fid.feed_id, fid.id) == ("HSL", "1009")
    assert str(fid) == "HSL:1009"


def test_feed_scoped_id_keeps_colons_in_entity_part() -> None:
    assert FeedScopedId.parse("F:a:b").id == "a:b"


@pytest.mark.parametrize("raw", ["HSL", ":1", "HSL:", ""])
def test_feed_scoped_id_malformed(raw: str) -> None:
    with pytest.raises(ValueError):
        FeedScopedId.parse(raw)


def test_feed_scoped_id_list_dedupes_and_skips_blanks() -> None:
    ids = FeedScopedId.parse_list("HSL:1, ,HSL:2,HSL:1,")
    assert [str(i) for i in ids] == ["HSL:1", "HSL:2"]


def test_feed_scoped_id_list_requires_string() -> None:
    with pytest.raises(TypeError):
        FeedScopedId.parse_list(["HSL:1"])  # type: ignore[arg-type]


# ---------------------------
# Locations
# ---------------------------
def test_old_style_coordinates() -> None:
    loc = from_old_style_string("60.17,24.94")
    assert (loc.lat, loc.lng, loc.label) == (60.17, 24.94, None)
    assert loc.is_specified


def test_old_style_label_and_coordinates() -> None:
    loc = from_old_style_string("Home::60.17, 24.94")
    assert loc.label == "Home"
    assert loc.lng == 24.94


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("60.17 24.94", (60.17, 24.94)),
        ("+60.17,+24.94", (60.17, 24.94)),
        ("-33.9  +18.4", (-33.9, 18.4)),
        ("60., .5", (60.0, 0.5)),
    ],
)
def test_old_style_coordinate_variants(raw, expected) -> None:
    loc = from_old_style_string(raw)
    assert (loc.lat, loc.lng) == expected


def test_old_style_stop_id() -> None:
    loc = from_old_style_string("Central::HSL:1040601")
    assert loc.stop_id == FeedScopedId(feed_id="HSL", id="1040601")
    assert loc.is_specified


def test_old_style_free_text_is_unspecified() -> None:
    loc = from_old_style_string("somewhere nice")
    assert not loc.is_specified


def test_coordinates_map_with_address() -> None:
    loc = from_coordinates({"lat": 1.0, "lon": 2, "address": "Main st"})
    assert (loc.lat, loc.lng, loc.label) == (1.0, 2.0, "Main st")


def test_coordinates_map_missing_lon() -> None:
    with pytest.raises(ValueError):
        from_coordinates({"lat": 1.0})


def test_coordinates_map_wrong_type() -> None:
    with pytest.raises(TypeError):
        from_coordinates({"lat": "1.0", "lon": 2.0})


def test_to_generic_location_dispatch() -> None:
    assert to_generic_location({"lat": 1.0, "lon": 2.0}).is_specified
    assert to_generic_location("1.0,2.0").is_specified
    with pytest.raises(TypeError):
        to_generic_location(42)


# ---------------------------
# Cost functions
# ---------------------------
@pytest.mark.parametrize(
    "text, constant, coefficient",
    [
        ("3600", 3600.0, 0.0),
        ("600 + 1.5 x", 600.0, 1.5),
        ("f(x) = 600 + 1.5x", 600.0, 1.5),
        ("10m + 2.0 x", 600.0, 2.0),
        ("1h", 3600.0, 0.0),
        ("1h30m + 1.0 x", 5400.0, 1.0),
        ("PT10M", 600.0, 0.0),
    ],
)
def test_parse_linear_function(text: str, constant: float, coefficient: float) -> None:
    f = parse_linear_function(text)
    assert (f.constant, f.coefficient) == (constant, coefficient)


@pytest.mark.parametrize("text", ["", "abc", "600 + -1 x", "f(x) = ", "10w", "-5"])
def test_parse_linear_function_rejects(text: str) -> None:
    with pytest.raises(ValueError):
        parse_linear_function(text)


def test_linear_function_calculate_and_serialize() -> None:
    f = create_linear_function(600, 1.5)
    assert f.calculate(100) == 750.0
    assert f.serialize() == "f(x) = 600 + 1.5 x"
    assert parse_linear_function(f.serialize()) == f


# ---------------------------
# Triangle
# ---------------------------
def test_triangle_normalizes_to_one() -> None:
    t = TimeSlopeSafetyTriangle.normalized(time=1, slope=1, safety=2)
    assert (t.time, t.slope, t.safety) == (0.25, 0.25, 0.5)


def test_triangle_all_zero_and_negative() -> None:
    t = TimeSlopeSafetyTriangle.normalized(time=0, slope=-3, safety=0)
    assert t.safety == 0.33 and t.slope == 0.33
    assert t.time == 0.34


def test_triangle_builder_without_overrides_returns_base() -> None:
    base = TimeSlopeSafetyTriangle()
    assert TriangleBuilder(base).build() is base


def test_triangle_builder_partial_override_uses_base_for_rest() -> None:
    b = TriangleBuilder(TimeSlopeSafetyTriangle(time=0.5, slope=0.25, safety=0.25))
    b.with_time(0.0)
    t = b.build()
    assert (t.time, t.slope, t.safety) == (0.0, 0.5, 0.5)


def test_triangle_builder_rejects_non_numbers() -> None:
    with pytest.raises(TypeError):
        TriangleBuilder(TimeSlopeSafetyTriangle()).with_slope("0.3")


# ---------------------------
# Page cursor
# ---------------------------
def test_page_cursor_encode_decode() -> None:
    cursor = PageCursor(
        type=PageType.NEXT_PAGE,
        earliest_departure_time=datetime(2026, 10, 19, 7, 0, tzinfo=timezone.utc),
        search_window=timedelta(minutes=40),
    )
    token = cursor.encode()
    assert "=" not in token
    assert PageCursor.decode(token) == cursor


def test_page_cursor_garbage_is_logged_and_ignored(caplog) -> None:
    with caplog.at_level(logging.WARNING, logger="route_request"):
        assert PageCursor.decode("definitely-not-a-cursor") is None
    assert any("page cursor" in r.getMessage() for r in caplog.records)


def test_page_cursor_blank_is_none() -> None:
    assert PageCursor.decode("   ") is None


def test_page_cursor_requires_string() -> None:
    with pytest.raises(TypeError):
        PageCursor.decode(123)  # type: ignore[arg-type]
