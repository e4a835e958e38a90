"""
Tests for the baseline RouteRequest loader.
"""

from __future__ import annotations

import json

import pytest
from pydantic import ValidationError

from route_request.config.config import deep_merge, load_route_request_defaults
from route_request.config.default_config import DEFAULT_ROUTE_REQUEST
from route_request.contracts.enums import BicycleOptimizeType


def test_defaults_build_a_request() -> None:
    req = load_route_request_defaults()
    assert req.num_itineraries == DEFAULT_ROUTE_REQUEST["num_itineraries"]
    assert req.preferences.bike.optimize_type == BicycleOptimizeType.SAFE
    assert req.journey.transit.enabled is True


def test_overrides_merge_without_touching_module_defaults() -> None:
    req = load_route_request_defaults({"preferences": {"walk": {"speed": 1.1}}})
    assert req.preferences.walk.speed == 1.1
    assert req.preferences.walk.reluctance == DEFAULT_ROUTE_REQUEST["preferences"]["walk"]["reluctance"]
    assert DEFAULT_ROUTE_REQUEST["preferences"]["walk"]["speed"] == 1.33


def test_file_then_overrides(tmp_path) -> None:
    path = tmp_path / "defaults.json"
    path.write_text(json.dumps({"num_itineraries": 7, "locale": "fi"}), encoding="utf-8")

    req = load_route_request_defaults({"locale": "sv"}, path=path)
    assert req.num_itineraries == 7
    assert req.locale == "sv"


def test_unknown_key_is_rejected() -> None:
    with pytest.raises(ValidationError):
        load_route_request_defaults({"preferences": {"walk": {"sped": 1.0}}})


def test_deep_merge_replaces_non_dicts() -> None:
    base = {"a": {"b": 1, "c": [1]}, "d": 1}
    deep_merge(base, {"a": {"c": [2]}, "d": {"x": 1}})
    assert base == {"a": {"b": 1, "c": [2]}, "d": {"x": 1}}
