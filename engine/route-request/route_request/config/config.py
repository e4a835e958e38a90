# route_request/config/config.py
# Purpose: Build the baseline RouteRequest from DEFAULT_ROUTE_REQUEST plus optional overrides.

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Mapping, Optional

from route_request.config.default_config import DEFAULT_ROUTE_REQUEST
from route_request.model.route_request import RouteRequest
from route_request.utils.logging import get_logger

logger = get_logger(__name__)


def _deep_copy(obj: dict) -> dict:
    return json.loads(json.dumps(obj))


def deep_merge(base: dict[str, Any], overrides: Mapping[str, Any]) -> dict[str, Any]:
    """Merge overrides into base (in place); nested dicts merge, everything else replaces."""
    for key, value in overrides.items():
        if isinstance(value, Mapping) and isinstance(base.get(key), dict):
            deep_merge(base[key], value)
        else:
            base[key] = value
    return base


def load_route_request_defaults(
    overrides: Optional[Mapping[str, Any]] = None,
    *,
    path: Optional[str | Path] = None,
) -> RouteRequest:
    """
    Return the baseline RouteRequest.

    Precedence: DEFAULT_ROUTE_REQUEST < JSON file at `path` < `overrides`.
    Raises pydantic.ValidationError for unknown keys or bad values and OSError /
    json.JSONDecodeError for unreadable files (startup errors, not request errors).
    """
    cfg = _deep_copy(DEFAULT_ROUTE_REQUEST)

    if path is not None:
        p = Path(path)
        logger.info("loading route request defaults from %s", p)
        with p.open("r", encoding="utf-8") as fh:
            deep_merge(cfg, json.load(fh))

    if overrides:
        deep_merge(cfg, overrides)

    return RouteRequest.model_validate(cfg)
