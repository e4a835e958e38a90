"""
backend.api.contracts.api_tags

Purpose:
    Central definition of FastAPI tags to avoid scattered string literals.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ApiTags:
    health: str = "health"
    info: str = "info"
    route_request: str = "route-request"
