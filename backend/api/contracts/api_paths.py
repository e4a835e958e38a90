# backend/api/contracts/api_paths.py
"""
backend.api.contracts.api_paths

Purpose:
    Central definition of API route paths and versioning.
    Keeps routing stable and prevents string duplication.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ApiPaths:
    v1_prefix: str = "/v1"
    health: str = "/health"
    info: str = "/info"
    route_request: str = "/route-request"
