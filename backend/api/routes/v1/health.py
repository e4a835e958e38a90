"""
backend.api.routes.v1.health

Purpose:
    Versioned health endpoint for API clients.
"""

from __future__ import annotations

from fastapi import APIRouter, Request

from backend.api.contracts.api_paths import ApiPaths
from backend.api.contracts.api_tags import ApiTags

_paths = ApiPaths()
_tags = ApiTags()

router = APIRouter(tags=[_tags.health])


@router.get(_paths.health)
def health(request: Request) -> dict:
    # The baseline request is built in create_app(); its presence means config loaded.
    ready = getattr(request.app.state, "route_request_context", None) is not None
    return {"status": "ok" if ready else "starting"}
