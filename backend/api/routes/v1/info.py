"""
backend.api.routes.v1.info

Purpose:
    Versioned info endpoint that exposes API metadata and supported options
    for client discovery (modes/qualifiers/optimize types/transit modes).
"""

from __future__ import annotations

from fastapi import APIRouter, Request

from route_request.contracts.enums import TransitMode

from backend.api.contracts.api_paths import ApiPaths
from backend.api.contracts.api_tags import ApiTags
from backend.shared.models.enums import OptimizeTypeName, QualifierName, TransportModeName

_paths = ApiPaths()
_tags = ApiTags()

router = APIRouter(tags=[_tags.info])


@router.get(_paths.info)
def info(request: Request) -> dict:
    # Keep this as stable contract; safe for clients to depend on.
    context = request.app.state.route_request_context
    return {
        "api_version": "v1",
        "service": request.app.title,
        "endpoints": {
            "route_request": f"{_paths.v1_prefix}{_paths.route_request}",
            "health": f"{_paths.v1_prefix}{_paths.health}",
        },
        "time_zone": str(context.time_zone),
        "default_locale": context.default_locale,
        "supported": {
            "modes": [m.value for m in TransportModeName],
            "qualifiers": [q.value for q in QualifierName],
            "optimize": [o.value for o in OptimizeTypeName],
            "transit_modes": [t.value for t in TransitMode],
        },
    }
