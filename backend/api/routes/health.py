"""
backend.api.routes.health

Purpose:
    Health endpoints for container/orchestrator checks.
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
    return {"ok": True, "service": request.app.title}
