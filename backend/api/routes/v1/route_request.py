"""
backend.api.routes.v1.route_request

Purpose:
    POST /v1/route-request: translate a plan query into the engine RouteRequest and
    return it as JSON. No search is performed.

Notes:
    - The shared ServerRequestContext lives on app.state; each call gets a copy carrying
      the caller's Accept-Language.
    - InvalidArgument -> 400 INVALID_ARGUMENT, SchemaContractViolation -> 500
      SCHEMA_CONTRACT_VIOLATION (logged with traceback, it means the schema and the
      engine bindings disagree).
"""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import APIRouter, Header, Request

from route_request.context import ServerRequestContext
from route_request.contracts.errors import RouteRequestError, SchemaContractViolation
from route_request.mapping.route_request_mapper import to_route_request

from backend.api.contracts.api_paths import ApiPaths
from backend.api.contracts.api_tags import ApiTags
from backend.api.contracts.error_contract import ErrorResponse
from backend.api.errors import from_route_request_error
from backend.api.schemas.plan import PlanQuery, RouteRequestResponse
from backend.shared.models.normalization.argument_tree_mapping import to_argument_tree

logger = logging.getLogger(__name__)

_paths = ApiPaths()
_tags = ApiTags()

router = APIRouter(tags=[_tags.route_request])


@router.post(
    _paths.route_request,
    response_model=RouteRequestResponse,
    responses={
        400: {
            "model": ErrorResponse,
            "description": "An argument value could not be interpreted",
            "content": {
                "application/json": {
                    "examples": {
                        "bad_id": {
                            "summary": "Malformed feed-scoped id",
                            "value": {
                                "request_id": "REQ_ID",
                                "error_code": "INVALID_ARGUMENT",
                                "message": "Invalid argument 'banned.routes': 'HSL' is not a feed-scoped id (expected 'feedId:id')",
                                "details": {"argument": "banned.routes"},
                            },
                        },
                        "scooter_without_rent": {
                            "summary": "Scooter requested without a rental qualifier",
                            "value": {
                                "request_id": "REQ_ID",
                                "error_code": "INVALID_ARGUMENT",
                                "message": "Invalid argument 'transportModes': SCOOTER is only supported as a rental mode (qualifier RENT)",
                                "details": {"argument": "transportModes"},
                            },
                        },
                    }
                }
            },
        },
        422: {"model": ErrorResponse, "description": "Request validation failed"},
        500: {"model": ErrorResponse, "description": "Internal server error"},
    },
)
def translate_route_request(
    query: PlanQuery,
    request: Request,
    accept_language: Optional[str] = Header(default=None),
) -> RouteRequestResponse:
    base: ServerRequestContext = request.app.state.route_request_context
    context = base.with_accept_language(accept_language)
    request_id = getattr(request.state, "request_id", None)

    try:
        translated = to_route_request(to_argument_tree(query), context, request_id=request_id)
    except SchemaContractViolation as e:
        logger.exception("argument type did not match its binding: %s", e)
        raise from_route_request_error(e) from e
    except RouteRequestError as e:
        logger.info("rejected route request: %s", e)
        raise from_route_request_error(e) from e

    return RouteRequestResponse(
        request=translated.model_dump(mode="json", by_alias=True),
        transit_enabled=translated.journey.transit.enabled,
    )
