"""
backend.api.errors

Purpose:
    Internal exception types for API error handling.
    Routes raise ApiError; global handler converts to ErrorResponse.

Notes:
    - from_route_request_error() maps engine translation errors onto the stable error codes:
        InvalidArgument         -> 400 INVALID_ARGUMENT
        SchemaContractViolation -> 500 SCHEMA_CONTRACT_VIOLATION
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from route_request.contracts.errors import InvalidArgument, RouteRequestError

from backend.api.contracts.error_contract import ApiErrorCode


@dataclass(frozen=True)
class ApiError(Exception):
    status_code: int
    error_code: ApiErrorCode
    message: str
    details: dict[str, Any] | None = None

    def __str__(self) -> str:
        return f"{self.error_code}: {self.message}"


def from_route_request_error(exc: RouteRequestError) -> ApiError:
    argument = getattr(exc, "argument", None)
    details = {"argument": argument} if argument else None

    if isinstance(exc, InvalidArgument):
        return ApiError(
            status_code=400,
            error_code=ApiErrorCode.INVALID_ARGUMENT,
            message=str(exc),
            details=details,
        )
    return ApiError(
        status_code=500,
        error_code=ApiErrorCode.SCHEMA_CONTRACT_VIOLATION,
        message=str(exc),
        details=details,
    )
