"""
backend.api.contracts.error_contract

Purpose:
    Stable error contract for the API (codes + response model).
    Used by global exception handlers to ensure consistent client responses.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field


class ApiErrorCode(str, Enum):
    # Generic
    INTERNAL_ERROR = "INTERNAL_ERROR"
    BAD_REQUEST = "BAD_REQUEST"

    # Request translation
    INVALID_ARGUMENT = "INVALID_ARGUMENT"
    SCHEMA_CONTRACT_VIOLATION = "SCHEMA_CONTRACT_VIOLATION"


class ErrorResponse(BaseModel):
    request_id: str = Field(..., description="Request correlation id for debugging")
    error_code: ApiErrorCode = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error message")
    details: dict[str, Any] | None = Field(default=None, description="Optional structured details")
