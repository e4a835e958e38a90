"""
route_request/contracts/errors.py

Purpose:
    Exception types raised while translating an argument tree into a RouteRequest.

Notes:
    - InvalidArgument is a client-input error (unknown enum token, malformed path/id/value).
    - SchemaContractViolation means a leaf had the wrong runtime type for its setter. The
      transport contract should make that impossible, so callers treat it as a bug.
    - Translation is all-or-nothing: either error aborts the whole request.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


class RouteRequestError(Exception):
    """Base class for translation failures."""


@dataclass(eq=False)
class InvalidArgument(RouteRequestError):
    argument: str
    message: str
    value: Any = None

    def __str__(self) -> str:
        return f"Invalid argument '{self.argument}': {self.message}"


@dataclass(eq=False)
class SchemaContractViolation(RouteRequestError):
    argument: str
    message: str

    def __str__(self) -> str:
        return f"Schema contract violation for '{self.argument}': {self.message}"
