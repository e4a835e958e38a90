"""
route_request/model/cost_function.py

Purpose:
    Linear cost functions `f(x) = constant + coefficient * x` used for unpreferred-route costs.

Accepted text forms (whitespace insensitive):
    "600 + 1.5 x"      "f(x) = 600 + 1.5x"      "10m + 2.0 x"      "3600"
A bare constant means coefficient 0.0. Constants accept duration suffixes (s/m/h/d).
"""

from __future__ import annotations

import math
import re

from pydantic import BaseModel, ConfigDict

from route_request.utils.duration_parsing import parse_duration_seconds

_PREFIX = re.compile(r"^\s*f\s*\(\s*x\s*\)\s*=\s*", re.IGNORECASE)
_LINEAR = re.compile(r"^(?P<constant>[^+]+?)\s*\+\s*(?P<coefficient>-?\d+(?:\.\d+)?)\s*\*?\s*x$", re.IGNORECASE)


class LinearCostFunction(BaseModel):
    model_config = ConfigDict(frozen=True)

    constant: float = 0.0
    coefficient: float = 0.0

    def calculate(self, x: float) -> float:
        return self.constant + self.coefficient * x

    def serialize(self) -> str:
        return f"f(x) = {_fmt(self.constant)} + {_fmt(self.coefficient)} x"

    def __str__(self) -> str:
        return self.serialize()


def create_linear_function(constant: float, coefficient: float) -> LinearCostFunction:
    return LinearCostFunction(constant=float(constant), coefficient=float(coefficient))


def parse_linear_function(text: str) -> LinearCostFunction:
    if not isinstance(text, str):
        raise TypeError(f"expected a cost function string, got {type(text).__name__}")

    body = _PREFIX.sub("", text.strip())
    if not body:
        raise ValueError("cost function is empty")

    m = _LINEAR.match(body)
    if m:
        constant = parse_duration_seconds(m.group("constant"), field_name="cost constant")
        coefficient = float(m.group("coefficient"))
    else:
        constant = parse_duration_seconds(body, field_name="cost constant")
        coefficient = 0.0

    if not math.isfinite(coefficient) or coefficient < 0:
        raise ValueError("cost coefficient must be a finite number >= 0")
    return create_linear_function(constant, coefficient)


def _fmt(v: float) -> str:
    return str(int(v)) if float(v).is_integer() else repr(v)
