"""
backend.shared.models.normalization.argument_tree_mapping

Purpose:
    Translate a validated PlanQuery into the engine's ArgumentTree.

Why:
    The engine distinguishes "absent" from "present". A pydantic model fills every
    optional field with None, so only the fields the client actually sent are kept
    (exclude_unset) and explicit nulls are dropped by the tree itself.

Usage:
    - backend.api.routes.v1.route_request calls to_argument_tree() before to_route_request()
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel

from route_request.arguments.path_resolver import ArgumentTree


def to_argument_payload(query: BaseModel) -> dict[str, Any]:
    """Plain JSON-compatible dict keyed by the wire (camelCase) names."""
    return query.model_dump(by_alias=True, exclude_unset=True, mode="json")


def to_argument_tree(query: BaseModel) -> ArgumentTree:
    return ArgumentTree.of(to_argument_payload(query))
