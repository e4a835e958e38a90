"""
backend.api.logging.request_context

Purpose:
    Request-scoped context storage using contextvars.
    Enables request_id propagation into logs and into the route-request translation log context.
"""

from __future__ import annotations

import contextvars

request_id_ctx_var: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "request_id",
    default=None,
)
