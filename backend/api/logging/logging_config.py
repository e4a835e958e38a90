"""
backend.api.logging.logging_config

Purpose:
    Central logging configuration for backend API.
    Ensures request_id is present in logs (including uvicorn.access and uvicorn.error)
    and in the route_request engine logs.
"""

from __future__ import annotations

import logging

from route_request.utils.logging import LOGGER_NAMESPACE

from backend.api.logging.request_id_filter import RequestIdFilter


def _make_handler(level: int) -> logging.Handler:
    handler = logging.StreamHandler()
    handler.setLevel(level)

    formatter = logging.Formatter(
        fmt="%(asctime)s | %(levelname)s | request_id=%(request_id)s | %(name)s | %(message)s"
    )
    handler.setFormatter(formatter)
    handler.addFilter(RequestIdFilter())
    return handler


def _configure_logger(logger_name: str, handler: logging.Handler, level: int, *, clear_handlers: bool) -> None:
    logger = logging.getLogger(logger_name)
    logger.setLevel(level)

    if clear_handlers:
        logger.handlers.clear()

    logger.addHandler(handler)
    logger.propagate = False


def configure_logging(level: str = "INFO") -> None:
    numeric = logging.getLevelName(level.upper())
    if not isinstance(numeric, int):
        numeric = logging.INFO

    handler = _make_handler(numeric)

    # Root/app logs (don't clear root handlers to avoid surprising other libs)
    root = logging.getLogger()
    root.setLevel(numeric)
    if not any(isinstance(h, logging.StreamHandler) for h in root.handlers):
        root.addHandler(handler)

    # Engine logs propagate to root; DEBUG here turns on the per-override trace lines.
    logging.getLogger(LOGGER_NAMESPACE).setLevel(numeric)

    # Uvicorn uses these loggers; clear their handlers so our formatter/filter wins.
    _configure_logger("uvicorn", handler, numeric, clear_handlers=True)
    _configure_logger("uvicorn.error", handler, numeric, clear_handlers=True)
    _configure_logger("uvicorn.access", handler, numeric, clear_handlers=True)
