"""
backend.api.main

Purpose:
    FastAPI application entrypoint for the route-request translation service.

Notes:
    - The baseline RouteRequest and the ServerRequestContext are built once here and
      stored on app.state; requests only ever read them.
    - A broken defaults file or an unknown time zone fails app creation, not a request.
"""

from __future__ import annotations

from zoneinfo import ZoneInfo

from fastapi import FastAPI

from route_request.config.config import load_route_request_defaults
from route_request.context import ServerRequestContext

from backend.api.contracts.request_id_policy import RequestIdPolicy
from backend.api.error_handlers import register_error_handlers
from backend.api.logging.logging_config import configure_logging
from backend.api.middleware.request_id import RequestIdMiddleware
from backend.api.routes.health import router as health_router
from backend.api.routes.v1 import v1_router
from backend.api.settings import Settings, get_settings


def build_request_context(settings: Settings) -> ServerRequestContext:
    return ServerRequestContext(
        route_request_defaults=load_route_request_defaults(path=settings.defaults_file),
        time_zone=ZoneInfo(settings.time_zone),
        default_locale=settings.default_locale,
    )


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()

    configure_logging(settings.log_level)

    app = FastAPI(title=settings.service_name, version=settings.service_version)
    app.state.route_request_context = build_request_context(settings)

    @app.get("/")
    def root():
        return {"status": "ok", "service": settings.service_name}

    app.add_middleware(RequestIdMiddleware, policy=RequestIdPolicy())

    register_error_handlers(app)

    app.include_router(health_router)
    app.include_router(v1_router)

    return app


app = create_app()
