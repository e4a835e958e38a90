# backend/api/settings.py
"""
backend.api.settings

Purpose:
    Centralized configuration for the FastAPI service.
    Keeps deployment flexible and avoids hard-coded app metadata.

Notes:
    - Loaded from environment variables prefixed with ROUTE_REQUEST_ (and an optional .env).
    - time_zone / default_locale / defaults_file feed the ServerRequestContext built in create_app().
"""

from __future__ import annotations

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from backend.api.contracts.api_paths import ApiPaths


class Settings(BaseSettings):
    service_name: str = Field(default="route-request-api")
    service_version: str = Field(default="0.1.0")

    api_v1_prefix: str = Field(default=ApiPaths().v1_prefix)

    # Transit data time zone used for the `date` / `time` arguments.
    time_zone: str = Field(default="UTC")
    default_locale: str = Field(default="en")

    log_level: str = Field(default="INFO")

    # Optional JSON file merged over DEFAULT_ROUTE_REQUEST at startup.
    defaults_file: Optional[str] = Field(default=None)

    model_config = SettingsConfigDict(
        env_prefix="ROUTE_REQUEST_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )


def get_settings() -> Settings:
    return Settings()
