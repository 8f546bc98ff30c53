"""
rent_car.settings

Central configuration model (Pydantic Settings).

Responsibilities:
- Provide strongly-typed, env-driven settings for all layers.
- Own the per-call deadline and the pagination defaults/bounds.
- Offer a cached settings instance for dependency injection.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Env-driven configuration (prefix `RENT_CAR_`).
    Defaults are safe for local dev; one instance is injected across layers.
    """

    model_config = SettingsConfigDict(env_prefix="RENT_CAR_", case_sensitive=False)

    # Environment controls toggle behavior like auto-init DB tables.
    env: Literal["dev", "test", "prod"] = "dev"
    service_name: str = "rent-car"
    log_level: str = "INFO"

    api_host: str = "0.0.0.0"
    api_port: int = 8080

    # Persistence
    database_url: str = Field(default="sqlite+aiosqlite:///./rent_car.db", repr=False)

    # Deadline applied to every order service call.
    context_timeout_seconds: float = Field(default=7.0, gt=0)

    # Pagination
    default_page_limit: int = Field(default=10, ge=1)
    max_page_limit: int = Field(default=100, ge=1)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    # Cache avoids re-parsing env vars for each request dependency.
    return Settings()


# --- Module Notes -----------------------------------------------------------
# `max_page_limit` must stay >= `default_page_limit`; the pagination parser rejects
# (never clamps) limits above the maximum.
