"""
checkout_orders.settings

Central configuration model (Pydantic Settings).

Responsibilities:
- Provide strongly-typed, env-driven settings for the persistence layer.
- Offer a cached settings instance for composition roots.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Env-driven configuration (prefix `CHECKOUT_`).
    Defaults are safe for local dev.
    """

    model_config = SettingsConfigDict(env_prefix="CHECKOUT_", case_sensitive=False)

    # Environment controls toggle behavior like auto-init DB tables.
    env: Literal["dev", "test", "prod"] = "dev"
    service_name: str = "checkout-orders"
    log_level: str = "INFO"
    # JSON lines for log shippers; set false for human-readable console output.
    log_json: bool = True

    # Persistence
    database_url: str = "sqlite+aiosqlite:///./orders.db"
    database_echo: bool = False
    # Seconds to wait for a pooled connection before the operation fails.
    pool_timeout: float = Field(default=30.0, gt=0)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()


# --- Module Notes -----------------------------------------------------------
# Tests construct `Settings(...)` directly instead of going through the cache.
