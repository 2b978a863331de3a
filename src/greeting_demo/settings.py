"""
greeting_demo.settings

Central configuration model (Pydantic Settings).

Responsibilities:
- Provide strongly-typed, env-driven settings for the API, store and seeder.
- Offer a cached settings instance for dependency injection.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    All fields are read from `GREETING_*` environment variables.
    Defaults target a local SQLite file so the demo runs without setup.
    """

    model_config = SettingsConfigDict(env_prefix="GREETING_", case_sensitive=False)

    env: Literal["dev", "test", "prod"] = "dev"
    service_name: str = "greeting-demo"
    log_level: str = "INFO"

    api_host: str = "0.0.0.0"
    api_port: int = 8080

    # Persistence
    database_url: str = "sqlite+aiosqlite:///./greetings.db"

    # Seeder inserts four rows on every start; there is no idempotence guard.
    seed_on_startup: bool = True


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()


# --- Module Notes -----------------------------------------------------------
# Tests construct `Settings(...)` directly instead of going through the cache.
