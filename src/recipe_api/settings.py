"""
recipe_api.settings

Central configuration model (Pydantic Settings).

Responsibilities:
- Provide strongly-typed, env-driven settings for all layers.
- Hide secrets from repr/logging (e.g., JWT secret).
- Offer a cached settings instance for dependency injection.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Env-driven configuration (prefix `RECIPES_`), defaults safe for local dev.
    """

    model_config = SettingsConfigDict(env_prefix="RECIPES_", case_sensitive=False)

    # Environment controls auto-init of tables and the dev token endpoint.
    env: Literal["dev", "test", "prod"] = "dev"
    service_name: str = "recipe-api"
    log_level: str = "INFO"

    api_host: str = "0.0.0.0"
    api_port: int = 8080

    # Auth
    jwt_alg: str = "HS256"
    jwt_issuer: str = "recipe-api"
    jwt_audience: str = "recipe-api-clients"
    jwt_secret: str = Field(default="dev-secret-change-me", repr=False)

    # Persistence
    database_url: str = "sqlite+aiosqlite:///./recipes.db"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()


# --- Module Notes -----------------------------------------------------------
# The app factory stores the Settings it was built with on `app.state`; request
# dependencies read from there so tests can run several apps side by side.
