"""Runtime settings.

Loaded from environment variables (or a local ``.env`` file) via
pydantic-settings.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    log_level: str = Field("WARNING", alias="CATALOG_LOG_LEVEL")
    json_logs: bool = Field(False, alias="CATALOG_LOG_JSON")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return a cached Settings instance so the environment is read once."""
    return Settings()
