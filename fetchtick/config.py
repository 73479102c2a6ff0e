"""
Configuration settings for fetchtick.

Uses Pydantic Settings to load environment variables for the default fetch
target, timer defaults, and logging. Library functions never read settings on
their own behalf beyond the CLI defaults; callers pass URLs and intervals in.
"""
from __future__ import annotations

from functools import lru_cache
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Fetch
    todo_url: str = Field("https://jsonplaceholder.typicode.com/todos/1", alias="TODO_URL")

    # Timer
    tick_interval_ms: int = Field(1000, alias="TICK_INTERVAL_MS")
    tick_duration_ms: int = Field(5500, alias="TICK_DURATION_MS")

    # Application
    app_env: str = Field("development", alias="APP_ENV")
    log_level: str = Field("INFO", alias="LOG_LEVEL")
    log_json: bool = Field(False, alias="LOG_JSON")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Retrieve a cached instance of Settings to avoid repeated env parsing.
    """
    return Settings()


__all__ = ["Settings", "get_settings"]
