"""Application settings."""

from __future__ import annotations

from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Driver settings for the command line interface."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="FUNCORE_",
        case_sensitive=False,
        extra="ignore",
    )

    recursion_limit: int = Field(default=20000, ge=1000)
    log_filter: str = Field(default="info")
    show_terms: bool = Field(default=True)


def load_settings(**overrides: Any) -> Settings:
    """Load settings from the environment with optional overrides."""
    return Settings(**overrides)
