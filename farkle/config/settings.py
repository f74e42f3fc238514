"""
Farkle - Application Settings

Loads configuration from environment variables (prefixed ``FARKLE_``) or a
``.env`` file using Pydantic Settings.
"""

import logging
from functools import lru_cache
from typing import Literal, get_args

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
LOG_LEVELS: tuple[str, ...] = get_args(LogLevel)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application
    debug: bool = False
    log_level: LogLevel = "INFO"

    # Simulation
    simulation_turns: int = Field(default=100_000, gt=0)
    workers: int | None = Field(default=None, gt=0)
    seed: int | None = None
    target_score: int = Field(default=10_000, gt=0)

    # Engine
    validate_reservations: bool = True

    model_config = SettingsConfigDict(
        env_prefix="FARKLE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value):
        if isinstance(value, str):
            return value.upper()
        return value


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Cached singleton settings instance."""
    return Settings()


def configure_logging(settings: Settings | None = None, level: str | None = None) -> None:
    """
    Configure root logging from settings.

    Args:
        settings: Settings to read ``log_level`` and ``debug`` from
        level: Explicit level name, overriding the settings
    """
    settings = settings or get_settings()
    if level is None:
        level = "DEBUG" if settings.debug else settings.log_level
    # basicConfig leaves existing handlers alone, so set the level separately
    logging.basicConfig(format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    logging.getLogger().setLevel(level.upper())
