"""
Dungeon Rush - Application Settings

Loads configuration from environment variables using Pydantic Settings.
Every variable is prefixed with DUNGEON_RUSH_ (e.g. DUNGEON_RUSH_SEED).
"""

import logging
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application
    debug: bool = False
    log_level: str = "INFO"

    # Game defaults
    total_paths: int = Field(default=4, ge=1)
    starting_gold: int = Field(default=4, ge=0)
    gold_per_turn: int = Field(default=4, ge=0)
    treasure_gold: int = Field(default=3, ge=0)
    seed: int | None = None

    model_config = {
        "env_prefix": "DUNGEON_RUSH_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Cached singleton settings instance."""
    return Settings()


def configure_logging(settings: Settings | None = None) -> None:
    """Apply the configured log level to the root logger."""
    settings = settings or get_settings()
    level = "DEBUG" if settings.debug else settings.log_level.upper()
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
