"""
Big Five — Application Configuration

Loads configuration from environment variables (and an optional .env file)
using Pydantic Settings.  A cached ``get_settings()`` helper is provided so
that every call-site receives the same validated instance without
re-parsing the environment.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

PACKAGE_DATA_DIR = Path(__file__).resolve().parent / "data"


class Settings(BaseSettings):
    """Central configuration for the scoring engine."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ------------------------------------------------------------------ #
    # Static model data
    # ------------------------------------------------------------------ #
    BIG5_DATA_DIR: str = ""  # empty -> packaged big5_scoring/data
    ITEM_MAPPING_FILE: str = "item_mapping.json"
    ASPECT_MODELS_FILE: str = "aspect_models.json"
    MODEL_VERSION: str = "1.0"  # used when aspect_models.json has none
    EXPECTED_ITEM_COUNT: int = 100

    # ------------------------------------------------------------------ #
    # Runtime environment
    # ------------------------------------------------------------------ #
    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = True

    # ------------------------------------------------------------------ #
    # Derived helpers
    # ------------------------------------------------------------------ #
    @property
    def data_dir(self) -> Path:
        return Path(self.BIG5_DATA_DIR) if self.BIG5_DATA_DIR else PACKAGE_DATA_DIR

    @property
    def item_mapping_path(self) -> Path:
        return self.data_dir / self.ITEM_MAPPING_FILE

    @property
    def aspect_models_path(self) -> Path:
        return self.data_dir / self.ASPECT_MODELS_FILE

    @property
    def is_production(self) -> bool:
        return self.ENVIRONMENT == "production"

    @property
    def log_level_value(self) -> int:
        return logging.getLevelName(self.LOG_LEVEL)

    @field_validator("LOG_LEVEL")
    @classmethod
    def _log_level_must_be_known(cls, v: str) -> str:
        v = v.upper()
        if v not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Unknown log level {v!r}")
        return v

    @field_validator("EXPECTED_ITEM_COUNT")
    @classmethod
    def _item_count_must_be_positive(cls, v: int) -> int:
        if v <= 0:
            raise ValueError(f"EXPECTED_ITEM_COUNT must be positive, got {v}")
        return v


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return a cached, validated ``Settings`` instance.

    Using ``@lru_cache`` guarantees the .env file is read and validated
    exactly once per process lifetime::

        from big5_scoring.config import get_settings
        settings = get_settings()
    """
    return Settings()
