"""Runtime configuration for the searcher.

Values come from ``QA_SEARCHER_*`` environment variables or a ``.env`` file.
"""
from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .matcher import FUZZY_THRESHOLD

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class Settings(BaseSettings):
    """Searcher settings."""

    model_config = SettingsConfigDict(
        env_prefix="QA_SEARCHER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    questions_file: Path = Field(
        default=Path("Questions.json"),
        description="JSON array of {Question, Answer} records",
    )
    fuzzy_threshold: float = Field(
        default=FUZZY_THRESHOLD,
        ge=0.0,
        le=1.0,
        description="Largest fuzzy distance accepted, as a fraction of length",
    )
    log_level: str = Field(default="WARNING")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v!r}")
        return level


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Cached settings singleton."""
    return Settings()


def configure_logging(level: str = "WARNING") -> None:
    """Send log records at *level* and above to stderr."""
    logging.basicConfig(level=level, format=LOG_FORMAT)
