"""
Configuration settings for the quiz trainer.

Uses Pydantic Settings for environment variable management with .env file support.
"""
from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ========================================
    # Database
    # ========================================
    database_url: str = Field(
        default="sqlite:///quizzes.sqlite",
        description="SQLAlchemy connection string for the quiz store",
    )
    seed_default_quizzes: bool = Field(
        default=True,
        description="Populate an empty store with the starter quizzes",
    )

    # ========================================
    # Play Sessions
    # ========================================
    play_seed: int | None = Field(
        default=None,
        description="Fixed random seed for play order (None for a fresh order each game)",
    )

    # ========================================
    # Shell
    # ========================================
    prompt_text: str = Field(
        default="quiz > ",
        description="Prompt shown by the interactive shell",
    )
    credits_authors: list[str] = Field(
        default=["Marcos Notario"],
        description="Names listed by the credits command",
    )

    # ========================================
    # Logging
    # ========================================
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="WARNING",
        description="Logging verbosity level",
    )
    log_file: str | None = Field(
        default=None,
        description="Log file path (None for stderr only)",
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
