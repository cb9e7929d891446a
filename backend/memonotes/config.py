"""
MemoNotes Backend — Application Configuration
================================================

What:  Centralized configuration management using Pydantic Settings.
How:   Pydantic Settings reads MEMONOTES_* environment variables (or a .env
       file), validates types/ranges, and exposes the result as a
       `Settings` object. Nothing is read at import time: the CLI
       (memonotes.cli) builds Settings from flags layered over the
       environment, and create_app() builds its own when none is passed.
Who:   Imported by the app factory and the CLI.

Environment variables:
    MEMONOTES_HOST          Bind address (default 127.0.0.1)
    MEMONOTES_PORT          Bind port (default 8000)
    MEMONOTES_CACHE         Cache directory path (accepted, logged, unused)
    MEMONOTES_LOG_LEVEL     DEBUG, INFO, WARNING, ERROR, CRITICAL
    MEMONOTES_CORS_ORIGINS  Comma-separated allowed origins
"""

from typing import List

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings have defaults suitable for local development.
    """

    # ── Server ────────────────────────────────────────────────────────────
    host: str = Field(default="127.0.0.1", description="Bind address")
    port: int = Field(default=8000, ge=1, le=65535, description="Bind port")

    # Kept for command-line compatibility: the path is logged at startup and
    # never read or written. Notes are held in memory only.
    cache: str = Field(default="./cache", description="Cache directory (unused)")

    # ── CORS ──────────────────────────────────────────────────────────────
    cors_origins: str = Field(default="*")

    @property
    def cors_origins_list(self) -> List[str]:
        """Splits comma-separated CORS origins into a list."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    # ── Logging ───────────────────────────────────────────────────────────
    log_level: str = Field(default="INFO")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensures log level is a valid Python logging level name."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper = v.upper()
        if upper not in valid_levels:
            raise ValueError(f"Invalid log_level '{v}'. Must be one of: {valid_levels}")
        return upper

    # ── Pydantic Settings Config ──────────────────────────────────────────
    model_config = SettingsConfigDict(
        env_prefix="MEMONOTES_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )
