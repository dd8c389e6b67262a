# src/config/settings.py - v1
"""Typed configuration loaded from .env via pydantic-settings.

Single source of truth for deployment-specific settings.
"""

from __future__ import annotations

from typing import Literal

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ConfigurationError(Exception):
    """Raised when configuration is internally inconsistent."""


class Settings(BaseSettings):
    """Application settings loaded from .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # === User directory ===
    user_directory_backend: Literal["memory", "json"] = "memory"
    user_directory_path: str = ""

    # === Logging ===
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    log_format: Literal["json", "text"] = "json"
    log_file: str = ""
    log_rotation: str = "10MB"
    log_retention: int = 30

    # --- Validators ---

    @field_validator("log_retention")
    @classmethod
    def validate_log_retention(cls, v: int) -> int:
        if v < 0:
            raise ValueError("log_retention must be >= 0")
        return v

    @model_validator(mode="after")
    def validate_config_consistency(self) -> Settings:
        if self.user_directory_backend == "json" and not self.user_directory_path:
            raise ConfigurationError(
                "USER_DIRECTORY_PATH must be set when USER_DIRECTORY_BACKEND=json"
            )
        return self


def load_settings(**overrides: object) -> Settings:
    """Load settings from .env with optional overrides.

    Raises:
        ConfigurationError: If configuration is internally inconsistent.
    """
    return Settings(**overrides)  # type: ignore[arg-type]
