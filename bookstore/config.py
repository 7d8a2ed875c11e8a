"""Configuration loading for the bookstore inventory.

This module provides centralized configuration management:
- Load settings from environment variables and .env files
- Validate configuration using pydantic
- Provide typed access to all settings
"""

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from bookstore.adapters.fulfillment.stdout import PREFIX


class Settings(BaseSettings):
    """Application configuration loaded from environment.

    Uses pydantic-settings for environment variable handling with
    .env file support via python-dotenv.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Fulfillment configuration
    fulfillment_backend: Literal["stdout", "log"] = Field(
        default="stdout",
        description="Where shipping and mail notices are written",
    )
    notice_prefix: str = Field(
        default=PREFIX,
        description="Prefix printed before each stdout notice and demo line",
    )

    # Catalog pruning
    outdated_threshold_years: int = Field(
        default=20,
        description="Items older than this many years are pruned by the demo",
    )
    current_year: int | None = Field(
        default=None,
        description="Override for the current year (defaults to the system clock)",
    )

    # Logging configuration
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Log level",
    )
    log_format: Literal["json", "text"] = Field(
        default="text",
        description="Log format",
    )

    # Run mode
    run_mode: Literal["demo", "cli"] = Field(
        default="demo",
        description="Run mode",
    )

    @field_validator("outdated_threshold_years")
    @classmethod
    def validate_threshold(cls, v: int) -> int:
        """Ensure pruning threshold is non-negative."""
        if v < 0:
            raise ValueError("outdated_threshold_years must be non-negative")
        return v

    @field_validator("current_year")
    @classmethod
    def validate_current_year(cls, v: int | None) -> int | None:
        """Ensure the year override is a plausible calendar year."""
        if v is not None and not 1 <= v <= 9999:
            raise ValueError("current_year must be between 1 and 9999")
        return v


def load_settings(env_file: str | None = None) -> Settings:
    """Load application settings from environment.

    Args:
        env_file: Optional path to .env file. If not provided,
                 uses the default .env in the current directory.

    Returns:
        Validated Settings instance.

    Raises:
        ValidationError: If settings validation fails.
    """
    if env_file:
        return Settings(_env_file=env_file)  # type: ignore[call-arg]
    return Settings()


__all__ = ["Settings", "load_settings"]
