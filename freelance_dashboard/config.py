"""
Application configuration using Pydantic Settings.
Loads environment variables and provides type-safe configuration.
"""

from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # Environment
    environment: str = Field(default="development", description="Current environment")
    debug: bool = Field(default=False, description="Debug mode")
    log_level: str = Field(default="INFO", description="Log level when debug is off")

    app_title: str = Field(default="Freelance Dashboard")

    # Display
    default_currency: str = Field(default="USD", description="Currency used to display amounts")

    # State
    seed_file: Optional[Path] = Field(
        default=None,
        description="JSON file with the initial state; the built-in sample is used when unset"
    )
    enforce_payment_project_match: bool = Field(
        default=False,
        description="Reject mark-paid payments whose project id differs from the target project"
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v):
        """Upper-case the log level name."""
        if isinstance(v, str):
            return v.strip().upper() or "INFO"
        return v

    @field_validator("default_currency", mode="before")
    @classmethod
    def normalize_currency(cls, v):
        """Upper-case the currency code."""
        if isinstance(v, str):
            return v.strip().upper()
        return v

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment.lower() == "development"

    @property
    def is_testing(self) -> bool:
        """Check if running in testing environment."""
        return self.environment.lower() == "testing"


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.
    Use this function to get settings throughout the application.
    """
    return Settings()
