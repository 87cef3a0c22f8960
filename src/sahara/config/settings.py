"""
SAHARA Application Settings

Configuration management using Pydantic Settings.
All values are loaded from environment variables with the SAHARA_ prefix.

NOTE: Classifier pattern tables are compiled-in constants and are
intentionally not configurable here.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ApiSettings(BaseSettings):
    """HTTP API request limits."""

    model_config = SettingsConfigDict(env_prefix="SAHARA_API_")

    max_text_length: int = Field(default=4000, ge=1, le=100_000, description="Max characters per message")
    max_progress_entries: int = Field(default=1000, ge=1, le=100_000, description="Max entries per progress request")


class SafetySettings(BaseSettings):
    """Crisis resource configuration."""

    model_config = SettingsConfigDict(env_prefix="SAHARA_SAFETY_")

    default_country_code: str = Field(default="US", min_length=2, max_length=4)
    include_helplines: bool = Field(default=True, description="Attach helplines to crisis responses")

    @field_validator("default_country_code")
    @classmethod
    def normalize_country_code(cls, v: str) -> str:
        """Store country codes upper-cased."""
        return v.upper()


class Settings(BaseSettings):
    """
    Main application settings.

    Usage:
        settings = get_settings()
        limit = settings.api.max_text_length
    """

    model_config = SettingsConfigDict(
        env_prefix="SAHARA_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Application
    env: Literal["development", "staging", "production"] = Field(
        default="development",
        description="Application environment"
    )
    debug: bool = Field(default=False, description="Debug mode")
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Logging level"
    )
    api_version: str = Field(default="v1", description="API version prefix")
    cors_origins: list[str] = Field(
        default=["http://localhost:3000"],
        description="Allowed CORS origins"
    )

    # Nested settings
    api: ApiSettings = Field(default_factory=ApiSettings)
    safety: SafetySettings = Field(default_factory=SafetySettings)

    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.env == "production"


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached application settings.

    For testing, call get_settings.cache_clear() after changing
    the environment.

    Returns:
        Settings: Application settings instance
    """
    return Settings()
