"""Configuration system for brandinvest.

Uses pydantic-settings to load configuration from environment variables
and .env files with defaults matching the reference deployment.
"""

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    All settings can be overridden via environment variables or .env file.
    Environment variables are prefixed with BRANDINVEST_ (e.g., BRANDINVEST_OWNER).
    """

    model_config = SettingsConfigDict(
        env_prefix="BRANDINVEST_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Registry administration
    owner: str = Field(
        default="ST1PQHQKV0RJXZFY1DGX8MNSNYVE3VGZJSRTPGZGM",
        min_length=1,
        description="Identity allowed to mutate the registry",
    )
    default_current_year: int = Field(
        default=2023,
        ge=0,
        description="Current year a new registry starts with",
    )
    max_brands: int = Field(
        default=100,
        ge=1,
        description="Maximum number of brands a registry can hold",
    )

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Log level used by the report runner",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip().upper()
        return value


# Singleton instance for easy import
config = Settings()
