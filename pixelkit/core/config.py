"""
Configuration using Pydantic Settings.

Settings are read from environment variables prefixed with ``PIXELKIT_`` and
can be overridden via a .env file.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Library settings loaded from environment variables.

    Attributes:
        app_name: Name reported in logs
        app_version: Semantic version string
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        environment: Runtime environment (development, staging, production)
        default_resample: Sampler used by resize_image() when none is given
    """

    model_config = SettingsConfigDict(
        env_prefix="PIXELKIT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    app_name: str = Field(default="pixelkit", description="Library name")
    app_version: str = Field(default="0.1.0", description="Library version")
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO", description="Logging level"
    )
    environment: Literal["development", "staging", "production"] = Field(
        default="development", description="Runtime environment"
    )

    default_resample: Literal["nearest", "bilinear"] = Field(
        default="bilinear", description="Default sampling strategy for resize_image()"
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """Accept lower-case level names from the environment."""
        return v.upper() if isinstance(v, str) else v

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.environment == "development"

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.environment == "production"


@lru_cache()
def get_settings() -> Settings:
    """
    Create and cache the settings instance.

    Returns:
        Cached Settings instance
    """
    return Settings()


settings = get_settings()
