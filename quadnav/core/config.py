"""
Configuration module for quadnav.

Uses pydantic-settings for environment-based configuration. Every setting
can be overridden with a QUADNAV_-prefixed environment variable or a .env file.
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Library settings loaded from environment variables.

    - max_list_length: Upper bound on RDF Collection walks (guards cyclic lists)
    - log_level / log_file_path: Defaults for setup_structured_logging()
    """

    model_config = SettingsConfigDict(
        env_prefix="QUADNAV_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ===========================================
    # LOGGING CONFIGURATION
    # ===========================================
    service_name: str = Field(
        default="quadnav",
        description="Service name stamped on structured log records",
    )
    log_level: str = Field(default="INFO", description="Root log level")
    log_file_path: str | None = Field(
        default=None,
        description="Rotating JSON log file, disabled when unset",
    )

    # ===========================================
    # TRAVERSAL LIMITS
    # ===========================================
    max_list_length: int = Field(
        default=100_000,
        gt=0,
        description="Maximum number of items read from a single RDF Collection",
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
