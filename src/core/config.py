"""
Configuration management using Pydantic Settings.

This module provides type-safe, validated configuration loading from environment
variables. Every field has a safe default so the service boots without an .env file.

Architecture:
- Flat Settings structure (no nesting)
- All config loaded from environment variables
- Type validation via Pydantic
- Stream defaults are resolved once into an immutable StreamConfig by the
  container; the streaming core never reads settings directly

Usage:
    from src.core.config import settings

    # Access config
    port = settings.port
    origins = settings.cors_origin_list

    # Environment detection
    if settings.is_development:
        # Dev-specific behavior
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.core.enums import Environment

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class Settings(BaseSettings):
    """
    Main application settings (flat structure).

    Configuration precedence:
        1. Environment variables
        2. Default values

    Returns:
        Settings: Application configuration loaded from environment.
    """

    # Environment detection
    environment: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Application environment (development, testing, ci, production)",
    )

    # Core application settings
    debug: bool = Field(
        default=False,
        description="Enable debug mode (verbose logging, detailed errors)",
    )
    host: str = Field(
        default="0.0.0.0",
        description="Server bind host",
    )
    port: int = Field(
        default=8080,
        description="Server bind port",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )

    # Application metadata
    app_name: str = Field(
        default="Tickstream",
        description="Application name",
    )
    app_version: str = Field(
        default="0.1.0",
        description="Application version",
    )

    # CORS configuration
    cors_allow_origin: str = Field(
        default="*",
        description="Allowed CORS origins (comma-separated, '*' for any)",
    )

    # Stream configuration
    stream_interval_ms: str = Field(
        default="100",
        description="Default emission interval in milliseconds. Kept as the raw "
        "string; malformed or non-positive values fall back to the built-in default.",
    )
    stream_retry_ms: int = Field(
        default=1000,
        description="Reconnection delay hint sent to clients (milliseconds)",
    )
    shutdown_grace_seconds: float = Field(
        default=5.0,
        description="Seconds to wait for open connections to drain on shutdown",
    )

    model_config = SettingsConfigDict(
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """
        Normalize and validate the log level name.

        Args:
            v: Log level name (any case).

        Returns:
            str: Upper-case log level name.

        Raises:
            ValueError: If the level is not one of the five standard levels.
        """
        level = v.strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {sorted(_LOG_LEVELS)}")
        return level

    @field_validator("stream_retry_ms")
    @classmethod
    def validate_stream_retry_ms(cls, v: int) -> int:
        """
        Validate the retry hint is not negative.

        Args:
            v: Retry hint in milliseconds.

        Returns:
            int: Validated retry hint.

        Raises:
            ValueError: If the value is negative.
        """
        if v < 0:
            raise ValueError("stream_retry_ms must be >= 0")
        return v

    @property
    def cors_origin_list(self) -> list[str]:
        """
        Parse comma-separated CORS origins.

        Returns:
            list[str]: List of origin URLs (or ["*"]).
        """
        origins = [origin.strip() for origin in self.cors_allow_origin.split(",")]
        return [origin for origin in origins if origin] or ["*"]

    # Convenience properties for environment checks
    @property
    def is_development(self) -> bool:
        """
        Check if running in development environment.

        Returns:
            bool: True if environment is DEVELOPMENT, False otherwise.
        """
        return self.environment == Environment.DEVELOPMENT

    @property
    def is_testing(self) -> bool:
        """
        Check if running in testing environment.

        Returns:
            bool: True if environment is TESTING, False otherwise.
        """
        return self.environment == Environment.TESTING

    @property
    def is_production(self) -> bool:
        """
        Check if running in production environment.

        Returns:
            bool: True if environment is PRODUCTION, False otherwise.
        """
        return self.environment == Environment.PRODUCTION


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are loaded only once per process.

    Returns:
        Settings: Cached settings instance.
    """
    return Settings()


# Global settings instance (singleton pattern)
settings = get_settings()
