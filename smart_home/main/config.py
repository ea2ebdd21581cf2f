"""
Application Settings - Main Layer

Use Pydantic Settings for configuration management.
Only ambient concerns are configurable (environment and logging);
the demo devices themselves are fixed in the entry point.
"""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from smart_home.shared import EnumEnvironment, EnumLogLevel


class LoggingSettings(BaseSettings):
    """Logging configuration settings."""

    level: EnumLogLevel = Field(
        default=EnumLogLevel.WARNING, description="Logging level"
    )
    format: str = Field(
        default="%(message)s",
        description="Format wrapped around each rendered log line",
    )
    file_path: Optional[str] = Field(
        default=None, description="Log file path (if None, logs to stderr only)"
    )

    model_config = SettingsConfigDict(
        env_prefix="LOG_", case_sensitive=False, extra="ignore"
    )


class AppSettings(BaseSettings):
    """Main application settings, aggregating all sub-settings."""

    environment: EnumEnvironment = Field(
        default=EnumEnvironment.DEVELOPMENT, description="Application environment"
    )

    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_nested_delimiter="__",
        extra="ignore",
    )


def get_settings() -> AppSettings:
    """
    Get application settings instance Factory.

    Patched in tests to provide different settings per case.
    """
    return AppSettings()
