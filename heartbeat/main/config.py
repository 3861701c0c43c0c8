"""
Application Settings - Main Layer

Use Pydantic Settings for configuration management.
This module handles configuration settings provided using
environment variables, .env files and default values.
"""

from typing import List, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from heartbeat.shared import (
    DEFAULT_API_KEY_HEADER_KEY,
    DEFAULT_HEARTBEAT_ROUTE,
    EnumEnvironment,
    EnumLogLevel,
)
from heartbeat.shared.env import load_secret_file_variables


class HeartbeatSettings(BaseSettings):
    """Heartbeat endpoint and built-in monitor settings."""

    api_key: str = Field(
        default="",
        description="Shared secret expected in the API key header; empty disables it",
    )
    api_key_header_key: str = Field(
        default=DEFAULT_API_KEY_HEADER_KEY,
        description="Name of the header carrying the caller's API key",
    )
    route: str = Field(
        default=DEFAULT_HEARTBEAT_ROUTE,
        description="Path answered by the heartbeat middleware",
    )
    parallel: bool = Field(
        default=True, description="Run the built-in monitor probes concurrently"
    )
    http_checks: List[str] = Field(
        default_factory=list,
        description="URLs probed with GET by the built-in monitor",
    )
    http_base_url: str = Field(
        default="", description="Base URL for relative entries of http_checks"
    )
    http_timeout: float = Field(
        default=5.0, gt=0, description="Timeout in seconds for each HTTP probe"
    )

    model_config = SettingsConfigDict(
        env_prefix="HEARTBEAT_", case_sensitive=False, extra="ignore"
    )


class ServiceSettings(BaseSettings):
    """Service metadata and server binding."""

    title: str = Field(default="Heartbeat Service", description="Service title")
    description: str = Field(
        default="Process heartbeat endpoint running registered diagnostics probes",
        description="Service description",
    )
    version: str = Field(default="1.0.0", description="Service version")
    host: str = Field(default="0.0.0.0", description="Interface to bind the server")
    port: int = Field(default=8000, description="Port to bind the server")
    reload: bool = Field(
        default=False, description="Enable auto-reload for development"
    )

    model_config = SettingsConfigDict(
        env_prefix="SERVICE_", case_sensitive=False, extra="ignore"
    )


class LoggingSettings(BaseSettings):
    """Logging configuration settings."""

    level: EnumLogLevel = Field(default=EnumLogLevel.INFO, description="Logging level")
    file_path: Optional[str] = Field(
        default=None, description="Log file path (if None, logs to console)"
    )

    model_config = SettingsConfigDict(
        env_prefix="LOG_", case_sensitive=False, extra="ignore"
    )


class AppSettings(BaseSettings):
    """Main application settings, aggregating all sub-settings."""

    environment: EnumEnvironment = Field(
        default=EnumEnvironment.DEVELOPMENT,
        description="Application environment",
    )

    heartbeat: HeartbeatSettings = Field(default_factory=HeartbeatSettings)
    service: ServiceSettings = Field(default_factory=ServiceSettings)
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

    Secret files (``HEARTBEAT_API_KEY_FILE`` and friends) are resolved before
    the environment is read. Used to be mocked in tests.
    """
    load_secret_file_variables()
    return AppSettings()
