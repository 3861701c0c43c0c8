"""
Shared module - Cross-cutting concerns / Shared Layer

This module provides the constants, enums and logging helpers used across
every layer of the heartbeat service. It must not depend on Infrastructure
or Frameworks.
"""

from .consts import (
    DEFAULT_API_KEY_HEADER_KEY,
    DEFAULT_HEARTBEAT_ROUTE,
    EnumEnvironment,
    EnumLogLevel,
)
from .logging import configure_logging, get_logger, update_logging_from_settings

__all__ = [
    "DEFAULT_API_KEY_HEADER_KEY",
    "DEFAULT_HEARTBEAT_ROUTE",
    "EnumEnvironment",
    "EnumLogLevel",
    "configure_logging",
    "get_logger",
    "update_logging_from_settings",
]
