"""Configuration module for neo-validators.

Settings, message keys, defaults and logging setup.
"""

from .constants import MessageKeys, SupportedLocales, ValidationDefaults
from .settings import ValidatorSettings, get_settings
from .logging_config import (
    LogFormat,
    LoggingConfig,
    LogLevel,
    LogVerbosity,
    get_logger,
    setup_logging,
)

__all__ = [
    # Constants
    "MessageKeys",
    "SupportedLocales",
    "ValidationDefaults",

    # Settings
    "ValidatorSettings",
    "get_settings",

    # Logging
    "LogFormat",
    "LoggingConfig",
    "LogLevel",
    "LogVerbosity",
    "get_logger",
    "setup_logging",
]
