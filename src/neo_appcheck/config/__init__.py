"""Configuration module for neo-appcheck.

Fixed token constants, environment-driven settings and logging setup.
"""

from .constants import TokenConstants, ErrorPrefixes, ErrorMessages, Headers
from .settings import AppCheckSettings, get_settings
from .logging_config import (
    setup_logging,
    get_logger,
    LogVerbosity,
    LogFormat,
    LoggingConfig,
)

__all__ = [
    # Constants
    "TokenConstants",
    "ErrorPrefixes",
    "ErrorMessages",
    "Headers",

    # Settings
    "AppCheckSettings",
    "get_settings",

    # Logging configuration
    "setup_logging",
    "get_logger",
    "LogVerbosity",
    "LogFormat",
    "LoggingConfig",
]
