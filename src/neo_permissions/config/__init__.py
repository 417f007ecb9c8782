"""Configuration module for neo-permissions."""

from .settings import (
    EngineSettings,
    LogVerbosity,
    LogFormat,
    get_settings,
    reset_settings,
)
from .logging_config import (
    LoggingConfig,
    setup_logging,
    get_log_level_from_verbosity,
)

__all__ = [
    "EngineSettings",
    "LogVerbosity",
    "LogFormat",
    "get_settings",
    "reset_settings",
    "LoggingConfig",
    "setup_logging",
    "get_log_level_from_verbosity",
]
