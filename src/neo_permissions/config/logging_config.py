"""Centralized logging configuration for neo-permissions.

Provides consistent, configurable logging with environment-based control
over verbosity and format. Driven by EngineSettings.
"""

import logging
import logging.config
from typing import Any, Dict, Optional

from .settings import EngineSettings, LogFormat, LogVerbosity, get_settings


PACKAGE_LOGGER = "neo_permissions"


def get_log_level_from_verbosity(verbosity: LogVerbosity) -> str:
    """Map verbosity mode to log level."""
    verbosity_map = {
        LogVerbosity.QUIET: "ERROR",
        LogVerbosity.NORMAL: "WARNING",
        LogVerbosity.VERBOSE: "INFO",
        LogVerbosity.DEBUG: "DEBUG",
    }
    return verbosity_map.get(verbosity, "WARNING")


class LoggingConfig:
    """Centralized logging configuration manager."""
    
    # Module whose command log lines can be raised to INFO independently
    AGGREGATE_MODULE = "neo_permissions.platform.permissions.core.aggregates"
    
    FORMATS = {
        LogFormat.JSON: '{"time":"%(asctime)s","level":"%(levelname)s","module":"%(name)s","message":"%(message)s"}',
        LogFormat.DETAILED: "%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s",
        LogFormat.SIMPLE: "%(asctime)s - %(levelname)s - %(message)s",
    }
    
    @classmethod
    def build(cls, settings: Optional[EngineSettings] = None) -> Dict[str, Any]:
        """Build a dictConfig mapping for the package loggers."""
        settings = settings or get_settings()
        effective_log_level = get_log_level_from_verbosity(settings.log_verbosity)
        
        logging_config: Dict[str, Any] = {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "default": {
                    "format": cls.FORMATS[settings.log_format],
                    "datefmt": "%Y-%m-%d %H:%M:%S",
                },
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "level": "DEBUG",
                    "formatter": "default",
                    "stream": "ext://sys.stdout",
                },
            },
            "loggers": {
                PACKAGE_LOGGER: {
                    "level": effective_log_level,
                    "handlers": ["console"],
                    "propagate": True,
                },
            },
        }
        
        if settings.log_aggregate_commands and effective_log_level in ("ERROR", "WARNING"):
            logging_config["loggers"][cls.AGGREGATE_MODULE] = {
                "level": "INFO",
                "propagate": True,
            }
        
        return logging_config
    
    @classmethod
    def configure(cls, settings: Optional[EngineSettings] = None) -> None:
        """Configure package logging from settings."""
        config = cls.build(settings)
        logging.config.dictConfig(config)
        
        logger = logging.getLogger(__name__)
        logger.debug(
            f"Logging configured: level={config['loggers'][PACKAGE_LOGGER]['level']}, "
            f"format={(settings or get_settings()).log_format.value}"
        )
    
    @classmethod
    def set_module_level(cls, module_name: str, level: str) -> None:
        """Set log level for a specific module."""
        logging.getLogger(module_name).setLevel(getattr(logging, level.upper()))


def setup_logging(settings: Optional[EngineSettings] = None) -> None:
    """Setup logging configuration from settings.
    
    Called once when the package is imported unless
    NEO_PERMISSIONS_CONFIGURE_LOGGING_ON_IMPORT is false.
    """
    LoggingConfig.configure(settings)
