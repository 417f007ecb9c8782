"""
Engine settings for the neo-permissions policy engine.

Values are read from environment variables prefixed with ``NEO_PERMISSIONS_``
(or a ``.env`` file) and cached for the lifetime of the process.
"""
from enum import Enum
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class LogVerbosity(str, Enum):
    """Log verbosity modes."""
    QUIET = "QUIET"      # Only errors and critical
    NORMAL = "NORMAL"    # Standard logging (warnings and above)
    VERBOSE = "VERBOSE"  # Info level logging
    DEBUG = "DEBUG"      # Full debug logging


class LogFormat(str, Enum):
    """Log format options."""
    SIMPLE = "simple"
    DETAILED = "detailed"
    JSON = "json"


class EngineSettings(BaseSettings):
    """Runtime settings for the permission engine."""
    
    model_config = SettingsConfigDict(
        env_prefix="NEO_PERMISSIONS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )
    
    # Permission policy limits
    max_conditions: int = Field(default=10, ge=1, le=100, description="Maximum conditions per permission")
    default_actor: str = Field(default="system", min_length=1, description="Actor recorded when none is given")
    
    # Logging
    configure_logging_on_import: bool = Field(default=True, description="Apply logging config when the package is imported")
    log_verbosity: LogVerbosity = Field(default=LogVerbosity.NORMAL, description="Verbosity mode")
    log_format: LogFormat = Field(default=LogFormat.SIMPLE, description="Log line format")
    log_aggregate_commands: bool = Field(default=False, description="Log aggregate commands at INFO regardless of verbosity")
    
    @field_validator("log_verbosity", mode="before")
    @classmethod
    def normalize_verbosity(cls, v):
        """Accept verbosity names in any case."""
        return v.upper() if isinstance(v, str) else v
    
    @field_validator("log_format", mode="before")
    @classmethod
    def normalize_format(cls, v):
        """Accept format names in any case."""
        return v.lower() if isinstance(v, str) else v


@lru_cache()
def get_settings() -> EngineSettings:
    """Get cached engine settings."""
    return EngineSettings()


def reset_settings() -> None:
    """Drop cached settings so the next call re-reads the environment."""
    get_settings.cache_clear()
