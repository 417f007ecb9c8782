"""Tests for engine settings and logging configuration."""

import logging

import pytest
from pydantic import ValidationError

from neo_permissions.config import (
    EngineSettings,
    LogFormat,
    LoggingConfig,
    LogVerbosity,
    get_log_level_from_verbosity,
    get_settings,
    reset_settings,
    setup_logging,
)
from neo_permissions.config.logging_config import PACKAGE_LOGGER


class TestEngineSettings:
    """EngineSettings defaults and environment overrides."""
    
    def test_defaults(self):
        settings = EngineSettings()
        assert settings.max_conditions == 10
        assert settings.default_actor == "system"
        assert settings.configure_logging_on_import is True
        assert settings.log_verbosity is LogVerbosity.NORMAL
        assert settings.log_format is LogFormat.SIMPLE
        assert settings.log_aggregate_commands is False
    
    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("NEO_PERMISSIONS_MAX_CONDITIONS", "3")
        monkeypatch.setenv("NEO_PERMISSIONS_LOG_VERBOSITY", "debug")
        monkeypatch.setenv("NEO_PERMISSIONS_LOG_FORMAT", "JSON")
        
        settings = EngineSettings()
        assert settings.max_conditions == 3
        assert settings.log_verbosity is LogVerbosity.DEBUG
        assert settings.log_format is LogFormat.JSON
    
    def test_invalid_limit(self, monkeypatch):
        monkeypatch.setenv("NEO_PERMISSIONS_MAX_CONDITIONS", "0")
        with pytest.raises(ValidationError):
            EngineSettings()
    
    def test_get_settings_is_cached(self, monkeypatch):
        first = get_settings()
        monkeypatch.setenv("NEO_PERMISSIONS_DEFAULT_ACTOR", "worker")
        assert get_settings() is first
        
        reset_settings()
        assert get_settings().default_actor == "worker"


class TestLoggingConfig:
    """LoggingConfig.build() and setup_logging()."""
    
    def test_verbosity_levels(self):
        assert get_log_level_from_verbosity(LogVerbosity.QUIET) == "ERROR"
        assert get_log_level_from_verbosity(LogVerbosity.NORMAL) == "WARNING"
        assert get_log_level_from_verbosity(LogVerbosity.VERBOSE) == "INFO"
        assert get_log_level_from_verbosity(LogVerbosity.DEBUG) == "DEBUG"
    
    def test_build_package_logger(self):
        config = LoggingConfig.build(EngineSettings(log_verbosity="VERBOSE", log_format="detailed"))
        
        assert config["loggers"][PACKAGE_LOGGER]["level"] == "INFO"
        assert config["formatters"]["default"]["format"] == LoggingConfig.FORMATS[LogFormat.DETAILED]
        assert LoggingConfig.AGGREGATE_MODULE not in config["loggers"]
    
    def test_aggregate_commands_raised_to_info(self):
        config = LoggingConfig.build(EngineSettings(log_aggregate_commands=True))
        assert config["loggers"][LoggingConfig.AGGREGATE_MODULE]["level"] == "INFO"
    
    def test_aggregate_override_not_needed_when_verbose(self):
        config = LoggingConfig.build(
            EngineSettings(log_verbosity="DEBUG", log_aggregate_commands=True)
        )
        assert LoggingConfig.AGGREGATE_MODULE not in config["loggers"]
    
    def test_aggregate_module_exists(self):
        """The overridden logger name is a real module path."""
        import importlib
        
        module = importlib.import_module(LoggingConfig.AGGREGATE_MODULE)
        assert hasattr(module, "PermissionAggregate")
    
    def test_setup_logging_applies_level(self):
        package_logger = logging.getLogger(PACKAGE_LOGGER)
        previous = package_logger.level
        try:
            setup_logging(EngineSettings(log_verbosity="QUIET"))
            assert package_logger.level == logging.ERROR
        finally:
            setup_logging(EngineSettings())
            package_logger.setLevel(previous)
    
    def test_set_module_level(self):
        name = "neo_permissions.platform.permissions.core.value_objects"
        module_logger = logging.getLogger(name)
        previous = module_logger.level
        try:
            LoggingConfig.set_module_level(name, "debug")
            assert module_logger.level == logging.DEBUG
        finally:
            module_logger.setLevel(previous)
