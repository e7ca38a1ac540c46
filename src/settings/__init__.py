"""Configuration and logging for the scripting fixture."""

from settings.config import ConfigError, FixtureConfig, load_config
from settings.log import configure_logging

__all__ = [
    "ConfigError",
    "FixtureConfig",
    "configure_logging",
    "load_config",
]
