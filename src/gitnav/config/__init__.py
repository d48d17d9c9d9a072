"""Configuration loading, schema, and defaults."""

from gitnav.config.loader import ConfigError, load_config
from gitnav.config.schema import CacheConfig, NavigatorConfig, OutputConfig

__all__ = [
    "CacheConfig",
    "ConfigError",
    "NavigatorConfig",
    "OutputConfig",
    "load_config",
]
