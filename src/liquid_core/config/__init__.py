"""Liquid configuration."""

from .loader import ConfigLoader, deep_merge, get_config_loader, load_config, resolve_env_vars
from .models import (
    DEFAULT_PACK_PATHS,
    FiltersConfig,
    LiquidConfig,
    LoggingComponentsConfig,
    LoggingConfig,
    LoggingOptionsConfig,
)

__all__ = [
    "LiquidConfig",
    "FiltersConfig",
    "LoggingConfig",
    "LoggingComponentsConfig",
    "LoggingOptionsConfig",
    "DEFAULT_PACK_PATHS",
    "ConfigLoader",
    "get_config_loader",
    "load_config",
    "resolve_env_vars",
    "deep_merge",
]
