"""Liquid configuration data models."""

from dataclasses import dataclass, field

from liquid_core.types import LogFormat, LogLevel

DEFAULT_PACK_PATHS = [
    "liquid_core.filters.StandardFilters",
    "liquid_core.filters.CustomFilters",
]


@dataclass
class FiltersConfig:
    """Filter bank configuration."""

    packs: list[str] = field(default_factory=lambda: list(DEFAULT_PACK_PATHS))
    functions: list[str] = field(default_factory=lambda: ["builtins"])
    report_unresolved: bool = False
    freeze_after_setup: bool = True


@dataclass
class LoggingComponentsConfig:
    """Logging components configuration."""

    filterbank: bool = True
    config: bool = True


@dataclass
class LoggingOptionsConfig:
    """Logging options configuration."""

    show_values: bool = True
    truncate_at: int = 200


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: LogLevel = LogLevel.INFO
    format: LogFormat = LogFormat.COLORED
    components: LoggingComponentsConfig = field(default_factory=LoggingComponentsConfig)
    options: LoggingOptionsConfig = field(default_factory=LoggingOptionsConfig)


@dataclass
class LiquidConfig:
    """Root configuration."""

    filters: FiltersConfig = field(default_factory=FiltersConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
