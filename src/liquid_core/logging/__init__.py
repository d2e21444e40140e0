"""Liquid logging - Component-scoped colored logging."""

from .colors import (
    CYAN,
    GREEN,
    LIGHT_BLUE,
    MAGENTA,
    RED,
    RESET,
    YELLOW,
)
from .logger import (
    FilterbankLogger,
    LiquidLogger,
    LogConfig,
)

__all__ = [
    # Logger classes
    "LiquidLogger",
    "FilterbankLogger",
    "LogConfig",
    # Colors
    "RESET",
    "GREEN",
    "RED",
    "YELLOW",
    "LIGHT_BLUE",
    "CYAN",
    "MAGENTA",
]
