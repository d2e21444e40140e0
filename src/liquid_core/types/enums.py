"""Shared enumerations for liquid-core."""

from enum import Enum


class LogLevel(str, Enum):
    """Log verbosity level."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARN = "WARN"
    ERROR = "ERROR"


class LogFormat(str, Enum):
    """Log output format."""

    COLORED = "colored"
    JSON = "json"


class FilterSourceKind(str, Enum):
    """How a registered filter is resolved at invocation time."""

    CALLBACK = "callback"
    STATIC = "static"
    FUNCTION = "function"
    INSTANCE = "instance"
