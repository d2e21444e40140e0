"""Shared types for liquid-core.

Import from here rather than submodules:
    from liquid_core.types import LogLevel, ValidationResult
"""

from .enums import FilterSourceKind, LogFormat, LogLevel
from .validation import ValidationIssue, ValidationResult

__all__ = [
    # Enums
    "LogLevel",
    "LogFormat",
    "FilterSourceKind",
    # Validation
    "ValidationIssue",
    "ValidationResult",
]
