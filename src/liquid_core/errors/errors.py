"""Liquid error types and error templates."""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from enum import Enum
from typing import Any


class ErrorCategory(str, Enum):
    """Error source categories."""

    FILTER = "FILTER"
    CONFIG = "CONFIG"
    SYSTEM = "SYSTEM"


@dataclass
class LiquidError(Exception):
    """Structured error with context. Base exception for all liquid-core errors."""

    # Identity
    code: str  # e.g., "FILTER_INVALID_ARGUMENT"
    category: ErrorCategory

    # Messages
    message: str  # Human-readable summary
    detail: str | None = None  # Extended explanation
    suggestion: str | None = None  # Actionable fix

    # Context
    filter_name: str | None = None  # Which filter was involved

    cause: "LiquidError | None" = None

    # Metadata
    timestamp: datetime = field(default_factory=lambda: datetime.now(UTC))

    def __post_init__(self) -> None:
        """Set Exception message."""
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Serialize for logs and diagnostics.

        Returns:
            Dictionary representation of the error
        """
        return {
            "code": self.code,
            "category": self.category.value,
            "message": self.message,
            "detail": self.detail,
            "suggestion": self.suggestion,
            "filter_name": self.filter_name,
            "timestamp": self.timestamp.isoformat(),
            "cause": self.cause.to_dict() if self.cause else None,
        }

    def with_context(self, filter_name: str | None = None) -> "LiquidError":
        """Return copy with additional context.

        Args:
            filter_name: Optional filter name

        Returns:
            New error of the same class with updated context
        """
        return type(self)(
            code=self.code,
            category=self.category,
            message=self.message,
            detail=self.detail,
            suggestion=self.suggestion,
            filter_name=filter_name or self.filter_name,
            cause=self.cause,
            timestamp=self.timestamp,
        )


@dataclass
class FilterRegistrationError(LiquidError):
    """Raised by Filterbank.add_filter when a filter cannot be registered."""


@dataclass
class ErrorTemplate:
    """Template for creating errors."""

    code: str
    category: ErrorCategory
    message_template: str  # "Cannot register filter {filter_name}"
    detail_template: str | None = None
    suggestion_template: str | None = None
    error_class: type[LiquidError] = LiquidError
