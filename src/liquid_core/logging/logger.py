"""Liquid logger - Component-scoped colored logging for filter setup and dispatch."""

import json
import sys
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any, TextIO

from liquid_core.logging.colors import (
    CYAN,
    GREEN,
    LIGHT_BLUE,
    MAGENTA,
    RED,
    RESET,
    YELLOW,
)
from liquid_core.types import LogFormat, LogLevel


@dataclass
class LogConfig:
    """Logger configuration."""

    level: LogLevel = LogLevel.INFO
    format: LogFormat = LogFormat.COLORED
    show_values: bool = True
    truncate_at: int = 200
    components: dict[str, bool] = field(default_factory=dict)
    output: TextIO | None = None  # None = sys.stdout at write time

    def __post_init__(self) -> None:
        """Initialize default components if not provided."""
        if not self.components:
            self.components = {
                "filterbank": True,
                "config": True,
            }


class LiquidLogger:
    """Main logger facade. Creates component-specific loggers."""

    def __init__(self, config: LogConfig | None = None):
        """Initialize logger with configuration.

        Args:
            config: Logger configuration (defaults to LogConfig())
        """
        self.config = config or LogConfig()
        self._level_order = {
            LogLevel.DEBUG: 0,
            LogLevel.INFO: 1,
            LogLevel.WARN: 2,
            LogLevel.ERROR: 3,
        }

    def filterbank(self) -> "FilterbankLogger":
        """Get a logger for filter registration and dispatch events."""
        return FilterbankLogger(self)

    def configure(self, config: LogConfig) -> None:
        """Update configuration (for hot-reload).

        Args:
            config: New logger configuration
        """
        self.config = config

    def _should_log(self, level: LogLevel) -> bool:
        return self._level_order.get(level, 0) >= self._level_order.get(self.config.level, 1)

    def _log(
        self,
        level: LogLevel,
        component: str,
        message: str,
        context: dict[str, Any] | None = None,
    ) -> None:
        """Internal logging method.

        Args:
            level: Log level
            component: Component name (filterbank, config)
            message: Log message
            context: Additional context data
        """
        level = LogLevel(level)
        if not self._should_log(level):
            return

        if not self.config.components.get(component, True):
            return

        if self.config.format == LogFormat.JSON:
            self._log_json(level, component, message, context)
        else:
            self._log_colored(level, component, message, context)

    def _log_json(
        self,
        level: LogLevel,
        component: str,
        message: str,
        context: dict[str, Any] | None = None,
    ) -> None:
        log_entry = {
            "timestamp": datetime.now(UTC).isoformat().replace("+00:00", "Z"),
            "level": level.value,
            "component": component,
            "message": message,
        }
        if context:
            log_entry.update(context)

        print(json.dumps(log_entry, default=str), file=self.config.output or sys.stdout)

    def _log_colored(
        self,
        level: LogLevel,
        component: str,
        message: str,
        context: dict[str, Any] | None = None,
    ) -> None:
        level_colors = {
            LogLevel.DEBUG: LIGHT_BLUE,
            LogLevel.INFO: CYAN,
            LogLevel.WARN: YELLOW,
            LogLevel.ERROR: RED,
        }

        color = level_colors.get(level, RESET)
        component_color = {
            "filterbank": GREEN,
            "config": MAGENTA,
        }.get(component, RESET)

        # Format: [COMPONENT] message
        output = f"{component_color}[{component.upper()}]{RESET} {color}{message}{RESET}"

        if context and self.config.show_values:
            context_str = str(context)
            if len(context_str) > self.config.truncate_at:
                context_str = context_str[: self.config.truncate_at] + "..."
            output += f" {LIGHT_BLUE}{context_str}{RESET}"

        print(output, file=self.config.output or sys.stdout)

    def _preview(self, value: Any) -> str:
        text = repr(value)
        if len(text) > self.config.truncate_at:
            text = text[: self.config.truncate_at] + "..."
        return text


class FilterbankLogger:
    """Logger for filter registration and dispatch events."""

    def __init__(self, parent: LiquidLogger):
        """Initialize filter bank logger.

        Args:
            parent: Parent LiquidLogger instance
        """
        self.parent = parent

    def registered(self, key: str, kind: str, owner: str | None = None) -> None:
        """Log a single filter binding.

        Args:
            key: Canonical filter key
            kind: Filter source kind (callback, static, function, instance)
            owner: Qualified name of the owning class, if any
        """
        context: dict[str, Any] = {"event": "filter_registered", "key": key, "kind": kind}
        if owner:
            context["owner"] = owner

        message = f"Filter '{key}' registered ({kind})"
        self.parent._log(LogLevel.DEBUG, "filterbank", message, context)

    def provider_registered(self, owner: str, filter_count: int, replaced: bool) -> None:
        """Log a provider instance registration.

        Args:
            owner: Qualified name of the provider class
            filter_count: Number of filters the provider exposes
            replaced: Whether an earlier instance of the same class was replaced
        """
        context = {
            "event": "provider_registered",
            "owner": owner,
            "filter_count": filter_count,
            "replaced": replaced,
        }

        message = f"Provider '{owner}' registered with {filter_count} filters"
        if replaced:
            message += " (replaced previous instance)"

        self.parent._log(LogLevel.INFO, "filterbank", message, context)

    def pack_registered(self, owner: str, filter_count: int) -> None:
        """Log a class registered as a static filter pack.

        Args:
            owner: Qualified name of the class
            filter_count: Number of static filters found
        """
        context = {"event": "pack_registered", "owner": owner, "filter_count": filter_count}

        message = f"Filter pack '{owner}' registered with {filter_count} filters"
        self.parent._log(LogLevel.INFO, "filterbank", message, context)

    def rejected(self, error: Exception) -> None:
        """Log a rejected registration.

        Args:
            error: Error raised to the caller
        """
        context = {
            "event": "filter_rejected",
            "error": str(error),
            "error_type": type(error).__name__,
        }

        message = f"Filter registration rejected: {error}"
        self.parent._log(LogLevel.ERROR, "filterbank", message, context)

    def frozen(self, filter_count: int, provider_count: int) -> None:
        """Log the end of the registration phase.

        Args:
            filter_count: Number of registered filter keys
            provider_count: Number of registered provider instances
        """
        context = {
            "event": "filterbank_frozen",
            "filter_count": filter_count,
            "provider_count": provider_count,
        }

        message = f"Filter bank frozen ({filter_count} filters, {provider_count} providers) ✓"
        self.parent._log(LogLevel.INFO, "filterbank", message, context)

    def unresolved(self, name: str, key: str, value: Any, warn: bool = False) -> None:
        """Log an invocation that fell through to the pass-through policy.

        Args:
            name: Filter name as written in the template
            key: Canonical key that was looked up
            value: Value returned unchanged
            warn: Log at WARN instead of DEBUG
        """
        context: dict[str, Any] = {"event": "filter_unresolved", "name": name, "key": key}
        if self.parent.config.show_values:
            context["value"] = self.parent._preview(value)

        message = f"Unknown filter '{name}', value passed through"
        level = LogLevel.WARN if warn else LogLevel.DEBUG
        self.parent._log(level, "filterbank", message, context)
