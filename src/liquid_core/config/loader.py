"""Liquid configuration loader."""

import os
import re
import typing
from collections.abc import Callable
from dataclasses import fields
from enum import Enum
from pathlib import Path
from typing import Any

import yaml

from liquid_core.errors import create_error
from liquid_core.types import LogFormat, LogLevel, ValidationIssue, ValidationResult

from .models import LiquidConfig

if typing.TYPE_CHECKING:
    from liquid_core.logging import LiquidLogger


def resolve_env_vars(value: str) -> str:
    """Resolve environment variable references in string.

    Supports:
    - ${VAR} - Required, error if not set
    - ${VAR:-default} - With default value
    - ${VAR:?error message} - Required with custom error

    Args:
        value: String with potential env var references

    Returns:
        String with env vars resolved

    Raises:
        LiquidError: If required var not set
    """
    # Pattern: ${VAR}, ${VAR:-default}, ${VAR:?error}
    pattern = r"\$\{([^}:]+)(?::([?-])([^}]*))?\}"

    def replacer(match: re.Match[str]) -> str:
        var_name = match.group(1)
        operator = match.group(2)  # '-' or '?' or None
        operand = match.group(3)  # default value or error message

        env_value = os.environ.get(var_name)

        if env_value is not None:
            return env_value

        if operator == "-":
            return operand or ""
        elif operator == "?":
            error_msg = operand or f"Required environment variable {var_name} not set"
            raise create_error("CONFIG_INVALID", detail=error_msg)
        else:
            raise create_error(
                "CONFIG_INVALID",
                detail=f"Required environment variable {var_name} not set",
            )

    return re.sub(pattern, replacer, value)


def deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Deep merge two dictionaries.

    Args:
        base: Base dictionary
        override: Override dictionary

    Returns:
        Merged dictionary
    """
    result = base.copy()

    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value

    return result


def _resolve_env_vars_recursive(data: Any) -> Any:
    if isinstance(data, dict):
        return {k: _resolve_env_vars_recursive(v) for k, v in data.items()}
    elif isinstance(data, list):
        return [_resolve_env_vars_recursive(item) for item in data]
    elif isinstance(data, str):
        return resolve_env_vars(data)
    else:
        return data


class ConfigLoader:
    """Load and validate liquid-core configuration."""

    def __init__(self, logger: "LiquidLogger | None" = None):
        """Initialize config loader.

        Args:
            logger: Optional LiquidLogger instance
        """
        self._config: LiquidConfig | None = None
        self._config_path: Path | None = None
        self._logger = logger
        self._change_callbacks: list[Callable[[LiquidConfig], None]] = []

    def _log(self, level: LogLevel, message: str) -> None:
        """Log message if logger available."""
        if self._logger:
            self._logger._log(level, "config", message)

    def load(self, path: str | Path | None = None, use_defaults: bool = True) -> LiquidConfig:
        """Load configuration from file.

        Resolution order if path not specified:
        1. LIQUID_CONFIG_PATH environment variable
        2. ./liquid-config.yaml
        3. ~/.liquid/config.yaml
        4. If use_defaults=True and no file found, use default configuration

        Args:
            path: Optional path to config file
            use_defaults: If True, use default config when no file found

        Returns:
            Loaded LiquidConfig instance

        Raises:
            LiquidError: If file not found (when use_defaults=False) or invalid
        """
        if path is None:
            path = self._resolve_config_path()

        config_path = Path(path)

        if not config_path.exists():
            if use_defaults:
                self._log(LogLevel.INFO, "No config file found, using default configuration")
                return self.load_defaults()
            raise create_error(
                "CONFIG_INVALID",
                detail=f"Configuration file not found: {config_path}",
            )

        try:
            with config_path.open() as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise create_error(
                "CONFIG_INVALID",
                detail=f"Invalid YAML in config file: {e}",
            ) from e

        if not isinstance(data, dict):
            raise create_error(
                "CONFIG_INVALID",
                detail=f"Config file must contain a mapping: {config_path}",
            )

        data = _resolve_env_vars_recursive(data)

        return self.load_from_dict(data, config_path)

    def load_defaults(self) -> LiquidConfig:
        """Load default configuration without a file."""
        return self.load_from_dict({})

    def load_from_dict(
        self, data: dict[str, Any], config_path: Path | None = None
    ) -> LiquidConfig:
        """Load configuration from dictionary.

        Args:
            data: Configuration dictionary
            config_path: Optional path to config file (for tracking)

        Returns:
            Loaded LiquidConfig instance

        Raises:
            LiquidError: If configuration is invalid
        """
        validation = self.validate(data)
        if not validation.valid:
            error_messages = [f"- {issue.path}: {issue.message}" for issue in validation.errors]
            raise create_error(
                "CONFIG_INVALID",
                detail="Configuration validation failed:\n" + "\n".join(error_messages),
            )

        for warning in validation.warnings:
            self._log(LogLevel.WARN, warning.message)

        try:
            config = self._convert_field(LiquidConfig, data)
        except (TypeError, ValueError) as e:
            raise create_error(
                "CONFIG_INVALID",
                detail=f"Failed to parse configuration: {e}",
            ) from e

        self._config = config
        self._config_path = config_path

        self._log(LogLevel.INFO, "Configuration loaded successfully")

        return config

    def validate(self, data: dict[str, Any]) -> ValidationResult:
        """Validate config data without loading.

        Args:
            data: Configuration dictionary

        Returns:
            ValidationResult with errors and warnings
        """
        errors: list[ValidationIssue] = []
        warnings: list[ValidationIssue] = []

        valid_keys = {"filters", "logging"}

        for key in data:
            if key not in valid_keys:
                warnings.append(
                    ValidationIssue(
                        path=key,
                        message=f"Unknown configuration key: {key}",
                        severity="warning",
                    )
                )

        if "filters" in data:
            filters = data["filters"]
            if not isinstance(filters, dict):
                errors.append(ValidationIssue(path="filters", message="filters must be a dictionary"))
            else:
                for list_key in ("packs", "functions"):
                    if list_key not in filters:
                        continue
                    value = filters[list_key]
                    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
                        errors.append(
                            ValidationIssue(
                                path=f"filters.{list_key}",
                                message=f"{list_key} must be a list of strings",
                            )
                        )
                for flag in ("report_unresolved", "freeze_after_setup"):
                    if flag in filters and not isinstance(filters[flag], bool):
                        errors.append(
                            ValidationIssue(
                                path=f"filters.{flag}",
                                message=f"{flag} must be a boolean",
                            )
                        )

        if "logging" in data:
            logging_data = data["logging"]
            if not isinstance(logging_data, dict):
                errors.append(ValidationIssue(path="logging", message="logging must be a dictionary"))
            else:
                if "level" in logging_data and logging_data["level"] not in {
                    level.value for level in LogLevel
                }:
                    errors.append(
                        ValidationIssue(
                            path="logging.level",
                            message=f"Unknown log level: {logging_data['level']}",
                        )
                    )
                if "format" in logging_data and logging_data["format"] not in {
                    fmt.value for fmt in LogFormat
                }:
                    errors.append(
                        ValidationIssue(
                            path="logging.format",
                            message=f"Unknown log format: {logging_data['format']}",
                        )
                    )
                options = logging_data.get("options")
                if isinstance(options, dict) and "truncate_at" in options:
                    value = options["truncate_at"]
                    if not isinstance(value, int) or isinstance(value, bool) or value <= 0:
                        errors.append(
                            ValidationIssue(
                                path="logging.options.truncate_at",
                                message="truncate_at must be a positive integer",
                            )
                        )

        return ValidationResult(valid=True, errors=errors, warnings=warnings)

    def get(self) -> LiquidConfig:
        """Get current configuration.

        Raises:
            LiquidError: If configuration not loaded
        """
        if self._config is None:
            raise create_error("CONFIG_INVALID", detail="Configuration not loaded")
        return self._config

    def reload(self) -> LiquidConfig:
        """Reload configuration from file and notify registered callbacks.

        Returns:
            Reloaded LiquidConfig instance

        Raises:
            LiquidError: If no config path set or reload fails
        """
        if self._config_path is None:
            raise create_error("CONFIG_INVALID", detail="No config path set, cannot reload")

        new_config = self.load(self._config_path)

        for callback in self._change_callbacks:
            try:
                callback(new_config)
            except Exception as e:
                self._log(LogLevel.ERROR, f"Config change callback failed: {e}")

        return new_config

    def on_change(self, callback: Callable[[LiquidConfig], None]) -> None:
        """Register callback for config changes.

        Args:
            callback: Function to call when config changes
        """
        self._change_callbacks.append(callback)

    def _resolve_config_path(self) -> Path:
        env_path = os.environ.get("LIQUID_CONFIG_PATH")
        if env_path:
            return Path(env_path)

        local_path = Path("liquid-config.yaml")
        if local_path.exists():
            return local_path

        home_path = Path.home() / ".liquid" / "config.yaml"
        if home_path.exists():
            return home_path

        # Not found - use local path as default
        return local_path

    def _convert_field(self, field_type: Any, value: Any) -> Any:
        """Convert a raw config value to the declared field type.

        Args:
            field_type: Expected field type
            value: Value to convert

        Returns:
            Converted value
        """
        if value is None:
            return None

        origin = typing.get_origin(field_type)

        if origin is list:
            if not isinstance(value, list):
                return value
            args = typing.get_args(field_type)
            if args:
                return [self._convert_field(args[0], item) for item in value]
            return value

        if hasattr(field_type, "__dataclass_fields__"):
            if isinstance(value, dict):
                hints = typing.get_type_hints(field_type)
                kwargs = {}
                for f in fields(field_type):
                    if f.name in value:
                        kwargs[f.name] = self._convert_field(hints[f.name], value[f.name])
                return field_type(**kwargs)
            return value

        if isinstance(field_type, type) and issubclass(field_type, Enum):
            if isinstance(value, str):
                return field_type(value)
            return value

        return value


# Convenience singleton
_default_loader: ConfigLoader | None = None


def get_config_loader() -> ConfigLoader:
    """Get default config loader singleton."""
    global _default_loader  # noqa: PLW0603
    if _default_loader is None:
        _default_loader = ConfigLoader()
    return _default_loader


def load_config(path: str | Path | None = None) -> LiquidConfig:
    """Convenience function to load config.

    Args:
        path: Optional path to config file

    Returns:
        Loaded LiquidConfig instance
    """
    return get_config_loader().load(path)
