"""Shared rendering context handed to filter providers."""

from dataclasses import dataclass, field
from typing import Any


@dataclass
class TemplateContext:
    """Ambient template state visible to filters.

    Access patterns:
    - context.get("user.name") → self.variables["user"]["name"]
    - context.get("items[0]") → self.variables["items"][0]
    - context.registers["site"] → engine-owned state not exposed to templates
    """

    variables: dict[str, Any] = field(default_factory=dict)  # Template variables
    registers: dict[str, Any] = field(default_factory=dict)  # Engine-private state
    environment: dict[str, Any] = field(default_factory=dict)  # Render-wide settings

    def get(self, path: str, default: Any = None) -> Any:
        """Resolve a dotted variable path, returning default when it is missing.

        Args:
            path: Dot-separated path, segments may carry an [index]
            default: Value returned if any segment cannot be resolved

        Returns:
            Resolved value or default
        """
        try:
            return self._resolve(path)
        except (KeyError, AttributeError, IndexError, TypeError, ValueError):
            return default

    def _resolve(self, path: str) -> Any:
        parts = path.split(".")
        current: Any = self.variables

        for part in parts:
            if "[" in part and part.endswith("]"):
                key = part[: part.index("[")]
                index = int(part[part.index("[") + 1 : -1])

                if key:
                    current = current[key] if isinstance(current, dict) else getattr(current, key)
                if not isinstance(current, (list, tuple)):
                    raise TypeError(f"Cannot index {type(current)} with integer")
                current = current[index]
            else:
                current = current[part] if isinstance(current, dict) else getattr(current, part)

        return current
