"""Project-specific filters registered after the standard pack."""

import json
from typing import Any


class CustomFilters:
    """Filters added on top of StandardFilters.

    Registered second, so a filter defined here replaces a standard filter
    with the same canonical name.
    """

    @staticmethod
    def length(value: Any) -> int:
        """Return length of string, list, or dict.

        Raises:
            TypeError: If value doesn't support len()
        """
        return len(value)

    @staticmethod
    def json(value: Any, indent: int | None = None) -> str:
        """Serialize value to a JSON string."""
        return json.dumps(value, indent=indent, default=str)

    @staticmethod
    def keys(value: Any) -> list[Any]:
        return list(value.keys()) if isinstance(value, dict) else []
