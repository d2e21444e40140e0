"""Standard Liquid filters."""

import html
import math
import re
from datetime import UTC, date, datetime
from typing import Any
from urllib.parse import quote_plus, unquote_plus

_HTML_TAG_PATTERN = re.compile(r"<script.*?</script>|<style.*?</style>|<!--.*?-->|<.*?>", re.S)
_ESCAPED_ENTITY_PATTERN = re.compile(r"&(?:[a-zA-Z]+|#\d+|#x[0-9a-fA-F]+);")


def _to_number(value: Any) -> int | float:
    """Coerce a filter operand to a number; unparseable values count as 0."""
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, (int, float)):
        return value
    try:
        text = str(value).strip()
        return float(text) if "." in text or "e" in text.lower() else int(text)
    except (TypeError, ValueError):
        return 0


def _to_list(value: Any) -> list[Any]:
    if value is None:
        return []
    if isinstance(value, dict):
        return [value]
    if isinstance(value, (list, tuple)):
        return list(value)
    if isinstance(value, str):
        return [value]
    try:
        return list(value)
    except TypeError:
        return [value]


def _item_property(item: Any, name: str) -> Any:
    if isinstance(item, dict):
        return item.get(name)
    return getattr(item, name, None)


class StandardFilters:
    """Built-in filters, registered statically by every filter bank.

    Every filter takes the filtered value as its first argument.
    """

    # Strings

    @staticmethod
    def downcase(value: Any) -> Any:
        return value.lower() if isinstance(value, str) else value

    @staticmethod
    def upcase(value: Any) -> Any:
        return value.upper() if isinstance(value, str) else value

    @staticmethod
    def capitalize(value: Any) -> Any:
        """Upper-case the first character, leave the rest alone."""
        if not isinstance(value, str) or not value:
            return value
        return value[0].upper() + value[1:]

    @staticmethod
    def strip(value: Any) -> Any:
        return value.strip() if isinstance(value, str) else value

    @staticmethod
    def lstrip(value: Any) -> Any:
        return value.lstrip() if isinstance(value, str) else value

    @staticmethod
    def rstrip(value: Any) -> Any:
        return value.rstrip() if isinstance(value, str) else value

    @staticmethod
    def strip_newlines(value: Any) -> Any:
        return re.sub(r"\r?\n", "", value) if isinstance(value, str) else value

    @staticmethod
    def newline_to_br(value: Any) -> Any:
        return re.sub(r"\r?\n", "<br />\n", value) if isinstance(value, str) else value

    @staticmethod
    def escape(value: Any) -> Any:
        return html.escape(value) if isinstance(value, str) else value

    @staticmethod
    def escape_once(value: Any) -> Any:
        """Escape HTML without double-escaping existing entities."""
        if not isinstance(value, str):
            return value
        parts = _ESCAPED_ENTITY_PATTERN.split(value)
        entities = _ESCAPED_ENTITY_PATTERN.findall(value)
        escaped = [html.escape(parts[0])]
        for entity, part in zip(entities, parts[1:], strict=True):
            escaped.append(entity)
            escaped.append(html.escape(part))
        return "".join(escaped)

    @staticmethod
    def strip_html(value: Any) -> Any:
        return _HTML_TAG_PATTERN.sub("", value) if isinstance(value, str) else value

    @staticmethod
    def url_encode(value: Any) -> Any:
        return quote_plus(value) if isinstance(value, str) else value

    @staticmethod
    def url_decode(value: Any) -> Any:
        return unquote_plus(value) if isinstance(value, str) else value

    @staticmethod
    def append(value: Any, suffix: Any) -> str:
        return f"{value}{suffix}"

    @staticmethod
    def prepend(value: Any, prefix: Any) -> str:
        return f"{prefix}{value}"

    @staticmethod
    def remove(value: Any, search: Any) -> Any:
        return value.replace(str(search), "") if isinstance(value, str) else value

    @staticmethod
    def remove_first(value: Any, search: Any) -> Any:
        return value.replace(str(search), "", 1) if isinstance(value, str) else value

    @staticmethod
    def replace(value: Any, search: Any, replacement: Any = "") -> Any:
        if not isinstance(value, str):
            return value
        return value.replace(str(search), str(replacement))

    @staticmethod
    def replace_first(value: Any, search: Any, replacement: Any = "") -> Any:
        if not isinstance(value, str):
            return value
        return value.replace(str(search), str(replacement), 1)

    @staticmethod
    def truncate(value: Any, characters: int = 100, ending: str = "...") -> Any:
        """Cut a string to the given number of characters and add ending.

        Strings that already fit are returned unchanged.
        """
        if not isinstance(value, str):
            return value
        characters = int(characters)
        if len(value) <= characters:
            return value
        return value[:characters] + ending

    @staticmethod
    def truncatewords(value: Any, words: int = 3, ending: str = "...") -> Any:
        if not isinstance(value, str):
            return value
        parts = value.split()
        words = max(int(words), 1)
        if len(parts) <= words:
            return value
        return " ".join(parts[:words]) + ending

    @staticmethod
    def split(value: Any, separator: str = " ") -> Any:
        if not isinstance(value, str):
            return value
        if separator == "":
            return list(value)
        return value.split(separator)

    @staticmethod
    def slice(value: Any, offset: int, length: int = 1) -> Any:
        """Take length items (or characters) starting at offset.

        Negative offsets count from the end.
        """
        if not isinstance(value, (str, list, tuple)):
            return value
        offset = int(offset)
        length = int(length)
        if offset < 0:
            offset = max(offset + len(value), 0)
        return value[offset : offset + length]

    # Sequences

    @staticmethod
    def size(value: Any) -> int:
        try:
            return len(value)
        except TypeError:
            return 0

    @staticmethod
    def first(value: Any) -> Any:
        items = _to_list(value) if not isinstance(value, str) else list(value)
        return items[0] if items else None

    @staticmethod
    def last(value: Any) -> Any:
        items = _to_list(value) if not isinstance(value, str) else list(value)
        return items[-1] if items else None

    @staticmethod
    def join(value: Any, glue: str = " ") -> Any:
        if isinstance(value, str):
            return value
        return str(glue).join(str(item) for item in _to_list(value))

    @staticmethod
    def reverse(value: Any) -> Any:
        if isinstance(value, str):
            return value[::-1]
        return list(reversed(_to_list(value)))

    @staticmethod
    def sort(value: Any, property_name: str | None = None) -> list[Any]:
        items = _to_list(value)
        if property_name is None:
            return sorted(items)
        return sorted(items, key=lambda item: _item_property(item, property_name))

    @staticmethod
    def uniq(value: Any) -> list[Any]:
        """Drop duplicates, keeping first occurrences in order."""
        result: list[Any] = []
        for item in _to_list(value):
            if item not in result:
                result.append(item)
        return result

    @staticmethod
    def compact(value: Any) -> list[Any]:
        return [item for item in _to_list(value) if item is not None]

    @staticmethod
    def map(value: Any, property_name: str) -> list[Any]:
        return [_item_property(item, property_name) for item in _to_list(value)]

    # Arithmetic

    @staticmethod
    def plus(value: Any, operand: Any) -> int | float:
        return _to_number(value) + _to_number(operand)

    @staticmethod
    def minus(value: Any, operand: Any) -> int | float:
        return _to_number(value) - _to_number(operand)

    @staticmethod
    def times(value: Any, operand: Any) -> int | float:
        return _to_number(value) * _to_number(operand)

    @staticmethod
    def divided_by(value: Any, operand: Any) -> int | float:
        """Divide, flooring when both operands are integers.

        Raises:
            ZeroDivisionError: If operand is zero
        """
        dividend = _to_number(value)
        divisor = _to_number(operand)
        if isinstance(dividend, int) and isinstance(divisor, int):
            return dividend // divisor
        return dividend / divisor

    @staticmethod
    def modulo(value: Any, operand: Any) -> int | float:
        return _to_number(value) % _to_number(operand)

    @staticmethod
    def round(value: Any, digits: int = 0) -> int | float:
        digits = int(digits)
        rounded = round(float(_to_number(value)), digits)
        return int(rounded) if digits == 0 else rounded

    @staticmethod
    def ceil(value: Any) -> int:
        return math.ceil(_to_number(value))

    @staticmethod
    def floor(value: Any) -> int:
        return math.floor(_to_number(value))

    @staticmethod
    def abs(value: Any) -> int | float:
        return abs(_to_number(value))

    # Misc

    @staticmethod
    def date(value: Any, fmt: str | None = None) -> Any:
        """Format a date with strftime.

        Accepts datetime and date objects, Unix timestamps, ISO 8601 strings
        and the words "now" and "today". Anything else is returned unchanged.
        """
        if isinstance(value, datetime):
            moment = value
        elif isinstance(value, date):
            moment = datetime(value.year, value.month, value.day)
        elif isinstance(value, (int, float)) and not isinstance(value, bool):
            moment = datetime.fromtimestamp(value, UTC)
        elif isinstance(value, str):
            if value.lower() in ("now", "today"):
                moment = datetime.now(UTC)
            elif value.strip().isdigit():
                moment = datetime.fromtimestamp(int(value), UTC)
            else:
                try:
                    moment = datetime.fromisoformat(value)
                except ValueError:
                    return value
        else:
            return value

        if not fmt:
            return moment.isoformat()
        return moment.strftime(fmt)

    @staticmethod
    def raw(value: Any) -> Any:
        return value

    @staticmethod
    def _default(value: Any, default_value: Any = "") -> Any:
        """Return default_value when value is None, False, or empty.

        Reached through the "default" filter name.
        """
        if value is None or value is False:
            return default_value
        if isinstance(value, (str, list, tuple, dict)) and len(value) == 0:
            return default_value
        return value
