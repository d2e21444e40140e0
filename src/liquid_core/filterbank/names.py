"""Filter name normalization."""

# Characters dropped from filter names before lookup
SEPARATORS = "_"

# Filter names rewritten before normalization. Exact, case-sensitive matches only.
RESERVED_ALIASES: dict[str, str] = {
    "default": "_default",
}

_SEPARATOR_TABLE = str.maketrans("", "", SEPARATORS)


def normalize(raw_name: str) -> str:
    """Return the canonical lookup key for a filter name.

    "Strip_HTML", "strip_html" and "striphtml" all map to "striphtml".
    """
    return raw_name.lower().translate(_SEPARATOR_TABLE)


def resolve_alias(name: str) -> str:
    """Rewrite a reserved filter name to the member name that implements it."""
    return RESERVED_ALIASES.get(name, name)


def is_filter_name(member_name: str) -> bool:
    """Check whether a class member name is exposed as a filter.

    Private names are skipped, except the targets of RESERVED_ALIASES.
    Dunder names, including the constructor, never are filters.
    """
    if member_name.startswith("__"):
        return False
    if member_name.startswith("_"):
        return member_name in RESERVED_ALIASES.values()
    return True
