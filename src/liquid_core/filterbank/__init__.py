"""Filter registry and invocation dispatcher."""

from .factory import FilterbankFactory, build_logger
from .filterbank import DEFAULT_PACKS, Filterbank
from .names import RESERVED_ALIASES, SEPARATORS, is_filter_name, normalize, resolve_alias
from .provider import FilterProvider
from .types import ExplicitCallback, FilterSource, GlobalFunction, InstanceMethod, StaticMethod

__all__ = [
    "Filterbank",
    "FilterbankFactory",
    "FilterProvider",
    "DEFAULT_PACKS",
    "build_logger",
    # Sources
    "FilterSource",
    "ExplicitCallback",
    "StaticMethod",
    "GlobalFunction",
    "InstanceMethod",
    # Names
    "normalize",
    "resolve_alias",
    "is_filter_name",
    "RESERVED_ALIASES",
    "SEPARATORS",
]
