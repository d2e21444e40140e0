"""Filter source descriptors.

A FilterSource records how a canonical filter key is turned into a callable
when the filter is invoked. The union is closed: Filterbank.invoke matches
every variant explicitly.
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from liquid_core.types import FilterSourceKind


@dataclass(frozen=True)
class ExplicitCallback:
    """Callable bound to a name at registration time."""

    callback: Callable[..., Any]

    kind = FilterSourceKind.CALLBACK


@dataclass(frozen=True)
class StaticMethod:
    """Static or class method called on the owning class."""

    owner: type
    member: str  # Member name as declared on owner

    kind = FilterSourceKind.STATIC


@dataclass(frozen=True)
class GlobalFunction:
    """Free function looked up by name in the filter bank's function namespaces."""

    member: str  # Name the function was found under at registration

    kind = FilterSourceKind.FUNCTION


@dataclass(frozen=True)
class InstanceMethod:
    """Method called on the registered provider instance of owner."""

    owner: type
    member: str

    kind = FilterSourceKind.INSTANCE


FilterSource = ExplicitCallback | StaticMethod | GlobalFunction | InstanceMethod
