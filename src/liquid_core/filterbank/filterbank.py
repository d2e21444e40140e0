"""Filter bank - registry and dispatcher for template filters.

Filters come from four kinds of sources:
- a callable registered under an explicit name
- a class whose static and class methods are filters
- a free function looked up by name in the function namespaces
- a provider instance whose public methods are filters

All of them are stored under the same canonical key (see names.normalize),
so "strip_html", "StripHtml" and "striphtml" address the same filter.
"""

import builtins
import importlib
import inspect
import logging
from collections.abc import Callable, Iterable, Mapping, Sequence
from types import ModuleType
from typing import Any, assert_never

from liquid_core.errors import LiquidError, create_error
from liquid_core.filters import CustomFilters, StandardFilters
from liquid_core.logging import LiquidLogger
from liquid_core.template import TemplateContext

from .names import is_filter_name, normalize, resolve_alias
from .types import ExplicitCallback, FilterSource, GlobalFunction, InstanceMethod, StaticMethod

logger = logging.getLogger(__name__)

DEFAULT_PACKS: tuple[type, ...] = (StandardFilters, CustomFilters)

FunctionNamespace = ModuleType | Mapping[str, Any]
UnresolvedHook = Callable[[str, Any], None]


def _describe(filter_: Any) -> str:
    text = repr(filter_)
    return text if len(text) <= 80 else text[:77] + "..."


def _is_provider(obj: Any) -> bool:
    """Instances of user-defined classes can provide filters; builtin values cannot."""
    return not isinstance(obj, ModuleType) and type(obj).__module__ != "builtins"


def _lookup_order(name: str, key: str, member: str) -> tuple[str, ...]:
    """Raw name first, unless it is private or a dunder, then key, then member."""
    if is_filter_name(name):
        return (name, key, member)
    return (key, member)


def _find_member(target: Any, candidates: Iterable[str]) -> Callable[..., Any] | None:
    for candidate in candidates:
        attr = getattr(target, candidate, None)
        if callable(attr):
            return attr
    return None


class Filterbank:
    """Registry of named filters and dispatcher for filter invocation.

    Registration happens during setup, through add_filter(). Rendering then
    calls invoke() once per pipeline stage. Unknown filter names are not an
    error: invoke() returns the value unchanged.

    Registration is single-writer. Call freeze() before sharing the filter
    bank between rendering threads; invoke() only reads registry state.
    """

    def __init__(
        self,
        context: TemplateContext | None = None,
        packs: Sequence[Any] = DEFAULT_PACKS,
        functions: Sequence[FunctionNamespace] | None = None,
        logger: LiquidLogger | None = None,
        on_unresolved: UnresolvedHook | None = None,
        warn_unresolved: bool = False,
    ):
        """Initialize the filter bank and register the bootstrap packs.

        Args:
            context: Shared context injected into provider instances
            packs: Filters registered in order at construction
                   (defaults to the standard and custom packs)
            functions: Namespaces searched for global functions
                       (defaults to the builtins module)
            logger: Optional logger
            on_unresolved: Called with (name, value) when invoke() finds no filter
            warn_unresolved: Log unresolved names at WARN instead of DEBUG
        """
        self._context = context if context is not None else TemplateContext()
        self._sources: dict[str, FilterSource] = {}
        self._providers: dict[type, Any] = {}
        self._functions: list[FunctionNamespace] = (
            list(functions) if functions is not None else [builtins]
        )
        self._logger = logger.filterbank() if logger else None
        self._on_unresolved = on_unresolved
        self._warn_unresolved = warn_unresolved
        self._frozen = False

        for pack in packs:
            self.add_filter(pack)

    @property
    def context(self) -> TemplateContext:
        """Context shared with provider instances."""
        return self._context

    @property
    def frozen(self) -> bool:
        """Whether registration is closed."""
        return self._frozen

    @property
    def providers(self) -> dict[type, Any]:
        """Registered provider instances keyed by class."""
        return dict(self._providers)

    def add_filter(self, filter_: Any, callback: Callable[..., Any] | None = None) -> bool:
        """Register one filter or a group of filters.

        Resolution order:
        1. filter_ is a name and callback is given: bind callback to the name
        2. filter_ is a class or a dotted path to one: register its static
           and class methods
        3. filter_ names a function in the function namespaces: register it
        4. filter_ is a named function object: register it under __name__
        5. filter_ is an object instance with public methods: register them and
           keep the instance for dispatch

        Args:
            filter_: Name, class, dotted class path, function, or instance
            callback: Callable to bind to the name given as filter_

        Returns:
            True once the filter is registered

        Raises:
            FilterRegistrationError: FILTER_INVALID_ARGUMENT if filter_ matches
                none of the above, FILTER_REGISTRY_FROZEN after freeze()
        """
        if self._frozen:
            raise self._reject(
                create_error("FILTER_REGISTRY_FROZEN", filter_name=_describe(filter_))
            )

        if callback is not None:
            if not isinstance(filter_, str) or not callable(callback):
                raise self._invalid(
                    filter_, "A callback must be registered under a string name"
                )
            self._bind(filter_, ExplicitCallback(callback))
            return True

        filter_class = self._resolve_class(filter_)
        if filter_class is not None:
            self._register_class(filter_class)
            return True

        if isinstance(filter_, str):
            member = self._find_function_name(filter_)
            if member is None:
                raise self._invalid(
                    filter_, f"'{filter_}' is neither a class path nor a known function"
                )
            self._bind(filter_, GlobalFunction(member))
            return True

        if inspect.isroutine(filter_):
            name = getattr(filter_, "__name__", "")
            if not name or name == "<lambda>":
                raise self._invalid(
                    filter_, "Anonymous functions need a name: add_filter(name, callback)"
                )
            self._bind(name, ExplicitCallback(filter_))
            return True

        if _is_provider(filter_):
            self._register_provider(filter_)
            return True

        raise self._invalid(filter_)

    def invoke(self, name: str, value: Any, args: Sequence[Any] = ()) -> Any:
        """Apply the named filter to value.

        The filter receives value first, followed by args. Unknown names
        return value unchanged. Exceptions raised by the filter propagate.

        Args:
            name: Filter name as written in the template
            value: Value being filtered
            args: Literal arguments from the template

        Returns:
            Whatever the filter returns, or value if no filter matches
        """
        name = resolve_alias(name)
        key = normalize(name)
        call_args = [value, *args]

        source = self._sources.get(key)
        if source is None:
            self._report_unresolved(name, key, value)
            return value

        handler = self._resolve_callable(source, name, key)
        if handler is None:
            self._report_unresolved(name, key, value)
            return value

        return handler(*call_args)

    def freeze(self) -> None:
        """Close registration. Later add_filter() calls raise."""
        if self._frozen:
            return
        self._frozen = True
        if self._logger:
            self._logger.frozen(len(self._sources), len(self._providers))

    def has_filter(self, name: str) -> bool:
        """Check whether a filter is registered under name (any spelling)."""
        return normalize(resolve_alias(name)) in self._sources

    def get_source(self, name: str) -> FilterSource | None:
        """Get the source a filter name resolves to, if any."""
        return self._sources.get(normalize(resolve_alias(name)))

    def list_filters(self) -> list[str]:
        """List registered canonical filter keys, sorted."""
        return sorted(self._sources)

    def _resolve_callable(
        self, source: FilterSource, name: str, key: str
    ) -> Callable[..., Any] | None:
        """Turn a filter source into a callable.

        Member lookups try the name as written first, then the canonical key,
        then the member name recorded at registration.
        """
        if isinstance(source, ExplicitCallback):
            return source.callback
        elif isinstance(source, (StaticMethod, InstanceMethod)):
            target = self._providers.get(source.owner, source.owner)
            return _find_member(target, _lookup_order(name, key, source.member))
        elif isinstance(source, GlobalFunction):
            for candidate in _lookup_order(name, key, source.member):
                function = self._lookup_function(candidate)
                if function is not None:
                    return function
            return None
        else:
            assert_never(source)

    def _bind(self, name: str, source: FilterSource) -> None:
        key = normalize(name)
        self._sources[key] = source
        if self._logger:
            owner = getattr(source, "owner", None)
            self._logger.registered(
                key, source.kind.value, owner.__qualname__ if owner else None
            )

    def _register_class(self, filter_class: type) -> None:
        count = 0
        for name in dir(filter_class):
            if not is_filter_name(name):
                continue
            attr = inspect.getattr_static(filter_class, name, None)
            if isinstance(attr, (staticmethod, classmethod)):
                self._bind(name, StaticMethod(filter_class, name))
                count += 1

        if self._logger:
            self._logger.pack_registered(filter_class.__qualname__, count)

    def _register_provider(self, provider: Any) -> None:
        owner = type(provider)
        members = []
        for name in dir(owner):
            if not is_filter_name(name):
                continue
            attr = inspect.getattr_static(owner, name, None)
            if inspect.isfunction(attr) or isinstance(attr, (staticmethod, classmethod)):
                members.append(name)
        if not members:
            raise self._invalid(provider, f"{owner.__qualname__} defines no filter methods")

        try:
            provider.context = self._context
        except AttributeError as e:
            raise self._invalid(
                provider, f"Provider {owner.__qualname__} does not accept a context attribute"
            ) from e

        replaced = owner in self._providers
        self._providers[owner] = provider

        for name in members:
            self._bind(name, InstanceMethod(owner, name))

        if self._logger:
            self._logger.provider_registered(owner.__qualname__, len(members), replaced)

    def _resolve_class(self, filter_: Any) -> type | None:
        """Return the class filter_ denotes, importing dotted paths."""
        if isinstance(filter_, type):
            return filter_
        if not isinstance(filter_, str) or "." not in filter_:
            return None

        module_path, _, attr_name = filter_.rpartition(".")
        if not attr_name or not all(module_path.split(".")):
            return None
        try:
            module = importlib.import_module(module_path)
        except ImportError as e:
            logger.debug(f"Cannot import filter module {module_path}: {e}")
            return None

        candidate = getattr(module, attr_name, None)
        return candidate if isinstance(candidate, type) else None

    def _find_function_name(self, name: str) -> str | None:
        for candidate in (name, normalize(name)):
            if self._lookup_function(candidate) is not None:
                return candidate
        return None

    def _lookup_function(self, name: str) -> Callable[..., Any] | None:
        for namespace in self._functions:
            if isinstance(namespace, Mapping):
                function = namespace.get(name)
            else:
                function = getattr(namespace, name, None)
            if function is not None and inspect.isroutine(function):
                return function
        return None

    def _report_unresolved(self, name: str, key: str, value: Any) -> None:
        if self._logger:
            self._logger.unresolved(name, key, value, warn=self._warn_unresolved)
        if self._on_unresolved:
            self._on_unresolved(name, value)

    def _invalid(self, filter_: Any, detail: str | None = None) -> LiquidError:
        context: dict[str, Any] = {"filter_name": _describe(filter_)}
        if detail:
            context["detail"] = detail
        return self._reject(create_error("FILTER_INVALID_ARGUMENT", **context))

    def _reject(self, error: LiquidError) -> LiquidError:
        if self._logger:
            self._logger.rejected(error)
        return error
