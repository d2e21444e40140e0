"""Build filter banks from configuration."""

import importlib
from collections.abc import Iterable
from types import ModuleType
from typing import Any

from liquid_core.config import FiltersConfig, LiquidConfig, LoggingConfig
from liquid_core.errors import create_error
from liquid_core.logging import LiquidLogger, LogConfig
from liquid_core.template import TemplateContext

from .filterbank import Filterbank, UnresolvedHook


def build_logger(config: LoggingConfig) -> LiquidLogger:
    """Create a LiquidLogger from the logging section of the config."""
    return LiquidLogger(
        LogConfig(
            level=config.level,
            format=config.format,
            show_values=config.options.show_values,
            truncate_at=config.options.truncate_at,
            components={
                "filterbank": config.components.filterbank,
                "config": config.components.config,
            },
        )
    )


class FilterbankFactory:
    """Create Filterbank instances from FiltersConfig.

    Packs and function namespaces are imported once, when the factory is
    created, so every filter bank it builds registers the same classes.
    """

    def __init__(
        self,
        config: FiltersConfig | None = None,
        logger: LiquidLogger | None = None,
        on_unresolved: UnresolvedHook | None = None,
    ):
        """Initialize filter bank factory.

        Args:
            config: Filters configuration (defaults to FiltersConfig())
            logger: Optional logger passed to every filter bank
            on_unresolved: Optional unresolved-name hook passed to every filter bank

        Raises:
            LiquidError(CONFIG_INVALID): If a pack or function module cannot be imported
        """
        self._config = config or FiltersConfig()
        self._logger = logger
        self._on_unresolved = on_unresolved
        self._packs = [self._import_pack(path) for path in self._config.packs]
        self._functions = [self._import_module(name) for name in self._config.functions]

    @classmethod
    def from_config(
        cls,
        config: LiquidConfig,
        on_unresolved: UnresolvedHook | None = None,
    ) -> "FilterbankFactory":
        """Create a factory with a logger built from the logging config."""
        return cls(config.filters, build_logger(config.logging), on_unresolved)

    @property
    def packs(self) -> list[type]:
        """Pack classes registered by every filter bank, in order."""
        return list(self._packs)

    def create(
        self,
        context: TemplateContext | None = None,
        extra_filters: Iterable[Any] = (),
    ) -> Filterbank:
        """Create a filter bank.

        Args:
            context: Shared context for provider instances
            extra_filters: Classes, instances or function names registered
                           after the configured packs

        Returns:
            New Filterbank, frozen if freeze_after_setup is set
        """
        filterbank = Filterbank(
            context,
            packs=self._packs,
            functions=self._functions,
            logger=self._logger,
            on_unresolved=self._on_unresolved,
            warn_unresolved=self._config.report_unresolved,
        )

        for filter_ in extra_filters:
            filterbank.add_filter(filter_)

        if self._config.freeze_after_setup:
            filterbank.freeze()

        return filterbank

    def _import_pack(self, path: str) -> type:
        module_path, _, class_name = path.rpartition(".")
        if not module_path:
            raise create_error(
                "CONFIG_INVALID",
                detail=f"Filter pack must be a dotted class path: {path}",
            )

        module = self._import_module(module_path)
        pack = getattr(module, class_name, None)
        if not isinstance(pack, type):
            raise create_error(
                "CONFIG_INVALID",
                detail=f"Filter pack {path} is not a class",
            )
        return pack

    def _import_module(self, name: str) -> ModuleType:
        try:
            return importlib.import_module(name)
        except ImportError as e:
            raise create_error(
                "CONFIG_INVALID",
                detail=f"Cannot import module {name}: {e}",
            ) from e
