"""Bundled filter packs."""

from .custom import CustomFilters
from .standard import StandardFilters

__all__ = ["StandardFilters", "CustomFilters"]
