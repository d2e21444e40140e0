"""Liquid Core - Filter registry and dispatcher for Liquid templates.

The rendering engine builds a Filterbank during setup and calls
Filterbank.invoke() once per pipeline stage while rendering.
"""

from liquid_core.errors import FilterRegistrationError, LiquidError
from liquid_core.filterbank import Filterbank, FilterbankFactory, FilterProvider
from liquid_core.template import TemplateContext

__version__ = "1.0.0"
__all__ = [
    "__version__",
    "Filterbank",
    "FilterbankFactory",
    "FilterProvider",
    "FilterRegistrationError",
    "LiquidError",
    "TemplateContext",
]
