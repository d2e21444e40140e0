"""
Pytest configuration and shared fixtures for liquid-core tests.
"""

import io
import sys
from pathlib import Path

import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from liquid_core.filterbank import Filterbank  # noqa: E402
from liquid_core.logging import LiquidLogger, LogConfig  # noqa: E402
from liquid_core.template import TemplateContext  # noqa: E402
from liquid_core.types import LogFormat, LogLevel  # noqa: E402


# =============================================================================
# Context Fixtures
# =============================================================================


@pytest.fixture
def context() -> TemplateContext:
    """Context with a few template variables."""
    return TemplateContext(
        variables={"site": {"name": "Example", "tags": ["a", "b"]}, "currency": "EUR"},
    )


# =============================================================================
# Filter Bank Fixtures
# =============================================================================


@pytest.fixture
def filterbank(context: TemplateContext) -> Filterbank:
    """Filter bank with the default standard and custom packs."""
    return Filterbank(context)


@pytest.fixture
def empty_filterbank(context: TemplateContext) -> Filterbank:
    """Filter bank with no bootstrap packs."""
    return Filterbank(context, packs=())


# =============================================================================
# Logging Fixtures
# =============================================================================


@pytest.fixture
def log_output() -> io.StringIO:
    """Buffer that captures logger output."""
    return io.StringIO()


@pytest.fixture
def json_logger(log_output: io.StringIO) -> LiquidLogger:
    """DEBUG-level JSON logger writing to log_output."""
    return LiquidLogger(LogConfig(level=LogLevel.DEBUG, format=LogFormat.JSON, output=log_output))


# =============================================================================
# Markers Configuration
# =============================================================================


def pytest_configure(config):
    """Configure custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "property: Property-based tests")
