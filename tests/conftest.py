"""
pytest configuration and fixtures.
"""

import logging

import pytest

# Add src to path for imports
import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from httpcodex import ConversionConfig, StatusCode, known_codes


# Numbers that must never resolve to a registered code.
UNREGISTERED_VALUES = [0, 1, 99, 199, 209, 299, 305, 306, 399, 419, 499, 509, 599, 600, 999, 12345]


@pytest.fixture
def strict_config() -> ConversionConfig:
    """Configuration that rejects out-of-range input."""
    return ConversionConfig(wrap_out_of_range=False)


@pytest.fixture
def logging_config() -> ConversionConfig:
    """Configuration that logs unknown codes."""
    return ConversionConfig(log_unknown=True)


@pytest.fixture
def debug_logs(caplog: pytest.LogCaptureFixture) -> pytest.LogCaptureFixture:
    """Capture DEBUG records from the httpcodex loggers."""
    caplog.set_level(logging.DEBUG, logger="httpcodex")
    return caplog


@pytest.fixture(params=known_codes(), ids=lambda code: f"{code.value}-{code.name}")
def known_code(request) -> StatusCode:
    """Every registered status code, one at a time."""
    return request.param


@pytest.fixture(params=UNREGISTERED_VALUES)
def unregistered_value(request) -> int:
    """Numbers outside the registry."""
    return request.param
