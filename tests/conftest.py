"""Pytest configuration and fixtures for datehelper tests."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Add the project root to sys.path so datehelper can be imported
# without needing to install the package
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from datehelper.arithmetic.delta import DeltaCalculator  # noqa: E402
from datehelper.config import HelperOptions  # noqa: E402
from datehelper.convert.converter import Converter  # noqa: E402
from datehelper.helper import DateHelper  # noqa: E402
from datehelper.units.timezone import resolve_timezone  # noqa: E402

# 2025-04-16 12:00:00 in New York (EDT)
FIXED_NOW = 1744819200000


@pytest.fixture
def new_york_options() -> HelperOptions:
    """Options for America/New_York with the clock frozen at FIXED_NOW."""
    return HelperOptions(
        timezone=resolve_timezone("America/New_York"),
        clock=lambda: FIXED_NOW,
    )


@pytest.fixture
def utc_options() -> HelperOptions:
    """Options for UTC with the clock frozen at FIXED_NOW."""
    return HelperOptions(clock=lambda: FIXED_NOW)


@pytest.fixture
def converter(new_york_options: HelperOptions) -> Converter:
    return Converter(new_york_options)


@pytest.fixture
def utc_converter(utc_options: HelperOptions) -> Converter:
    return Converter(utc_options)


@pytest.fixture
def calculator(converter: Converter) -> DeltaCalculator:
    return DeltaCalculator(converter)


@pytest.fixture
def helper(new_york_options: HelperOptions) -> DateHelper:
    return DateHelper(new_york_options)
