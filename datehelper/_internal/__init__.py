"""Internal utilities for datehelper.

This module contains private implementation details:
    - Validation helpers
    - Constants and magic numbers
    - Calendar helpers
    - Custom decorators (@memoize)

Note: This module is not part of the public API.
"""

from __future__ import annotations

from datehelper._internal.decorators import memoize
from datehelper._internal.validation import (
    require_layout,
    validate_day,
    validate_month,
    validate_range,
    validate_year,
)

__all__: list[str] = [
    "memoize",
    "require_layout",
    "validate_day",
    "validate_month",
    "validate_range",
    "validate_year",
]
