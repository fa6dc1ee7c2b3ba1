"""Difference arithmetic between textual dates.

This module provides:
    - DeltaCalculator: days/hours/minutes between two texts under one layout
"""

from __future__ import annotations

from datehelper.arithmetic.delta import DeltaCalculator

__all__: list[str] = [
    "DeltaCalculator",
]
