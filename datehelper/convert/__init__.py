"""Timestamp conversion.

This module provides:
    - Converter: parse and format timestamps under catalog layouts
    - ParseResult: timestamp plus the layout that matched
    - Epoch helpers: aware datetime <-> epoch milliseconds

Examples:
    >>> from datehelper.convert import Converter
    >>> from datehelper.layouts import Layout
    >>> Converter().parse_any("2024-Apr-14").layout
    <Layout.D_YYYYMMDD_N: 'yyyy-MMM-dd'>
"""

from __future__ import annotations

from datehelper.convert.converter import PARSE_FAILED, Converter, ParseResult
from datehelper.convert.epoch import (
    UNIX_EPOCH,
    from_epoch_millis,
    localize,
    to_epoch_millis,
)

__all__ = [
    # Converter
    "Converter",
    "ParseResult",
    "PARSE_FAILED",
    # Epoch
    "UNIX_EPOCH",
    "to_epoch_millis",
    "from_epoch_millis",
    "localize",
]
