"""Layout-pattern formatting and parsing.

Functions:
    compile_pattern: Split a pattern into field and literal tokens.
    format_datetime: Render a datetime under a pattern.
    parse_components: Parse text under a pattern into calendar fields.
"""

from __future__ import annotations

from datehelper.format.pattern import (
    ParsedFields,
    PatternToken,
    compile_pattern,
    format_datetime,
    parse_components,
)

__all__: list[str] = [
    "ParsedFields",
    "PatternToken",
    "compile_pattern",
    "format_datetime",
    "parse_components",
]
