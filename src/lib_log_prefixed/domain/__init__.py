"""Domain entities and value objects used by the prefixed text formatter."""

from __future__ import annotations

from .color_scheme import DEFAULT_COLOR_SCHEME, ROLES, ColorScheme, CompiledColorScheme
from .entry import FailureValue, FieldValue, LogEntry, OtherValue, TextValue, classify_value, stringify
from .fields import extract_prefix, needs_quoting, prefix_field_clashes, quote_text
from .levels import LogLevel

__all__ = [
    "ColorScheme",
    "CompiledColorScheme",
    "DEFAULT_COLOR_SCHEME",
    "FailureValue",
    "FieldValue",
    "LogEntry",
    "LogLevel",
    "OtherValue",
    "ROLES",
    "TextValue",
    "classify_value",
    "extract_prefix",
    "needs_quoting",
    "prefix_field_clashes",
    "quote_text",
    "stringify",
]
