"""Public package surface of the prefixed text formatter.

``TextFormatter`` renders :class:`LogEntry` values; ``PrefixedLogFormatter``
plugs the same rendering into the stdlib :mod:`logging` package.
"""

from __future__ import annotations

from .adapters.stdlib_logging import PrefixedLogFormatter
from .config import enable_dotenv, formatter_from_env
from .domain import DEFAULT_COLOR_SCHEME, ColorScheme, CompiledColorScheme, LogEntry, LogLevel, extract_prefix
from .formatter import TextFormatter

__all__ = [
    "ColorScheme",
    "CompiledColorScheme",
    "DEFAULT_COLOR_SCHEME",
    "LogEntry",
    "LogLevel",
    "PrefixedLogFormatter",
    "TextFormatter",
    "enable_dotenv",
    "extract_prefix",
    "formatter_from_env",
]
