"""Severity levels understood by the prefixed text formatter.

Purpose
-------
Offer a domain-specific representation of log severities covering the six
levels the formatter renders (debug through panic) together with the naming
rules used by the plain and colourised output paths.

Contents
--------
* :class:`LogLevel` enum with conversion helpers and presentation metadata.
* ``_LEVEL_TEXT`` constant mapping levels to their colourised labels.

System Role
-----------
Shared by the domain entry model, the colour scheme (to pick a role per level)
and the stdlib :mod:`logging` bridge, which maps numeric levels onto this enum.
"""

from __future__ import annotations

import logging
from enum import Enum
from functools import total_ordering


@total_ordering
class LogLevel(Enum):
    """Totally ordered severities; numeric values align with :mod:`logging`."""

    DEBUG = 10
    INFO = 20
    WARN = 30
    ERROR = 40
    FATAL = 50
    PANIC = 60

    @property
    def severity(self) -> str:
        """Return the lowercase level name written by the plain output path."""

        return _SEVERITY_NAMES[self]

    @property
    def text(self) -> str:
        """Return the upper-case label used on colourised lines.

        ``WARN`` is pinned so the label never grows to ``WARNING``.
        """

        return _LEVEL_TEXT[self]

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, LogLevel):
            return NotImplemented
        return self.value < other.value

    def to_python_level(self) -> int:
        """Return the closest :mod:`logging` constant for this level."""

        return min(self.value, logging.CRITICAL)

    @classmethod
    def from_name(cls, name: str) -> "LogLevel":
        normalized = name.strip().upper()
        normalized = _ALIASES.get(normalized, normalized)
        try:
            return cls[normalized]
        except KeyError as exc:
            raise ValueError(f"Unknown log level: {name!r}") from exc

    @classmethod
    def from_python_level(cls, level: int) -> "LogLevel":
        """Translate a stdlib logging level integer into :class:`LogLevel`.

        Custom numeric levels fall onto the nearest lower standard level;
        anything below ``DEBUG`` renders as debug and anything above
        ``CRITICAL`` as panic.
        """

        if level > logging.CRITICAL:
            return cls.PANIC
        chosen = cls.DEBUG
        for member in cls:
            if member.value <= level:
                chosen = member
        return chosen


_SEVERITY_NAMES = {
    LogLevel.DEBUG: "debug",
    LogLevel.INFO: "info",
    LogLevel.WARN: "warning",
    LogLevel.ERROR: "error",
    LogLevel.FATAL: "fatal",
    LogLevel.PANIC: "panic",
}

_LEVEL_TEXT = {
    LogLevel.DEBUG: "DEBUG",
    LogLevel.INFO: "INFO",
    LogLevel.WARN: "WARN",
    LogLevel.ERROR: "ERROR",
    LogLevel.FATAL: "FATAL",
    LogLevel.PANIC: "PANIC",
}

_ALIASES = {
    "WARNING": "WARN",
    "CRITICAL": "FATAL",
}


__all__ = ["LogLevel"]
