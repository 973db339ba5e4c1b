"""Declarative colour schemes and their compiled counterparts.

Purpose
-------
Describe which style each semantic role (one per level plus ``prefix`` and
``timestamp``) uses, and hold the styling functions obtained once those names
have been resolved.

Contents
--------
* :data:`ROLES` – the eight role names in a fixed order.
* :class:`ColorScheme` – role → style-name mapping; empty means "use default".
* :class:`CompiledColorScheme` – role → styling function.
* :data:`DEFAULT_COLOR_SCHEME` – built-in style names.

System Role
-----------
Consumed by :func:`lib_log_prefixed.application.use_cases.compile_scheme.compile_color_scheme`
and by the colourised output path of :class:`lib_log_prefixed.TextFormatter`.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, fields

from .levels import LogLevel

ROLES = ("info", "warn", "error", "fatal", "panic", "debug", "prefix", "timestamp")


def _identity(text: str) -> str:
    return text


@dataclass(slots=True, frozen=True)
class ColorScheme:
    """Style names per role.

    Examples
    --------
    >>> ColorScheme(info="bold green").info
    'bold green'
    >>> ColorScheme().warn
    ''
    """

    info: str = ""
    warn: str = ""
    error: str = ""
    fatal: str = ""
    panic: str = ""
    debug: str = ""
    prefix: str = ""
    timestamp: str = ""

    def style_for(self, role: str) -> str:
        return getattr(self, role)

    @classmethod
    def from_mapping(cls, styles: Mapping[str, str]) -> "ColorScheme":
        """Build a scheme from a ``role -> style`` mapping.

        Role names are case-insensitive and accept the stdlib spellings
        ``warning`` and ``critical``.

        Examples
        --------
        >>> ColorScheme.from_mapping({"WARNING": "magenta"}).warn
        'magenta'
        >>> ColorScheme.from_mapping({"loud": "red"})
        Traceback (most recent call last):
        ...
        ValueError: Unknown colour scheme role: 'loud'
        """

        values: dict[str, str] = {}
        for key, style in styles.items():
            role = _ROLE_ALIASES.get(key.strip().lower(), key.strip().lower())
            if role not in ROLES:
                raise ValueError(f"Unknown colour scheme role: {key!r}")
            values[role] = style.strip()
        return cls(**values)


_ROLE_ALIASES = {"warning": "warn", "critical": "fatal"}


@dataclass(slots=True, frozen=True)
class CompiledColorScheme:
    """Styling function per role. Every role always holds a callable."""

    info: Callable[[str], str] = _identity
    warn: Callable[[str], str] = _identity
    error: Callable[[str], str] = _identity
    fatal: Callable[[str], str] = _identity
    panic: Callable[[str], str] = _identity
    debug: Callable[[str], str] = _identity
    prefix: Callable[[str], str] = _identity
    timestamp: Callable[[str], str] = _identity

    def for_level(self, level: LogLevel) -> Callable[[str], str]:
        """Return the function colouring ``level``; debug covers anything unknown."""

        role = _LEVEL_ROLES.get(level, "debug")
        return getattr(self, role)

    def roles(self) -> dict[str, Callable[[str], str]]:
        return {item.name: getattr(self, item.name) for item in fields(self)}


_LEVEL_ROLES = {
    LogLevel.INFO: "info",
    LogLevel.WARN: "warn",
    LogLevel.ERROR: "error",
    LogLevel.FATAL: "fatal",
    LogLevel.PANIC: "panic",
}

DEFAULT_COLOR_SCHEME = ColorScheme(
    info="green",
    warn="yellow",
    error="red",
    fatal="red",
    panic="red",
    debug="blue",
    prefix="cyan",
    timestamp="bright_black",
)
"""Built-in style names; ``bright_black`` is the high-intensity black used for de-emphasised text."""


__all__ = [
    "CompiledColorScheme",
    "ColorScheme",
    "DEFAULT_COLOR_SCHEME",
    "ROLES",
]
