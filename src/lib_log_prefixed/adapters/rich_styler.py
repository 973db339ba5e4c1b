"""Rich-powered styler implementing :class:`StylerPort`.

Purpose
-------
Turn style names into ANSI-decorating functions with Rich so colour schemes
accept every Rich style string (``"bold red"``, ``"grey42"``, ``"#ff8800"``).

Contents
--------
* :func:`translate_legacy_style` - rewrite ``fg+attrs:bg`` notation (for example
  ``"black+h"``) into Rich syntax.
* :class:`RichStyler` - callable adapter used by the default process state.

System Role
-----------
Outer adapter; the compiler only sees the :class:`StylerPort` protocol.
Unknown style names resolve to the identity function and are reported at
``DEBUG`` level.
"""

from __future__ import annotations

import logging
import re
from typing import Literal

from rich.color import ColorSystem
from rich.errors import StyleSyntaxError
from rich.style import Style

from lib_log_prefixed.application.ports.styler import StyleFunction, StylerPort

logger = logging.getLogger(__name__)

_LEGACY_PATTERN = re.compile(r"^(?P<fg>[a-z0-9_#]*)(?:\+(?P<attrs>[bBdisuh]+))?(?::(?P<bg>[a-z0-9_#]+)(?P<bg_bright>\+h)?)?$")

_LEGACY_ATTRIBUTES = {
    "b": "bold",
    "B": "blink",
    "d": "dim",
    "i": "reverse",
    "s": "strike",
    "u": "underline",
}

_COLOR_SYSTEMS: dict[str, ColorSystem] = {
    "standard": ColorSystem.STANDARD,
    "256": ColorSystem.EIGHT_BIT,
    "truecolor": ColorSystem.TRUECOLOR,
}


def _brighten(color: str) -> str:
    if not color or color.startswith(("bright_", "#")):
        return color
    return f"bright_{color}"


def translate_legacy_style(name: str) -> str:
    """Return ``name`` rewritten from ``fg+attrs:bg`` notation into Rich syntax.

    Names without ``+`` or ``:`` are returned unchanged.

    Examples
    --------
    >>> translate_legacy_style("black+h")
    'bright_black'
    >>> translate_legacy_style("red+bu:white")
    'bold underline red on white'
    >>> translate_legacy_style("bold cyan")
    'bold cyan'
    """

    if "+" not in name and ":" not in name:
        return name
    match = _LEGACY_PATTERN.match(name.strip())
    if match is None:
        return name
    attrs = match.group("attrs") or ""
    foreground = match.group("fg") or ""
    if "h" in attrs:
        foreground = _brighten(foreground)
    background = match.group("bg") or ""
    if match.group("bg_bright"):
        background = _brighten(background)
    parts = [_LEGACY_ATTRIBUTES[flag] for flag in attrs if flag in _LEGACY_ATTRIBUTES]
    if foreground:
        parts.append(foreground)
    if background:
        parts.extend(["on", background])
    return " ".join(parts)


def _identity(text: str) -> str:
    return text


class RichStyler(StylerPort):
    """Resolve style names to functions emitting ANSI sequences via Rich."""

    def __init__(self, *, color_system: Literal["standard", "256", "truecolor"] = "standard") -> None:
        try:
            self._color_system = _COLOR_SYSTEMS[color_system]
        except KeyError as exc:
            raise ValueError(f"Unsupported colour system: {color_system!r}") from exc

    def __call__(self, style_name: str) -> StyleFunction:
        """Return a function wrapping text in the ANSI codes for ``style_name``.

        Examples
        --------
        >>> styler = RichStyler()
        >>> styler("no-such-style")("plain")
        'plain'
        >>> styler("red")("x").startswith("\\x1b[")
        True
        """

        translated = translate_legacy_style(style_name)
        try:
            style = Style.parse(translated)
        except StyleSyntaxError:
            logger.debug("Unknown style %r; falling back to plain text", style_name)
            return _identity
        if not style:
            return _identity
        color_system = self._color_system

        def render(text: str) -> str:
            return style.render(text, color_system=color_system)

        return render


__all__ = ["RichStyler", "translate_legacy_style"]
