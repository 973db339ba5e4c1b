"""Terminal detection backed by Rich's console capability checks."""

from __future__ import annotations

from typing import IO

from rich.console import Console


def rich_terminal_probe(stream: IO[str]) -> bool:
    """Return ``True`` when Rich considers ``stream`` an interactive terminal.

    Rich honours ``FORCE_COLOR`` and ``TTY_COMPATIBLE`` on top of ``isatty()``
    and reports ``False`` for closed or detached streams.
    """

    return Console(file=stream).is_terminal


__all__ = ["rich_terminal_probe"]
