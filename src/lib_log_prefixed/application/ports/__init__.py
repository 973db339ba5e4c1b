"""Protocols describing the collaborators the formatter depends on."""

from __future__ import annotations

from .styler import StyleFunction, StylerPort
from .terminal import MonotonicClockPort, TerminalProbePort

__all__ = [
    "MonotonicClockPort",
    "StyleFunction",
    "StylerPort",
    "TerminalProbePort",
]
