"""Ports for terminal detection and the monotonic clock."""

from __future__ import annotations

from typing import IO, Protocol, runtime_checkable


@runtime_checkable
class TerminalProbePort(Protocol):
    """Report whether ``stream`` is attached to an interactive terminal."""

    def __call__(self, stream: IO[str]) -> bool: ...


@runtime_checkable
class MonotonicClockPort(Protocol):
    """Return seconds on a clock that never goes backwards."""

    def __call__(self) -> float: ...


__all__ = ["MonotonicClockPort", "TerminalProbePort"]
