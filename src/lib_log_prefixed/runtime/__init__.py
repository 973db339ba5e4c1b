"""Process-wide runtime state for the formatter."""

from __future__ import annotations

from ._state import PROCESS_STATE, ProcessState

__all__ = ["PROCESS_STATE", "ProcessState"]
