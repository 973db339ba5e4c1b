"""Process-scoped state shared by every formatter that does not override it."""

from __future__ import annotations

import time
from dataclasses import dataclass

from lib_log_prefixed.adapters.rich_styler import RichStyler
from lib_log_prefixed.application.ports.styler import StylerPort
from lib_log_prefixed.application.ports.terminal import MonotonicClockPort
from lib_log_prefixed.application.use_cases.compile_scheme import compile_color_scheme
from lib_log_prefixed.domain.color_scheme import DEFAULT_COLOR_SCHEME, CompiledColorScheme


@dataclass(slots=True, frozen=True)
class ProcessState:
    """Immutable aggregate captured once at startup.

    Attributes
    ----------
    baseline:
        Reading of ``clock`` when the state was captured; the origin of the
        relative-seconds counter shown on short timestamps.
    clock:
        Monotonic clock used for the relative-seconds counter.
    styler:
        Styling capability used when formatters compile their own schemes.
    default_color_scheme:
        Compiled :data:`DEFAULT_COLOR_SCHEME`.
    """

    baseline: float
    clock: MonotonicClockPort
    styler: StylerPort
    default_color_scheme: CompiledColorScheme

    @classmethod
    def capture(cls, *, styler: StylerPort | None = None, clock: MonotonicClockPort | None = None) -> "ProcessState":
        """Build a fresh state, compiling the default scheme eagerly."""

        resolved_styler = styler if styler is not None else RichStyler()
        resolved_clock = clock if clock is not None else time.monotonic
        return cls(
            baseline=resolved_clock(),
            clock=resolved_clock,
            styler=resolved_styler,
            default_color_scheme=compile_color_scheme(DEFAULT_COLOR_SCHEME, resolved_styler),
        )

    def elapsed_seconds(self) -> int:
        """Return whole seconds elapsed since :attr:`baseline`."""

        return int(self.clock() - self.baseline)


PROCESS_STATE = ProcessState.capture()
"""State captured when the package is first imported."""


__all__ = ["PROCESS_STATE", "ProcessState"]
