from __future__ import annotations

from lib_log_prefixed.runtime import PROCESS_STATE, ProcessState


def test_elapsed_seconds_counts_whole_seconds_from_baseline(fake_clock, styler) -> None:
    state = ProcessState.capture(styler=styler, clock=fake_clock)
    assert state.elapsed_seconds() == 0
    fake_clock.now += 59.99
    assert state.elapsed_seconds() == 59
    fake_clock.now += 0.02
    assert state.elapsed_seconds() == 60


def test_capture_compiles_the_default_scheme_eagerly(fake_clock) -> None:
    requested: list[str] = []

    def recording_styler(name: str):
        requested.append(name)
        return lambda text: text

    state = ProcessState.capture(styler=recording_styler, clock=fake_clock)
    assert len(requested) == 8
    assert state.default_color_scheme.info("x") == "x"


def test_process_state_uses_rich_styling_by_default() -> None:
    assert PROCESS_STATE.default_color_scheme.error("x") == "\x1b[31mx\x1b[0m"
    assert PROCESS_STATE.default_color_scheme.timestamp("x") == "\x1b[90mx\x1b[0m"
    assert PROCESS_STATE.elapsed_seconds() >= 0
