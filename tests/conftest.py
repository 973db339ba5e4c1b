from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Callable

import pytest

from lib_log_prefixed import config as log_config
from lib_log_prefixed.domain.entry import LogEntry
from lib_log_prefixed.domain.levels import LogLevel
from lib_log_prefixed.runtime import ProcessState

FIXED_TIME = datetime(2025, 9, 23, 12, 0, 5, tzinfo=timezone.utc)


class FakeClock:
    """Monotonic clock the tests move by hand."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now


def tag_styler(name: str) -> Callable[[str], str]:
    """Styler wrapping text in ``<name>...</name>`` so assertions stay readable."""

    def render(text: str) -> str:
        return f"<{name}>{text}</{name}>"

    return render


@pytest.fixture(autouse=True)
def _isolate_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep host colour and formatter settings out of the tests."""

    import os

    for name in list(os.environ):
        if name.startswith(log_config.ENV_PREFIX):
            monkeypatch.delenv(name, raising=False)
    for name in ("NO_COLOR", "FORCE_COLOR", "TTY_COMPATIBLE", "TTY_INTERACTIVE"):
        monkeypatch.delenv(name, raising=False)
    log_config._reset_dotenv_state_for_testing()


@pytest.fixture
def fake_clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def tagged_state(fake_clock: FakeClock) -> ProcessState:
    return ProcessState.capture(styler=tag_styler, clock=fake_clock)


@pytest.fixture
def make_entry() -> Callable[..., LogEntry]:
    def factory(
        message: str = "hello",
        *,
        level: LogLevel = LogLevel.INFO,
        fields: dict[str, Any] | None = None,
        time: datetime = FIXED_TIME,
        stream: Any = None,
    ) -> LogEntry:
        return LogEntry(time=time, level=level, message=message, fields=dict(fields or {}), stream=stream)

    return factory


@pytest.fixture
def styler() -> Callable[[str], Callable[[str], str]]:
    return tag_styler
