from __future__ import annotations

import io
import logging
import sys
from typing import Iterator

import pytest

from lib_log_prefixed.adapters.stdlib_logging import PrefixedLogFormatter
from lib_log_prefixed.domain.levels import LogLevel
from lib_log_prefixed.formatter import TextFormatter
from lib_log_prefixed.runtime import ProcessState


def _record(level: int = logging.INFO, msg: str = "hello %s", args: tuple = ("world",), **extra: object) -> logging.LogRecord:
    record = logging.LogRecord("tests", level, __file__, 10, msg, args, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


@pytest.fixture
def logger() -> Iterator[logging.Logger]:
    instance = logging.getLogger("lib_log_prefixed.tests.bridge")
    instance.propagate = False
    instance.setLevel(logging.DEBUG)
    yield instance
    for handler in list(instance.handlers):
        instance.removeHandler(handler)


def test_to_entry_maps_message_level_and_time() -> None:
    record = _record(level=logging.WARNING)
    entry = PrefixedLogFormatter().to_entry(record)
    assert entry.message == "hello world"
    assert entry.level is LogLevel.WARN
    assert entry.time.timestamp() == pytest.approx(record.created)
    assert entry.time.tzinfo is not None


def test_to_entry_collects_fields_mapping_and_extra_attributes() -> None:
    record = _record(fields={"user": "ada", "attempt": 2}, request_id="r-1")
    entry = PrefixedLogFormatter().to_entry(record)
    assert entry.fields == {"user": "ada", "attempt": 2, "request_id": "r-1"}


def test_explicit_fields_win_over_extra_attributes() -> None:
    record = _record(fields={"user": "from-fields"}, user="from-extra")
    entry = PrefixedLogFormatter().to_entry(record)
    assert entry.fields["user"] == "from-fields"


def test_exception_info_becomes_error_field() -> None:
    try:
        raise RuntimeError("disk full")
    except RuntimeError:
        record = logging.LogRecord("tests", logging.ERROR, __file__, 10, "failed", (), sys.exc_info())
    entry = PrefixedLogFormatter().to_entry(record)
    assert isinstance(entry.fields["error"], RuntimeError)


def test_format_drops_the_trailing_newline() -> None:
    formatter = PrefixedLogFormatter(TextFormatter(disable_timestamp=True, disable_colors=True))
    assert formatter.format(_record(fields={"k": "v"})) == 'level=info msg="hello world" k=v '


def test_handler_output_gets_exactly_one_newline(logger: logging.Logger) -> None:
    stream = io.StringIO()
    handler = PrefixedLogFormatter(TextFormatter(disable_timestamp=True)).attach(logging.StreamHandler(stream))
    logger.addHandler(handler)

    logger.error("oops", extra={"fields": {"code": "E1"}})

    assert stream.getvalue() == "level=error msg=oops code=E1 \n"


def test_attach_adopts_handler_stream_for_terminal_detection(logger: logging.Logger, tagged_state: ProcessState) -> None:
    stream = io.StringIO()
    probed: list[object] = []

    def probe(target: object) -> bool:
        probed.append(target)
        return True

    text_formatter = TextFormatter(disable_timestamp=True, terminal_probe=probe, process_state=tagged_state)
    handler = PrefixedLogFormatter(text_formatter).attach(logging.StreamHandler(stream))
    logger.addHandler(handler)

    logger.info("[db] connected", extra={"fields": {"pool": 4}})

    assert probed == [stream]
    assert stream.getvalue() == "<green> INFO</green> <cyan>db:</cyan> connected <green>pool</green>=4\n"


def test_explicit_stream_is_not_replaced_by_attach() -> None:
    own = io.StringIO()
    formatter = PrefixedLogFormatter(stream=own)
    formatter.attach(logging.StreamHandler(io.StringIO()))
    assert formatter.stream is own
