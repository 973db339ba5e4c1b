"""Bridge plugging :class:`TextFormatter` into the stdlib :mod:`logging` package.

Purpose
-------
Let applications keep using ``logging.getLogger(...)`` and handlers while the
line layout comes from the prefixed text formatter.

Contents
--------
* :class:`PrefixedLogFormatter` - ``logging.Formatter`` subclass translating
  :class:`logging.LogRecord` objects into :class:`LogEntry` values.

System Role
-----------
Outer adapter. The logging framework keeps ownership of record creation, level
filtering and stream writes; this class only renders.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import IO, Any, Mapping

from lib_log_prefixed.domain.entry import LogEntry
from lib_log_prefixed.domain.levels import LogLevel
from lib_log_prefixed.formatter import TextFormatter

_RESERVED_RECORD_ATTRIBUTES = frozenset(
    {
        "args",
        "asctime",
        "created",
        "exc_info",
        "exc_text",
        "fields",
        "filename",
        "funcName",
        "levelname",
        "levelno",
        "lineno",
        "message",
        "module",
        "msecs",
        "msg",
        "name",
        "pathname",
        "process",
        "processName",
        "relativeCreated",
        "stack_info",
        "taskName",
        "thread",
        "threadName",
    }
)
# Attributes every LogRecord carries; anything else arrived through ``extra=``.


class PrefixedLogFormatter(logging.Formatter):
    """Render stdlib log records with a :class:`TextFormatter`.

    Structured fields come from a ``fields`` mapping passed through ``extra``
    (``logger.info("msg", extra={"fields": {...}})``) and from any other
    ``extra`` keys. Exception information is exposed as an ``error`` field.

    Examples
    --------
    >>> import io
    >>> stream = io.StringIO()
    >>> handler = PrefixedLogFormatter(TextFormatter(disable_timestamp=True, disable_colors=True)).attach(logging.StreamHandler(stream))
    >>> demo = logging.getLogger("lib_log_prefixed.doctest")
    >>> demo.propagate = False
    >>> demo.addHandler(handler)
    >>> demo.warning("[db] slow query", extra={"fields": {"ms": 120}})
    >>> stream.getvalue()
    'level=warning msg="[db] slow query" ms=120 \\n'
    >>> demo.removeHandler(handler)
    """

    def __init__(self, text_formatter: TextFormatter | None = None, *, stream: IO[str] | None = None) -> None:
        super().__init__()
        self.text_formatter = text_formatter if text_formatter is not None else TextFormatter()
        self.stream = stream

    def attach(self, handler: logging.Handler) -> logging.Handler:
        """Install this formatter on ``handler``, adopting its stream for terminal detection."""

        if self.stream is None:
            self.stream = getattr(handler, "stream", None)
        handler.setFormatter(self)
        return handler

    def to_entry(self, record: logging.LogRecord) -> LogEntry:
        """Translate ``record`` into a :class:`LogEntry`."""

        fields: dict[str, Any] = {}
        explicit = getattr(record, "fields", None)
        if isinstance(explicit, Mapping):
            fields.update(explicit)
        for key, value in record.__dict__.items():
            if key not in _RESERVED_RECORD_ATTRIBUTES and not key.startswith("_"):
                fields.setdefault(key, value)
        if record.exc_info and record.exc_info[1] is not None:
            fields.setdefault("error", record.exc_info[1])

        return LogEntry(
            time=datetime.fromtimestamp(record.created).astimezone(),
            level=LogLevel.from_python_level(record.levelno),
            message=record.getMessage(),
            fields=fields,
            stream=self.stream,
        )

    def format(self, record: logging.LogRecord) -> str:  # type: ignore[override]
        line = self.text_formatter.format(self.to_entry(record))
        # Handlers append their own terminator.
        return line.decode("utf-8").removesuffix("\n")


__all__ = ["PrefixedLogFormatter"]
