"""Prefixed text formatter turning one :class:`LogEntry` into one line of bytes.

Purpose
-------
Render log entries either as ``key=value`` pairs (plain output) or as a
scannable ``[ts] LEVEL prefix: message key=value`` line (colourised output),
the choice depending on configuration flags and on whether the destination is
a terminal.

Contents
--------
* :class:`TextFormatter` – per-stream configuration plus the ``format``
  operation and its one-time lazy initialisation.

System Role
-----------
The heart of the package. The stdlib bridge in
:mod:`lib_log_prefixed.adapters.stdlib_logging` and the CLI both delegate here;
domain helpers supply prefix extraction, field-clash renaming and quoting.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from datetime import datetime
from io import StringIO
from typing import IO, Any

from .adapters.terminal import rich_terminal_probe
from .application.ports.styler import StylerPort
from .application.ports.terminal import TerminalProbePort
from .application.use_cases.compile_scheme import compile_color_scheme
from .domain.color_scheme import ColorScheme, CompiledColorScheme
from .domain.entry import FailureValue, LogEntry, OtherValue, TextValue, classify_value, stringify
from .domain.fields import extract_prefix, needs_quoting, prefix_field_clashes, quote_text
from .runtime import PROCESS_STATE, ProcessState

DEFAULT_QUOTE_CHARACTER = '"'


@dataclass
class TextFormatter:
    """Configuration for one output stream and the formatter operating on it.

    Attributes
    ----------
    force_colors:
        Colourise even when the destination is not a terminal.
    disable_colors:
        Never colourise; wins over ``force_colors``.
    disable_timestamp:
        Omit the timestamp entirely.
    full_timestamp:
        On colourised lines show the absolute timestamp instead of the seconds
        elapsed since process start.
    timestamp_format:
        :meth:`datetime.strftime` pattern; empty selects ISO-8601 with seconds
        precision.
    disable_sorting:
        Keep the field mapping's own iteration order instead of sorting keys.
    quote_empty_fields:
        Quote empty string values on plain lines.
    quote_character:
        Character wrapping quoted values; ``"`` when left empty.
    space_padding:
        Minimum width the message is left-justified to on colourised lines;
        ``0`` disables padding.
    terminal_probe:
        Decides whether an entry's destination stream is a terminal.
    process_state:
        Shared process-scoped state (default scheme, relative-seconds
        baseline).
    """

    force_colors: bool = False
    disable_colors: bool = False
    disable_timestamp: bool = False
    full_timestamp: bool = False
    timestamp_format: str = ""
    disable_sorting: bool = False
    quote_empty_fields: bool = False
    quote_character: str = ""
    space_padding: int = 0
    terminal_probe: TerminalProbePort = rich_terminal_probe
    process_state: ProcessState = PROCESS_STATE
    _color_scheme: CompiledColorScheme | None = field(default=None, init=False, repr=False)
    _is_terminal: bool = field(default=False, init=False, repr=False)
    _initialised: bool = field(default=False, init=False, repr=False)
    _init_lock: threading.Lock = field(default_factory=threading.Lock, init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if self.space_padding < 0:
            raise ValueError("space_padding must be zero or positive")
        if len(self.quote_character) > 1:
            raise ValueError(f"quote_character must be a single character, got {self.quote_character!r}")

    @classmethod
    def prepared(cls, stream: IO[str] | None = None, **options: Any) -> "TextFormatter":
        """Construct a formatter and run its one-time initialisation immediately."""

        formatter = cls(**options)
        formatter.warm_up(stream)
        return formatter

    @property
    def color_scheme(self) -> CompiledColorScheme:
        """Return the scheme set via :meth:`set_color_scheme` or the process default."""

        if self._color_scheme is not None:
            return self._color_scheme
        return self.process_state.default_color_scheme

    @property
    def output_is_terminal(self) -> bool:
        return self._is_terminal

    @property
    def is_colored(self) -> bool:
        return (self.force_colors or self._is_terminal) and not self.disable_colors

    def set_color_scheme(self, scheme: ColorScheme, *, styler: StylerPort | None = None) -> None:
        """Compile ``scheme`` and use it for subsequent colourised lines.

        Not safe to call while other threads are formatting; configure the
        formatter before handing it to the logging framework.
        """

        resolved_styler = styler if styler is not None else self.process_state.styler
        self._color_scheme = compile_color_scheme(scheme, resolved_styler)

    def warm_up(self, stream: IO[str] | None = None) -> None:
        """Run the one-time initialisation now instead of on the first entry."""

        self._ensure_initialised(stream)

    def format(self, entry: LogEntry) -> bytes:
        """Return ``entry`` rendered as one newline-terminated UTF-8 line.

        Examples
        --------
        >>> from datetime import datetime, timezone
        >>> from lib_log_prefixed.domain.levels import LogLevel
        >>> entry = LogEntry(datetime(2025, 1, 2, 3, 4, 5, tzinfo=timezone.utc), LogLevel.INFO, "hi", {"b": 2, "a": "x y"})
        >>> TextFormatter(disable_timestamp=True).format(entry)
        b'level=info msg=hi a="x y" b=2 \\n'
        """

        prefix_field_clashes(entry.fields)
        keys = list(entry.fields)
        if not self.disable_sorting:
            keys.sort()

        self._ensure_initialised(entry.stream)

        buffer = StringIO()
        if self.is_colored:
            self._print_colored(buffer, entry, keys)
        else:
            if not self.disable_timestamp:
                self._append_key_value(buffer, "time", self._format_time(entry.time))
            self._append_key_value(buffer, "level", entry.level.severity)
            if entry.message:
                self._append_key_value(buffer, "msg", entry.message)
            for key in keys:
                self._append_key_value(buffer, key, entry.fields[key])

        buffer.write("\n")
        return buffer.getvalue().encode("utf-8")

    def needs_quoting(self, text: str) -> bool:
        return needs_quoting(text, quote_empty_fields=self.quote_empty_fields)

    def _ensure_initialised(self, stream: IO[str] | None) -> None:
        if self._initialised:
            return
        with self._init_lock:
            if self._initialised:
                return
            if not self.quote_character:
                self.quote_character = DEFAULT_QUOTE_CHARACTER
            if stream is not None:
                self._is_terminal = bool(self.terminal_probe(stream))
            self._initialised = True

    def _format_time(self, moment: datetime) -> str:
        if self.timestamp_format:
            return moment.strftime(self.timestamp_format)
        return moment.isoformat(timespec="seconds")

    def _print_colored(self, buffer: StringIO, entry: LogEntry, keys: list[str]) -> None:
        scheme = self.color_scheme
        level_color = scheme.for_level(entry.level)

        prefix = ""
        message = entry.message
        if "prefix" in entry.fields:
            prefix = " " + scheme.prefix(stringify(entry.fields["prefix"]) + ":")
        else:
            prefix_value, trimmed = extract_prefix(entry.message)
            if prefix_value:
                prefix = " " + scheme.prefix(prefix_value + ":")
                message = trimmed

        if self.space_padding:
            message = message.ljust(self.space_padding)

        level_text = level_color(entry.level.text.rjust(5))
        if self.disable_timestamp:
            buffer.write(f"{level_text}{prefix} {message}")
        else:
            if self.full_timestamp:
                stamp = self._format_time(entry.time)
            else:
                stamp = f"{self.process_state.elapsed_seconds():04d}"
            buffer.write(f"{scheme.timestamp(f'[{stamp}]')} {level_text}{prefix} {message}")

        for key in keys:
            if key == "prefix":
                continue
            buffer.write(f" {level_color(key)}={stringify(entry.fields[key])}")

    def _append_key_value(self, buffer: StringIO, key: str, value: Any) -> None:
        buffer.write(key)
        buffer.write("=")
        match classify_value(value):
            case TextValue(text=text) | FailureValue(message=text):
                if self.needs_quoting(text):
                    buffer.write(quote_text(text, self.quote_character))
                else:
                    buffer.write(text)
            case OtherValue(value=other):
                buffer.write(stringify(other))
        buffer.write(" ")


__all__ = ["DEFAULT_QUOTE_CHARACTER", "TextFormatter"]
