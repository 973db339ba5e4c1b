"""Log entry consumed by the formatter and the field-value variants it renders.

Purpose
-------
Provide the record shape handed over by the logging framework together with the
closed set of value kinds the formatter distinguishes when writing fields.

Contents
--------
* :class:`LogEntry` dataclass describing one record.
* :class:`TextValue`, :class:`FailureValue`, :class:`OtherValue` variants and
  :func:`classify_value` which sorts arbitrary values into them.
* :func:`stringify` generic rendering shared by both output paths.

System Role
-----------
Sits in the domain layer. The entry is read-mostly: only the field mapping is
touched, by the field-clash renaming step of the formatter.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from datetime import datetime
from typing import IO, Any, Union

from .levels import LogLevel


@dataclass(slots=True)
class LogEntry:
    """One discrete log record waiting to be rendered.

    Attributes
    ----------
    time:
        Instant the record was created.
    level:
        :class:`LogLevel` severity.
    message:
        Free-form text; may be empty.
    fields:
        Caller-supplied key/value pairs. Keys are unique; iteration order
        carries no meaning.
    stream:
        Destination the framework will write to, if known. Only consulted to
        decide whether the output is a terminal.
    """

    time: datetime
    level: LogLevel
    message: str
    fields: dict[str, Any] = field(default_factory=dict)
    stream: IO[str] | None = None


@dataclass(slots=True, frozen=True)
class TextValue:
    text: str


@dataclass(slots=True, frozen=True)
class FailureValue:
    """Exception carried as a field; rendered through its message."""

    message: str


@dataclass(slots=True, frozen=True)
class OtherValue:
    value: Any


FieldValue = Union[TextValue, FailureValue, OtherValue]

_COMPOSITES = (dict, list, tuple, set, frozenset)


def classify_value(value: Any) -> FieldValue:
    """Return the variant describing ``value``.

    Examples
    --------
    >>> classify_value("ok")
    TextValue(text='ok')
    >>> classify_value(ValueError("boom"))
    FailureValue(message='boom')
    >>> classify_value(3)
    OtherValue(value=3)
    """

    if isinstance(value, str):
        return TextValue(value)
    if isinstance(value, BaseException):
        return FailureValue(str(value))
    return OtherValue(value)


def stringify(value: Any) -> str:
    """Render ``value`` generically.

    Composite values (containers and dataclass instances) use :func:`repr` so
    their structure stays visible; everything else uses :func:`str`.

    Examples
    --------
    >>> stringify({"a": 1})
    "{'a': 1}"
    >>> stringify(2.5)
    '2.5'
    """

    if isinstance(value, _COMPOSITES) or (dataclasses.is_dataclass(value) and not isinstance(value, type)):
        return repr(value)
    return str(value)


__all__ = [
    "FailureValue",
    "FieldValue",
    "LogEntry",
    "OtherValue",
    "TextValue",
    "classify_value",
    "stringify",
]
