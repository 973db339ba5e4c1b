"""String helpers shared by the plain and colourised output paths.

Contents
--------
* :func:`extract_prefix` – split a leading ``[tag]`` off a message.
* :func:`prefix_field_clashes` – keep user fields named like reserved slots.
* :func:`needs_quoting` / :func:`quote_text` – value quoting rules.
"""

from __future__ import annotations

import re
from typing import Any, MutableMapping

_PREFIX_PATTERN = re.compile(r"^\[(.*?)\]")
_UNSAFE_CHARACTER = re.compile(r"[^A-Za-z0-9.\-]")
_RESERVED_KEYS = ("time", "msg", "level")
_ESCAPES = {"\\": "\\\\", "\n": "\\n", "\r": "\\r", "\t": "\\t"}
_CONTROL_CHARACTER = re.compile(r"[\x00-\x1f\x7f]")


def extract_prefix(message: str) -> tuple[str, str]:
    """Return ``(prefix, remainder)`` for a message starting with ``[prefix]``.

    The match is non-greedy, so only the first bracketed token is taken.

    Examples
    --------
    >>> extract_prefix("[db] connected")
    ('db', 'connected')
    >>> extract_prefix("[a][b] c")
    ('a', '[b] c')
    >>> extract_prefix("no brackets")
    ('', 'no brackets')
    """

    match = _PREFIX_PATTERN.match(message)
    if match is None:
        return "", message
    return match.group(1), message[match.end():].strip()


def prefix_field_clashes(data: MutableMapping[str, Any]) -> None:
    """Copy ``time``/``msg``/``level`` fields to ``fields.<name>`` in place.

    Without this a call such as ``fields={"level": 1}`` would be hidden behind
    the formatter's own level slot. The original key is left where it is.

    Examples
    --------
    >>> data = {"level": 1, "user": "x"}
    >>> prefix_field_clashes(data)
    >>> sorted(data)
    ['fields.level', 'level', 'user']
    """

    for key in _RESERVED_KEYS:
        if key in data:
            data[f"fields.{key}"] = data[key]


def needs_quoting(text: str, *, quote_empty_fields: bool = False) -> bool:
    """Return ``True`` when ``text`` must be wrapped in quotes.

    Examples
    --------
    >>> needs_quoting("abc-1.2")
    False
    >>> needs_quoting("a b")
    True
    >>> needs_quoting("", quote_empty_fields=True)
    True
    >>> needs_quoting("")
    False
    """

    if quote_empty_fields and not text:
        return True
    return _UNSAFE_CHARACTER.search(text) is not None


def quote_text(text: str, quote_character: str = '"') -> str:
    """Wrap ``text`` in ``quote_character`` escaping backslashes, quotes and control characters.

    Examples
    --------
    >>> quote_text('say "hi"')
    '"say \\\\"hi\\\\""'
    >>> quote_text("it's", "'")
    "'it\\\\'s'"
    >>> quote_text("a\\x1bb")
    '"a\\\\x1bb"'

    ``quote_character`` must be a single character.
    """

    if len(quote_character) != 1:
        raise ValueError(f"quote_character must be a single character, got {quote_character!r}")
    escapes = dict(_ESCAPES)
    escapes[quote_character] = "\\" + quote_character
    body = "".join(escapes.get(ch) or _escape_control(ch) for ch in text)
    return f"{quote_character}{body}{quote_character}"


def _escape_control(ch: str) -> str:
    if _CONTROL_CHARACTER.match(ch):
        return f"\\x{ord(ch):02x}"
    return ch


__all__ = [
    "extract_prefix",
    "needs_quoting",
    "prefix_field_clashes",
    "quote_text",
]
