"""Static package metadata surfaced by the CLI ``info`` command."""

from __future__ import annotations

name = "lib_log_prefixed"
title = "Prefixed, colourised single-line text formatter for log records"
version = "0.1.0"
homepage = "https://github.com/bitranox/lib_log_prefixed"
author = "bitranox"
author_email = "bitranox@gmail.com"
shell_command = "lib_log_prefixed"


def summary_info() -> str:
    """Return the metadata banner, one ``key = value`` line per field.

    Examples
    --------
    >>> summary_info().splitlines()[0]
    'Info for lib_log_prefixed:'
    >>> summary_info().endswith("\\n")
    True
    """

    rows = [
        ("name", name),
        ("title", title),
        ("version", version),
        ("homepage", homepage),
        ("author", author),
        ("author_email", author_email),
        ("shell_command", shell_command),
    ]
    width = max(len(key) for key, _ in rows)
    lines = [f"Info for {name}:", ""]
    lines.extend(f"    {key:<{width}} = {value}" for key, value in rows)
    return "\n".join(lines) + "\n"


def print_info() -> None:
    print(summary_info(), end="")
