"""Adapters connecting the formatter to Rich and the terminal.

The stdlib :mod:`logging` bridge lives in
:mod:`lib_log_prefixed.adapters.stdlib_logging` and is imported from there.
"""

from __future__ import annotations

from .rich_styler import RichStyler, translate_legacy_style
from .terminal import rich_terminal_probe

__all__ = ["RichStyler", "rich_terminal_probe", "translate_legacy_style"]
