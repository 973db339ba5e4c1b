"""Styling port resolving style names into text decorators.

Purpose
-------
Describe the capability the colour-scheme compiler consumes: turning a named
style such as ``"green"`` into a function that decorates text.

Contents
--------
* ``StyleFunction`` – alias for ``Callable[[str], str]``.
* :class:`StylerPort` – runtime-checkable protocol with a single ``__call__``.

System Role
-----------
Keeps the compiler independent of Rich; the adapter layer provides the concrete
implementation and tests substitute tagging fakes.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol, runtime_checkable

StyleFunction = Callable[[str], str]


@runtime_checkable
class StylerPort(Protocol):
    """Resolve ``style_name`` into a styling function.

    Implementations must return an identity function for names they cannot
    interpret instead of raising.
    """

    def __call__(self, style_name: str) -> StyleFunction: ...


__all__ = ["StyleFunction", "StylerPort"]
