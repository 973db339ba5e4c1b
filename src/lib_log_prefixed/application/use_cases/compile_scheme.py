"""Use case compiling a declarative :class:`ColorScheme` into styling functions.

Purpose
-------
Resolve every role's style name, falling back to the default scheme for unset
roles, through the injected :class:`StylerPort`.

System Role
-----------
Runs once per process for the default scheme and once per
:meth:`lib_log_prefixed.TextFormatter.set_color_scheme` call.
"""

from __future__ import annotations

from lib_log_prefixed.application.ports.styler import StyleFunction, StylerPort
from lib_log_prefixed.domain.color_scheme import DEFAULT_COLOR_SCHEME, ROLES, ColorScheme, CompiledColorScheme


def _identity(text: str) -> str:
    return text


def compile_color_scheme(
    scheme: ColorScheme,
    styler: StylerPort,
    *,
    defaults: ColorScheme = DEFAULT_COLOR_SCHEME,
) -> CompiledColorScheme:
    """Return the compiled counterpart of ``scheme``.

    Parameters
    ----------
    scheme:
        Style names per role; empty entries take the value from ``defaults``.
    styler:
        Capability turning a style name into a styling function.
    defaults:
        Scheme supplying names for unset roles.

    Examples
    --------
    >>> tag = lambda name: (lambda text: f"<{name}>{text}")
    >>> compiled = compile_color_scheme(ColorScheme(info="magenta"), tag)
    >>> compiled.info("x"), compiled.warn("x")
    ('<magenta>x', '<yellow>x')
    """

    resolved: dict[str, StyleFunction] = {}
    for role in ROLES:
        name = scheme.style_for(role) or defaults.style_for(role)
        function = styler(name) if name else None
        resolved[role] = function if callable(function) else _identity
    return CompiledColorScheme(**resolved)


__all__ = ["compile_color_scheme"]
