from __future__ import annotations

from typing import Callable

from lib_log_prefixed.application.use_cases.compile_scheme import compile_color_scheme
from lib_log_prefixed.domain.color_scheme import ColorScheme


def test_unset_roles_fall_back_to_default_style_names(styler) -> None:
    compiled = compile_color_scheme(ColorScheme(), styler)
    assert compiled.info("x") == "<green>x</green>"
    assert compiled.warn("x") == "<yellow>x</yellow>"
    assert compiled.error("x") == "<red>x</red>"
    assert compiled.fatal("x") == "<red>x</red>"
    assert compiled.panic("x") == "<red>x</red>"
    assert compiled.debug("x") == "<blue>x</blue>"
    assert compiled.prefix("x") == "<cyan>x</cyan>"
    assert compiled.timestamp("x") == "<bright_black>x</bright_black>"


def test_explicit_roles_override_defaults(styler) -> None:
    compiled = compile_color_scheme(ColorScheme(info="magenta", prefix="bold white"), styler)
    assert compiled.info("x") == "<magenta>x</magenta>"
    assert compiled.prefix("x") == "<bold white>x</bold white>"
    assert compiled.warn("x") == "<yellow>x</yellow>"


def test_custom_defaults_are_honoured(styler) -> None:
    compiled = compile_color_scheme(ColorScheme(), styler, defaults=ColorScheme(info="white"))
    assert compiled.info("x") == "<white>x</white>"
    # Roles without any style name stay unstyled.
    assert compiled.warn("x") == "x"


def test_styler_returning_nothing_degrades_to_identity() -> None:
    def broken_styler(name: str) -> Callable[[str], str]:
        return None  # type: ignore[return-value]

    compiled = compile_color_scheme(ColorScheme(), broken_styler)
    assert compiled.error("boom") == "boom"


def test_compilation_asks_the_styler_once_per_role(styler) -> None:
    requested: list[str] = []

    def recording_styler(name: str) -> Callable[[str], str]:
        requested.append(name)
        return styler(name)

    compile_color_scheme(ColorScheme(debug="dim"), recording_styler)
    assert requested == ["green", "yellow", "red", "red", "red", "dim", "cyan", "bright_black"]
