"""Environment-driven configuration for :class:`TextFormatter`.

Purpose
-------
Let deployments tune the formatter without code changes: every flag has a
``LOG_PREFIXED_*`` environment variable, ``NO_COLOR`` is honoured, and an
optional ``.env`` file can seed the environment.

Contents
--------
* :func:`formatter_from_env` – build a formatter from arguments plus
  environment overrides.
* :func:`parse_color_scheme` – parse ``role=style`` lists.
* :func:`enable_dotenv` – load the nearest ``.env`` via python-dotenv.

System Role
-----------
Used by the CLI and by applications that prefer configuration through the
environment. Environment values take precedence over call arguments.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from dotenv import find_dotenv, load_dotenv

from .domain.color_scheme import ColorScheme
from .formatter import TextFormatter

ENV_PREFIX = "LOG_PREFIXED_"
DOTENV_ENV_VAR = "LOG_PREFIXED_USE_DOTENV"

_BOOLEAN_OPTIONS = (
    "force_colors",
    "disable_colors",
    "disable_timestamp",
    "full_timestamp",
    "disable_sorting",
    "quote_empty_fields",
)
_TRUTHY = {"1", "true", "yes", "on"}

_DOTENV_PATH: Path | None = None


def _env_name(option: str) -> str:
    return ENV_PREFIX + option.upper()


def env_bool(name: str, default: bool) -> bool:
    """Return the boolean value of an environment variable with fallback.

    Examples
    --------
    >>> _ = os.environ.pop('LOG_PREFIXED_EXAMPLE_BOOL', None)
    >>> env_bool('LOG_PREFIXED_EXAMPLE_BOOL', default=True)
    True
    >>> os.environ['LOG_PREFIXED_EXAMPLE_BOOL'] = '0'
    >>> env_bool('LOG_PREFIXED_EXAMPLE_BOOL', default=True)
    False
    >>> _ = os.environ.pop('LOG_PREFIXED_EXAMPLE_BOOL')
    """

    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return value.strip().lower() in _TRUTHY


def _env_padding(default: int) -> int:
    raw = os.getenv(_env_name("space_padding"))
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw)
    except ValueError as exc:
        raise ValueError(f"{_env_name('space_padding')} must be an integer, got {raw!r}") from exc
    if value < 0:
        raise ValueError(f"{_env_name('space_padding')} must be zero or positive")
    return value


def parse_color_scheme(raw: str | None) -> ColorScheme | None:
    """Convert ``role=style`` comma-separated strings into a :class:`ColorScheme`.

    Examples
    --------
    >>> parse_color_scheme('info=magenta, prefix = bold cyan')
    ColorScheme(info='magenta', warn='', error='', fatal='', panic='', debug='', prefix='bold cyan', timestamp='')
    >>> parse_color_scheme(None) is None
    True
    >>> parse_color_scheme('info')
    Traceback (most recent call last):
    ...
    ValueError: Colour scheme entries must look like ROLE=STYLE, got 'info'
    """

    if not raw or not raw.strip():
        return None
    styles: dict[str, str] = {}
    for chunk in raw.split(","):
        if not chunk.strip():
            continue
        key, separator, value = chunk.partition("=")
        if not separator or not key.strip() or not value.strip():
            raise ValueError(f"Colour scheme entries must look like ROLE=STYLE, got {chunk.strip()!r}")
        styles[key.strip()] = value.strip()
    return ColorScheme.from_mapping(styles)


def formatter_from_env(*, color_scheme: ColorScheme | None = None, **options: Any) -> TextFormatter:
    """Return a :class:`TextFormatter` built from ``options`` and the environment.

    Parameters
    ----------
    color_scheme:
        Scheme to compile when ``LOG_PREFIXED_COLOR_SCHEME`` is not set.
    **options:
        Keyword arguments accepted by :class:`TextFormatter`.

    Raises
    ------
    ValueError
        When ``LOG_PREFIXED_SPACE_PADDING`` or ``LOG_PREFIXED_COLOR_SCHEME``
        cannot be parsed.
    """

    resolved = dict(options)
    for option in _BOOLEAN_OPTIONS:
        resolved[option] = env_bool(_env_name(option), bool(resolved.get(option, False)))
    if os.getenv("NO_COLOR"):
        resolved["disable_colors"] = True

    for option in ("timestamp_format", "quote_character"):
        value = os.getenv(_env_name(option))
        if value is not None:
            resolved[option] = value
    resolved["space_padding"] = _env_padding(int(resolved.get("space_padding", 0)))

    formatter = TextFormatter(**resolved)
    scheme = parse_color_scheme(os.getenv(_env_name("color_scheme"))) or color_scheme
    if scheme is not None:
        formatter.set_color_scheme(scheme)
    return formatter


def enable_dotenv(path: str | os.PathLike[str] | None = None) -> Path | None:
    """Load ``path`` or the nearest ``.env`` above the working directory.

    Variables already present in the environment are left untouched. Returns
    the loaded file, or ``None`` when no file was found.
    """

    global _DOTENV_PATH
    if path is not None:
        candidate = Path(path)
        found = str(candidate) if candidate.is_file() else ""
    else:
        found = find_dotenv(usecwd=True)
    if not found:
        return None
    resolved = Path(found).resolve()
    load_dotenv(resolved, override=False)
    _DOTENV_PATH = resolved
    return resolved


def loaded_dotenv() -> Path | None:
    """Return the ``.env`` file loaded by :func:`enable_dotenv`, if any."""

    return _DOTENV_PATH


def _reset_dotenv_state_for_testing() -> None:
    global _DOTENV_PATH
    _DOTENV_PATH = None


__all__ = [
    "DOTENV_ENV_VAR",
    "ENV_PREFIX",
    "enable_dotenv",
    "env_bool",
    "formatter_from_env",
    "loaded_dotenv",
    "parse_color_scheme",
]
