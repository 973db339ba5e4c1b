"""Click command line interface for rendering sample log lines.

Purpose
-------
Give operators a quick way to preview how the formatter renders entries with a
given set of flags, colour scheme, and environment configuration.

Contents
--------
* :func:`cli` – Click group with ``--traceback`` and ``--use-dotenv`` options.
* ``info`` / ``render`` / ``demo`` subcommands.
* :func:`main` – entry point wrapping :func:`lib_cli_exit_tools.run_cli`.

System Role
-----------
Presentation layer only; every line is produced by :class:`TextFormatter`
built through :func:`lib_log_prefixed.config.formatter_from_env`.
"""

from __future__ import annotations

import sys
from datetime import datetime
from typing import Any, Sequence

import click
import lib_cli_exit_tools

from . import __init__conf__
from .config import DOTENV_ENV_VAR, enable_dotenv, env_bool, formatter_from_env
from .domain.entry import LogEntry
from .domain.levels import LogLevel

CLICK_CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}
_LEVEL_CHOICES = [level.name.lower() for level in LogLevel] + ["warning", "critical"]


def _parse_fields(values: Sequence[str]) -> dict[str, Any]:
    fields: dict[str, Any] = {}
    for raw in values:
        key, separator, value = raw.partition("=")
        if not separator or not key:
            raise click.BadParameter(f"expected KEY=VALUE, got {raw!r}", param_hint="--field")
        fields[key] = value
    return fields


def _formatter_options(func: Any) -> Any:
    options = [
        click.option("--force-colors", is_flag=True, help="Colourise even when stdout is not a terminal."),
        click.option("--disable-colors", is_flag=True, help="Never colourise."),
        click.option("--disable-timestamp", is_flag=True, help="Omit the timestamp."),
        click.option("--full-timestamp", is_flag=True, help="Show absolute timestamps on colourised lines."),
        click.option("--timestamp-format", default="", help="strftime pattern for absolute timestamps."),
        click.option("--disable-sorting", is_flag=True, help="Keep fields in the order given."),
        click.option("--quote-empty-fields", is_flag=True, help="Quote empty values."),
        click.option("--quote-character", default="", help="Character wrapping quoted values."),
        click.option("--space-padding", type=click.IntRange(min=0), default=0, help="Pad the message to this width."),
    ]
    for option in reversed(options):
        func = option(func)
    return func


@click.group(invoke_without_command=True, context_settings=CLICK_CONTEXT_SETTINGS)
@click.version_option(version=__init__conf__.version, prog_name=__init__conf__.shell_command, message="%(version)s")
@click.option(
    "--traceback/--no-traceback",
    is_flag=True,
    default=False,
    help="Show full Python tracebacks on errors.",
)
@click.option(
    "--use-dotenv/--no-use-dotenv",
    default=None,
    help=f"Load the nearest .env before reading configuration (default from {DOTENV_ENV_VAR}).",
)
@click.pass_context
def cli(ctx: click.Context, traceback: bool, use_dotenv: bool | None) -> None:
    """Preview log lines rendered by the prefixed text formatter."""

    lib_cli_exit_tools.config.traceback = traceback
    lib_cli_exit_tools.config.traceback_force_color = traceback

    load = use_dotenv if use_dotenv is not None else env_bool(DOTENV_ENV_VAR, False)
    if load:
        enable_dotenv()

    if ctx.invoked_subcommand is None:
        click.echo(__init__conf__.summary_info(), nl=False)


@cli.command("info", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_info() -> None:
    """Print package metadata."""

    click.echo(__init__conf__.summary_info(), nl=False)


@cli.command("render", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option("--level", "-l", type=click.Choice(_LEVEL_CHOICES, case_sensitive=False), default="info", show_default=True)
@click.option("--message", "-m", default="", help="Message text; a leading [tag] becomes the prefix.")
@click.option("--field", "-f", "fields", multiple=True, metavar="KEY=VALUE", help="Structured field; repeatable.")
@_formatter_options
def cli_render(level: str, message: str, fields: tuple[str, ...], **options: Any) -> None:
    """Render a single entry to stdout."""

    formatter = formatter_from_env(**options)
    stdout = sys.stdout
    entry = LogEntry(
        time=datetime.now().astimezone(),
        level=LogLevel.from_name(level),
        message=message,
        fields=_parse_fields(fields),
        stream=stdout,
    )
    line = formatter.format(entry).decode("utf-8")
    click.echo(line, nl=False, color=formatter.is_colored)


@cli.command("demo", context_settings=CLICK_CONTEXT_SETTINGS)
@_formatter_options
def cli_demo(**options: Any) -> None:
    """Render one sample line per level."""

    formatter = formatter_from_env(**options)
    stdout = sys.stdout
    for index, level in enumerate(LogLevel, start=1):
        entry = LogEntry(
            time=datetime.now().astimezone(),
            level=level,
            message=f"[demo] {level.severity} message",
            fields={"attempt": index, "component": "demo"},
            stream=stdout,
        )
        click.echo(formatter.format(entry).decode("utf-8"), nl=False, color=formatter.is_colored)


def main(argv: Sequence[str] | None = None, *, restore_traceback: bool = True) -> int:
    """Run the CLI through :mod:`lib_cli_exit_tools` and return its exit code.

    Traceback preferences changed by ``--traceback`` are restored afterwards
    unless ``restore_traceback`` is ``False``.
    """

    previous = (lib_cli_exit_tools.config.traceback, lib_cli_exit_tools.config.traceback_force_color)
    try:
        return lib_cli_exit_tools.run_cli(
            cli,
            argv=list(argv) if argv is not None else None,
            prog_name=__init__conf__.shell_command,
        )
    finally:
        if restore_traceback:
            lib_cli_exit_tools.config.traceback, lib_cli_exit_tools.config.traceback_force_color = previous


__all__ = ["cli", "main"]
