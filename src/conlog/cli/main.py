"""Cyclopts CLI entry point for conlog."""

from __future__ import annotations

import logging
import sys
from contextvars import ContextVar
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Annotated

from cyclopts import App, Parameter

from conlog import __version__
from conlog.cli.output import OutputConfig, normalize_output_format
from conlog.cli.output import emit as emit_output
from conlog.lib.config.settings import load_config, resolve_root
from conlog.lib.logging import configure_logging
from conlog.lib.ops import (
    ConfigShowInput,
    FormatInput,
    LogInput,
    config_show_sync,
    format_sync,
    log_sync,
)
from conlog.lib.types import parse_log_level

if TYPE_CHECKING:
    from collections.abc import Sequence

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class GlobalOptions:
    """Top-level options that apply to all commands."""

    output: OutputConfig
    verbosity: int = 0


_GLOBAL_OPTIONS: ContextVar[GlobalOptions | None] = ContextVar("_GLOBAL_OPTIONS", default=None)


def get_global_options() -> GlobalOptions:
    """Return parsed global options for current command."""

    default = GlobalOptions(output=OutputConfig(format="text"))
    return _GLOBAL_OPTIONS.get() or default


def emit(payload: object) -> None:
    """Write command output using current output format settings."""

    emit_output(payload, get_global_options().output)


def _extract_global_options(argv: Sequence[str]) -> tuple[list[str], GlobalOptions]:
    json_mode = False
    output_format: str | None = None
    verbosity = 0
    cleaned: list[str] = []

    i = 0
    while i < len(argv):
        arg = argv[i]
        if arg == "--":
            cleaned.extend(argv[i:])
            break
        if arg == "--json":
            json_mode = True
            i += 1
            continue
        if arg == "--format":
            if i + 1 >= len(argv):
                raise SystemExit("--format requires a value")
            output_format = argv[i + 1]
            i += 2
            continue
        if arg.startswith("--format="):
            output_format = arg.partition("=")[2]
            i += 1
            continue
        if arg in {"-v", "--verbose"}:
            verbosity += 1
            i += 1
            continue

        cleaned.append(arg)
        i += 1

    resolved = normalize_output_format(requested=output_format, json_mode=json_mode)
    return cleaned, GlobalOptions(output=OutputConfig(format=resolved), verbosity=verbosity)


app = App(
    name="conlog",
    help="Format console-style log lines from printf-like templates.",
    version=__version__,
    help_formatter="plain",
)

config_app = App(name="config", help="Console config commands", help_formatter="plain")
app.command(config_app, name="config")


@app.command(name="format")
def format_command(
    *values: str,
    context_id: Annotated[
        str | None,
        Parameter(name="--context-id", help="Context label used in the line prefix."),
    ] = None,
    unterminated: Annotated[
        str | None,
        Parameter(
            name="--unterminated",
            help="What to do with a directive left open at end of template: drop or flush.",
        ),
    ] = None,
    root: Annotated[
        str | None,
        Parameter(name="--root", help="Directory holding .conlog/config.toml."),
    ] = None,
) -> None:
    """Format VALUES into one line and print it.

    Each value is read as a JSON literal when it parses as one, otherwise as a string.
    """

    emit(
        format_sync(
            FormatInput(
                values=values,
                context_id=context_id,
                unterminated=unterminated,
                root=root,
            )
        )
    )


@app.command(name="log")
def log_command(
    *values: str,
    level: Annotated[
        str,
        Parameter(name="--level", help="Severity: trace, debug, info, warn, or error."),
    ] = "info",
    context_id: Annotated[
        str | None,
        Parameter(name="--context-id", help="Context label used in the line prefix."),
    ] = None,
    unterminated: Annotated[
        str | None,
        Parameter(
            name="--unterminated",
            help="What to do with a directive left open at end of template: drop or flush.",
        ),
    ] = None,
    root: Annotated[
        str | None,
        Parameter(name="--root", help="Directory holding .conlog/config.toml."),
    ] = None,
) -> None:
    """Format VALUES and emit the line through structlog on stderr."""

    config = load_config(resolve_root(Path(root) if root is not None else None))
    configure_logging(
        json_mode=config.json_logs or get_global_options().output.format == "json",
        level=int(parse_log_level(config.level)),
    )
    log_sync(
        LogInput(
            values=values,
            level=level,
            context_id=context_id,
            unterminated=unterminated,
            root=root,
        )
    )


@config_app.command(name="show")
def config_show(
    root: Annotated[
        str | None,
        Parameter(name="--root", help="Directory holding .conlog/config.toml."),
    ] = None,
) -> None:
    """Show the resolved configuration."""

    emit(config_show_sync(ConfigShowInput(root=root)))


def _operation_error_message(exc: Exception) -> str:
    if isinstance(exc, KeyError) and exc.args:
        return str(exc.args[0])
    message = str(exc).strip()
    if message:
        return message
    return exc.__class__.__name__


def main(argv: Sequence[str] | None = None) -> None:
    """CLI entry point used by `conlog` and `python -m conlog`."""

    args = list(sys.argv[1:] if argv is None else argv)
    cleaned_args, options = _extract_global_options(args)

    # Configure logging early so diagnostics go to stderr, not stdout.
    configure_logging(
        json_mode=options.output.format == "json",
        verbosity=options.verbosity,
    )

    token = _GLOBAL_OPTIONS.set(options)
    try:
        try:
            app(cleaned_args)
        except (KeyError, ValueError, OSError) as exc:
            logger.debug("command failed", exc_info=True)
            print(f"error: {_operation_error_message(exc)}", file=sys.stderr)
            raise SystemExit(1) from None
    finally:
        _GLOBAL_OPTIONS.reset(token)
