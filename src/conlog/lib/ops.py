"""Operations shared by the CLI commands."""

from __future__ import annotations

import json
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import TYPE_CHECKING

from conlog.lib.config.settings import config_path, load_config, resolve_root
from conlog.lib.console import Console
from conlog.lib.types import parse_log_level

if TYPE_CHECKING:
    from conlog.lib.formatting import FormatContext
    from conlog.lib.ports import LineSink


def parse_cli_value(token: str) -> object:
    """Read a CLI token as a JSON literal, falling back to the raw string."""

    try:
        return json.loads(token)
    except ValueError:
        return token


def _root(root: str | None) -> Path:
    return resolve_root(Path(root) if root is not None else None)


@dataclass(frozen=True, slots=True)
class FormatInput:
    values: tuple[str, ...] = ()
    context_id: str | None = None
    unterminated: str | None = None
    root: str | None = None


@dataclass(frozen=True, slots=True)
class FormatOutput:
    line: str
    context_id: str

    def format_text(self, ctx: FormatContext | None = None) -> str:
        _ = ctx
        return self.line


@dataclass(frozen=True, slots=True)
class LogInput:
    values: tuple[str, ...] = ()
    level: str = "info"
    context_id: str | None = None
    unterminated: str | None = None
    root: str | None = None


def _console(
    *,
    root: str | None,
    context_id: str | None,
    unterminated: str | None,
    sink: LineSink | None = None,
) -> Console:
    config = load_config(_root(root))
    overrides: dict[str, str] = {}
    if context_id is not None and context_id.strip():
        overrides["context_id"] = context_id.strip()
    if unterminated is not None:
        normalized = unterminated.strip().lower()
        if normalized not in {"drop", "flush"}:
            raise ValueError("--unterminated must be one of: drop, flush")
        overrides["unterminated"] = normalized
    if overrides:
        config = replace(config, **overrides)
    return Console.from_config(config, sink=sink)


def format_sync(payload: FormatInput) -> FormatOutput:
    console = _console(
        root=payload.root,
        context_id=payload.context_id,
        unterminated=payload.unterminated,
    )
    values = [parse_cli_value(token) for token in payload.values]
    return FormatOutput(line=console.format(*values), context_id=console.context_id)


def log_sync(payload: LogInput, sink: LineSink | None = None) -> None:
    level = parse_log_level(payload.level)
    console = _console(
        root=payload.root,
        context_id=payload.context_id,
        unterminated=payload.unterminated,
        sink=sink,
    )
    console.emit(level, *(parse_cli_value(token) for token in payload.values))


@dataclass(frozen=True, slots=True)
class ConfigShowInput:
    root: str | None = None


@dataclass(frozen=True, slots=True)
class ConfigShowOutput:
    path: str
    values: dict[str, object]

    def format_text(self, ctx: FormatContext | None = None) -> str:
        _ = ctx
        lines = [f"path: {self.path}"]
        for key, value in self.values.items():
            rendered = str(value).lower() if isinstance(value, bool) else str(value)
            lines.append(f"{key}: {rendered}")
        return "\n".join(lines)


def config_show_sync(payload: ConfigShowInput) -> ConfigShowOutput:
    root = _root(payload.root)
    config = load_config(root)
    return ConfigShowOutput(
        path=config_path(root).as_posix(),
        values={field.name: getattr(config, field.name) for field in fields(config)},
    )
