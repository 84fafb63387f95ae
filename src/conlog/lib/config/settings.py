"""Project-level console config loader."""

from __future__ import annotations

import logging
import os
import tomllib
from dataclasses import dataclass, fields
from pathlib import Path
from typing import cast

from conlog.lib.types import parse_log_level

logger = logging.getLogger(__name__)

CONFIG_DIR_NAME = ".conlog"
CONFIG_FILE_NAME = "config.toml"


@dataclass(frozen=True, slots=True)
class ConlogConfig:
    """Resolved console configuration."""

    context_id: str = "main"
    level: str = "info"
    unterminated: str = "drop"
    json_logs: bool = False


_SECTION_KEY_MAP: dict[str, dict[str, str]] = {
    "console": {
        "context_id": "context_id",
        "context": "context_id",
        "level": "level",
    },
    "format": {
        "unterminated": "unterminated",
    },
    "logging": {
        "json": "json_logs",
        "json_logs": "json_logs",
    },
}

_TOP_LEVEL_KEY_MAP: dict[str, str] = {
    "context_id": "context_id",
    "level": "level",
    "unterminated": "unterminated",
    "json_logs": "json_logs",
}

_ENV_OVERRIDE_MAP: dict[str, str] = {
    "CONLOG_CONTEXT_ID": "context_id",
    "CONLOG_LEVEL": "level",
    "CONLOG_UNTERMINATED": "unterminated",
    "CONLOG_JSON_LOGS": "json_logs",
}

_UNTERMINATED_POLICIES = frozenset({"drop", "flush"})
_TRUTHY = frozenset({"1", "true", "yes", "on"})
_FALSY = frozenset({"0", "false", "no", "off", ""})


def config_path(root: Path) -> Path:
    return root / CONFIG_DIR_NAME / CONFIG_FILE_NAME


def resolve_root(explicit: Path | None = None) -> Path:
    """Resolve the directory that owns `.conlog/config.toml`.

    Precedence:
    1. Explicit function argument.
    2. `CONLOG_ROOT` environment variable.
    3. Current directory / ancestors containing `.conlog/` or a `.git` marker.
    4. Current working directory.
    """

    if explicit is not None:
        return explicit.expanduser().resolve()

    env_root = os.getenv("CONLOG_ROOT")
    if env_root:
        return Path(env_root).expanduser().resolve()

    cwd = Path.cwd().resolve()
    candidate = cwd
    while True:
        if (candidate / CONFIG_DIR_NAME).is_dir() or (candidate / ".git").exists():
            return candidate
        parent = candidate.parent
        if parent == candidate:
            break
        candidate = parent

    return cwd


def _validate_field(*, field_name: str, value: str, source: str) -> str:
    if field_name == "level":
        try:
            parse_log_level(value)
        except ValueError as error:
            raise ValueError(f"Invalid value for '{source}': {error}") from error
        return value.lower()
    if field_name == "unterminated":
        normalized = value.lower()
        if normalized not in _UNTERMINATED_POLICIES:
            raise ValueError(
                f"Invalid value for '{source}': expected one of "
                f"{sorted(_UNTERMINATED_POLICIES)}, got {value!r}."
            )
        return normalized
    return value


def _coerce_file_value(*, field_name: str, raw_value: object, source: str) -> object:
    if field_name == "json_logs":
        if not isinstance(raw_value, bool):
            raise ValueError(
                f"Invalid value for '{source}': expected bool, got "
                f"{type(raw_value).__name__} ({raw_value!r})."
            )
        return raw_value

    if not isinstance(raw_value, str):
        raise ValueError(
            f"Invalid value for '{source}': expected str, got "
            f"{type(raw_value).__name__} ({raw_value!r})."
        )
    normalized = raw_value.strip()
    if not normalized:
        raise ValueError(f"Invalid value for '{source}': expected non-empty string.")
    return _validate_field(field_name=field_name, value=normalized, source=source)


def _coerce_env_value(*, field_name: str, raw_value: str, env_name: str) -> object:
    normalized = raw_value.strip()
    if field_name == "json_logs":
        lowered = normalized.lower()
        if lowered in _TRUTHY:
            return True
        if lowered in _FALSY:
            return False
        raise ValueError(
            f"Invalid environment override '{env_name}': expected bool, got {raw_value!r}."
        )

    if not normalized:
        raise ValueError(
            f"Invalid environment override '{env_name}': expected non-empty string."
        )
    return _validate_field(field_name=field_name, value=normalized, source=env_name)


def _default_values() -> dict[str, object]:
    defaults = ConlogConfig()
    return {field.name: getattr(defaults, field.name) for field in fields(ConlogConfig)}


def _apply_toml_payload(
    *,
    values: dict[str, object],
    payload: dict[str, object],
    path: Path,
) -> None:
    for key, raw_value in payload.items():
        section_map = _SECTION_KEY_MAP.get(key)
        if section_map is not None:
            if not isinstance(raw_value, dict):
                raise ValueError(f"Invalid value for '{key}' in '{path}': expected table.")
            for section_key, section_value in cast("dict[str, object]", raw_value).items():
                field_name = section_map.get(section_key)
                if field_name is None:
                    logger.warning(
                        "Ignoring unknown conlog config key '%s.%s'.",
                        key,
                        section_key,
                    )
                    continue
                values[field_name] = _coerce_file_value(
                    field_name=field_name,
                    raw_value=section_value,
                    source=f"{key}.{section_key}",
                )
            continue

        field_name = _TOP_LEVEL_KEY_MAP.get(key)
        if field_name is None:
            logger.warning("Ignoring unknown conlog config key '%s'.", key)
            continue
        values[field_name] = _coerce_file_value(
            field_name=field_name,
            raw_value=raw_value,
            source=key,
        )


def _apply_env_overrides(values: dict[str, object]) -> None:
    for env_name, field_name in _ENV_OVERRIDE_MAP.items():
        raw_value = os.getenv(env_name)
        if raw_value is None:
            continue
        values[field_name] = _coerce_env_value(
            field_name=field_name,
            raw_value=raw_value,
            env_name=env_name,
        )


def _build_config(values: dict[str, object]) -> ConlogConfig:
    return ConlogConfig(
        context_id=cast("str", values["context_id"]),
        level=cast("str", values["level"]),
        unterminated=cast("str", values["unterminated"]),
        json_logs=cast("bool", values["json_logs"]),
    )


def load_config(root: Path) -> ConlogConfig:
    """Load `.conlog/config.toml` and apply environment overrides."""

    values = _default_values()
    path = config_path(root)
    if path.is_file():
        payload_obj = tomllib.loads(path.read_text(encoding="utf-8"))
        payload = cast("dict[str, object]", payload_obj)
        _apply_toml_payload(values=values, payload=payload, path=path)

    _apply_env_overrides(values)
    return _build_config(values)
