"""Serialization helpers for structured value rendering."""

from __future__ import annotations

import json
import math
from dataclasses import asdict, is_dataclass
from pathlib import Path
from typing import Any, cast


def to_jsonable(value: Any) -> Any:
    """Convert supported values to JSON-serializable payloads."""

    if is_dataclass(value) and not isinstance(value, type):
        return to_jsonable(asdict(value))
    if isinstance(value, Path):
        return str(value)
    if isinstance(value, float) and not math.isfinite(value):
        return None
    if isinstance(value, dict):
        typed_dict = cast("dict[object, object]", value)
        return {str(key): to_jsonable(item) for key, item in typed_dict.items()}
    if isinstance(value, (list, tuple, set)):
        typed_seq = cast("list[object] | tuple[object, ...] | set[object]", value)
        return [to_jsonable(item) for item in typed_seq]
    return value


def to_compact_json(value: Any) -> str:
    """Serialize like `JSON.stringify`: no whitespace, non-ASCII kept as-is.

    Raises `TypeError`/`ValueError` when the payload cannot be serialized.
    """

    return json.dumps(to_jsonable(value), separators=(",", ":"), ensure_ascii=False)
