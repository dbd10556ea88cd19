"""Adapters – JSON encoding of dismissible values."""
from __future__ import annotations

import json
from typing import Any

from persistent_dismissible.kernel.errors import SerializationError


def dumps(value: Any) -> str:
    try:
        return json.dumps(value, separators=(",", ":"))
    except (TypeError, ValueError) as exc:
        raise SerializationError(
            f"Dismissible value of type {type(value).__name__} is not JSON serialisable",
            payload_type=type(value).__name__,
            cause=exc,
        ) from exc


def ensure_serialisable(value: Any) -> None:
    """Raise :class:`SerializationError` unless *value* can be stored as JSON."""
    dumps(value)


def loads(raw: str | bytes) -> Any:
    try:
        return json.loads(raw)
    except ValueError as exc:
        raise SerializationError("Stored dismissible value is not valid JSON", cause=exc) from exc


__all__ = ["dumps", "ensure_serialisable", "loads"]
