"""Rendering of arbitrary values into attribute-safe text."""

from datetime import date
from pprint import pformat
from typing import Any

from pydantic_core import to_json

from ._types import UNDEFINED, RenderMode


def _inspect(value: Any) -> str:
    """Human-readable, possibly multi-line representation."""
    return pformat(value)


def _to_json(value: Any) -> str:
    """Compact JSON. Unknown types are written as their ``str()``; cycles still raise."""
    return to_json(value, fallback=str).decode()


def stringify(value: Any, mode: RenderMode | str) -> Any:
    """Convert a value to a string, passing ``None``, ``UNDEFINED`` and strings through.

    Under ``inspect`` every other value is rendered with ``pprint.pformat``.
    Under ``json`` booleans use their JSON spelling, numbers use ``str()``,
    dates use ISO-8601 and everything else is serialized as compact JSON.
    """
    if value is None or value is UNDEFINED or isinstance(value, str):
        return value
    if mode == RenderMode.INSPECT:
        return _inspect(value)
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return str(value)
    if isinstance(value, date):
        return value.isoformat()
    return _to_json(value)
