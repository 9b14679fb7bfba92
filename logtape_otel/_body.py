"""Conversion of templated message parts into log bodies."""

from collections.abc import Sequence
from typing import Any

from ._stringify import stringify
from ._types import UNDEFINED, RenderMode


def to_body(message: Sequence[Any], mode: RenderMode | str) -> list[Any]:
    """Render message parts into body fragments.

    Even indices are literal text and are kept as-is; odd indices are values
    and are stringified. The result has the same length as ``message``.
    """
    body: list[Any] = []
    for i in range(0, len(message), 2):
        body.append(message[i])
        if i + 1 >= len(message):
            break
        body.append(stringify(message[i + 1], mode))
    return body


def join_body(body: Sequence[Any]) -> str:
    """Join fragments into one string, spelling out ``None`` and ``UNDEFINED``."""
    return "".join(
        "undefined" if fragment is UNDEFINED else "null" if fragment is None else fragment for fragment in body
    )
