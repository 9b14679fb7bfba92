"""Conversion of a record's property bag into OpenTelemetry attributes."""

from collections.abc import Mapping, Sequence
from typing import Any

from ._stringify import stringify
from ._types import UNDEFINED, RenderMode

ATTRIBUTE_PREFIX = "attributes."

_PRIMITIVE_TYPES = (str, bool, int, float)


def _is_homogeneous(values: Sequence[Any]) -> bool:
    """Whether every non-null element shares one primitive type.

    Exact types are compared, so ``True`` and ``1`` count as different.
    """
    seen: type | None = None
    for value in values:
        if value is None or value is UNDEFINED:
            continue
        kind = type(value)
        if kind not in _PRIMITIVE_TYPES:
            return False
        if seen is None:
            seen = kind
        elif kind is not seen:
            return False
    return True


def to_attributes(properties: Mapping[str, Any], mode: RenderMode | str) -> dict[str, Any]:
    """Flatten properties into ``attributes.<name>`` keys.

    ``None``/``UNDEFINED`` values are dropped. Homogeneous primitive arrays are
    kept verbatim; any other array has every element stringified.
    """
    attributes: dict[str, Any] = {}
    for name, value in properties.items():
        if value is None or value is UNDEFINED:
            continue
        key = f"{ATTRIBUTE_PREFIX}{name}"
        if isinstance(value, (list, tuple)):
            if _is_homogeneous(value):
                attributes[key] = value
            else:
                attributes[key] = [stringify(item, mode) for item in value]
            continue
        encoded = stringify(value, mode)
        if encoded is None or encoded is UNDEFINED:
            continue
        attributes[key] = encoded
    return attributes
