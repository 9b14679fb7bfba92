"""Brace-style message templates (``"Hello {name}"``).

``{name}`` interpolates a property, ``{{`` and ``}}`` are literal braces.
Parsing always yields alternating literal/value parts with literals at the
even indices, which is the message shape the sink consumes.
"""

from collections.abc import Mapping
from typing import Any

from ._types import UNDEFINED


def escape_template(text: str) -> str:
    """Double every brace so ``text`` is never read as a placeholder."""
    return text.replace("{", "{{").replace("}", "}}")


def _lookup(properties: Mapping[str, Any], name: str) -> Any:
    if name in properties:
        return properties[name]
    stripped = name.strip()
    if stripped in properties:
        return properties[stripped]
    return UNDEFINED


def parse_message_template(template: str, properties: Mapping[str, Any]) -> tuple[Any, ...]:
    """Split a template into message parts, resolving placeholders from ``properties``.

    Example:
        >>> parse_message_template("user {id} logged {{in}}", {"id": 7})
        ('user ', 7, ' logged {in}')
    """
    parts: list[Any] = []
    literal: list[str] = []
    i = 0
    length = len(template)
    while i < length:
        char = template[i]
        if char == "{":
            if template.startswith("{{", i):
                literal.append("{")
                i += 2
                continue
            close = template.find("}", i + 1)
            if close == -1:
                # Unterminated placeholder stays literal
                literal.append(template[i:])
                break
            parts.append("".join(literal))
            parts.append(_lookup(properties, template[i + 1 : close]))
            literal = []
            i = close + 1
            continue
        if char == "}" and template.startswith("}}", i):
            literal.append("}")
            i += 2
            continue
        literal.append(char)
        i += 1
    parts.append("".join(literal))
    return tuple(parts)
