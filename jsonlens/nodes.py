from __future__ import annotations

from decimal import Decimal
from typing import Any

from .models import ParsedNode, ParsedProperty


class _Undefined:
    def __repr__(self) -> str:
        return "UNDEFINED"


UNDEFINED: Any = _Undefined()


def build_node(value: Any) -> ParsedNode:
    """Convert an already-parsed JSON value into a tree with no error flags."""
    if value is UNDEFINED:
        return ParsedNode(type="undefined")
    if value is None:
        return ParsedNode(type="null")
    if isinstance(value, bool):
        return ParsedNode(type="boolean", value=value)
    if isinstance(value, (int, float, Decimal)):
        return ParsedNode(type="number", value=value)
    if isinstance(value, str):
        return ParsedNode(type="string", value=value)
    if isinstance(value, dict):
        children = [
            ParsedProperty(key=str(key), value=build_node(item)) for key, item in value.items()
        ]
        return ParsedNode(type="object", children=children)
    if isinstance(value, (list, tuple)):
        return ParsedNode(type="array", items=[build_node(item) for item in value])

    return ParsedNode(type="string", value=str(value))
