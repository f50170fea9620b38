"""Recursive-descent parser that recovers from malformed JSON.

``parse_lenient`` never raises. Deviations from strict JSON are recorded on
the tree instead:

- an unquoted key, or a key with no colon after it, sets ``is_key_error`` on
  the property;
- an unquoted scalar becomes a ``string`` node with ``is_error`` set;
- an object or array that is never closed comes back with ``is_error`` set;
- a missing comma is skipped over without flagging anything.

A string whose closing quote is missing returns its partial text unflagged.
"""

from __future__ import annotations

import re

from .logging_config import get_logger
from .models import ParsedNode, ParsedProperty

logger = get_logger(__name__)

_NUMBER_START = frozenset("0123456789-.")
_NUMBER_CHARS = frozenset("0123456789eE.+-")
_UNQUOTED_STOP = frozenset(":,{}[]\"'")
_QUOTES = ("\"", "'")
_INT_RE = re.compile(r"-?\d+")


def parse_lenient(text: str) -> ParsedNode:
    reader = _Reader(text)
    reader.skip_whitespace()
    if reader.at_end():
        return ParsedNode(type="undefined")

    try:
        return reader.parse_value()
    except RecursionError:
        logger.warning("lenient parse fell back to raw text (%d chars): nesting too deep", len(text))
        return ParsedNode(type="string", value=text, is_error=True)


class LenientParser:
    """Stateless wrapper; each ``parse`` call uses its own reader."""

    def parse(self, text: str) -> ParsedNode:
        return parse_lenient(text)


class _Reader:
    def __init__(self, text: str) -> None:
        self.text = text
        self.index = 0

    def at_end(self) -> bool:
        return self.index >= len(self.text)

    def peek(self) -> str:
        return self.text[self.index] if self.index < len(self.text) else ""

    def skip_whitespace(self) -> None:
        while self.index < len(self.text) and self.text[self.index].isspace():
            self.index += 1

    def match(self, literal: str) -> bool:
        if self.text.startswith(literal, self.index):
            self.index += len(literal)
            return True
        return False

    def parse_value(self) -> ParsedNode:
        self.skip_whitespace()
        if self.at_end():
            return ParsedNode(type="undefined")

        char = self.peek()
        if char == "{":
            return self.parse_object()
        if char == "[":
            return self.parse_array()
        if char in _QUOTES:
            return ParsedNode(type="string", value=self.parse_string())
        if char == "t" and self.match("true"):
            return ParsedNode(type="boolean", value=True)
        if char == "f" and self.match("false"):
            return ParsedNode(type="boolean", value=False)
        if char == "n" and self.match("null"):
            return ParsedNode(type="null")
        if char in _NUMBER_START:
            return ParsedNode(type="number", value=self.parse_number())

        bare = self.parse_unquoted()
        if bare is None:
            return ParsedNode(type="undefined")
        return ParsedNode(type="string", value=bare, is_error=True)

    def parse_object(self) -> ParsedNode:
        children: list[ParsedProperty] = []
        self.index += 1

        while not self.at_end():
            self.skip_whitespace()
            if self.peek() == "}":
                self.index += 1
                return ParsedNode(type="object", children=children)

            is_key_error = False
            key = self.parse_string()
            if key is None:
                key = self.parse_unquoted()
                is_key_error = key is not None

            if key is None:
                # stray structural character where a key should be
                if self.peek() == "}":
                    self.index += 1
                    return ParsedNode(type="object", children=children)
                self.index += 1
                continue

            self.skip_whitespace()
            if self.peek() == ":":
                self.index += 1
            else:
                is_key_error = True

            value = self.parse_value()
            children.append(ParsedProperty(key=key, value=value, is_key_error=is_key_error))

            self.skip_whitespace()
            if self.peek() == ",":
                self.index += 1
            elif self.peek() == "}":
                self.index += 1
                return ParsedNode(type="object", children=children)

        return ParsedNode(type="object", children=children, is_error=True)

    def parse_array(self) -> ParsedNode:
        items: list[ParsedNode] = []
        self.index += 1

        while not self.at_end():
            self.skip_whitespace()
            if self.peek() == "]":
                self.index += 1
                return ParsedNode(type="array", items=items)

            before = self.index
            value = self.parse_value()
            if value.type == "undefined" and self.index == before:
                if self.at_end():
                    break
                if self.peek() not in ",]":
                    # stray structural character where a value should be
                    self.index += 1
                    continue
            items.append(value)

            self.skip_whitespace()
            if self.peek() == ",":
                self.index += 1
            elif self.peek() == "]":
                self.index += 1
                return ParsedNode(type="array", items=items)

        return ParsedNode(type="array", items=items, is_error=True)

    def parse_string(self) -> str | None:
        self.skip_whitespace()
        quote = self.peek()
        if quote not in _QUOTES:
            return None
        self.index += 1

        chars: list[str] = []
        escaped = False
        while not self.at_end():
            char = self.text[self.index]
            self.index += 1
            if escaped:
                chars.append(char)
                escaped = False
            elif char == "\\":
                escaped = True
            elif char == quote:
                return "".join(chars)
            else:
                chars.append(char)

        return "".join(chars)

    def parse_unquoted(self) -> str | None:
        self.skip_whitespace()
        start = self.index
        while not self.at_end():
            char = self.text[self.index]
            if char in _UNQUOTED_STOP or char.isspace():
                break
            self.index += 1
        if self.index == start:
            return None
        return self.text[start : self.index]

    def parse_number(self) -> int | float:
        start = self.index
        while not self.at_end() and self.text[self.index] in _NUMBER_CHARS:
            self.index += 1
        raw = self.text[start : self.index]

        try:
            if _INT_RE.fullmatch(raw):
                return int(raw)
            return float(raw)
        except ValueError:
            return 0
