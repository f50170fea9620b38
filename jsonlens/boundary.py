from __future__ import annotations

from .models import Boundary

OPENERS = "{["
CLOSERS = "}]"
_CLOSER_FOR = {"{": "}", "[": "]"}


def match_boundary(text: str, start: int, strict_closers: bool = False) -> Boundary:
    """Find where the bracketed region opened at ``start`` ends.

    Brackets inside double-quoted strings are ignored and a backslash always
    skips the following character. By default any closer balances any opener;
    with ``strict_closers`` a closer of the wrong kind ends the region early.
    If the text runs out first, the boundary is incomplete and ``end_offset``
    is ``len(text)``.
    """
    expected: list[str] = []
    depth = 0
    in_string = False
    escaped = False

    for idx in range(start, len(text)):
        char = text[idx]

        if escaped:
            escaped = False
            continue

        if char == "\\":
            escaped = True
            continue

        if char == '"':
            in_string = not in_string
            continue

        if in_string:
            continue

        if char in OPENERS:
            depth += 1
            expected.append(_CLOSER_FOR[char])
        elif char in CLOSERS:
            depth -= 1
            if strict_closers:
                if not expected or expected.pop() != char:
                    return Boundary(end_offset=idx, complete=True)
            if depth == 0:
                return Boundary(end_offset=idx, complete=True)

    return Boundary(end_offset=len(text), complete=False)
