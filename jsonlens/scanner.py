from __future__ import annotations

import json
from decimal import Decimal
from typing import Any

from .boundary import match_boundary
from .logging_config import get_logger
from .models import ExtractedJson, Fragment

logger = get_logger(__name__)


def scan_fragments(text: str, strict_closers: bool = False) -> list[ExtractedJson]:
    extracted: list[ExtractedJson] = []

    for fragment in find_fragments(text, strict_closers=strict_closers):
        if not fragment.complete:
            extracted.append(
                ExtractedJson(
                    kind="incomplete",
                    text=fragment.text,
                    start_offset=fragment.start_offset,
                    end_offset=fragment.end_offset,
                )
            )
            logger.debug("incomplete fragment at %d", fragment.start_offset)
            continue

        try:
            parsed = parse_strict(fragment.text)
        except (ValueError, RecursionError) as exc:
            extracted.append(
                ExtractedJson(
                    kind="invalid",
                    text=fragment.text,
                    start_offset=fragment.start_offset,
                    end_offset=fragment.end_offset,
                    diagnostic=_describe_error(exc),
                )
            )
            logger.debug(
                "invalid fragment at %d-%d: %s",
                fragment.start_offset,
                fragment.end_offset,
                exc,
            )
            continue

        extracted.append(
            ExtractedJson(
                kind="valid",
                text=fragment.text,
                start_offset=fragment.start_offset,
                end_offset=fragment.end_offset,
                parsed_value=parsed,
            )
        )
        logger.debug("valid fragment at %d-%d", fragment.start_offset, fragment.end_offset)

    return extracted


def find_fragments(text: str, strict_closers: bool = False) -> list[Fragment]:
    fragments: list[Fragment] = []
    cursor = 0

    while cursor < len(text):
        start = _next_opener(text, cursor)
        if start is None:
            break

        boundary = match_boundary(text, start, strict_closers=strict_closers)
        if boundary.complete:
            fragment_text = text[start : boundary.end_offset + 1]
        else:
            fragment_text = text[start:]

        fragments.append(
            Fragment(
                text=fragment_text,
                start_offset=start,
                end_offset=boundary.end_offset,
                complete=boundary.complete,
            )
        )
        cursor = boundary.end_offset + 1

    return fragments


def parse_strict(text: str) -> Any:
    """Parse ``text`` as strict JSON, rejecting NaN and Infinity literals."""
    return json.loads(text, parse_int=_parse_int, parse_constant=_reject_constant)


def _parse_int(raw: str) -> int | Decimal:
    try:
        return int(raw)
    except ValueError:
        # beyond the interpreter's int string-conversion limit
        return Decimal(raw)


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Non-standard JSON constant: {name}")


def _describe_error(exc: BaseException) -> str:
    if isinstance(exc, RecursionError):
        return "Nesting too deep to parse"
    return str(exc)


def _next_opener(text: str, cursor: int) -> int | None:
    brace = text.find("{", cursor)
    bracket = text.find("[", cursor)
    candidates = [idx for idx in (brace, bracket) if idx != -1]
    if not candidates:
        return None
    return min(candidates)
