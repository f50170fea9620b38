from __future__ import annotations

import json

from .models import ExtractedJson

_BANNERS = {
    "invalid": "// [INVALID JSON]",
    "incomplete": "// [INCOMPLETE JSON]",
}


def format_report(source: str, extracted: list[ExtractedJson], indent: int = 2) -> str:
    """Render the source followed by one pretty-printed block per fragment.

    Valid fragments are re-serialized; the rest are tagged with a banner and
    re-indented as-is so the malformed spot stays visible.
    """
    blocks = [source.rstrip() + "\n\n\n"]

    for item in extracted:
        if item.kind == "valid":
            blocks.append(_dump_valid(item, indent) + "\n\n")
        else:
            blocks.append(_BANNERS[item.kind] + "\n")
            blocks.append(best_effort_format(item.text, indent=indent) + "\n\n")

    return "".join(blocks)


def _dump_valid(item: ExtractedJson, indent: int) -> str:
    try:
        return json.dumps(item.parsed_value, indent=indent, ensure_ascii=False)
    except (TypeError, ValueError, RecursionError):
        # huge integers and very deep nesting keep their source text
        return best_effort_format(item.text, indent=indent)


def best_effort_format(text: str, indent: int = 2) -> str:
    pad = " " * indent
    output: list[str] = []
    level = 0
    quote = ""
    escaped = False

    for char in text:
        if escaped:
            output.append(char)
            escaped = False
            continue

        if char == "\\":
            output.append(char)
            escaped = True
            continue

        if quote:
            output.append(char)
            if char == quote:
                quote = ""
            continue

        if char in "\"'":
            quote = char
            output.append(char)
        elif char in "{[":
            level += 1
            output.append(char + "\n" + pad * level)
        elif char in "}]":
            level = max(0, level - 1)
            output.append("\n" + pad * level + char)
        elif char == ",":
            output.append(char + "\n" + pad * level)
        elif char == ":":
            output.append(": ")
        elif char.isspace():
            continue
        else:
            output.append(char)

    return "".join(output)
