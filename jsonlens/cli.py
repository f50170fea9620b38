from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Any

from pydantic import ValidationError as PydanticValidationError
from pydantic_core import PydanticSerializationError

from .config import InspectConfig
from .errors import JsonLensError
from .inspector import JsonLens, inspect_fragments
from .logging_config import setup_logging
from .models import ExtractedJson, InspectionResult
from .report import format_report


def build_cli() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="jsonlens",
        description="Find and inspect JSON fragments embedded in free-form text",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    inspect_cmd = subparsers.add_parser("inspect", help="Extract JSON fragments from text")
    inspect_cmd.add_argument("file", nargs="?", default="-", help="Input file, or '-' for stdin")
    inspect_cmd.add_argument(
        "--output",
        dest="output_format",
        choices=["report", "json"],
        default="report",
    )
    inspect_cmd.add_argument("--indent", type=int, default=2)
    inspect_cmd.add_argument("--max-chars", type=int, default=None)
    inspect_cmd.add_argument(
        "--per-line",
        action="store_true",
        help="Scan each line on its own; --max-chars then applies per line.",
    )
    inspect_cmd.add_argument(
        "--strict-closers",
        action="store_true",
        help="End a fragment at the first closer that does not match its opener.",
    )
    inspect_cmd.add_argument("--verbose", action="store_true")

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_cli()
    args = parser.parse_args(argv)

    if args.command == "inspect":
        return _run_inspect(args)

    parser.error(f"Unsupported command: {args.command}")
    return 2


def _run_inspect(args: argparse.Namespace) -> int:
    setup_logging(logging.DEBUG if args.verbose else logging.WARNING)

    try:
        config = InspectConfig(
            max_chars=args.max_chars,
            strict_closers=args.strict_closers,
            indent=args.indent,
            output_format=args.output_format,
            per_line=args.per_line,
        )
        text = _read_input(args.file)
        if not text.strip():
            print("No text to process", file=sys.stderr)
            return 1
        extracted, metadata = JsonLens(config).extract(text)
        if not extracted:
            print("No JSON found", file=sys.stderr)
            return 1
        output = _render(text, extracted, metadata, config)
    except (
        JsonLensError,
        OSError,
        ValueError,
        RecursionError,
        PydanticValidationError,
        PydanticSerializationError,
    ) as exc:
        print(f"jsonlens error: {exc}", file=sys.stderr)
        return 2

    print(output, end="")

    return 0


def _render(
    text: str,
    extracted: list[ExtractedJson],
    metadata: dict[str, Any],
    config: InspectConfig,
) -> str:
    if config.output_format == "json":
        result = InspectionResult(
            source=text,
            fragments=inspect_fragments(extracted),
            metadata=metadata,
        )
        return result.model_dump_json(indent=2) + "\n"
    return format_report(text, extracted, indent=config.indent)


def _read_input(source: str) -> str:
    if source == "-":
        return sys.stdin.read()
    return Path(source).read_text(encoding="utf-8")


if __name__ == "__main__":
    raise SystemExit(main())
