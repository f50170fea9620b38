from __future__ import annotations

import warnings
from collections import Counter
from typing import Any

from .config import InspectConfig
from .errors import InputLimitError
from .lenient import parse_lenient
from .logging_config import get_logger
from .models import ExtractedJson, InspectedFragment, InspectionResult, ParsedNode
from .nodes import build_node
from .report import format_report
from .scanner import scan_fragments

logger = get_logger(__name__)


def inspect_fragments(extracted: list[ExtractedJson]) -> list[InspectedFragment]:
    inspected: list[InspectedFragment] = []
    for item in extracted:
        if item.kind == "valid":
            tree = _build_valid_tree(item)
        else:
            tree = parse_lenient(item.text)
        inspected.append(
            InspectedFragment(
                kind=item.kind,
                text=item.text,
                tree=tree,
                diagnostic=item.diagnostic,
                start_offset=item.start_offset,
                end_offset=item.end_offset,
            )
        )
    return inspected


def _build_valid_tree(item: ExtractedJson) -> ParsedNode:
    try:
        return build_node(item.parsed_value)
    except RecursionError:
        logger.warning(
            "tree build fell back to raw text at offset %d: nesting too deep", item.start_offset
        )
        return ParsedNode(type="string", value=item.text, is_error=True)


class JsonLens:
    def __init__(self, config: InspectConfig | None = None) -> None:
        self.config = config or InspectConfig()

    def extract(self, text: str) -> tuple[list[ExtractedJson], dict[str, Any]]:
        """Scan ``text`` according to the config and return fragments plus metadata.

        Whole-text mode raises ``InputLimitError`` when ``max_chars`` is exceeded.
        Per-line mode skips over-long lines with a warning instead.
        """
        warnings_list: list[str] = []
        metadata: dict[str, Any] = {
            "strict_closers": self.config.strict_closers,
            "per_line": self.config.per_line,
        }

        if self.config.per_line:
            extracted, lines_scanned = self._extract_lines(text, warnings_list)
            metadata["lines_scanned"] = lines_scanned
        else:
            self._check_limit(text)
            extracted = scan_fragments(text, strict_closers=self.config.strict_closers)

        counts = Counter(item.kind for item in extracted)
        metadata["fragment_count"] = len(extracted)
        metadata["counts"] = {kind: counts.get(kind, 0) for kind in ("valid", "invalid", "incomplete")}
        if warnings_list:
            metadata["warnings"] = warnings_list

        logger.debug("extracted %d fragments (%s)", len(extracted), metadata["counts"])
        return extracted, metadata

    def inspect(self, text: str) -> InspectionResult:
        extracted, metadata = self.extract(text)
        return InspectionResult(
            source=text,
            fragments=inspect_fragments(extracted),
            metadata=metadata,
        )

    def render_report(self, text: str) -> str:
        extracted, _ = self.extract(text)
        return format_report(text, extracted, indent=self.config.indent)

    def _check_limit(self, text: str) -> None:
        limit = self.config.max_chars
        if limit is not None and len(text) > limit:
            raise InputLimitError(len(text), limit)

    def _extract_lines(
        self,
        text: str,
        warnings_list: list[str],
    ) -> tuple[list[ExtractedJson], int]:
        extracted: list[ExtractedJson] = []
        lines_scanned = 0
        offset = 0

        for line_number, line in enumerate(text.splitlines(keepends=True), start=1):
            line_start = offset
            offset += len(line)
            content = line.rstrip("\r\n")
            if not content.strip():
                continue

            try:
                self._check_limit(content)
            except InputLimitError as exc:
                warning_message = f"Line {line_number} skipped: {exc}"
                warnings.warn(warning_message, RuntimeWarning, stacklevel=3)
                warnings_list.append(warning_message)
                continue

            lines_scanned += 1
            for item in scan_fragments(content, strict_closers=self.config.strict_closers):
                extracted.append(
                    item.model_copy(
                        update={
                            "start_offset": item.start_offset + line_start,
                            "end_offset": item.end_offset + line_start,
                        }
                    )
                )

        return extracted, lines_scanned
