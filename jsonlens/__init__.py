from .boundary import match_boundary
from .config import InspectConfig
from .errors import InputLimitError, JsonLensError
from .inspector import JsonLens, inspect_fragments
from .lenient import LenientParser, parse_lenient
from .models import (
    Boundary,
    ExtractedJson,
    Fragment,
    InspectedFragment,
    InspectionResult,
    ParsedNode,
    ParsedProperty,
)
from .nodes import UNDEFINED, build_node
from .report import best_effort_format, format_report
from .scanner import find_fragments, parse_strict, scan_fragments

__all__ = [
    "JsonLens",
    "InspectConfig",
    "JsonLensError",
    "InputLimitError",
    "match_boundary",
    "find_fragments",
    "scan_fragments",
    "parse_strict",
    "parse_lenient",
    "LenientParser",
    "build_node",
    "UNDEFINED",
    "inspect_fragments",
    "format_report",
    "best_effort_format",
    "Boundary",
    "Fragment",
    "ExtractedJson",
    "InspectedFragment",
    "InspectionResult",
    "ParsedNode",
    "ParsedProperty",
]
