"""Coverage parser registry and auto-detection.

This module provides:
- PARSER_REGISTRY: All available parsers
- get_parser: Look up a parser by format id
- detect_parser: Auto-detect format from report bytes
- parse_bytes / parse_artifact: Convenience entry points
"""

from collections.abc import Sequence
from pathlib import Path

from lcovbridge.core.errors import CoverageIOError, CoverageParseError
from lcovbridge.coverage.models import Report

from .base import CoverageParser
from .jacoco import DEFAULT_SOURCE_ROOT, JacocoParser
from .lcov import LcovParser

AUTO = "auto"

# Parser registry - order matters for detection priority
PARSER_REGISTRY: Sequence[CoverageParser] = (
    JacocoParser(),  # <report> XML with counters
    LcovParser(),  # LCOV text (last text fallback)
)

# Format ID to parser mapping
PARSER_BY_FORMAT: dict[str, CoverageParser] = {p.format_id: p for p in PARSER_REGISTRY}

__all__ = [
    "AUTO",
    "PARSER_REGISTRY",
    "PARSER_BY_FORMAT",
    "CoverageParser",
    "JacocoParser",
    "LcovParser",
    "detect_parser",
    "get_parser",
    "parse_artifact",
    "parse_bytes",
]


def get_parser(format_id: str, *, source_root: str = DEFAULT_SOURCE_ROOT) -> CoverageParser:
    """Return the parser for format_id.

    Raises:
        CoverageParseError: If the format is unknown.
    """
    if format_id == "jacoco" and source_root != DEFAULT_SOURCE_ROOT:
        return JacocoParser(source_root=source_root)
    parser = PARSER_BY_FORMAT.get(format_id)
    if parser is None:
        raise CoverageParseError.unknown_format(format_id, sorted(PARSER_BY_FORMAT))
    return parser


def detect_parser(data: bytes) -> CoverageParser | None:
    """Return the first parser in registry order that claims the data."""
    for parser in PARSER_REGISTRY:
        if parser.can_parse(data):
            return parser
    return None


def parse_bytes(
    data: bytes,
    *,
    format_id: str = AUTO,
    source_root: str = DEFAULT_SOURCE_ROOT,
    source: str = "<bytes>",
) -> Report:
    """Parse report bytes into a canonical Report.

    Args:
        data: Raw report contents.
        format_id: "lcov", "jacoco", or "auto" to sniff the content.
        source_root: Root JaCoCo package paths are anchored at.
        source: Label for error messages.

    Raises:
        CoverageParseError: If the format is unknown or the data is malformed.
    """
    if format_id == AUTO:
        if not data.strip():
            return Report()
        detected = detect_parser(data)
        if detected is None:
            raise CoverageParseError.undetected(source)
        format_id = detected.format_id
    return get_parser(format_id, source_root=source_root).parse_bytes(data)


def parse_artifact(
    path: Path,
    *,
    format_id: str = AUTO,
    source_root: str = DEFAULT_SOURCE_ROOT,
) -> Report:
    """Read a coverage report file and parse it.

    Raises:
        CoverageIOError: If the file cannot be read.
        CoverageParseError: If the format is unknown or the data is malformed.
    """
    try:
        data = path.read_bytes()
    except OSError as e:
        raise CoverageIOError.read_failed(str(path), str(e)) from e
    return parse_bytes(data, format_id=format_id, source_root=source_root, source=str(path))
