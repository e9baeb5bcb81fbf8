"""LCOV format parser.

LCOV tracefiles are plain text with one record per line:
- SF:<source file path>
- FN:<line>,<function name>
- FNDA:<execution count>,<function name>
- FNF:<functions found>
- FNH:<functions hit>
- DA:<line>,<execution count>[,<checksum>]
- LF:<lines found>
- LH:<lines hit>
- BRDA:<line>,<block>,<branch>,<taken or ->
- BRF:<branches found>
- BRH:<branches hit>
- end_of_record

Produced by llvm-cov export, gcov/lcov and geninfo. Record types not listed
above (TN, VER, FNL, FNA, ...) are skipped so newer dialects still load.
"""

import re
from pathlib import Path

import structlog

from lcovbridge.core.errors import CoverageIOError, LcovFormatError
from lcovbridge.coverage.models import (
    Branch,
    Function,
    FunctionExecution,
    Line,
    Report,
    SourceFile,
)

log = structlog.get_logger()

END_OF_RECORD = "end_of_record"
NOT_TAKEN = "-"

# Summary records -> Overview attribute
_OVERVIEW_FIELDS = {
    "FNF": "functions_found",
    "FNH": "functions_hit",
    "LF": "lines_found",
    "LH": "lines_hit",
    "BRF": "branches_found",
    "BRH": "branches_hit",
}

# Records that may start a tracefile
_RECORD_OPENERS = ("SF:", "TN:", "VER:")

# Optional sign, ASCII digits only
_INTEGER = re.compile(r"[+-]?[0-9]+")


class _LineParser:
    """Parses the fields of one record line, raising with its context."""

    __slots__ = ("line", "lineno")

    def __init__(self, line: str, lineno: int) -> None:
        self.line = line
        self.lineno = lineno

    def split(self, value: str, *, min_fields: int, max_fields: int) -> list[str]:
        parts = value.split(",")
        if not min_fields <= len(parts) <= max_fields:
            expected = str(min_fields) if min_fields == max_fields else f"{min_fields}-{max_fields}"
            raise LcovFormatError.field_count(self.line, self.lineno, expected)
        return parts

    def split_name(self, value: str) -> tuple[str, str]:
        """Split '<number>,<name>' pairs (FN, FNDA)."""
        parts = self.split(value, min_fields=2, max_fields=2)
        return parts[0], parts[1]

    def number(self, value: str) -> int:
        if not _INTEGER.fullmatch(value):
            raise LcovFormatError.invalid_number(self.line, self.lineno, value)
        return int(value)


class LcovParser:
    """Parser for LCOV tracefiles."""

    @property
    def format_id(self) -> str:
        return "lcov"

    def can_parse(self, data: bytes) -> bool:
        """Check that the first non-empty line opens an LCOV record."""
        head = data[:4096].decode("utf-8", errors="ignore")
        for raw in head.split("\n"):
            stripped = raw.strip()
            if not stripped or stripped.startswith("#"):
                continue
            return stripped.startswith(_RECORD_OPENERS)
        return False

    def parse(self, path: Path) -> Report:
        try:
            data = path.read_bytes()
        except OSError as e:
            raise CoverageIOError.read_failed(str(path), str(e)) from e
        return self.parse_bytes(data)

    def parse_bytes(self, data: bytes) -> Report:
        return self.parse_text(data.decode("utf-8", errors="replace"))

    def parse_text(self, text: str) -> Report:
        """Parse LCOV text into a Report.

        The first malformed line aborts the parse; nothing partial is returned.
        """
        report = Report()
        current = SourceFile()

        for lineno, raw in enumerate(text.split("\n"), start=1):
            line = raw.rstrip("\r")
            if not line:
                continue

            if line == END_OF_RECORD:
                report.source_files.append(current)
                current = SourceFile()
                continue

            prefix, sep, value = line.partition(":")
            if not sep:
                raise LcovFormatError.missing_separator(line, lineno)

            p = _LineParser(line, lineno)

            if prefix == "SF":
                current.name = value

            elif prefix in _OVERVIEW_FIELDS:
                setattr(current.overview, _OVERVIEW_FIELDS[prefix], p.number(value))

            elif prefix == "FN":
                line_no, name = p.split_name(value)
                current.function_information.append(Function(name=name, line=p.number(line_no)))

            elif prefix == "FNDA":
                count, name = p.split_name(value)
                current.function_executions.append(
                    FunctionExecution(name=name, executions=p.number(count))
                )

            elif prefix == "DA":
                # Optional third field is a checksum, which we ignore
                parts = p.split(value, min_fields=2, max_fields=3)
                current.line_information.append(
                    Line(number=p.number(parts[0]), executions=p.number(parts[1]))
                )

            elif prefix == "BRDA":
                line_no, block, number, taken = p.split(value, min_fields=4, max_fields=4)
                current.branch_information.append(
                    Branch(
                        line=p.number(line_no),
                        block=p.number(block),
                        number=p.number(number),
                        executions=0 if taken == NOT_TAKEN else p.number(taken),
                    )
                )

        # Records are only kept once end_of_record closes them
        if current != SourceFile():
            log.debug("lcov.unterminated_record", name=current.name)

        log.debug("lcov.parsed", source_files=len(report.source_files))
        return report
