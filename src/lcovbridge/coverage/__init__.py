"""Coverage conversion: parsing, LCOV writing and summaries.

Usage:
    from lcovbridge.coverage import parse_artifact, summarize, write_lcov

    # Parse a coverage artifact
    report = parse_artifact(Path("jacoco.xml"), format_id="jacoco")

    # Console table
    print_summary(summarize(report))

    # Tracefile for genhtml
    write_lcov(report, Path("out/report"))

Supported formats:
    - lcov: llvm-cov export, gcov/lcov
    - jacoco: Java (Maven/Gradle)
"""

from lcovbridge.coverage.models import (
    Branch,
    FileCoverage,
    Function,
    FunctionExecution,
    Line,
    Overview,
    Report,
    SourceFile,
    Summary,
)
from lcovbridge.coverage.parsers import (
    AUTO,
    PARSER_BY_FORMAT,
    PARSER_REGISTRY,
    CoverageParser,
    JacocoParser,
    LcovParser,
    detect_parser,
    get_parser,
    parse_artifact,
    parse_bytes,
)
from lcovbridge.coverage.summary import (
    print_summary,
    summarize,
    summarize_jacoco_xml,
    summary_table,
    summary_to_dict,
)
from lcovbridge.coverage.writer import LCOV_SUFFIX, lcov_path, render_lcov, write_lcov

__all__ = [
    # Models
    "Branch",
    "FileCoverage",
    "Function",
    "FunctionExecution",
    "Line",
    "Overview",
    "Report",
    "SourceFile",
    "Summary",
    # Parsers
    "AUTO",
    "CoverageParser",
    "JacocoParser",
    "LcovParser",
    "PARSER_BY_FORMAT",
    "PARSER_REGISTRY",
    "detect_parser",
    "get_parser",
    "parse_artifact",
    "parse_bytes",
    # Writer
    "LCOV_SUFFIX",
    "lcov_path",
    "render_lcov",
    "write_lcov",
    # Summary
    "print_summary",
    "summarize",
    "summarize_jacoco_xml",
    "summary_table",
    "summary_to_dict",
]
