"""Coverage summaries for console display.

summarize() works on any canonical Report. summarize_jacoco_xml() reads
JaCoCo counters straight from the XML for callers that only want the table;
it shares the counter and naming helpers with the JaCoCo parser so both
label and count files identically.

Output schema for summary_to_dict:
{
    "total": {"functions_found": int, "functions_hit": int, ...},
    "files": [{"filename": str, "coverage": {...}}, ...]
}
"""

from __future__ import annotations

import json
from dataclasses import replace
from pathlib import Path
from typing import Any

import structlog
from rich.console import Console
from rich.table import Table

from lcovbridge.core.errors import CoverageIOError, JacocoXMLError
from lcovbridge.core.formatting import compress_path, format_ratio, prettify_path
from lcovbridge.coverage.models import Report, Summary
from lcovbridge.coverage.parsers.jacoco import (
    DEFAULT_SOURCE_ROOT,
    load_root,
    source_path,
    sourcefile_overview,
)

log = structlog.get_logger()

_COLUMNS = ("Functions Hit/Found", "Lines Hit/Found", "Branches Hit/Found")


def summarize(report: Report) -> Summary:
    """One row per source file plus the field-wise total."""
    summary = Summary()
    for sf in report.source_files:
        summary.add_file(sf.name, replace(sf.overview))

    log.debug("coverage.summary", summary=json.dumps(summary_to_dict(summary)))
    return summary


def summarize_jacoco_xml(
    source: bytes | Path,
    *,
    source_root: str = DEFAULT_SOURCE_ROOT,
) -> Summary:
    """Summarize a JaCoCo report without building a canonical Report.

    The table is a convenience view, so nothing here raises: read and parse
    failures are logged and an empty Summary comes back.
    """
    summary = Summary()

    if isinstance(source, Path):
        try:
            data = source.read_bytes()
        except OSError as e:
            err = CoverageIOError.read_failed(str(source), str(e))
            log.warning("jacoco.summary_failed", error=str(err))
            return summary
    else:
        data = source

    try:
        root = load_root(data)
    except JacocoXMLError as e:
        log.warning("jacoco.summary_failed", error=str(e))
        return summary

    if root is None:
        log.debug("jacoco.empty_report")
        return summary

    for package in root.iter("package"):
        package_name = package.get("name", "")
        for sourcefile in package.findall("sourcefile"):
            summary.add_file(
                source_path(package_name, sourcefile.get("name", ""), source_root),
                sourcefile_overview(sourcefile),
            )

    return summary


def summary_to_dict(summary: Summary) -> dict[str, Any]:
    """Structured form of a Summary, suitable for JSON serialization."""
    return {
        "total": summary.total.to_dict(),
        "files": [
            {"filename": row.filename, "coverage": row.coverage.to_dict()}
            for row in summary.files
        ],
    }


def summary_table(summary: Summary, *, base: Path | None = None) -> Table:
    """Build the coverage table: one row per file, then a totals row."""
    table = Table(title="Coverage Report", title_justify="left")
    table.add_column("File", overflow="fold")
    for column in _COLUMNS:
        table.add_column(column, justify="right", no_wrap=True)

    for row in summary.files:
        cov = row.coverage
        table.add_row(
            compress_path(prettify_path(row.filename, base)),
            format_ratio(cov.functions_hit, cov.functions_found),
            format_ratio(cov.lines_hit, cov.lines_found),
            format_ratio(cov.branches_hit, cov.branches_found),
        )

    total = summary.total
    table.add_section()
    table.add_row(
        "Total",
        format_ratio(total.functions_hit, total.functions_found, with_percent=False),
        format_ratio(total.lines_hit, total.lines_found, with_percent=False),
        format_ratio(total.branches_hit, total.branches_found, with_percent=False),
        style="bold",
    )
    return table


def print_summary(summary: Summary, console: Console | None = None) -> None:
    """Render the summary table to the console (stderr by default)."""
    console = console or Console(stderr=True)
    console.print()
    console.print(summary_table(summary))
    console.print()
