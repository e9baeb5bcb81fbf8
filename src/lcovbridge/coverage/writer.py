"""LCOV tracefile writer.

Writes records in the fixed order the LCOV parser (and genhtml) read them:
SF, FN*, FNDA*, FNF, FNH, DA*, LF, LH, BRDA*, BRF, BRH, end_of_record.
"""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import structlog

from lcovbridge.core.errors import LcovWriteError
from lcovbridge.coverage.models import Branch, Report, SourceFile
from lcovbridge.coverage.parsers.lcov import END_OF_RECORD, NOT_TAKEN

log = structlog.get_logger()

LCOV_SUFFIX = ".lcov"


def _branch_record(branch: Branch) -> str:
    taken = NOT_TAKEN if branch.executions == 0 else str(branch.executions)
    return f"BRDA:{branch.line},{branch.block},{branch.number},{taken}"


def iter_records(sf: SourceFile) -> Iterator[str]:
    """Yield the record lines of one source file, without newlines."""
    ov = sf.overview
    yield f"SF:{sf.name}"

    for fn in sf.function_information:
        yield f"FN:{fn.line},{fn.name}"
    for fe in sf.function_executions:
        yield f"FNDA:{fe.executions},{fe.name}"
    yield f"FNF:{ov.functions_found}"
    yield f"FNH:{ov.functions_hit}"

    for line in sf.line_information:
        yield f"DA:{line.number},{line.executions}"
    yield f"LF:{ov.lines_found}"
    yield f"LH:{ov.lines_hit}"

    for branch in sf.branch_information:
        yield _branch_record(branch)
    yield f"BRF:{ov.branches_found}"
    yield f"BRH:{ov.branches_hit}"

    yield END_OF_RECORD


def render_lcov(report: Report) -> str:
    """Render a Report as LCOV text."""
    return "".join(f"{record}\n" for sf in report.source_files for record in iter_records(sf))


def lcov_path(path: Path | str) -> Path:
    """Append the .lcov suffix unless the path already carries it."""
    path = Path(path)
    if path.name.endswith(LCOV_SUFFIX):
        return path
    log.debug("lcov.suffix_appended", path=str(path))
    return path.with_name(path.name + LCOV_SUFFIX)


def write_lcov(report: Report, path: Path | str) -> Path | None:
    """Write report as an LCOV tracefile.

    An empty report produces no file at all.

    Returns:
        Path written to, or None when the report was empty.

    Raises:
        LcovWriteError: If the file cannot be created or written.
    """
    if report.is_empty:
        log.debug("lcov.empty_report_skipped")
        return None

    target = lcov_path(path)
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        # read/write: genhtml re-reads the tracefile
        with target.open("w+", encoding="utf-8", newline="\n") as f:
            f.write(render_lcov(report))
    except OSError as e:
        raise LcovWriteError.write_failed(str(target), str(e)) from e

    log.debug("lcov.written", path=str(target), source_files=len(report))
    return target
