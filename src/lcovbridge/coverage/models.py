"""Canonical coverage data model.

Every parser produces a Report; the LCOV writer and the summary builder
consume one. Element records are immutable, containers are mutable while a
parser fills them in.

Overview counts are carried alongside the per-item lists rather than derived
from them: LCOV input states them explicitly (LF/LH, ...) and JaCoCo input
states them as counters, and neither is re-checked against the lists.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields


@dataclass(frozen=True, slots=True)
class Function:
    """Declared function site (FN record)."""

    name: str
    line: int


@dataclass(frozen=True, slots=True)
class FunctionExecution:
    """How often a named function ran (FNDA record)."""

    name: str
    executions: int


@dataclass(frozen=True, slots=True)
class Line:
    """Instrumented line and its hit count (DA record)."""

    number: int
    executions: int


@dataclass(frozen=True, slots=True)
class Branch:
    """Single branch of a decision point (BRDA record).

    ``block`` groups the branches of one decision, ``number`` tells them
    apart. A branch that was never taken has ``executions == 0``.
    """

    line: int
    block: int
    number: int
    executions: int


@dataclass(slots=True)
class Overview:
    """Found/hit counts for functions, lines and branches."""

    functions_found: int = 0
    functions_hit: int = 0
    lines_found: int = 0
    lines_hit: int = 0
    branches_found: int = 0
    branches_hit: int = 0

    def __add__(self, other: Overview) -> Overview:
        if not isinstance(other, Overview):
            return NotImplemented
        return Overview(
            **{f.name: getattr(self, f.name) + getattr(other, f.name) for f in fields(self)}
        )

    def add(self, other: Overview) -> None:
        """Accumulate other into self in place."""
        for f in fields(self):
            setattr(self, f.name, getattr(self, f.name) + getattr(other, f.name))

    def to_dict(self) -> dict[str, int]:
        return {f.name: getattr(self, f.name) for f in fields(self)}


@dataclass(slots=True)
class SourceFile:
    """Coverage data for one source file record."""

    name: str = ""
    function_information: list[Function] = field(default_factory=list)
    function_executions: list[FunctionExecution] = field(default_factory=list)
    line_information: list[Line] = field(default_factory=list)
    branch_information: list[Branch] = field(default_factory=list)
    overview: Overview = field(default_factory=Overview)


@dataclass(slots=True)
class Report:
    """Ordered source file records, in parse order.

    The same file name may appear more than once; records are never merged.
    """

    source_files: list[SourceFile] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.source_files)

    @property
    def is_empty(self) -> bool:
        return not self.source_files


@dataclass(slots=True)
class FileCoverage:
    """One row of a Summary."""

    filename: str
    coverage: Overview = field(default_factory=Overview)


@dataclass(slots=True)
class Summary:
    """Per-file overviews plus their field-wise total."""

    total: Overview = field(default_factory=Overview)
    files: list[FileCoverage] = field(default_factory=list)

    def add_file(self, filename: str, coverage: Overview) -> FileCoverage:
        """Append a row and fold it into the total."""
        row = FileCoverage(filename=filename, coverage=coverage)
        self.files.append(row)
        self.total.add(coverage)
        return row
