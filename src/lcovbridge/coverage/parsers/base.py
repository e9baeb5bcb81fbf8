"""Coverage parser protocol."""

from pathlib import Path
from typing import Protocol

from lcovbridge.coverage.models import Report


class CoverageParser(Protocol):
    """Protocol for coverage format parsers.

    Each parser handles one coverage format and converts it to the
    canonical Report model.
    """

    @property
    def format_id(self) -> str:
        """Format identifier (e.g., 'lcov', 'jacoco')."""
        ...

    def can_parse(self, data: bytes) -> bool:
        """Check whether the leading bytes look like this format."""
        ...

    def parse_bytes(self, data: bytes) -> Report:
        """Parse raw report bytes.

        Empty input yields an empty Report.

        Raises:
            CoverageParseError: If the data violates the format.
        """
        ...

    def parse(self, path: Path) -> Report:
        """Read a report file and parse it.

        Raises:
            CoverageIOError: If the file cannot be read.
            CoverageParseError: If the data violates the format.
        """
        ...
