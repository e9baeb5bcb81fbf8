"""lcovbridge error types with typed error codes.

Error code ranges:
- 2xxx: Config
- 3xxx: Coverage parsing
- 4xxx: Coverage I/O
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any


class ErrorCode(IntEnum):
    """Typed error codes for programmatic handling."""

    # Config (2xxx)
    CONFIG_PARSE_ERROR = 2001
    CONFIG_INVALID_VALUE = 2002

    # Coverage parsing (3xxx)
    COVERAGE_UNKNOWN_FORMAT = 3001
    LCOV_MISSING_SEPARATOR = 3101
    LCOV_FIELD_COUNT = 3102
    LCOV_INVALID_NUMBER = 3103
    JACOCO_INVALID_XML = 3201

    # Coverage I/O (4xxx)
    COVERAGE_READ_FAILED = 4001
    LCOV_WRITE_FAILED = 4002


@dataclass(frozen=True, slots=True)
class LcovBridgeError(Exception):
    """Base error with structured context."""

    code: ErrorCode
    message: str
    details: dict[str, Any] = field(default_factory=dict)

    @property
    def error_name(self) -> str:
        """String identifier for logging (e.g., 'LCOV_FIELD_COUNT')."""
        return self.code.name

    def to_dict(self) -> dict[str, Any]:
        """Serialize for JSON output."""
        return {
            "code": self.code.value,
            "error": self.error_name,
            "message": self.message,
            "details": self.details,
        }

    def __str__(self) -> str:
        return f"[{self.code.value}] {self.error_name}: {self.message}"


class ConfigError(LcovBridgeError):
    """Configuration-related errors."""

    @classmethod
    def parse_error(cls, path: str, reason: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_PARSE_ERROR,
            message=f"Failed to parse config at {path}: {reason}",
            details={"path": path, "reason": reason},
        )

    @classmethod
    def invalid_value(cls, field: str, value: Any, reason: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_INVALID_VALUE,
            message=f"Invalid value for '{field}': {reason}",
            details={"field": field, "value": str(value), "reason": reason},
        )


class CoverageParseError(LcovBridgeError):
    """Coverage data could not be turned into a report."""

    @classmethod
    def unknown_format(cls, format_id: str, valid: list[str]) -> "CoverageParseError":
        return cls(
            code=ErrorCode.COVERAGE_UNKNOWN_FORMAT,
            message=f"Unknown coverage format: {format_id!r}. Valid formats: {', '.join(valid)}",
            details={"format": format_id, "valid": valid},
        )

    @classmethod
    def undetected(cls, source: str) -> "CoverageParseError":
        return cls(
            code=ErrorCode.COVERAGE_UNKNOWN_FORMAT,
            message=f"Could not detect coverage format for: {source}",
            details={"source": source},
        )


class LcovFormatError(CoverageParseError):
    """A line of LCOV text violates the record grammar."""

    @classmethod
    def missing_separator(cls, line: str, lineno: int) -> "LcovFormatError":
        return cls(
            code=ErrorCode.LCOV_MISSING_SEPARATOR,
            message=f"'{line}' is not a valid lcov format (line {lineno})",
            details={"line": line, "lineno": lineno},
        )

    @classmethod
    def field_count(cls, line: str, lineno: int, expected: str) -> "LcovFormatError":
        return cls(
            code=ErrorCode.LCOV_FIELD_COUNT,
            message=(
                f"'{line}' is not a valid lcov format: "
                f"expected {expected} fields (line {lineno})"
            ),
            details={"line": line, "lineno": lineno, "expected": expected},
        )

    @classmethod
    def invalid_number(cls, line: str, lineno: int, value: str) -> "LcovFormatError":
        return cls(
            code=ErrorCode.LCOV_INVALID_NUMBER,
            message=(
                f"Failed to parse line in lcov report: {line} "
                f"({value!r} is not an integer, line {lineno})"
            ),
            details={"line": line, "lineno": lineno, "value": value},
        )


class JacocoXMLError(CoverageParseError):
    """JaCoCo report is not well-formed XML."""

    @classmethod
    def invalid_xml(cls, reason: str) -> "JacocoXMLError":
        return cls(
            code=ErrorCode.JACOCO_INVALID_XML,
            message=f"Unable to parse jacoco.xml report: {reason}",
            details={"reason": reason},
        )


class CoverageIOError(LcovBridgeError):
    """Coverage input could not be read."""

    @classmethod
    def read_failed(cls, path: str, reason: str) -> "CoverageIOError":
        return cls(
            code=ErrorCode.COVERAGE_READ_FAILED,
            message=f"Unable to read coverage report {path}: {reason}",
            details={"path": path, "reason": reason},
        )


class LcovWriteError(CoverageIOError):
    """LCOV output could not be written."""

    @classmethod
    def write_failed(cls, path: str, reason: str) -> "LcovWriteError":
        return cls(
            code=ErrorCode.LCOV_WRITE_FAILED,
            message=f"Failed to write to file '{path}': {reason}",
            details={"path": path, "reason": reason},
        )
