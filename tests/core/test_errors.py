"""Tests for error types and codes."""

import pytest

from lcovbridge.core.errors import (
    ConfigError,
    CoverageIOError,
    CoverageParseError,
    ErrorCode,
    JacocoXMLError,
    LcovBridgeError,
    LcovFormatError,
    LcovWriteError,
)


class TestErrorCode:
    """Error code value tests."""

    @pytest.mark.parametrize(
        ("code", "expected_range"),
        [
            (ErrorCode.CONFIG_PARSE_ERROR, 2000),
            (ErrorCode.CONFIG_INVALID_VALUE, 2000),
            (ErrorCode.LCOV_MISSING_SEPARATOR, 3000),
            (ErrorCode.JACOCO_INVALID_XML, 3000),
            (ErrorCode.COVERAGE_READ_FAILED, 4000),
            (ErrorCode.LCOV_WRITE_FAILED, 4000),
        ],
    )
    def test_given_error_code_when_checked_then_in_correct_range(
        self, code: ErrorCode, expected_range: int
    ) -> None:
        """Error codes fall within their designated numeric range."""
        assert expected_range <= code.value < expected_range + 1000


class TestLcovBridgeError:
    """Base error behavior tests."""

    def test_given_error_when_to_dict_then_serializes_all_fields(self) -> None:
        """Error serializes to dict with all required fields."""
        # Given
        error = LcovBridgeError(
            code=ErrorCode.CONFIG_PARSE_ERROR,
            message="Test message",
            details={"key": "value"},
        )

        # When
        result = error.to_dict()

        # Then
        assert result == {
            "code": 2001,
            "error": "CONFIG_PARSE_ERROR",
            "message": "Test message",
            "details": {"key": "value"},
        }

    def test_given_error_when_str_then_includes_code_and_message(self) -> None:
        error = CoverageIOError.read_failed("/tmp/lcov.info", "No such file")
        assert str(error) == (
            "[4001] COVERAGE_READ_FAILED: "
            "Unable to read coverage report /tmp/lcov.info: No such file"
        )
        assert error.details == {"path": "/tmp/lcov.info", "reason": "No such file"}

    def test_given_error_when_raised_then_catchable_as_exception(self) -> None:
        with pytest.raises(Exception, match="Config file"):
            raise ConfigError.parse_error("/x.yaml", "Config file broken")


class TestCoverageErrors:
    """Coverage error hierarchy."""

    def test_format_errors_are_parse_errors(self) -> None:
        err = LcovFormatError.missing_separator("123", 4)
        assert isinstance(err, CoverageParseError)
        assert err.details == {"line": "123", "lineno": 4}

    def test_xml_errors_are_parse_errors(self) -> None:
        err = JacocoXMLError.invalid_xml("not well-formed")
        assert isinstance(err, CoverageParseError)
        assert "not well-formed" in err.message

    def test_write_errors_are_io_errors(self) -> None:
        err = LcovWriteError.write_failed("/out/report.lcov", "Permission denied")
        assert isinstance(err, CoverageIOError)
        assert err.code == ErrorCode.LCOV_WRITE_FAILED
        assert err.error_name == "LCOV_WRITE_FAILED"

    def test_field_count_message(self) -> None:
        err = LcovFormatError.field_count("DA:1", 3, "2-3")
        assert "expected 2-3 fields" in err.message
        assert err.code == ErrorCode.LCOV_FIELD_COUNT
