"""Core module exports."""

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
from lcovbridge.core.logging import (
    clear_run_id,
    configure_logging,
    get_logger,
    get_run_id,
    set_run_id,
)

__all__ = [
    # Errors
    "ConfigError",
    "CoverageIOError",
    "CoverageParseError",
    "ErrorCode",
    "JacocoXMLError",
    "LcovBridgeError",
    "LcovFormatError",
    "LcovWriteError",
    # Logging
    "clear_run_id",
    "configure_logging",
    "get_logger",
    "get_run_id",
    "set_run_id",
]
