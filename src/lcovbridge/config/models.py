"""Pydantic configuration models with env var support.

Configuration Hierarchy (highest to lowest precedence):
1. Direct kwargs to load_config()
2. Environment variables (LCOVBRIDGE__SECTION__KEY)
3. Project YAML (.lcovbridge.yaml)
4. Built-in defaults (this file)

Examples:
    LCOVBRIDGE__LOGGING__LEVEL=DEBUG
    LCOVBRIDGE__COVERAGE__JAVA_SOURCE_ROOT=app/src/main/java
"""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class LogOutputConfig(BaseModel):
    """Single logging output configuration."""

    format: Literal["json", "console"] = "console"
    destination: str = "stderr"  # stderr, stdout, or absolute file path
    level: LogLevel | None = None  # Inherits from parent if None

    @field_validator("destination")
    @classmethod
    def validate_destination(cls, v: str) -> str:
        if v in ("stderr", "stdout"):
            return v
        path = Path(v).expanduser()
        if not path.is_absolute():
            raise ValueError(f"File destination must be absolute path: {v}")
        return str(path)


class LoggingConfig(BaseModel):
    """Logging configuration.

    Env vars:
        LCOVBRIDGE__LOGGING__LEVEL: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """

    level: LogLevel = Field(
        default="INFO",
        description="Root log level.",
    )
    outputs: list[LogOutputConfig] = Field(default_factory=lambda: [LogOutputConfig()])


class CoverageConfig(BaseModel):
    """Coverage conversion configuration.

    Env vars:
        LCOVBRIDGE__COVERAGE__JAVA_SOURCE_ROOT: Prefix for JaCoCo source paths
        LCOVBRIDGE__COVERAGE__OUTPUT_NAME: Default LCOV file name (without suffix)
    """

    java_source_root: str = Field(
        default="src/main/java",
        description="Directory JaCoCo package paths are resolved against. "
        "HTML generators map report paths to files through this prefix.",
    )
    output_name: str = Field(
        default="report",
        description="Default LCOV output file name; '.lcov' is appended.",
    )

    @field_validator("java_source_root")
    @classmethod
    def normalize_source_root(cls, v: str) -> str:
        return v.replace("\\", "/").rstrip("/")

    @field_validator("output_name")
    @classmethod
    def validate_output_name(cls, v: str) -> str:
        if not v or "/" in v:
            raise ValueError(f"Output name must be a plain file name: {v!r}")
        return v


class LcovBridgeConfig(BaseModel):
    """Root configuration model."""

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    coverage: CoverageConfig = Field(default_factory=CoverageConfig)
