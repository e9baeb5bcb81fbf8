"""Config module exports."""

from lcovbridge.config.loader import CONFIG_FILE_NAME, load_config
from lcovbridge.config.models import (
    CoverageConfig,
    LcovBridgeConfig,
    LoggingConfig,
    LogOutputConfig,
)

__all__ = [
    "CONFIG_FILE_NAME",
    "load_config",
    "CoverageConfig",
    "LcovBridgeConfig",
    "LoggingConfig",
    "LogOutputConfig",
]
