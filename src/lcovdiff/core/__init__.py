"""Core module exports."""

from lcovdiff.core.errors import (
    ConfigError,
    ErrorCode,
    LcovDiffError,
    MergeError,
    ReportParseError,
)
from lcovdiff.core.logging import configure_logging, get_logger

__all__ = [
    # Errors
    "ConfigError",
    "ErrorCode",
    "LcovDiffError",
    "MergeError",
    "ReportParseError",
    # Logging
    "configure_logging",
    "get_logger",
]
