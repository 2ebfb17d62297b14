"""Config module exports."""

from lcovdiff.config.loader import CONFIG_FILENAME, load_config
from lcovdiff.config.models import (
    DiffConfig,
    LcovDiffConfig,
    LoggingConfig,
    LogOutputConfig,
)

__all__ = [
    "CONFIG_FILENAME",
    "load_config",
    "DiffConfig",
    "LcovDiffConfig",
    "LoggingConfig",
    "LogOutputConfig",
]
