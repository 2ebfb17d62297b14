"""Pydantic configuration models with env var support.

Configuration Hierarchy (highest to lowest precedence):
1. Direct kwargs to load_config() (CLI flags land here)
2. Environment variables (LCOVDIFF__SECTION__KEY)
3. Repo YAML (.lcovdiff.yaml in the working directory)
4. Built-in defaults (this file)

Examples:
    LCOVDIFF__LOGGING__LEVEL=DEBUG
    LCOVDIFF__DIFF__DROP_ZEROS=true
    LCOVDIFF__DIFF__IGNORE_UNMATCHED_LINE_ERROR=1
"""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator

from lcovdiff.diff.options import IgnoreOptions, PostProcessOptions

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
        LCOVDIFF__LOGGING__LEVEL: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """

    level: LogLevel = Field(
        default="WARNING",
        description="Root log level. The CLI raises this to DEBUG with --verbose.",
    )
    outputs: list[LogOutputConfig] = Field(default_factory=lambda: [LogOutputConfig()])


class DiffConfig(BaseModel):
    """Diff behavior defaults.

    Env vars:
        LCOVDIFF__DIFF__IGNORE_UNMATCHED_LINE_ERROR: Zero functions whose start
            line disagrees between reports instead of failing
        LCOVDIFF__DIFF__DROP_ZEROS: Drop files with no remaining coverage
    """

    ignore_unmatched_line_error: bool = Field(
        default=False,
        description="Treat a function start-line mismatch as covered instead of failing. "
        "Checksum mismatches are always fatal.",
    )
    drop_zeros: bool = Field(
        default=False,
        description="Remove sections with no positive line, function, or branch signal "
        "after diffing.",
    )

    def ignore_options(self) -> IgnoreOptions:
        return IgnoreOptions(ignore_unmatched_line_error=self.ignore_unmatched_line_error)

    def post_process_options(self) -> PostProcessOptions:
        return PostProcessOptions(drop_zeros=self.drop_zeros)


class LcovDiffConfig(BaseModel):
    """Root configuration."""

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    diff: DiffConfig = Field(default_factory=DiffConfig)
