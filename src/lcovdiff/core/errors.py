"""lcov-diff error types with typed error codes.

Error code ranges:
- 2xxx: Config
- 3xxx: Report parsing
- 4xxx: Merge / diff
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any


class ErrorCode(IntEnum):
    """Typed error codes for programmatic handling."""

    # Config (2xxx)
    CONFIG_PARSE_ERROR = 2001
    CONFIG_INVALID_VALUE = 2002
    CONFIG_FILE_NOT_FOUND = 2003

    # Report parsing (3xxx)
    REPORT_MALFORMED_RECORD = 3001
    REPORT_UNREADABLE = 3002

    # Merge / diff (4xxx)
    UNMATCHED_CHECKSUM = 4001
    UNMATCHED_FUNCTION_LINE = 4002


@dataclass(frozen=True, slots=True)
class LcovDiffError(Exception):
    """Base error with structured context."""

    code: ErrorCode
    message: str
    details: dict[str, Any] = field(default_factory=dict)

    @property
    def error_name(self) -> str:
        """String identifier for logging (e.g., 'UNMATCHED_CHECKSUM')."""
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


class ConfigError(LcovDiffError):
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

    @classmethod
    def file_not_found(cls, path: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_FILE_NOT_FOUND,
            message=f"Config path not found: {path}",
            details={"path": path},
        )


class ReportParseError(LcovDiffError):
    """Errors reading an LCOV tracefile."""

    @classmethod
    def malformed(cls, source: str, lineno: int, record: str, reason: str) -> "ReportParseError":
        return cls(
            code=ErrorCode.REPORT_MALFORMED_RECORD,
            message=f"{source}:{lineno}: {reason}: {record!r}",
            details={"source": source, "lineno": lineno, "record": record, "reason": reason},
        )

    @classmethod
    def unreadable(cls, path: str, reason: str) -> "ReportParseError":
        return cls(
            code=ErrorCode.REPORT_UNREADABLE,
            message=f"Failed to read LCOV file {path}: {reason}",
            details={"path": path, "reason": reason},
        )


class MergeError(LcovDiffError):
    """Two records claim the same key but disagree about what they identify.

    Raised both while merging reports and while diffing them.
    """

    @classmethod
    def unmatched_checksum(
        cls, source_file: str, line: int, mine: str, theirs: str
    ) -> "MergeError":
        return cls(
            code=ErrorCode.UNMATCHED_CHECKSUM,
            message=f"Checksum mismatch for {source_file}:{line} ({mine!r} != {theirs!r})",
            details={
                "source_file": source_file,
                "line": line,
                "checksum": mine,
                "other_checksum": theirs,
            },
        )

    @classmethod
    def unmatched_function_line(
        cls, source_file: str, name: str, mine: int, theirs: int
    ) -> "MergeError":
        return cls(
            code=ErrorCode.UNMATCHED_FUNCTION_LINE,
            message=(
                f"Function {name!r} in {source_file} starts at line {mine} "
                f"in one report and line {theirs} in the other"
            ),
            details={
                "source_file": source_file,
                "function": name,
                "start_line": mine,
                "other_start_line": theirs,
            },
        )
