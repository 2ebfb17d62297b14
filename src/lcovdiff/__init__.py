"""lcov-diff: what one LCOV coverage report covers that another does not.

Usage:
    from lcovdiff import diff_reports, read_report, write_report

    newly_covered = diff_reports(read_report(new_path), read_report(baseline_path))
    write_report(newly_covered, Path("diff.info"))
"""

from lcovdiff.core.errors import LcovDiffError, MergeError, ReportParseError
from lcovdiff.diff import IgnoreOptions, PostProcessOptions, diff_reports
from lcovdiff.report import (
    Report,
    format_report,
    merge,
    parse_report,
    read_report,
    write_report,
)

__version__ = "0.1.0"

__all__ = [
    "IgnoreOptions",
    "LcovDiffError",
    "MergeError",
    "PostProcessOptions",
    "Report",
    "ReportParseError",
    "diff_reports",
    "format_report",
    "merge",
    "parse_report",
    "read_report",
    "write_report",
]
