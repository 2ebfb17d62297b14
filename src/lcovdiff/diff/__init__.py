"""Coverage report diffing.

Usage:
    from lcovdiff.diff import IgnoreOptions, PostProcessOptions, diff_reports

    # Lines, functions, and branches covered by `new` but not by `baseline`
    newly_covered = diff_reports(new, baseline, IgnoreOptions(), PostProcessOptions(drop_zeros=True))
"""

from lcovdiff.diff.differ import diff_reports, drop_zero_sections
from lcovdiff.diff.engine import (
    DiffStrategy,
    diff_branch,
    diff_function,
    diff_line,
    diff_mapping,
    diff_report,
    diff_section,
)
from lcovdiff.diff.options import IgnoreOptions, PostProcessOptions

__all__ = [
    # Options
    "IgnoreOptions",
    "PostProcessOptions",
    # Differ
    "diff_reports",
    "drop_zero_sections",
    # Engine
    "DiffStrategy",
    "diff_branch",
    "diff_function",
    "diff_line",
    "diff_mapping",
    "diff_report",
    "diff_section",
]
