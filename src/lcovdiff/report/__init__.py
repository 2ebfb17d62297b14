"""LCOV report model, reading, writing, merging, and summaries.

Usage:
    from lcovdiff.report import read_report, write_report, merge

    report = read_report(Path("coverage/lcov.info"))
    combined = merge(report, other)
    write_report(combined, Path("combined.info"))
"""

from lcovdiff.report.merge import merge, merge_report, merge_reports, merge_section
from lcovdiff.report.models import (
    BranchKey,
    BranchValue,
    CoverageSummary,
    FunctionValue,
    LineValue,
    Report,
    Section,
    SectionKey,
)
from lcovdiff.report.reader import parse_report, read_report
from lcovdiff.report.summary import build_summary, build_text_summary, compute_file_stats
from lcovdiff.report.writer import format_report, iter_records, write_report

__all__ = [
    # Models
    "BranchKey",
    "BranchValue",
    "CoverageSummary",
    "FunctionValue",
    "LineValue",
    "Report",
    "Section",
    "SectionKey",
    # Reading / writing
    "parse_report",
    "read_report",
    "format_report",
    "iter_records",
    "write_report",
    # Merge
    "merge",
    "merge_report",
    "merge_reports",
    "merge_section",
    # Summary
    "build_summary",
    "build_text_summary",
    "compute_file_stats",
]
