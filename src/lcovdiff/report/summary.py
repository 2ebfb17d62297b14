"""Structured coverage summaries.

Output schema for build_summary:
{
    "summary": {
        "total_files": int,
        "total_lines": int,
        "covered_lines": int,
        "line_coverage_percent": float,
        "total_branches": int,           # only when branches exist
        "covered_branches": int,
        "branch_coverage_percent": float,
        "total_functions": int,          # only when functions exist
        "covered_functions": int,
        "function_coverage_percent": float
    },
    "files": [
        {
            "path": str,
            "test_name": str,
            "total_lines": int,
            "covered_lines": int,
            "coverage_percent": float,
            "covered_line_numbers": [int, ...]
        },
        ...
    ]
}

For a diff result, "covered" reads as "newly covered".
"""

from typing import Any

from lcovdiff.report.models import Report


def _percent(hit: int, found: int) -> float:
    return round(hit / found * 100.0, 2) if found else 0.0


def compute_file_stats(report: Report, *, max_lines: int | None = None) -> list[dict[str, Any]]:
    """Compute per-file coverage statistics, sorted by path.

    Args:
        report: The report to analyze.
        max_lines: Truncate each file's covered line list to this many entries.
    """
    file_stats = []
    for key in sorted(report.sections, key=lambda k: (k.source_file, k.test_name)):
        section = report.sections[key]
        covered = sorted(n for n, ln in section.lines.items() if ln.count > 0)
        stats: dict[str, Any] = {
            "path": key.source_file,
            "test_name": key.test_name,
            "total_lines": section.lines_found,
            "covered_lines": section.lines_hit,
            "coverage_percent": _percent(section.lines_hit, section.lines_found),
            "covered_line_numbers": covered,
        }
        if max_lines is not None and len(covered) > max_lines:
            stats["covered_line_numbers"] = covered[:max_lines]
            stats["covered_line_numbers_truncated"] = True
        file_stats.append(stats)
    return file_stats


def build_summary(
    report: Report,
    *,
    include_files: bool = True,
    max_lines: int | None = 50,
) -> dict[str, Any]:
    """Build a structured coverage summary from a report.

    Args:
        report: The report to summarize.
        include_files: Whether to include per-file details.
        max_lines: Max covered line numbers listed per file. None = all.

    Returns:
        Structured dict suitable for JSON serialization.
    """
    totals = report.summary
    summary_dict: dict[str, Any] = {
        "total_files": totals.sections,
        "total_lines": totals.lines_found,
        "covered_lines": totals.lines_hit,
        "line_coverage_percent": _percent(totals.lines_hit, totals.lines_found),
    }

    if totals.branches_found > 0:
        summary_dict["total_branches"] = totals.branches_found
        summary_dict["covered_branches"] = totals.branches_hit
        summary_dict["branch_coverage_percent"] = _percent(
            totals.branches_hit, totals.branches_found
        )

    if totals.functions_found > 0:
        summary_dict["total_functions"] = totals.functions_found
        summary_dict["covered_functions"] = totals.functions_hit
        summary_dict["function_coverage_percent"] = _percent(
            totals.functions_hit, totals.functions_found
        )

    result: dict[str, Any] = {"summary": summary_dict}
    if include_files:
        result["files"] = compute_file_stats(report, max_lines=max_lines)
    return result


def build_text_summary(report: Report) -> str:
    """Build a one-line text summary for display contexts."""
    totals = report.summary
    if totals.lines_found == 0:
        return "No coverage data"
    percent = totals.lines_hit / totals.lines_found * 100.0
    return (
        f"Coverage: {percent:.1f}% ({totals.lines_hit}/{totals.lines_found} lines, "
        f"{totals.functions_hit}/{totals.functions_found} functions, "
        f"{totals.branches_hit}/{totals.branches_found} branches)"
    )
