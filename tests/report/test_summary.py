"""Tests for coverage summaries."""

from lcovdiff.report import build_summary, build_text_summary, compute_file_stats
from lcovdiff.report.models import (
    BranchKey,
    BranchValue,
    FunctionValue,
    LineValue,
    Report,
    Section,
    SectionKey,
)


def _report() -> Report:
    return Report(
        sections={
            SectionKey("", "b.c"): Section(lines={1: LineValue(0), 2: LineValue(0)}),
            SectionKey("", "a.c"): Section(
                functions={"f": FunctionValue(1, 1), "g": FunctionValue(5, 0)},
                branches={BranchKey(1, 0, 0): BranchValue(1), BranchKey(1, 0, 1): BranchValue(0)},
                lines={1: LineValue(1), 2: LineValue(3), 5: LineValue(0), 6: LineValue(0)},
            ),
        }
    )


class TestComputeFileStats:
    def test_sorted_by_path(self) -> None:
        stats = compute_file_stats(_report())

        assert [s["path"] for s in stats] == ["a.c", "b.c"]
        assert stats[0]["covered_lines"] == 2
        assert stats[0]["coverage_percent"] == 50.0
        assert stats[0]["covered_line_numbers"] == [1, 2]
        assert stats[1]["coverage_percent"] == 0.0

    def test_truncates_covered_lines(self) -> None:
        report = Report(
            sections={SectionKey("", "a.c"): Section(lines={n: LineValue(1) for n in range(1, 6)})}
        )

        stats = compute_file_stats(report, max_lines=2)

        assert stats[0]["covered_line_numbers"] == [1, 2]
        assert stats[0]["covered_line_numbers_truncated"] is True


class TestBuildSummary:
    def test_totals(self) -> None:
        result = build_summary(_report())

        assert result["summary"] == {
            "total_files": 2,
            "total_lines": 6,
            "covered_lines": 2,
            "line_coverage_percent": 33.33,
            "total_branches": 2,
            "covered_branches": 1,
            "branch_coverage_percent": 50.0,
            "total_functions": 2,
            "covered_functions": 1,
            "function_coverage_percent": 50.0,
        }
        assert len(result["files"]) == 2

    def test_omits_absent_kinds_and_files(self) -> None:
        report = Report(sections={SectionKey("", "a.c"): Section(lines={1: LineValue(1)})})

        result = build_summary(report, include_files=False)

        assert "files" not in result
        assert "total_branches" not in result["summary"]
        assert "total_functions" not in result["summary"]


class TestBuildTextSummary:
    def test_empty(self) -> None:
        assert build_text_summary(Report()) == "No coverage data"

    def test_text(self) -> None:
        assert build_text_summary(_report()) == (
            "Coverage: 33.3% (2/6 lines, 1/2 functions, 1/2 branches)"
        )
