"""Tests for report merging."""

import pytest

from lcovdiff.core.errors import ErrorCode, MergeError
from lcovdiff.report import merge, merge_report
from lcovdiff.report.models import (
    BranchKey,
    BranchValue,
    FunctionValue,
    LineValue,
    Report,
    Section,
    SectionKey,
)

KEY = SectionKey("", "a.c")


def _report(section: Section, key: SectionKey = KEY) -> Report:
    return Report(sections={key: section})


class TestMergeReport:
    """Tests for merge_report."""

    def test_merge_into_empty_copies_everything(self) -> None:
        source = _report(
            Section(
                functions={"f": FunctionValue(1, 2)},
                branches={BranchKey(1, 0, 0): BranchValue(taken=None)},
                lines={1: LineValue(2, "abc")},
            )
        )
        target = Report()

        merge_report(target, source)

        assert target == source
        assert target.sections[KEY] is not source.sections[KEY]
        assert target.sections[KEY].lines[1] is not source.sections[KEY].lines[1]

    def test_merge_never_modifies_source(self) -> None:
        source = _report(Section(lines={1: LineValue(2)}))
        target = _report(Section(lines={1: LineValue(3)}))

        merge_report(target, source)
        target.sections[KEY].lines[1].count = 0

        assert source.sections[KEY].lines[1].count == 2

    def test_line_counts_add_and_checksum_fills(self) -> None:
        target = _report(Section(lines={1: LineValue(1), 2: LineValue(0, "x")}))
        source = _report(Section(lines={1: LineValue(4, "c1"), 2: LineValue(5), 3: LineValue(1)}))

        merge_report(target, source)

        assert target.sections[KEY].lines == {
            1: LineValue(5, "c1"),
            2: LineValue(5, "x"),
            3: LineValue(1),
        }

    def test_function_counts_add_and_start_line_fills(self) -> None:
        target = _report(Section(functions={"f": FunctionValue(None, 1), "g": FunctionValue(3, 0)}))
        source = _report(Section(functions={"f": FunctionValue(7, 2), "g": FunctionValue(None, 1)}))

        merge_report(target, source)

        assert target.sections[KEY].functions == {
            "f": FunctionValue(7, 3),
            "g": FunctionValue(3, 1),
        }

    @pytest.mark.parametrize(
        ("mine", "theirs", "expected"),
        [
            (None, None, None),
            (None, 0, 0),
            (2, None, 2),
            (2, 3, 5),
            (0, 0, 0),
        ],
    )
    def test_branch_taken_adds(
        self, mine: int | None, theirs: int | None, expected: int | None
    ) -> None:
        bkey = BranchKey(1, 0, 0)
        target = _report(Section(branches={bkey: BranchValue(mine)}))
        source = _report(Section(branches={bkey: BranchValue(theirs)}))

        merge_report(target, source)

        assert target.sections[KEY].branches[bkey].taken == expected

    def test_checksum_conflict_fails(self) -> None:
        target = _report(Section(lines={1: LineValue(1, "a")}))
        source = _report(Section(lines={1: LineValue(1, "b")}))

        with pytest.raises(MergeError) as exc_info:
            merge_report(target, source)

        assert exc_info.value.code == ErrorCode.UNMATCHED_CHECKSUM
        assert exc_info.value.details["source_file"] == "a.c"

    def test_function_line_conflict_fails(self) -> None:
        target = _report(Section(functions={"f": FunctionValue(1, 0)}))
        source = _report(Section(functions={"f": FunctionValue(2, 0)}))

        with pytest.raises(MergeError) as exc_info:
            merge_report(target, source)

        assert exc_info.value.code == ErrorCode.UNMATCHED_FUNCTION_LINE


class TestMerge:
    def test_merge_no_reports(self) -> None:
        assert merge() == Report()

    def test_merge_disjoint_sections(self) -> None:
        a = _report(Section(lines={1: LineValue(1)}), SectionKey("", "a.c"))
        b = _report(Section(lines={1: LineValue(2)}), SectionKey("", "b.c"))

        merged = merge(a, b)

        assert set(merged.sections) == {SectionKey("", "a.c"), SectionKey("", "b.c")}

    def test_merge_three_reports(self) -> None:
        reports = [_report(Section(lines={1: LineValue(n)})) for n in (1, 2, 3)]

        merged = merge(*reports)

        assert merged.sections[KEY].lines[1].count == 6
        assert reports[0].sections[KEY].lines[1].count == 1
