"""Report merging with additive semantics.

Merging folds one report into another in place:

- keys missing from the target are inserted as copies
- line[i].count = sum of counts; checksums must agree when both are known
- function[k].count = sum of counts; start lines must agree when both are known
- branch[j].taken = sum of taken counts; an unevaluated branch adopts the other side

Identity disagreements (checksum, function start line) raise MergeError.
The reader uses the same rules when a tracefile repeats a section or record.
"""

from collections.abc import Callable, Iterable
from typing import TypeVar

from lcovdiff.core.errors import MergeError
from lcovdiff.report.models import (
    BranchValue,
    FunctionValue,
    LineValue,
    Report,
    Section,
    SectionKey,
)

K = TypeVar("K")
V = TypeVar("V", FunctionValue, BranchValue, LineValue, Section)


def _merge_mapping(
    mine: dict[K, V],
    theirs: dict[K, V],
    merge_value: Callable[[K, V, V], None],
) -> None:
    for key, value in theirs.items():
        existing = mine.get(key)
        if existing is None:
            mine[key] = value.copy()
        else:
            merge_value(key, existing, value)


def merge_function(source_file: str, name: str, mine: FunctionValue, theirs: FunctionValue) -> None:
    if theirs.start_line is not None:
        if mine.start_line is None:
            mine.start_line = theirs.start_line
        elif mine.start_line != theirs.start_line:
            raise MergeError.unmatched_function_line(
                source_file, name, mine.start_line, theirs.start_line
            )
    mine.count += theirs.count


def merge_branch(mine: BranchValue, theirs: BranchValue) -> None:
    if theirs.taken is None:
        return
    mine.taken = theirs.taken if mine.taken is None else mine.taken + theirs.taken


def merge_line(source_file: str, line: int, mine: LineValue, theirs: LineValue) -> None:
    if theirs.checksum is not None:
        if mine.checksum is None:
            mine.checksum = theirs.checksum
        elif mine.checksum != theirs.checksum:
            raise MergeError.unmatched_checksum(source_file, line, mine.checksum, theirs.checksum)
    mine.count += theirs.count


def merge_section(key: SectionKey, mine: Section, theirs: Section) -> None:
    """Fold ``theirs`` into ``mine``. ``key`` names the file in error messages."""
    source_file = key.source_file
    _merge_mapping(
        mine.functions,
        theirs.functions,
        lambda name, m, t: merge_function(source_file, name, m, t),
    )
    _merge_mapping(mine.branches, theirs.branches, lambda _key, m, t: merge_branch(m, t))
    _merge_mapping(
        mine.lines,
        theirs.lines,
        lambda line, m, t: merge_line(source_file, line, m, t),
    )


def merge_report(target: Report, source: Report) -> None:
    """Fold ``source`` into ``target`` in place.

    ``source`` is never modified and ``target`` never shares values with it.

    Raises:
        MergeError: If the reports disagree about a checksum or function start line.
    """
    _merge_mapping(target.sections, source.sections, merge_section)


def merge(*reports: Report) -> Report:
    """Merge reports into a new one.

    Args:
        *reports: Reports to merge, left to right.

    Returns:
        A fresh Report owning copies of all merged data.
    """
    return merge_reports(reports)


def merge_reports(reports: Iterable[Report]) -> Report:
    result = Report()
    for report in reports:
        merge_report(result, report)
    return result
