"""Recursive diff over the report tree.

Every level is diffed the same way: walk the keys of the right-hand mapping
and, where the left-hand mapping has the same key, diff the two values in
place. Keys only on the right are skipped, so the result always has exactly
the left-hand keys.

Leaf policy is a covered/uncovered transition, never subtraction: whenever
the right-hand record shows coverage, the left-hand record is cleared to its
uncovered value (count 0, or branch taken = None).
"""

from collections.abc import Callable, Mapping, MutableMapping
from typing import TypeVar

from lcovdiff.core.errors import MergeError
from lcovdiff.diff.options import IgnoreOptions
from lcovdiff.report.models import (
    BranchKey,
    BranchValue,
    FunctionValue,
    LineValue,
    Report,
    Section,
    SectionKey,
)

K = TypeVar("K")
V = TypeVar("V")

# Diffs one pair of same-keyed values (key, mine, theirs, options), mutating mine
DiffStrategy = Callable[[K, V, V, IgnoreOptions], None]


def diff_mapping(
    mine: MutableMapping[K, V],
    theirs: Mapping[K, V],
    strategy: DiffStrategy[K, V],
    options: IgnoreOptions,
) -> None:
    """Diff ``theirs`` into ``mine`` key by key.

    Never inserts or removes keys in ``mine``.
    """
    for key, value in theirs.items():
        existing = mine.get(key)
        if existing is not None:
            strategy(key, existing, value, options)


def diff_function(
    source_file: str,
    name: str,
    mine: FunctionValue,
    theirs: FunctionValue,
    options: IgnoreOptions,
) -> None:
    if (
        theirs.start_line is not None
        and mine.start_line is not None
        and theirs.start_line != mine.start_line
    ):
        # The reports disagree about which function this is
        if not options.ignore_unmatched_line_error:
            raise MergeError.unmatched_function_line(
                source_file, name, mine.start_line, theirs.start_line
            )
        mine.count = 0
    if theirs.count > 0:
        mine.count = 0


def diff_branch(
    key: BranchKey,  # noqa: ARG001
    mine: BranchValue,
    theirs: BranchValue,
    options: IgnoreOptions,  # noqa: ARG001
) -> None:
    # Only whether the branch was taken matters, not how often
    if theirs.taken:
        mine.taken = None


def diff_line(
    source_file: str,
    line: int,
    mine: LineValue,
    theirs: LineValue,
    options: IgnoreOptions,  # noqa: ARG001
) -> None:
    # No ignore option here: a changed checksum means the source line changed
    if (
        theirs.checksum is not None
        and mine.checksum is not None
        and theirs.checksum != mine.checksum
    ):
        raise MergeError.unmatched_checksum(source_file, line, mine.checksum, theirs.checksum)
    if theirs.count > 0:
        mine.count = 0


def diff_section(key: SectionKey, mine: Section, theirs: Section, options: IgnoreOptions) -> None:
    source_file = key.source_file
    diff_mapping(
        mine.functions,
        theirs.functions,
        lambda name, m, t, opts: diff_function(source_file, name, m, t, opts),
        options,
    )
    diff_mapping(mine.branches, theirs.branches, diff_branch, options)
    diff_mapping(
        mine.lines,
        theirs.lines,
        lambda line, m, t, opts: diff_line(source_file, line, m, t, opts),
        options,
    )


def diff_report(mine: Report, theirs: Report, options: IgnoreOptions) -> None:
    """Diff ``theirs`` into ``mine`` in place.

    Raises:
        MergeError: On a checksum mismatch, or a function start-line mismatch
            unless ``options.ignore_unmatched_line_error`` is set. ``mine`` is
            left partially diffed; callers should discard it.
    """
    diff_mapping(mine.sections, theirs.sections, diff_section, options)
