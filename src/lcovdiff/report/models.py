"""LCOV report data model.

A report is a three-level tree, each level keyed uniquely:

    Report.sections: SectionKey -> Section
    Section.functions: function name -> FunctionValue
    Section.branches: BranchKey -> BranchValue
    Section.lines: line number -> LineValue

Keys are frozen and ordered so reports serialize deterministically. Values
are mutable; merge and diff update them in place.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True, order=True)
class SectionKey:
    """Identifies one source file under one test name (``TN:``/``SF:``)."""

    test_name: str
    source_file: str


@dataclass(frozen=True, slots=True, order=True)
class BranchKey:
    """Identifies a branch (``BRDA:<line>,[e]<block>,<branch>,...``)."""

    line: int
    block: int
    branch: int
    is_exception: bool = False


@dataclass(slots=True)
class FunctionValue:
    """Function coverage. ``start_line`` is None when no ``FN:`` record was seen."""

    start_line: int | None = None
    count: int = 0

    def copy(self) -> FunctionValue:
        return FunctionValue(start_line=self.start_line, count=self.count)


@dataclass(slots=True)
class BranchValue:
    """Branch coverage.

    ``taken`` is None when the branch was never evaluated (``-`` in LCOV),
    0 when evaluated but not taken, and positive when taken.
    """

    taken: int | None = None

    def copy(self) -> BranchValue:
        return BranchValue(taken=self.taken)


@dataclass(slots=True)
class LineValue:
    """Line coverage with an optional checksum of the source line."""

    count: int = 0
    checksum: str | None = None

    def copy(self) -> LineValue:
        return LineValue(count=self.count, checksum=self.checksum)


@dataclass(slots=True)
class Section:
    """Coverage data for one source file."""

    functions: dict[str, FunctionValue] = field(default_factory=dict)
    branches: dict[BranchKey, BranchValue] = field(default_factory=dict)
    lines: dict[int, LineValue] = field(default_factory=dict)

    def copy(self) -> Section:
        """Deep copy; the result shares no values with this section."""
        return Section(
            functions={k: v.copy() for k, v in self.functions.items()},
            branches={k: v.copy() for k, v in self.branches.items()},
            lines={k: v.copy() for k, v in self.lines.items()},
        )

    @property
    def is_empty(self) -> bool:
        return not (self.functions or self.branches or self.lines)

    @property
    def has_positive_signal(self) -> bool:
        """True if any branch has a taken value or any function/line a positive count."""
        return (
            any(b.taken is not None for b in self.branches.values())
            or any(f.count > 0 for f in self.functions.values())
            or any(ln.count > 0 for ln in self.lines.values())
        )

    @property
    def lines_found(self) -> int:
        """Total number of instrumented lines."""
        return len(self.lines)

    @property
    def lines_hit(self) -> int:
        """Number of lines with at least one hit."""
        return sum(1 for ln in self.lines.values() if ln.count > 0)

    @property
    def uncovered_lines(self) -> list[int]:
        """Sorted list of line numbers with zero hits."""
        return sorted(n for n, ln in self.lines.items() if ln.count == 0)

    @property
    def branches_found(self) -> int:
        return len(self.branches)

    @property
    def branches_hit(self) -> int:
        """Number of branches taken at least once."""
        return sum(1 for b in self.branches.values() if b.taken)

    @property
    def functions_found(self) -> int:
        return len(self.functions)

    @property
    def functions_hit(self) -> int:
        """Number of functions called at least once."""
        return sum(1 for f in self.functions.values() if f.count > 0)


@dataclass(frozen=True, slots=True)
class CoverageSummary:
    """Aggregate coverage statistics.

    Computed from a Report, immutable summary snapshot.
    """

    sections: int
    lines_found: int
    lines_hit: int
    branches_found: int
    branches_hit: int
    functions_found: int
    functions_hit: int

    @property
    def line_rate(self) -> float:
        return self.lines_hit / self.lines_found if self.lines_found else 0.0

    @property
    def branch_rate(self) -> float:
        return self.branches_hit / self.branches_found if self.branches_found else 0.0

    @property
    def function_rate(self) -> float:
        return self.functions_hit / self.functions_found if self.functions_found else 0.0


@dataclass(slots=True)
class Report:
    """A complete LCOV report."""

    sections: dict[SectionKey, Section] = field(default_factory=dict)

    def copy(self) -> Report:
        return Report(sections={k: v.copy() for k, v in self.sections.items()})

    def section(self, source_file: str, test_name: str = "") -> Section | None:
        """Look up a section by source file, convenient for callers without a SectionKey."""
        return self.sections.get(SectionKey(test_name=test_name, source_file=source_file))

    @property
    def summary(self) -> CoverageSummary:
        """Compute aggregate summary across all sections."""
        sections = self.sections.values()
        return CoverageSummary(
            sections=len(self.sections),
            lines_found=sum(s.lines_found for s in sections),
            lines_hit=sum(s.lines_hit for s in sections),
            branches_found=sum(s.branches_found for s in sections),
            branches_hit=sum(s.branches_hit for s in sections),
            functions_found=sum(s.functions_found for s in sections),
            functions_hit=sum(s.functions_hit for s in sections),
        )
