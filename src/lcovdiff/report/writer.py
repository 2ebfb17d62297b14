"""LCOV tracefile writer.

Sections are written in key order. Within a section the record order is:
TN, SF, FN*, FNDA*, FNF, FNH, BRDA*, BRF, BRH, DA*, LF, LH, end_of_record.
Function and branch summaries are omitted for sections without functions or
branches; LF/LH are always written.
"""

from collections.abc import Iterator
from pathlib import Path

from lcovdiff.report.models import Report, Section, SectionKey


def _section_records(key: SectionKey, section: Section) -> Iterator[str]:
    yield f"TN:{key.test_name}"
    yield f"SF:{key.source_file}"

    functions = sorted(section.functions.items())
    for name, fn in functions:
        if fn.start_line is not None:
            yield f"FN:{fn.start_line},{name}"
    for name, fn in functions:
        yield f"FNDA:{fn.count},{name}"
    if functions:
        yield f"FNF:{section.functions_found}"
        yield f"FNH:{section.functions_hit}"

    for bkey, branch in sorted(section.branches.items()):
        block = f"e{bkey.block}" if bkey.is_exception else str(bkey.block)
        taken = "-" if branch.taken is None else str(branch.taken)
        yield f"BRDA:{bkey.line},{block},{bkey.branch},{taken}"
    if section.branches:
        yield f"BRF:{section.branches_found}"
        yield f"BRH:{section.branches_hit}"

    for line, value in sorted(section.lines.items()):
        if value.checksum is None:
            yield f"DA:{line},{value.count}"
        else:
            yield f"DA:{line},{value.count},{value.checksum}"
    yield f"LF:{section.lines_found}"
    yield f"LH:{section.lines_hit}"
    yield "end_of_record"


def iter_records(report: Report) -> Iterator[str]:
    """Yield the report as LCOV records, one per line, without newlines."""
    for key in sorted(report.sections):
        yield from _section_records(key, report.sections[key])


def format_report(report: Report) -> str:
    """Serialize a report to LCOV text."""
    return "".join(f"{record}\n" for record in iter_records(report))


def write_report(report: Report, path: Path) -> None:
    """Write a report to ``path`` as an LCOV tracefile, creating parent dirs."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w") as f:
        for record in iter_records(report):
            f.write(f"{record}\n")
