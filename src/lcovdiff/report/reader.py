"""LCOV tracefile reader.

LCOV is a plain text format with records like:
- TN:<test name>
- SF:<source file path>
- FN:<line>,<name>
- FNDA:<hit count>,<name>
- BRDA:<line>,[e]<block>,<branch>,<taken or ->
- DA:<line>,<hit count>[,<checksum>]
- FNF/FNH/BRF/BRH/LF/LH:<summary count> (ignored, recomputed on write)
- end_of_record

Records repeated within a tracefile (the same file under the same test name,
or the same line twice) are merged, so a checksum or function start-line
conflict inside a single tracefile raises MergeError.
"""

from __future__ import annotations

import contextlib
from pathlib import Path

from lcovdiff.core.errors import ReportParseError
from lcovdiff.core.logging import get_logger
from lcovdiff.report.merge import merge_branch, merge_function, merge_line, merge_section
from lcovdiff.report.models import (
    BranchKey,
    BranchValue,
    FunctionValue,
    LineValue,
    Report,
    Section,
    SectionKey,
)

log = get_logger(__name__)

# Summary and metadata records carry nothing the model does not recompute
_IGNORED_RECORDS = frozenset({"FNF", "FNH", "BRF", "BRH", "LF", "LH", "VER"})


class _ReportBuilder:
    """Accumulates records into a Report, one section at a time."""

    def __init__(self, source: str, base_path: Path | None) -> None:
        self.source = source
        self.base_path = base_path
        self.report = Report()
        self.test_name = ""
        self.key: SectionKey | None = None
        self.section: Section | None = None
        self.lineno = 0

    def error(self, record: str, reason: str) -> ReportParseError:
        return ReportParseError.malformed(self.source, self.lineno, record, reason)

    def count(self, value: str, record: str) -> int:
        # Some tools write '-' for a count they did not collect
        if value == "-":
            return 0
        try:
            result = int(value)
        except ValueError:
            raise self.error(record, f"invalid count {value!r}") from None
        if result < 0:
            raise self.error(record, f"negative count {value!r}")
        return result

    def number(self, value: str, record: str, what: str) -> int:
        try:
            return int(value)
        except ValueError:
            raise self.error(record, f"invalid {what} {value!r}") from None

    def require_section(self, record: str) -> tuple[SectionKey, Section]:
        if self.key is None or self.section is None:
            raise self.error(record, "record outside of a source file section")
        return self.key, self.section

    def open_section(self, file_path: str) -> None:
        if self.section is not None:
            log.debug("section_not_terminated", source=self.source, lineno=self.lineno)
            self.close_section()
        if self.base_path:
            # Path not under base_path -> use as-is
            with contextlib.suppress(ValueError):
                file_path = str(Path(file_path).relative_to(self.base_path))
        self.key = SectionKey(test_name=self.test_name, source_file=file_path)
        self.section = Section()

    def close_section(self) -> None:
        if self.key is not None and self.section is not None:
            existing = self.report.sections.get(self.key)
            if existing is None:
                self.report.sections[self.key] = self.section
            else:
                merge_section(self.key, existing, self.section)
        self.key = None
        self.section = None

    def feed(self, record: str) -> None:
        tag, sep, body = record.partition(":")

        if record == "end_of_record":
            self.require_section(record)
            self.close_section()
        elif not sep:
            raise self.error(record, "unrecognized record")
        elif tag in _IGNORED_RECORDS:
            return
        elif tag == "TN":
            self.test_name = body
        elif tag == "SF":
            if not body:
                raise self.error(record, "empty source file path")
            self.open_section(body)
        elif tag == "FN":
            key, section = self.require_section(record)
            parts = body.split(",", 1)
            if len(parts) != 2 or not parts[1]:
                raise self.error(record, "expected FN:<line>,<name>")
            start_line = self.number(parts[0], record, "line number")
            self._add_function(key, section, parts[1], FunctionValue(start_line=start_line))
        elif tag == "FNDA":
            key, section = self.require_section(record)
            parts = body.split(",", 1)
            if len(parts) != 2 or not parts[1]:
                raise self.error(record, "expected FNDA:<count>,<name>")
            count = self.count(parts[0], record)
            self._add_function(key, section, parts[1], FunctionValue(count=count))
        elif tag == "BRDA":
            _, section = self.require_section(record)
            parts = body.split(",")
            if len(parts) != 4:
                raise self.error(record, "expected BRDA:<line>,<block>,<branch>,<taken>")
            block = parts[1]
            is_exception = block.startswith("e")
            branch_key = BranchKey(
                line=self.number(parts[0], record, "line number"),
                block=self.number(block[1:] if is_exception else block, record, "block"),
                branch=self.number(parts[2], record, "branch"),
                is_exception=is_exception,
            )
            taken = None if parts[3] == "-" else self.count(parts[3], record)
            value = BranchValue(taken=taken)
            existing = section.branches.get(branch_key)
            if existing is None:
                section.branches[branch_key] = value
            else:
                merge_branch(existing, value)
        elif tag == "DA":
            key, section = self.require_section(record)
            parts = body.split(",", 2)
            if len(parts) < 2:
                raise self.error(record, "expected DA:<line>,<count>[,<checksum>]")
            line = self.number(parts[0], record, "line number")
            line_value = LineValue(
                count=self.count(parts[1], record),
                checksum=parts[2] if len(parts) == 3 and parts[2] else None,
            )
            existing_line = section.lines.get(line)
            if existing_line is None:
                section.lines[line] = line_value
            else:
                merge_line(key.source_file, line, existing_line, line_value)
        else:
            log.debug("unknown_record_skipped", source=self.source, lineno=self.lineno, tag=tag)

    @staticmethod
    def _add_function(key: SectionKey, section: Section, name: str, value: FunctionValue) -> None:
        existing = section.functions.get(name)
        if existing is None:
            section.functions[name] = value
        else:
            merge_function(key.source_file, name, existing, value)

    def finish(self) -> Report:
        # Handle file without end_of_record
        if self.section is not None:
            self.close_section()
        return self.report


def parse_report(
    content: str, *, source: str = "<string>", base_path: Path | None = None
) -> Report:
    """Parse LCOV text into a Report.

    Args:
        content: Tracefile text.
        source: Name used in error messages.
        base_path: If given, ``SF:`` paths under it are made relative to it.

    Raises:
        ReportParseError: On a malformed record.
        MergeError: If repeated records disagree about a checksum or function line.
    """
    builder = _ReportBuilder(source, base_path)
    for lineno, raw in enumerate(content.splitlines(), start=1):
        builder.lineno = lineno
        record = raw.strip()
        if not record or record.startswith("#"):
            continue
        builder.feed(record)
    return builder.finish()


def read_report(path: Path, *, base_path: Path | None = None) -> Report:
    """Read an LCOV tracefile from disk.

    Raises:
        ReportParseError: If the file is missing, unreadable, or malformed.
        MergeError: If repeated records disagree about a checksum or function line.
    """
    if not path.exists():
        raise ReportParseError.unreadable(str(path), "file not found")
    try:
        content = path.read_text()
    except (OSError, UnicodeDecodeError) as e:
        raise ReportParseError.unreadable(str(path), str(e)) from e
    report = parse_report(content, source=str(path), base_path=base_path)
    log.debug("report_read", path=str(path), sections=len(report.sections))
    return report

