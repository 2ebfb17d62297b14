"""Report differ: what the first report covers that the second does not."""

from lcovdiff.core.logging import get_logger
from lcovdiff.diff.engine import diff_report
from lcovdiff.diff.options import IgnoreOptions, PostProcessOptions
from lcovdiff.report.merge import merge_report
from lcovdiff.report.models import Report

log = get_logger(__name__)


def drop_zero_sections(report: Report) -> list[str]:
    """Remove sections without any positive line, function, or branch signal.

    Returns:
        Source files of the removed sections, in report order.
    """
    dropped = [key for key, section in report.sections.items() if not section.has_positive_signal]
    for key in dropped:
        del report.sections[key]
    return [key.source_file for key in dropped]


def diff_reports(
    first: Report,
    second: Report,
    ignore: IgnoreOptions | None = None,
    post_process: PostProcessOptions | None = None,
) -> Report:
    """Diff two reports.

    The result has exactly the keys of ``first``. Every record that ``second``
    shows as covered is cleared (count 0, branch not evaluated); all other
    records keep their value from ``first``. Neither input is modified.

    Args:
        first: Report whose coverage is kept.
        second: Report whose coverage is removed from ``first``.
        ignore: Which identity mismatches to tolerate.
        post_process: Cleanup applied to the result.

    Returns:
        A new Report.

    Raises:
        MergeError: If a line checksum differs between the reports, or a
            function start line differs and is not ignored. No report is
            produced in that case.
    """
    ignore = ignore or IgnoreOptions()
    post_process = post_process or PostProcessOptions()

    result = Report()
    merge_report(result, first)
    diff_report(result, second, ignore)
    log.debug("reports_diffed", sections=len(result.sections))

    if post_process.drop_zeros:
        dropped = drop_zero_sections(result)
        if dropped:
            log.debug("zero_sections_dropped", count=len(dropped), files=dropped)

    return result
