"""lcov-diff diff command - write the coverage FIRST has and SECOND lacks."""

from pathlib import Path

import click

from lcovdiff.config.models import LcovDiffConfig
from lcovdiff.core.errors import LcovDiffError
from lcovdiff.core.logging import get_logger
from lcovdiff.diff import diff_reports
from lcovdiff.report import format_report, read_report, write_report

log = get_logger(__name__)

_Path = click.Path(exists=True, dir_okay=False, path_type=Path)


@click.command()
@click.argument("first", type=_Path)
@click.argument("second", type=_Path)
@click.option(
    "-o",
    "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Write the diff here instead of stdout",
)
@click.option(
    "--ignore-unmatched-line-error",
    is_flag=True,
    help="Treat functions whose start line differs as covered instead of failing",
)
@click.option(
    "--drop-zeros",
    is_flag=True,
    help="Omit files with no remaining coverage",
)
@click.option(
    "--base-path",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help="Make source paths relative to this directory before comparing",
)
@click.pass_context
def diff_command(
    ctx: click.Context,
    first: Path,
    second: Path,
    output: Path | None,
    ignore_unmatched_line_error: bool,
    drop_zeros: bool,
    base_path: Path | None,
) -> None:
    """Diff two LCOV tracefiles.

    The result keeps every record of FIRST and zeroes each line, function,
    and branch that SECOND covers. Pass the newer run as FIRST and the
    baseline as SECOND to get what the newer run covers for the first time.
    """
    config: LcovDiffConfig = ctx.obj["config"]
    # Flags can only switch options on; config and env supply the defaults
    diff_config = config.diff.model_copy(
        update={
            "ignore_unmatched_line_error": config.diff.ignore_unmatched_line_error
            or ignore_unmatched_line_error,
            "drop_zeros": config.diff.drop_zeros or drop_zeros,
        }
    )

    try:
        first_report = read_report(first, base_path=base_path)
        second_report = read_report(second, base_path=base_path)
        result = diff_reports(
            first_report,
            second_report,
            diff_config.ignore_options(),
            diff_config.post_process_options(),
        )
    except LcovDiffError as e:
        log.debug("diff_failed", error=e.error_name, **e.details)
        raise click.ClickException(str(e)) from e

    if output is None:
        click.echo(format_report(result), nl=False)
    else:
        write_report(result, output)
        log.info("diff_written", path=str(output), sections=len(result.sections))
