"""lcov-diff summary command - print aggregate coverage of a tracefile."""

import json
from pathlib import Path

import click
from rich.console import Console
from rich.table import Table

from lcovdiff.core.errors import LcovDiffError
from lcovdiff.report import build_summary, read_report
from lcovdiff.report.models import Report


def _render_table(report: Report) -> Table:
    table = Table(title="Coverage", show_lines=False)
    table.add_column("File")
    table.add_column("Lines", justify="right")
    table.add_column("Functions", justify="right")
    table.add_column("Branches", justify="right")

    for key in sorted(report.sections):
        s = report.sections[key]
        table.add_row(
            key.source_file,
            f"{s.lines_hit}/{s.lines_found}",
            f"{s.functions_hit}/{s.functions_found}",
            f"{s.branches_hit}/{s.branches_found}",
        )

    totals = report.summary
    table.add_row(
        "[bold]Total[/bold]",
        f"{totals.lines_hit}/{totals.lines_found}",
        f"{totals.functions_hit}/{totals.functions_found}",
        f"{totals.branches_hit}/{totals.branches_found}",
    )
    return table


@click.command()
@click.argument("report", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def summary_command(report: Path, as_json: bool) -> None:
    """Show line, function, and branch coverage of an LCOV tracefile."""
    try:
        parsed = read_report(report)
    except LcovDiffError as e:
        raise click.ClickException(str(e)) from e

    if as_json:
        click.echo(json.dumps(build_summary(parsed), indent=2))
        return

    console = Console(file=click.get_text_stream("stdout"))
    console.print(_render_table(parsed))
