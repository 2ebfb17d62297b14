"""lcov-diff CLI."""

import click

from lcovdiff import __version__
from lcovdiff.cli.diff import diff_command
from lcovdiff.cli.summary import summary_command
from lcovdiff.config import load_config
from lcovdiff.core.errors import LcovDiffError
from lcovdiff.core.logging import configure_logging


@click.group()
@click.version_option(version=__version__, prog_name="lcov-diff")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """lcov-diff - Find coverage gained between two LCOV reports."""
    try:
        config = load_config()
    except LcovDiffError as e:
        raise click.ClickException(str(e)) from e
    if verbose:
        config.logging.level = "DEBUG"
    configure_logging(config=config.logging)
    ctx.ensure_object(dict)
    ctx.obj["config"] = config
    ctx.obj["verbose"] = verbose


cli.add_command(diff_command, name="diff")
cli.add_command(summary_command, name="summary")


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
