"""lcov-diff command line interface."""

from lcovdiff.cli.main import cli

__all__ = ["cli"]
