"""Per-call options for diffing reports."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class IgnoreOptions:
    """Which identity mismatches the diff pass tolerates.

    Only function start-line mismatches can be ignored; a checksum mismatch
    on a line always aborts the diff.
    """

    ignore_unmatched_line_error: bool = False


@dataclass(frozen=True, slots=True)
class PostProcessOptions:
    """Cleanup applied to the diffed report."""

    drop_zeros: bool = False
