"""Tests for configuration models."""

import pytest
from pydantic import ValidationError

from lcovdiff.config.models import DiffConfig, LoggingConfig, LogOutputConfig
from lcovdiff.diff import IgnoreOptions, PostProcessOptions


class TestLogOutputConfig:
    def test_std_streams_accepted(self) -> None:
        assert LogOutputConfig(destination="stdout").destination == "stdout"
        assert LogOutputConfig(destination="stderr").destination == "stderr"

    def test_relative_file_rejected(self) -> None:
        with pytest.raises(ValidationError):
            LogOutputConfig(destination="logs/out.log")

    def test_absolute_file_accepted(self) -> None:
        assert LogOutputConfig(destination="/tmp/lcovdiff.log").destination == "/tmp/lcovdiff.log"


class TestLoggingConfig:
    def test_default_has_one_console_output(self) -> None:
        config = LoggingConfig()

        assert len(config.outputs) == 1
        assert config.outputs[0].format == "console"


class TestDiffConfig:
    def test_converts_to_diff_options(self) -> None:
        config = DiffConfig(ignore_unmatched_line_error=True, drop_zeros=True)

        assert config.ignore_options() == IgnoreOptions(ignore_unmatched_line_error=True)
        assert config.post_process_options() == PostProcessOptions(drop_zeros=True)

    def test_defaults_are_strict(self) -> None:
        config = DiffConfig()

        assert config.ignore_options().ignore_unmatched_line_error is False
        assert config.post_process_options().drop_zeros is False
