"""Structured logging for the lcov-diff CLI.

stdout carries LCOV or JSON output, so log records only ever go to the
destinations named in LoggingConfig (stderr by default, or log files).
Module loggers are lazy proxies: they pick up whatever configuration is
active when they first emit, not when their module is imported.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING, Any

import structlog

if TYPE_CHECKING:
    from lcovdiff.config.models import LoggingConfig, LogOutputConfig

_LEVELS = logging.getLevelNamesMapping()

_SHARED_PROCESSORS: list[structlog.types.Processor] = [
    structlog.contextvars.merge_contextvars,
    structlog.processors.add_log_level,
    structlog.processors.TimeStamper(fmt="%Y-%m-%d %H:%M:%S", key="timestamp"),
]


def _level(name: str | None, default: int) -> int:
    return _LEVELS.get(name.upper(), default) if name else default


def _handler_for(output: LogOutputConfig) -> logging.Handler:
    handler: logging.StreamHandler[Any]
    if output.destination == "stderr":
        handler = logging.StreamHandler(sys.stderr)
    elif output.destination == "stdout":
        handler = logging.StreamHandler(sys.stdout)
    else:
        path = Path(output.destination)
        path.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(path, mode="a")

    renderer: structlog.types.Processor
    if output.format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(
            colors=handler.stream.isatty(),
            pad_event_to=0,
            pad_level=False,
        )
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processor=renderer,
            foreign_pre_chain=_SHARED_PROCESSORS,
        )
    )
    return handler


def configure_logging(config: LoggingConfig | None = None) -> None:
    """Route structlog through stdlib handlers built from ``config``.

    Safe to call repeatedly; previous handlers are closed and replaced.
    """
    from lcovdiff.config.models import LoggingConfig

    config = config or LoggingConfig()
    root_level = _level(config.level, logging.WARNING)

    structlog.configure(
        processors=[
            *_SHARED_PROCESSORS,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(root_level),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        # Don't cache - allows reconfiguration and respects level changes
        cache_logger_on_first_use=False,
    )

    root_logger = logging.getLogger()
    for existing in root_logger.handlers:
        existing.close()
    root_logger.handlers.clear()
    root_logger.setLevel(root_level)

    for output in config.outputs:
        handler = _handler_for(output)
        handler.setLevel(_level(output.level, root_level))
        root_logger.addHandler(handler)


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    # Lazy proxy; binding here would freeze the unconfigured defaults
    if name:
        return structlog.get_logger(name)  # type: ignore[no-any-return]
    return structlog.get_logger()  # type: ignore[no-any-return]
