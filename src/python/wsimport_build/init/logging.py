# Copyright 2026 Pants project contributors (see CONTRIBUTORS.md).
# Licensed under the Apache License, Version 2.0 (see LICENSE).

from __future__ import annotations

import logging
import sys
from contextlib import contextmanager
from logging import Formatter, LogRecord, StreamHandler
from typing import Iterator, TextIO

from colors import cyan, green, magenta, red, yellow

from wsimport_build.util.logging import TRACE, LogLevel

# Although logging supports the WARN level, its not documented and could conceivably be yanked.
# Explicitly setup a 'WARN' logging level name that maps to 'WARNING'.
logging.addLevelName(logging.WARNING, "WARN")
logging.addLevelName(TRACE, "TRACE")

_LEVEL_COLORS = {
    TRACE: magenta,
    logging.DEBUG: green,
    logging.INFO: cyan,
    logging.WARNING: yellow,
    logging.ERROR: red,
    logging.CRITICAL: red,
}


class _LevelFormatter(Formatter):
    """Prefixes messages with their (optionally colored) level, and renders stack traces only on
    request."""

    def __init__(self, *, use_color: bool, print_stacktrace: bool) -> None:
        super().__init__(None)
        self.use_color = use_color
        self.print_stacktrace = print_stacktrace

    def format(self, record: LogRecord) -> str:
        level = f"[{record.levelname}]"
        if self.use_color:
            level = _LEVEL_COLORS.get(record.levelno, str)(level)
        return f"{level} {super().format(record)}"

    def formatException(self, exc_info) -> str:
        if self.print_stacktrace:
            return super().formatException(exc_info)
        return "Use --print-stacktrace for more error details."


@contextmanager
def initialize_logging(
    level: LogLevel,
    *,
    use_color: bool,
    print_stacktrace: bool = False,
    stream: TextIO | None = None,
) -> Iterator[None]:
    """Installs a root handler writing to `stream` (stderr by default), restoring the previous
    handlers and level on exit."""
    logger = logging.getLogger(None)
    previous_handlers = tuple(logger.handlers)
    previous_level = logger.level
    for handler in previous_handlers:
        logger.removeHandler(handler)

    handler = StreamHandler(stream or sys.stderr)
    handler.setFormatter(_LevelFormatter(use_color=use_color, print_stacktrace=print_stacktrace))
    logger.addHandler(handler)
    level.set_level_for(logger)
    # This routes warnings through our loggers instead of straight to raw stderr.
    logging.captureWarnings(True)
    try:
        yield
    finally:
        logging.captureWarnings(False)
        logger.removeHandler(handler)
        for previous in previous_handlers:
            logger.addHandler(previous)
        logger.setLevel(previous_level)
