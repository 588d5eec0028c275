"""
Logging configuration using loguru.

Library modules log through ``from loguru import logger`` and never add sinks
themselves. Applications (the CLI included) call setup_logging() once at startup.
"""

import sys
from typing import Any

from loguru import logger

DEFAULT_FORMAT = "<level>[{level.name}]</level> {message}"
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level} | {name}:{line} | {message}"


def setup_logging(
    level: str = "WARNING",
    sink: Any = None,
    log_file: str | None = None,
    fmt: str = DEFAULT_FORMAT,
    rotation: str = "5 MB",
    retention: str = "7 days",
) -> None:
    """
    Replace loguru's default sink with a stderr sink and an optional log file.

    Args:
        level: Minimum log level (DEBUG, INFO, WARNING, ERROR).
        sink: Console sink; a stream or a callable taking the formatted message.
            Defaults to sys.stderr.
        log_file: Path to log file. If None, only logs to stderr.
        fmt: Loguru format string for the stderr sink.
        rotation: Log file rotation size.
        retention: How long to keep rotated logs.
    """
    logger.remove()
    logger.add(sink or sys.stderr, level=level.upper(), format=fmt)

    if log_file:
        add_file_sink(log_file, level=level, rotation=rotation, retention=retention)


def add_file_sink(
    log_file: str,
    level: str = "INFO",
    rotation: str = "5 MB",
    retention: str = "7 days",
) -> int:
    """Add a rotating log file next to the existing sinks; returns the loguru handler id."""
    return logger.add(
        log_file,
        level=level.upper(),
        format=FILE_FORMAT,
        rotation=rotation,
        retention=retention,
    )


def level_for_verbosity(verbose: int) -> str:
    """Map a repeated ``-v`` count to a loguru level name."""
    if verbose >= 2:
        return "DEBUG"
    if verbose == 1:
        return "INFO"
    return "WARNING"
