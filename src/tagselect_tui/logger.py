"""Logging configuration for tagselect-tui using loguru.

Logging is disabled for the package on import so that applications
embedding the widget see nothing unless they opt in.  ``setup_logger``
enables it and sends records to a rotating log file; console output is off
by default because writing to the terminal would corrupt the TUI.
"""

from __future__ import annotations

import sys
from pathlib import Path

from loguru import logger

PACKAGE = "tagselect_tui"

DEFAULT_LOG_FILE = Path.home() / ".cache" / "tagselect-tui" / "tagselect-tui.log"

_FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}"
_CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
)


def setup_logger(
    log_file: str | Path | None = None,
    log_level: str = "INFO",
    rotation: str = "5 MB",
    retention: str = "7 days",
    console_output: bool = False,
) -> Path:
    """Enable package logging and configure its sinks.

    Any previously configured sinks, including loguru's default one, are
    removed first.

    Args:
        log_file: Path of the log file.  Defaults to ``DEFAULT_LOG_FILE``.
        log_level: Minimum level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        rotation: Size at which the log file is rotated.
        retention: How long rotated files are kept.
        console_output: Also log to stderr.

    Returns:
        The path of the log file in use.
    """
    path = Path(log_file).expanduser() if log_file else DEFAULT_LOG_FILE
    path.parent.mkdir(parents=True, exist_ok=True)

    # Drop loguru's default stderr sink along with any previous setup.
    logger.remove()

    if console_output:
        logger.add(sys.stderr, level=log_level, format=_CONSOLE_FORMAT, colorize=True)
    logger.add(
        path,
        level=log_level,
        format=_FILE_FORMAT,
        rotation=rotation,
        retention=retention,
        encoding="utf-8",
    )
    logger.enable(PACKAGE)
    return path


def get_logger(name: str | None = None):
    """Return the package logger, bound to *name* when given."""
    if name:
        return logger.bind(name=name)
    return logger


logger.disable(PACKAGE)
