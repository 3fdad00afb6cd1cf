"""Logging configuration for Bounded Playlist."""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

import coloredlogs

FILE_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
CONSOLE_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'


def _reset_handlers(logger: logging.Logger) -> None:
    """Detach and close handlers left over from an earlier setup."""
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


def _rotating_file_handler(
    log_file: Path,
    max_size_mb: int,
    backup_count: int
) -> logging.Handler:
    log_file.parent.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(
        log_file,
        maxBytes=max_size_mb * 1024 * 1024,
        backupCount=backup_count,
        encoding='utf-8'
    )
    handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt='%Y-%m-%d %H:%M:%S'))
    return handler


def _console_handler() -> logging.Handler:
    # stderr keeps command output on stdout clean
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(coloredlogs.ColoredFormatter(CONSOLE_FORMAT, datefmt='%H:%M:%S'))
    return handler


def setup_logger(
    name: str = "bounded_playlist",
    log_file: Optional[Path] = None,
    level: str = "INFO",
    max_size_mb: int = 10,
    backup_count: int = 5,
    console: bool = True
) -> logging.Logger:
    """Configure the package logger.

    Module loggers such as ``bounded_playlist.models.playlist`` propagate
    here, so one call covers the whole package. Calling it again replaces
    (and closes) the handlers of the previous call.

    Args:
        name: Logger name
        log_file: Rotating log file (None disables file logging)
        level: Level name, case-insensitive
        max_size_mb: Size in MB at which the log file rotates
        backup_count: Rotated files kept
        console: Whether to log colored records to stderr

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)
    logger.setLevel(level.upper())
    _reset_handlers(logger)

    if log_file:
        logger.addHandler(_rotating_file_handler(log_file, max_size_mb, backup_count))
    if console:
        logger.addHandler(_console_handler())

    return logger
