"""Logging configuration for podplayer."""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

from podplayer.config import get_data_path

if TYPE_CHECKING:
    from pathlib import Path

    from podplayer.config import LoggingConfig

logger = logging.getLogger("podplayer")

LOG_FILE_NAME = "podplayer.log"
MAX_LOG_BYTES = 5 * 1024 * 1024

# httpx logs every catalog request at INFO
NOISY_LIBRARIES = ("httpx", "httpcore")


def _resolve_level(level: int | str) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {level}")
    return resolved


def _rotate(log_path: Path) -> None:
    """Move an oversized log aside, keeping one old generation."""
    if not log_path.exists() or log_path.stat().st_size <= MAX_LOG_BYTES:
        return
    old_log = log_path.with_suffix(".log.old")
    old_log.unlink(missing_ok=True)
    log_path.rename(old_log)


def setup_logging(
    *,
    level: int | str = logging.INFO,
    log_to_file: bool = True,
    log_to_console: bool = False,
    log_dir: Path | None = None,
) -> None:
    """Configure the ``podplayer`` logger.

    Args:
        level: Logging level, as a number or a name such as ``"debug"``.
        log_to_file: Whether to log to ``podplayer.log``.
        log_to_console: Whether to log to stderr (useful for debugging).
        log_dir: Directory of the log file; defaults to the data directory.

    Raises:
        ValueError: If ``level`` names no logging level.
    """
    resolved = _resolve_level(level)
    logger.setLevel(resolved)
    logger.handlers.clear()

    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    if log_to_file:
        log_path = (log_dir or get_data_path()) / LOG_FILE_NAME
        log_path.parent.mkdir(parents=True, exist_ok=True)
        _rotate(log_path)

        file_handler = logging.FileHandler(log_path)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    if log_to_console:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    for name in NOISY_LIBRARIES:
        logging.getLogger(name).setLevel(max(resolved, logging.WARNING))


def configure_from(config: LoggingConfig, *, log_dir: Path | None = None) -> None:
    """Configure logging from the ``[logging]`` section."""
    setup_logging(
        level=config.level,
        log_to_file=config.file,
        log_to_console=config.console,
        log_dir=log_dir,
    )


def get_logger(name: str) -> logging.Logger:
    """Get a logger with the given name.

    Args:
        name: Logger name (will be prefixed with 'podplayer.').

    Returns:
        Logger instance.
    """
    return logging.getLogger(f"podplayer.{name}")
