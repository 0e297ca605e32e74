"""
Logging configuration using loguru.

Call setup_logging() once at startup. Library modules just do
``from loguru import logger``.
"""

import sys

from loguru import logger


def setup_logging(
    level: str = "WARNING",
    log_file: str | None = None,
    fmt: str = "<level>[{level.name}]</level> {message}",
    rotation: str = "1 MB",
    retention: str = "14 days",
) -> None:
    """
    Configure loguru with console and optional file output.

    Args:
        level: Minimum log level (DEBUG, INFO, WARNING, ERROR).
        log_file: Path to log file. If None or empty, only logs to stderr.
        fmt: Loguru format string for the console sink.
        rotation: Log file rotation size.
        retention: How long to keep rotated logs.
    """
    level = (level or "WARNING").upper()
    logger.remove()
    logger.add(sys.stderr, level=level, format=fmt)

    if log_file:
        logger.add(
            log_file,
            level=level,
            format="{time:YYYY-MM-DD HH:mm:ss} | {level} | {name}:{function} | {message}",
            rotation=rotation,
            retention=retention,
        )
