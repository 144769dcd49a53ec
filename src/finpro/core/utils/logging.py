"""
loguru setup for the finpro CLI.

Console output goes to stderr so ``--json`` output on stdout stays parseable.
File logging is off unless ``logging.file`` or ``paths.log_dir`` is configured;
a log directory gets a rotating ``finpro.log``.
"""

import os
import sys

from loguru import logger

LOG_FILE_NAME = "finpro.log"
CONSOLE_FORMAT = "<level>[{level.name}]</level> {message}"
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level} | {name}:{function} | {message}"


def resolve_log_file(log_file: str | None = None, log_dir: str | None = None) -> str | None:
    """An explicit file wins; otherwise ``<log_dir>/finpro.log``; otherwise no file."""
    if log_file:
        return os.path.expanduser(log_file)
    if log_dir:
        return os.path.join(os.path.expanduser(log_dir), LOG_FILE_NAME)
    return None


def setup_logging(
    level: str = "WARNING",
    log_file: str | None = None,
    log_dir: str | None = None,
    rotation: str = "10 MB",
    retention: str = "7 days",
) -> str | None:
    """
    Replace loguru's sinks with a stderr sink and an optional file sink.

    Args:
        level: Minimum log level, case-insensitive.
        log_file: Explicit log file path.
        log_dir: Directory for ``finpro.log`` when no explicit file is given.
        rotation: Log file rotation size.
        retention: How long to keep rotated logs.

    Returns:
        The log file path in use, or None when logging only to stderr.
    """
    level = level.upper()
    logger.remove()
    logger.add(sys.stderr, level=level, format=CONSOLE_FORMAT)

    path = resolve_log_file(log_file, log_dir)
    if path:
        logger.add(path, level=level, format=FILE_FORMAT, rotation=rotation, retention=retention)
        logger.debug(f"Logging to {path}")
    return path
