"""
Logging configuration for the Validator Kit.

Library code only ever calls ``logging.getLogger``; applications that want
to see validator diagnostics call :func:`setup_logging` once at startup.
"""

import logging
import sys
from pathlib import Path
from typing import Optional, Union

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(
    level: Union[str, int] = "INFO",
    log_file: Optional[Union[str, Path]] = None,
    console_output: bool = True,
) -> logging.Logger:
    """
    Set up logging configuration.

    Args:
        level: Log level name or number for the ``validator_kit`` logger
        log_file: Optional log file path; parent directories are created
        console_output: Whether to log to stderr

    Returns:
        The configured ``validator_kit`` logger
    """
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)

    formatter = logging.Formatter(LOG_FORMAT, DATE_FORMAT)
    handlers = []

    if log_file is not None:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    if console_output:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(formatter)
        handlers.append(console_handler)

    logger = logging.getLogger("validator_kit")
    logger.setLevel(level)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    for handler in handlers:
        logger.addHandler(handler)

    logger.debug(f"Logging configured at {logging.getLevelName(level)}")
    if log_file is not None:
        logger.info(f"Validator Kit logging to {log_file}")

    return logger
