"""
Logging Configuration
Sets up the 'nucleuslab' logger: stdout always, a log file on request.
The main window adds its own console handler on top of these.
"""
import logging
import sys
from typing import Optional, Union

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%H:%M:%S'


def resolve_level(level: Union[int, str]) -> int:
    """Accepts a numeric level or a name such as 'debug' / 'INFO'."""
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.strip().upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {level!r}")
    return resolved


def setup_logging(level: Union[int, str] = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
    """
    Configures the 'nucleuslab' logger namespace.

    Args:
        level: Numeric level or level name ('DEBUG', 'INFO', ...).
        log_file: Optional path; the file is truncated on every start.

    Returns:
        The configured package logger.
    """
    level = resolve_level(level)
    logger = logging.getLogger("nucleuslab")
    logger.setLevel(level)

    # Calling twice replaces the handlers; closing releases an open log file
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    stdout_handler = logging.StreamHandler(sys.stdout)
    stdout_handler.setFormatter(formatter)
    logger.addHandler(stdout_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.info(f"Logging initialized at {logging.getLevelName(level)}.")
    return logger
