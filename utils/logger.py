# -*- coding: utf-8 -*-
"""
Logging setup for the wizard runtime.

All modules log through children of one application logger:

    logger = get_logger(__name__)   # -> "pagewizard.services.wizard..."
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional, Union

FILE_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
CONSOLE_FORMAT = "%(levelname)-8s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Will be set by setup_logger
_logger: Optional[logging.Logger] = None


def _parse_level(level: Union[str, int, None], default: int) -> int:
    if isinstance(level, int):
        return level
    if level:
        return getattr(logging, str(level).upper(), default)
    return default


def setup_logger(level: Union[str, int, None] = None,
                 log_path: Optional[Path] = None,
                 console: bool = True) -> logging.Logger:
    """
    Configure the application logger.

    Args:
        level: Logger level name or number (defaults to Config.LOG_LEVEL)
        log_path: Rotating log file (defaults to Config.LOG_PATH)
        console: Also log INFO and above to stdout

    Returns:
        The application logger
    """
    global _logger

    # Import here to avoid circular imports
    from app.config import Config

    log_path = Path(log_path) if log_path else Config.LOG_PATH
    log_path.parent.mkdir(parents=True, exist_ok=True)

    logger = logging.getLogger(Config.LOGGER_NAME)
    logger.setLevel(_parse_level(level or Config.LOG_LEVEL, logging.DEBUG))
    logger.propagate = False

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    file_handler = RotatingFileHandler(
        log_path,
        maxBytes=Config.LOG_MAX_BYTES,
        backupCount=Config.LOG_BACKUP_COUNT,
        encoding="utf-8"
    )
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(file_handler)

    if console:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(logging.INFO)
        console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
        logger.addHandler(console_handler)

    _logger = logger
    return logger


def set_level(level: Union[str, int]):
    """Change the application log level at runtime."""
    global _logger

    if _logger is None:
        _logger = setup_logger()
    _logger.setLevel(_parse_level(level, logging.DEBUG))


def get_logger(name: str) -> logging.Logger:
    """
    Get a child logger of the application logger.

    Args:
        name: Usually the module's __name__
    """
    global _logger

    if _logger is None:
        _logger = setup_logger()

    return _logger.getChild(name)
