# -*- coding: utf-8 -*-
"""
Logging configuration.

One "research_wizard" logger writes everything to a rotating file and
INFO and above (or LOG_LEVEL) to stdout. Modules log through children
obtained from get_logger(__name__).
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional, Union

LOGGER_NAME = "research_wizard"

FILE_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
CONSOLE_FORMAT = "%(levelname)-8s | %(message)s"

# Will be set by setup_logger
_logger: Optional[logging.Logger] = None


def _resolve_level(level: Union[str, int, None], default: int) -> int:
    if level is None:
        return default
    if isinstance(level, int):
        return level
    return getattr(logging, str(level).upper(), default)


def setup_logger(
    log_path: Optional[Path] = None,
    console_level: Union[str, int, None] = None,
) -> logging.Logger:
    """
    Setup application logger with file and console handlers.

    Calling it again replaces the handlers, so tests can redirect the
    log file.

    Args:
        log_path: Log file, defaults to Config.LOG_PATH
        console_level: Console threshold, defaults to Config.LOG_CONSOLE_LEVEL
    """
    global _logger

    # Import here to avoid circular imports
    from app.config import Config

    log_path = Path(log_path) if log_path is not None else Config.LOG_PATH
    log_path.parent.mkdir(parents=True, exist_ok=True)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG)
    logger.propagate = False

    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)

    file_handler = RotatingFileHandler(
        log_path,
        maxBytes=Config.LOG_MAX_BYTES,
        backupCount=Config.LOG_BACKUP_COUNT,
        encoding="utf-8"
    )
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    logger.addHandler(file_handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(
        _resolve_level(console_level if console_level is not None else Config.LOG_CONSOLE_LEVEL,
                       logging.INFO)
    )
    console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    logger.addHandler(console_handler)

    _logger = logger
    return logger


def get_logger(name: str) -> logging.Logger:
    """
    Get a child logger for a module, setting up logging on first use.
    """
    global _logger

    if _logger is None:
        _logger = setup_logger()

    return _logger.getChild(name)
