"""
Logging configuration for payments_client.

Library code only ever calls get_logger(); applications that want the
rotating log file call setup_logging() once at startup.
"""

import logging
from pathlib import Path
from logging.handlers import RotatingFileHandler
from typing import List, Optional

from payments_client import config

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

MAX_BYTES = 10 * 1024 * 1024  # 10 MB
BACKUP_COUNT = 5

ROOT_LOGGER_NAME = "payments_client"
LOG_FILE_NAME = "payments_client.log"


def _package_handlers(log_file: Path, level: int) -> List[logging.Handler]:
    """Rotating file at level plus a console that only shows warnings and up."""
    formatter = logging.Formatter(LOG_FORMAT, DATE_FORMAT)

    file_handler = RotatingFileHandler(log_file, maxBytes=MAX_BYTES, backupCount=BACKUP_COUNT, encoding="utf-8")
    file_handler.setLevel(level)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.WARNING)

    handlers: List[logging.Handler] = [file_handler, console_handler]
    for handler in handlers:
        handler.setFormatter(formatter)
    return handlers


def _configure_package_logger(log_file: Path, level: int) -> logging.Logger:
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(level)

    # calling setup_logging twice must not leave the old log file open
    for old in list(logger.handlers):
        logger.removeHandler(old)
        old.close()

    for handler in _package_handlers(log_file, level):
        logger.addHandler(handler)
    return logger


def setup_logging(log_dir: Optional[Path] = None, level: Optional[str] = None) -> logging.Logger:
    """
    Configure the payments_client logger tree.

    Args:
        log_dir: Directory for the rotating log file (defaults to PAYMENTS_LOG_DIR)
        level: Level name (defaults to LOG_LEVEL)

    Returns:
        The configured package logger
    """
    log_dir = Path(log_dir or config.LOG_DIR)
    log_dir.mkdir(parents=True, exist_ok=True)

    level_name = (level or config.LOG_LEVEL).upper()
    numeric_level = getattr(logging, level_name, logging.INFO)

    logger = _configure_package_logger(log_dir / LOG_FILE_NAME, numeric_level)
    logger.info("Logging configured. Log files in: %s", log_dir)
    return logger


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
