"""
Logging Configuration Module.

All module loggers live under the "document_generator" namespace, so one
call to setup_logger() (or setup_logger_from_config() from the CLI)
configures the whole package. Console output highlights the level name
with colorama; an optional rotating log file receives plain records.

Usage:
    from docgen.utils.logger import get_logger

    # Initialize module logger
    logger = get_logger(__name__)
    logger.info("Composing receipt...")
"""

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Optional, Union

import colorama
from colorama import Fore, Style

colorama.init()

# Namespace shared by every module logger
LOGGER_NAMESPACE = "document_generator"

DEFAULT_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class ColoredFormatter(logging.Formatter):
    """
    Console formatter that colours the level name of each record.

    Only the level name is coloured so that messages containing document
    text stay readable when copied from the terminal.
    """

    LEVEL_COLORS = {
        logging.DEBUG: Fore.CYAN,
        logging.INFO: Fore.GREEN,
        logging.WARNING: Fore.YELLOW,
        logging.ERROR: Fore.RED,
        logging.CRITICAL: Fore.RED + Style.BRIGHT,
    }

    def format(self, record: logging.LogRecord) -> str:
        color = self.LEVEL_COLORS.get(record.levelno)
        if color is None:
            return super().format(record)

        original = record.levelname
        record.levelname = f"{color}{original}{Style.RESET_ALL}"
        try:
            return super().format(record)
        finally:
            record.levelname = original


def _console_handler(level: int, log_format: str, date_format: str, colorize: bool) -> logging.Handler:
    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    formatter_cls = ColoredFormatter if colorize else logging.Formatter
    handler.setFormatter(formatter_cls(log_format, datefmt=date_format))
    return handler


def _file_handler(
    log_file: Union[str, Path],
    level: int,
    log_format: str,
    date_format: str,
    max_bytes: int,
    backup_count: int
) -> logging.Handler:
    log_path = Path(log_file)
    log_path.parent.mkdir(parents=True, exist_ok=True)

    handler = logging.handlers.RotatingFileHandler(
        log_path,
        maxBytes=max_bytes,
        backupCount=backup_count,
        encoding='utf-8'
    )
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(log_format, datefmt=date_format))
    return handler


def setup_logger(
    level: str = "INFO",
    log_format: Optional[str] = None,
    date_format: Optional[str] = None,
    log_file: Optional[Union[str, Path]] = None,
    max_bytes: int = 10485760,  # 10 MB
    backup_count: int = 5,
    colorize: bool = True
) -> logging.Logger:
    """
    Configure the package logger.

    Calling it again replaces the previous handlers.

    Args:
        level: Level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_format: Record format, DEFAULT_FORMAT when None.
        date_format: Timestamp format, DEFAULT_DATE_FORMAT when None.
        log_file: Rotating log file; no file logging when None.
        max_bytes: Size at which the log file rotates.
        backup_count: Rotated files kept.
        colorize: Colour level names on the console.

    Returns:
        The namespace logger.

    Example:
        >>> setup_logger(level="DEBUG", log_file="logs/docgen.log")
    """
    numeric_level = getattr(logging, level.upper())
    log_format = log_format or DEFAULT_FORMAT
    date_format = date_format or DEFAULT_DATE_FORMAT

    package_logger = logging.getLogger(LOGGER_NAMESPACE)
    package_logger.setLevel(numeric_level)
    package_logger.handlers.clear()
    package_logger.propagate = False

    package_logger.addHandler(_console_handler(numeric_level, log_format, date_format, colorize))
    if log_file:
        package_logger.addHandler(
            _file_handler(log_file, numeric_level, log_format, date_format, max_bytes, backup_count)
        )

    package_logger.debug(f"Logging configured at {level.upper()}")
    return package_logger


def get_logger(name: str) -> logging.Logger:
    """
    Logger for one module, placed under the package namespace.

    Example:
        >>> get_logger("docgen.export.pipeline").name
        'document_generator.docgen.export.pipeline'
    """
    if name.startswith(LOGGER_NAMESPACE):
        return logging.getLogger(name)
    return logging.getLogger(f"{LOGGER_NAMESPACE}.{name}")


def setup_logger_from_config() -> logging.Logger:
    """Configure logging from the `logging` section of the settings."""
    from config import get_config

    log_file = get_config("logging.file.path") if get_config("logging.file.enabled", False) else None

    return setup_logger(
        level=get_config("logging.level", "INFO"),
        log_format=get_config("logging.format"),
        date_format=get_config("logging.date_format"),
        log_file=log_file,
        max_bytes=get_config("logging.file.max_bytes", 10485760),
        backup_count=get_config("logging.file.backup_count", 5),
        colorize=get_config("logging.console.colorize", True)
    )
