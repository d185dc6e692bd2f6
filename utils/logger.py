"""
Logging configuration for the contact extractor.
"""

import logging
import sys
from pathlib import Path
from typing import Optional

import colorlog

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None,
                  logs_dir: str = "logs") -> None:
    """Setup logging with colored console output and optional file logging.

    Console output goes to stderr so that stdout carries only extraction results.
    """
    # Clear any existing handlers
    logging.getLogger().handlers.clear()

    console_formatter = colorlog.ColoredFormatter(
        "%(log_color)s" + LOG_FORMAT,
        datefmt=DATE_FORMAT,
        log_colors={
            'DEBUG': 'cyan',
            'INFO': 'green',
            'WARNING': 'yellow',
            'ERROR': 'red',
            'CRITICAL': 'red,bg_white',
        }
    )

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(console_formatter)
    console_handler.setLevel(level)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.addHandler(console_handler)

    if log_file:
        try:
            log_path = Path(logs_dir) / log_file
            log_path.parent.mkdir(parents=True, exist_ok=True)

            file_handler = logging.FileHandler(log_path, encoding='utf-8')
            file_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
            file_handler.setLevel(level)
            root_logger.addHandler(file_handler)

            logging.info(f"Logging to file: {log_path}")
        except OSError as e:
            logging.warning(f"Could not setup file logging: {e}")

    # Reduce noise from external libraries
    logging.getLogger('httpx').setLevel(logging.WARNING)
    logging.getLogger('httpcore').setLevel(logging.WARNING)
    logging.getLogger('asyncio').setLevel(logging.WARNING)

    logging.debug("Logging initialized")


class LoggerMixin:
    """Mixin class to provide logging capabilities to other classes."""

    @property
    def logger(self) -> logging.Logger:
        """Get logger for this class."""
        return logging.getLogger(self.__class__.__name__)
