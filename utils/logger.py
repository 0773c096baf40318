"""
Logging utilities for Burger Book application.

All loggers hang off the ``burger_book`` logger. Levels and the log file come
from ``Config``; store reads and writes are timed with ``log_store_operation``.
"""

import logging
import logging.handlers
import sys
import time
from pathlib import Path
from typing import Optional

from .config import Config, get_config

ROOT_LOGGER = "burger_book"

CONSOLE_FORMAT = '%(asctime)s %(levelname)-7s %(name)s: %(message)s'
FILE_FORMAT = '%(asctime)s %(levelname)-7s %(name)s [%(filename)s:%(lineno)d] %(message)s'


def setup_logging(config: Optional[Config] = None) -> logging.Logger:
    """
    Configure the application logger from ``config`` (the global config by default).

    Debug mode sends DEBUG records to the console; otherwise the console shows
    INFO and up. The rotating file gets everything at ``config.log_level``.
    An empty ``log_file`` disables the file handler.
    """
    config = config or get_config()
    level = logging.getLevelName(config.log_level.upper())
    if not isinstance(level, int):
        level = logging.INFO

    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(logging.DEBUG if config.debug_mode else level)

    # Streamlit reruns main.py, so replace rather than stack handlers
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT, datefmt='%H:%M:%S'))
    console_handler.setLevel(logging.DEBUG if config.debug_mode else max(level, logging.INFO))
    logger.addHandler(console_handler)

    if config.log_file:
        Path(config.log_file).parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            config.log_file, maxBytes=1024 * 1024, backupCount=2, encoding='utf-8'
        )
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT))
        file_handler.setLevel(level)
        logger.addHandler(file_handler)

    # Streamlit's own loggers are noisy at INFO
    logging.getLogger("streamlit").setLevel(logging.WARNING)

    logger.info(f"Logging to {config.log_file or 'console only'} at {logging.getLevelName(level)}")
    return logger


def get_logger(name: str) -> logging.Logger:
    """Child of the application logger, e.g. ``burger_book.services.favorites_service``"""
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")


class StoreOperation:
    """
    Times one read or write of a storage key.

    Set ``item_count`` inside the block; it is reported on exit together with
    the key and duration. Failures are logged and re-raised.
    """

    def __init__(self, logger: logging.Logger, action: str, storage_key: str):
        self.logger = logger
        self.action = action
        self.storage_key = storage_key
        self.item_count: Optional[int] = None
        self._started = 0.0

    def __enter__(self) -> 'StoreOperation':
        self._started = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        elapsed_ms = (time.perf_counter() - self._started) * 1000
        if exc_type is not None:
            self.logger.error(f"{self.action} {self.storage_key} failed after {elapsed_ms:.1f} ms: {exc_val}")
            return False

        items = "" if self.item_count is None else f", {self.item_count} item(s)"
        self.logger.debug(f"{self.action} {self.storage_key}{items} in {elapsed_ms:.1f} ms")
        return False


def log_store_operation(logger: logging.Logger, action: str, storage_key: str) -> StoreOperation:
    return StoreOperation(logger, action, storage_key)
