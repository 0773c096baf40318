#!/usr/bin/env python3
"""
Test script for logging setup and store operation logging.
"""

import logging
import logging.handlers
import sys
from pathlib import Path

import pytest

# Add the project root to the path
sys.path.insert(0, str(Path(__file__).parent))

from utils import Config, get_logger, log_store_operation, setup_logging
from utils.logger import ROOT_LOGGER


@pytest.fixture
def app_logger():
    """Application logger, with handlers and level restored afterwards"""
    logger = logging.getLogger(ROOT_LOGGER)
    saved_handlers, saved_level = list(logger.handlers), logger.level
    yield logger
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    for handler in saved_handlers:
        logger.addHandler(handler)
    logger.setLevel(saved_level)


def test_setup_logging_from_config(app_logger, tmp_path):
    """Test the config picks the level and the rotating log file"""
    log_file = tmp_path / "logs" / "burger.log"
    logger = setup_logging(Config(log_level="debug", log_file=str(log_file)))

    assert logger is app_logger
    assert logger.level == logging.DEBUG
    file_handlers = [h for h in logger.handlers if isinstance(h, logging.handlers.RotatingFileHandler)]
    assert len(file_handlers) == 1
    assert file_handlers[0].level == logging.DEBUG
    assert log_file.exists()
    print("[OK] Logging from config")


def test_setup_logging_console_only(app_logger):
    """Test an empty log file gives a console-only logger and reruns don't stack handlers"""
    setup_logging(Config(log_level="WARNING", log_file=""))
    logger = setup_logging(Config(log_level="WARNING", log_file=""))

    assert len(logger.handlers) == 1
    assert not isinstance(logger.handlers[0], logging.FileHandler)
    assert logger.level == logging.WARNING
    print("[OK] Console-only logging")


def test_unknown_level_falls_back_to_info(app_logger):
    """Test a misspelt level does not break start-up"""
    logger = setup_logging(Config(log_level="chatty", log_file=""))
    assert logger.level == logging.INFO
    print("[OK] Unknown level")


def test_store_operation_reports_key_and_count(caplog):
    """Test a finished store operation logs the key and item count"""
    caplog.set_level(logging.DEBUG, logger=ROOT_LOGGER)
    logger = get_logger("tests")

    with log_store_operation(logger, "save", "favorites") as op:
        op.item_count = 3

    record = caplog.records[-1]
    assert record.name == f"{ROOT_LOGGER}.tests"
    assert record.levelno == logging.DEBUG
    assert record.getMessage().startswith("save favorites, 3 item(s) in ")
    print("[OK] Store operation logged")


def test_store_operation_failure_is_logged_and_raised(caplog):
    """Test a failing store operation logs an error and lets it propagate"""
    caplog.set_level(logging.DEBUG, logger=ROOT_LOGGER)
    logger = get_logger("tests")

    with pytest.raises(OSError):
        with log_store_operation(logger, "load", "userStats"):
            raise OSError("disk gone")

    record = caplog.records[-1]
    assert record.levelno == logging.ERROR
    assert "load userStats failed" in record.getMessage()
    assert "disk gone" in record.getMessage()
    print("[OK] Store operation failure")
