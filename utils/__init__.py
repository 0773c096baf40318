"""
Utilities package for Burger Book application.

Contains helper functions, configuration, and shared utilities.
"""

from .config import Config, get_config, reload_config
from .logger import setup_logging, get_logger, log_store_operation
from .async_runner import AsyncRunner

__all__ = [
    'Config',
    'get_config',
    'reload_config',
    'setup_logging',
    'get_logger',
    'log_store_operation',
    'AsyncRunner'
]
