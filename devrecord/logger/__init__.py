"""
Logger module for devrecord

This module provides a flexible logging interface that allows users to
drop in their own logger implementations.

Usage:
    from devrecord.logger import Logger, DefaultLogger

    # Use the default logger
    logger = DefaultLogger()
    logger.info("Application started", templates=4)

    # Or implement your own
    class MyCustomLogger(Logger):
        def info(self, message: str, **kwargs):
            # Your custom implementation
            pass
"""

import logging

from .interface import Logger
from .default_logger import DefaultLogger
from .console_logger import ConsoleLogger

# Shared logger instance for modules that just need basic console logging
session_logger: ConsoleLogger = ConsoleLogger(level=logging.INFO)

__all__ = [
    "Logger",
    "DefaultLogger",
    "ConsoleLogger",
    "session_logger",
]
