"""Console logger writing to stderr.

stdout carries MCP protocol frames when the server runs over stdio, so every
log line must go to stderr.
"""

import logging
import sys
from typing import Union

from .default_logger import DefaultLogger

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


class ConsoleLogger(DefaultLogger):
    """DefaultLogger with its own stderr handler attached."""

    def __init__(self, name: str = "devrecord", level: Union[int, str] = logging.INFO):
        super().__init__(name)
        self._logger.propagate = False
        if not any(getattr(h, "_devrecord_console", False) for h in self._logger.handlers):
            handler = logging.StreamHandler(sys.stderr)
            handler.setFormatter(logging.Formatter(LOG_FORMAT))
            handler._devrecord_console = True  # type: ignore[attr-defined]
            self._logger.addHandler(handler)
        self.set_level(level)

    def set_level(self, level: Union[int, str]) -> None:
        if isinstance(level, str):
            level = level.upper()
        self._logger.setLevel(level)
