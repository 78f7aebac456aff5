"""Logger backed by the standard library logging module."""

import logging
from typing import Any, Dict

from .interface import Logger


def format_fields(message: str, fields: Dict[str, Any]) -> str:
    """Render keyword fields as ``key=value`` pairs after the message."""
    if not fields:
        return message
    rendered = " ".join(f"{key}={value!r}" for key, value in fields.items())
    return f"{message} | {rendered}"


class DefaultLogger(Logger):
    """Delegates to a named ``logging.Logger`` without configuring handlers.

    Handler and level configuration are left to the host application, which
    makes this the right choice for libraries and tests.
    """

    def __init__(self, name: str = "devrecord"):
        self._logger = logging.getLogger(name)

    @property
    def name(self) -> str:
        return self._logger.name

    def _log(self, level: int, message: str, **kwargs: Any) -> None:
        if self._logger.isEnabledFor(level):
            self._logger.log(level, format_fields(message, kwargs))

    def debug(self, message: str, **kwargs: Any) -> None:
        self._log(logging.DEBUG, message, **kwargs)

    def info(self, message: str, **kwargs: Any) -> None:
        self._log(logging.INFO, message, **kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        self._log(logging.WARNING, message, **kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        self._log(logging.ERROR, message, **kwargs)

    def critical(self, message: str, **kwargs: Any) -> None:
        self._log(logging.CRITICAL, message, **kwargs)
