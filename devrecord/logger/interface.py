"""Abstract logger interface.

Loggers take a human-readable message plus arbitrary keyword fields, which
implementations render as structured context.
"""

from abc import ABC, abstractmethod
from typing import Any


class Logger(ABC):
    """Structured logger used throughout the service."""

    @abstractmethod
    def debug(self, message: str, **kwargs: Any) -> None:
        pass

    @abstractmethod
    def info(self, message: str, **kwargs: Any) -> None:
        pass

    @abstractmethod
    def warning(self, message: str, **kwargs: Any) -> None:
        pass

    @abstractmethod
    def error(self, message: str, **kwargs: Any) -> None:
        pass

    @abstractmethod
    def critical(self, message: str, **kwargs: Any) -> None:
        pass
