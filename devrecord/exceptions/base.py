"""Base exception for the devrecord service.

All exceptions carry a stable machine-readable ``code``, a message naming the
offending value and a ``recovery`` hint, so the agent on the other end of the
protocol can correct itself without a second round trip.
"""

from typing import Any, Dict, Optional


class DevRecordError(Exception):
    """Root of the devrecord exception hierarchy."""

    code = "DEVRECORD_ERROR"
    default_recovery = "Review the error message, adjust the request, and try again."

    def __init__(
        self,
        message: str,
        details: Optional[Dict[str, Any]] = None,
        recovery: Optional[str] = None,
    ):
        super().__init__(message)
        self.message = message
        self.details: Dict[str, Any] = dict(details or {})
        self.recovery = recovery or self.default_recovery

    def __str__(self) -> str:
        return self.message


__all__ = ["DevRecordError"]
