"""Startup exceptions."""
from devrecord.exceptions.base import DevRecordError


class StartupError(DevRecordError):
    """Raised when the server cannot be brought up.

    This is the only fatal error class: the entrypoint logs it to stderr and
    exits with a non-zero status.
    """

    code = "STARTUP_FAILURE"
    default_recovery = "Fix the configuration reported above and restart the server."
