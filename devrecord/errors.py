"""Mapping of domain exceptions onto MCP error envelope fields."""

from typing import Any, Dict

from devrecord.exceptions import DevRecordError


def map_error_for_mcp(exc: DevRecordError) -> Dict[str, Any]:
    """Convert a domain exception into the fields of a failure envelope.

    Context details (for example the offending ``templateName``) are placed
    at the top level of the envelope so callers can read them directly.
    """
    fields: Dict[str, Any] = {
        "error_code": exc.code,
        "error": exc.message,
        "suggestion": exc.recovery,
    }
    for key, value in exc.details.items():
        fields.setdefault(key, value)
    return fields
