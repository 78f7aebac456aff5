"""Custom exceptions for the template catalog and tool dispatch.

All exceptions include detailed error messages designed for LLM processing,
enabling intelligent error recovery and decision-making.
"""

from devrecord.exceptions.base import DevRecordError
from devrecord.exceptions.template import CatalogError, TemplateNotFoundError
from devrecord.exceptions.tool import InvalidArgumentsError, UnknownToolError
from devrecord.exceptions.startup import StartupError

__all__ = [
    "DevRecordError",
    "CatalogError",
    "TemplateNotFoundError",
    "InvalidArgumentsError",
    "UnknownToolError",
    "StartupError",
]
