"""Validation module for tool arguments.

Contracts describe the accepted arguments of each tool as data; the
validator interprets them. Typed pydantic models are built only from
argument bundles that passed contract validation.
"""

from devrecord.validation.contracts import ArgumentField, ArgumentKind, Contract
from devrecord.validation.error import ArgumentViolation
from devrecord.validation.validator import ValidationResult, validate_arguments

__all__ = [
    "ArgumentField",
    "ArgumentKind",
    "ArgumentViolation",
    "Contract",
    "ValidationResult",
    "validate_arguments",
]
