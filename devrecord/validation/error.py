"""Argument violation model reported by contract validation."""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict


class ArgumentViolation(BaseModel):
    """One violated field constraint, with a hint for the caller."""

    field: str
    reason: str  # missing, type, min_length, not_an_object
    message: str
    received_value: Any = None
    expected: Optional[str] = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "field": "templateName",
                "reason": "min_length",
                "message": "templateName must be at least 1 character(s) long",
                "received_value": "",
                "expected": "non-empty string",
            }
        }
    )
