"""Data-described argument contracts for MCP tools.

A Contract is an ordered set of ArgumentField constraints. It is interpreted
by ``devrecord.validation.validator.validate_arguments`` and projected to the
JSON Schema advertised in ``list_tools``.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional, Tuple


class ArgumentKind(str, Enum):
    """Primitive kinds an argument may take."""

    STRING = "string"
    INTEGER = "integer"
    NUMBER = "number"
    BOOLEAN = "boolean"


@dataclass(frozen=True)
class ArgumentField:
    """Constraint on a single named argument."""

    name: str
    kind: ArgumentKind
    description: Optional[str] = None
    required: bool = False
    min_length: Optional[int] = None  # strings only

    def to_json_schema(self) -> Dict[str, Any]:
        schema: Dict[str, Any] = {"type": self.kind.value}
        if self.description:
            schema["description"] = self.description
        if self.min_length is not None and self.kind is ArgumentKind.STRING:
            schema["minLength"] = self.min_length
        return schema


@dataclass(frozen=True)
class Contract:
    """Ordered argument constraints for one tool.

    Arguments not named by the contract are ignored and dropped from the
    validated values.
    """

    fields: Tuple[ArgumentField, ...] = field(default_factory=tuple)

    @property
    def required_fields(self) -> Tuple[str, ...]:
        return tuple(f.name for f in self.fields if f.required)

    def to_json_schema(self) -> Dict[str, Any]:
        schema: Dict[str, Any] = {
            "type": "object",
            "properties": {f.name: f.to_json_schema() for f in self.fields},
        }
        if self.required_fields:
            schema["required"] = list(self.required_fields)
        return schema
