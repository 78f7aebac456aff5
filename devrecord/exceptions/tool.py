"""Tool dispatch exceptions."""
from typing import Any, Dict, List, Optional

from devrecord.exceptions.base import DevRecordError


class UnknownToolError(DevRecordError):
    """Raised when a call names a tool that is not registered."""

    code = "UNKNOWN_TOOL"

    def __init__(self, tool_name: str, available_tools: List[str]):
        self.tool_name = tool_name
        self.available_tools = list(available_tools)
        super().__init__(
            f"Unknown tool: '{tool_name}' does not exist in this service.",
            details={"tool": tool_name, "available_tools": self.available_tools},
            recovery=(
                f"Available tools: {', '.join(self.available_tools)}. "
                "Call list_tools() to see detailed descriptions and schemas. "
                "Check for typos in the tool name."
            ),
        )


class InvalidArgumentsError(DevRecordError):
    """Raised when an argument bundle violates a tool's contract."""

    code = "INVALID_ARGUMENTS"

    def __init__(self, tool_name: str, violations: List[Dict[str, Any]], hint: Optional[str] = None):
        self.tool_name = tool_name
        self.violations = list(violations)
        fields = sorted({str(v["field"]) for v in self.violations})
        missing = [str(v["field"]) for v in self.violations if v["reason"] == "missing"]
        recovery = "Input validation failed. "
        if missing:
            recovery += f"MISSING REQUIRED FIELDS: {', '.join(missing)}. "
        if hint:
            recovery += f"{hint} "
        recovery += "Check the tool's inputSchema for required parameters and their types, correct your input, and retry."
        super().__init__(
            f"Invalid arguments for {tool_name}: {', '.join(fields)}",
            details={"validation_errors": self.violations},
            recovery=recovery,
        )
