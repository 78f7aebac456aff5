"""MCP server response helpers.

Every tool invocation yields exactly one ResponseEnvelope, serialized as a
single JSON text item:

- success: ``{"success": true, ...payload, "message": ...}``
- failure: ``{"success": false, "error_code", "error", "suggestion", ...context}``
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from mcp.types import CallToolResult, TextContent

from devrecord.mcp_server.tool_types import ToolResponse


def _json_text(payload: Dict[str, Any]) -> TextContent:
    # Template content and descriptions are mostly CJK text; keep it readable
    return TextContent(
        type="text",
        text=json.dumps(payload, indent=2, ensure_ascii=False),
    )


@dataclass(frozen=True)
class ResponseEnvelope:
    """Uniform outcome of one tool invocation."""

    success: bool
    body: Dict[str, Any] = field(default_factory=dict)

    @property
    def is_error(self) -> bool:
        return not self.success

    @property
    def error_code(self) -> Optional[str]:
        return self.body.get("error_code")

    def to_payload(self) -> Dict[str, Any]:
        return {"success": self.success, **self.body}

    def to_content(self) -> ToolResponse:
        return [_json_text(self.to_payload())]

    def to_call_result(self) -> CallToolResult:
        return CallToolResult(content=self.to_content(), isError=self.is_error)


def _model_dump(model: Any) -> Dict[str, Any]:
    """Convert a pydantic model to a JSON-ready dict using field aliases."""
    if hasattr(model, "model_dump"):
        return model.model_dump(mode="json", by_alias=True)
    raise TypeError(f"Cannot convert {type(model).__name__} to dictionary")


def _success(data: Any, message: Optional[str] = None) -> ResponseEnvelope:
    body: Dict[str, Any] = _model_dump(data) if hasattr(data, "model_dump") else dict(data)
    if message:
        body["message"] = message
    return ResponseEnvelope(success=True, body=body)


def _error(
    code: str,
    message: str,
    recovery: str,
    details: Optional[Dict[str, Any]] = None,
) -> ResponseEnvelope:
    body: Dict[str, Any] = {
        "error_code": code,
        "error": message,
        "suggestion": recovery,
    }
    for key, value in (details or {}).items():
        body.setdefault(key, value)
    return ResponseEnvelope(success=False, body=body)
