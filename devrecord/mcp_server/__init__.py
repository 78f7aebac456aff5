"""MCP server package for the devrecord template service."""

from devrecord.mcp_server.mcp_server import app, initialize_server
from devrecord.mcp_server.responses import ResponseEnvelope
from devrecord.mcp_server.routing import HANDLERS, dispatch_tool_call
from devrecord.mcp_server.tool_schemas import TOOL_DEFINITIONS, ToolDefinition, build_tools

__all__ = [
    "app",
    "initialize_server",
    "ResponseEnvelope",
    "HANDLERS",
    "dispatch_tool_call",
    "TOOL_DEFINITIONS",
    "ToolDefinition",
    "build_tools",
]
