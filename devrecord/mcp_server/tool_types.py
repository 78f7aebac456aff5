from __future__ import annotations

from typing import TYPE_CHECKING, Any, Awaitable, Callable, Dict, List, Union

from mcp.types import EmbeddedResource, ImageContent, TextContent

if TYPE_CHECKING:
    from devrecord.mcp_server.responses import ResponseEnvelope

ToolResponse = List[Union[TextContent, ImageContent, EmbeddedResource]]
ToolHandler = Callable[[Dict[str, Any]], Awaitable["ResponseEnvelope"]]
