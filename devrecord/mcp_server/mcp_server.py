#!/usr/bin/env python3
"""Development record template MCP server.

Exposes the template catalog to an agent through two tools:

- get_template_list: discover available templates and their templateName
- get_template_detail: fetch the full text of one template

Every call returns a single JSON text item with a ``success`` flag. Failures
(unknown tool, invalid arguments, missing template, unreadable catalog) are
reported in that item and flagged with ``isError``; they never escape as
protocol errors.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional

from mcp.server import Server
from mcp.types import CallToolResult, Tool

from devrecord.config_docs import SERVER_NAME, SERVER_VERSION
from devrecord.logger import Logger, session_logger

from devrecord.mcp_server.components import initialize_components
from devrecord.mcp_server.routing import dispatch_tool_call
from devrecord.mcp_server.state import get_components, set_components
from devrecord.mcp_server.tool_schemas import build_tools

app: Server = Server(SERVER_NAME, version=SERVER_VERSION)
logger: Logger = session_logger


def initialize_server(
    *,
    templates_dir: Path,
    records_dir: Path,
    descriptions: Optional[Mapping[str, str]] = None,
    server_logger: Optional[Logger] = None,
) -> None:
    """Initialize server components.

    Raises:
        StartupError: If the records directory cannot be created.
    """
    global logger
    if server_logger is not None:
        logger = server_logger
    logger.info("Initialising devrecord MCP server")
    set_components(
        initialize_components(
            templates_dir=templates_dir,
            records_dir=records_dir,
            descriptions=descriptions,
            logger=logger,
        )
    )


@app.list_tools()
async def handle_list_tools() -> List[Tool]:
    return await build_tools()


# Arguments are validated against the tool contracts by the dispatcher, which
# reports violations as INVALID_ARGUMENTS envelopes.
@app.call_tool(validate_input=False)
async def handle_call_tool(name: str, arguments: Optional[Dict[str, Any]]) -> CallToolResult:
    if get_components() is None:
        logger.error("Tool call received before server initialisation", tool=name)
    envelope = await dispatch_tool_call(name=name, arguments=arguments, logger=logger)
    return envelope.to_call_result()
