"""Server lifecycle and stdio wiring for MCP server."""

from __future__ import annotations

from mcp.server.stdio import stdio_server

from devrecord.mcp_server import mcp_server as server_module


async def run_stdio() -> None:
    """Serve MCP over stdin/stdout until the client disconnects.

    stdout carries protocol frames only; all logging goes to stderr.
    """
    app = server_module.app
    async with stdio_server() as (read_stream, write_stream):
        server_module.logger.info("DevRecord MCP Server running on stdio")
        await app.run(read_stream, write_stream, app.create_initialization_options())
    server_module.logger.info("Stdio transport closed")
