"""MCP server wiring: list_tools, call_tool, and the stdio entry point."""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Optional

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import TextContent, Tool

from pair_programmer.config import SERVER_NAME, SERVER_VERSION
from pair_programmer.dispatcher import Dispatcher
from pair_programmer.tools import ToolRegistry

logger = logging.getLogger(__name__)


class ToolInvocationError(RuntimeError):
    """
    A handled tool failure.

    Raising it from a call_tool handler makes the SDK answer with a
    CallToolResult flagged ``isError`` instead of a protocol error.
    """

    def __init__(self, message: str, code: Optional[str] = None) -> None:
        super().__init__(message)
        self.code = code


def tool_definitions(tools: ToolRegistry) -> list[Tool]:
    """Declare all available tools."""
    return [
        Tool(name=item["name"], description=item["description"], inputSchema=item["input_schema"])
        for item in tools.list()
    ]


async def call_tool_text(
    dispatcher: Dispatcher, name: str, arguments: Optional[dict[str, Any]]
) -> list[TextContent]:
    """Run one invocation off the event loop and turn its result into MCP content."""
    result = await asyncio.to_thread(dispatcher.invoke, name, arguments)
    if "error" in result:
        raise ToolInvocationError(result["error"], result.get("code"))
    return [TextContent(type="text", text=result["text"])]


def build_server(dispatcher: Dispatcher) -> Server:
    """Create the MCP server with both tool handlers bound to `dispatcher`."""
    server = Server(SERVER_NAME, version=SERVER_VERSION)

    @server.list_tools()
    async def list_tools() -> list[Tool]:
        return tool_definitions(dispatcher.tools)

    # Arguments are checked by the dispatcher so its error codes reach the caller.
    @server.call_tool(validate_input=False)
    async def call_tool(name: str, arguments: dict[str, Any]) -> list[TextContent]:
        return await call_tool_text(dispatcher, name, arguments)

    return server


async def serve(dispatcher: Dispatcher) -> None:
    """Run the MCP server over stdio until the client disconnects."""
    server = build_server(dispatcher)
    async with stdio_server() as (read_stream, write_stream):
        logger.info("Serving %s %s over stdio", SERVER_NAME, SERVER_VERSION)
        await server.run(
            read_stream,
            write_stream,
            server.create_initialization_options(),
        )
