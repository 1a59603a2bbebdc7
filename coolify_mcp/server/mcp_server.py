"""Coolify MCP server over stdio.

Exposes every registered Coolify tool to an MCP client. The client lists the
tools, then calls them by name; each call is one Coolify API request.

Environment:
  COOLIFY_BASE_URL   Coolify instance root (default http://localhost:8000)
  COOLIFY_API_TOKEN  API token sent as a bearer credential
"""

from __future__ import annotations

import asyncio
from typing import Any, Iterable

import httpx
from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import TextContent, Tool

from coolify_mcp.config import Settings
from coolify_mcp.core.errors import ToolCallFailed
from coolify_mcp.observability.tracing import log_event, new_trace_id
from coolify_mcp.runtime.dispatcher import ToolDispatcher
from coolify_mcp.schemas import ToolDefinition
from coolify_mcp.tools.http_tool import CoolifyApiConfig, HttpTransport

SERVER_NAME = 'coolify-mcp'
SERVER_VERSION = '1.0.0'


def to_mcp_tools(definitions: Iterable[ToolDefinition]) -> list[Tool]:
    return [
        Tool(name=d.name, description=d.description, inputSchema=d.input_schema)
        for d in definitions
    ]


async def handle_call_tool(
        dispatcher: ToolDispatcher,
        name: str,
        arguments: dict[str, Any] | None,
) -> list[TextContent]:
    """Run a tool call for the MCP handler.

    Backend failures are ordinary text content. Dispatcher failures are
    raised as ToolCallFailed, which the SDK reports with ``isError``.
    """
    outcome = await dispatcher.call_tool(name, arguments or {})
    if outcome.is_error:
        raise ToolCallFailed(outcome.text)
    return [TextContent(type='text', text=outcome.text)]


def create_server(dispatcher: ToolDispatcher) -> Server:
    server = Server(SERVER_NAME, version=SERVER_VERSION)

    @server.list_tools()
    async def list_tools() -> list[Tool]:
        return to_mcp_tools(dispatcher.list_tools())

    @server.call_tool()
    async def call_tool(name: str, arguments: dict[str, Any] | None) -> list[TextContent]:
        return await handle_call_tool(dispatcher, name, arguments)

    return server


async def serve(settings: Settings) -> None:
    config = CoolifyApiConfig.from_settings(settings)
    async with httpx.AsyncClient() as client:
        dispatcher = ToolDispatcher(HttpTransport(config, client=client))
        server = create_server(dispatcher)
        log_event(
            'server.start',
            trace_id=new_trace_id(),
            server=SERVER_NAME,
            version=SERVER_VERSION,
            base_url=config.base_url,
            tools=len(dispatcher.list_tools()),
        )
        async with stdio_server() as (read_stream, write_stream):
            await server.run(read_stream, write_stream, server.create_initialization_options())


def main() -> None:
    asyncio.run(serve(Settings()))


if __name__ == '__main__':
    main()
