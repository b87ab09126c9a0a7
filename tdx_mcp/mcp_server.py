"""MCP server exposing TDX ticket tools over stdio."""

from __future__ import annotations

import logging
import sys
from typing import List

import anyio
from mcp import types
from mcp.server import Server
from mcp.server.stdio import stdio_server

from .config import Settings, get_settings
from .core.services.tdx_client import TdxClient
from .tools import TOOLS
from .tools.base import Tool
from .tools.operation_result import ToolCallError

logger = logging.getLogger(__name__)

SERVER_NAME = "tdx-mcp"


def create_server(client: TdxClient, tools: List[Tool] | None = None) -> Server:
    """Instantiate a Server and register tools."""
    tools = TOOLS if tools is None else tools
    registry = {t.name: t for t in tools}
    server = Server(SERVER_NAME)

    @server.list_tools()
    async def _list_tools() -> List[types.Tool]:
        return [
            types.Tool(
                name=t.name,
                description=t.description,
                inputSchema=t.inputSchema,
            )
            for t in tools
        ]

    @server.call_tool()
    async def _call_tool(name: str, arguments: dict | None) -> list:
        tool = registry.get(name)
        if not tool:
            raise ToolCallError(f"Unknown tool: {name}")

        result = await tool.run(arguments, client)
        return result.to_content(name)

    logger.debug("Registered %d tools", len(tools))
    return server


def configure_logging(settings: Settings) -> None:
    # stdout carries the protocol stream
    logging.basicConfig(
        level=settings.LOG_LEVEL, format=settings.LOG_FORMAT, stream=sys.stderr
    )


def run_server() -> None:
    """Run the MCP server with stdio transport, exiting 1 on fatal errors."""

    async def _main() -> None:
        settings = get_settings()
        configure_logging(settings)

        server = create_server(TdxClient(settings))
        async with stdio_server() as (read, write):
            logger.info("[%s] Server started", SERVER_NAME)
            await server.run(read, write, server.create_initialization_options())

    try:
        anyio.run(_main)
    except KeyboardInterrupt:
        pass
    except Exception as exc:
        print(f"[{SERVER_NAME}] Fatal error: {exc}", file=sys.stderr)
        sys.exit(1)


__all__ = ["create_server", "configure_logging", "run_server"]
