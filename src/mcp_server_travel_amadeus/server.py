#!/usr/bin/env python
"""
Amadeus MCP Server - travel API tools over the Model Context Protocol

Exposes the Amadeus self-service APIs through the `amadeus` SDK:
- Flight search, pricing, booking and seat maps
- Hotel search, booking and sentiments
- Points of interest, tours and activities
- Airport transfers
- Reference data (airports, airlines, cities, check-in links)
- Travel analytics and predictions
- Flight status
"""

import asyncio
import os
import sys
from typing import List, Optional

from mcp import types
from mcp.server import Server
from mcp.server.stdio import stdio_server

from . import __version__
from .catalog import TOOLS, list_tools
from .client import AmadeusClientProvider
from .config import get_log_level
from .dispatch import TOOL_HANDLERS, Dispatcher, check_catalog_coverage
from .logs import configure_logging, logger

SERVER_NAME = "travel-amadeus-mcp"


def build_server(dispatcher: Optional[Dispatcher] = None) -> Server:
    """
    Create the MCP server with the tools/list and tools/call handlers.

    Raises:
        CatalogMismatchError: If the catalog and the handler table disagree.
    """
    check_catalog_coverage(TOOLS, TOOL_HANDLERS)
    if dispatcher is None:
        dispatcher = Dispatcher(AmadeusClientProvider())

    server = Server(SERVER_NAME, version=__version__)

    @server.list_tools()
    async def handle_list_tools() -> List[types.Tool]:
        return list_tools()

    # Declared "required" lists are advisory; the upstream API validates.
    @server.call_tool(validate_input=False)
    async def handle_call_tool(name: str, arguments: dict) -> types.CallToolResult:
        return await dispatcher.call_tool(name, arguments)

    return server


async def serve(server: Optional[Server] = None) -> None:
    """Run the server over stdio until the client disconnects."""
    if server is None:
        server = build_server()

    async with stdio_server() as (read_stream, write_stream):
        logger.info(f"Amadeus MCP Server running on stdio ({len(TOOLS)} tools)")
        await server.run(read_stream, write_stream, server.create_initialization_options())


def _log_startup_banner():
    client_id = os.getenv("AMADEUS_CLIENT_ID")
    client_secret = os.getenv("AMADEUS_CLIENT_SECRET")

    if not client_id or not client_secret:
        logger.warning(
            "AMADEUS_CLIENT_ID and AMADEUS_CLIENT_SECRET are not set; "
            "tool calls will fail until they are configured "
            "(get credentials at https://developers.amadeus.com)"
        )
    else:
        logger.info(
            f"Hostname: {os.getenv('AMADEUS_HOSTNAME') or 'production'}, "
            f"Client ID: {client_id[:8]}..."
        )


def main():
    """Main entry point for the Amadeus MCP server."""
    configure_logging(get_log_level())
    _log_startup_banner()

    try:
        asyncio.run(serve())
    except KeyboardInterrupt:
        logger.info("Interrupted, shutting down")
    except Exception as e:
        logger.exception(f"Fatal error in main(): {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
