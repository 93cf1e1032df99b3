import logging
import sys
from dataclasses import dataclass
from functools import partial
from typing import Any, Callable, Optional

import anyio
import click
import mcp.types as types
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server

from forecast_tool import Fetcher, get_forecast
from weather_client import fetch_forecast
from weather_config import configure_logging, load_settings

logger = logging.getLogger(__name__)

SERVER_NAME = "weather"
SERVER_VERSION = "1.0.0"

FORECAST_INPUT_SCHEMA = {
    "type": "object",
    "properties": {
        "regionId": {
            "type": "string",
            "minLength": 1,
            "description": "Region ID for the location (e.g., 400040 for Kurume, Fukuoka)",
        }
    },
    "required": ["regionId"],
}


@dataclass(frozen=True)
class ToolEntry:
    tool: types.Tool
    handler: Callable[[dict[str, Any]], str]


def create_text_response(text: str) -> list[types.TextContent]:
    return [types.TextContent(type="text", text=text)]


def _run_get_forecast(fetch: Fetcher, arguments: dict[str, Any]) -> str:
    return get_forecast(arguments["regionId"], fetch=fetch)


def build_tools(fetch: Fetcher = fetch_forecast) -> dict[str, ToolEntry]:
    """Tool name -> (definition with input schema, synchronous handler)."""
    return {
        "get-forecast": ToolEntry(
            tool=types.Tool(
                name="get-forecast",
                description="Get weather forecast for a location using region ID",
                inputSchema=FORECAST_INPUT_SCHEMA,
            ),
            handler=partial(_run_get_forecast, fetch),
        ),
    }


def create_server(tools: Optional[dict[str, ToolEntry]] = None) -> Server:
    """Build the MCP server around a tool table.

    Arguments are validated against each tool's input schema by the SDK
    before the handler runs. Exceptions raised while handling a call are
    turned into an error result by the SDK as well.
    """
    if tools is None:
        tools = build_tools()

    server = Server(SERVER_NAME, SERVER_VERSION)

    @server.list_tools()
    async def list_tools() -> list[types.Tool]:
        return [entry.tool for entry in tools.values()]

    @server.call_tool()
    async def call_tool(name: str, arguments: dict[str, Any]) -> list[types.TextContent]:
        entry = tools.get(name)
        if entry is None:
            raise ValueError(f"Unknown tool: {name}")
        # handlers do blocking I/O; keep them off the event loop
        text = await anyio.to_thread.run_sync(entry.handler, arguments)
        return create_text_response(text)

    return server


async def serve(server: Server) -> None:
    async with stdio_server() as (read_stream, write_stream):
        logger.info("Weather MCP Server running on stdio")
        await server.run(read_stream, write_stream, server.create_initialization_options())


@click.command()
@click.option("--log-level", default=None, help="Logging level (defaults to TENKI_LOG_LEVEL or INFO)")
def main(log_level: Optional[str]) -> None:
    """Run the weather forecast MCP server on stdio."""
    settings = load_settings()
    configure_logging(log_level or settings.log_level)

    try:
        server = create_server(build_tools(partial(fetch_forecast, api_base=settings.api_base)))
        anyio.run(serve, server)
    except Exception:
        logger.exception("Fatal error in main()")
        sys.exit(1)


if __name__ == "__main__":
    main()
