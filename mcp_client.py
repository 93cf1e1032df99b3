import sys

import anyio
import click
import mcp.types as types
from mcp import ClientSession, StdioServerParameters
from mcp.client.stdio import stdio_client


def server_parameters() -> StdioServerParameters:
    return StdioServerParameters(command=sys.executable, args=["-m", "mcp_server"])


async def run(region_id: str, list_tools: bool = False) -> types.CallToolResult:
    async with stdio_client(server_parameters()) as (read_stream, write_stream):
        async with ClientSession(read_stream, write_stream) as session:
            await session.initialize()

            if list_tools:
                tool_list = await session.list_tools()
                for tool in tool_list.tools:
                    click.echo(f"Tool Name: {tool.name}")

            return await session.call_tool("get-forecast", {"regionId": region_id})


@click.command()
@click.argument("region_id")
@click.option("--list-tools", is_flag=True, help="Print the tools the server advertises first")
def main(region_id: str, list_tools: bool) -> None:
    """Ask the weather MCP server for the forecast of REGION_ID (e.g. 400040)."""
    result = anyio.run(run, region_id, list_tools)
    for content in result.content:
        if isinstance(content, types.TextContent):
            click.echo(content.text)
    if result.isError:
        sys.exit(1)


if __name__ == "__main__":
    main()
