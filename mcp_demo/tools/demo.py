"""Demo tools: a greeting and an echo."""

from typing import Any

from mcp_demo.mcp.models import TextContent
from mcp_demo.tools.base import tool

DEFAULT_NAME = "World"
DEFAULT_MESSAGE = "No message provided"


@tool(
    name="hello",
    description="Returns a greeting message",
    input_schema={
        "type": "object",
        "properties": {
            "name": {
                "type": "string",
                "description": "Name to greet",
            },
        },
        "required": ["name"],
    },
)
async def hello(arguments: dict[str, Any]) -> list[TextContent]:
    """Greet ``arguments["name"]``, or the world when no name is given."""
    name = arguments.get("name") or DEFAULT_NAME
    return [TextContent(text=f"Hello, {name}! This is a response from the MCP server.")]


@tool(
    name="echo",
    description="Echoes back the input",
    input_schema={
        "type": "object",
        "properties": {
            "message": {
                "type": "string",
                "description": "Message to echo",
            },
        },
        "required": ["message"],
    },
)
async def echo(arguments: dict[str, Any]) -> list[TextContent]:
    message = arguments.get("message") or DEFAULT_MESSAGE
    return [TextContent(text=f"Echo: {message}")]


# Declaration order is the order reported by tools/list
TOOLS = [hello, echo]
