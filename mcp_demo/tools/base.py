"""Decorator for declaring tools."""

from typing import Any, Callable

from mcp_demo.mcp.registry import ToolDefinition, ToolHandler


def tool(
    name: str,
    description: str,
    input_schema: dict[str, Any],
) -> Callable[[ToolHandler], ToolDefinition]:
    """
    Decorator turning a handler coroutine into a tool definition.

    Usage:
        @tool(
            name="hello",
            description="Returns a greeting message",
            input_schema={"type": "object", "properties": {}}
        )
        async def hello(arguments: dict) -> list[TextContent]:
            return [TextContent(text="Hello!")]

    The decorated name is bound to the ToolDefinition; the raw coroutine
    stays reachable as ``.handler``.
    """
    def decorator(func: ToolHandler) -> ToolDefinition:
        return ToolDefinition(
            name=name,
            description=description,
            input_schema=input_schema,
            handler=func,
        )

    return decorator
