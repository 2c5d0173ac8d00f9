"""Static registry of the tools and resources exposed by the server."""

import logging
from dataclasses import dataclass
from functools import lru_cache
from typing import Any, Awaitable, Callable, Iterable

from mcp_demo.config.loader import Settings, get_settings
from mcp_demo.mcp.models import Resource, ResourceContent, TextContent, Tool

logger = logging.getLogger(__name__)

# Type aliases for tool handlers and resource readers
ToolHandler = Callable[[dict[str, Any]], Awaitable[list[TextContent]]]
ResourceReader = Callable[[], Awaitable[str]]


@dataclass(frozen=True)
class ToolDefinition:
    """A registered tool with its metadata and handler."""

    name: str
    description: str
    input_schema: dict[str, Any]
    handler: ToolHandler

    def to_mcp_tool(self) -> Tool:
        """Convert to MCP Tool model for protocol responses."""
        return Tool(
            name=self.name,
            description=self.description,
            inputSchema=self.input_schema,
        )

    def missing_arguments(self, arguments: dict[str, Any]) -> list[str]:
        """Return the required schema fields absent, null or empty in ``arguments``."""
        required = self.input_schema.get("required", [])
        return [field for field in required if arguments.get(field) in (None, "")]


@dataclass(frozen=True)
class ResourceDefinition:
    """A registered resource with its metadata and reader."""

    uri: str
    name: str
    description: str
    mime_type: str
    reader: ResourceReader

    def to_mcp_resource(self) -> Resource:
        """Convert to MCP Resource model for protocol responses."""
        return Resource(
            uri=self.uri,
            name=self.name,
            description=self.description,
            mimeType=self.mime_type,
        )

    async def read(self) -> ResourceContent:
        """Read the resource and wrap it as protocol content."""
        text = await self.reader()
        return ResourceContent(uri=self.uri, mimeType=self.mime_type, text=text)


class Registry:
    """
    Read-only catalog of tools and resources.

    The catalog is fixed at construction. Lookups are keyed by tool name
    and resource uri; listing preserves declaration order.
    """

    def __init__(
        self,
        tools: Iterable[ToolDefinition] = (),
        resources: Iterable[ResourceDefinition] = (),
    ) -> None:
        self._tools: dict[str, ToolDefinition] = {}
        self._resources: dict[str, ResourceDefinition] = {}

        for tool in tools:
            if tool.name in self._tools:
                raise ValueError(f"Duplicate tool name: {tool.name}")
            self._tools[tool.name] = tool

        for resource in resources:
            if resource.uri in self._resources:
                raise ValueError(f"Duplicate resource uri: {resource.uri}")
            self._resources[resource.uri] = resource

    def find_tool(self, name: str) -> ToolDefinition | None:
        """Get a tool by exact name."""
        return self._tools.get(name)

    def find_resource(self, uri: str) -> ResourceDefinition | None:
        """Get a resource by exact uri."""
        return self._resources.get(uri)

    def list_tools(self) -> list[Tool]:
        """List all tools as MCP Tool models."""
        return [tool.to_mcp_tool() for tool in self._tools.values()]

    def list_resources(self) -> list[Resource]:
        """List all resources as MCP Resource models."""
        return [resource.to_mcp_resource() for resource in self._resources.values()]

    @property
    def tool_count(self) -> int:
        """Return the number of registered tools."""
        return len(self._tools)

    @property
    def resource_count(self) -> int:
        """Return the number of registered resources."""
        return len(self._resources)


def create_registry(settings: Settings | None = None) -> Registry:
    """Build the registry holding the built-in demo tools and resources."""
    # Imported here: providers depend on the definitions above.
    from mcp_demo.resources.demo import create_resources
    from mcp_demo.tools.demo import TOOLS

    settings = settings or get_settings()
    registry = Registry(tools=TOOLS, resources=create_resources(settings))
    logger.info(
        f"Registry ready: {registry.tool_count} tools, "
        f"{registry.resource_count} resources"
    )
    return registry


@lru_cache
def get_registry() -> Registry:
    """Get the cached process-wide registry."""
    return create_registry()
