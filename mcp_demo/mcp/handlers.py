"""MCP method handlers for JSON-RPC requests."""

import logging
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Awaitable, Callable

from mcp_demo.config.loader import Settings, get_settings
from mcp_demo.mcp.errors import (
    INVALID_PARAMS,
    RESOURCE_NOT_FOUND_MESSAGE,
    TOOL_NOT_FOUND_MESSAGE,
    make_error_data,
)
from mcp_demo.mcp.models import (
    Capabilities,
    InitializeResult,
    JsonRpcError,
    MethodFailure,
    MethodOutcome,
    MethodSuccess,
    PingResult,
    ResourceReadParams,
    ResourceReadResult,
    ResourcesListResult,
    ServerInfo,
    ToolCallParams,
    ToolCallResult,
    ToolsListResult,
)
from mcp_demo.mcp.registry import Registry

logger = logging.getLogger(__name__)

Params = dict[str, Any] | list[Any] | None
MethodHandler = Callable[[Params], Awaitable[MethodOutcome]]


class Method(str, Enum):
    """Protocol methods served by the dispatcher."""

    PING = "ping"
    INITIALIZE = "initialize"
    TOOLS_LIST = "tools/list"
    TOOLS_CALL = "tools/call"
    RESOURCES_LIST = "resources/list"
    RESOURCES_READ = "resources/read"

    @classmethod
    def resolve(cls, name: str) -> "Method | None":
        """Look up a method by its exact wire name."""
        try:
            return cls(name)
        except ValueError:
            return None


def utc_timestamp() -> str:
    """Current UTC time as ISO-8601 with millisecond precision and a Z suffix."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def failure(code: int, message: str | None = None, data: Any = None) -> MethodFailure:
    """Build a failed handler outcome."""
    return MethodFailure(error=JsonRpcError(**make_error_data(code, message, data)))


class McpHandlers:
    """Handlers for MCP protocol methods."""

    def __init__(self, registry: Registry, settings: Settings | None = None):
        self.registry = registry
        self.settings = settings or get_settings()
        self._handlers: dict[Method, MethodHandler] = {
            Method.PING: self.handle_ping,
            Method.INITIALIZE: self.handle_initialize,
            Method.TOOLS_LIST: self.handle_tools_list,
            Method.TOOLS_CALL: self.handle_tools_call,
            Method.RESOURCES_LIST: self.handle_resources_list,
            Method.RESOURCES_READ: self.handle_resources_read,
        }
        missing = [m.value for m in Method if m not in self._handlers]
        if missing:
            raise RuntimeError(f"No handler registered for methods: {missing}")

    async def handle_ping(self, params: Params) -> MethodOutcome:
        """Handle the ping request."""
        result = PingResult(
            timestamp=utc_timestamp(),
            server=self.settings.server_label,
        )
        return MethodSuccess(result=result.model_dump())

    async def handle_initialize(self, params: Params) -> MethodOutcome:
        """Handle the initialize request. Client parameters are not inspected."""
        result = InitializeResult(
            protocolVersion=self.settings.protocol_version,
            capabilities=Capabilities(),
            serverInfo=ServerInfo(
                name=self.settings.server_name,
                version=self.settings.server_version,
            ),
        )
        return MethodSuccess(result=result.model_dump())

    async def handle_tools_list(self, params: Params) -> MethodOutcome:
        """Handle the tools/list request."""
        result = ToolsListResult(tools=self.registry.list_tools())
        return MethodSuccess(result=result.model_dump())

    async def handle_tools_call(self, params: Params) -> MethodOutcome:
        """
        Handle the tools/call request.

        Malformed params raise ValidationError, which the dispatcher reports
        as an internal error.
        """
        call_params = ToolCallParams.model_validate(params or {})
        arguments = call_params.arguments or {}

        tool = self.registry.find_tool(call_params.name)
        if tool is None:
            logger.warning(f"Unknown tool requested: {call_params.name}")
            return failure(
                INVALID_PARAMS, TOOL_NOT_FOUND_MESSAGE, {"tool": call_params.name}
            )

        if self.settings.strict_arguments:
            missing = tool.missing_arguments(arguments)
            if missing:
                return failure(
                    INVALID_PARAMS, data={"tool": tool.name, "missing": missing}
                )

        logger.info(f"Calling tool: {tool.name}")
        content = await tool.handler(arguments)
        return MethodSuccess(result=ToolCallResult(content=content).model_dump())

    async def handle_resources_list(self, params: Params) -> MethodOutcome:
        """Handle the resources/list request."""
        result = ResourcesListResult(resources=self.registry.list_resources())
        return MethodSuccess(result=result.model_dump())

    async def handle_resources_read(self, params: Params) -> MethodOutcome:
        """Handle the resources/read request."""
        read_params = ResourceReadParams.model_validate(params or {})

        resource = self.registry.find_resource(read_params.uri)
        if resource is None:
            logger.warning(f"Unknown resource requested: {read_params.uri}")
            return failure(
                INVALID_PARAMS, RESOURCE_NOT_FOUND_MESSAGE, {"uri": read_params.uri}
            )

        content = await resource.read()
        return MethodSuccess(result=ResourceReadResult(contents=[content]).model_dump())

    async def dispatch(self, method: Method, params: Params) -> MethodOutcome:
        """Run the handler for ``method``."""
        return await self._handlers[method](params)
