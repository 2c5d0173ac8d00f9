"""MCP (Model Context Protocol) implementation with JSON-RPC 2.0."""

from mcp_demo.mcp.models import (
    JsonRpcRequest,
    JsonRpcResponse,
    JsonRpcError,
    Tool,
    Resource,
    TextContent,
    ResourceContent,
    ToolCallResult,
)
from mcp_demo.mcp.registry import Registry, create_registry, get_registry
from mcp_demo.mcp.handlers import McpHandlers, Method
from mcp_demo.mcp.jsonrpc import Dispatcher, get_dispatcher
from mcp_demo.mcp.errors import (
    INVALID_REQUEST,
    METHOD_NOT_FOUND,
    INVALID_PARAMS,
    INTERNAL_ERROR,
)

__all__ = [
    "JsonRpcRequest",
    "JsonRpcResponse",
    "JsonRpcError",
    "Tool",
    "Resource",
    "TextContent",
    "ResourceContent",
    "ToolCallResult",
    "Registry",
    "create_registry",
    "get_registry",
    "McpHandlers",
    "Method",
    "Dispatcher",
    "get_dispatcher",
    "INVALID_REQUEST",
    "METHOD_NOT_FOUND",
    "INVALID_PARAMS",
    "INTERNAL_ERROR",
]
