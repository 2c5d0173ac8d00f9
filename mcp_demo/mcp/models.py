"""Pydantic models for MCP JSON-RPC 2.0 protocol."""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, StrictFloat, StrictInt, StrictStr, model_validator


# =============================================================================
# JSON-RPC 2.0 Base Models
# =============================================================================

# Request ids are echoed back untouched, so no coercion between numbers and str.
RequestId = StrictInt | StrictFloat | StrictStr


class JsonRpcRequest(BaseModel):
    """JSON-RPC 2.0 request object."""

    jsonrpc: Literal["2.0"]
    id: RequestId
    method: str
    params: dict[str, Any] | list[Any] | None = None


class JsonRpcError(BaseModel):
    """JSON-RPC 2.0 error object."""

    code: int
    message: str
    data: Any = None


class JsonRpcResponse(BaseModel):
    """JSON-RPC 2.0 response object."""

    jsonrpc: Literal["2.0"] = "2.0"
    id: RequestId | None = None
    result: Any = None
    error: JsonRpcError | None = None

    @model_validator(mode="after")
    def _result_xor_error(self) -> "JsonRpcResponse":
        if self.error is not None and self.result is not None:
            raise ValueError("response cannot carry both result and error")
        return self

    @property
    def is_error(self) -> bool:
        return self.error is not None

    def model_dump(self, **kwargs: Any) -> dict[str, Any]:
        """Custom serialization emitting exactly one of result or error."""
        data: dict[str, Any] = {"jsonrpc": self.jsonrpc, "id": self.id}
        if self.error is not None:
            data["error"] = self.error.model_dump(exclude_none=True)
        else:
            data["result"] = self.result
        return data


# =============================================================================
# Handler Outcomes
# =============================================================================


class MethodSuccess(BaseModel):
    """Successful outcome of a method handler."""

    result: dict[str, Any]


class MethodFailure(BaseModel):
    """Failed outcome of a method handler, rendered as a JSON-RPC error."""

    error: JsonRpcError


MethodOutcome = MethodSuccess | MethodFailure


# =============================================================================
# MCP Content Types
# =============================================================================


class TextContent(BaseModel):
    """Text content returned by tools."""

    type: Literal["text"] = "text"
    text: str


class ResourceContent(BaseModel):
    """Content of a resource returned by resources/read."""

    uri: str
    mimeType: str
    text: str


# =============================================================================
# MCP Tool and Resource Models
# =============================================================================


class Tool(BaseModel):
    """MCP tool definition."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Tool name")
    description: str = Field(..., description="Human-readable description")
    inputSchema: dict[str, Any] = Field(
        ..., description="JSON Schema for tool input"
    )


class Resource(BaseModel):
    """MCP resource definition."""

    model_config = ConfigDict(frozen=True)

    uri: str = Field(..., description="Unique resource identifier")
    name: str
    description: str
    mimeType: str


class ToolCallResult(BaseModel):
    """Result of a tool call."""

    content: list[TextContent]


# =============================================================================
# MCP Protocol Models
# =============================================================================


class ServerInfo(BaseModel):
    """Server information returned during initialization."""

    name: str
    version: str


class Capabilities(BaseModel):
    """Server capabilities."""

    tools: dict[str, Any] = Field(default_factory=dict)
    resources: dict[str, Any] = Field(default_factory=dict)
    logging: dict[str, Any] = Field(default_factory=dict)


class InitializeResult(BaseModel):
    """Result of initialize request."""

    protocolVersion: str
    capabilities: Capabilities
    serverInfo: ServerInfo


class PingResult(BaseModel):
    """Result of ping request."""

    message: Literal["pong"] = "pong"
    timestamp: str
    server: str


class ToolsListResult(BaseModel):
    """Result of tools/list request."""

    tools: list[Tool]


class ToolCallParams(BaseModel):
    """Parameters for tools/call request."""

    name: str
    arguments: dict[str, Any] | None = None


class ResourcesListResult(BaseModel):
    """Result of resources/list request."""

    resources: list[Resource]


class ResourceReadParams(BaseModel):
    """Parameters for resources/read request."""

    uri: str


class ResourceReadResult(BaseModel):
    """Result of resources/read request."""

    contents: list[ResourceContent]
