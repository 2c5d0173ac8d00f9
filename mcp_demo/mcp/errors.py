"""JSON-RPC 2.0 error codes and error response helpers."""

from typing import Any

# Standard JSON-RPC 2.0 error codes
INVALID_REQUEST = -32600  # The JSON sent is not a valid Request object
METHOD_NOT_FOUND = -32601  # The method does not exist / is not available
INVALID_PARAMS = -32602  # Invalid method parameter(s), also unknown tool/resource
INTERNAL_ERROR = -32603  # Internal JSON-RPC error

# Messages used with INVALID_PARAMS when the call target does not exist
TOOL_NOT_FOUND_MESSAGE = "Tool not found"
RESOURCE_NOT_FOUND_MESSAGE = "Resource not found"


def error_message(code: int) -> str:
    """Get the standard message for a JSON-RPC error code."""
    messages = {
        INVALID_REQUEST: "Invalid Request",
        METHOD_NOT_FOUND: "Method not found",
        INVALID_PARAMS: "Invalid params",
        INTERNAL_ERROR: "Internal error",
    }
    return messages.get(code, "Unknown error")


def make_error_data(code: int, message: str | None = None, data: Any = None) -> dict[str, Any]:
    """Create an error object for JSON-RPC response."""
    error: dict[str, Any] = {
        "code": code,
        "message": message or error_message(code),
    }
    if data is not None:
        error["data"] = data
    return error
