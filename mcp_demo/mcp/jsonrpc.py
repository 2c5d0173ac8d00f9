"""JSON-RPC 2.0 request validation and dispatch."""

import logging
from functools import lru_cache
from typing import Any

from pydantic import ValidationError

from mcp_demo.config.loader import get_settings
from mcp_demo.mcp.errors import (
    INTERNAL_ERROR,
    INVALID_REQUEST,
    METHOD_NOT_FOUND,
    make_error_data,
)
from mcp_demo.mcp.handlers import McpHandlers, Method
from mcp_demo.mcp.models import (
    JsonRpcError,
    JsonRpcRequest,
    JsonRpcResponse,
    MethodFailure,
    RequestId,
)
from mcp_demo.mcp.registry import get_registry

logger = logging.getLogger(__name__)


def _echo_id(payload: Any) -> RequestId | None:
    """Return the payload's id if it is usable in a response, else None."""
    if not isinstance(payload, dict):
        return None
    raw_id = payload.get("id")
    if isinstance(raw_id, bool) or not isinstance(raw_id, (int, float, str)):
        return None
    return raw_id


class Dispatcher:
    """
    Route JSON-RPC 2.0 requests to MCP method handlers.

    Every call returns exactly one response carrying the request id.
    Handler faults are converted to error responses, never raised.
    """

    def __init__(self, handlers: McpHandlers):
        self.handlers = handlers

    async def handle_payload(self, payload: dict[str, Any]) -> JsonRpcResponse:
        """Validate a decoded JSON object as a request and handle it."""
        try:
            request = JsonRpcRequest.model_validate(payload)
        except ValidationError as e:
            logger.warning(f"Invalid JSON-RPC request: {e.error_count()} error(s)")
            errors = e.errors(include_url=False, include_context=False, include_input=False)
            return self._error_response(
                _echo_id(payload), make_error_data(INVALID_REQUEST, data={"errors": errors})
            )

        return await self.handle(request)

    async def handle(self, request: JsonRpcRequest) -> JsonRpcResponse:
        """Handle a validated request."""
        logger.info(f"MCP request received: method={request.method} id={request.id!r}")

        method = Method.resolve(request.method)
        if method is None:
            return self._error_response(
                request.id,
                make_error_data(METHOD_NOT_FOUND, data={"method": request.method}),
            )

        try:
            outcome = await self.handlers.dispatch(method, request.params)
        except Exception as e:
            logger.exception(f"Error handling method {method.value}")
            return self._error_response(
                request.id, make_error_data(INTERNAL_ERROR, data={"error": str(e)})
            )

        if isinstance(outcome, MethodFailure):
            logger.info(f"Method {method.value} failed with code {outcome.error.code}")
            return JsonRpcResponse(id=request.id, error=outcome.error)
        return JsonRpcResponse(id=request.id, result=outcome.result)

    def _error_response(
        self, request_id: RequestId | None, error: dict[str, Any]
    ) -> JsonRpcResponse:
        logger.info(f"Returning error {error['code']} for id={request_id!r}")
        return JsonRpcResponse(id=request_id, error=JsonRpcError(**error))


@lru_cache
def get_dispatcher() -> Dispatcher:
    """Get the process-wide dispatcher bound to the global registry."""
    return Dispatcher(McpHandlers(get_registry(), get_settings()))
