"""FastAPI MCP Demo Server - Main application entrypoint."""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from mcp_demo.config.loader import get_settings
from mcp_demo.mcp.jsonrpc import Dispatcher, get_dispatcher
from mcp_demo.mcp.registry import Registry, get_registry
from mcp_demo.utils.logging import setup_logging, set_request_id, get_logger

logger = logging.getLogger(__name__)

CORS_ALLOW_HEADERS = ["authorization", "x-client-info", "apikey", "content-type"]


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler."""
    # Startup
    setup_logging()
    log = get_logger("startup")

    settings = get_settings()
    log.info(
        "Starting MCP server",
        server_name=settings.server_name,
        version=settings.server_version,
        strict_arguments=settings.strict_arguments,
    )

    # Build the registry and dispatcher before the first request
    get_dispatcher()
    registry = get_registry()
    log.info(
        "Registry ready",
        tool_count=registry.tool_count,
        resource_count=registry.resource_count,
    )

    yield

    # Shutdown
    log.info("Shutting down MCP server")


# Create FastAPI app
app = FastAPI(
    title="MCP Demo Server",
    description="Model Context Protocol demo server speaking JSON-RPC 2.0",
    version="1.0.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=get_settings().cors_origins,
    allow_methods=["*"],
    allow_headers=CORS_ALLOW_HEADERS,
)


# Request ID middleware
@app.middleware("http")
async def add_request_id_middleware(request: Request, call_next):
    """Add request ID to all requests."""
    request_id = set_request_id(request.headers.get("X-Request-ID"))
    response = await call_next(request)
    response.headers["X-Request-ID"] = request_id
    return response


def invalid_format_response(details: str) -> JSONResponse:
    """Transport-level rejection for bodies that carry no usable request."""
    logger.warning(f"Rejected request body: {details}")
    return JSONResponse(
        status_code=400,
        content={"error": "Invalid request format", "details": details},
    )


# =============================================================================
# Health and Info Endpoints
# =============================================================================


@app.get("/health")
async def health() -> dict:
    """Health check endpoint."""
    return {"status": "ok"}


@app.get("/")
async def root(registry: Registry = Depends(get_registry)) -> dict:
    """Root endpoint with server info."""
    settings = get_settings()

    return {
        "name": settings.server_name,
        "version": settings.server_version,
        "description": "MCP demo server",
        "endpoints": {
            "health": "/health",
            "mcp": "/mcp-server",
            "docs": "/docs",
        },
        "tools_available": registry.tool_count,
        "resources_available": registry.resource_count,
        "mcp_protocol_version": settings.protocol_version,
    }


# =============================================================================
# MCP Endpoint
# =============================================================================


@app.post("/mcp-server")
async def mcp_endpoint(
    request: Request, dispatcher: Dispatcher = Depends(get_dispatcher)
) -> JSONResponse:
    """
    JSON-RPC endpoint.

    Accepts either ``{"request": <envelope>}`` or a bare JSON-RPC 2.0
    envelope and answers with a single JSON-RPC response.
    """
    try:
        body = await request.json()
    except ValueError as e:
        return invalid_format_response(str(e))

    if isinstance(body, dict) and "request" in body:
        body = body["request"]
    if not isinstance(body, dict):
        return invalid_format_response("request must be a JSON object")

    response = await dispatcher.handle_payload(body)
    return JSONResponse(content=response.model_dump())


# =============================================================================
# Main Entry Point
# =============================================================================


def main() -> None:
    """Run the server with uvicorn."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "mcp_demo.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.reload,
    )


if __name__ == "__main__":
    main()
