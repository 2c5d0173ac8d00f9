"""Pytest configuration and fixtures."""

import pytest
from fastapi.testclient import TestClient
from httpx import AsyncClient, ASGITransport

from mcp_demo.main import app
from mcp_demo.config.loader import Settings, get_settings
from mcp_demo.mcp.handlers import McpHandlers
from mcp_demo.mcp.jsonrpc import Dispatcher, get_dispatcher
from mcp_demo.mcp.registry import create_registry, get_registry


@pytest.fixture
def client():
    """Synchronous test client for FastAPI app."""
    return TestClient(app)


@pytest.fixture
async def async_client():
    """Async test client for FastAPI app."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture(autouse=True)
def reset_global_state():
    """Drop cached registry and dispatcher so every test starts fresh."""
    get_registry.cache_clear()
    get_dispatcher.cache_clear()
    yield
    get_registry.cache_clear()
    get_dispatcher.cache_clear()
    app.dependency_overrides.clear()


@pytest.fixture
def settings():
    """Get application settings."""
    return get_settings()


@pytest.fixture
def registry(settings):
    """A freshly built registry with the demo catalog."""
    return create_registry(settings)


@pytest.fixture
def dispatcher(registry, settings):
    """Dispatcher using default (lenient) argument handling."""
    return Dispatcher(McpHandlers(registry, settings))


@pytest.fixture
def strict_dispatcher(registry):
    """Dispatcher that rejects calls missing required tool arguments."""
    strict = Settings(strict_arguments=True)
    return Dispatcher(McpHandlers(registry, strict))


@pytest.fixture
def sample_jsonrpc_request():
    """Sample JSON-RPC request factory."""
    def _make_request(method: str, params: dict = None, id: int | str = 1):
        request = {
            "jsonrpc": "2.0",
            "id": id,
            "method": method,
        }
        if params is not None:
            request["params"] = params
        return request
    return _make_request
