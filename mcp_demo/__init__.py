"""MCP demo server: JSON-RPC 2.0 dispatcher for tools and resources."""

__version__ = "1.0.0"
