"""Configuration loading and management."""

from mcp_demo.config.loader import Settings, get_settings

__all__ = ["Settings", "get_settings"]
