"""Configuration loading from environment variables and .env files."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Server identity
    server_name: str = "mcp-demo-server"
    server_version: str = "1.0.0"
    server_label: str = "MCP Demo Server v1.0"  # reported by ping
    protocol_version: str = "2024-11-05"

    # Reject tools/call requests that omit arguments listed as required
    # in the tool's input schema instead of filling in defaults.
    strict_arguments: bool = False

    # Logging
    log_level: str = "INFO"
    log_format: str = "json"

    # Host and port
    host: str = "0.0.0.0"
    port: int = 8000
    reload: bool = False

    # CORS
    cors_origins: list[str] = ["*"]

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
