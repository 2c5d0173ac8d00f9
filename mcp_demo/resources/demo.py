"""Demo resources: server metadata as JSON."""

import json
from datetime import datetime, timezone

from mcp_demo.config.loader import Settings
from mcp_demo.mcp.registry import ResourceDefinition

METADATA_URI = "demo://metadata"


def metadata_reader(settings: Settings, started_at: datetime):
    """Build the reader for the metadata resource."""
    document = {
        "server": "MCP Demo Server",
        "version": settings.server_version,
        "capabilities": ["tools", "resources"],
        "timestamp": started_at.isoformat(),
    }

    async def read() -> str:
        return json.dumps(document, indent=2)

    return read


def create_resources(
    settings: Settings, started_at: datetime | None = None
) -> list[ResourceDefinition]:
    """Create the demo resources, in the order reported by resources/list."""
    started_at = started_at or datetime.now(timezone.utc)
    return [
        ResourceDefinition(
            uri=METADATA_URI,
            name="Demo Metadata",
            description="Sample metadata resource",
            mime_type="application/json",
            reader=metadata_reader(settings, started_at),
        ),
    ]
