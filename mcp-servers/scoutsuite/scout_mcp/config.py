"""Environment-based configuration for the Scout Suite MCP server."""

from __future__ import annotations

import logging
import os

logger = logging.getLogger(__name__)

TRANSPORTS = ("http", "sse", "stdio")


def env_int(name: str, default: int) -> int:
    """Read an integer environment variable, falling back on bad values."""
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning("Ignoring non-integer %s=%r, using %d", name, raw, default)
        return default


def env_bool(name: str, default: bool) -> bool:
    raw = os.environ.get(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


class ServerConfig:
    """MCP server configuration loaded from environment variables."""

    def __init__(self) -> None:
        self.name = os.environ.get("SCOUT_MCP_NAME", "Scout Suite AWS")
        self.host = os.environ.get("SCOUT_MCP_HOST", "127.0.0.1")
        self.port = env_int("SCOUT_MCP_PORT", 3104)

        transport = os.environ.get("SCOUT_MCP_TRANSPORT", "http").strip().lower()
        if transport not in TRANSPORTS:
            logger.warning("Unknown SCOUT_MCP_TRANSPORT=%r, using 'http'", transport)
            transport = "http"
        self.transport = transport

    def run_kwargs(self) -> dict:
        """Keyword arguments for ``FastMCP.run``."""
        if self.transport == "stdio":
            return {"transport": "stdio"}
        return {"transport": self.transport, "host": self.host, "port": self.port}


# Singleton
config = ServerConfig()
