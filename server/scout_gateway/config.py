"""Environment-based configuration for the Scout gateway."""

from __future__ import annotations

import os

from scout_mcp.config import env_bool, env_int


class GatewayConfig:
    """Gateway configuration loaded from environment variables."""

    def __init__(self) -> None:
        self.host = os.environ.get("SCOUT_GATEWAY_HOST", "0.0.0.0")
        self.port = env_int("SCOUT_GATEWAY_PORT", 8080)

        # Everything is served below this prefix; the MCP endpoint is <base>/mcp
        base_path = os.environ.get("SCOUT_BASE_PATH", "/api").strip()
        self.base_path = "/" + base_path.strip("/") if base_path.strip("/") else ""

        self.verbose_logs = env_bool("SCOUT_VERBOSE_LOGS", True)

        # CORS origins (comma-separated)
        origins = os.environ.get("SCOUT_CORS_ORIGINS", "")
        self.cors_origins: list[str] = [o.strip() for o in origins.split(",") if o.strip()] if origins else ["*"]

    @property
    def mcp_url_path(self) -> str:
        return f"{self.base_path}/mcp"

    @property
    def log_level(self) -> str:
        return "DEBUG" if self.verbose_logs else "INFO"


# Singleton
config = GatewayConfig()
