"""Tests for the MCP server configuration."""

import os
from unittest import mock

from scout_mcp.config import ServerConfig


def test_defaults():
    """Test server defaults with an empty environment."""
    with mock.patch.dict(os.environ, {}, clear=True):
        cfg = ServerConfig()
    assert cfg.transport == "http"
    assert cfg.run_kwargs() == {"transport": "http", "host": "127.0.0.1", "port": 3104}


def test_stdio_has_no_network_args():
    """Test stdio transport takes no host or port."""
    with mock.patch.dict(os.environ, {"SCOUT_MCP_TRANSPORT": "STDIO"}):
        cfg = ServerConfig()
    assert cfg.run_kwargs() == {"transport": "stdio"}


def test_unknown_transport_falls_back():
    """Test bad transport and port values fall back to defaults."""
    with mock.patch.dict(os.environ, {"SCOUT_MCP_TRANSPORT": "carrier-pigeon", "SCOUT_MCP_PORT": "x"}):
        cfg = ServerConfig()
    assert cfg.transport == "http"
    assert cfg.port == 3104
