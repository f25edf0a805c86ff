"""Health check endpoint."""

from __future__ import annotations

from fastapi import APIRouter

from scout_mcp.server import TOOL_NAME

VERSION = "0.1.0"

router = APIRouter(tags=["health"])


@router.get("/health")
async def health_check() -> dict:
    """Report gateway status and the tool it serves."""
    return {"status": "ok", "version": VERSION, "tool": TOOL_NAME}
