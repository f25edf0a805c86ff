"""FastAPI application hosting the Scout Suite MCP server over HTTP."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from scout_mcp.server import mcp

from .config import GatewayConfig, config
from .routers.health import VERSION, router as health_router

logger = logging.getLogger(__name__)


def create_app(cfg: GatewayConfig = config) -> FastAPI:
    """Build the gateway: MCP endpoint, health route and error boundary."""
    # Stateless JSON responses; no SSE stream is held open between calls.
    mcp_app = mcp.http_app(path="/mcp", stateless_http=True, json_response=True)

    app = FastAPI(
        title="Scout Suite MCP Gateway",
        description="Returns Scout Suite AWS audit commands over MCP",
        version=VERSION,
        lifespan=mcp_app.lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=cfg.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def internal_error_boundary(request: Request, call_next):
        """Turn any escaping exception into a bare 500."""
        try:
            return await call_next(request)
        except Exception:
            logger.exception("scout mcp handler error")
            return PlainTextResponse("Internal Server Error", status_code=500)

    app.include_router(health_router, prefix=cfg.base_path)
    app.mount(cfg.base_path or "/", mcp_app)

    logger.debug("MCP endpoint mounted at %s", cfg.mcp_url_path)
    return app


app = create_app()


def main() -> None:
    """Run the gateway with uvicorn."""
    import uvicorn

    logging.basicConfig(level=config.log_level, format="%(asctime)s [%(name)s] %(levelname)s: %(message)s")
    logger.info("Scout gateway starting on %s:%d", config.host, config.port)
    logger.info("MCP endpoint: %s", config.mcp_url_path)
    uvicorn.run(app, host=config.host, port=config.port, log_level=config.log_level.lower())


if __name__ == "__main__":
    main()
