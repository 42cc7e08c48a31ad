"""Remote OSS FastMCP server.

This is a thin wrapper that wires together the MCP server with tools and resources.
All host resolution logic lives in the services/ and utils/ modules.
"""

import logging
import sys
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

from fastmcp import FastMCP
from starlette.requests import Request
from starlette.responses import PlainTextResponse

from remote_oss.config import Settings
from remote_oss.middleware import ErrorHandlingMiddleware, LoggingMiddleware
from remote_oss.resources import list_hosts_resource
from remote_oss.services import get_config, get_registry, get_watcher
from remote_oss.tools import (
    connect_transient,
    open_folder,
    open_host,
    reload_hosts,
    resolve_authority,
)
from remote_oss.utils.console import RequestFormatter

NOISY_LOGGERS = [
    "uvicorn",
    "uvicorn.access",
    "uvicorn.error",
    "httpx",
    "httpcore",
    "fastmcp",
    "mcp",
    "starlette",
    "anyio",
]


def _configure_logging(settings: Settings) -> None:
    """Configure colorful logging for the remote_oss package.

    Called at module load time so logging is configured before any
    loggers are used, regardless of how the server is started.
    """
    # Colors only make sense on a terminal
    use_colors = settings.log_colors and sys.stderr.isatty()

    package_logger = logging.getLogger("remote_oss")
    package_logger.setLevel(getattr(logging, settings.log_level, logging.INFO))

    if not package_logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(RequestFormatter(use_colors=use_colors))
        package_logger.addHandler(handler)
        package_logger.propagate = False

    for noisy_logger in NOISY_LOGGERS:
        logging.getLogger(noisy_logger).setLevel(logging.WARNING)


_configure_logging(get_config().settings)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def app_lifespan(server: FastMCP) -> AsyncIterator[dict[str, Any]]:
    """Load the host registry at startup and keep it in sync with settings.

    Args:
        server: The FastMCP server instance

    Yields:
        Dict with the host names loaded at startup
    """
    logger.info("Remote OSS server starting up")

    watcher = get_watcher()
    await watcher.refresh(force=True)
    watcher.start()

    registry = get_registry()
    logger.info(
        "Loaded %d host(s) from %s: %s",
        len(registry.names()),
        get_config().hosts_file,
        ", ".join(registry.names()) or "(none)",
    )
    logger.info("Remote OSS server ready to accept connections")

    try:
        yield {"hosts": registry.names()}
    finally:
        logger.info("Remote OSS server shutting down")
        await watcher.stop()
        logger.info("Remote OSS server shutdown complete")


def configure_middleware(server: FastMCP) -> None:
    """Configure middleware stack for the server.

    Adds middleware in order: ErrorHandling -> Logging (with integrated timing)

    Args:
        server: The FastMCP server to configure.
    """
    settings = get_config().settings

    # First added = innermost
    server.add_middleware(
        ErrorHandlingMiddleware(include_traceback=settings.include_traceback)
    )
    server.add_middleware(
        LoggingMiddleware(
            include_payloads=settings.log_payloads,
            slow_threshold_ms=float(settings.slow_threshold_ms),
        )
    )


def create_server() -> FastMCP:
    """Create and configure the MCP server with all middleware and resources.

    Returns:
        Configured FastMCP server instance
    """
    server = FastMCP("remote_oss", lifespan=app_lifespan)

    configure_middleware(server)

    server.tool()(resolve_authority)
    server.tool()(open_host)
    server.tool()(open_folder)
    server.tool()(connect_transient)
    server.tool()(reload_hosts)

    server.resource("hosts://list", mime_type="text/plain")(list_hosts_resource)

    @server.custom_route("/health", methods=["GET"])
    async def health_check(request: Request) -> PlainTextResponse:
        """Health check endpoint."""
        client_host = request.client.host if request.client else "unknown"
        logger.debug("Health check from %s", client_host)
        return PlainTextResponse("OK")

    return server


# Default server instance
mcp = create_server()
