"""Remote shell FastMCP server.

Thin wiring: logging, middleware, the execute_shell tool and a health route.
All business logic lives in services/.
"""

import logging
import sys

from fastmcp import FastMCP
from starlette.requests import Request
from starlette.responses import PlainTextResponse

from remote_shell_mcp import __version__
from remote_shell_mcp.config import Settings, get_settings
from remote_shell_mcp.middleware import ErrorHandlingMiddleware, LoggingMiddleware
from remote_shell_mcp.tools import execute_shell
from remote_shell_mcp.utils.console import MCPRequestFormatter

SERVER_NAME = "linux_mcp_server"


def _configure_logging(settings: Settings) -> None:
    """Configure colorful stderr logging for the remote_shell_mcp package.

    Called at module load time so logging is ready regardless of how the
    server is started. Nothing is ever written to stdout, which carries the
    stdio transport.
    """
    use_colors = settings.log_colors and sys.stderr.isatty()

    package_logger = logging.getLogger("remote_shell_mcp")
    package_logger.setLevel(getattr(logging, settings.log_level, logging.INFO))

    # Only add handler if not already configured
    if not package_logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(MCPRequestFormatter(use_colors=use_colors))
        package_logger.addHandler(handler)
        package_logger.propagate = False

    for noisy_logger in [
        "uvicorn",
        "uvicorn.access",
        "uvicorn.error",
        "asyncssh",
        "httpx",
        "httpcore",
        "fastmcp",
        "starlette",
        "anyio",
    ]:
        logging.getLogger(noisy_logger).setLevel(logging.WARNING)


_configure_logging(get_settings())

logger = logging.getLogger(__name__)


def configure_middleware(server: FastMCP, settings: Settings) -> None:
    """Add middleware in order: ErrorHandling -> Logging.

    Args:
        server: The FastMCP server to configure.
        settings: Settings supplying payload logging, slow threshold and
            traceback options.
    """
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


def create_server(settings: Settings | None = None) -> FastMCP:
    """Create and configure the MCP server.

    Args:
        settings: Settings for middleware (default: read from environment)

    Returns:
        Configured FastMCP server instance
    """
    settings = settings or get_settings()

    server = FastMCP(SERVER_NAME, version=__version__)

    configure_middleware(server, settings)

    server.tool(
        name="execute_shell",
        description="execute shell command on remote machine via SSH",
        output_schema=None,
    )(execute_shell)

    @server.custom_route("/health", methods=["GET"])
    async def health_check(request: Request) -> PlainTextResponse:
        """Health check endpoint."""
        client_host = request.client.host if request.client else "unknown"
        logger.debug("Health check from %s", client_host)
        return PlainTextResponse("OK")

    logger.debug("MCP server initialized with execute_shell tool")
    return server


# Default server instance
mcp = create_server()
