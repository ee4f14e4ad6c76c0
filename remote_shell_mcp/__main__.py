"""Entry point for the remote shell MCP server."""

import argparse
import logging

from remote_shell_mcp import __version__
from remote_shell_mcp.config import get_settings
from remote_shell_mcp.server import mcp  # This import also configures logging

logger = logging.getLogger(__name__)


def parse_http_address(address: str) -> tuple[str, int]:
    """Split a listen address of the form 'host:port' or ':port'.

    An empty host binds all interfaces.

    Raises:
        ValueError: If the port is missing or not a number
    """
    host, sep, port = address.rpartition(":")
    if not sep or not port.isdigit():
        raise ValueError(f"invalid listen address {address!r}, expected host:port")
    host = host.strip("[]")
    return host or "0.0.0.0", int(port)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="remote-shell-mcp",
        description="MCP server exposing execute_shell over SSH",
    )
    parser.add_argument(
        "--http",
        default="",
        metavar="ADDR",
        help="if set, use streamable HTTP at this address, instead of stdin/stdout",
    )
    return parser


def run_server(argv: list[str] | None = None) -> None:
    """Run the MCP server with the configured transport."""
    args = _build_parser().parse_args(argv)
    settings = get_settings()

    logger.info("Starting remote shell MCP server v%s", __version__)
    settings.host_keys.log_status()

    transport = settings.transport
    host, port = settings.http_host, settings.http_port
    if args.http:
        try:
            host, port = parse_http_address(args.http)
        except ValueError as e:
            raise SystemExit(f"remote-shell-mcp: {e}") from e
        transport = "http"

    if transport == "stdio":
        logger.info("Starting stdio mode")
        mcp.run(transport="stdio")
    else:
        logger.info("Starting HTTP mode on %s:%d", host, port)
        mcp.run(transport="http", host=host, port=port)


if __name__ == "__main__":
    run_server()
