"""Remote shell MCP middleware components."""

from remote_shell_mcp.middleware.base import ShellMiddleware
from remote_shell_mcp.middleware.errors import ErrorHandlingMiddleware
from remote_shell_mcp.middleware.logging import LoggingMiddleware

__all__ = [
    "ErrorHandlingMiddleware",
    "LoggingMiddleware",
    "ShellMiddleware",
]
