"""Services for remote shell MCP."""

from remote_shell_mcp.services.directory import load_all, resolve
from remote_shell_mcp.services.errors import (
    CommandRunError,
    DirectoryLoadError,
    DirectoryLookupError,
    ExecutionError,
    SessionEstablishError,
)
from remote_shell_mcp.services.executor import ExecutorOptions, compose_command, run
from remote_shell_mcp.services.handler import handle, render_outcome

__all__ = [
    "CommandRunError",
    "DirectoryLoadError",
    "DirectoryLookupError",
    "ExecutionError",
    "ExecutorOptions",
    "SessionEstablishError",
    "compose_command",
    "handle",
    "load_all",
    "render_outcome",
    "resolve",
    "run",
]
