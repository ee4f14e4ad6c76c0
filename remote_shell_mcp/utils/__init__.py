"""Utilities for remote shell MCP."""

from remote_shell_mcp.utils.console import ColorfulFormatter, MCPRequestFormatter
from remote_shell_mcp.utils.shell import quote_path

__all__ = [
    "ColorfulFormatter",
    "MCPRequestFormatter",
    "quote_path",
]
