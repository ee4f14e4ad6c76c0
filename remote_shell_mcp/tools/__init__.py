"""MCP tools for remote shell MCP."""

from remote_shell_mcp.tools.execute_shell import execute_shell

__all__ = ["execute_shell"]
