"""Configuration module for remote shell MCP.

- Settings: Environment variable configuration
- HostKeyVerifier: SSH host key verification policy
"""

from remote_shell_mcp.config.host_keys import HostKeyVerifier
from remote_shell_mcp.config.settings import Settings, get_settings

__all__ = ["HostKeyVerifier", "Settings", "get_settings"]
