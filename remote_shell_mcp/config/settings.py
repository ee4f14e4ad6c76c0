"""Application settings from environment variables.

Centralized environment variable parsing and validation. Settings are read
fresh on every call to get_settings(); nothing is cached.
"""

import logging
import os
from dataclasses import dataclass, field

from remote_shell_mcp.config.host_keys import HostKeyVerifier

logger = logging.getLogger(__name__)


@dataclass
class Settings:
    """Application settings from environment.

    Handles parsing, validation, and defaults for all env vars.
    """

    # Host directory
    hosts_file: str = field(default="hosts.json")

    # SSH session
    connect_timeout: float = field(default=30.0)
    command_timeout: float | None = field(default=None)
    host_keys: HostKeyVerifier = field(default_factory=HostKeyVerifier)
    quote_working_dir: bool = field(default=False)

    # Transport
    transport: str = field(default="stdio")
    http_host: str = field(default="127.0.0.1")
    http_port: int = field(default=8000)

    # Logging
    log_level: str = field(default="INFO")
    log_colors: bool = field(default=True)
    log_payloads: bool = field(default=False)
    slow_threshold_ms: int = field(default=1000)
    include_traceback: bool = field(default=False)

    @classmethod
    def from_env(cls) -> "Settings":
        """Load settings from environment variables.

        Returns:
            Settings instance with values from environment
        """
        return cls(
            hosts_file=os.getenv("SHELL_MCP_HOSTS_FILE", "hosts.json"),
            connect_timeout=cls._get_float("SHELL_MCP_CONNECT_TIMEOUT", 30.0),
            command_timeout=cls._get_optional_float("SHELL_MCP_COMMAND_TIMEOUT"),
            host_keys=HostKeyVerifier(
                verify=cls._get_bool("SHELL_MCP_VERIFY_HOST_KEYS", False),
                known_hosts_path=os.getenv("SHELL_MCP_KNOWN_HOSTS") or None,
            ),
            quote_working_dir=cls._get_bool("SHELL_MCP_QUOTE_WORKING_DIR", False),
            transport=cls._get_transport(),
            http_host=os.getenv("SHELL_MCP_HTTP_HOST", "127.0.0.1"),
            http_port=cls._get_int("SHELL_MCP_HTTP_PORT", 8000),
            log_level=os.getenv("SHELL_MCP_LOG_LEVEL", "INFO").upper(),
            log_colors=cls._get_bool("SHELL_MCP_LOG_COLORS", True),
            log_payloads=cls._get_bool("SHELL_MCP_LOG_PAYLOADS", False),
            slow_threshold_ms=cls._get_int("SHELL_MCP_SLOW_THRESHOLD_MS", 1000),
            include_traceback=cls._get_bool("SHELL_MCP_INCLUDE_TRACEBACK", False),
        )

    @staticmethod
    def _get_int(key: str, default: int) -> int:
        """Get integer from environment.

        Args:
            key: Environment variable key
            default: Default value if not set or invalid

        Returns:
            Integer value from environment or default
        """
        value = os.getenv(key)
        if value is None:
            return default

        try:
            return int(value)
        except ValueError:
            logger.warning("Invalid int for %s: %s, using default %d", key, value, default)
            return default

    @staticmethod
    def _get_float(key: str, default: float) -> float:
        """Get positive float from environment, falling back to default."""
        value = os.getenv(key)
        if value is None:
            return default

        try:
            parsed = float(value)
        except ValueError:
            logger.warning("Invalid number for %s: %s, using default %s", key, value, default)
            return default
        if parsed <= 0:
            logger.warning("%s must be > 0, got %s. Using default: %s", key, value, default)
            return default
        return parsed

    @staticmethod
    def _get_optional_float(key: str) -> float | None:
        """Get optional positive float; unset, empty or invalid means None."""
        value = os.getenv(key, "").strip()
        if not value:
            return None

        try:
            parsed = float(value)
        except ValueError:
            logger.warning("Invalid number for %s: %s, ignoring", key, value)
            return None
        return parsed if parsed > 0 else None

    @staticmethod
    def _get_bool(key: str, default: bool) -> bool:
        """Get boolean from environment.

        Args:
            key: Environment variable key
            default: Default value if not set

        Returns:
            Boolean value from environment or default
        """
        value = os.getenv(key)
        if value is None:
            return default
        return value.lower() in ("1", "true", "yes", "on")

    @staticmethod
    def _get_transport() -> str:
        """Get transport from environment with validation.

        Returns:
            Transport type ("stdio" or "http")
        """
        transport = os.getenv("SHELL_MCP_TRANSPORT", "").lower()
        if transport in ("http", "stdio"):
            return transport
        return "stdio"


def get_settings() -> Settings:
    """Read settings from the current environment."""
    return Settings.from_env()
