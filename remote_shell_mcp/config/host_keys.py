"""SSH host key verification policy.

Verification is disabled unless explicitly enabled, which keeps connections
to previously unverified hosts working. Disabled mode is vulnerable to MITM
attacks and is logged loudly at startup.
"""

import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)


class HostKeyVerifier:
    """Resolves the known_hosts argument passed to asyncssh."""

    def __init__(
        self,
        verify: bool = False,
        known_hosts_path: str | None = None,
    ):
        """Initialize host key verifier.

        Args:
            verify: Verify remote host keys against known_hosts
            known_hosts_path: Path to known_hosts (default: ~/.ssh/known_hosts)
        """
        self.verify = verify
        self.known_hosts_path = known_hosts_path

    def _resolve_path(self) -> Path:
        if self.known_hosts_path:
            return Path(os.path.expanduser(self.known_hosts_path))
        return Path.home() / ".ssh" / "known_hosts"

    def known_hosts_arg(self) -> str | None:
        """Get the known_hosts value for asyncssh.connect.

        Returns:
            Path string when verifying, None when verification is disabled

        Raises:
            FileNotFoundError: If verifying and the known_hosts file is missing
        """
        if not self.verify:
            return None

        path = self._resolve_path()
        if not path.exists():
            raise FileNotFoundError(
                f"SSH host key verification required but "
                f"known_hosts file not found: {path}\n\n"
                f"To fix this:\n"
                f"1. Add host keys: ssh-keyscan <ip> >> {path}\n"
                f"2. Or point SHELL_MCP_KNOWN_HOSTS at an existing file\n"
                f"3. Or disable verification (NOT RECOMMENDED): "
                f"SHELL_MCP_VERIFY_HOST_KEYS=false"
            )
        return str(path)

    def is_enabled(self) -> bool:
        """Check if host key verification is enabled."""
        return self.verify

    def log_status(self) -> None:
        """Log the verification mode, critically when disabled."""
        if not self.verify:
            logger.critical(
                "⚠️  SSH HOST KEY VERIFICATION DISABLED ⚠️\n"
                "This is INSECURE and vulnerable to MITM attacks.\n"
                "Set SHELL_MCP_VERIFY_HOST_KEYS=true to enable it."
            )
            return
        logger.info(
            "SSH host key verification enabled (known_hosts=%s)",
            self._resolve_path(),
        )
