"""One-shot SSH command execution.

Each call opens its own connection, runs a single command with stderr merged
into stdout, and closes the connection on every exit path. There is no pool,
no retry and no reconnection.
"""

import logging
import time
from dataclasses import dataclass
from typing import TYPE_CHECKING

import asyncssh

from remote_shell_mcp.services.errors import CommandRunError, SessionEstablishError
from remote_shell_mcp.utils.shell import quote_path

if TYPE_CHECKING:
    from remote_shell_mcp.config import Settings
    from remote_shell_mcp.models import HostRecord

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ExecutorOptions:
    """Per-invocation session options."""

    connect_timeout: float = 30.0
    command_timeout: float | None = None
    # None disables host key verification
    known_hosts: str | None = None
    quote_working_dir: bool = False

    @classmethod
    def from_settings(cls, settings: "Settings") -> "ExecutorOptions":
        """Build executor options from application settings."""
        return cls(
            connect_timeout=settings.connect_timeout,
            command_timeout=settings.command_timeout,
            known_hosts=settings.host_keys.known_hosts_arg(),
            quote_working_dir=settings.quote_working_dir,
        )


def compose_command(
    working_directory: str,
    command_text: str,
    quote: bool = False,
) -> str:
    """Build the remote shell line for a command run in a directory.

    Both fields are concatenated verbatim by default. With quote=True the
    working directory is shell-quoted; the command text is never altered.

    Args:
        working_directory: Directory to cd into on the remote host
        command_text: Shell command to execute there
        quote: Quote the working directory

    Returns:
        Shell line of the form "cd <dir> && <command>"
    """
    directory = quote_path(working_directory) if quote else working_directory
    return f"cd {directory} && {command_text}"


def _describe_exit(result: "asyncssh.SSHCompletedProcess") -> str:
    """Describe an abnormal process exit."""
    if result.exit_signal:
        signal_name = result.exit_signal[0]
        return f"Process exited with signal {signal_name}"
    if result.exit_status is None:
        return "Process exited without exit status"
    return f"Process exited with status {result.exit_status}"


async def run(
    record: "HostRecord",
    working_directory: str,
    command_text: str,
    *,
    options: ExecutorOptions | None = None,
) -> bytes:
    """Run one command on the host described by record.

    Args:
        record: Resolved host credentials
        working_directory: Remote working directory
        command_text: Shell command to execute
        options: Session options (defaults: 30s connect timeout,
            no command timeout, no host key verification)

    Returns:
        Combined stdout/stderr bytes of the completed command

    Raises:
        SessionEstablishError: If the connection or channel cannot be opened
        CommandRunError: If the command exits abnormally; carries the
            captured output as partial_output
    """
    options = options or ExecutorOptions()
    endpoint = record.endpoint

    logger.info(
        "Opening SSH connection to %s@%s",
        record.principal,
        endpoint,
    )

    try:
        conn = await asyncssh.connect(
            record.identifier,
            port=record.port,
            username=record.principal,
            password=record.secret,
            known_hosts=options.known_hosts,
            client_keys=None,
            agent_path=None,
            connect_timeout=options.connect_timeout,
        )
    except (OSError, asyncssh.Error, TimeoutError, ValueError, OverflowError) as e:
        reason = str(e) or type(e).__name__
        logger.error("Failed to connect to SSH at %s: %s", endpoint, reason)
        raise SessionEstablishError(
            endpoint, f"failed to connect to SSH at {endpoint}: {reason}", e
        ) from e

    async with conn:
        logger.debug("SSH connection established to %s", endpoint)

        command = compose_command(
            working_directory,
            command_text,
            quote=options.quote_working_dir,
        )
        logger.info("Executing command on %s: %s", endpoint, command)

        start = time.perf_counter()
        try:
            result = await conn.run(
                command,
                check=False,
                stderr=asyncssh.STDOUT,
                encoding=None,
                timeout=options.command_timeout,
            )
        except asyncssh.TimeoutError as e:
            partial = e.stdout if isinstance(e.stdout, bytes) else b""
            logger.error(
                "Command on %s timed out after %ss", endpoint, options.command_timeout
            )
            raise CommandRunError(
                f"command execution failed: timed out after "
                f"{options.command_timeout}s",
                partial,
            ) from e
        except asyncssh.ChannelOpenError as e:
            logger.error("Failed to create SSH session on %s: %s", endpoint, e)
            raise SessionEstablishError(
                endpoint, f"failed to create SSH session: {e}", e
            ) from e
        except (OSError, asyncssh.Error) as e:
            logger.error("Connection to %s lost during command: %s", endpoint, e)
            raise CommandRunError(f"command execution failed: {e}", b"") from e

        duration_ms = (time.perf_counter() - start) * 1000
        output = result.stdout if isinstance(result.stdout, bytes) else b""

        if result.returncode != 0:
            reason = _describe_exit(result)
            logger.warning(
                "Command on %s failed after %.1fms: %s (%d bytes captured)",
                endpoint,
                duration_ms,
                reason,
                len(output),
            )
            raise CommandRunError(
                f"command execution failed: {reason}",
                output,
                returncode=result.returncode,
            )

        logger.info(
            "Command on %s completed in %.1fms, output length: %d bytes",
            endpoint,
            duration_ms,
            len(output),
        )
        return output
