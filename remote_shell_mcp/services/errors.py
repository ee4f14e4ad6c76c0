"""Stage-tagged errors raised inside the execution pipeline.

These never cross the invocation boundary: the handler converts each one
into a Failure outcome.
"""

from remote_shell_mcp.models import Stage


class ExecutionError(Exception):
    """Base class for pipeline failures."""

    stage: Stage

    def __init__(self, message: str, partial_output: bytes | None = None):
        """Initialize execution error.

        Args:
            message: Human-readable cause
            partial_output: Output captured before the failure, if any
        """
        self.message = message
        self.partial_output = partial_output
        super().__init__(message)


class DirectoryLoadError(ExecutionError):
    """Host directory file is missing, unreadable, or malformed."""

    stage = Stage.DIRECTORY_LOAD


class DirectoryLookupError(ExecutionError):
    """No host record matches the requested identifier."""

    stage = Stage.DIRECTORY_LOOKUP

    def __init__(self, target: str):
        self.target = target
        super().__init__(f"host configuration not found for IP: {target}")


class SessionEstablishError(ExecutionError):
    """SSH connection or channel could not be opened."""

    stage = Stage.SESSION_ESTABLISH

    def __init__(self, endpoint: str, message: str, original_error: Exception):
        self.endpoint = endpoint
        self.original_error = original_error
        super().__init__(message)


class CommandRunError(ExecutionError):
    """Remote command completed abnormally."""

    stage = Stage.COMMAND_RUN

    def __init__(
        self,
        message: str,
        partial_output: bytes,
        returncode: int | None = None,
    ):
        self.returncode = returncode
        super().__init__(message, partial_output=partial_output)
