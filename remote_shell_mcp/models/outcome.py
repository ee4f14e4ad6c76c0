"""Execution request and outcome models."""

from dataclasses import dataclass
from enum import Enum


class Stage(str, Enum):
    """Pipeline stage at which an invocation failed."""

    DIRECTORY_LOAD = "directory_load"
    DIRECTORY_LOOKUP = "directory_lookup"
    SESSION_ESTABLISH = "session_establish"
    COMMAND_RUN = "command_run"


@dataclass(frozen=True)
class ExecutionRequest:
    """A single execute_shell invocation."""

    target: str
    working_directory: str
    command_text: str


@dataclass(frozen=True)
class Success:
    """Command completed normally."""

    output: bytes

    @property
    def ok(self) -> bool:
        """Always True for a completed command."""
        return True


@dataclass(frozen=True)
class Failure:
    """Invocation failed at a given stage.

    partial_output is only set for command failures, and holds exactly the
    bytes captured before the command exited (possibly empty).
    """

    stage: Stage
    message: str
    partial_output: bytes | None = None

    @property
    def ok(self) -> bool:
        """Always False for a failed invocation."""
        return False


ExecutionOutcome = Success | Failure
