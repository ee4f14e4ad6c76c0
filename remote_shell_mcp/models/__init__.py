"""Data models for remote shell MCP."""

from remote_shell_mcp.models.host import HostRecord
from remote_shell_mcp.models.outcome import (
    ExecutionOutcome,
    ExecutionRequest,
    Failure,
    Stage,
    Success,
)

__all__ = [
    "ExecutionOutcome",
    "ExecutionRequest",
    "Failure",
    "HostRecord",
    "Stage",
    "Success",
]
