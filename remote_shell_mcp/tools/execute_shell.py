"""execute_shell tool: run a shell command on a remote machine via SSH."""

from typing import Annotated

from pydantic import Field

from remote_shell_mcp.models import ExecutionRequest
from remote_shell_mcp.services import handle, render_outcome


async def execute_shell(
    machine_ip: Annotated[str, Field(description="the IP address of the target machine")],
    path: Annotated[str, Field(description="the working directory path on remote machine")],
    shell: Annotated[str, Field(description="the shell command to execute")],
) -> str:
    """execute shell command on remote machine via SSH"""
    request = ExecutionRequest(
        target=machine_ip,
        working_directory=path,
        command_text=shell,
    )
    outcome = await handle(request)
    return render_outcome(outcome)
