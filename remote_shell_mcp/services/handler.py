"""Invocation handler: one execute_shell request in, one outcome out.

Every pipeline failure is converted to a Failure outcome here; nothing but
cancellation propagates past handle(). Outcomes are flattened to text only
by render_outcome().
"""

import logging

from remote_shell_mcp.config import Settings, get_settings
from remote_shell_mcp.models import (
    ExecutionOutcome,
    ExecutionRequest,
    Failure,
    Stage,
    Success,
)
from remote_shell_mcp.services import directory, executor
from remote_shell_mcp.services.errors import ExecutionError
from remote_shell_mcp.services.executor import ExecutorOptions

logger = logging.getLogger(__name__)

_FAILURE_PREFIXES = {
    Stage.DIRECTORY_LOAD: "Error loading host configurations",
    Stage.DIRECTORY_LOOKUP: "Error finding host configuration",
    Stage.SESSION_ESTABLISH: "SSH execution error",
    Stage.COMMAND_RUN: "SSH execution error",
}


def _failure(error: ExecutionError) -> Failure:
    logger.warning("Tool call failed at %s: %s", error.stage.value, error.message)
    return Failure(
        stage=error.stage,
        message=error.message,
        partial_output=error.partial_output,
    )


async def handle(
    request: ExecutionRequest,
    settings: Settings | None = None,
) -> ExecutionOutcome:
    """Run one request through load, lookup and execution.

    Args:
        request: The execute_shell invocation
        settings: Settings to use (default: read from environment)

    Returns:
        Success with the combined output, or Failure tagged with the stage
        that failed
    """
    settings = settings or get_settings()

    try:
        records = directory.load_all(settings.hosts_file)
        record = directory.resolve(records, request.target)
    except ExecutionError as e:
        return _failure(e)

    try:
        options = ExecutorOptions.from_settings(settings)
    except FileNotFoundError as e:
        logger.error("Host key verification misconfigured: %s", e)
        return Failure(stage=Stage.SESSION_ESTABLISH, message=str(e))

    try:
        output = await executor.run(
            record,
            request.working_directory,
            request.command_text,
            options=options,
        )
    except ExecutionError as e:
        return _failure(e)
    except Exception as e:
        logger.exception("Unexpected error running command on %s", record.endpoint)
        return Failure(
            stage=Stage.COMMAND_RUN,
            message=f"command execution failed: {type(e).__name__}: {e}",
            partial_output=b"",
        )

    logger.info("Tool call completed successfully for %s", request.target)
    return Success(output=output)


def render_outcome(outcome: ExecutionOutcome) -> str:
    """Flatten an outcome into the text returned to the tool caller.

    Args:
        outcome: Result of handle()

    Returns:
        Command output on success; otherwise a stage-specific error line,
        followed by any output captured before the failure
    """
    if isinstance(outcome, Success):
        return outcome.output.decode("utf-8", errors="replace")

    text = f"{_FAILURE_PREFIXES[outcome.stage]}: {outcome.message}"
    if outcome.partial_output is not None:
        partial = outcome.partial_output.decode("utf-8", errors="replace")
        text += f"\nOutput: {partial}"
    return text
