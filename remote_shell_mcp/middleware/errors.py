"""Error handling middleware for unexpected failures.

Pipeline failures (directory, session, command) never reach this layer; the
invocation handler turns them into text. What arrives here is everything
else: argument validation errors, bugs, transport problems.
"""

import logging
import traceback
from collections import defaultdict
from typing import Any

from fastmcp.server.middleware import MiddlewareContext

from remote_shell_mcp.middleware.base import ShellMiddleware


class ErrorHandlingMiddleware(ShellMiddleware):
    """Logs and counts exceptions escaping request handlers, then re-raises.

    Example:
        >>> middleware = ErrorHandlingMiddleware(include_traceback=True)
        >>> mcp.add_middleware(middleware)
    """

    def __init__(
        self,
        logger: logging.Logger | None = None,
        include_traceback: bool = False,
    ) -> None:
        """Initialize error handling middleware.

        Args:
            logger: Optional custom logger.
            include_traceback: Whether to include full traceback in logs.
        """
        super().__init__(logger=logger)
        self.include_traceback = include_traceback
        self._error_counts: dict[str, int] = defaultdict(int)

    def get_error_stats(self) -> dict[str, int]:
        """Get error statistics by exception type."""
        return dict(self._error_counts)

    def reset_stats(self) -> None:
        """Reset error statistics."""
        self._error_counts.clear()

    def _describe(self, context: MiddlewareContext) -> str:
        tool_name = getattr(context.message, "name", None)
        if context.method == "tools/call" and isinstance(tool_name, str):
            return f"{context.method} ({tool_name})"
        return str(context.method)

    async def on_message(
        self,
        context: MiddlewareContext,
        call_next: Any,
    ) -> Any:
        """Log errors during request processing.

        Raises:
            Exception: Re-raises the original exception after logging.
        """
        try:
            return await call_next(context)

        except Exception as e:
            error_type = type(e).__name__
            self._error_counts[error_type] += 1

            if self.include_traceback:
                self.logger.error(
                    "Error in %s: %s: %s\n%s",
                    self._describe(context),
                    error_type,
                    str(e),
                    traceback.format_exc(),
                )
            else:
                self.logger.error(
                    "Error in %s: %s: %s",
                    self._describe(context),
                    error_type,
                    str(e),
                )
            raise
