"""Error handling middleware: logs and counts failed requests."""

import logging
import traceback
from collections import Counter
from collections.abc import Callable
from typing import Any

from fastmcp.server.middleware import MiddlewareContext

from remote_oss.config.source import HostsConfigError
from remote_oss.middleware.base import RemoteOSSMiddleware
from remote_oss.services.resolver import ResolutionError
from remote_oss.utils.authority import MalformedTokenError
from remote_oss.utils.validation import InvalidHostFormatError

ErrorCallback = Callable[[Exception, MiddlewareContext], None]

# Failures the user can act on; logged without a traceback
EXPECTED_ERRORS: tuple[type[Exception], ...] = (
    ResolutionError,
    MalformedTokenError,
    InvalidHostFormatError,
    HostsConfigError,
)


def root_error(error: Exception) -> Exception:
    """Return the domain error a ToolError was raised from, if any."""
    cause = error.__cause__
    return cause if isinstance(cause, Exception) else error


class ErrorHandlingMiddleware(RemoteOSSMiddleware):
    """Log failed requests and count them by error type.

    Tools raise ToolError from a domain error; the count and log line use
    the domain error's type. Expected failures (unknown host, cancelled
    token prompt, bad authority or address) are logged at WARNING, anything
    else at ERROR. The exception is always re-raised.
    """

    def __init__(
        self,
        logger: logging.Logger | None = None,
        include_traceback: bool = False,
        error_callback: ErrorCallback | None = None,
    ) -> None:
        """Initialize error handling middleware.

        Args:
            logger: Optional custom logger.
            include_traceback: Log tracebacks for unexpected errors.
            error_callback: Called with (exception, context) on each error.
        """
        super().__init__(logger=logger)
        self.include_traceback = include_traceback
        self.error_callback = error_callback
        self._error_counts: Counter[str] = Counter()

    def get_error_stats(self) -> dict[str, int]:
        """Occurrences per error type name since the last reset."""
        return dict(self._error_counts)

    def reset_stats(self) -> None:
        self._error_counts.clear()

    def _describe(self, context: MiddlewareContext) -> str:
        name = getattr(context.message, "name", None)
        if isinstance(name, str):
            return f"{context.method} [{name}]"
        return str(context.method)

    async def on_message(
        self,
        context: MiddlewareContext,
        call_next: Any,
    ) -> Any:
        """Pass the request on, logging and counting any failure."""
        try:
            return await call_next(context)
        except Exception as e:
            cause = root_error(e)
            error_type = type(cause).__name__
            self._error_counts[error_type] += 1
            where = self._describe(context)

            if isinstance(cause, EXPECTED_ERRORS):
                self.logger.warning("Failed %s: %s: %s", where, error_type, cause)
            elif self.include_traceback:
                self.logger.error(
                    "Error in %s: %s: %s\n%s",
                    where,
                    error_type,
                    e,
                    traceback.format_exc(),
                )
            else:
                self.logger.error("Error in %s: %s: %s", where, error_type, e)

            if self.error_callback:
                try:
                    self.error_callback(e, context)
                except Exception as callback_error:
                    self.logger.warning("Error callback failed: %s", callback_error)

            raise
