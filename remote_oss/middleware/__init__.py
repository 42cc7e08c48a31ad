"""Remote OSS middleware components."""

from remote_oss.middleware.base import RemoteOSSMiddleware
from remote_oss.middleware.errors import ErrorHandlingMiddleware
from remote_oss.middleware.logging import LoggingMiddleware, redact

__all__ = [
    "ErrorHandlingMiddleware",
    "LoggingMiddleware",
    "RemoteOSSMiddleware",
    "redact",
]
