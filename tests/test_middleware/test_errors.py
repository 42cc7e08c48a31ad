"""Tests for error handling middleware."""

from unittest.mock import AsyncMock, MagicMock

import pytest
from fastmcp.exceptions import ToolError

from remote_oss.middleware.errors import ErrorHandlingMiddleware
from remote_oss.services.resolver import HostNotFoundError


@pytest.fixture
def error_middleware() -> ErrorHandlingMiddleware:
    """Create an error handling middleware instance."""
    return ErrorHandlingMiddleware()


@pytest.fixture
def mock_context() -> MagicMock:
    """Create a mock middleware context."""
    context = MagicMock()
    context.method = "tools/call"
    context.message = MagicMock()
    context.message.name = "resolve_authority"
    return context


@pytest.mark.asyncio
async def test_error_middleware_passes_through_success(
    error_middleware: ErrorHandlingMiddleware,
    mock_context: MagicMock,
) -> None:
    """Successful requests pass through untouched."""
    call_next = AsyncMock(return_value="success")

    result = await error_middleware.on_message(mock_context, call_next)

    assert result == "success"
    assert error_middleware.get_error_stats() == {}


@pytest.mark.asyncio
async def test_error_middleware_logs_errors(mock_context: MagicMock) -> None:
    """Errors are logged with traceback when enabled."""
    mock_logger = MagicMock()
    middleware = ErrorHandlingMiddleware(logger=mock_logger, include_traceback=True)
    call_next = AsyncMock(side_effect=ValueError("test error"))

    with pytest.raises(ValueError):
        await middleware.on_message(mock_context, call_next)

    mock_logger.error.assert_called()
    error_call = str(mock_logger.error.call_args)
    assert "ValueError" in error_call
    assert "Traceback" in error_call


@pytest.mark.asyncio
async def test_error_middleware_counts_repeated_errors(
    error_middleware: ErrorHandlingMiddleware,
    mock_context: MagicMock,
) -> None:
    """Stats increment per occurrence and reset on demand."""
    call_next = AsyncMock(side_effect=ValueError("test"))

    for _ in range(3):
        with pytest.raises(ValueError):
            await error_middleware.on_message(mock_context, call_next)

    assert error_middleware.get_error_stats() == {"ValueError": 3}

    error_middleware.reset_stats()
    assert error_middleware.get_error_stats() == {}


@pytest.mark.asyncio
async def test_error_middleware_counts_wrapped_domain_error(mock_context: MagicMock) -> None:
    """ToolErrors raised from domain errors count under the domain type."""
    mock_logger = MagicMock()
    middleware = ErrorHandlingMiddleware(logger=mock_logger, include_traceback=True)
    tool_error = ToolError("Host gone is not configured")
    tool_error.__cause__ = HostNotFoundError("gone")
    call_next = AsyncMock(side_effect=tool_error)

    with pytest.raises(ToolError):
        await middleware.on_message(mock_context, call_next)

    assert middleware.get_error_stats() == {"HostNotFoundError": 1}
    # Expected failures are warnings without a traceback
    mock_logger.error.assert_not_called()
    warning = str(mock_logger.warning.call_args)
    assert "resolve_authority" in warning
    assert "Traceback" not in warning


@pytest.mark.asyncio
async def test_error_callback_called(mock_context: MagicMock) -> None:
    """The callback receives exception and context."""
    callback = MagicMock()
    middleware = ErrorHandlingMiddleware(error_callback=callback)
    error = RuntimeError("boom")

    with pytest.raises(RuntimeError):
        await middleware.on_message(mock_context, AsyncMock(side_effect=error))

    callback.assert_called_once_with(error, mock_context)


@pytest.mark.asyncio
async def test_failing_callback_does_not_mask_error(mock_context: MagicMock) -> None:
    """A broken callback is logged; the original error still propagates."""
    mock_logger = MagicMock()
    middleware = ErrorHandlingMiddleware(
        logger=mock_logger,
        error_callback=MagicMock(side_effect=KeyError("cb")),
    )

    with pytest.raises(RuntimeError, match="boom"):
        await middleware.on_message(mock_context, AsyncMock(side_effect=RuntimeError("boom")))

    mock_logger.warning.assert_called_once()
