"""Tests for logging middleware."""

from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest

from remote_oss.middleware.logging import LoggingMiddleware, redact


def test_redact_nested_tokens():
    """Tokens are masked at any depth; None stays None."""
    data = {"host": "h", "token": "secret", "nested": [{"connectionToken": "x"}], "other": {"token": None}}

    assert redact(data) == {
        "host": "h",
        "token": "***",
        "nested": [{"connectionToken": "***"}],
        "other": {"token": None},
    }


def make_tool_context(name: str, arguments: dict) -> MagicMock:
    context = MagicMock()
    context.method = "tools/call"
    context.message = SimpleNamespace(name=name, arguments=arguments)
    return context


@pytest.mark.asyncio
async def test_logs_tool_call_and_result() -> None:
    """Tool calls log a request line and a result line."""
    mock_logger = MagicMock()
    middleware = LoggingMiddleware(logger=mock_logger)
    context = make_tool_context("connect_transient", {"address": "example.com:22"})

    result = await middleware.on_call_tool(context, AsyncMock(return_value={"authority": "a", "uri": "u"}))

    assert result == {"authority": "a", "uri": "u"}
    first = mock_logger.info.call_args_list[0]
    assert first.args[1] == "connect_transient"
    assert "example.com:22" in first.args[2]
    mock_logger.log.assert_called_once()


@pytest.mark.asyncio
async def test_payloads_never_include_tokens() -> None:
    """Structured results are redacted before logging."""
    mock_logger = MagicMock()
    middleware = LoggingMiddleware(logger=mock_logger, include_payloads=True)
    context = make_tool_context("resolve_authority", {"authority": "remote-oss+abc"})
    result = SimpleNamespace(content=[], structured_content={"host": "h", "port": 1, "token": "secret"})

    await middleware.on_call_tool(context, AsyncMock(return_value=result))

    logged = " ".join(str(c) for c in mock_logger.debug.call_args_list)
    assert "secret" not in logged
    assert "***" in logged


@pytest.mark.asyncio
async def test_logs_tool_errors() -> None:
    """Failures are logged and re-raised."""
    mock_logger = MagicMock()
    middleware = LoggingMiddleware(logger=mock_logger)
    context = make_tool_context("resolve_authority", {})

    with pytest.raises(ValueError):
        await middleware.on_call_tool(context, AsyncMock(side_effect=ValueError("bad")))

    mock_logger.error.assert_called_once()


@pytest.mark.asyncio
async def test_slow_calls_logged_as_warning() -> None:
    """Calls over the threshold log at WARNING level."""
    mock_logger = MagicMock()
    middleware = LoggingMiddleware(logger=mock_logger, slow_threshold_ms=0.0)
    context = make_tool_context("reload_hosts", {})

    await middleware.on_call_tool(context, AsyncMock(return_value="ok"))

    level = mock_logger.log.call_args.args[0]
    assert level == 30  # logging.WARNING


@pytest.mark.asyncio
async def test_logs_resource_reads() -> None:
    """Resource reads log the URI."""
    mock_logger = MagicMock()
    middleware = LoggingMiddleware(logger=mock_logger)
    context = MagicMock()
    context.message = SimpleNamespace(uri="hosts://list")

    await middleware.on_read_resource(context, AsyncMock(return_value="listing"))

    assert mock_logger.info.call_args.args[1] == "hosts://list"
