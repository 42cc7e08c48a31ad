"""Interactive prompts backed by MCP elicitation.

The client answers each request with accept, decline or cancel. Decline
and cancel both count as a dismissed prompt.
"""

import logging

from fastmcp import Context

from remote_oss.models import PromptResult

logger = logging.getLogger(__name__)

TOKEN_PROMPT = "Enter the connection token for {host} (leave empty for none)"
PICK_PROMPT = "Select a host to connect to"


class ElicitationCredentialPrompt:
    """CredentialPrompt that asks the MCP client for a token."""

    def __init__(self, ctx: Context) -> None:
        self.ctx = ctx

    async def request_token(self, host: str) -> PromptResult:
        """Ask the client for a connection token.

        Args:
            host: Host being connected to, shown in the prompt

        Returns:
            Answered result with the entered text, or a cancelled result
        """
        result = await self.ctx.elicit(TOKEN_PROMPT.format(host=host), response_type=str)
        if result.action != "accept":
            logger.debug("Token prompt for %s ended with %s", host, result.action)
            return PromptResult.cancel()
        return PromptResult.answered(result.data or "")


class ElicitationHostPicker:
    """HostPicker that asks the MCP client to choose a host name."""

    def __init__(self, ctx: Context) -> None:
        self.ctx = ctx

    async def pick_host(self, names: list[str]) -> str | None:
        """Ask the client to choose one of the given host names.

        Args:
            names: Candidate host names

        Returns:
            Chosen name, or None if the client cancelled or declined
        """
        result = await self.ctx.elicit(PICK_PROMPT, response_type=names)
        if result.action != "accept":
            logger.debug("Host pick ended with %s", result.action)
            return None
        if result.data not in names:
            logger.warning("Host picker returned unknown host %r", result.data)
            return None
        return result.data
