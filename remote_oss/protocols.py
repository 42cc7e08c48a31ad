"""Protocol interfaces for interactive collaborators.

The resolver never talks to a user directly. It depends on these
protocols, so the MCP elicitation implementations can be swapped for
scripted ones in tests.

Usage Example:

    from remote_oss.protocols import CredentialPrompt

    class ScriptedPrompt:
        async def request_token(self, host: str) -> PromptResult:
            return PromptResult.answered("secret")

    resolver = Resolver(registry, ScriptedPrompt())
"""

from typing import Protocol, runtime_checkable

from remote_oss.models import PromptResult


@runtime_checkable
class CredentialPrompt(Protocol):
    """Protocol for obtaining a connection token from the user."""

    async def request_token(self, host: str) -> PromptResult:
        """Ask the user for a connection token.

        Args:
            host: Name or address of the host being connected to

        Returns:
            PromptResult; cancelled when the user dismissed the prompt

        Note:
            Suspends until the user answers or cancels.
        """
        ...


@runtime_checkable
class HostPicker(Protocol):
    """Protocol for single selection among configured host names."""

    async def pick_host(self, names: list[str]) -> str | None:
        """Offer host names for selection.

        Args:
            names: Candidate host names in display order

        Returns:
            Chosen name, or None if the user cancelled
        """
        ...


__all__ = [
    "CredentialPrompt",
    "HostPicker",
]
