"""Host reference resolution.

Turns a decoded host reference into final connection parameters.
This is the only place that dispatches on reference kind and credential
policy.
"""

import logging

from remote_oss.models import (
    ConnectionParams,
    FixedToken,
    HostKind,
    HostReference,
    NeverPrompt,
)
from remote_oss.protocols import CredentialPrompt, HostPicker
from remote_oss.services.registry import HostRegistry
from remote_oss.utils.authority import encode_remote_host

logger = logging.getLogger(__name__)


class ResolutionError(Exception):
    """Host reference could not be turned into connection parameters."""

    retryable = False

    def __init__(self, host_name: str, message: str):
        self.host_name = host_name
        super().__init__(message)


class HostNotFoundError(ResolutionError):
    """Configured reference names a host absent from the registry.

    Retryable: the registry may have changed since the reference was made.
    """

    retryable = True

    def __init__(self, host_name: str, available: list[str] | None = None):
        """Initialize host not found error.

        Args:
            host_name: Name that was looked up
            available: Names currently in the registry
        """
        self.available = available or []
        listing = ", ".join(self.available) if self.available else "(none)"
        super().__init__(
            host_name,
            f"Host {host_name} is not configured. Available: {listing}",
        )


class CredentialRequiredError(ResolutionError):
    """Host requires a connection token and none was supplied."""

    def __init__(self, host_name: str, cancelled: bool = False):
        """Initialize credential required error.

        Args:
            host_name: Host that demanded the token
            cancelled: True if the user dismissed the prompt
        """
        self.cancelled = cancelled
        reason = "token prompt cancelled" if cancelled else "no token specified"
        super().__init__(host_name, f"Connection to {host_name} aborted: {reason}")


class Resolver:
    """Resolves host references against the registry."""

    def __init__(self, registry: HostRegistry, prompt: CredentialPrompt) -> None:
        """Initialize resolver.

        Args:
            registry: Shared host registry
            prompt: Interactive source of connection tokens
        """
        self.registry = registry
        self.prompt = prompt

    async def resolve(self, ref: HostReference) -> ConnectionParams:
        """Resolve a host reference to connection parameters.

        Transient hosts prompt for an optional token and connect without
        one if none is given. Configured hosts follow their credential
        policy; a host that always prompts cannot proceed without a token.

        Args:
            ref: Decoded host reference

        Returns:
            ConnectionParams for the transport layer

        Raises:
            HostNotFoundError: If a configured host is not in the registry
            CredentialRequiredError: If a required token was not supplied
        """
        logger.info("Resolving host '%s'...", ref.host)

        if ref.kind is HostKind.TRANSIENT:
            logger.info("Resolved transient host to '%s:%d'", ref.host, ref.port)
            result = await self.prompt.request_token(ref.host)
            return ConnectionParams(host=ref.host, port=ref.port, token=result.token)  # type: ignore[arg-type]

        host = self.registry.find_by_name(ref.host)
        if host is None:
            raise HostNotFoundError(ref.host, self.registry.names())

        logger.info("Resolved host to '%s' (%s)", host.name, host.description)
        policy = host.credential_policy

        if isinstance(policy, NeverPrompt):
            return ConnectionParams(host=host.address, port=host.port)

        if isinstance(policy, FixedToken):
            return ConnectionParams(host=host.address, port=host.port, token=policy.token)

        logger.debug("Prompting for connection token of '%s'", host.name)
        result = await self.prompt.request_token(host.name)
        if result.token is None:
            raise CredentialRequiredError(host.name, cancelled=result.cancelled)
        return ConnectionParams(host=host.address, port=host.port, token=result.token)


async def pick_host_authority(registry: HostRegistry, picker: HostPicker) -> str | None:
    """Let the user pick a configured host and encode it as an authority.

    Args:
        registry: Registry to offer hosts from
        picker: Interactive host picker

    Returns:
        Authority token, or None if there is nothing to pick or the user cancelled
    """
    names = registry.names()
    if not names:
        logger.info("No hosts configured, nothing to pick")
        return None

    name = await picker.pick_host(names)
    if not name:
        logger.debug("Host pick cancelled")
        return None

    return encode_remote_host(HostReference.configured(name))
