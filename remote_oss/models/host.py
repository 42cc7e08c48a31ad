"""Configured host models."""

from dataclasses import dataclass, field

MANUAL_KIND = "manual"


@dataclass(frozen=True)
class AlwaysPrompt:
    """Ask the user for a connection token on every connection."""


@dataclass(frozen=True)
class NeverPrompt:
    """Connect without a token."""


@dataclass(frozen=True)
class FixedToken:
    """Use the token stored in configuration."""

    token: str = field(repr=False)


CredentialPolicy = AlwaysPrompt | NeverPrompt | FixedToken


def credential_policy_from_config(value: bool | str | None) -> CredentialPolicy:
    """Fold the raw ``connectionToken`` setting into a credential policy.

    Args:
        value: Raw setting (absent, boolean, or literal token)

    Returns:
        NeverPrompt for False, FixedToken for a non-empty string,
        AlwaysPrompt otherwise
    """
    if value is False:
        return NeverPrompt()
    if isinstance(value, str) and value:
        return FixedToken(value)
    return AlwaysPrompt()


def describe_policy(policy: CredentialPolicy) -> str:
    """Short human-readable label for a credential policy."""
    if isinstance(policy, NeverPrompt):
        return "no token"
    if isinstance(policy, FixedToken):
        return "stored token"
    return "prompt for token"


@dataclass(frozen=True)
class FolderRef:
    """Remote folder associated with a configured host."""

    display_name: str
    host_name: str
    path: str


@dataclass(frozen=True)
class ConfiguredHost:
    """Host defined in the declarative configuration."""

    name: str
    address: str
    port: int
    credential_policy: CredentialPolicy = field(default_factory=AlwaysPrompt)
    folders: tuple[FolderRef, ...] = ()
    kind: str = MANUAL_KIND

    @property
    def description(self) -> str:
        """Address and port as shown next to the host name."""
        return f"{self.address}:{self.port}"


@dataclass(frozen=True)
class HostGroup:
    """Hosts sharing a kind label, in configuration order."""

    kind: str
    hosts: tuple[ConfiguredHost, ...] = ()
