"""Host reference and connection parameter models."""

from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any


class HostKind(str, Enum):
    """Kind of host a reference points at."""

    TRANSIENT = "transient"
    CONFIGURED = "configured"


@dataclass(frozen=True)
class HostReference:
    """Decoded form of an authority token.

    Transient references carry the address and port inline. Configured
    references carry only the display name; the registry supplies the rest
    at resolution time.
    """

    kind: HostKind
    host: str
    port: int | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.host, str) or not self.host:
            raise ValueError("Host reference requires a non-empty host")
        if self.port is not None and (isinstance(self.port, bool) or not isinstance(self.port, int)):
            raise ValueError(f"Invalid port {self.port!r} for host '{self.host}'")
        if self.kind is HostKind.TRANSIENT and self.port is None:
            raise ValueError(f"Transient host '{self.host}' requires a port")
        if self.kind is HostKind.CONFIGURED and self.port is not None:
            raise ValueError(f"Configured host '{self.host}' cannot carry a port")

    @classmethod
    def transient(cls, host: str, port: int) -> "HostReference":
        """Reference an ad-hoc host by address and port."""
        return cls(kind=HostKind.TRANSIENT, host=host, port=port)

    @classmethod
    def configured(cls, name: str) -> "HostReference":
        """Reference a configured host by display name."""
        return cls(kind=HostKind.CONFIGURED, host=name)


@dataclass(frozen=True)
class ConnectionParams:
    """Final connection parameters handed to the transport layer."""

    host: str
    port: int
    token: str | None = None

    def to_dict(self, redact: bool = False) -> dict[str, Any]:
        """Convert to a plain dict.

        Args:
            redact: Replace a present token with a placeholder

        Returns:
            Dict with host, port and token keys
        """
        data = asdict(self)
        if redact and self.token is not None:
            data["token"] = "***"
        return data
