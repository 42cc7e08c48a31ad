"""Authority token encoding.

Tokens have the form ``remote-oss+<base64(JSON)>`` where the JSON object is
``{"type": ..., "host": ..., "port": ...}`` with ``port`` present only for
transient hosts. Other tooling builds folder URIs by plain concatenation of a
token and a path, so the layout is fixed byte for byte.
"""

import base64
import binascii
import json
from typing import Any, Final

from remote_oss.models import HostKind, HostReference

AUTHORITY_PREFIX: Final[str] = "remote-oss"
REMOTE_URI_SCHEME: Final[str] = "vscode-remote"

_MARKER: Final[str] = f"{AUTHORITY_PREFIX}+"


class MalformedTokenError(ValueError):
    """Token carries the marker but its payload cannot be parsed."""

    def __init__(self, token: str, reason: str):
        """Initialize malformed token error.

        Args:
            token: The offending authority token
            reason: What was wrong with the payload
        """
        self.token = token
        self.reason = reason
        super().__init__(f"Invalid host format in authority '{token}': {reason}")


def encode_remote_host(ref: HostReference) -> str:
    """Encode a host reference as an authority token.

    Args:
        ref: Host reference to encode

    Returns:
        Token of the form ``remote-oss+<base64>``
    """
    payload: dict[str, Any] = {"type": ref.kind.value, "host": ref.host}
    if ref.kind is HostKind.TRANSIENT:
        payload["port"] = ref.port
    data = json.dumps(payload, separators=(",", ":"), ensure_ascii=False)
    encoded = base64.b64encode(data.encode("utf-8")).decode("ascii")
    return f"{_MARKER}{encoded}"


def decode_remote_host(token: str) -> HostReference | None:
    """Decode an authority token.

    Args:
        token: Authority string handed over by the caller

    Returns:
        HostReference, or None if the token is not a remote-oss authority

    Raises:
        MalformedTokenError: If the marker is present but the payload is invalid
    """
    if not token.startswith(_MARKER):
        return None

    encoded = token[len(_MARKER):]
    try:
        raw = base64.b64decode(encoded, validate=True)
        payload = json.loads(raw.decode("utf-8"))
    except (binascii.Error, UnicodeDecodeError, ValueError) as e:
        raise MalformedTokenError(token, str(e)) from e

    if not isinstance(payload, dict):
        raise MalformedTokenError(token, "payload is not an object")

    host = payload.get("host")
    if not isinstance(host, str) or not host:
        raise MalformedTokenError(token, "missing host")

    port = payload.get("port")
    if port is not None and (isinstance(port, bool) or not isinstance(port, int)):
        raise MalformedTokenError(token, f"invalid port {port!r}")

    try:
        kind = HostKind(payload.get("type"))
        return HostReference(kind=kind, host=host, port=port)
    except ValueError as e:
        raise MalformedTokenError(token, str(e)) from e


def build_remote_uri(token: str, path: str = "/") -> str:
    """Build a remote URI for an authority token and a remote path.

    Args:
        token: Encoded authority
        path: Remote path (a leading slash is added if missing)

    Returns:
        URI such as ``vscode-remote://remote-oss+.../home/me``
    """
    if not path.startswith("/"):
        path = f"/{path}"
    return f"{REMOTE_URI_SCHEME}://{token}{path}"
