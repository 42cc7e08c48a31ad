"""Input validation utilities."""

from typing import Final

SUSPICIOUS_CHARS: Final[list[str]] = [
    "/", "\\", ";", "&", "|", "$", "`", " ", "\t", "\n", "\r", "\x00",
]


class InvalidHostFormatError(ValueError):
    """User-entered host could not be parsed."""

    pass


def validate_host(host: str) -> str:
    """Validate a host name or address.

    Args:
        host: The host name to validate

    Returns:
        Validated host name

    Raises:
        InvalidHostFormatError: If host name is invalid
    """
    if not host:
        raise InvalidHostFormatError("Host should not be empty.")

    if len(host) > 253:
        raise InvalidHostFormatError(f"Host name too long: {len(host)} chars")

    # Characters that could enable injection further down the line
    for char in SUSPICIOUS_CHARS:
        if char in host:
            raise InvalidHostFormatError(f"Host contains invalid characters: {host!r}")

    return host


def validate_port(port: int) -> int:
    """Validate a TCP port number.

    Raises:
        InvalidHostFormatError: If port is out of range
    """
    if not 1 <= port <= 65535:
        raise InvalidHostFormatError(f"Port out of range: {port}")
    return port
