"""Free-text host:port parsing."""

import re

from remote_oss.utils.validation import (
    InvalidHostFormatError,
    validate_host,
    validate_port,
)

# Ports are ASCII digits only; \d would also accept other Unicode digits
HOST_PORT_PATTERN = re.compile(r"^\[([^\]]+)\]:([0-9]+)$|^([^:]+):([0-9]+)$")

INVALID_FORMAT_MESSAGE = (
    "Invalid host format. Should be 'hostname:port' or '[ipv6]:port'."
)


def parse_host_port(text: str) -> tuple[str, int]:
    """Parse a user-entered transient host.

    Formats:
        - "example.com:22"
        - "[::1]:2222" (IPv6 literal in brackets)

    Returns:
        Tuple of (hostname, port). IPv6 brackets are stripped.

    Raises:
        InvalidHostFormatError: If input is empty or not in a supported form.
    """
    text = text.strip()
    if not text:
        raise InvalidHostFormatError("Host should not be empty.")

    match = HOST_PORT_PATTERN.match(text)
    if not match:
        raise InvalidHostFormatError(INVALID_FORMAT_MESSAGE)

    host = match.group(1) or match.group(3)
    port = int(match.group(2) or match.group(4))

    return validate_host(host), validate_port(port)
