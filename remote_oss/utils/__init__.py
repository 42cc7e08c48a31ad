"""Utilities for Remote OSS."""

from remote_oss.utils.authority import (
    AUTHORITY_PREFIX,
    REMOTE_URI_SCHEME,
    MalformedTokenError,
    build_remote_uri,
    decode_remote_host,
    encode_remote_host,
)
from remote_oss.utils.console import ColorfulFormatter, RequestFormatter
from remote_oss.utils.parser import parse_host_port
from remote_oss.utils.ping import check_host_online, check_hosts_online
from remote_oss.utils.validation import (
    InvalidHostFormatError,
    validate_host,
    validate_port,
)

__all__ = [
    "AUTHORITY_PREFIX",
    "REMOTE_URI_SCHEME",
    "check_host_online",
    "check_hosts_online",
    "ColorfulFormatter",
    "build_remote_uri",
    "decode_remote_host",
    "encode_remote_host",
    "InvalidHostFormatError",
    "MalformedTokenError",
    "parse_host_port",
    "RequestFormatter",
    "validate_host",
    "validate_port",
]
