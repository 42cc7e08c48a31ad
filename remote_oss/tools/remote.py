"""Remote host tools: resolve authorities and build connection targets."""

import logging
from typing import Any

from fastmcp import Context
from fastmcp.exceptions import ToolError

from remote_oss.models import HostReference
from remote_oss.services import (
    ElicitationCredentialPrompt,
    ElicitationHostPicker,
    ResolutionError,
    Resolver,
    get_registry,
    get_watcher,
    pick_host_authority,
)
from remote_oss.utils.authority import (
    MalformedTokenError,
    build_remote_uri,
    decode_remote_host,
    encode_remote_host,
)
from remote_oss.utils.parser import parse_host_port
from remote_oss.utils.validation import InvalidHostFormatError

logger = logging.getLogger(__name__)


def _target(authority: str, path: str = "/") -> dict[str, str]:
    return {"authority": authority, "uri": build_remote_uri(authority, path)}


def _configured_authority(name: str) -> str:
    try:
        return encode_remote_host(HostReference.configured(name))
    except ValueError as e:
        raise ToolError(f"Invalid host name {name!r}: {e}") from e


async def resolve_authority(authority: str, ctx: Context) -> dict[str, Any]:
    """Resolve a remote-oss authority to connection parameters.

    Configured hosts are looked up by name; the user may be asked for a
    connection token depending on the host's settings.

    Args:
        authority: Authority token, e.g. "remote-oss+eyJ0eXBlIjoi..."

    Returns:
        Dict with host, port and token (token is null when not needed).
    """
    logger.info("Resolving authority: %s", authority)
    try:
        ref = decode_remote_host(authority)
    except MalformedTokenError as e:
        raise ToolError(f"Invalid host format: {e.reason}") from e

    if ref is None:
        raise ToolError(f"'{authority}' is not a remote-oss authority")

    resolver = Resolver(get_registry(), ElicitationCredentialPrompt(ctx))
    try:
        params = await resolver.resolve(ref)
    except ResolutionError as e:
        raise ToolError(str(e)) from e

    logger.info("Resolved %s to %s", ref.host, params.to_dict(redact=True))
    return params.to_dict()


async def open_host(ctx: Context, name: str | None = None) -> dict[str, str] | str:
    """Build the authority for a configured host.

    Without a name, the user picks one of the configured hosts.

    Args:
        name: Configured host name (optional)

    Returns:
        Dict with authority and uri, or a message if no host was selected.
    """
    if name is not None:
        authority = _configured_authority(name)
    else:
        authority = await pick_host_authority(get_registry(), ElicitationHostPicker(ctx))

    if authority is None:
        return "No host selected."
    return _target(authority)


async def open_folder(host: str, path: str) -> dict[str, str]:
    """Build the remote URI that opens a folder on a configured host.

    Args:
        host: Configured host name
        path: Remote folder path

    Returns:
        Dict with authority and uri.
    """
    return _target(_configured_authority(host), path)


async def connect_transient(address: str) -> dict[str, str]:
    """Build the authority for an ad-hoc host.

    Args:
        address: "hostname:port" or "[ipv6]:port"

    Returns:
        Dict with authority and uri.
    """
    try:
        hostname, port = parse_host_port(address)
    except InvalidHostFormatError as e:
        raise ToolError(str(e)) from e

    authority = encode_remote_host(HostReference.transient(hostname, port))
    return _target(authority)


async def reload_hosts() -> str:
    """Re-read the hosts settings file and rebuild the host list.

    Returns:
        Summary of the hosts now configured.
    """
    watcher = get_watcher()
    await watcher.refresh(force=True)
    names = watcher.registry.names()
    if not names:
        return "No hosts configured."
    return f"{len(names)} host(s) configured: {', '.join(names)}"
