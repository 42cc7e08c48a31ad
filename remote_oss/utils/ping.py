"""Host connectivity checking utilities."""

import asyncio
from collections.abc import Iterable

from remote_oss.models import ConfiguredHost


async def check_host_online(address: str, port: int, timeout: float = 2.0) -> bool:
    """Check if a host is reachable via TCP connection.

    Args:
        address: Host to check.
        port: Port to connect to.
        timeout: Connection timeout in seconds.

    Returns:
        True if host is reachable, False otherwise.
    """
    try:
        _, writer = await asyncio.wait_for(
            asyncio.open_connection(address, port),
            timeout=timeout,
        )
        writer.close()
        await writer.wait_closed()
        return True
    except (TimeoutError, OSError):
        return False


async def check_hosts_online(
    hosts: Iterable[ConfiguredHost],
    timeout: float = 2.0,
) -> dict[str, bool]:
    """Check configured hosts concurrently.

    Args:
        hosts: Hosts to probe on their configured address and port.
        timeout: Connection timeout per host.

    Returns:
        Dict of {host name: is_online}.
    """
    hosts = list(hosts)
    if not hosts:
        return {}

    results = await asyncio.gather(
        *(check_host_online(h.address, h.port, timeout) for h in hosts)
    )
    return {h.name: online for h, online in zip(hosts, results)}
