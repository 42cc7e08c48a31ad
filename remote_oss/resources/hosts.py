"""Hosts resource listing configured hosts and their folders."""

from remote_oss.models import HostReference, describe_policy
from remote_oss.services import get_config, get_registry
from remote_oss.utils.authority import build_remote_uri, encode_remote_host
from remote_oss.utils.ping import check_hosts_online


async def list_hosts_resource() -> str:
    """List configured hosts grouped by kind, with online status and folders.

    Returns:
        Formatted host tree, or a notice when no hosts are configured.
    """
    registry = get_registry()
    if registry.is_empty():
        return (
            "No hosts configured.\n"
            f"Add hosts to {get_config().hosts_file} and call reload_hosts."
        )

    online_status = await check_hosts_online(
        registry.list_hosts(), timeout=get_config().ping_timeout
    )

    lines = ["Remote Hosts", "=" * 40, ""]

    for group in registry.groups():
        lines.append(f"{group.kind}/")
        for host in group.hosts:
            online = online_status.get(host.name)
            status_icon = "✓" if online else "✗"
            status = "online" if online else "offline"
            authority = encode_remote_host(HostReference.configured(host.name))

            lines.append(f"  [{status_icon}] {host.name} ({status})")
            lines.append(f"      Address:   {host.description}")
            lines.append(f"      Token:     {describe_policy(host.credential_policy)}")
            lines.append(f"      Authority: {authority}")
            for folder in host.folders:
                lines.append(f"      - {folder.display_name}: {build_remote_uri(authority, folder.path)}")
            lines.append("")

    return "\n".join(lines)
