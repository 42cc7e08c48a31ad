"""MCP resources for Remote OSS."""

from remote_oss.resources.hosts import list_hosts_resource

__all__ = ["list_hosts_resource"]
