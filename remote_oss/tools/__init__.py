"""MCP tools for Remote OSS."""

from remote_oss.tools.remote import (
    connect_transient,
    open_folder,
    open_host,
    reload_hosts,
    resolve_authority,
)

__all__ = [
    "connect_transient",
    "open_folder",
    "open_host",
    "reload_hosts",
    "resolve_authority",
]
