"""Application configuration.

Delegates to specialized components:
- Settings: Environment variables
- HostsConfigSource: Reads the hosts settings file
"""

from dataclasses import dataclass
from pathlib import Path

from remote_oss.config.settings import Settings
from remote_oss.config.source import HostsConfigSource


@dataclass
class Config:
    """Application configuration.

    Aggregates environment settings and the hosts source.
    """

    settings: Settings
    source: HostsConfigSource

    @classmethod
    def from_env(cls) -> "Config":
        """Create config from environment.

        Returns:
            Configured instance with all components initialized
        """
        settings = Settings.from_env()
        return cls(settings=settings, source=HostsConfigSource(settings.hosts_file))

    @classmethod
    def from_hosts_file(cls, hosts_file: Path | str) -> "Config":
        """Create config for an explicit hosts file.

        Args:
            hosts_file: Path to the JSON settings file

        Returns:
            Config with environment settings and the given hosts file
        """
        settings = Settings.from_env()
        settings.hosts_file = Path(hosts_file)
        return cls(settings=settings, source=HostsConfigSource(hosts_file))

    @property
    def hosts_file(self) -> Path:
        """Path to the hosts settings file."""
        return self.source.path

    @property
    def watch_interval(self) -> float:
        """Seconds between hosts file change checks."""
        return self.settings.watch_interval

    @property
    def ping_timeout(self) -> float:
        """Timeout for host reachability probes."""
        return self.settings.ping_timeout

    @property
    def transport(self) -> str:
        """Transport type (http or stdio)."""
        return self.settings.transport

    @property
    def http_host(self) -> str:
        """HTTP server bind address."""
        return self.settings.http_host

    @property
    def http_port(self) -> int:
        """HTTP server port."""
        return self.settings.http_port
