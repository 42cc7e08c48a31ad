"""Configuration module for Remote OSS.

Provides focused classes for different configuration concerns:
- Config: Main configuration class (aggregates all components)
- HostsConfigSource: Reads the hosts settings file
- Settings: Environment variable configuration
"""

from remote_oss.config.main import Config
from remote_oss.config.settings import Settings
from remote_oss.config.source import (
    HOSTS_SETTING_KEY,
    HostsConfigError,
    HostsConfigSource,
)

__all__ = [
    "Config",
    "HOSTS_SETTING_KEY",
    "HostsConfigError",
    "HostsConfigSource",
    "Settings",
]
