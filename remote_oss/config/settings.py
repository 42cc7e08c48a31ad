"""Application settings from environment variables.

Centralized environment variable parsing and validation.
"""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

logger = logging.getLogger(__name__)


def default_hosts_file() -> Path:
    """Default location of the hosts settings file."""
    base = os.getenv("XDG_CONFIG_HOME") or str(Path.home() / ".config")
    return Path(base) / "remote-oss" / "settings.json"


@dataclass
class Settings:
    """Application settings from environment.

    Handles parsing, validation, and defaults for all env vars.
    """

    # Host configuration
    hosts_file: Path = field(default_factory=default_hosts_file)
    watch_interval: float = field(default=2.0)
    ping_timeout: float = field(default=2.0)

    # Transport
    transport: str = field(default="stdio")
    http_host: str = field(default="127.0.0.1")
    http_port: int = field(default=8000)

    # Logging
    log_level: str = field(default="INFO")
    log_colors: bool = field(default=True)
    log_payloads: bool = field(default=False)
    slow_threshold_ms: int = field(default=1000)
    include_traceback: bool = field(default=False)

    @classmethod
    def from_env(cls) -> "Settings":
        """Load settings from REMOTE_OSS_* environment variables.

        Returns:
            Settings instance with values from environment
        """
        hosts_file = os.getenv("REMOTE_OSS_HOSTS_FILE", "").strip()
        return cls(
            hosts_file=Path(hosts_file).expanduser() if hosts_file else default_hosts_file(),
            watch_interval=cls._get_float("REMOTE_OSS_WATCH_INTERVAL", 2.0),
            ping_timeout=cls._get_float("REMOTE_OSS_PING_TIMEOUT", 2.0),
            transport=cls._get_transport(),
            http_host=os.getenv("REMOTE_OSS_HTTP_HOST", "127.0.0.1"),
            http_port=cls._get_int("REMOTE_OSS_HTTP_PORT", 8000),
            log_level=os.getenv("REMOTE_OSS_LOG_LEVEL", "INFO").upper(),
            log_colors=cls._get_bool("REMOTE_OSS_LOG_COLORS", True),
            log_payloads=cls._get_bool("REMOTE_OSS_LOG_PAYLOADS", False),
            slow_threshold_ms=cls._get_int("REMOTE_OSS_SLOW_THRESHOLD_MS", 1000),
            include_traceback=cls._get_bool("REMOTE_OSS_INCLUDE_TRACEBACK", False),
        )

    @staticmethod
    def _get_int(key: str, default: int) -> int:
        """Get integer from environment.

        Args:
            key: Environment variable key
            default: Default value if not set

        Returns:
            Integer value from environment or default
        """
        value = os.getenv(key)
        if value is None:
            return default

        try:
            return int(value)
        except ValueError:
            logger.warning("Invalid int for %s: %s, using default %d", key, value, default)
            return default

    @staticmethod
    def _get_float(key: str, default: float) -> float:
        value = os.getenv(key)
        if value is None:
            return default

        try:
            return float(value)
        except ValueError:
            logger.warning("Invalid number for %s: %s, using default %s", key, value, default)
            return default

    @staticmethod
    def _get_bool(key: str, default: bool) -> bool:
        """Get boolean from environment.

        Args:
            key: Environment variable key
            default: Default value if not set

        Returns:
            Boolean value from environment or default
        """
        value = os.getenv(key)
        if value is None:
            return default
        return value.lower() in ("1", "true", "yes", "on")

    @staticmethod
    def _get_transport() -> str:
        """Get transport from environment with validation.

        Returns:
            Transport type ("http" or "stdio")
        """
        transport = os.getenv("REMOTE_OSS_TRANSPORT", "").lower()
        if transport in ("http", "stdio"):
            return transport
        return "stdio"
