"""Hosts settings file reader.

Reads the declarative host list from a JSON settings file. The list lives
under the ``remote.OSS.hosts`` key; a file holding a bare list is accepted
as the list itself.
"""

import json
import logging
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

HOSTS_SETTING_KEY = "remote.OSS.hosts"

Fingerprint = tuple[int, int]


class HostsConfigError(Exception):
    """Hosts settings file exists but cannot be used."""

    def __init__(self, path: Path, reason: str):
        """Initialize config error.

        Args:
            path: Settings file path
            reason: Why the file was rejected
        """
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot load hosts from {path}: {reason}")


class HostsConfigSource:
    """Source of raw host records backed by a JSON settings file."""

    def __init__(self, path: Path | str):
        """Initialize hosts source.

        Args:
            path: Path to the JSON settings file
        """
        self.path = Path(path)
        self._loaded_fingerprint: Fingerprint | None = None

    def fingerprint(self) -> Fingerprint | None:
        """Modification time and size of the file, or None if missing."""
        try:
            stat = self.path.stat()
        except OSError:
            return None
        return (stat.st_mtime_ns, stat.st_size)

    def has_changed(self) -> bool:
        """Whether the file differs from the last load attempt.

        A file that failed to load is not retried until it changes again.
        """
        return self.fingerprint() != self._loaded_fingerprint

    def load(self) -> list[Any]:
        """Read raw host records.

        Returns:
            List of raw host records (empty if the file or key is missing)

        Raises:
            HostsConfigError: If the file is unreadable or not valid JSON
        """
        fingerprint = self.fingerprint()
        self._loaded_fingerprint = fingerprint
        if fingerprint is None:
            logger.warning("Hosts settings not found: %s", self.path)
            return []

        try:
            content = self.path.read_text(encoding="utf-8")
            logger.debug("Reading hosts settings from %s", self.path)
        except (OSError, UnicodeDecodeError) as e:
            raise HostsConfigError(self.path, str(e)) from e

        if not content.strip():
            return []

        try:
            data = json.loads(content)
        except json.JSONDecodeError as e:
            raise HostsConfigError(self.path, f"invalid JSON: {e}") from e

        if isinstance(data, dict):
            hosts = data.get(HOSTS_SETTING_KEY)
        else:
            hosts = data

        if hosts is None:
            hosts = []
        elif not isinstance(hosts, list):
            raise HostsConfigError(self.path, f"'{HOSTS_SETTING_KEY}' must be a list")

        logger.info("Read %d host record(s) from %s", len(hosts), self.path)
        return hosts
