"""In-memory registry of configured hosts.

Rebuild Strategy:
- Every rebuild reads the whole raw host list; nothing is patched in place
- The new contents are assembled as an immutable snapshot and swapped in
  with a single assignment, so readers see either the old or the new
  snapshot and never a partial one
- Subscribers are notified once, after the swap
"""

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any

from pydantic import ValidationError

from remote_oss.models import (
    MANUAL_KIND,
    ConfiguredHost,
    FolderRef,
    HostConfig,
    HostGroup,
    credential_policy_from_config,
)

logger = logging.getLogger(__name__)

RegistryListener = Callable[["HostRegistry"], None]

SUPPORTED_KINDS = (MANUAL_KIND,)


@dataclass(frozen=True)
class RegistrySnapshot:
    """One complete generation of registry contents."""

    groups: tuple[HostGroup, ...] = ()
    generation: int = 0

    @property
    def hosts(self) -> list[ConfiguredHost]:
        return [host for group in self.groups for host in group.hosts]


def _build_folders(config: HostConfig) -> tuple[FolderRef, ...]:
    folders = []
    for folder in config.folders or []:
        if isinstance(folder, str):
            folders.append(FolderRef(display_name=folder, host_name=config.name, path=folder))
        else:
            folders.append(
                FolderRef(display_name=folder.name, host_name=config.name, path=folder.path)
            )
    return tuple(folders)


def build_host(config: HostConfig) -> ConfiguredHost:
    """Build a configured host from a validated record.

    Args:
        config: Validated raw host record

    Returns:
        ConfiguredHost with normalized credential policy and folders
    """
    return ConfiguredHost(
        name=config.name,
        address=config.host,
        port=config.port,
        credential_policy=credential_policy_from_config(config.connection_token),
        folders=_build_folders(config),
        kind=config.type,
    )


class HostRegistry:
    """Queryable model of configured hosts, grouped by kind."""

    def __init__(self) -> None:
        self._snapshot = RegistrySnapshot()
        self._listeners: list[RegistryListener] = []

    @property
    def generation(self) -> int:
        """Number of rebuilds so far."""
        return self._snapshot.generation

    def rebuild(self, raw_hosts: Iterable[Any] | None) -> None:
        """Replace registry contents from raw host records.

        Records of unsupported kinds are skipped silently. Invalid records
        of a supported kind are skipped with a warning. A later record with
        an already seen name replaces the earlier one in place.

        Args:
            raw_hosts: Raw host records from the settings source
        """
        by_kind: dict[str, dict[str, ConfiguredHost]] = {kind: {} for kind in SUPPORTED_KINDS}

        for index, raw in enumerate(raw_hosts or []):
            kind = raw.get("type") if isinstance(raw, dict) else None
            if not isinstance(kind, str) or kind not in by_kind:
                logger.debug("Skipping host record %d of unsupported type %r", index, kind)
                continue

            try:
                config = HostConfig.model_validate(raw)
            except ValidationError as e:
                logger.warning(
                    "Skipping invalid host record %d (%s): %d error(s): %s",
                    index,
                    raw.get("name", "<unnamed>"),
                    e.error_count(),
                    "; ".join(err["msg"] for err in e.errors()),
                )
                continue

            hosts = by_kind[kind]
            if config.name in hosts:
                # Last one wins, matching the settings semantics
                logger.warning(
                    "Duplicate host name '%s' in configuration, later entry replaces earlier",
                    config.name,
                )
            hosts[config.name] = build_host(config)

        groups = tuple(
            HostGroup(kind=kind, hosts=tuple(hosts.values()))
            for kind, hosts in by_kind.items()
            if hosts
        )
        self._snapshot = RegistrySnapshot(
            groups=groups,
            generation=self._snapshot.generation + 1,
        )

        hosts = self._snapshot.hosts
        logger.info(
            "Host registry rebuilt (generation=%d): %d host(s): %s",
            self._snapshot.generation,
            len(hosts),
            ", ".join(h.name for h in hosts) if hosts else "(none)",
        )
        self._notify()

    def groups(self) -> list[HostGroup]:
        """Non-empty kind groups in display order."""
        return list(self._snapshot.groups)

    def list_hosts(self) -> list[ConfiguredHost]:
        """All hosts across groups, in configuration order within each group."""
        return self._snapshot.hosts

    def names(self) -> list[str]:
        """Display names of all hosts."""
        return [host.name for host in self._snapshot.hosts]

    def find_by_name(self, name: str) -> ConfiguredHost | None:
        """Find a host by exact, case-sensitive display name.

        Args:
            name: Display name to look up

        Returns:
            ConfiguredHost if found, None otherwise
        """
        for host in self._snapshot.hosts:
            if host.name == name:
                return host
        return None

    def is_empty(self) -> bool:
        """True if the last rebuild produced no hosts."""
        return not self._snapshot.groups

    def subscribe(self, listener: RegistryListener) -> Callable[[], None]:
        """Register a callback fired after every rebuild.

        Args:
            listener: Called with the registry once per rebuild

        Returns:
            Function that removes the listener
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        for listener in list(self._listeners):
            try:
                listener(self)
            except Exception as e:
                logger.warning("Registry listener %r failed: %s", listener, e)
