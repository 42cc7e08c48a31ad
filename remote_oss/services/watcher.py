"""Hosts settings change watcher.

Polls the hosts source and rebuilds the registry when the file changes.
A broken settings file leaves the previous registry snapshot in place.
"""

import asyncio
import logging
from typing import Any

from remote_oss.config.source import HostsConfigError, HostsConfigSource
from remote_oss.services.registry import HostRegistry

logger = logging.getLogger(__name__)


class ConfigWatcher:
    """Keeps a HostRegistry in sync with its settings source."""

    def __init__(
        self,
        source: HostsConfigSource,
        registry: HostRegistry,
        interval: float = 2.0,
    ) -> None:
        """Initialize watcher.

        Args:
            source: Hosts settings source to poll
            registry: Registry to rebuild on change
            interval: Seconds between checks (<= 0 disables polling)
        """
        self.source = source
        self.registry = registry
        self.interval = interval
        self._task: asyncio.Task[Any] | None = None
        self._lock = asyncio.Lock()

    @property
    def running(self) -> bool:
        """Whether the polling task is active."""
        return self._task is not None and not self._task.done()

    async def refresh(self, force: bool = False) -> bool:
        """Rebuild the registry if the settings changed.

        Args:
            force: Rebuild even if the file looks unchanged

        Returns:
            True if the registry was rebuilt
        """
        async with self._lock:
            if not force and not self.source.has_changed():
                return False

            try:
                raw_hosts = await asyncio.to_thread(self.source.load)
            except HostsConfigError as e:
                logger.error("%s; keeping previous host list", e)
                return False

            self.registry.rebuild(raw_hosts)
            return True

    def start(self) -> None:
        """Start background polling."""
        if self.interval <= 0:
            logger.info("Hosts settings watching disabled")
            return
        if self.running:
            return
        self._task = asyncio.create_task(self._poll_loop())
        logger.info(
            "Watching %s for changes (interval=%.1fs)",
            self.source.path,
            self.interval,
        )

    async def stop(self) -> None:
        """Stop background polling."""
        if self._task is None:
            return
        self._task.cancel()
        try:
            await self._task
        except asyncio.CancelledError:
            pass
        self._task = None
        logger.debug("Hosts settings watcher stopped")

    async def _poll_loop(self) -> None:
        while True:
            await asyncio.sleep(self.interval)
            try:
                await self.refresh()
            except Exception as e:
                logger.error("Hosts settings refresh failed: %s", e)
