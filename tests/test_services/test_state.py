"""Tests for global state accessors."""

from collections.abc import Iterator
from pathlib import Path

import pytest

from remote_oss.config import Config
from remote_oss.services import (
    HostRegistry,
    get_registry,
    get_watcher,
    reset_state,
    set_config,
    set_registry,
)


@pytest.fixture
def config(tmp_path: Path) -> Iterator[Config]:
    path = tmp_path / "settings.json"
    path.write_text("[]")
    reset_state()
    config = Config.from_hosts_file(path)
    set_config(config)
    yield config
    reset_state()


def test_watcher_follows_replaced_registry(config: Config) -> None:
    """A new registry gets a new watcher bound to it."""
    first = get_watcher()
    registry = HostRegistry()

    set_registry(registry)

    assert get_registry() is registry
    assert get_watcher() is not first
    assert get_watcher().registry is registry


@pytest.mark.asyncio
async def test_cannot_replace_state_under_running_watcher(config: Config) -> None:
    """Config and registry cannot be replaced while the watcher polls."""
    watcher = get_watcher()
    watcher.interval = 60.0
    watcher.start()
    try:
        with pytest.raises(RuntimeError, match="Stop the hosts watcher"):
            set_config(config)
        with pytest.raises(RuntimeError, match="Stop the hosts watcher"):
            set_registry(HostRegistry())
        assert get_watcher() is watcher
    finally:
        await watcher.stop()

    set_registry(HostRegistry())
    assert get_watcher() is not watcher
