"""Global state management for Remote OSS."""

from remote_oss.config import Config
from remote_oss.services.registry import HostRegistry
from remote_oss.services.watcher import ConfigWatcher

# Global state (initialized on first access)
_config: Config | None = None
_registry: HostRegistry | None = None
_watcher: ConfigWatcher | None = None


def get_config() -> Config:
    """Get or create config."""
    global _config
    if _config is None:
        _config = Config.from_env()
    return _config


def get_registry() -> HostRegistry:
    """Get or create the shared host registry."""
    global _registry
    if _registry is None:
        _registry = HostRegistry()
    return _registry


def get_watcher() -> ConfigWatcher:
    """Get or create the watcher keeping the registry in sync with config."""
    global _watcher
    if _watcher is None:
        config = get_config()
        _watcher = ConfigWatcher(
            source=config.source,
            registry=get_registry(),
            interval=config.watch_interval,
        )
    return _watcher


def reset_state() -> None:
    """Reset global state for testing.

    This function clears the singleton instances, allowing tests
    to start with fresh state. Should only be used in test fixtures.
    """
    global _config, _registry, _watcher
    _config = None
    _registry = None
    _watcher = None


def _drop_watcher() -> None:
    global _watcher
    if _watcher is not None and _watcher.running:
        raise RuntimeError("Stop the hosts watcher before replacing global state")
    _watcher = None


def set_config(config: Config) -> None:
    """Set the global config instance.

    Intended for setup before the server starts. Also drops the watcher so
    it is rebuilt against the new source.

    Args:
        config: Config instance to use globally.

    Raises:
        RuntimeError: If the current watcher is still polling.
    """
    global _config
    _drop_watcher()
    _config = config


def set_registry(registry: HostRegistry) -> None:
    """Set the global registry instance.

    Intended for setup before the server starts.

    Args:
        registry: HostRegistry instance to use globally.

    Raises:
        RuntimeError: If the current watcher is still polling.
    """
    global _registry
    _drop_watcher()
    _registry = registry
