"""Services for Remote OSS."""

from remote_oss.services.elicitation import (
    ElicitationCredentialPrompt,
    ElicitationHostPicker,
)
from remote_oss.services.registry import HostRegistry, RegistrySnapshot
from remote_oss.services.resolver import (
    CredentialRequiredError,
    HostNotFoundError,
    ResolutionError,
    Resolver,
    pick_host_authority,
)
from remote_oss.services.state import (
    get_config,
    get_registry,
    get_watcher,
    reset_state,
    set_config,
    set_registry,
)
from remote_oss.services.watcher import ConfigWatcher

__all__ = [
    "ConfigWatcher",
    "CredentialRequiredError",
    "ElicitationCredentialPrompt",
    "ElicitationHostPicker",
    "HostNotFoundError",
    "HostRegistry",
    "RegistrySnapshot",
    "ResolutionError",
    "Resolver",
    "get_config",
    "get_registry",
    "get_watcher",
    "pick_host_authority",
    "reset_state",
    "set_config",
    "set_registry",
]
