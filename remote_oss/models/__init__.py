"""Data models for Remote OSS."""

from remote_oss.models.config import FolderConfig, HostConfig
from remote_oss.models.host import (
    MANUAL_KIND,
    AlwaysPrompt,
    ConfiguredHost,
    CredentialPolicy,
    FixedToken,
    FolderRef,
    HostGroup,
    NeverPrompt,
    credential_policy_from_config,
    describe_policy,
)
from remote_oss.models.prompt import PromptResult
from remote_oss.models.reference import ConnectionParams, HostKind, HostReference

__all__ = [
    "AlwaysPrompt",
    "ConfiguredHost",
    "ConnectionParams",
    "CredentialPolicy",
    "FixedToken",
    "FolderConfig",
    "FolderRef",
    "HostConfig",
    "HostGroup",
    "HostKind",
    "HostReference",
    "MANUAL_KIND",
    "NeverPrompt",
    "PromptResult",
    "credential_policy_from_config",
    "describe_policy",
]
