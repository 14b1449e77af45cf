"""sshnode: run a command on a remote node over SSH."""

from sshnode.config import Framework, Properties
from sshnode.executor import SSHNodeExecutor
from sshnode.models import (
    ExecutionContext,
    ExecutionResult,
    LogLevel,
    NodeEntry,
    ProviderDescription,
)
from sshnode.services import ConfigurationError, MissingHostnameError, MissingUsernameError

__all__ = [
    "ConfigurationError",
    "ExecutionContext",
    "ExecutionResult",
    "Framework",
    "LogLevel",
    "MissingHostnameError",
    "MissingUsernameError",
    "NodeEntry",
    "Properties",
    "ProviderDescription",
    "SSHNodeExecutor",
]
