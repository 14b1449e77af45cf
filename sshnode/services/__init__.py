"""Services for sshnode."""

from sshnode.services.builder import (
    ConfigurationError,
    MissingHostnameError,
    MissingUsernameError,
    build_session,
    get_ssh_timeout,
)
from sshnode.services.invoker import CommandInvoker, FailureKind, classify_failure
from sshnode.services.keyfile import KEYFILE_STRATEGIES, resolve_keyfile_path
from sshnode.services.transport import (
    AsyncSSHTransport,
    AuthRejected,
    ConnectTimeout,
    ExecutionTimeout,
    TransportError,
    TransportFailure,
)

__all__ = [
    "AsyncSSHTransport",
    "AuthRejected",
    "CommandInvoker",
    "ConfigurationError",
    "ConnectTimeout",
    "ExecutionTimeout",
    "FailureKind",
    "KEYFILE_STRATEGIES",
    "MissingHostnameError",
    "MissingUsernameError",
    "TransportError",
    "TransportFailure",
    "build_session",
    "classify_failure",
    "get_ssh_timeout",
    "resolve_keyfile_path",
]
