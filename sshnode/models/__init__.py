"""Data models for sshnode."""

from sshnode.models.context import ExecutionContext, LogLevel
from sshnode.models.description import ProviderDescription
from sshnode.models.node import NodeEntry
from sshnode.models.result import ExecutionResult
from sshnode.models.session import SessionDescriptor, SessionState

__all__ = [
    "ExecutionContext",
    "ExecutionResult",
    "LogLevel",
    "NodeEntry",
    "ProviderDescription",
    "SessionDescriptor",
    "SessionState",
]
