"""Per-invocation execution context."""

from dataclasses import dataclass, field
from enum import IntEnum
from types import MappingProxyType
from typing import TYPE_CHECKING, Mapping

if TYPE_CHECKING:
    from sshnode.protocols import ExecutionListener


class LogLevel(IntEnum):
    """Listener log levels, lowest number is most severe."""

    ERROR = 0
    WARN = 1
    INFO = 2
    VERBOSE = 3
    DEBUG = 4


@dataclass(frozen=True)
class ExecutionContext:
    """State supplied by the orchestrator for one invocation.

    ``data_context`` is passed through untouched to the remote session.
    """

    project: str
    listener: "ExecutionListener"
    data_context: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "data_context", MappingProxyType(dict(self.data_context))
        )
