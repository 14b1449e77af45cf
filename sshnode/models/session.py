"""Session descriptor and lifecycle states."""

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Mapping

if TYPE_CHECKING:
    from sshnode.protocols import ExecutionListener


class SessionState(Enum):
    """Lifecycle of one remote command invocation."""

    BUILT = "built"
    CONNECTING = "connecting"
    AUTHENTICATING = "authenticating"
    RUNNING = "running"
    COMPLETED = "completed"
    FAILED = "failed"


@dataclass(frozen=True)
class SessionDescriptor:
    """Everything needed to open one remote command execution."""

    node_name: str
    hostname: str
    username: str
    command: tuple[str, ...]
    listener: "ExecutionListener"
    port: int = 22
    keyfile_path: str | None = None
    timeout_ms: int = 0  # 0 = unbounded
    environment: Mapping[str, str] = field(default_factory=dict)

    @property
    def timeout_seconds(self) -> float | None:
        """Timeout in seconds for asyncio, or None when unbounded."""
        if self.timeout_ms <= 0:
            return None
        return self.timeout_ms / 1000
