"""Protocol interfaces for the collaborators sshnode depends on.

The orchestrator owns configuration, logging sinks and (optionally) the
transport. These protocols describe the slice of each that the executor
uses, so tests and embedding hosts can supply their own implementations.

Usage Example:

    from sshnode.protocols import ExecutionListener

    class PrintListener:
        def log(self, level: int, message: str) -> None:
            print(level, message)

    context = ExecutionContext(project="ops", listener=PrintListener())
"""

from collections.abc import Callable
from typing import Protocol, runtime_checkable

from sshnode.models import SessionDescriptor, SessionState

PhaseCallback = Callable[[SessionState], None]


@runtime_checkable
class PropertyLookup(Protocol):
    """Read-only key/value configuration tier."""

    def has_property(self, key: str) -> bool:
        """Check whether the key is declared in this tier."""
        ...

    def get_property(self, key: str) -> str | None:
        """Get the value for key, or None when it is not declared."""
        ...


@runtime_checkable
class ExecutionListener(Protocol):
    """Log sink for one invocation.

    Receives remote output lines while the command runs, and the
    classified failure message if the invocation fails.
    """

    def log(self, level: int, message: str) -> None:
        """Record a message at the given listener level (0 = error)."""
        ...


@runtime_checkable
class Transport(Protocol):
    """Runs a prepared session on the remote host.

    Implementations must close the connection before returning or raising,
    and must raise only ``TransportFailure`` subclasses for failures the
    invoker is expected to classify.

    Example implementation:
        class LocalTransport:
            async def run(self, session, on_phase) -> int:
                on_phase(SessionState.RUNNING)
                return 0
    """

    async def run(
        self,
        session: SessionDescriptor,
        on_phase: PhaseCallback,
    ) -> int | None:
        """Execute the session command.

        Args:
            session: Fully resolved session parameters
            on_phase: Called as the session moves through its states

        Returns:
            Remote exit status, or None if the remote did not report one

        Raises:
            TransportFailure: On connect, auth or execution failure
        """
        ...
