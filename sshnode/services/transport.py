"""asyncssh-backed transport for running one command per connection.

Failures are surfaced as a small tagged hierarchy so callers never need to
inspect asyncssh exception types or message text.
"""

import asyncio
import logging
from functools import partial
from typing import TYPE_CHECKING

import asyncssh

from sshnode.models import LogLevel, SessionState
from sshnode.utils.shell import quote_command

if TYPE_CHECKING:
    from sshnode.models import SessionDescriptor
    from sshnode.protocols import ExecutionListener, PhaseCallback

logger = logging.getLogger(__name__)

# Text some transports use to report that a running command hit its timeout
EXECUTION_TIMEOUT_TEXT = "Timeout period exceeded, connection dropped"


class TransportFailure(Exception):
    """Base for failures surfaced by a transport."""

    def __init__(self, raw_message: str):
        self.raw_message = raw_message
        super().__init__(raw_message)


class ExecutionTimeout(TransportFailure):
    """The command ran past the timeout after the connection was up."""


class ConnectTimeout(TransportFailure):
    """Connecting or authenticating took longer than the timeout."""


class AuthRejected(TransportFailure):
    """The server rejected or cancelled authentication."""


class TransportError(TransportFailure):
    """Any other transport failure."""


def translate_error(exc: BaseException, phase: SessionState) -> TransportFailure:
    """Map an asyncssh/OS exception onto a TransportFailure.

    Args:
        exc: Exception raised while the session was in ``phase``
        phase: Last state reported before the failure

    Returns:
        The matching TransportFailure subclass instance
    """
    if isinstance(exc, TransportFailure):
        return exc

    raw = str(exc) or type(exc).__name__
    if EXECUTION_TIMEOUT_TEXT in raw:
        return ExecutionTimeout(raw)
    if isinstance(exc, (asyncio.TimeoutError, TimeoutError)):
        if phase is SessionState.RUNNING:
            return ExecutionTimeout(raw)
        return ConnectTimeout(raw)
    if isinstance(exc, asyncssh.PermissionDenied):
        return AuthRejected(raw)
    return TransportError(raw)


class _PhaseReportingClient(asyncssh.SSHClient):
    """Reports when the TCP/SSH handshake is done and auth begins."""

    def __init__(self, on_phase: "PhaseCallback"):
        self._on_phase = on_phase

    def connection_made(self, conn: asyncssh.SSHClientConnection) -> None:
        self._on_phase(SessionState.AUTHENTICATING)


async def _forward_lines(
    stream: asyncssh.SSHReader,
    listener: "ExecutionListener",
    level: LogLevel,
) -> None:
    """Forward each line of a remote stream to the listener as it arrives."""
    async for line in stream:
        listener.log(level, line.rstrip("\r\n"))


class AsyncSSHTransport:
    """Runs a session over a fresh asyncssh connection.

    The connection is exclusive to one session and is closed before
    ``run`` returns or raises.
    """

    def __init__(self, known_hosts: str | None = None) -> None:
        """Initialize transport.

        Args:
            known_hosts: Path to known_hosts file, or None to disable verification
        """
        self.known_hosts = known_hosts
        if known_hosts is None:
            logger.warning(
                "SSH host key verification DISABLED - vulnerable to MITM attacks. "
                "Set SSHNODE_KNOWN_HOSTS to a valid known_hosts file path."
            )

    async def run(
        self,
        session: "SessionDescriptor",
        on_phase: "PhaseCallback",
    ) -> int | None:
        """Connect, run the command and stream its output.

        Returns:
            Remote exit status, or None if the remote exited on a signal

        Raises:
            TransportFailure: On connect, auth or execution failure
        """
        phase = SessionState.BUILT

        def report(state: SessionState) -> None:
            nonlocal phase
            phase = state
            on_phase(state)

        timeout = session.timeout_seconds
        report(SessionState.CONNECTING)
        logger.info(
            "Opening SSH connection to %s (%s@%s:%d)",
            session.node_name,
            session.username,
            session.hostname,
            session.port,
        )

        try:
            conn = await asyncio.wait_for(
                asyncssh.connect(
                    session.hostname,
                    port=session.port,
                    username=session.username,
                    known_hosts=self.known_hosts,
                    client_keys=[session.keyfile_path] if session.keyfile_path else None,
                    connect_timeout=timeout,
                    client_factory=partial(_PhaseReportingClient, report),
                ),
                timeout,
            )
        except (asyncssh.Error, OSError, asyncio.TimeoutError) as e:
            raise translate_error(e, phase) from e

        try:
            report(SessionState.RUNNING)
            return await asyncio.wait_for(self._run_command(conn, session), timeout)
        except (asyncssh.Error, OSError, asyncio.TimeoutError) as e:
            raise translate_error(e, phase) from e
        finally:
            conn.close()
            await conn.wait_closed()
            logger.debug("Closed SSH connection to %s", session.node_name)

    async def _run_command(
        self,
        conn: asyncssh.SSHClientConnection,
        session: "SessionDescriptor",
    ) -> int | None:
        process = await conn.create_process(
            quote_command(session.command),
            env=dict(session.environment) or None,
            stdin=asyncssh.DEVNULL,
            errors="replace",
        )
        await asyncio.gather(
            _forward_lines(process.stdout, session.listener, LogLevel.INFO),
            _forward_lines(process.stderr, session.listener, LogLevel.WARN),
        )
        await process.wait_closed()
        exit_status: int | None = process.exit_status
        return exit_status
