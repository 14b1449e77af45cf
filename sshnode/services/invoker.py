"""Remote command invocation and failure classification.

A session moves through ``BUILT -> CONNECTING -> AUTHENTICATING -> RUNNING``
and ends in ``COMPLETED`` or ``FAILED``. Failures never propagate to the
caller: they are classified, logged once to the session's listener at
``LogLevel.ERROR`` and returned as a non-success ExecutionResult.
"""

import logging
from enum import Enum
from typing import TYPE_CHECKING

from sshnode.constants import (
    FWK_PROP_AUTH_CANCEL_MSG,
    FWK_PROP_AUTH_CANCEL_MSG_DEFAULT,
    PROVIDER_NAME,
)
from sshnode.models import ExecutionResult, LogLevel, SessionDescriptor, SessionState
from sshnode.models.result import NO_EXIT_STATUS
from sshnode.services.transport import (
    AuthRejected,
    ConnectTimeout,
    ExecutionTimeout,
    TransportFailure,
)
from sshnode.utils.messages import format_message

if TYPE_CHECKING:
    from sshnode.protocols import PropertyLookup, Transport

logger = logging.getLogger(__name__)


class FailureKind(Enum):
    """User-facing failure categories."""

    EXECUTION_TIMEOUT = "execution_timeout"
    CONNECTION_TIMEOUT = "connection_timeout"
    AUTH_CANCELLED = "auth_cancelled"
    UNCLASSIFIED = "unclassified"


def classify_failure(failure: BaseException) -> FailureKind:
    """Classify a transport failure. Checks run in priority order."""
    if isinstance(failure, ExecutionTimeout):
        return FailureKind.EXECUTION_TIMEOUT
    if isinstance(failure, ConnectTimeout):
        return FailureKind.CONNECTION_TIMEOUT
    if isinstance(failure, AuthRejected):
        return FailureKind.AUTH_CANCELLED
    return FailureKind.UNCLASSIFIED


def failure_message(
    failure: BaseException,
    node_name: str,
    timeout_ms: int,
    lookup: "PropertyLookup",
) -> str:
    """Build the user-facing message for a failed invocation.

    Args:
        failure: Exception surfaced by the transport
        node_name: Node the command was run on
        timeout_ms: Configured timeout, for timeout messages
        lookup: Framework properties, for the auth failure template

    Returns:
        Message text
    """
    raw = failure.raw_message if isinstance(failure, TransportFailure) else str(failure)
    kind = classify_failure(failure)

    if kind is FailureKind.EXECUTION_TIMEOUT:
        return (
            f"Failed execution for node: {node_name}: Execution Timeout period "
            f"exceeded (after {timeout_ms}ms), connection dropped"
        )
    if kind is FailureKind.CONNECTION_TIMEOUT:
        return (
            f"Failed execution for node: {node_name}: Connection Timeout "
            f"(after {timeout_ms}ms): {raw}"
        )
    if kind is FailureKind.AUTH_CANCELLED:
        template = FWK_PROP_AUTH_CANCEL_MSG_DEFAULT
        if lookup.has_property(FWK_PROP_AUTH_CANCEL_MSG):
            template = lookup.get_property(FWK_PROP_AUTH_CANCEL_MSG) or template
        return format_message(template, node_name, raw)
    return raw


class Invocation:
    """Tracks the state of one session run."""

    def __init__(self, session: SessionDescriptor) -> None:
        self.session = session
        self.state = SessionState.BUILT

    def transition(self, state: SessionState) -> None:
        logger.debug(
            "Session %s: %s -> %s",
            self.session.node_name,
            self.state.value,
            state.value,
        )
        self.state = state


class CommandInvoker:
    """Executes sessions and turns every outcome into an ExecutionResult."""

    def __init__(
        self,
        transport: "Transport",
        lookup: "PropertyLookup",
        provider: str = PROVIDER_NAME,
    ) -> None:
        """Initialize invoker.

        Args:
            transport: Runs sessions on remote hosts
            lookup: Framework properties (auth failure message template)
            provider: Provider name shown in result text
        """
        self.transport = transport
        self.lookup = lookup
        self.provider = provider

    async def execute(self, session: SessionDescriptor) -> ExecutionResult:
        """Run the session and report its outcome.

        Args:
            session: Session built by ``build_session``

        Returns:
            ExecutionResult; success only if the session completed
        """
        invocation = Invocation(session)
        try:
            exit_status = await self.transport.run(session, invocation.transition)
        except Exception as e:
            invocation.transition(SessionState.FAILED)
            message = failure_message(
                e, session.node_name, session.timeout_ms, self.lookup
            )
            logger.debug(
                "Execution failed on %s (%s): %s",
                session.node_name,
                classify_failure(e).value,
                message,
            )
            session.listener.log(LogLevel.ERROR, message)
            return ExecutionResult(
                result_code=NO_EXIT_STATUS,
                success=False,
                message=message,
                provider=self.provider,
            )

        invocation.transition(SessionState.COMPLETED)
        result_code = NO_EXIT_STATUS if exit_status is None else exit_status
        logger.debug(
            "Execution completed on %s, resultcode: %d", session.node_name, result_code
        )
        return ExecutionResult(
            result_code=result_code,
            success=True,
            provider=self.provider,
        )
