"""SSH node executor: the entry point orchestrators call."""

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING

from sshnode.constants import PROJ_PROP_SSH_KEYPATH, PROVIDER_NAME
from sshnode.models import ExecutionContext, ExecutionResult, NodeEntry, ProviderDescription
from sshnode.services.builder import build_session
from sshnode.services.invoker import CommandInvoker
from sshnode.services.keyfile import KeyfileFinder, resolve_keyfile_path
from sshnode.services.transport import AsyncSSHTransport

if TYPE_CHECKING:
    from sshnode.config import Framework
    from sshnode.protocols import Transport

logger = logging.getLogger(__name__)

CONFIG_KEYPATH = "keypath"


class SSHNodeExecutor:
    """Executes a command on a remote node via SSH.

    Each call opens its own connection, so calls for different nodes can
    run concurrently, e.g. with ``asyncio.gather``.

    Example:
        >>> executor = SSHNodeExecutor(Framework.from_dir("~/.sshnode"))
        >>> result = await executor.execute_command(context, ["uptime"], node)
        >>> result.success, result.result_code
        (True, 0)
    """

    DESCRIPTION = ProviderDescription(
        name=PROVIDER_NAME,
        title="SSH",
        description="Executes a command on a remote node via SSH.",
        properties=(),
        properties_mapping={CONFIG_KEYPATH: PROJ_PROP_SSH_KEYPATH},
    )

    def __init__(
        self,
        framework: "Framework",
        transport: "Transport | None" = None,
        keyfile_finder: KeyfileFinder = resolve_keyfile_path,
    ) -> None:
        """Initialize executor.

        Args:
            framework: Framework and project configuration
            transport: Session transport (default: AsyncSSHTransport without
                host key verification)
            keyfile_finder: Private key path resolver
        """
        self.framework = framework
        self.transport = transport or AsyncSSHTransport()
        self.keyfile_finder = keyfile_finder
        self.invoker = CommandInvoker(self.transport, framework, provider=PROVIDER_NAME)

    @property
    def description(self) -> ProviderDescription:
        return self.DESCRIPTION

    async def execute_command(
        self,
        context: ExecutionContext,
        command: Sequence[str],
        node: NodeEntry,
    ) -> ExecutionResult:
        """Execute a command on a node.

        Args:
            context: Invocation context (project, data context, listener)
            command: Command and arguments
            node: Target node

        Returns:
            ExecutionResult; transport failures are reported here, not raised

        Raises:
            ConfigurationError: If the node has no hostname or username
        """
        session = build_session(
            context, node, command, self.framework, self.keyfile_finder
        )
        result = await self.invoker.execute(session)
        logger.info("%s: %s", node.nodename, result)
        return result
