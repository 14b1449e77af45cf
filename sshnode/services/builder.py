"""Session construction and precondition checks."""

import logging
import re
from collections.abc import Sequence
from typing import TYPE_CHECKING

from sshnode.constants import SSH_TIMEOUT_PROP
from sshnode.models import ExecutionContext, NodeEntry, SessionDescriptor
from sshnode.services.keyfile import KeyfileFinder, resolve_keyfile_path

if TYPE_CHECKING:
    from sshnode.config import Framework

logger = logging.getLogger(__name__)

TIMEOUT_PATTERN = re.compile(r"[-+]?[0-9]+")


class ConfigurationError(Exception):
    """Session cannot be attempted with the given node or command."""


class MissingHostnameError(ConfigurationError):
    """Node has no resolvable hostname."""

    def __init__(self, node_name: str):
        self.node_name = node_name
        super().__init__(f"Hostname must be set to connect to remote node '{node_name}'")


class MissingUsernameError(ConfigurationError):
    """Node has no resolvable username."""

    def __init__(self, node_name: str):
        self.node_name = node_name
        super().__init__(f"Username must be set to connect to remote node '{node_name}'")


def get_ssh_timeout(framework: "Framework") -> int:
    """Get the SSH timeout in milliseconds.

    Values that are not a plain decimal integer are treated as 0 (no
    timeout). Surrounding whitespace and digit separators are rejected.
    """
    if not framework.has_property(SSH_TIMEOUT_PROP):
        return 0

    value = framework.get_property(SSH_TIMEOUT_PROP)
    if value is None or not TIMEOUT_PATTERN.fullmatch(value):
        logger.debug(
            "%s had a non integer value: %r, defaulting to 0 (forever)",
            SSH_TIMEOUT_PROP,
            value,
        )
        return 0
    return int(value)


def validate_node(node: NodeEntry) -> tuple[str, str]:
    """Check the node can be connected to.

    Returns:
        Tuple of (hostname, username)

    Raises:
        MissingHostnameError: If no hostname can be extracted
        MissingUsernameError: If no username can be extracted
    """
    hostname = node.extract_hostname()
    if not node.hostname or not hostname:
        raise MissingHostnameError(node.nodename)

    username = node.extract_username()
    if not username:
        raise MissingUsernameError(node.nodename)

    return hostname, username


def build_session(
    context: ExecutionContext,
    node: NodeEntry,
    command: Sequence[str],
    framework: "Framework",
    keyfile_finder: KeyfileFinder = resolve_keyfile_path,
) -> SessionDescriptor:
    """Assemble a session ready to execute. Performs no network I/O.

    Args:
        context: Invocation context (project, data context, listener)
        node: Target node
        command: Command and arguments
        framework: Framework and project configuration
        keyfile_finder: Private key path resolver

    Returns:
        SessionDescriptor bound to the context's listener

    Raises:
        ConfigurationError: If the node or command is unusable
    """
    hostname, username = validate_node(node)
    if not command:
        raise ConfigurationError(f"No command given for remote node '{node.nodename}'")

    timeout_ms = get_ssh_timeout(framework)
    keyfile = keyfile_finder(node, framework, context.project)

    logger.debug(
        "Built session for %s (%s@%s:%d, keyfile=%s, timeout=%dms)",
        node.nodename,
        username,
        hostname,
        node.extract_port(),
        keyfile,
        timeout_ms,
    )

    return SessionDescriptor(
        node_name=node.nodename,
        hostname=hostname,
        username=username,
        command=tuple(command),
        listener=context.listener,
        port=node.extract_port(),
        keyfile_path=keyfile,
        timeout_ms=timeout_ms,
        environment=dict(context.data_context),
    )
