"""Private key path resolution.

The key path is resolved from an ordered list of lookup strategies, most
specific first:

1. node attribute ``ssh-keypath``
2. project property ``project.ssh-keypath``
3. framework property ``framework.ssh-keypath``
4. system default ``framework.ssh.keypath``

The node attribute counts only when non-empty. The other tiers count as
soon as they declare the key, so a declared empty value stops the search
and means no key file. A strategy returns None when its tier is silent.
Absence of all four is a valid outcome; authentication is then left to the
transport.
"""

from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING

from sshnode.constants import (
    FWK_PROP_SSH_KEYPATH,
    NODE_ATTR_SSH_KEYPATH,
    PROJ_PROP_SSH_KEYPATH,
    SSH_KEYPATH_PROP,
)

if TYPE_CHECKING:
    from sshnode.config import Framework
    from sshnode.models import NodeEntry

KeyfileStrategy = Callable[["NodeEntry", "Framework", str], "str | None"]
KeyfileFinder = Callable[["NodeEntry", "Framework", str], "str | None"]


def from_node_attribute(node: "NodeEntry", framework: "Framework", project: str) -> str | None:
    return node.attributes.get(NODE_ATTR_SSH_KEYPATH) or None


def from_project(node: "NodeEntry", framework: "Framework", project: str) -> str | None:
    props = framework.project(project)
    if props.has_property(PROJ_PROP_SSH_KEYPATH):
        return props.get_property(PROJ_PROP_SSH_KEYPATH) or ""
    return None


def from_framework(node: "NodeEntry", framework: "Framework", project: str) -> str | None:
    if framework.has_property(FWK_PROP_SSH_KEYPATH):
        return framework.get_property(FWK_PROP_SSH_KEYPATH) or ""
    return None


def from_system_default(node: "NodeEntry", framework: "Framework", project: str) -> str | None:
    return framework.get_property(SSH_KEYPATH_PROP) or None


KEYFILE_STRATEGIES: tuple[KeyfileStrategy, ...] = (
    from_node_attribute,
    from_project,
    from_framework,
    from_system_default,
)


def resolve_keyfile_path(
    node: "NodeEntry",
    framework: "Framework",
    project: str,
    strategies: Sequence[KeyfileStrategy] = KEYFILE_STRATEGIES,
) -> str | None:
    """Find the private key path to use for a node.

    Args:
        node: Target node
        framework: Framework and project configuration
        project: Project the invocation runs in
        strategies: Lookups to try in order

    Returns:
        Key file path, or None if no tier declares a non-empty one
    """
    for strategy in strategies:
        path = strategy(node, framework, project)
        if path is not None:
            return path or None
    return None
