"""SSH config file parser.

Reads ~/.ssh/config and turns host definitions into target nodes, with
allowlist/blocklist filtering.
"""

import logging
import os
import re
from pathlib import Path

from sshnode.constants import NODE_ATTR_SSH_KEYPATH
from sshnode.models import NodeEntry

logger = logging.getLogger(__name__)


class SSHConfigParser:
    """Parser for SSH config files.

    Each ``Host`` block with a ``HostName`` becomes a NodeEntry. A non-default
    ``Port`` is folded into the hostname as ``host:port`` and
    ``IdentityFile`` becomes the node's ``ssh-keypath`` attribute.
    """

    def __init__(
        self,
        config_path: Path | str | None = None,
        allowlist: list[str] | None = None,
        blocklist: list[str] | None = None,
    ):
        """Initialize SSH config parser.

        Args:
            config_path: Path to SSH config file (default: ~/.ssh/config)
            allowlist: Only include these hosts (if set)
            blocklist: Exclude these hosts
        """
        if config_path is None:
            config_path = Path.home() / ".ssh" / "config"

        self.config_path = Path(config_path).expanduser()
        self.allowlist = set(allowlist) if allowlist else None
        self.blocklist = set(blocklist) if blocklist else set()

    def parse(self) -> dict[str, NodeEntry]:
        """Parse SSH config and return node definitions.

        Returns:
            Dictionary mapping host alias to NodeEntry objects
        """
        if not self.config_path.exists():
            logger.warning("SSH config not found: %s", self.config_path)
            return {}

        try:
            content = self.config_path.read_text()
            logger.debug("Reading SSH config from %s", self.config_path)
        except OSError as e:
            logger.warning("Cannot read SSH config %s: %s", self.config_path, e)
            return {}

        nodes: dict[str, NodeEntry] = {}
        current_host: str | None = None
        current_data: dict[str, str] = {}
        global_defaults: dict[str, str] = {}

        for line in content.splitlines():
            line = line.strip()
            if not line or line.startswith("#"):
                continue

            host_match = re.match(r"^Host\s+(\S+)", line, re.IGNORECASE)
            if host_match:
                self._add_node(nodes, current_host, current_data)
                current_host = host_match.group(1)
                # Wildcard blocks only contribute defaults
                if "*" in current_host or "?" in current_host:
                    current_host = "*"
                current_data = global_defaults.copy() if current_host != "*" else {}
                continue

            kv_match = re.match(r"^(\w+)\s+(.+)$", line)
            if kv_match and current_host:
                key = kv_match.group(1).lower()
                value = kv_match.group(2).strip()
                if key == "identityfile":
                    value = os.path.expanduser(value)
                current_data[key] = value
                if current_host == "*":
                    global_defaults[key] = value

        self._add_node(nodes, current_host, current_data)

        logger.info("Parsed %d nodes from %s", len(nodes), self.config_path)
        return nodes

    def _add_node(
        self,
        nodes: dict[str, NodeEntry],
        name: str | None,
        data: dict[str, str],
    ) -> None:
        """Add a finished Host block to nodes if it is complete and allowed."""
        if not name or name == "*" or not data.get("hostname"):
            return
        if not self._is_host_allowed(name):
            return

        hostname = data["hostname"]
        port = data.get("port", "22")
        if port != "22":
            try:
                hostname = f"{hostname}:{int(port)}"
            except ValueError:
                logger.warning("Ignoring invalid port %r for host %s", port, name)

        attributes = {}
        if data.get("identityfile"):
            attributes[NODE_ATTR_SSH_KEYPATH] = data["identityfile"]

        nodes[name] = NodeEntry(
            nodename=name,
            hostname=hostname,
            username=data.get("user"),
            attributes=attributes,
        )

    def _is_host_allowed(self, name: str) -> bool:
        """Check if host passes allowlist/blocklist filters.

        Args:
            name: Host name to check

        Returns:
            True if host is allowed
        """
        # Allowlist takes precedence
        if self.allowlist:
            return name in self.allowlist

        if self.blocklist:
            return name not in self.blocklist

        return True
