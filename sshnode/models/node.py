"""Target node data model."""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

DEFAULT_SSH_PORT = 22


@dataclass(frozen=True)
class NodeEntry:
    """A remote machine a command is executed on.

    The hostname may carry a ``user@`` prefix and a ``:port`` suffix, in
    which case the ``extract_*`` helpers return the normalized parts.
    """

    nodename: str
    hostname: str | None = None
    username: str | None = None
    attributes: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "attributes", MappingProxyType(dict(self.attributes)))

    def extract_hostname(self) -> str | None:
        """Get the bare hostname, without user prefix or port suffix."""
        if not self.hostname:
            return None
        host = self.hostname
        if "@" in host:
            host = host.split("@", 1)[1]
        if ":" in host:
            host = host.split(":", 1)[0]
        return host or None

    def extract_username(self) -> str | None:
        """Get the login user.

        Returns:
            The explicit username, else the ``user@`` prefix of the
            hostname, else None
        """
        if self.username:
            return self.username
        if self.hostname and "@" in self.hostname:
            user = self.hostname.split("@", 1)[0]
            return user or None
        return None

    def extract_port(self) -> int:
        """Get the SSH port from a ``host:port`` hostname, default 22."""
        if not self.hostname or ":" not in self.hostname:
            return DEFAULT_SSH_PORT
        port = self.hostname.rsplit(":", 1)[1]
        try:
            return int(port)
        except ValueError:
            return DEFAULT_SSH_PORT
