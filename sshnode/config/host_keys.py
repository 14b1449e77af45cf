"""SSH host key verification policy.

Decides which known_hosts file the transport verifies servers against.
"""

import logging
from pathlib import Path

logger = logging.getLogger(__name__)

DISABLED = "none"


class HostKeyVerifier:
    """Resolves the known_hosts file handed to the transport.

    ``None`` as the resolved path means verification is disabled.
    """

    def __init__(
        self,
        known_hosts_path: str | None = None,
        strict_checking: bool = True,
    ):
        """Initialize host key verifier.

        Args:
            known_hosts_path: Path to known_hosts file, or 'none' to disable
            strict_checking: Fail when the known_hosts file is missing

        Raises:
            FileNotFoundError: If strict mode and file missing
        """
        self.strict_checking = strict_checking
        self._known_hosts = self._resolve(known_hosts_path)

    def _resolve(self, configured: str | None) -> str | None:
        if configured and configured.lower() == DISABLED:
            logger.warning(
                "SSH host key verification disabled by SSHNODE_KNOWN_HOSTS=none"
            )
            return None

        if configured:
            path = Path(configured).expanduser()
        else:
            path = Path.home() / ".ssh" / "known_hosts"

        if path.exists():
            return str(path)

        if self.strict_checking:
            raise FileNotFoundError(
                f"known_hosts file not found: {path}. Add host keys with "
                f"'ssh-keyscan <hostname> >> {path}', point SSHNODE_KNOWN_HOSTS "
                f"at another file, or set SSHNODE_STRICT_HOST_KEY_CHECKING=false"
            )

        logger.warning(
            "known_hosts not found at %s, host key verification disabled", path
        )
        return None

    def get_known_hosts_path(self) -> str | None:
        """Get path to known_hosts file, or None if verification is disabled."""
        return self._known_hosts

    def is_enabled(self) -> bool:
        return self._known_hosts is not None
