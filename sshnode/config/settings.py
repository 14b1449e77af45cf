"""Application settings from environment variables.

Centralized environment variable parsing and validation.
"""

import logging
import os
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)


@dataclass
class Settings:
    """Application settings from environment.

    Handles parsing, validation, and defaults for all env vars.
    """

    # Logging
    log_level: str = field(default="INFO")
    log_colors: bool = field(default=True)

    # Configuration sources
    framework_dir: str = field(default="~/.sshnode")
    ssh_config: str | None = field(default=None)

    # Host key verification
    known_hosts: str | None = field(default=None)
    strict_host_key_checking: bool = field(default=True)

    # CLI fan-out
    max_parallel: int = field(default=10)

    @classmethod
    def from_env(cls) -> "Settings":
        """Load settings from SSHNODE_* environment variables.

        Returns:
            Settings instance with values from environment
        """
        return cls(
            log_level=os.getenv("SSHNODE_LOG_LEVEL", "INFO").upper(),
            log_colors=cls._get_bool("SSHNODE_LOG_COLORS", True),
            framework_dir=os.getenv("SSHNODE_FRAMEWORK_DIR", "~/.sshnode"),
            ssh_config=os.getenv("SSHNODE_SSH_CONFIG") or None,
            known_hosts=os.getenv("SSHNODE_KNOWN_HOSTS") or None,
            strict_host_key_checking=cls._get_bool(
                "SSHNODE_STRICT_HOST_KEY_CHECKING", True
            ),
            max_parallel=cls._get_int("SSHNODE_MAX_PARALLEL", 10),
        )

    @staticmethod
    def _get_int(key: str, default: int) -> int:
        """Get integer from environment.

        Args:
            key: Environment variable key
            default: Default value if not set or invalid

        Returns:
            Integer value from environment or default
        """
        value = os.getenv(key)
        if value is None:
            return default

        try:
            return int(value)
        except ValueError:
            logger.warning("Invalid int for %s: %s, using default %d", key, value, default)
            return default

    @staticmethod
    def _get_bool(key: str, default: bool) -> bool:
        value = os.getenv(key)
        if value is None:
            return default
        return value.lower() in ("1", "true", "yes", "on")
