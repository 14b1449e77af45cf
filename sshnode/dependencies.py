"""Dependency wiring for sshnode.

Builds the framework configuration, node inventory and executor from
Settings so callers do not assemble them by hand.
"""

from dataclasses import dataclass

from sshnode.config import Framework, HostKeyVerifier, Settings, SSHConfigParser
from sshnode.executor import SSHNodeExecutor
from sshnode.services.transport import AsyncSSHTransport


@dataclass
class Dependencies:
    """Container for sshnode dependencies.

    Example:
        deps = Dependencies.create()
        result = await deps.executor.execute_command(context, ["uptime"], node)
    """

    settings: Settings
    framework: Framework
    inventory: SSHConfigParser
    executor: SSHNodeExecutor

    @classmethod
    def create(cls) -> "Dependencies":
        """Create dependencies from environment settings.

        Raises:
            FileNotFoundError: If strict host key checking is on and the
                known_hosts file is missing
        """
        return cls.from_settings(Settings.from_env())

    @classmethod
    def from_settings(cls, settings: Settings) -> "Dependencies":
        """Create dependencies with custom settings."""
        framework = Framework.from_dir(settings.framework_dir)
        host_keys = HostKeyVerifier(
            known_hosts_path=settings.known_hosts,
            strict_checking=settings.strict_host_key_checking,
        )
        transport = AsyncSSHTransport(known_hosts=host_keys.get_known_hosts_path())
        return cls(
            settings=settings,
            framework=framework,
            inventory=SSHConfigParser(config_path=settings.ssh_config),
            executor=SSHNodeExecutor(framework, transport=transport),
        )
