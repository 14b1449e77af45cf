"""Configuration for sshnode.

- Properties / Framework: layered read-only property tiers
- SSHConfigParser: builds target nodes from ~/.ssh/config
- HostKeyVerifier: known_hosts policy for the transport
- Settings: environment variable configuration
"""

from sshnode.config.host_keys import HostKeyVerifier
from sshnode.config.parser import SSHConfigParser
from sshnode.config.properties import Framework, Properties
from sshnode.config.settings import Settings

__all__ = ["Framework", "HostKeyVerifier", "Properties", "SSHConfigParser", "Settings"]
