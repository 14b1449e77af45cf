"""Configuration keys recognized by sshnode."""

PROVIDER_NAME = "sshnode"

# Node attribute holding an explicit private key path
NODE_ATTR_SSH_KEYPATH = "ssh-keypath"

# Default private key paths, most specific first
PROJ_PROP_SSH_KEYPATH = "project.ssh-keypath"
FWK_PROP_SSH_KEYPATH = "framework.ssh-keypath"
SSH_KEYPATH_PROP = "framework.ssh.keypath"

# Connect/execution timeout in milliseconds, 0 = unbounded
SSH_TIMEOUT_PROP = "framework.ssh.timeout"

FWK_PROP_AUTH_CANCEL_MSG = "framework.messages.error.ssh.authcancel"
FWK_PROP_AUTH_CANCEL_MSG_DEFAULT = (
    'Authentication failure connecting to node: "{0}". '
    "Make sure your resource definitions and credentials are up to date."
)
