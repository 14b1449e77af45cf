"""Utility modules for sshnode."""

from sshnode.utils.listener import LoggingListener
from sshnode.utils.messages import format_message
from sshnode.utils.shell import quote_arg, quote_command

__all__ = [
    "LoggingListener",
    "format_message",
    "quote_arg",
    "quote_command",
]
