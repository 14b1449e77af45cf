"""Shell command safety utilities."""

import shlex
from collections.abc import Sequence


def quote_arg(arg: str) -> str:
    """Safely quote a shell argument.

    Args:
        arg: Argument to quote

    Returns:
        Shell-safe quoted argument
    """
    return shlex.quote(arg)


def quote_command(args: Sequence[str]) -> str:
    """Join command arguments into one shell-safe command line."""
    return " ".join(quote_arg(arg) for arg in args)
