"""Positional message templates."""

import re

_PLACEHOLDER = re.compile(r"\{(\d+)\}")


def format_message(template: str, *args: object) -> str:
    """Substitute ``{0}``, ``{1}``... placeholders in a template.

    Placeholders without a matching argument, and any other braces, are
    left untouched, so user-supplied templates never fail to format.

    Args:
        template: Message template
        *args: Positional values

    Returns:
        Formatted message
    """

    def replace(match: re.Match[str]) -> str:
        index = int(match.group(1))
        if index < len(args):
            return str(args[index])
        return match.group(0)

    return _PLACEHOLDER.sub(replace, template)
