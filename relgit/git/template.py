"""``${name}`` template formatting for commands, messages and tag names."""

from __future__ import annotations

from collections.abc import Mapping
from string import Template


def format_template(template: str, variables: Mapping[str, str] | None = None) -> str:
    """Substitute ``${name}`` placeholders, leaving unknown ones untouched.

    Unknown placeholders survive so that shell syntax like ``$HOME`` in a
    custom changelog command is passed through to the shell.
    """
    if not template:
        return template
    return Template(template).safe_substitute(variables or {})
