"""Static package metadata surfaced to the CLI and configuration loader.

Keep these values in sync with ``pyproject.toml``.
"""

from __future__ import annotations

from typing import Final

#: Distribution name.
name: Final[str] = "brevo_relay"
#: One-line summary shown as CLI help.
title: Final[str] = "Validate email-send requests and forward them to the Brevo transactional API"
version: Final[str] = "1.0.0"
#: Console script name.
shell_command: Final[str] = "brevo-relay"

#: lib_layered_config identifiers; they determine the platform config paths.
LAYEREDCONF_VENDOR: Final[str] = "brevo_relay"
LAYEREDCONF_APP: Final[str] = "Brevo Relay"
LAYEREDCONF_SLUG: Final[str] = "brevo-relay"


def print_info() -> None:
    """Print the summarised metadata block.

    Example:
        >>> print_info()  # doctest: +ELLIPSIS
        Info for brevo_relay:
        ...
    """
    fields = [
        ("name", name),
        ("title", title),
        ("version", version),
        ("shell_command", shell_command),
    ]
    pad = max(len(label) for label, _ in fields)
    lines = [f"Info for {name}:", ""]
    lines.extend(f"    {label.ljust(pad)} = {value}" for label, value in fields)
    print("\n".join(lines))


__all__ = [
    "LAYEREDCONF_APP",
    "LAYEREDCONF_SLUG",
    "LAYEREDCONF_VENDOR",
    "name",
    "print_info",
    "shell_command",
    "title",
    "version",
]
