"""CLI command implementations.

Collects all subcommand functions and re-exports them for registration
with the root CLI group.

Contents:
    * Info command from :mod:`.info`
    * Config command from :mod:`.config`
    * Send commands from :mod:`.send`
    * Stash command from :mod:`.stash`
"""

from __future__ import annotations

from .config import cli_config
from .info import cli_info
from .send import cli_send_email, cli_send_template
from .stash import cli_stash_content

__all__ = [
    "cli_config",
    "cli_info",
    "cli_send_email",
    "cli_send_template",
    "cli_stash_content",
]
