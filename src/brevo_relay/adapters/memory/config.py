"""Configuration stand-ins that never touch the filesystem.

The in-memory configuration selects the dict-backed store and carries a
dummy API key, so relays built from it validate and dispatch to a spy.
"""

from __future__ import annotations

import tempfile
from pathlib import Path
from typing import Any, Final

from lib_layered_config import Config

from ...domain.enums import OutputFormat

TEST_API_KEY: Final[str] = "test-api-key"


def _in_memory_layers() -> dict[str, Any]:
    return {
        "brevo": {"api_key": TEST_API_KEY},
        "store": {"backend": "memory"},
    }


def get_config_in_memory(*, profile: str | None = None, start_dir: str | None = None) -> Config:
    """Fresh Config with the test key and ``store.backend = "memory"``; arguments are ignored.

    Example:
        >>> get_config_in_memory().get("store.backend")
        'memory'
    """
    return Config(_in_memory_layers(), {})


def get_default_config_path_in_memory() -> Path:
    """Where a defaults file would live; nothing is created there."""
    return Path(tempfile.gettempdir()) / "brevo_relay" / "defaultconfig.toml"


def display_config_in_memory(
    config: Config,
    *,
    output_format: OutputFormat = OutputFormat.HUMAN,
    section: str | None = None,
    profile: str | None = None,
) -> None:
    """Print nothing."""


__all__ = [
    "TEST_API_KEY",
    "display_config_in_memory",
    "get_config_in_memory",
    "get_default_config_path_in_memory",
]
