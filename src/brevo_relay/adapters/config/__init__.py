"""Configuration adapter - loading and display.

Provides adapters for configuration management using lib_layered_config.

Contents:
    * :mod:`.loader` - Configuration loading with caching
    * :mod:`.display` - Configuration display with secrets masked
"""

from __future__ import annotations

from .display import display_config, redact_secrets
from .loader import get_config, get_default_config_path

__all__ = [
    "display_config",
    "get_config",
    "get_default_config_path",
    "redact_secrets",
]
