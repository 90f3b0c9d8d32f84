"""Adapters layer - infrastructure and framework integrations.

Contents:
    * :mod:`.brevo` - Brevo transactional email transport (httpx)
    * :mod:`.store` - Ephemeral content store (redis)
    * :mod:`.config` - Configuration loading and display
    * :mod:`.logging` - Logging setup with lib_log_rich
    * :mod:`.cli` - rich-click CLI
    * :mod:`.memory` - In-memory adapters for tests
"""

from __future__ import annotations

__all__: list[str] = []
