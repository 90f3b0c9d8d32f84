"""In-memory adapter implementations for testing.

They satisfy the application ports without HTTP or Redis.

Contents:
    * :mod:`.config` - In-memory configuration adapters
    * :mod:`.dispatch` - DispatchSpy capturing envelopes
    * :mod:`.store` - Dict-backed ephemeral store
    * :mod:`.logging` - In-memory logging adapter
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .config import (
    display_config_in_memory,
    get_config_in_memory,
    get_default_config_path_in_memory,
)
from .dispatch import DispatchSpy
from .logging import init_logging_in_memory
from .store import InMemoryStore

# Static conformance assertions
if TYPE_CHECKING:
    from brevo_relay.application.ports import (
        DisplayConfig,
        EphemeralStore,
        GetConfig,
        GetDefaultConfigPath,
        InitLogging,
    )

    _assert_get_config: GetConfig = get_config_in_memory
    _assert_get_default_config_path: GetDefaultConfigPath = get_default_config_path_in_memory
    _assert_display_config: DisplayConfig = display_config_in_memory
    _assert_init_logging: InitLogging = init_logging_in_memory
    _assert_store: EphemeralStore = InMemoryStore()

__all__ = [
    "DispatchSpy",
    "InMemoryStore",
    "display_config_in_memory",
    "get_config_in_memory",
    "get_default_config_path_in_memory",
    "init_logging_in_memory",
]
