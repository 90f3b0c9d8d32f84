"""Application layer - use cases and port definitions.

Contents:
    * :mod:`.ports` - Protocol definitions for adapter implementations
    * :mod:`.content` - One-time retrieval of referenced content
    * :mod:`.relay` - EmailRelay entry operations
"""

from __future__ import annotations

from .content import ContentLookup, content_reference, fetch_once, resolve_content
from .ports import (
    DispatchEnvelope,
    DisplayConfig,
    EphemeralStore,
    GetConfig,
    GetDefaultConfigPath,
    InitLogging,
    LoadBrevoConfigFromDict,
    OpenStore,
)
from .relay import EmailRelay

__all__ = [
    "ContentLookup",
    "DispatchEnvelope",
    "DisplayConfig",
    "EmailRelay",
    "EphemeralStore",
    "GetConfig",
    "GetDefaultConfigPath",
    "InitLogging",
    "LoadBrevoConfigFromDict",
    "OpenStore",
    "content_reference",
    "fetch_once",
    "resolve_content",
]
